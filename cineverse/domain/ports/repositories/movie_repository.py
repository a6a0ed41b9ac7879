from abc import ABC, abstractmethod
from typing import AsyncIterator, List, Optional

from cineverse.domain.models.movie import Movie


class MovieRepository(ABC):
    @abstractmethod
    async def fetch_movies(self) -> None:
        pass

    @abstractmethod
    def observe_movies(self) -> AsyncIterator[List[Movie]]:
        pass

    @abstractmethod
    def observe_favorites(self) -> AsyncIterator[List[Movie]]:
        pass

    @abstractmethod
    def observe_movie(self, movie_id: str) -> AsyncIterator[Optional[Movie]]:
        pass

    @abstractmethod
    async def toggle_favorite(self, movie_id: str) -> None:
        pass
