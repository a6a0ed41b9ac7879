from abc import ABC, abstractmethod
from typing import AsyncIterator, FrozenSet


class FavoritesStore(ABC):
    @abstractmethod
    def id_stream(self) -> AsyncIterator[FrozenSet[str]]:
        """Live stream of the current set of favorite movie ids"""
        pass

    @abstractmethod
    async def toggle(self, movie_id: str) -> None:
        pass
