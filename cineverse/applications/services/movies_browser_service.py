from typing import AsyncIterator, List

from cineverse.applications.services.pager import Pager, PagingSession
from cineverse.applications.services.search_controller import SearchController
from cineverse.domain.models.movie import Movie
from cineverse.domain.ports.repositories.movie_repository import MovieRepository
from cineverse.domain.ports.services.logger import LoggerPort


class MoviesBrowserService:
    """Everything a browsing screen consumes: filtered movies, favorites and pages"""

    def __init__(
        self,
        movie_repository: MovieRepository,
        search_controller: SearchController,
        pager: Pager,
        logger: LoggerPort,
    ):
        self.movie_repository = movie_repository
        self.search_controller = search_controller
        self.pager = pager
        self.logger = logger

    @property
    def query(self) -> str:
        return self.search_controller.query

    def on_search_query_changed(self, query: str) -> None:
        self.search_controller.set_query(query)

    def movies(self) -> AsyncIterator[List[Movie]]:
        return self.search_controller.observe_filtered_movies(self.movie_repository.observe_movies())

    def favorites(self) -> AsyncIterator[List[Movie]]:
        return self.movie_repository.observe_favorites()

    def paged_movies(self) -> PagingSession:
        return self.pager.session(self.movies())

    async def refresh(self) -> None:
        await self.movie_repository.fetch_movies()

    async def toggle_favorite(self, movie_id: str) -> None:
        self.logger.info(f"Toggling favorite for movie: {movie_id}")
        await self.movie_repository.toggle_favorite(movie_id)
