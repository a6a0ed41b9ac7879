from cineverse.applications.interfaces.dtos.filter_page import FilterPage
from cineverse.applications.interfaces.dtos.movie import MoviePagePublic, MoviePublic
from cineverse.applications.services.pager import Pager
from cineverse.applications.services.search_controller import filter_movies
from cineverse.domain.ports.repositories.movie_repository import MovieRepository
from cineverse.domain.streams import first


class GetMoviesUseCase:
    def __init__(self, movie_repository: MovieRepository, pager: Pager):
        self.movie_repository = movie_repository
        self.pager = pager

    async def execute(self, filter_page: FilterPage) -> MoviePagePublic:
        async def snapshot():
            movies = await first(self.movie_repository.observe_movies())
            return filter_movies(movies, filter_page.query)

        page = await self.pager.load_page(filter_page.page, snapshot)

        return MoviePagePublic(
            page=page.key,
            prev_page=page.prev_key,
            next_page=page.next_key,
            movies=[MoviePublic.from_domain(movie) for movie in page.data],
        )
