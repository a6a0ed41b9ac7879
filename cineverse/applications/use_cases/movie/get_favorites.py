from cineverse.applications.interfaces.dtos.movie import MovieList, MoviePublic
from cineverse.domain.ports.repositories.movie_repository import MovieRepository
from cineverse.domain.streams import first


class GetFavoritesUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self) -> MovieList:
        favorites = await first(self.movie_repository.observe_favorites())
        return MovieList(movies=[MoviePublic.from_domain(movie) for movie in favorites])
