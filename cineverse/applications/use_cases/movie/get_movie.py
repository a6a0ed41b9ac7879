from cineverse.applications.interfaces.dtos.movie import MoviePublic
from cineverse.domain.exceptions import NotFoundError
from cineverse.domain.ports.repositories.movie_repository import MovieRepository
from cineverse.domain.streams import first


class GetMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: str) -> MoviePublic:
        movie = await first(self.movie_repository.observe_movie(movie_id))
        if not movie:
            raise NotFoundError(f"Movie with id {movie_id} not found")

        return MoviePublic.from_domain(movie)
