from cineverse.applications.interfaces.dtos.movie import MoviePublic
from cineverse.domain.exceptions import NotFoundError
from cineverse.domain.ports.repositories.movie_repository import MovieRepository
from cineverse.domain.streams import first


class ToggleFavoriteUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: str) -> MoviePublic:
        existing_movie = await first(self.movie_repository.observe_movie(movie_id))
        if not existing_movie:
            raise NotFoundError(f"Movie with id {movie_id} not found")

        await self.movie_repository.toggle_favorite(movie_id)

        # the store's stream is the only source of truth for the new status
        movie = await first(self.movie_repository.observe_movie(movie_id))
        return MoviePublic.from_domain(movie)
