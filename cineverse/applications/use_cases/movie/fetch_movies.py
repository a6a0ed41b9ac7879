from cineverse.applications.interfaces.dtos.message import Message
from cineverse.domain.ports.repositories.movie_repository import MovieRepository


class FetchMoviesUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self) -> Message:
        await self.movie_repository.fetch_movies()
        return Message(message="Movie catalog refreshed")
