from typing import Annotated

from fastapi import APIRouter, Depends

from cineverse.applications.interfaces.dtos.movie import MovieList
from cineverse.applications.use_cases.movie.get_favorites import GetFavoritesUseCase
from cineverse.domain.ports.repositories.movie_repository import MovieRepository
from cineverse.infrastructure.config.dependencies import get_movie_repository

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("/", response_model=MovieList)
async def read_favorites(movie_repository: Annotated[MovieRepository, Depends(get_movie_repository)]):
    use_case = GetFavoritesUseCase(movie_repository)
    return await use_case.execute()
