from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from cineverse.applications.interfaces.dtos.filter_page import FilterPage
from cineverse.applications.interfaces.dtos.message import Message
from cineverse.applications.interfaces.dtos.movie import MoviePagePublic, MoviePublic
from cineverse.applications.services.pager import Pager
from cineverse.applications.use_cases.movie.fetch_movies import FetchMoviesUseCase
from cineverse.applications.use_cases.movie.get_movie import GetMovieUseCase
from cineverse.applications.use_cases.movie.get_movies import GetMoviesUseCase
from cineverse.applications.use_cases.movie.toggle_favorite import ToggleFavoriteUseCase
from cineverse.domain.exceptions import FetchError, NotFoundError, PageLoadError
from cineverse.domain.ports.repositories.movie_repository import MovieRepository
from cineverse.infrastructure.config.dependencies import get_movie_repository, get_pager

router = APIRouter(prefix="/movies", tags=["movies"])

MovieRepositoryDep = Annotated[MovieRepository, Depends(get_movie_repository)]
PagerDep = Annotated[Pager, Depends(get_pager)]


@router.get("/", response_model=MoviePagePublic)
async def read_movies(
    filter_movies: Annotated[FilterPage, Query()], movie_repository: MovieRepositoryDep, pager: PagerDep
):
    try:
        use_case = GetMoviesUseCase(movie_repository, pager)
        return await use_case.execute(filter_movies)
    except PageLoadError as e:
        raise HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=str(e))


@router.post("/refresh", response_model=Message)
async def refresh_movies(movie_repository: MovieRepositoryDep):
    try:
        use_case = FetchMoviesUseCase(movie_repository)
        return await use_case.execute()
    except FetchError as e:
        raise HTTPException(status_code=HTTPStatus.BAD_GATEWAY, detail=str(e))


@router.get("/{movie_id}", response_model=MoviePublic)
async def read_movie(movie_id: str, movie_repository: MovieRepositoryDep):
    try:
        use_case = GetMovieUseCase(movie_repository)
        return await use_case.execute(movie_id)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))


@router.post("/{movie_id}/favorite", response_model=MoviePublic)
async def toggle_favorite(movie_id: str, movie_repository: MovieRepositoryDep):
    try:
        use_case = ToggleFavoriteUseCase(movie_repository)
        return await use_case.execute(movie_id)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))
