from typing import Annotated

from fastapi import Depends, Request

from cineverse.applications.services.pager import Pager
from cineverse.domain.ports.repositories.movie_repository import MovieRepository
from cineverse.infrastructure.config.container import CineverseContainer


def get_container(request: Request) -> CineverseContainer:
    return request.app.state.container


def get_movie_repository(container: Annotated[CineverseContainer, Depends(get_container)]) -> MovieRepository:
    return container.movie_repository


def get_pager(container: Annotated[CineverseContainer, Depends(get_container)]) -> Pager:
    return container.pager
