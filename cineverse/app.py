from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI

from cineverse.applications.interfaces.dtos.message import Message
from cineverse.domain.exceptions import FetchError
from cineverse.infrastructure.config.container import CineverseContainer
from cineverse.infrastructure.config.settings import BrowsingSettings, Settings
from cineverse.infrastructure.logging.logger import setup_logging
from cineverse.presentation.routers import favorites, movies

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = await CineverseContainer.create(Settings(), BrowsingSettings())
    app.state.container = container
    try:
        await container.movie_repository.fetch_movies()
    except FetchError:
        container.logger.warning("Starting with an empty catalog, POST /movies/refresh to retry")
    try:
        yield
    finally:
        await container.aclose()


app = FastAPI(lifespan=lifespan)

app.include_router(movies.router)
app.include_router(favorites.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "CineVerse"}
