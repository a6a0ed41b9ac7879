from unittest.mock import AsyncMock, Mock

import pytest

from cineverse.domain.ports.services.catalog_source import CatalogSource
from cineverse.domain.ports.services.logger import LoggerPort
from cineverse.infrastructure.adapters.favorites.in_memory_favorites_store import InMemoryFavoritesStore
from cineverse.infrastructure.adapters.repositories.reactive_movie_repository import ReactiveMovieRepository

from .factories import movie_factory


@pytest.fixture
def mock_logger():
    return Mock(spec=LoggerPort)


@pytest.fixture
def sample_catalog():
    """The three movies used throughout the browsing tests"""
    return [
        movie_factory.create_catalog_movie(id="1", title="The Matrix"),
        movie_factory.create_catalog_movie(
            id="2",
            title="Inception",
            rating=8.8,
            release_date="2010-07-16",
            director="Christopher Nolan",
            cast=("Leonardo DiCaprio", "Ellen Page"),
            genres=("Sci-Fi", "Thriller"),
        ),
        movie_factory.create_catalog_movie(
            id="3",
            title="Interstellar",
            rating=8.6,
            release_date="2014-11-07",
            director="Christopher Nolan",
            cast=("Matthew McConaughey", "Anne Hathaway"),
            genres=("Sci-Fi", "Drama"),
        ),
    ]


@pytest.fixture
def mock_catalog_source(sample_catalog):
    source = AsyncMock(spec=CatalogSource)
    source.fetch_all.return_value = sample_catalog
    return source


@pytest.fixture
def favorites_store():
    return InMemoryFavoritesStore()


@pytest.fixture
def movie_repository(mock_catalog_source, favorites_store, mock_logger):
    return ReactiveMovieRepository(
        catalog_source=mock_catalog_source,
        favorites_store=favorites_store,
        logger=mock_logger,
    )
