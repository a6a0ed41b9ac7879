from typing import Optional

import httpx
from sqlalchemy.ext.asyncio import AsyncEngine

from cineverse.applications.services.movies_browser_service import MoviesBrowserService
from cineverse.applications.services.pager import Pager
from cineverse.applications.services.search_controller import SearchController
from cineverse.domain.exceptions import ConfigurationError
from cineverse.domain.models.page import PagingConfig
from cineverse.domain.ports.repositories.favorites_store import FavoritesStore
from cineverse.domain.ports.repositories.movie_repository import MovieRepository
from cineverse.domain.ports.services.catalog_source import CatalogSource
from cineverse.domain.ports.services.logger import LoggerPort
from cineverse.infrastructure.adapters.catalog.http_catalog_source import HttpCatalogSource
from cineverse.infrastructure.adapters.catalog.json_file_catalog_source import JsonFileCatalogSource
from cineverse.infrastructure.adapters.favorites.sqlalchemy_favorites_store import SQLAlchemyFavoritesStore
from cineverse.infrastructure.adapters.repositories.reactive_movie_repository import ReactiveMovieRepository
from cineverse.infrastructure.config.settings import BrowsingSettings, Settings
from cineverse.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from cineverse.infrastructure.persistence.database import create_engine, create_session_factory, create_tables


class CineverseContainer:
    """Explicitly owned object graph for one application session"""

    def __init__(
        self,
        movie_repository: MovieRepository,
        browsing_settings: BrowsingSettings,
        logger: LoggerPort,
        engine: Optional[AsyncEngine] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.movie_repository = movie_repository
        self.browsing_settings = browsing_settings
        self.logger = logger
        self.pager = Pager(
            PagingConfig(
                page_size=browsing_settings.page_size,
                prefetch_distance=browsing_settings.prefetch_distance,
            ),
            logger=logger,
        )
        self._engine = engine
        self._http_client = http_client

    def browser(self) -> MoviesBrowserService:
        """A browsing session with its own search query"""
        return MoviesBrowserService(
            movie_repository=self.movie_repository,
            search_controller=SearchController(self.browsing_settings.search_debounce_seconds, logger=self.logger),
            pager=self.pager,
            logger=self.logger,
        )

    @classmethod
    async def create(cls, settings: Settings, browsing_settings: BrowsingSettings) -> "CineverseContainer":
        logger = StdLoggerAdapter("cineverse")

        engine = create_engine(settings.FAVORITES_DATABASE_URL)
        await create_tables(engine)
        favorites_store: FavoritesStore = SQLAlchemyFavoritesStore(create_session_factory(engine), logger)

        http_client = None
        catalog_source: CatalogSource
        if settings.CATALOG_URL:
            http_client = httpx.AsyncClient(timeout=settings.CATALOG_TIMEOUT_SECONDS)
            catalog_source = HttpCatalogSource(http_client, settings.CATALOG_URL, logger)
        elif settings.CATALOG_PATH:
            catalog_source = JsonFileCatalogSource(settings.CATALOG_PATH)
        else:
            await engine.dispose()
            raise ConfigurationError("Either CATALOG_URL or CATALOG_PATH must be set")

        repository = ReactiveMovieRepository(
            catalog_source=catalog_source,
            favorites_store=favorites_store,
            logger=logger,
            duplicate_policy=settings.DUPLICATE_POLICY,
        )
        return cls(repository, browsing_settings, logger, engine=engine, http_client=http_client)

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
        if self._engine is not None:
            await self._engine.dispose()
