from typing import AbstractSet, AsyncIterator, Dict, Iterable, List, Optional, Tuple

from cineverse.domain.exceptions import FetchError
from cineverse.domain.models.movie import CatalogMovie, Movie
from cineverse.domain.ports.repositories.favorites_store import FavoritesStore
from cineverse.domain.ports.repositories.movie_repository import MovieRepository
from cineverse.domain.ports.services.catalog_source import CatalogSource
from cineverse.domain.ports.services.logger import LoggerPort
from cineverse.domain.streams import StateStream, combine_latest, distinct_until_changed, map_stream
from cineverse.infrastructure.config.settings import DuplicatePolicy


def deduplicate(records: Iterable[CatalogMovie], policy: DuplicatePolicy) -> Tuple[CatalogMovie, ...]:
    """Keep one record per id, in order of first appearance.

    LAST_SEEN replaces the record but keeps the position where the id first
    appeared; FIRST_SEEN ignores later records for an id.
    """
    by_id: Dict[str, CatalogMovie] = {}
    for record in records:
        if policy is DuplicatePolicy.FIRST_SEEN:
            by_id.setdefault(record.id, record)
        else:
            by_id[record.id] = record
    return tuple(by_id.values())


def merge(catalog: Tuple[CatalogMovie, ...], favorite_ids: AbstractSet[str]) -> List[Movie]:
    return [record.annotate(favorite_ids) for record in catalog]


class ReactiveMovieRepository(MovieRepository):
    """Merges the cached catalog with the live favorites set.

    The catalog cache is replaced only by a successful ``fetch_movies``;
    favorite state is only ever written through the favorites store.
    """

    def __init__(
        self,
        catalog_source: CatalogSource,
        favorites_store: FavoritesStore,
        logger: LoggerPort,
        duplicate_policy: DuplicatePolicy = DuplicatePolicy.LAST_SEEN,
    ):
        self._catalog_source = catalog_source
        self._favorites_store = favorites_store
        self.logger = logger
        self.duplicate_policy = duplicate_policy
        self._cache: StateStream[Tuple[CatalogMovie, ...]] = StateStream(())

    async def fetch_movies(self) -> None:
        self.logger.info("Fetching movie catalog")
        try:
            records = await self._catalog_source.fetch_all()
        except FetchError:
            self.logger.exception("Catalog fetch failed, keeping %d cached movies", len(self._cache.value))
            raise
        except Exception as e:
            self.logger.exception("Catalog fetch failed, keeping %d cached movies", len(self._cache.value))
            raise FetchError(f"Could not fetch movie catalog: {e}") from e

        catalog = deduplicate(records, self.duplicate_policy)
        if len(catalog) != len(records):
            self.logger.warning(
                "Catalog contained %d duplicate ids, resolved with %s",
                len(records) - len(catalog),
                self.duplicate_policy.value,
            )
        self._cache.value = catalog
        self.logger.info("Cached %d movies", len(catalog))

    def observe_movies(self) -> AsyncIterator[List[Movie]]:
        return combine_latest(self._cache.subscribe(), self._favorites_store.id_stream(), merge)

    def observe_favorites(self) -> AsyncIterator[List[Movie]]:
        return map_stream(self.observe_movies(), lambda movies: [movie for movie in movies if movie.is_favorite])

    def observe_movie(self, movie_id: str) -> AsyncIterator[Optional[Movie]]:
        def find(movies: List[Movie]) -> Optional[Movie]:
            return next((movie for movie in movies if movie.id == movie_id), None)

        return distinct_until_changed(map_stream(self.observe_movies(), find))

    async def toggle_favorite(self, movie_id: str) -> None:
        self.logger.debug("Toggling favorite %s", movie_id)
        await self._favorites_store.toggle(movie_id)
