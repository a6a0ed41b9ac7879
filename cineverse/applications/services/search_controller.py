from typing import AsyncIterable, AsyncIterator, List, Optional, Sequence

from cineverse.domain.models.movie import Movie
from cineverse.domain.ports.services.logger import LoggerPort
from cineverse.domain.streams import StateStream, combine_latest, debounce, distinct_until_changed

DEFAULT_DEBOUNCE_SECONDS = 0.3


def filter_movies(movies: Sequence[Movie], query: str) -> List[Movie]:
    """Case-insensitive title match; a blank query keeps every movie in order"""
    if not query.strip():
        return list(movies)
    needle = query.casefold()
    return [movie for movie in movies if needle in movie.title.casefold()]


class SearchController:
    """Owns the search query and derives filtered views from it.

    ``set_query`` is visible immediately through ``query``; filtering only
    follows the query once it has been quiet for the debounce window. The
    query current at subscription time is treated as already settled.
    """

    def __init__(self, debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS, logger: Optional[LoggerPort] = None):
        self.debounce_seconds = debounce_seconds
        self.logger = logger
        self._query: StateStream[str] = StateStream("")

    @property
    def query(self) -> str:
        return self._query.value

    def set_query(self, text: str) -> None:
        self._query.value = text

    def observe_query(self) -> AsyncIterator[str]:
        return self._query.subscribe()

    def observe_filtered_movies(self, source: AsyncIterable[List[Movie]]) -> AsyncIterator[List[Movie]]:
        settled = distinct_until_changed(debounce(self._query.subscribe(), self.debounce_seconds, leading=True))
        return combine_latest(settled, source, self._apply)

    def _apply(self, query: str, movies: List[Movie]) -> List[Movie]:
        filtered = filter_movies(movies, query)
        if self.logger is not None:
            self.logger.debug("Query %r matched %d of %d movies", query, len(filtered), len(movies))
        return filtered
