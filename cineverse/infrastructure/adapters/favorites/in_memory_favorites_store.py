from typing import AsyncIterator, FrozenSet, Iterable

from cineverse.domain.ports.repositories.favorites_store import FavoritesStore
from cineverse.domain.streams import StateStream


class InMemoryFavoritesStore(FavoritesStore):
    def __init__(self, initial: Iterable[str] = ()):
        self._ids: StateStream[FrozenSet[str]] = StateStream(frozenset(initial))

    @property
    def ids(self) -> FrozenSet[str]:
        return self._ids.value

    def id_stream(self) -> AsyncIterator[FrozenSet[str]]:
        return self._ids.subscribe()

    async def toggle(self, movie_id: str) -> None:
        current = self._ids.value
        self._ids.value = current - {movie_id} if movie_id in current else current | {movie_id}
