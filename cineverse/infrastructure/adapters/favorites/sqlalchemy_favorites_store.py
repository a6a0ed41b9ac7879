import asyncio
from contextlib import aclosing
from typing import AsyncIterator, FrozenSet, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cineverse.domain.ports.repositories.favorites_store import FavoritesStore
from cineverse.domain.ports.services.logger import LoggerPort
from cineverse.domain.streams import StateStream
from cineverse.infrastructure.persistence.models import FavoriteMovie


class SQLAlchemyFavoritesStore(FavoritesStore):
    """Favorite ids persisted in the ``favorite_movies`` table.

    The table is read once on first subscription; afterwards the in-memory
    set is updated after every committed toggle, so the stream only ever shows
    persisted state.
    """

    def __init__(self, session_factory: async_sessionmaker, logger: LoggerPort):
        self.session_factory = session_factory
        self.logger = logger
        self._ids: Optional[StateStream[FrozenSet[str]]] = None
        self._lock = asyncio.Lock()

    async def _load(self) -> StateStream[FrozenSet[str]]:
        async with self._lock:
            if self._ids is None:
                async with self.session_factory() as session:
                    result = await session.execute(select(FavoriteMovie.movie_id))
                    ids = frozenset(result.scalars().all())
                self.logger.info("Loaded %d favorite ids", len(ids))
                self._ids = StateStream(ids)
            return self._ids

    async def id_stream(self) -> AsyncIterator[FrozenSet[str]]:
        ids = await self._load()
        async with aclosing(ids.subscribe()) as values:
            async for value in values:
                yield value

    async def toggle(self, movie_id: str) -> None:
        ids = await self._load()
        async with self._lock:
            async with self.session_factory() as session:
                added = await self._toggle_row(session, movie_id)
                await session.commit()
                current = ids.value
                ids.value = current | {movie_id} if added else current - {movie_id}
        self.logger.debug("Favorite %s %s", movie_id, "added" if added else "removed")

    @staticmethod
    async def _toggle_row(session: AsyncSession, movie_id: str) -> bool:
        favorite = await session.get(FavoriteMovie, movie_id)
        if favorite is not None:
            await session.delete(favorite)
            return False
        session.add(FavoriteMovie(movie_id=movie_id))
        return True
