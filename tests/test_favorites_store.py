import asyncio
from contextlib import aclosing, asynccontextmanager

import pytest
import pytest_asyncio

from cineverse.domain.streams import first
from cineverse.infrastructure.adapters.favorites.in_memory_favorites_store import InMemoryFavoritesStore
from cineverse.infrastructure.adapters.favorites.sqlalchemy_favorites_store import SQLAlchemyFavoritesStore
from cineverse.infrastructure.persistence.database import create_engine, create_session_factory, create_tables


class TestInMemoryFavoritesStore:
    @pytest.mark.asyncio
    async def test_toggle_adds_then_removes(self):
        store = InMemoryFavoritesStore()

        await store.toggle("1")
        assert await first(store.id_stream()) == frozenset({"1"})

        await store.toggle("1")
        assert await first(store.id_stream()) == frozenset()

    @pytest.mark.asyncio
    async def test_stream_follows_toggles(self):
        store = InMemoryFavoritesStore({"2"})

        async with aclosing(store.id_stream()) as ids:
            assert await anext(ids) == frozenset({"2"})
            await store.toggle("3")
            assert await anext(ids) == frozenset({"2", "3"})


class TestSQLAlchemyFavoritesStore:
    @pytest_asyncio.fixture
    async def session_factory(self, tmp_path):
        pytest.importorskip("aiosqlite")
        engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'favorites.db'}")
        await create_tables(engine)
        yield create_session_factory(engine)
        await engine.dispose()

    @pytest.mark.asyncio
    async def test_starts_empty(self, session_factory, mock_logger):
        store = SQLAlchemyFavoritesStore(session_factory, mock_logger)

        assert await first(store.id_stream()) == frozenset()

    @pytest.mark.asyncio
    async def test_toggle_is_persisted(self, session_factory, mock_logger):
        store = SQLAlchemyFavoritesStore(session_factory, mock_logger)
        await store.toggle("1")
        await store.toggle("2")
        await store.toggle("1")

        reopened = SQLAlchemyFavoritesStore(session_factory, mock_logger)

        assert await first(reopened.id_stream()) == frozenset({"2"})

    @pytest.mark.asyncio
    async def test_stream_emits_after_commit(self, session_factory, mock_logger):
        store = SQLAlchemyFavoritesStore(session_factory, mock_logger)

        async with aclosing(store.id_stream()) as ids:
            assert await anext(ids) == frozenset()
            await store.toggle("7")
            assert await asyncio.wait_for(anext(ids), timeout=1) == frozenset({"7"})

    @pytest.mark.asyncio
    async def test_committed_toggle_survives_interrupted_session_close(self, session_factory, mock_logger):
        """Test that the stream follows a commit even if closing the session is cancelled"""
        # Arrange
        store = SQLAlchemyFavoritesStore(session_factory, mock_logger)
        assert await first(store.id_stream()) == frozenset()

        @asynccontextmanager
        async def interrupted_session_factory():
            async with session_factory() as session:
                yield session
            raise asyncio.CancelledError()

        store.session_factory = interrupted_session_factory

        # Act
        with pytest.raises(asyncio.CancelledError):
            await store.toggle("4")

        # Assert
        assert await first(store.id_stream()) == frozenset({"4"})
        reopened = SQLAlchemyFavoritesStore(session_factory, mock_logger)
        assert await first(reopened.id_stream()) == frozenset({"4"})
