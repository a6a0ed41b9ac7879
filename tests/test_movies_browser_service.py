import asyncio
from contextlib import aclosing

import pytest

from cineverse.applications.services.movies_browser_service import MoviesBrowserService
from cineverse.applications.services.pager import Pager
from cineverse.applications.services.search_controller import SearchController
from cineverse.domain.models.page import PagingConfig

from .factories import movie_factory


class TestMoviesBrowserService:
    @pytest.fixture
    def browser(self, movie_repository, mock_logger):
        return MoviesBrowserService(
            movie_repository=movie_repository,
            search_controller=SearchController(debounce_seconds=0.05),
            pager=Pager(PagingConfig(page_size=10, prefetch_distance=3)),
            logger=mock_logger,
        )

    @pytest.mark.asyncio
    async def test_initial_state_shows_all_movies(self, browser):
        await browser.refresh()

        async with aclosing(browser.movies()) as movies:
            assert len(await anext(movies)) == 3

    @pytest.mark.asyncio
    async def test_search_query_updates_state(self, browser):
        browser.on_search_query_changed("test")

        assert browser.query == "test"

    @pytest.mark.asyncio
    async def test_search_filters_movies(self, browser):
        await browser.refresh()

        async with aclosing(browser.movies()) as movies:
            await anext(movies)
            browser.on_search_query_changed("INCEPTION")
            filtered = await asyncio.wait_for(anext(movies), timeout=1)

        assert [movie.title for movie in filtered] == ["Inception"]

    @pytest.mark.asyncio
    async def test_favorite_toggle_reaches_filtered_view(self, browser):
        await browser.refresh()

        async with aclosing(browser.movies()) as movies:
            await anext(movies)
            await browser.toggle_favorite("3")
            updated = await asyncio.wait_for(anext(movies), timeout=1)

        assert [movie.id for movie in updated if movie.is_favorite] == ["3"]

    @pytest.mark.asyncio
    async def test_favorites_stream(self, browser):
        await browser.refresh()
        await browser.toggle_favorite("2")

        async with aclosing(browser.favorites()) as favorites:
            assert [movie.title for movie in await anext(favorites)] == ["Inception"]

    @pytest.mark.asyncio
    async def test_pages_follow_query_and_favorites(self, browser, mock_catalog_source):
        mock_catalog_source.fetch_all.return_value = movie_factory.create_catalog(25)
        await browser.refresh()
        session = browser.paged_movies()

        async with aclosing(session.__aiter__()) as pages:
            data = await anext(pages)
            assert len(data.items) == 10

            browser.on_search_query_changed("Movie 2")
            data = await asyncio.wait_for(anext(pages), timeout=1)
            assert [movie.id for movie in data.items] == ["2", "20", "21", "22", "23", "24"]

            await browser.toggle_favorite("21")
            data = await asyncio.wait_for(anext(pages), timeout=1)
            assert [movie.id for movie in data.items if movie.is_favorite] == ["21"]
