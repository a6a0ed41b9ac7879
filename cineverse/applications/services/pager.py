import asyncio
from enum import Enum
from typing import AsyncIterable, AsyncIterator, Awaitable, Callable, List, Optional, Sequence

from cineverse.domain.exceptions import PageLoadError
from cineverse.domain.models.movie import Movie
from cineverse.domain.models.page import MoviePage, PagingConfig, PagingData, PagingState
from cineverse.domain.ports.services.logger import LoggerPort


class LoadType(str, Enum):
    APPEND = "append"
    PREPEND = "prepend"


class Pager:
    """Fixed-size windowing over whatever movie list it is handed.

    The pager keeps no favorite or query state; every page is cut from the
    list snapshot current at load time.
    """

    def __init__(self, config: Optional[PagingConfig] = None, logger: Optional[LoggerPort] = None):
        self.config = config or PagingConfig()
        self.logger = logger

    def load(self, page_key: int, movies: Sequence[Movie]) -> MoviePage:
        if page_key < 0:
            raise ValueError(f"Page key must be non-negative, got {page_key}")
        size = self.config.page_size
        start = page_key * size
        end = min(start + size, len(movies))
        data = list(movies[start:end]) if start < len(movies) else []
        return MoviePage(
            key=page_key,
            data=data,
            prev_key=None if page_key == 0 else page_key - 1,
            next_key=None if end >= len(movies) else page_key + 1,
        )

    async def load_page(self, page_key: int, snapshot: Callable[[], Awaitable[Sequence[Movie]]]) -> MoviePage:
        """Load one page from a freshly obtained list; any failure is scoped to this call"""
        try:
            movies = await snapshot()
            return self.load(page_key, movies)
        except Exception as e:
            if self.logger is not None:
                self.logger.exception("Loading page %s failed", page_key)
            raise PageLoadError(page_key, f"Could not load page {page_key}: {e}") from e

    @staticmethod
    def get_refresh_key(state: PagingState) -> Optional[int]:
        if state.anchor_position is None:
            return None
        page = state.closest_page_to_position(state.anchor_position)
        if page is None:
            return None
        if page.prev_key is not None:
            return page.prev_key + 1
        if page.next_key is not None:
            return page.next_key - 1
        return None

    def session(self, source: AsyncIterable[Sequence[Movie]]) -> "PagingSession":
        return PagingSession(self, source)


class PagingSession:
    """Live page-load stream over a changing movie list.

    Each upstream list re-anchors the session: the page nearest the last
    accessed position is reloaded from the new list and emitted alone.
    ``access`` drives append/prepend loads once the consumer gets within
    ``prefetch_distance`` items of either loaded edge.
    """

    def __init__(self, pager: Pager, source: AsyncIterable[Sequence[Movie]]):
        self._pager = pager
        self._source = source
        self._movies: Optional[Sequence[Movie]] = None
        self._pages: List[MoviePage] = []
        self._anchor_position: Optional[int] = None
        self._requests: "asyncio.Queue[LoadType]" = asyncio.Queue()

    @property
    def state(self) -> PagingState:
        return PagingState(
            pages=list(self._pages),
            anchor_position=self._anchor_position,
            page_size=self._pager.config.page_size,
        )

    def access(self, position: int) -> None:
        """Record that the consumer is looking at absolute list ``position``"""
        self._anchor_position = position
        if self._wants(LoadType.APPEND):
            self._requests.put_nowait(LoadType.APPEND)
        if self._wants(LoadType.PREPEND):
            self._requests.put_nowait(LoadType.PREPEND)

    def __aiter__(self) -> AsyncIterator[PagingData]:
        return self._run()

    def _wants(self, load_type: LoadType) -> bool:
        if not self._pages or self._anchor_position is None:
            return False
        size = self._pager.config.page_size
        prefetch = self._pager.config.prefetch_distance
        loaded_start = self._pages[0].key * size
        if load_type is LoadType.APPEND:
            loaded_end = loaded_start + sum(len(page.data) for page in self._pages)
            return self._pages[-1].next_key is not None and self._anchor_position >= loaded_end - prefetch
        return self._pages[0].prev_key is not None and self._anchor_position < loaded_start + prefetch

    def _emit(self, error: Optional[PageLoadError] = None) -> PagingData:
        return PagingData(pages=list(self._pages), page_size=self._pager.config.page_size, error=error)

    def _load(self, page_key: int) -> MoviePage:
        try:
            return self._pager.load(page_key, self._movies or [])
        except Exception as e:
            raise PageLoadError(page_key, f"Could not load page {page_key}: {e}") from e

    def _refresh(self) -> PagingData:
        config = self._pager.config
        key = self._pager.get_refresh_key(self.state)
        if key is None:
            key = config.initial_key
        last_key = max(0, (len(self._movies or []) - 1) // config.page_size)
        key = max(0, min(key, last_key))
        try:
            page = self._load(key)
        except PageLoadError as e:
            return self._emit(error=e)
        self._pages = [page]
        return self._emit()

    def _load_adjacent(self, load_type: LoadType) -> Optional[PagingData]:
        if self._movies is None or not self._wants(load_type):
            return None
        if load_type is LoadType.APPEND:
            key = self._pages[-1].next_key
        else:
            key = self._pages[0].prev_key
        try:
            page = self._load(key)
        except PageLoadError as e:
            return self._emit(error=e)
        if load_type is LoadType.APPEND:
            self._pages.append(page)
        else:
            self._pages.insert(0, page)
        return self._emit()

    async def _run(self) -> AsyncIterator[PagingData]:
        iterator = self._source.__aiter__()
        next_list = asyncio.ensure_future(anext(iterator))
        next_request = asyncio.ensure_future(self._requests.get())
        try:
            while True:
                done, _ = await asyncio.wait({next_list, next_request}, return_when=asyncio.FIRST_COMPLETED)
                if next_list in done:
                    try:
                        self._movies = next_list.result()
                    except StopAsyncIteration:
                        return
                    except Exception as e:
                        key = self._pages[-1].key if self._pages else self._pager.config.initial_key
                        yield self._emit(error=PageLoadError(key, f"Could not obtain movie list: {e}"))
                        return
                    next_list = asyncio.ensure_future(anext(iterator))
                    yield self._refresh()
                    continue
                load_type = next_request.result()
                next_request = asyncio.ensure_future(self._requests.get())
                data = self._load_adjacent(load_type)
                if data is not None:
                    yield data
        finally:
            for task in (next_list, next_request):
                task.cancel()
            await asyncio.gather(next_list, next_request, return_exceptions=True)
            aclose = getattr(iterator, "aclose", None)
            if aclose is not None:
                await aclose()
