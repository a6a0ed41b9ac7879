"""Operators over live streams.

A live stream is any async iterable. Every operator returns a new async
generator; nothing runs until it is iterated, and closing it (``aclose`` or
``contextlib.aclosing``) cancels whatever it started for that subscriber only.
"""

import asyncio
from typing import Any, AsyncIterable, AsyncIterator, Callable, List, Optional, TypeVar

A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")
T = TypeVar("T")

_EMPTY: Any = object()
_DONE: Any = object()


class _Failure:
    def __init__(self, error: BaseException):
        self.error = error


async def _aclose(iterator: Any) -> None:
    aclose = getattr(iterator, "aclose", None)
    if aclose is not None:
        await aclose()


async def _cancel(tasks: List["asyncio.Task[Any]"]) -> None:
    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)


async def combine_latest(
    first: AsyncIterable[A], second: AsyncIterable[B], combine: Callable[[A, B], R]
) -> AsyncIterator[R]:
    """Emit ``combine(a, b)`` each time either source emits, once both have emitted."""
    queue: "asyncio.Queue[tuple[int, Any]]" = asyncio.Queue()

    async def pump(index: int, source: AsyncIterable[Any]) -> None:
        iterator = source.__aiter__()
        try:
            async for item in iterator:
                queue.put_nowait((index, item))
        except Exception as e:
            queue.put_nowait((index, _Failure(e)))
            return
        finally:
            await _aclose(iterator)
        queue.put_nowait((index, _DONE))

    tasks = [asyncio.create_task(pump(0, first)), asyncio.create_task(pump(1, second))]
    slots: List[Any] = [_EMPTY, _EMPTY]
    finished = 0
    try:
        while finished < len(slots):
            index, item = await queue.get()
            if item is _DONE:
                finished += 1
                continue
            if isinstance(item, _Failure):
                raise item.error
            slots[index] = item
            if all(slot is not _EMPTY for slot in slots):
                yield combine(slots[0], slots[1])
    finally:
        await _cancel(tasks)


async def map_stream(source: AsyncIterable[T], transform: Callable[[T], R]) -> AsyncIterator[R]:
    iterator = source.__aiter__()
    try:
        async for item in iterator:
            yield transform(item)
    finally:
        await _aclose(iterator)


async def distinct_until_changed(source: AsyncIterable[T]) -> AsyncIterator[T]:
    iterator = source.__aiter__()
    last: Any = _EMPTY
    try:
        async for item in iterator:
            if last is not _EMPTY and item == last:
                continue
            last = item
            yield item
    finally:
        await _aclose(iterator)


async def debounce(source: AsyncIterable[T], window: float, leading: bool = False) -> AsyncIterator[T]:
    """Emit a value only after ``window`` seconds pass without a newer one.

    The pending value lives in a single slot; each new input overwrites it and
    restarts the window, so superseded values are never emitted. With
    ``leading`` the very first value is emitted at once.
    """
    iterator = source.__aiter__()
    pending: Any = _EMPTY
    emit_next = leading
    next_item: "asyncio.Future[T]" = asyncio.ensure_future(anext(iterator))
    try:
        while True:
            timeout: Optional[float] = window if pending is not _EMPTY else None
            done, _ = await asyncio.wait({next_item}, timeout=timeout)
            if not done:
                item, pending = pending, _EMPTY
                yield item
                continue
            try:
                item = next_item.result()
            except StopAsyncIteration:
                if pending is not _EMPTY:
                    yield pending
                return
            next_item = asyncio.ensure_future(anext(iterator))
            if emit_next:
                emit_next = False
                yield item
            else:
                pending = item
    finally:
        await _cancel([next_item])
        await _aclose(iterator)


async def first(source: AsyncIterable[T]) -> T:
    """Current value of a live stream: its first emission."""
    iterator = source.__aiter__()
    try:
        return await anext(iterator)
    finally:
        await _aclose(iterator)
