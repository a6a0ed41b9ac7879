import asyncio
from typing import AsyncIterator, Generic, TypeVar

T = TypeVar("T")


class StateStream(Generic[T]):
    """Holder of a single current value that observers can follow.

    Every subscriber first receives the current value, then each later value.
    Values are conflated: a slow subscriber only sees the latest one. Setting a
    value equal to the current one is a no-op.
    """

    def __init__(self, initial: T):
        self._value = initial
        self._version = 0
        self._changed = asyncio.Event()

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        if new_value == self._value:
            return
        self._value = new_value
        self._version += 1
        changed, self._changed = self._changed, asyncio.Event()
        changed.set()

    async def subscribe(self) -> AsyncIterator[T]:
        seen = -1
        while True:
            changed = self._changed
            if seen != self._version:
                seen = self._version
                yield self._value
                continue
            await changed.wait()
