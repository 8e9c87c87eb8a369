"""A FIFO queue for coroutines with optional waiting on pop."""

from __future__ import annotations

import asyncio
from collections import deque
from collections.abc import Callable, Iterable
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


def _identity(value: Any) -> Any:
    return value


class AsyncQueue(Generic[T]):
    """FIFO queue; values pushed while coroutines wait go to the oldest waiter."""

    def __init__(
        self,
        items: Iterable[T] | None = None,
        factory: Callable[..., T] | None = None,
    ) -> None:
        self._items: deque[T] = deque(items or ())
        self._factory: Callable[..., T] = factory or _identity
        self._waiters: deque[asyncio.Future[T]] = deque()

    def _deliver(self, value: T, front: bool = False) -> None:
        while self._waiters:
            waiter = self._waiters.popleft()
            if not waiter.done():
                waiter.set_result(value)
                return
        if front:
            self._items.appendleft(value)
        else:
            self._items.append(value)

    async def push(self, value: T) -> None:
        """Add ``value``, waking one waiting coroutine if there is one."""
        self._deliver(value)

    async def emplace(self, *args: Any, **kwargs: Any) -> None:
        """Build a value with the queue's factory and push it."""
        self._deliver(self._factory(*args, **kwargs))

    async def pop(self) -> Optional[T]:
        """Remove and return the oldest value, or None if the queue is empty."""
        if not self._items:
            return None
        return self._items.popleft()

    async def pop_wait(self) -> T:
        """Remove and return the oldest value, waiting until one is pushed."""
        if self._items:
            return self._items.popleft()
        waiter: asyncio.Future[T] = asyncio.get_running_loop().create_future()
        self._waiters.append(waiter)
        try:
            return await waiter
        except asyncio.CancelledError:
            if waiter.done() and not waiter.cancelled():
                self._deliver(waiter.result(), front=True)
            else:
                try:
                    self._waiters.remove(waiter)
                except ValueError:
                    pass
            raise