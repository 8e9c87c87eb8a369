"""A lazily started, stoppable awaitable that produces a response."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Generator
from typing import Any, Optional

from .response import Response


class StopToken:
    """Read-only view of a StopSource."""

    __slots__ = ("_source",)

    def __init__(self, source: StopSource) -> None:
        self._source = source

    def stop_requested(self) -> bool:
        """Return True once a stop has been requested on the source."""
        return self._source.stop_requested()


class StopSource:
    """Owner of a stop request that tokens observe."""

    __slots__ = ("_stopped",)

    def __init__(self) -> None:
        self._stopped = False

    def request_stop(self) -> bool:
        """Request a stop; return True only if this call made the request."""
        if self._stopped:
            return False
        self._stopped = True
        return True

    def stop_requested(self) -> bool:
        """Return True once a stop has been requested."""
        return self._stopped

    def token(self) -> StopToken:
        """Return a token observing this source."""
        return StopToken(self)


class NetworkTask:
    """Runs ``coroutine_function(stop_token)`` when first awaited and keeps its outcome."""

    def __init__(self, coroutine_function: Callable[[StopToken], Awaitable[Response]]) -> None:
        self._coroutine_function = coroutine_function
        self._stop_source = StopSource()
        self._running = False
        self._finished = False
        self._response: Optional[Response] = None
        self._error: Optional[BaseException] = None

    def __await__(self) -> Generator[Any, None, Response]:
        if not self._finished:
            if self._running:
                raise RuntimeError("NetworkTask is already being awaited")
            self._running = True
            try:
                awaitable = self._coroutine_function(self._stop_source.token())
                response = yield from awaitable.__await__()
            except BaseException as exc:
                self._error = exc
                self._finished = True
                if not isinstance(exc, Exception):
                    raise
            else:
                self._response = response
                self._finished = True
            finally:
                self._running = False
        return self.result()

    def done(self) -> bool:
        """Return True once the task has produced a response or an error."""
        return self._finished

    def result(self) -> Response:
        """Return the response, re-raise the stored error, or fail if not finished."""
        if self._error is not None:
            raise self._error
        if not self._finished:
            raise RuntimeError("Promise value is unset")
        return self._response  # type: ignore[return-value]

    def request_stop(self) -> bool:
        """Ask the task to stop; return True only if this call made the request."""
        return self._stop_source.request_stop()