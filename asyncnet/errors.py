"""Exceptions raised by network operations."""

from __future__ import annotations

TIMEOUT_ERROR_CODE = 28
"""Error code carried by a runtime error when a request timed out."""

CANCELLED_ERROR_CODE = 42
"""Error code carried by a runtime error when a request was cancelled."""


class NetworkError(Exception):
    """Base class for network failures; ``code`` holds the transport error code."""

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code})"


class NetworkLogicError(NetworkError):
    """A request was set up wrongly, for example with an invalid option."""


class NetworkRuntimeError(NetworkError):
    """A request failed while it was being performed."""