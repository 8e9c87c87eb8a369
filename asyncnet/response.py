"""The result of a performed request."""

from __future__ import annotations


class Response:
    """HTTP status code and body of a finished request."""

    __slots__ = ("_status_code", "_body")

    def __init__(self, status_code: int, body: str | None = None) -> None:
        self._status_code = status_code
        self._body = body

    @property
    def status_code(self) -> int:
        """The HTTP status code."""
        return self._status_code

    @property
    def text(self) -> str:
        """The response body, or an empty string when there was none."""
        return self._body if self._body is not None else ""

    def __repr__(self) -> str:
        return f"Response(status_code={self._status_code}, length={len(self.text)})"