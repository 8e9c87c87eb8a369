"""A session whose settings are inherited by every request it makes."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import timedelta
from typing import Any, Optional, TypeVar

from .request import Request

R = TypeVar("R", bound=Request)


class AsyncSession:
    """Holds shared request options, with cookies kept in memory by default."""

    def __init__(self) -> None:
        self._base_request = Request()
        self._default_headers: list[str] = []
        self.set_cookie_file(Request.COOKIE_MEMORY)

    def set_max_redirects(self, max_redirects: Optional[int]) -> None:
        """Set the redirect limit for requests made from now on."""
        self._base_request.set_max_redirects(max_redirects)

    def set_verbose(self, is_verbose: bool) -> None:
        """Set verbosity for requests made from now on."""
        self._base_request.set_verbose(is_verbose)

    def set_timeout(self, timeout: Optional[timedelta]) -> None:
        """Set the timeout for requests made from now on."""
        self._base_request.set_timeout(timeout)

    def set_default_headers(self, headers: Iterable[str]) -> None:
        """Replace the headers sent with every request."""
        self._default_headers = list(headers)
        self._base_request.set_headers(self._default_headers)

    def add_default_header(self, header: str) -> None:
        """Add one header sent with every request."""
        self._default_headers.append(header)
        self._base_request.set_headers(self._default_headers)

    def set_cookie_file(self, filename: str) -> None:
        """Set the cookie file for requests made from now on."""
        self._base_request.set_cookie_file(filename)

    def make_request(self, request_class: type[R], *args: Any, **kwargs: Any) -> R:
        """Build ``request_class(*args, **kwargs)`` inheriting the session's options."""
        if not (isinstance(request_class, type) and issubclass(request_class, Request)):
            raise TypeError(f"{request_class!r} is not a Request class")
        return request_class(*args, base=self._base_request, **kwargs)