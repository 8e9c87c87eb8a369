"""Request descriptions: a URL plus the transfer options used to perform it."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping
from datetime import timedelta
from enum import Enum
from typing import Any, ClassVar, Optional, Union

from .net_types import MultipartPart, UrlParameters


class Option(Enum):
    """Transfer options a request can carry."""

    URL = "url"
    FOLLOW_LOCATION = "follow_location"
    MAX_REDIRS = "max_redirs"
    TIMEOUT = "timeout"
    VERBOSE = "verbose"
    HTTP_HEADER = "http_header"
    COOKIE_FILE = "cookie_file"
    POST_FIELDS = "post_fields"
    POST_FIELD_SIZE = "post_field_size"
    NO_BODY = "no_body"
    HTTP_POST = "http_post"


def _clone(value: Any) -> Any:
    return list(value) if isinstance(value, list) else value


class Request:
    """A GET request by default; also serves as a plain container of options."""

    COOKIE_MEMORY: ClassVar[str] = "NULL" if sys.platform == "win32" else "/dev/null"
    """Cookie file name that keeps cookies in memory only."""

    INFINITE_REDIRECTS: ClassVar[int] = -1
    """Maximum redirect count that allows any number of redirects."""

    def __init__(self, url: Optional[str] = None, base: Optional[Request] = None) -> None:
        self._options: dict[Option, Any] = {}
        self._base_url = ""
        if base is not None:
            self._options = {key: _clone(value) for key, value in base._options.items()}
            self._base_url = base._base_url
        if url is not None:
            self.set_url(url)

    def copy(self) -> Request:
        """Return an independent request of the same class with the same options."""
        duplicate = type(self).__new__(type(self))
        duplicate._options = {key: _clone(value) for key, value in self._options.items()}
        duplicate._base_url = self._base_url
        return duplicate

    def make_request_handle(self) -> dict[Option, Any]:
        """Return a snapshot of every option set on this request, in the order set."""
        return {key: _clone(value) for key, value in self._options.items()}

    def get_option(self, option: Option) -> Any:
        """Return the value of ``option``, or None if it has not been set."""
        return _clone(self._options.get(option))

    def _set_option(self, option: Option, value: Any) -> None:
        self._options[option] = value

    def set_url(self, url: str) -> None:
        """Set the URL; any URL parameters applied before are dropped."""
        self._base_url = url
        self._set_option(Option.URL, url)

    def set_max_redirects(self, max_redirects: Optional[int]) -> None:
        """Follow up to ``max_redirects`` redirects; None means no redirects."""
        self._set_option(Option.FOLLOW_LOCATION, max_redirects is not None)
        self._set_option(Option.MAX_REDIRS, max_redirects if max_redirects is not None else 0)

    def set_timeout(self, timeout: Optional[timedelta]) -> None:
        """Set the timeout in whole seconds; None means wait without limit."""
        seconds = int(timeout.total_seconds()) if timeout is not None else 0
        self._set_option(Option.TIMEOUT, seconds)

    def set_verbose(self, is_verbose: bool) -> None:
        """Enable or disable printing of debug information."""
        self._set_option(Option.VERBOSE, bool(is_verbose))

    def set_url_parameters(
        self,
        params: Union[UrlParameters, Mapping[str, str], Iterable[tuple[str, str]]],
    ) -> None:
        """Append ``params`` to the current URL; does nothing when no URL is set."""
        if not self._base_url:
            return
        if not isinstance(params, UrlParameters):
            params = UrlParameters(params)
        self.set_url(params.apply(self._base_url))

    def set_headers(self, headers: Iterable[str]) -> None:
        """Replace the request headers."""
        self._set_option(Option.HTTP_HEADER, list(headers))

    def add_headers(self, headers: Iterable[str]) -> None:
        """Append ``headers`` to those already set."""
        current = self._options.get(Option.HTTP_HEADER)
        if current is None:
            self.set_headers(headers)
            return
        self._set_option(Option.HTTP_HEADER, [*current, *headers])

    def set_cookie_file(self, cookie_file: str) -> None:
        """Store cookies in ``cookie_file``; use COOKIE_MEMORY to keep them in memory."""
        self._set_option(Option.COOKIE_FILE, str(cookie_file))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._base_url!r})"


class GetRequest(Request):
    """A GET request."""


class PostRequest(Request):
    """A POST request carrying ``data`` as its body."""

    def __init__(
        self, url: str, data: Union[str, bytes], base: Optional[Request] = None
    ) -> None:
        super().__init__(url, base)
        size = len(data.encode("utf-8")) if isinstance(data, str) else len(data)
        self._set_option(Option.POST_FIELDS, data)
        self._set_option(Option.POST_FIELD_SIZE, size)


class HeadRequest(Request):
    """A HEAD request: the response has no body."""

    def __init__(self, url: str, base: Optional[Request] = None) -> None:
        super().__init__(url, base)
        self._set_option(Option.NO_BODY, True)


class PostMultipartRequest(Request):
    """A multipart POST request made of form parts."""

    def __init__(
        self,
        url: str,
        forms: Optional[Iterable[MultipartPart]] = None,
        base: Optional[Request] = None,
    ) -> None:
        super().__init__(url, base)
        self.set_forms(forms or [])

    def set_forms(self, forms: Iterable[MultipartPart]) -> None:
        """Replace the multipart form parts."""
        self._set_option(Option.HTTP_POST, list(forms))

    def add_form(self, part: MultipartPart) -> None:
        """Append one form part to the existing ones."""
        current = self._options.get(Option.HTTP_POST)
        if current is None:
            self.set_forms([part])
        else:
            self._set_option(Option.HTTP_POST, [*current, part])