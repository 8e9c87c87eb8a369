"""URL parameters, escaping, JSON parsing and multipart form parts."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union
from urllib.parse import quote

_Items = Union[Mapping[str, str], Iterable[tuple[str, str]], None]


def _pairs(items: _Items) -> list[tuple[str, str]]:
    if items is None:
        return []
    if isinstance(items, Mapping):
        return list(items.items())
    return [(key, value) for key, value in items]


class UrlParameters:
    """An ordered query string built from key/value pairs."""

    def __init__(self, items: _Items = None) -> None:
        self._params = ""
        self._append(items)

    def _append(self, items: _Items) -> None:
        parts = [self._params] if self._params else []
        parts.extend(f"{key}={value}" for key, value in _pairs(items))
        self._params = "&".join(parts)

    def expand_copy(self, added: _Items) -> UrlParameters:
        """Return a copy holding these parameters followed by ``added``."""
        expanded = UrlParameters()
        expanded._params = self._params
        expanded._append(added)
        return expanded

    def assign(self, items: _Items) -> UrlParameters:
        """Replace all parameters with ``items`` and return self."""
        self._params = ""
        self._append(items)
        return self

    def apply(self, url: str) -> str:
        """Return ``url`` with the parameters appended after ``?``."""
        return f"{url}?{self._params}"

    def get(self) -> str:
        """Return the query string."""
        return self._params

    def __bool__(self) -> bool:
        return bool(self._params)

    def __str__(self) -> str:
        return self._params

    def __repr__(self) -> str:
        return f"UrlParameters({self._params!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UrlParameters):
            return NotImplemented
        return self._params == other._params

    def __hash__(self) -> int:
        return hash(self._params)


def url_escape(text: str) -> str:
    """Percent-encode every character except unreserved ones (``;a`` -> ``%3Ba``)."""
    return quote(text, safe="")


def parse_json_object(text: str | bytes) -> dict[str, Any]:
    """Parse ``text`` as a JSON object; raise ValueError if it is not one."""
    value = json.loads(text)
    if not isinstance(value, dict):
        raise ValueError(f"JSON value is not an object but {type(value).__name__}")
    return value


@dataclass(frozen=True)
class MultipartContentPart:
    """A multipart form field holding inline content."""

    name: str
    content: str
    content_type: str | None = None


@dataclass(frozen=True)
class MultipartFilePart:
    """A multipart form field whose content is read from a file."""

    name: str
    filename: str
    content_type: str | None = None


MultipartPart = Union[MultipartContentPart, MultipartFilePart]
MultipartForms = list