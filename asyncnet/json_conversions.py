"""Conversions between JSON integers and durations or time points."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class TimeUnit(Enum):
    """The unit a JSON integer counts."""

    MICROSECONDS = timedelta(microseconds=1)
    MILLISECONDS = timedelta(milliseconds=1)
    SECONDS = timedelta(seconds=1)
    MINUTES = timedelta(minutes=1)
    HOURS = timedelta(hours=1)
    DAYS = timedelta(days=1)


class JsonConversionError(ValueError):
    """A JSON value could not be converted."""


def _integer(value: Any, unsigned: bool) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise JsonConversionError(
            f"expected an integer JSON value, got {type(value).__name__}"
        )
    low, high = (0, _UINT64_MAX) if unsigned else (_INT64_MIN, _INT64_MAX)
    if not low <= value <= high:
        kind = "unsigned" if unsigned else "signed"
        raise JsonConversionError(f"{value} is out of range for a {kind} 64-bit integer")
    return value


def _microseconds(delta: timedelta) -> int:
    return (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds


def _count(delta: timedelta, unit: TimeUnit) -> int:
    total = _microseconds(delta)
    whole = abs(total) // _microseconds(unit.value)
    return whole if total >= 0 else -whole


def duration_from_json(
    value: Any, unit: TimeUnit = TimeUnit.SECONDS, unsigned: bool = False
) -> timedelta:
    """Read an integer count of ``unit`` as a timedelta."""
    count = _integer(value, unsigned)
    try:
        return unit.value * count
    except OverflowError as exc:
        raise JsonConversionError(f"{count} {unit.name.lower()} is out of range") from exc


def duration_to_json(duration: timedelta, unit: TimeUnit = TimeUnit.SECONDS) -> int:
    """Return ``duration`` as a whole count of ``unit``, truncated toward zero."""
    return _count(duration, unit)


def time_point_from_json(
    value: Any, unit: TimeUnit = TimeUnit.SECONDS, unsigned: bool = False
) -> datetime:
    """Read an integer count of ``unit`` since the Unix epoch as a UTC datetime."""
    delta = duration_from_json(value, unit, unsigned)
    try:
        return _EPOCH + delta
    except OverflowError as exc:
        raise JsonConversionError(f"{value} is out of range for a time point") from exc


def time_point_to_json(time_point: datetime, unit: TimeUnit = TimeUnit.SECONDS) -> int:
    """Return ``time_point`` as a count of ``unit`` since the epoch; naive values are UTC."""
    epoch = _EPOCH if time_point.tzinfo is not None else _EPOCH.replace(tzinfo=None)
    return _count(time_point - epoch, unit)