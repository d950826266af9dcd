"""Resolve display values for data-bound inputs from dot-separated paths."""
from __future__ import annotations

import datetime as dt
import logging
from typing import Mapping, Sequence

logger = logging.getLogger(__name__)


class _NotFound:
    __slots__ = ()

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND = _NotFound()

_SCALARS = (str, bytes, bytearray, int, float, complex, bool, dt.date, dt.time, dt.timedelta)


def resolve_path(data: object, path: str | None) -> object:
    """Walk ``data`` along ``path`` (e.g. ``"Filter.0.Bool"``).

    Mappings are indexed by key, sequences by base-10 index and plain objects
    by public attribute. Anything else, or a ``None`` along the way, yields
    :data:`NOT_FOUND`.
    """

    if data is None:
        return NOT_FOUND
    current: object = data
    for segment in str(path or "").split("."):
        current = _step(current, segment)
        if current is NOT_FOUND or current is None:
            logger.debug("path %r not found at segment %r", path, segment)
            return NOT_FOUND
    return current


def _step(current: object, segment: str) -> object:
    if isinstance(current, Mapping):
        return current.get(segment, NOT_FOUND)
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes, bytearray)):
        try:
            index = int(segment, 10)
        except ValueError:
            return NOT_FOUND
        if index < 0 or index >= len(current):
            return NOT_FOUND
        return current[index]
    if isinstance(current, _SCALARS) or segment.startswith("_"):
        return NOT_FOUND
    return getattr(current, segment, NOT_FOUND)


def _as_utc(value: dt.datetime) -> dt.datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(dt.timezone.utc)


def _is_non_finite(value: object) -> bool:
    # NaT-style sentinels compare unequal to themselves.
    try:
        return bool(value != value)
    except (TypeError, ValueError):
        return False


def format_temporal(value: dt.date | dt.time, html_type: str) -> str | None:
    """Return the canonical substring of ``value`` for a date/time input type.

    ``None`` means the type has no canonical form and the caller should fall
    back to ``str(value)``.
    """

    if isinstance(value, dt.datetime):
        moment = _as_utc(value)
        if html_type == "date":
            return moment.strftime("%Y-%m-%d")
        if html_type == "time":
            return moment.strftime("%H:%M")
        if html_type == "datetime-local":
            return moment.strftime("%Y-%m-%dT%H:%M")
        return None
    if isinstance(value, dt.date):
        if html_type == "date":
            return value.isoformat()
        if html_type == "time":
            return "00:00"
        if html_type == "datetime-local":
            return value.isoformat() + "T00:00"
        return None
    if isinstance(value, dt.time):
        if html_type == "time":
            return value.strftime("%H:%M")
        return None
    return None


def stringify(value: object) -> str:
    if value is None or value is NOT_FOUND:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def display_value(value: object, html_type: str, fallback: str = "") -> str:
    """Convert a resolved value into the string an input of ``html_type`` shows."""

    if value is NOT_FOUND or value is None:
        return fallback
    if isinstance(value, (dt.date, dt.time)):
        if _is_non_finite(value):
            return ""
        formatted = format_temporal(value, html_type)
        if formatted is not None:
            return formatted
    return stringify(value)


__all__ = [
    "NOT_FOUND",
    "display_value",
    "format_temporal",
    "resolve_path",
    "stringify",
]
