from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from types import SimpleNamespace

from swapui.values import NOT_FOUND, display_value, format_temporal, resolve_path, stringify

UTC = dt.timezone.utc


class _NaT(dt.datetime):
    def __eq__(self, other: object) -> bool:
        return False

    def __ne__(self, other: object) -> bool:
        return True

    __hash__ = dt.datetime.__hash__


@dataclass
class _Filter:
    name: str
    active: bool = True


def test_resolve_path_walks_mappings_and_sequences() -> None:
    data = {"a": {"b": [10, 20, 30]}}
    assert resolve_path(data, "a.b.1") == 20
    assert resolve_path(data, "a.b.5") is NOT_FOUND
    assert resolve_path(data, "a.b.-1") is NOT_FOUND
    assert resolve_path(data, "a.b.one") is NOT_FOUND
    assert resolve_path(data, "a.x") is NOT_FOUND


def test_resolve_path_reads_public_attributes() -> None:
    data = {"Filter": [_Filter("open")], "meta": SimpleNamespace(owner="ann")}
    assert resolve_path(data, "Filter.0.name") == "open"
    assert resolve_path(data, "Filter.0.active") is True
    assert resolve_path(data, "meta.owner") == "ann"
    assert resolve_path(data, "meta.__class__") is NOT_FOUND


def test_resolve_path_fails_closed_on_scalars_and_none() -> None:
    assert resolve_path(None, "a") is NOT_FOUND
    assert resolve_path({"a": None}, "a") is NOT_FOUND
    assert resolve_path({"a": "text"}, "a.upper") is NOT_FOUND
    assert resolve_path({"a": 5}, "a.real") is NOT_FOUND


def test_not_found_is_falsy() -> None:
    assert not NOT_FOUND
    assert repr(NOT_FOUND) == "NOT_FOUND"


def test_utc_midnight_renders_per_kind() -> None:
    moment = dt.datetime(2024, 3, 5, tzinfo=UTC)
    assert display_value(moment, "date") == "2024-03-05"
    assert display_value(moment, "time") == "00:00"
    assert display_value(moment, "datetime-local") == "2024-03-05T00:00"


def test_aware_values_are_converted_to_utc() -> None:
    moment = dt.datetime(2024, 3, 5, 1, 30, tzinfo=dt.timezone(dt.timedelta(hours=2)))
    assert display_value(moment, "date") == "2024-03-04"
    assert display_value(moment, "time") == "23:30"


def test_plain_dates_and_times() -> None:
    assert display_value(dt.date(2024, 3, 5), "datetime-local") == "2024-03-05T00:00"
    assert display_value(dt.time(9, 5, 30), "time") == "09:05"
    assert display_value(dt.date(2024, 3, 5), "text") == "2024-03-05"
    assert format_temporal(dt.time(9, 5), "date") is None


def test_non_finite_dates_render_empty() -> None:
    assert display_value(_NaT(2000, 1, 1), "date") == ""


def test_scalars_and_fallbacks() -> None:
    assert display_value(True, "text") == "true"
    assert display_value(False, "text") == "false"
    assert display_value(3.5, "number") == "3.5"
    assert display_value(NOT_FOUND, "text", "fallback") == "fallback"
    assert display_value(None, "text") == ""
    assert stringify(NOT_FOUND) == ""
