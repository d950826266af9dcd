from __future__ import annotations

import datetime as dt

import pytest

from swapui.inputs import DateInput, DateTimeInput, InputKind, NumberInput, TimeInput
from swapui.inputs.numeric import format_number
from swapui.target import Target

UTC = dt.timezone.utc


def test_number_input_two_decimal_format() -> None:
    rendered = NumberInput("Price", {"Price": 3}, target=Target(id="n1")).format("%.2f").render("Price")
    assert 'value="3.00"' in rendered
    assert 'aria-valuenow="3.00"' in rendered
    assert 'role="spinbutton"' in rendered
    assert 'type="number"' in rendered


def test_number_input_other_formats_leave_value_alone() -> None:
    assert 'value="3"' in NumberInput("Price", {"Price": 3}).format("%v").render("Price")
    assert 'value="abc"' in NumberInput("Price", {"Price": "abc"}).format("%.2f").render("Price")
    assert 'value="1_000"' in NumberInput("Price", {"Price": "1_000"}).format("%.2f").render("Price")


@pytest.mark.parametrize(
    ("value", "fmt", "expected"),
    [
        ("2.5", "%.2f", "2.50"),
        ("1.005e2", "%.2f", "100.50"),
        ("", "%.2f", ""),
        ("inf", "%.2f", "inf"),
        ("7", "", "7"),
        ("1_000", "%.2f", "1_000"),
    ],
)
def test_format_number(value: str, fmt: str, expected: str) -> None:
    assert format_number(value, fmt) == expected


def test_number_bounds_and_step() -> None:
    rendered = NumberInput("Qty", {"Qty": 4}).numbers(0, 10, 0.5).render("Qty")
    assert 'min="0" max="10"' in rendered
    assert 'step="0.5"' in rendered
    assert 'aria-valuemin="0" aria-valuemax="10" aria-valuenow="4"' in rendered


def test_number_input_lacks_text_and_date_setters() -> None:
    builder = NumberInput("Qty")
    assert builder.kind is InputKind.NUMBER
    assert not hasattr(builder, "dates")
    assert not hasattr(builder, "readonly")


def test_date_input_renders_canonical_date() -> None:
    data = {"When": dt.datetime(2024, 3, 5, tzinfo=UTC)}
    rendered = DateInput("When", data, target=Target(id="d1")).render("When")
    assert rendered.startswith('<div class="min-w-0"><label for="d1">When</label>')
    assert 'type="date" value="2024-03-05"' in rendered
    assert "min-w-0 max-w-full" in rendered


def test_date_bounds() -> None:
    rendered = DateInput("When").dates(dt.date(2024, 1, 1), dt.date(2024, 12, 31)).render("When")
    assert 'min="2024-01-01" max="2024-12-31"' in rendered
    assert 'aria-valuemin="2024-01-01" aria-valuemax="2024-12-31"' in rendered


def test_time_input() -> None:
    builder = TimeInput("At", {"At": dt.time(9, 5)})
    rendered = builder.dates(dt.time(8, 0), dt.time(17, 30)).render("At")
    assert builder.kind is InputKind.TIME
    assert 'type="time" value="09:05"' in rendered
    assert 'min="08:00" max="17:30"' in rendered


def test_datetime_input() -> None:
    data = {"At": dt.datetime(2024, 3, 5, tzinfo=UTC)}
    rendered = DateTimeInput("At", data).dates(dt.datetime(2024, 1, 1, 8, 0)).render("At")
    assert 'type="datetime-local" value="2024-03-05T00:00"' in rendered
    assert 'min="2024-01-01T08:00"' in rendered
    assert "max=" not in rendered


def test_missing_date_has_no_value() -> None:
    assert "value=" not in DateInput("When", {}).render("When")
