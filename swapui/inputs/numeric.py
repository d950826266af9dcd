"""Numeric spin-button control."""
from __future__ import annotations

import math
from typing import ClassVar

from ..html import Attrs, input_
from .base import Field, InputKind

TWO_DECIMALS = "%.2f"

Number = int | float


def _number_text(value: Number | None) -> str | None:
    if value is None:
        return None
    return str(value)


def format_number(value: str, fmt: str) -> str:
    """Apply a display hint to an already resolved value.

    Only hints containing ``%.2f`` change anything: a value that parses as a
    finite number is shown with exactly two decimals.
    """

    if not fmt or not value or TWO_DECIMALS not in fmt:
        return value
    # float() accepts digit separators, form values never carry them
    if "_" in value:
        return value
    try:
        number = float(value)
    except ValueError:
        return value
    if not math.isfinite(number):
        return value
    return f"{number:.2f}"


class NumberInput(Field):
    kind: ClassVar[InputKind] = InputKind.NUMBER
    html_type: ClassVar[str] = "number"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._min: Number | None = None
        self._max: Number | None = None
        self._step: Number | None = None
        self._format = ""

    def numbers(
        self,
        min: Number | None = None,
        max: Number | None = None,
        step: Number | None = None,
    ) -> NumberInput:
        self._min = min
        self._max = max
        self._step = step
        return self

    def format(self, fmt: str) -> NumberInput:
        self._format = fmt
        return self

    def resolve_value(self) -> str:
        return format_number(super().resolve_value(), self._format)

    def _control(self, text: str) -> str:
        value = self.resolve_value()
        low = _number_text(self._min)
        high = _number_text(self._max)
        return input_(
            self._control_css(),
            Attrs(
                type=self.html_type,
                value=value,
                min=low,
                max=high,
                step=_number_text(self._step),
                aria_valuemin=low,
                aria_valuemax=high,
                aria_valuenow=value,
                role="spinbutton",
                **self._field_attrs(text),
            ),
        )


__all__ = [
    "NumberInput",
    "format_number",
]
