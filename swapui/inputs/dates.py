"""Date, time and datetime-local controls."""
from __future__ import annotations

import datetime as dt
from typing import ClassVar, TypeVar

from ..html import Attrs, classes, input_
from ..values import format_temporal
from .base import Field, InputKind

Bound = dt.date | dt.time | str

D = TypeVar("D", bound="_TemporalInput")


class _TemporalInput(Field):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._min: Bound | None = None
        self._max: Bound | None = None

    def dates(self: D, min: Bound | None = None, max: Bound | None = None) -> D:
        """Limit the accepted range; bounds render in the kind's canonical form."""

        self._min = min
        self._max = max
        return self

    def _bound(self, value: Bound | None) -> str | None:
        if value is None or value == "":
            return None
        if isinstance(value, (dt.date, dt.time)):
            formatted = format_temporal(value, self.html_type)
            if formatted is not None:
                return formatted
        return str(value)

    def _control_extra(self) -> str:
        return ""

    def _control(self, text: str) -> str:
        low = self._bound(self._min)
        high = self._bound(self._max)
        return input_(
            self._control_css(self._control_extra()),
            Attrs(
                type=self.html_type,
                value=self.resolve_value(),
                min=low,
                max=high,
                aria_valuemin=low,
                aria_valuemax=high,
                **self._field_attrs(text),
            ),
        )


class DateInput(_TemporalInput):
    kind: ClassVar[InputKind] = InputKind.DATE
    html_type: ClassVar[str] = "date"

    # Date pickers overflow narrow grid cells without these.
    def _wrapper_css(self) -> str:
        return classes(self._state.css, "min-w-0")

    def _control_extra(self) -> str:
        return "min-w-0 max-w-full"


class TimeInput(_TemporalInput):
    kind: ClassVar[InputKind] = InputKind.TIME
    html_type: ClassVar[str] = "time"


class DateTimeInput(_TemporalInput):
    kind: ClassVar[InputKind] = InputKind.DATETIME
    html_type: ClassVar[str] = "datetime-local"


__all__ = [
    "DateInput",
    "DateTimeInput",
    "TimeInput",
]
