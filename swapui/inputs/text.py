"""Single- and multi-line text controls."""
from __future__ import annotations

import html as _html
from typing import Any, ClassVar, TypeVar

from .. import styles
from ..errors import InputKindError
from ..html import Attrs, flag, input_, textarea
from .base import Field, InputKind

DEFAULT_ROWS = 5

# Input types served by a dedicated builder instead of TextInput.type().
_DEDICATED_TYPES = {
    "password": "PasswordInput",
    "number": "NumberInput",
    "date": "DateInput",
    "time": "TimeInput",
    "datetime-local": "DateTimeInput",
    "checkbox": "Checkbox",
    "radio": "Radio",
    "submit": "Button",
    "reset": "Button",
    "button": "Button",
}

T = TypeVar("T", bound="_Editable")
L = TypeVar("L", bound="_SingleLine")


class _Editable(Field):
    _readonly: bool = False

    def readonly(self: T, value: bool = True) -> T:
        self._readonly = value
        return self

    def _editable_attrs(self, text: str) -> dict[str, Any]:
        attrs = self._field_attrs(text)
        attrs["readonly"] = self._readonly
        attrs["aria_readonly"] = flag(self._readonly)
        return attrs


class _SingleLine(_Editable):
    _pattern: str = ""
    _autocomplete: str = ""

    def pattern(self: L, value: str) -> L:
        self._pattern = value
        return self

    def autocomplete(self: L, value: str) -> L:
        self._autocomplete = value
        return self

    def _control(self, text: str) -> str:
        attrs = self._editable_attrs(text)
        return input_(
            self._control_css(),
            Attrs(
                type=self._input_type(),
                value=self.resolve_value(),
                pattern=self._pattern,
                autocomplete=self._autocomplete,
                **attrs,
            ),
        )


class TextInput(_SingleLine):
    kind: ClassVar[InputKind] = InputKind.TEXT
    _type: str = "text"

    def type(self, value: str) -> TextInput:
        """Set the HTML input type (``email``, ``tel``, ``url``, ``search`` ...)."""

        value = value.strip().lower()
        if value in _DEDICATED_TYPES:
            raise InputKindError(
                f"input type {value!r} has its own builder; use {_DEDICATED_TYPES[value]}"
            )
        self._type = value or "text"
        return self

    def _input_type(self) -> str:
        return self._type


class PasswordInput(_SingleLine):
    kind: ClassVar[InputKind] = InputKind.PASSWORD
    html_type: ClassVar[str] = "password"


class TextArea(_Editable):
    kind: ClassVar[InputKind] = InputKind.AREA
    _rows: int = DEFAULT_ROWS

    def rows(self, value: int) -> TextArea:
        self._rows = value
        return self

    def _control(self, text: str) -> str:
        rows = self._rows
        if isinstance(rows, bool) or not isinstance(rows, int) or rows <= 0:
            rows = DEFAULT_ROWS
        css = self._control_css(base=styles.AREA)
        attrs = self._editable_attrs(text)
        body = _html.escape(self.resolve_value(), quote=False)
        return textarea(css, Attrs(rows=rows, aria_multiline="true", **attrs))(body)


__all__ = [
    "DEFAULT_ROWS",
    "PasswordInput",
    "TextArea",
    "TextInput",
]
