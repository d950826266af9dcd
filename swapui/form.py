"""Associate controls scattered across a page with one hidden ``<form>``.

Browsers submit every control whose ``form`` attribute names a form's id
together with that form, wherever the control sits in the document. A
:class:`Form` issues that id and stamps it on each builder it creates.
"""
from __future__ import annotations

from typing import Any, Callable

from .errors import InputKindError
from .html import Attrs
from .html import form as form_tag
from .ids import make_id
from .inputs import (
    Button,
    Checkbox,
    DateInput,
    DateTimeInput,
    InputKind,
    NumberInput,
    PasswordInput,
    Radio,
    RadioButtons,
    SelectInput,
    TextArea,
    TextInput,
    TimeInput,
)
from .inputs.base import Control

_DATA_KINDS: dict[InputKind, type[Control]] = {
    InputKind.TEXT: TextInput,
    InputKind.PASSWORD: PasswordInput,
    InputKind.AREA: TextArea,
    InputKind.NUMBER: NumberInput,
    InputKind.DATE: DateInput,
    InputKind.TIME: TimeInput,
    InputKind.DATETIME: DateTimeInput,
    InputKind.SELECT: SelectInput,
    InputKind.CHECKBOX: Checkbox,
    InputKind.RADIO: Radio,
    InputKind.RADIO_BUTTONS: RadioButtons,
}


class Form:
    def __init__(self, submit: Attrs | None = None, *, id_source: Callable[[], str] | None = None) -> None:
        self.submit = submit
        self.form_id = (id_source or make_id)()

    def text(self, name: str, data: Any = None) -> TextInput:
        return TextInput(name, data).form(self.form_id)

    def password(self, name: str, data: Any = None) -> PasswordInput:
        return PasswordInput(name, data).form(self.form_id)

    def area(self, name: str, data: Any = None) -> TextArea:
        return TextArea(name, data).form(self.form_id)

    def number(self, name: str, data: Any = None) -> NumberInput:
        return NumberInput(name, data).form(self.form_id)

    def date(self, name: str, data: Any = None) -> DateInput:
        return DateInput(name, data).form(self.form_id)

    def time(self, name: str, data: Any = None) -> TimeInput:
        return TimeInput(name, data).form(self.form_id)

    def datetime(self, name: str, data: Any = None) -> DateTimeInput:
        return DateTimeInput(name, data).form(self.form_id)

    def select(self, name: str, data: Any = None) -> SelectInput:
        return SelectInput(name, data).form(self.form_id)

    def checkbox(self, name: str, data: Any = None) -> Checkbox:
        return Checkbox(name, data).form(self.form_id)

    def radio(self, name: str, data: Any = None) -> Radio:
        return Radio(name, data).form(self.form_id)

    def radio_buttons(self, name: str, data: Any = None) -> RadioButtons:
        return RadioButtons(name, data).form(self.form_id)

    def button(self, *attrs: Attrs) -> Button:
        return Button(*attrs).form(self.form_id)

    def field(self, kind: InputKind | str, name: str, data: Any = None) -> Control:
        """Build a data-bound control of ``kind`` associated with this form."""

        try:
            resolved = InputKind(kind)
        except ValueError:
            raise InputKindError(f"unknown input kind {kind!r}") from None
        builder = _DATA_KINDS.get(resolved)
        if builder is None:
            raise InputKindError(f"input kind {resolved.value!r} is not bound to data; use Form.button()")
        return builder(name, data).form(self.form_id)

    def render(self) -> str:
        """The hidden, childless form element the controls submit through."""

        own = Attrs(role="form", aria_label=f"Form {self.form_id}")
        return form_tag("hidden", Attrs(id=self.form_id), self.submit, own)()


__all__ = ["Form"]
