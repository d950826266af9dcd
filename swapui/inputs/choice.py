"""Controls that pick among fixed values: select, checkbox and radios."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable, Sequence

from .. import styles
from ..html import Attrs, classes, div, flag, input_, label, option, render_attributes, select
from ..values import NOT_FOUND, stringify
from .base import Control, Field, InputKind

_CHOICE_LABEL = "flex items-center gap-2 cursor-pointer select-none"
_PILL = "px-3 py-2 border rounded cursor-pointer select-none"
_PILL_ACTIVE = "bg-blue-700 text-white"


@dataclass(frozen=True, slots=True)
class Option:
    """One selectable entry: ``id`` is submitted, ``value`` is displayed."""

    id: str
    value: str


OptionLike = Option | tuple[str, str]


def _as_options(values: Iterable[OptionLike]) -> list[Option]:
    options: list[Option] = []
    for item in values:
        if isinstance(item, Option):
            options.append(item)
        else:
            key, text = item
            options.append(Option(str(key), str(text)))
    return options


def _blank_option(text: str) -> str:
    # value="" has to be spelled out; attribute rendering drops empty strings.
    attrs = render_attributes(Attrs(role="option", aria_selected="false"))
    return '<option value="" ' + attrs + ">" + text + "</option>"


class SelectInput(Field):
    kind: ClassVar[InputKind] = InputKind.SELECT

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._options: list[Option] = []
        self._empty = False
        self._empty_text = ""

    def options(self, values: Iterable[OptionLike]) -> SelectInput:
        self._options = _as_options(values)
        return self

    def empty(self) -> SelectInput:
        """Offer a blank choice ahead of the options."""

        self._empty = True
        return self

    def empty_text(self, text: str) -> SelectInput:
        self._empty_text = text
        self._empty = True
        return self

    def _wrapper_css(self) -> str:
        state = self._state
        return classes(state.css, state.required and styles.INVALID_IF, state.error and styles.INVALID)

    def _control(self, text: str) -> str:
        state = self._state
        selected = self.resolve_value()
        entries: list[str] = []
        if state.placeholder:
            entries.append(_blank_option(state.placeholder))
        if self._empty:
            entries.append(_blank_option(self._empty_text))
        for item in self._options:
            chosen = item.id == selected
            entries.append(
                option("", Attrs(value=item.id, selected=chosen, role="option", aria_selected=flag(chosen)))(
                    item.value
                )
            )
        attrs = self._field_attrs(text)
        del attrs["placeholder"]
        return select(self._control_css(), Attrs(role="listbox", **attrs))(" ".join(entries))


class Checkbox(Control):
    kind: ClassVar[InputKind] = InputKind.CHECKBOX

    def is_checked(self) -> bool:
        return bool(self.resolve())

    def render(self, text: str) -> str:
        state = self._state
        if not state.visible:
            return ""
        checked = self.is_checked()
        control = input_(
            "cursor-pointer select-none",
            Attrs(
                id=self._target.id,
                type="checkbox",
                name=state.name,
                onclick=state.onclick,
                onchange=state.onchange,
                checked=checked,
                required=state.required,
                disabled=state.disabled,
                aria_checked=flag(checked),
                role="checkbox",
                **self._aria(text),
            ),
        )
        body = label(_CHOICE_LABEL, Attrs(for_=self._target.id))(control + " " + text)
        return div(self._choice_wrapper_css())(body)


class Radio(Control):
    kind: ClassVar[InputKind] = InputKind.RADIO

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._css_label = ""
        self._value = ""

    def css_label(self, *values: str) -> Radio:
        self._css_label = " ".join(values)
        return self

    def value(self, value: str) -> Radio:
        """The value this radio submits and is checked for."""

        self._value = value
        return self

    def is_checked(self) -> bool:
        resolved = self.resolve()
        return resolved is not NOT_FOUND and stringify(resolved) == self._value

    def render(self, text: str) -> str:
        state = self._state
        if not state.visible:
            return ""
        checked = self.is_checked()
        control = input_(
            "hover:cursor-pointer",
            Attrs(
                id=self._target.id,
                type="radio",
                name=state.name,
                value=self._value,
                onclick=state.onclick,
                onchange=state.onchange,
                checked=checked,
                required=state.required,
                disabled=state.disabled,
                aria_checked=flag(checked),
                role="radio",
                **self._aria(text),
            ),
        )
        css = classes(_CHOICE_LABEL, self._css_label)
        body = label(css, Attrs(for_=self._target.id))(control + " " + text)
        return div(self._choice_wrapper_css())(body)


class RadioButtons(Control):
    """A group of pill-styled radios sharing one name.

    The group's Target addresses the radiogroup container and its label.
    """

    kind: ClassVar[InputKind] = InputKind.RADIO_BUTTONS

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._options: list[Option] = []

    def options(self, values: Iterable[OptionLike]) -> RadioButtons:
        self._options = _as_options(values)
        return self

    def active(self) -> Option | None:
        """Return the first option equal to the bound value."""

        resolved = self.resolve()
        if resolved is NOT_FOUND:
            return None
        selected = stringify(resolved)
        for item in self._options:
            if item.id == selected:
                return item
        return None

    def _pill(self, item: Option, active: bool) -> str:
        state = self._state
        control = input_(
            "",
            Attrs(
                type="radio",
                name=state.name,
                value=item.id,
                onclick=state.onclick,
                onchange=state.onchange,
                checked=active,
                required=state.required,
                disabled=state.disabled,
                form=state.form_id or None,
                aria_label=item.value,
                aria_checked=flag(active),
                role="radio",
            ),
        )
        return label(classes(_PILL, active and _PILL_ACTIVE))(control + " " + item.value)

    def render(self, text: str) -> str:
        state = self._state
        if not state.visible:
            return ""
        current = self.active()
        pills: Sequence[str] = [self._pill(item, item is current) for item in self._options]
        heading = label("font-bold", Attrs(for_=self._target.id, required=state.required))(text)
        aria = self._aria(text)
        del aria["form"]
        group = div("flex gap-2 flex-wrap", Attrs(id=self._target.id, role="radiogroup", **aria))("".join(pills))
        wrapper = classes(state.css, state.required and styles.INVALID_IF, state.error and styles.INVALID)
        return div(wrapper)(heading, group)


__all__ = [
    "Checkbox",
    "Option",
    "OptionLike",
    "Radio",
    "RadioButtons",
    "SelectInput",
]
