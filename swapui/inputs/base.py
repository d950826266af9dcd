"""Shared fluent state for every form-control builder."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar

from .. import styles
from ..html import Attrs, classes, div, flag, label
from ..target import Target
from ..values import NOT_FOUND, display_value, resolve_path


class InputKind(str, enum.Enum):
    """Discriminator carried by every builder as ``builder.kind``."""

    TEXT = "text"
    PASSWORD = "password"
    AREA = "area"
    NUMBER = "number"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    SELECT = "select"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    RADIO_BUTTONS = "radio_buttons"
    BUTTON = "button"


@dataclass(slots=True)
class InputState:
    """Options accumulated by the chained setters of one builder."""

    name: str
    data: Any = None
    css: str = ""
    css_label: str = ""
    css_input: str = ""
    size: str = styles.MD
    placeholder: str = ""
    fallback: str = ""
    onclick: str = ""
    onchange: str = ""
    form_id: str = ""
    visible: bool = True
    required: bool = False
    disabled: bool = False
    error: bool = False


B = TypeVar("B", bound="Builder")
C = TypeVar("C", bound="Control")
F = TypeVar("F", bound="Field")


class Builder:
    """Setters shared by every kind, buttons included.

    Setters mutate the builder and return it, so calls chain; ``render`` can
    be called any number of times and reflects the state at call time.
    """

    kind: ClassVar[InputKind]

    def __init__(self, name: str = "", data: Any = None, *, target: Target | None = None) -> None:
        self._state = InputState(name=name, data=data)
        self._target = target if target is not None else Target()

    @property
    def target(self) -> Target:
        return self._target

    @property
    def form_id(self) -> str:
        return self._state.form_id

    def css(self: B, *values: str) -> B:
        self._state.css = " ".join(values)
        return self

    def size(self: B, value: str) -> B:
        self._state.size = value
        return self

    def disabled(self: B, value: bool = True) -> B:
        self._state.disabled = value
        return self

    def form(self: B, form_id: str) -> B:
        """Associate the control with the ``<form>`` whose id is ``form_id``."""

        self._state.form_id = form_id
        return self

    def visible(self: B, value: bool) -> B:
        self._state.visible = value
        return self

    def click(self: B, code: str) -> B:
        self._state.onclick = code
        return self

    def render(self, text: str) -> str:
        raise NotImplementedError


class Control(Builder):
    """Base for controls bound to a value at ``name`` inside ``data``."""

    def __init__(self, name: str, data: Any = None, *, target: Target | None = None) -> None:
        super().__init__(name, data, target=target)

    @property
    def name(self) -> str:
        return self._state.name

    def required(self: C, value: bool = True) -> C:
        self._state.required = value
        return self

    def error(self: C, value: bool = True) -> C:
        self._state.error = value
        return self

    def change(self: C, code: str) -> C:
        self._state.onchange = code
        return self

    def resolve(self) -> object:
        """Return the raw bound value, or :data:`NOT_FOUND`."""

        if self._state.data is None:
            return NOT_FOUND
        return resolve_path(self._state.data, self._state.name)

    def _aria(self, text: str) -> dict[str, Any]:
        state = self._state
        return {
            "form": state.form_id or None,
            "aria_label": text,
            "aria_required": flag(state.required),
            "aria_disabled": flag(state.disabled),
            "aria_invalid": flag(state.error),
        }

    def _choice_wrapper_css(self) -> str:
        state = self._state
        return classes(
            state.css,
            state.size,
            state.disabled and styles.MUTED,
            state.required and styles.INVALID_IF,
            state.error and styles.INVALID,
        )


class Field(Control):
    """A labelled control whose value is shown from the bound data."""

    html_type: ClassVar[str] = "text"

    def css_label(self: F, *values: str) -> F:
        self._state.css_label = " ".join(values)
        return self

    def css_input(self: F, *values: str) -> F:
        self._state.css_input = " ".join(values)
        return self

    def placeholder(self: F, value: str) -> F:
        self._state.placeholder = value
        return self

    def value(self: F, value: str) -> F:
        """Fallback shown when the bound path cannot be resolved."""

        self._state.fallback = value
        return self

    def resolve_value(self) -> str:
        raw = self.resolve()
        return display_value(raw, self._input_type(), self._state.fallback)

    def render(self, text: str) -> str:
        if not self._state.visible:
            return ""
        return div(self._wrapper_css())(self._label(text), self._control(text))

    def _input_type(self) -> str:
        return self.html_type

    def _wrapper_css(self) -> str:
        return self._state.css

    def _label(self, text: str) -> str:
        state = self._state
        return label(state.css_label, Attrs(for_=self._target.id, required=state.required))(text)

    def _control_css(self, *extra: str, base: str = styles.INPUT) -> str:
        state = self._state
        return classes(
            base,
            state.size,
            *extra,
            state.css_input,
            state.disabled and styles.DISABLED,
        )

    def _field_attrs(self, text: str) -> dict[str, Any]:
        state = self._state
        attrs: dict[str, Any] = {
            "id": self._target.id,
            "name": state.name,
            "onclick": state.onclick,
            "onchange": state.onchange,
            "required": state.required,
            "disabled": state.disabled,
            "placeholder": state.placeholder,
        }
        attrs.update(self._aria(text))
        return attrs

    def _control(self, text: str) -> str:
        raise NotImplementedError


__all__ = [
    "Builder",
    "Control",
    "Field",
    "InputKind",
    "InputState",
]
