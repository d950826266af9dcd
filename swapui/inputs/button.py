"""Clickable button, submit/reset button and link-styled button."""
from __future__ import annotations

from typing import ClassVar

from .. import styles
from ..html import Attrs, a, button, classes, div, flag
from ..target import Target
from .base import Builder, InputKind


class Button(Builder):
    """Renders a ``div`` by default, a ``<button>`` after :meth:`submit` or
    :meth:`reset`, and an ``<a>`` after :meth:`href`.

    Positional attribute sets are emitted ahead of the builder's own ones.
    """

    kind: ClassVar[InputKind] = InputKind.BUTTON

    def __init__(self, *attrs: Attrs, target: Target | None = None) -> None:
        super().__init__(target=target)
        self._extra: list[Attrs] = list(attrs)
        self._tag = "div"
        self._color = ""

    def submit(self) -> Button:
        self._tag = "button"
        self._extra.append(Attrs(type="submit"))
        return self

    def reset(self) -> Button:
        self._tag = "button"
        self._extra.append(Attrs(type="reset"))
        return self

    def href(self, url: str) -> Button:
        self._tag = "a"
        self._extra.append(Attrs(href=url))
        return self

    def color(self, value: str) -> Button:
        self._color = value
        return self

    def render(self, text: str) -> str:
        state = self._state
        if not state.visible:
            return ""
        css = classes(
            styles.BTN,
            state.size,
            self._color,
            state.css,
            state.disabled and styles.DISABLED + " opacity-25",
        )
        aria_disabled = flag(state.disabled)
        if self._tag == "a":
            own = Attrs(id=self._target.id, aria_label=text, aria_disabled=aria_disabled)
            return a(css, *self._extra, own)(text)
        if self._tag == "div":
            own = Attrs(
                id=self._target.id,
                onclick=state.onclick,
                form=state.form_id or None,
                aria_label=text,
                aria_disabled=aria_disabled,
                role="button",
                tabindex="0",
            )
            return div(css, *self._extra, own)(text)
        own = Attrs(
            id=self._target.id,
            onclick=state.onclick,
            disabled=state.disabled,
            form=state.form_id or None,
            aria_label=text,
            aria_disabled=aria_disabled,
        )
        return button(css, *self._extra, own)(text)


__all__ = ["Button"]
