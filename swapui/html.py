"""Element and attribute builders for server-side markup."""
from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import Callable, Iterable, Sequence, TypeVar

from .ids import make_id

T = TypeVar("T")

Child = str | bool | None

_HTML_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)
_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_LINE_COMMENT = re.compile(r"^[\t ]*//.*$", re.MULTILINE)
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class Attrs:
    """A typed set of recognised HTML attributes.

    Field order is serialisation order. Names map to HTML by dropping a
    trailing underscore and turning the remaining underscores into dashes, so
    ``class_`` becomes ``class`` and ``aria_label`` becomes ``aria-label``.
    """

    id: str | None = None
    href: str | None = None
    alt: str | None = None
    title: str | None = None
    src: str | None = None
    for_: str | None = None
    type: str | None = None
    class_: str | None = None
    style: str | None = None
    onclick: str | None = None
    onchange: str | None = None
    onsubmit: str | None = None
    value: str | None = None
    checked: bool | None = None
    selected: bool | None = None
    name: str | None = None
    placeholder: str | None = None
    autocomplete: str | None = None
    pattern: str | None = None
    cols: int | None = None
    rows: int | None = None
    width: int | None = None
    height: int | None = None
    min: str | None = None
    max: str | None = None
    target: str | None = None
    step: str | None = None
    required: bool | None = None
    disabled: bool | None = None
    readonly: bool | None = None
    form: str | None = None
    aria_label: str | None = None
    aria_required: str | None = None
    aria_disabled: str | None = None
    aria_readonly: str | None = None
    aria_invalid: str | None = None
    aria_describedby: str | None = None
    aria_checked: str | None = None
    aria_selected: str | None = None
    aria_valuemin: str | None = None
    aria_valuemax: str | None = None
    aria_valuenow: str | None = None
    aria_live: str | None = None
    aria_atomic: str | None = None
    aria_relevant: str | None = None
    aria_grabbed: str | None = None
    aria_dropeffect: str | None = None
    aria_multiline: str | None = None
    aria_hidden: str | None = None
    role: str | None = None
    tabindex: str | None = None


def _html_name(field_name: str) -> str:
    return field_name.rstrip("_").replace("_", "-")


_ATTR_NAMES: tuple[tuple[str, str], ...] = tuple(
    (f.name, _html_name(f.name)) for f in fields(Attrs)
)


def flag(value: bool) -> str:
    """Return the ``"true"``/``"false"`` token used by ARIA state attributes."""

    return "true" if value else "false"


def render_attributes(*attr_sets: Attrs | None) -> str:
    """Serialise attribute sets left to right into ``key="value"`` pairs.

    Falsy values are skipped, ``True`` renders as ``key="key"`` and double
    quotes inside values are escaped.
    """

    parts: list[str] = []
    for attrs in attr_sets:
        if attrs is None:
            continue
        for field_name, html_name in _ATTR_NAMES:
            value = getattr(attrs, field_name)
            if value is None or value is False or value == "" or value == 0:
                continue
            if value is True:
                parts.append(f'{html_name}="{html_name}"')
                continue
            parts.append(f'{html_name}="{_escape_quotes(str(value))}"')
    return " ".join(parts)


def _escape_quotes(value: str) -> str:
    return value.replace('"', "&quot;")


def _strip_comments(value: str) -> str:
    value = _HTML_COMMENT.sub(" ", value)
    value = _BLOCK_COMMENT.sub(" ", value)
    return _LINE_COMMENT.sub(" ", value)


def trim(value: str) -> str:
    """Remove authoring comments and collapse whitespace runs to one space."""

    return _WHITESPACE.sub(" ", _strip_comments(value)).strip()


def normalize(value: str) -> str:
    """Like :func:`trim` but also escape double quotes for attribute use."""

    return _escape_quotes(trim(value))


def classes(*values: str | None | bool) -> str:
    """Join the truthy class fragments and normalise the result."""

    return trim(" ".join(v for v in values if isinstance(v, str) and v))


def _opening(tag: str, css: str, attr_sets: Sequence[Attrs | None]) -> str:
    attrs = render_attributes(*attr_sets, Attrs(class_=classes(css)))
    if not attrs:
        return "<" + tag
    return "<" + tag + " " + attrs


def paired(tag: str) -> Callable[..., Callable[..., str]]:
    """Return a constructor for ``<tag ...>children</tag>`` elements.

    ``paired("div")(css, *attrs)(*children)`` renders the element; children
    are joined with single spaces and empty ones are skipped.
    """

    def build(css: str = "", *attr_sets: Attrs | None) -> Callable[..., str]:
        opening = _opening(tag, css, attr_sets) + ">"

        def children(*elements: Child) -> str:
            body = " ".join(e for e in elements if isinstance(e, str) and e)
            return opening + body + "</" + tag + ">"

        return children

    return build


def void(tag: str) -> Callable[..., str]:
    """Return a constructor for self-closing ``<tag .../>`` elements."""

    def build(css: str = "", *attr_sets: Attrs | None) -> str:
        return _opening(tag, css, attr_sets) + "/>"

    return build


a = paired("a")
i = paired("i")
p = paired("p")
div = paired("div")
span = paired("span")
form = paired("form")
textarea = paired("textarea")
select = paired("select")
option = paired("option")
ul = paired("ul")
li = paired("li")
label = paired("label")
canvas = paired("canvas")
button = paired("button")
nav = paired("nav")

img = void("img")
input_ = void("input")

SPACE = "&nbsp;"
FLEX1 = div("flex-1")()


def label_for(css: str, *attr_sets: Attrs | None) -> Callable[[str], str]:
    def render(text: str) -> str:
        return label(css, *attr_sets)(text)

    return render


def icon(css: str, *attr_sets: Attrs | None) -> str:
    return div(css, *attr_sets)()


def icon_start(css: str, text: str) -> str:
    return div("flex-1 flex items-center gap-2")(icon(css), FLEX1, div("text-center")(text), FLEX1)


def icon_left(css: str, text: str) -> str:
    return div("flex-1 flex items-center gap-2")(FLEX1, icon(css), div("text-center")(text), FLEX1)


def icon_right(css: str, text: str) -> str:
    return div("flex-1 flex items-center gap-2")(FLEX1, div("text-center")(text), icon(css), FLEX1)


def icon_end(css: str, text: str) -> str:
    return div("flex-1 flex items-center gap-2")(FLEX1, div("text-center")(text), FLEX1, icon(css))


def when(condition: bool, render: Callable[[], str]) -> str:
    """Call ``render`` only when ``condition`` holds."""

    if condition:
        return render()
    return ""


def when_all(condition: bool) -> Callable[..., str]:
    def render(*values: str) -> str:
        if condition:
            return " ".join(values)
        return ""

    return render


def map_join(items: Sequence[T], render: Callable[[T, int, bool, bool], str]) -> str:
    """Render every item with its index and first/last markers, space-joined."""

    last = len(items) - 1
    return " ".join(render(item, index, index == 0, index == last) for index, item in enumerate(items))


def for_range(start: int, stop: int, render: Callable[[int, bool, bool], str]) -> str:
    return " ".join(render(index, index == start, index == stop - 1) for index in range(start, stop))


_HIDDEN_STYLE = "display:none;visibility:hidden;position:absolute;left:-9999px;top:-9999px;"


def hidden(name: str, type: str, value: object) -> str:
    """Render a visually hidden input that still submits ``value``.

    ``type`` is kept so the receiving side can coerce the value; no ``id`` is
    emitted to avoid colliding with visible controls.
    """

    text = "" if value is None else str(value)
    return input_("", Attrs(type=type, name=name, value=text, style=_HIDDEN_STYLE))


def script(body: str | None) -> str:
    return "<script>" + (body or "") + "</script>"


_SUN_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" class="h-4 w-4" viewBox="0 0 24 24" fill="currentColor">'
    '<path d="M12 18a6 6 0 100-12 6 6 0 000 12z"/>'
    '<path d="M12 2v2m0 16v2M4 12H2m20 0h-2M5 5l1.5 1.5M17.5 17.5L19 19M5 19l1.5-1.5M17.5 6.5L19 5" '
    'stroke="currentColor" stroke-width="2" fill="none"/></svg>'
)
_MOON_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" class="h-4 w-4" viewBox="0 0 24 24" fill="currentColor">'
    '<path d="M21.752 15.002A9.718 9.718 0 0112 21.75 9.75 9.75 0 1112 2.25c.34 0 .676.017 1.008.05'
    'A7.5 7.5 0 0021.752 15z"/></svg>'
)
_DESKTOP_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" class="h-4 w-4" viewBox="0 0 24 24" fill="currentColor">'
    '<path d="M3 4h18v12H3z"/><path d="M8 20h8v-2H8z" /></svg>'
)
_THEME_BUTTON_CSS = (
    "inline-flex items-center gap-2 px-3 py-1.5 rounded-full border border-gray-300 bg-white "
    "text-gray-700 hover:bg-gray-100 dark:bg-gray-800 dark:text-gray-200 dark:border-gray-600 "
    "dark:hover:bg-gray-700 shadow-sm"
)
_THEME_SCRIPT = """(function(){
var btn = document.getElementById('%(id)s');
if (!btn) return;
var modes = ['system', 'light', 'dark'];
var icons = {system: '%(desktop)s', light: '%(sun)s', dark: '%(moon)s'};
var labels = {system: 'Auto', light: 'Light', dark: 'Dark'};
function current(){ try { return localStorage.getItem('theme') || 'system'; } catch (_) { return 'system'; } }
function show(mode){
  var icon = btn.querySelector('.icon');
  var label = btn.querySelector('.label');
  if (icon) icon.innerHTML = icons[mode] || icons.system;
  if (label) label.textContent = labels[mode] || labels.system;
}
function apply(mode){ if (typeof setTheme === 'function') setTheme(mode); show(mode); }
show(current());
btn.addEventListener('click', function(){
  var next = modes[(modes.indexOf(current()) + 1) %% modes.length];
  apply(next);
});
if (window.matchMedia) {
  var media = window.matchMedia('(prefers-color-scheme: dark)');
  var listener = function(){ if (current() === 'system') apply('system'); };
  if (media.addEventListener) media.addEventListener('change', listener);
  else if (media.addListener) media.addListener(listener);
}
})();"""


def theme_switcher(css: str = "") -> str:
    """Button cycling the page theme through system, light and dark.

    The page must define a global ``setTheme(mode)``; the chosen mode is read
    back from ``localStorage["theme"]``.
    """

    switch_id = "theme_" + make_id()
    body = _THEME_SCRIPT % {
        "id": switch_id,
        "desktop": _DESKTOP_SVG.replace("'", "\\'"),
        "sun": _SUN_SVG.replace("'", "\\'"),
        "moon": _MOON_SVG.replace("'", "\\'"),
    }
    return (
        button(classes(_THEME_BUTTON_CSS, css), Attrs(id=switch_id, type="button"))(
            span("icon")(_DESKTOP_SVG), span("label")("Auto")
        )
        + script(body)
    )


def join(parts: Iterable[str]) -> str:
    return " ".join(part for part in parts if part)


__all__ = [
    "Attrs",
    "FLEX1",
    "SPACE",
    "a",
    "button",
    "canvas",
    "classes",
    "div",
    "flag",
    "for_range",
    "form",
    "hidden",
    "i",
    "icon",
    "icon_end",
    "icon_left",
    "icon_right",
    "icon_start",
    "img",
    "input_",
    "join",
    "label",
    "label_for",
    "li",
    "map_join",
    "nav",
    "normalize",
    "option",
    "p",
    "paired",
    "render_attributes",
    "script",
    "select",
    "span",
    "textarea",
    "theme_switcher",
    "trim",
    "ul",
    "void",
    "when",
    "when_all",
]
