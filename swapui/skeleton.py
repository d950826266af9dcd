"""Shimmer placeholders shown before a target's real content arrives."""
from __future__ import annotations

from typing import TYPE_CHECKING

from .html import Attrs, div

if TYPE_CHECKING:
    from .target import Target

DEFAULT_LIST_COUNT = 5


def _root(target: Target, *children: str) -> str:
    return div("animate-pulse", Attrs(id=target.id))(*children)


def _bar(css: str) -> str:
    return div("bg-gray-200 " + css)()


def default(target: Target) -> str:
    return _root(
        target,
        _bar("h-5 rounded w-5/6 mb-2"),
        _bar("h-5 rounded w-2/3 mb-2"),
        _bar("h-5 rounded w-4/6"),
    )


def listing(target: Target, count: int = DEFAULT_LIST_COUNT) -> str:
    """Avatar-and-two-lines rows; ``count`` falls back to 5 unless a positive int."""

    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        count = DEFAULT_LIST_COUNT
    row = div("flex items-center gap-3 mb-3")(
        _bar("rounded-full h-10 w-10"),
        div("flex-1")(
            _bar("h-4 rounded w-5/6 mb-2"),
            _bar("h-4 rounded w-3/6"),
        ),
    )
    return _root(target, "".join(row for _ in range(count)))


def component(target: Target) -> str:
    return _root(
        target,
        _bar("h-6 rounded w-2/5 mb-4"),
        _bar("h-4 rounded w-full mb-2"),
        _bar("h-4 rounded w-5/6 mb-2"),
        _bar("h-4 rounded w-4/6"),
    )


def _card() -> str:
    return div("bg-white rounded-lg p-4 shadow mb-4")(
        _bar("h-5 rounded w-2/5 mb-3"),
        _bar("h-4 rounded w-full mb-2"),
        _bar("h-4 rounded w-5/6 mb-2"),
        _bar("h-4 rounded w-4/6"),
    )


def page(target: Target) -> str:
    return _root(target, _bar("h-8 rounded w-1/3 mb-6"), _card(), _card())


def _field(label_width: str, control_height: str) -> str:
    return div("")(
        _bar(f"h-4 rounded {label_width} mb-2"),
        _bar(f"{control_height} rounded w-full"),
    )


def form(target: Target) -> str:
    short = _field("w-3/6", "h-10")
    area = _field("w-2/6", "h-24")
    actions = div("flex justify-end gap-3 mt-6")(
        _bar("h-10 rounded w-24"),
        _bar("h-10 rounded w-32"),
    )
    return _root(
        target,
        div("bg-white rounded-lg p-4 shadow")(
            _bar("h-6 rounded w-2/5 mb-5"),
            div("grid grid-cols-1 md:grid-cols-2 gap-4")(
                div("")(short),
                div("")(short),
                div("")(area),
                div("")(short),
            ),
            actions,
        ),
    )


__all__ = [
    "DEFAULT_LIST_COUNT",
    "component",
    "default",
    "form",
    "listing",
    "page",
]
