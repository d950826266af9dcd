"""Addressable regions and the swap intents an update transport applies to them."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable

from . import skeleton as _skeleton
from .ids import make_id


class Swap(str, enum.Enum):
    """How a transport applies new markup to a target region."""

    OUTLINE = "outline"
    INLINE = "inline"
    APPEND = "append"
    PREPEND = "prepend"


class SkeletonKind(str, enum.Enum):
    DEFAULT = "default"
    LIST = "list"
    COMPONENT = "component"
    PAGE = "page"
    FORM = "form"


@dataclass(frozen=True, slots=True)
class SwapIntent:
    """The ``{id, swap}`` record handed to an update transport."""

    id: str
    swap: Swap

    def as_dict(self) -> dict[str, str]:
        return {"id": self.id, "swap": self.swap.value}


@dataclass(frozen=True, slots=True)
class Target:
    """A stable region id plus its four precomputed swap intents.

    ``replace`` swaps the element's outer markup, ``render`` its inner
    content, and ``append``/``prepend`` insert relative to its children.
    """

    id: str = field(default_factory=make_id)
    replace: SwapIntent = field(init=False, repr=False)
    append: SwapIntent = field(init=False, repr=False)
    prepend: SwapIntent = field(init=False, repr=False)
    render: SwapIntent = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "replace", SwapIntent(self.id, Swap.OUTLINE))
        object.__setattr__(self, "append", SwapIntent(self.id, Swap.APPEND))
        object.__setattr__(self, "prepend", SwapIntent(self.id, Swap.PREPEND))
        object.__setattr__(self, "render", SwapIntent(self.id, Swap.INLINE))

    @classmethod
    def create(cls, id_source: Callable[[], str] | None = None) -> Target:
        """Build a target whose id comes from ``id_source`` (default: CSPRNG)."""

        return cls(id=(id_source or make_id)())

    def intents(self) -> tuple[SwapIntent, ...]:
        return (self.replace, self.append, self.prepend, self.render)

    def skeleton(self, kind: SkeletonKind | str | None = None) -> str:
        """Render placeholder markup rooted at this target's id."""

        try:
            resolved = SkeletonKind(kind) if kind is not None else SkeletonKind.DEFAULT
        except ValueError:
            resolved = SkeletonKind.DEFAULT
        if resolved is SkeletonKind.LIST:
            return _skeleton.listing(self, _skeleton.DEFAULT_LIST_COUNT)
        if resolved is SkeletonKind.COMPONENT:
            return _skeleton.component(self)
        if resolved is SkeletonKind.PAGE:
            return _skeleton.page(self)
        if resolved is SkeletonKind.FORM:
            return _skeleton.form(self)
        return _skeleton.default(self)


__all__ = [
    "SkeletonKind",
    "Swap",
    "SwapIntent",
    "Target",
]
