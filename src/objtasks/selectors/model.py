"""Selector model: simple and combined selectors and their rendering.

A simple selector is filled slot by slot in canonical order::

    element#id.class[attr]:pseudo-class::pseudo-element

Class, attribute and pseudo-class slots take any number of values; the
other three take at most one. Order is enforced by a small state machine
whose state is the furthest slot reached so far.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, StrEnum
from typing import Union

from objtasks.selectors.errors import DuplicateSelectorPartError, OutOfOrderSelectorPartError

__all__ = [
    "Combinator",
    "CombinedSelector",
    "Selector",
    "SelectorPart",
    "SimpleSelector",
    "render",
]


class SelectorPart(IntEnum):
    """Slots of a simple selector, valued by canonical position."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    @property
    def repeatable(self) -> bool:
        return self in _REPEATABLE

    def wrap(self, value: str) -> str:
        return _TEMPLATES[self].format(value)


_TEMPLATES: dict[SelectorPart, str] = {
    SelectorPart.ELEMENT: "{}",
    SelectorPart.ID: "#{}",
    SelectorPart.CLASS: ".{}",
    SelectorPart.ATTRIBUTE: "[{}]",
    SelectorPart.PSEUDO_CLASS: ":{}",
    SelectorPart.PSEUDO_ELEMENT: "::{}",
}

_REPEATABLE = frozenset(
    {SelectorPart.CLASS, SelectorPart.ATTRIBUTE, SelectorPart.PSEUDO_CLASS}
)


class Combinator(StrEnum):
    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


class _Move(Enum):
    ALLOW = "allow"
    DUPLICATE = "duplicate"
    OUT_OF_ORDER = "out_of_order"


def _move_for(reached: SelectorPart | None, requested: SelectorPart) -> _Move:
    if reached is None or requested > reached:
        return _Move.ALLOW
    if requested == reached:
        return _Move.ALLOW if requested.repeatable else _Move.DUPLICATE
    return _Move.OUT_OF_ORDER


# (furthest slot reached, requested slot) -> verdict
_TRANSITIONS: dict[tuple[SelectorPart | None, SelectorPart], _Move] = {
    (reached, requested): _move_for(reached, requested)
    for reached in (None, *SelectorPart)
    for requested in SelectorPart
}


class SimpleSelector:
    """Mutable accumulator for one compound selector.

    Every mutator returns ``self`` so calls chain. A rejected call raises
    before touching any state.
    """

    def __init__(self) -> None:
        self._values: dict[SelectorPart, list[str]] = {}
        self._reached: SelectorPart | None = None

    # --- mutators -------------------------------------------------------------

    def element(self, value: str) -> SimpleSelector:
        return self._add(SelectorPart.ELEMENT, value)

    def id(self, value: str) -> SimpleSelector:
        return self._add(SelectorPart.ID, value)

    def class_(self, value: str) -> SimpleSelector:
        return self._add(SelectorPart.CLASS, value)

    def attr(self, value: str) -> SimpleSelector:
        return self._add(SelectorPart.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return self._add(SelectorPart.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return self._add(SelectorPart.PSEUDO_ELEMENT, value)

    def _add(self, part: SelectorPart, value: str) -> SimpleSelector:
        # A single-valued slot can be filled while a later slot is already
        # set, so check it before consulting the transition table.
        if not part.repeatable and part in self._values:
            raise DuplicateSelectorPartError(part)
        move = _TRANSITIONS[(self._reached, part)]
        if move is _Move.DUPLICATE:
            raise DuplicateSelectorPartError(part)
        if move is _Move.OUT_OF_ORDER:
            assert self._reached is not None
            raise OutOfOrderSelectorPartError(part, self._reached)
        self._values.setdefault(part, []).append(value)
        self._reached = part
        return self

    # --- read access ----------------------------------------------------------

    @property
    def parts(self) -> dict[SelectorPart, tuple[str, ...]]:
        """Raw values per populated slot, in canonical order."""
        return {part: tuple(self._values[part]) for part in SelectorPart if part in self._values}

    def stringify(self) -> str:
        return render(self)

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"SimpleSelector({render(self)!r})"


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator: ``left combinator right``."""

    left: Selector
    combinator: str
    right: Selector

    def stringify(self) -> str:
        return render(self)

    def __str__(self) -> str:
        return render(self)


Selector = Union[SimpleSelector, CombinedSelector]


def render(selector: Selector) -> str:
    """Render a selector tree to its canonical CSS text."""
    if isinstance(selector, CombinedSelector):
        return f"{render(selector.left)} {selector.combinator} {render(selector.right)}"
    if isinstance(selector, SimpleSelector):
        return "".join(
            part.wrap(value)
            for part, values in selector.parts.items()
            for value in values
        )
    raise TypeError(f"Not a selector: {type(selector).__name__}")
