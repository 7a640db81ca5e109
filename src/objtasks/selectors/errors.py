"""Selector builder error types."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objtasks.selectors.model import SelectorPart


class SelectorError(ValueError):
    """Base error for invalid selector construction."""


class DuplicateSelectorPartError(SelectorError):
    """Element, id or pseudo-element set twice on one simple selector."""

    def __init__(self, part: SelectorPart) -> None:
        super().__init__(
            f"{part.label} should not occur more than one time inside the selector"
        )
        self.part = part


class OutOfOrderSelectorPartError(SelectorError):
    """A part was added after a canonically later part."""

    def __init__(self, part: SelectorPart, later_part: SelectorPart) -> None:
        super().__init__(
            f"{part.label} cannot follow {later_part.label}; selector parts "
            "should be arranged in the following order: element, id, class, "
            "attribute, pseudo-class, pseudo-element"
        )
        self.part = part
        self.later_part = later_part
