"""CSS selector builder with ordered, validated selector parts."""

from objtasks.selectors.builder import SelectorBuilder, css_selector_builder
from objtasks.selectors.errors import (
    DuplicateSelectorPartError,
    OutOfOrderSelectorPartError,
    SelectorError,
)
from objtasks.selectors.model import (
    Combinator,
    CombinedSelector,
    Selector,
    SelectorPart,
    SimpleSelector,
    render,
)

__all__ = [
    "Combinator",
    "CombinedSelector",
    "DuplicateSelectorPartError",
    "OutOfOrderSelectorPartError",
    "Selector",
    "SelectorBuilder",
    "SelectorError",
    "SelectorPart",
    "SimpleSelector",
    "css_selector_builder",
    "render",
]
