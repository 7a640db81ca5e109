"""Fluent entry points for building CSS selectors."""

from __future__ import annotations

import logging

from objtasks.selectors.model import CombinedSelector, Selector, SimpleSelector

__all__ = ["SelectorBuilder", "css_selector_builder"]

log = logging.getLogger(__name__)


class SelectorBuilder:
    """Facade whose part methods each start a fresh simple selector.

    Example::

        builder = SelectorBuilder()
        builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        # 'a[href$=".png"]:focus'
    """

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector().element(value)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().id(value)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector().class_(value)

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().attr(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_element(value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> CombinedSelector:
        """Join two selectors; *combinator* is echoed verbatim, unchecked."""
        log.debug("Combining selectors with %r", combinator)
        return CombinedSelector(left=left, combinator=combinator, right=right)


css_selector_builder = SelectorBuilder()
