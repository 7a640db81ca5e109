"""objtasks: shape value objects, a JSON codec, and a fluent CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from objtasks.codec import ParseError, SerializationError, decode, decode_structure, encode  # noqa: E402
from objtasks.config import CodecConfig  # noqa: E402
from objtasks.selectors import (  # noqa: E402
    DuplicateSelectorPartError,
    OutOfOrderSelectorPartError,
    css_selector_builder,
)
from objtasks.shapes import Circle, Rectangle, make_rectangle  # noqa: E402

__all__ = [
    "__version__",
    "Circle",
    "CodecConfig",
    "DuplicateSelectorPartError",
    "OutOfOrderSelectorPartError",
    "ParseError",
    "Rectangle",
    "SerializationError",
    "css_selector_builder",
    "decode",
    "decode_structure",
    "encode",
    "make_rectangle",
]
