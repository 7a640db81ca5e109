"""Shape value objects: rectangles and circles with an on-demand area."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

__all__ = ["Rectangle", "Circle", "make_rectangle"]


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle.

    Inputs are stored as given; nothing checks that they are positive or
    even numeric.
    """

    width: Any
    height: Any

    @property
    def area(self) -> Any:
        return self.width * self.height

    def get_area(self) -> Any:
        """Return ``width * height``, computed at call time."""
        return self.area

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Rectangle:
        return cls(width=data["width"], height=data["height"])


@dataclass(frozen=True)
class Circle:
    radius: Any

    @property
    def area(self) -> float:
        return math.pi * self.radius**2

    def get_area(self) -> float:
        return self.area

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Circle:
        return cls(radius=data["radius"])


def make_rectangle(width: Any, height: Any) -> Rectangle:
    """Create a Rectangle with the given dimensions."""
    return Rectangle(width=width, height=height)
