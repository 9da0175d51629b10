"""Geometry primitives for page layout.

Coordinates are in PDF points with the origin at the top-left corner of the
page and y growing downwards, the convention the layout planner works in.
Renderers flip to their own origin.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: "Rect") -> bool:
        """Check if this rectangle overlaps another one (touching edges do not count).

        Args:
            other: Another Rect object

        Returns:
            True if rectangles overlap, False otherwise
        """
        return not (
            self.right <= other.left or
            self.left >= other.right or
            self.bottom <= other.top or
            self.top >= other.bottom
        )


@dataclass(frozen=True, slots=True)
class Margins:
    """Box margins, stored in CSS order (top, right, bottom, left)."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.top, self.right, self.bottom, self.left)

    def scaled(self, factor: float) -> "Margins":
        return Margins(
            top=self.top * factor,
            right=self.right * factor,
            bottom=self.bottom * factor,
            left=self.left * factor,
        )

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

    def is_non_negative(self) -> bool:
        return all(value >= 0 for value in self.as_tuple())
