"""Basic 2D geometry: vectors, axis-aligned boxes and hit masks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Vector2:
    """A 2D vector or point."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)


class InputMask:
    """Decides whether a point inside a box actually accepts input.

    The base mask answers with ``hitable`` for every point, which is false
    unless changed; subclasses refine the decision per point.
    """

    hitable: bool = False

    def is_hitable(self, x: float, y: float) -> bool:
        return self.hitable


@dataclass
class Box:
    """Axis-aligned rectangle; width and height are expected to be positive."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0
    mask: Optional[InputMask] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_vectors(cls, position: Vector2, size: Vector2) -> Box:
        return cls(position.x, position.y, size.x, size.y)

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def top_left(self) -> Vector2:
        return Vector2(self.left, self.top)

    @property
    def center(self) -> Vector2:
        return Vector2(self.left + self.width / 2, self.top + self.height / 2)

    @property
    def size(self) -> Vector2:
        return Vector2(self.width, self.height)

    def contains(self, box: Box) -> bool:
        """True if ``box`` lies entirely inside this box (edges included)."""
        return (
            self.left <= box.left
            and box.right <= self.right
            and self.top <= box.top
            and box.bottom <= self.bottom
        )

    def contains_point(self, x: float, y: float) -> bool:
        """True if the point lies inside this box or on its edge."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def intersects(self, box: Box) -> bool:
        """True if the interiors overlap; touching edges do not count."""
        return not (
            self.left >= box.right
            or self.right <= box.left
            or self.top >= box.bottom
            or self.bottom <= box.top
        )