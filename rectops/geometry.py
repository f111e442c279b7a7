"""Rectangle and vector value types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector2:
    """Two-component offset, scale or position value."""

    x: float
    y: float

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle with a top-left origin in Y-down space.

    Sizes are not normalized: negative width or height is kept as given and
    propagates through every operation.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def x_max(self) -> float:
        return self.x + self.width

    @property
    def y_max(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Vector2:
        return Vector2(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def position(self) -> Vector2:
        return Vector2(self.x, self.y)

    @property
    def size(self) -> Vector2:
        return Vector2(self.width, self.height)

    def contains(self, px: float, py: float) -> bool:
        """Return whether a point is inside the rectangle."""
        return self.x <= px <= self.x_max and self.y <= py <= self.y_max
