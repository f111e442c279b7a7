"""Placement of one rectangle relative to another."""

from __future__ import annotations

from rectops.geometry import Rect


def above(rect: Rect, other: Rect, distance: float = 0) -> Rect:
    """Return a strip of ``other``'s height ending ``distance`` above ``rect``.

    Horizontal extent comes from ``rect``; only the height is taken from
    ``other``.
    """
    return Rect(rect.x, rect.y - other.height - distance, rect.width, other.height)


def below(rect: Rect, other: Rect, distance: float = 0) -> Rect:
    """Return ``other``'s size placed ``distance`` under ``other`` at ``rect``'s x."""
    return Rect(rect.x, other.y_max + distance, other.width, other.height)


def left_of(rect: Rect, other: Rect, distance: float = 0) -> Rect:
    """Move ``rect`` so its right edge sits ``distance`` left of ``other``."""
    return Rect(other.x - rect.width - distance, rect.y, rect.width, rect.height)


def right_of(rect: Rect, other: Rect, distance: float = 0) -> Rect:
    """Move ``rect`` so its left edge sits ``distance`` right of ``other``."""
    return Rect(other.x_max + distance, rect.y, rect.width, rect.height)


def above_all(rect: Rect, other: Rect, count: int) -> Rect:
    """Move ``rect`` up ``count`` of its own heights from ``other``'s top edge."""
    return Rect(rect.x, other.y - rect.height * count, rect.width, rect.height)
