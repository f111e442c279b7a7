"""Size and position transforms."""

from __future__ import annotations

from rectops.geometry import Rect, Vector2


def is_empty(rect: Rect) -> bool:
    """Return whether both size components are exactly zero."""
    return rect.width == 0 and rect.height == 0


def scale_by(rect: Rect, factor: float | Vector2) -> Rect:
    """Scale size by a uniform factor or per-axis vector, keeping position."""
    if isinstance(factor, Vector2):
        return Rect(rect.x, rect.y, rect.width * factor.x, rect.height * factor.y)
    return Rect(rect.x, rect.y, rect.width * factor, rect.height * factor)


def offset_by(rect: Rect, offset: Vector2) -> Rect:
    """Translate position by ``offset``, keeping size."""
    return Rect(rect.x + offset.x, rect.y + offset.y, rect.width, rect.height)


def with_size(rect: Rect, width: float, height: float) -> Rect:
    """Replace both size components, keeping position."""
    return Rect(rect.x, rect.y, width, height)


def with_width(rect: Rect, width: float) -> Rect:
    """Replace the width, keeping position and height."""
    return Rect(rect.x, rect.y, width, rect.height)


def with_height(rect: Rect, height: float) -> Rect:
    """Replace the height, keeping position and width."""
    return Rect(rect.x, rect.y, rect.width, height)


def with_position(rect: Rect, x: float | Vector2, y: float | None = None) -> Rect:
    """Move to ``(x, y)`` or to a ``Vector2`` position, keeping size."""
    if isinstance(x, Vector2):
        if y is not None:
            raise TypeError("with_position() takes a Vector2 or an x/y pair, not both")
        return Rect(x.x, x.y, rect.width, rect.height)
    if y is None:
        raise TypeError("with_position() missing y coordinate")
    return Rect(x, y, rect.width, rect.height)


def with_x_of(rect: Rect, other: Rect) -> Rect:
    """Take ``other``'s x, keeping everything else."""
    return Rect(other.x, rect.y, rect.width, rect.height)


def with_y_of(rect: Rect, other: Rect) -> Rect:
    """Take ``other``'s y, keeping everything else."""
    return Rect(rect.x, other.y, rect.width, rect.height)


def with_width_of(rect: Rect, other: Rect) -> Rect:
    """Take ``other``'s width, keeping everything else."""
    return Rect(rect.x, rect.y, other.width, rect.height)


def with_height_of(rect: Rect, other: Rect) -> Rect:
    """Take ``other``'s height, keeping everything else."""
    return Rect(rect.x, rect.y, rect.width, other.height)


def with_margin(
    rect: Rect,
    left: float,
    top: float | None = None,
    right: float | None = None,
    bottom: float | None = None,
) -> Rect:
    """Shrink inward by per-side margins.

    With only ``left`` given, the same margin applies to all four sides.
    """
    left, top, right, bottom = _sides("with_margin", left, top, right, bottom)
    return Rect(
        rect.x + left,
        rect.y + top,
        rect.width - left - right,
        rect.height - top - bottom,
    )


def with_padding(
    rect: Rect,
    left: float,
    top: float | None = None,
    right: float | None = None,
    bottom: float | None = None,
) -> Rect:
    """Expand outward by per-side padding; the inverse of ``with_margin``."""
    left, top, right, bottom = _sides("with_padding", left, top, right, bottom)
    return with_margin(rect, -left, -top, -right, -bottom)


def add_width(rect: Rect, delta: int) -> Rect:
    """Grow (or shrink, for negative ``delta``) the width."""
    return Rect(rect.x, rect.y, rect.width + delta, rect.height)


def add_height(rect: Rect, delta: int) -> Rect:
    """Grow (or shrink, for negative ``delta``) the height."""
    return Rect(rect.x, rect.y, rect.width, rect.height + delta)


def _sides(
    name: str,
    left: float,
    top: float | None,
    right: float | None,
    bottom: float | None,
) -> tuple[float, float, float, float]:
    if top is None and right is None and bottom is None:
        return left, left, left, left
    if top is None or right is None or bottom is None:
        raise TypeError(f"{name}() takes one uniform value or all four sides")
    return left, top, right, bottom
