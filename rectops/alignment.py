"""Centering and edge alignment of a source rectangle against a target.

Every function keeps the source size unless noted and takes the remaining
fields from the target or from a centered/edge-aligned offset. In the legacy
names "horizontally" and "vertically" describe the alignment line, so
``align_horizontally`` moves along y and ``align_vertically`` moves along x.
"""

from __future__ import annotations

from rectops.geometry import Rect


def _centered_x(source: Rect, target: Rect) -> float:
    return target.x + (target.width - source.width) / 2


def _centered_y(source: Rect, target: Rect) -> float:
    return target.y + (target.height - source.height) / 2


def center_inside(rect: Rect, other: Rect) -> Rect:
    """Move ``rect`` so its center coincides with ``other``'s center."""
    return Rect(_centered_x(rect, other), _centered_y(rect, other), rect.width, rect.height)


def center_x_inside(rect: Rect, other: Rect) -> Rect:
    """Center ``rect`` horizontally inside ``other``, keeping its y."""
    return Rect(_centered_x(rect, other), rect.y, rect.width, rect.height)


def center_y_inside(rect: Rect, other: Rect) -> Rect:
    """Center ``rect`` vertically inside ``other``, keeping its x."""
    return Rect(rect.x, _centered_y(rect, other), rect.width, rect.height)


def align(source: Rect, target: Rect) -> Rect:
    """Move to the target's position."""
    return Rect(target.x, target.y, source.width, source.height)


def align_and_scale(source: Rect, target: Rect) -> Rect:
    """Take the target's position and size."""
    return Rect(target.x, target.y, target.width, target.height)


def align_horizontally(source: Rect, target: Rect) -> Rect:
    """Share the target's top edge."""
    return Rect(source.x, target.y, source.width, source.height)


def align_vertically(source: Rect, target: Rect) -> Rect:
    """Share the target's left edge."""
    return Rect(target.x, source.y, source.width, source.height)


def align_horizontally_by_center(source: Rect, target: Rect) -> Rect:
    """Share the target's horizontal center line."""
    return center_y_inside(source, target)


def align_vertically_by_center(source: Rect, target: Rect) -> Rect:
    """Share the target's vertical center line."""
    return center_x_inside(source, target)


def inner_align_with_bottom_right(source: Rect, target: Rect) -> Rect:
    """Place the source in the target's bottom-right corner."""
    return Rect(
        target.x_max - source.width, target.y_max - source.height, source.width, source.height
    )


def inner_align_with_bottom_left(source: Rect, target: Rect) -> Rect:
    """Place the source in the target's bottom-left corner."""
    return Rect(target.x, target.y_max - source.height, source.width, source.height)


def inner_align_with_upper_right(source: Rect, target: Rect) -> Rect:
    """Place the source in the target's top-right corner."""
    return Rect(target.x_max - source.width, target.y, source.width, source.height)


def inner_align_with_center_right(source: Rect, target: Rect) -> Rect:
    """Place the source against the target's right edge, vertically centered."""
    return align_horizontally_by_center(inner_align_with_bottom_right(source, target), target)


def inner_align_with_center_left(source: Rect, target: Rect) -> Rect:
    """Place the source against the target's left edge, vertically centered."""
    return align_horizontally_by_center(inner_align_with_bottom_left(source, target), target)


def inner_align_with_bottom_center(source: Rect, target: Rect) -> Rect:
    """Place the source on the target's bottom edge, horizontally centered."""
    centered = align_vertically_by_center(source, target)
    return Rect(centered.x, target.y_max - centered.height, centered.width, centered.height)


def align_top_right(source: Rect, target: Rect) -> Rect:
    """Pin the source's top-right corner to the target's top-right corner."""
    return inner_align_with_upper_right(source, target)
