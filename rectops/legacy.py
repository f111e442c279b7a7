"""Legacy static-helper names kept for existing call sites.

New code should import from ``rectops`` directly. ``above`` here is the old
stacking helper (source size kept, placed flush over the target), which is
not the same operation as ``rectops.above``.
"""

from __future__ import annotations

from rectops.alignment import (
    align_horizontally,
    align_horizontally_by_center,
    center_inside,
)
from rectops.geometry import Rect
from rectops.placement import above_all, left_of
from rectops.subdivision import bottom_half, left_half, right_half, top_half

center_inside_of = center_inside
align_horisontally = align_horizontally
align_horisontally_by_center = align_horizontally_by_center


def above(source: Rect, target: Rect) -> Rect:
    """Place ``source`` flush over ``target``, keeping its own size."""
    return above_all(source, target, 1)


__all__ = [
    "above",
    "align_horisontally",
    "align_horisontally_by_center",
    "bottom_half",
    "center_inside_of",
    "left_half",
    "left_of",
    "right_half",
    "top_half",
]
