"""Clipping, bounding-box union and edge stretching."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from rectops.errors import reject_argument
from rectops.geometry import Rect
from rectops.logging import get_logger

_LOG = get_logger("rectops.bounds")


def bounds_array(rects: Iterable[Rect]) -> np.ndarray:
    """Build an ``(N, 4)`` array of ``[x, y, x_max, y_max]`` rows."""
    rows = [(rect.x, rect.y, rect.x_max, rect.y_max) for rect in rects]
    return np.array(rows, dtype=np.float64).reshape(len(rows), 4)


def clip(source: Rect, target: Rect) -> Rect:
    """Clamp ``source``'s position into ``target`` and trim its far edges.

    The trimmed size is measured from the unclamped source position, so a
    source lying past the target's far edge ends up with a negative size.
    """
    x = source.x
    if source.x < target.x:
        x = target.x
    if source.x > target.x_max:
        x = target.x_max

    y = source.y
    if source.y < target.y:
        y = target.y
    if source.y > target.y_max:
        y = target.y_max

    width = source.width
    if x + source.width > target.x_max:
        width = target.x_max - source.x

    height = source.height
    if y + source.height > target.y_max:
        height = target.y_max - source.y

    return Rect(x, y, width, height)


def cover(source: Rect, *targets: Rect) -> Rect:
    """Return the bounding box enclosing every rectangle in ``targets``.

    Targets are passed positionally: ``cover(source, a, b)`` or
    ``cover(source, *rects)``. ``source`` does not contribute to the result.
    Raises ``InvalidArgumentError`` when no target is given.
    """
    if not targets:
        reject_argument(_LOG, "targets", "cover() needs at least one target rectangle")
    for target in targets:
        if not isinstance(target, Rect):
            reject_argument(
                _LOG,
                "targets",
                f"cover() targets must be Rect values, got {type(target).__name__}",
                target_type=type(target).__name__,
            )
    bounds = bounds_array(targets)
    x = float(bounds[:, 0].min())
    y = float(bounds[:, 1].min())
    width = float((bounds[:, 2] - x).max())
    height = float((bounds[:, 3] - y).max())
    return Rect(x, y, width, height)


def stretched_vertically_along(source: Rect, target: Rect) -> Rect:
    """Extend ``source`` down (or up) to end at ``target``'s bottom edge."""
    return Rect(source.x, source.y, source.width, target.y_max - source.y)
