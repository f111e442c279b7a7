"""Halves and uniform grid subdivision."""

from __future__ import annotations

from numbers import Integral

from rectops.errors import reject_argument
from rectops.geometry import Rect
from rectops.logging import get_logger

_LOG = get_logger("rectops.subdivision")


def left_half(rect: Rect) -> Rect:
    """Return the left half, sharing the rect's origin."""
    return Rect(rect.x, rect.y, rect.width / 2, rect.height)


def right_half(rect: Rect) -> Rect:
    """Return the right half, starting at the horizontal midpoint."""
    return Rect(rect.x + rect.width / 2, rect.y, rect.width / 2, rect.height)


def top_half(rect: Rect) -> Rect:
    """Return the top half, sharing the rect's origin."""
    return Rect(rect.x, rect.y, rect.width, rect.height / 2)


def bottom_half(rect: Rect) -> Rect:
    """Return the bottom half, starting at the vertical midpoint."""
    return Rect(rect.x, rect.y + rect.height / 2, rect.width, rect.height / 2)


def cell(rect: Rect, columns: int, rows: int, col: int, row: int) -> Rect:
    """Return the zero-indexed ``(col, row)`` cell of a ``columns x rows`` grid.

    Raises ``InvalidArgumentError`` for non-integer arguments, non-positive
    grid dimensions or indices outside the grid.
    """
    _check_grid(columns, rows)
    _check_index("col", col, columns)
    _check_index("row", row, rows)
    cell_width = rect.width / columns
    cell_height = rect.height / rows
    return Rect(
        x=rect.x + col * cell_width,
        y=rect.y + row * cell_height,
        width=cell_width,
        height=cell_height,
    )


def cells(rect: Rect, columns: int, rows: int) -> tuple[Rect, ...]:
    """Return every grid cell in row-major order."""
    _check_grid(columns, rows)
    return tuple(
        cell(rect, columns, rows, col, row) for row in range(rows) for col in range(columns)
    )


def _check_integer(argument: str, value: object) -> None:
    if not isinstance(value, Integral):
        reject_argument(
            _LOG, argument, f"{argument} must be an integer, got {value!r}", value=value
        )


def _check_grid(columns: int, rows: int) -> None:
    _check_integer("columns", columns)
    _check_integer("rows", rows)
    if columns <= 0:
        reject_argument(
            _LOG, "columns", f"columns must be positive, got {columns}", columns=columns
        )
    if rows <= 0:
        reject_argument(_LOG, "rows", f"rows must be positive, got {rows}", rows=rows)


def _check_index(argument: str, index: int, count: int) -> None:
    _check_integer(argument, index)
    if not 0 <= index < count:
        reject_argument(
            _LOG,
            argument,
            f"{argument} {index} outside [0, {count})",
            index=index,
            count=count,
        )
