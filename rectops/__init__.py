"""Pure layout helpers over axis-aligned rectangles."""

from rectops.alignment import (
    align,
    align_and_scale,
    align_horizontally,
    align_horizontally_by_center,
    align_top_right,
    align_vertically,
    align_vertically_by_center,
    center_inside,
    center_x_inside,
    center_y_inside,
    inner_align_with_bottom_center,
    inner_align_with_bottom_left,
    inner_align_with_bottom_right,
    inner_align_with_center_left,
    inner_align_with_center_right,
    inner_align_with_upper_right,
)
from rectops.bounds import bounds_array, clip, cover, stretched_vertically_along
from rectops.errors import InvalidArgumentError
from rectops.geometry import Rect, Vector2
from rectops.legacy import center_inside_of
from rectops.placement import above, above_all, below, left_of, right_of
from rectops.sizing import (
    add_height,
    add_width,
    is_empty,
    offset_by,
    scale_by,
    with_height,
    with_height_of,
    with_margin,
    with_padding,
    with_position,
    with_size,
    with_width,
    with_width_of,
    with_x_of,
    with_y_of,
)
from rectops.subdivision import bottom_half, cell, cells, left_half, right_half, top_half

__all__ = [
    "InvalidArgumentError",
    "Rect",
    "Vector2",
    "above",
    "above_all",
    "add_height",
    "add_width",
    "align",
    "align_and_scale",
    "align_horizontally",
    "align_horizontally_by_center",
    "align_top_right",
    "align_vertically",
    "align_vertically_by_center",
    "below",
    "bottom_half",
    "bounds_array",
    "cell",
    "cells",
    "center_inside",
    "center_inside_of",
    "center_x_inside",
    "center_y_inside",
    "clip",
    "cover",
    "inner_align_with_bottom_center",
    "inner_align_with_bottom_left",
    "inner_align_with_bottom_right",
    "inner_align_with_center_left",
    "inner_align_with_center_right",
    "inner_align_with_upper_right",
    "is_empty",
    "left_half",
    "left_of",
    "offset_by",
    "right_half",
    "right_of",
    "scale_by",
    "stretched_vertically_along",
    "top_half",
    "with_height",
    "with_height_of",
    "with_margin",
    "with_padding",
    "with_position",
    "with_size",
    "with_width",
    "with_width_of",
    "with_x_of",
    "with_y_of",
]
