import pytest

from rectops.geometry import Rect, Vector2
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


def test_is_empty_requires_both_sizes_zero() -> None:
    assert is_empty(Rect(5, 5, 0, 0))
    assert not is_empty(Rect(0, 0, 0, 1))
    assert not is_empty(Rect(0, 0, 1e-9, 0))


def test_scale_by_uniform_and_per_axis() -> None:
    rect = Rect(0, 0, 100, 100)
    assert scale_by(rect, 0.5).size == Vector2(50, 50)
    assert scale_by(rect, Vector2(0.5, 2)).size == Vector2(50, 200)
    assert scale_by(Rect(3, 4, 10, 20), 2).position == Vector2(3, 4)


def test_scale_by_one_is_identity_and_zero_is_empty() -> None:
    rect = Rect(1.5, -2.25, 7.75, 3.125)
    assert scale_by(rect, 1.0) == rect
    assert is_empty(scale_by(rect, 0))


def test_offset_by_moves_position_only() -> None:
    rect = Rect(0, 0, 100, 100)
    moved = offset_by(rect, Vector2(50, 50))
    assert moved.position == Vector2(50, 50)
    assert moved.size == rect.size
    assert offset_by(rect, Vector2(-50, -50)).position == Vector2(-50, -50)
    assert offset_by(rect, Vector2(0, 0)) == rect


def test_offset_by_round_trip() -> None:
    rect = Rect(10, 20, 30, 40)
    offset = Vector2(7, -3)
    assert offset_by(offset_by(rect, offset), -offset) == rect


def test_with_size_width_height() -> None:
    rect = Rect(10, 20, 30, 40)
    assert with_size(rect, 50, 60) == Rect(10, 20, 50, 60)
    assert with_size(rect, 0, 60) == Rect(10, 20, 0, 60)
    assert with_size(rect, 50, 0) == Rect(10, 20, 50, 0)
    assert with_width(rect, 50) == Rect(10, 20, 50, 40)
    assert with_width(rect, 0) == Rect(10, 20, 0, 40)
    assert with_height(rect, 50) == Rect(10, 20, 30, 50)
    assert with_height(rect, 0) == Rect(10, 20, 30, 0)


def test_with_position_accepts_pair_or_vector() -> None:
    rect = Rect(10, 20, 30, 40)
    assert with_position(rect, 50, 60) == Rect(50, 60, 30, 40)
    assert with_position(rect, Vector2(50, 60)) == Rect(50, 60, 30, 40)
    with pytest.raises(TypeError):
        with_position(rect, 50)
    with pytest.raises(TypeError):
        with_position(rect, Vector2(1, 2), 3)


def test_with_field_of_copies_single_field() -> None:
    rect = Rect(1, 2, 3, 4)
    other = Rect(10, 20, 30, 40)
    assert with_x_of(rect, other) == Rect(10, 2, 3, 4)
    assert with_y_of(rect, other) == Rect(1, 20, 3, 4)
    assert with_width_of(rect, other) == Rect(1, 2, 30, 4)
    assert with_height_of(rect, other) == Rect(1, 2, 3, 40)


def test_with_margin_shrinks_inward() -> None:
    rect = Rect(10, 20, 30, 40)
    assert with_margin(rect, 5, 10, 15, 20) == Rect(15, 30, 10, 10)
    assert with_margin(rect, 0, 0, 0, 0) == rect
    assert with_margin(rect, -5, -10, -15, -20) == Rect(5, 10, 50, 70)
    assert with_margin(rect, 5) == Rect(15, 25, 20, 30)


def test_with_padding_expands_outward() -> None:
    rect = Rect(10, 20, 30, 40)
    assert with_padding(rect, 5, 10, 15, 20) == Rect(5, 10, 50, 70)
    assert with_padding(rect, 0, 0, 0, 0) == rect
    assert with_padding(rect, -5, -10, -15, -20) == Rect(15, 30, 10, 10)
    assert with_padding(rect, 5) == Rect(5, 15, 40, 50)


def test_margin_then_padding_restores_rect() -> None:
    rect = Rect(10, 20, 30, 40)
    for amount in (0, 1, 7, -3, 25):
        shrunk = with_margin(rect, amount, amount, amount, amount)
        assert with_padding(shrunk, amount, amount, amount, amount) == rect
        assert with_padding(with_margin(rect, amount), amount) == rect


def test_margin_larger_than_rect_gives_negative_size() -> None:
    assert with_margin(Rect(0, 0, 10, 10), 8) == Rect(8, 8, -6, -6)


def test_partial_sides_are_rejected() -> None:
    rect = Rect(0, 0, 10, 10)
    with pytest.raises(TypeError):
        with_margin(rect, 1, 2)
    with pytest.raises(TypeError):
        with_padding(rect, 1, 2, 3)


def test_add_width_and_height_apply_signed_delta() -> None:
    rect = Rect(1, 2, 10, 20)
    assert add_width(rect, 5) == Rect(1, 2, 15, 20)
    assert add_width(rect, -15) == Rect(1, 2, -5, 20)
    assert add_height(rect, 5) == Rect(1, 2, 10, 25)
    assert add_height(rect, -5) == Rect(1, 2, 10, 15)
