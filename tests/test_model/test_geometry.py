"""Tests for Point, Rectangle and Transform."""

import pytest

from hashicon.model.geometry import Point, Rectangle, Transform


class TestRectangle:
    def test_negative_width_raises(self):
        with pytest.raises(ValueError, match="width"):
            Rectangle(0, 0, -1, 5)

    def test_negative_height_raises(self):
        with pytest.raises(ValueError, match="height"):
            Rectangle(0, 0, 5, -1)

    def test_zero_size_is_empty(self):
        assert Rectangle(3, 3, 0, 10).is_empty

    def test_normalised_square_multiple_of_cells(self):
        rect = Rectangle(0, 0, 10, 7).normalised(4)
        assert rect == Rectangle(3.0, 1.5, 4, 4)

    def test_normalised_keeps_exact_square(self):
        rect = Rectangle(5, 5, 40, 40).normalised(4)
        assert rect == Rectangle(5, 5, 40, 40)

    def test_normalised_too_small(self):
        rect = Rectangle(0, 0, 3, 3).normalised(4)
        assert rect.width == 0
        assert rect.x == 1.5


class TestTransform:
    def test_rotation_taken_modulo_four(self):
        assert Transform(0, 0, 10, 5).rotation == 1
        assert Transform(0, 0, 10, -1).rotation == 3

    def test_identity_rotation(self):
        t = Transform(10, 20, 10, 0)
        assert t.transform_icon_point(1, 2) == Point(11, 22)

    def test_quarter_turn(self):
        t = Transform(10, 20, 10, 1)
        assert t.transform_icon_point(1, 2) == Point(18, 21)

    def test_half_turn(self):
        t = Transform(10, 20, 10, 2)
        assert t.transform_icon_point(1, 2) == Point(19, 28)

    def test_three_quarter_turn(self):
        t = Transform(10, 20, 10, 3)
        assert t.transform_icon_point(1, 2) == Point(12, 29)

    def test_corner_cycles_clockwise(self):
        corners = [
            Transform(0, 0, 10, r).transform_icon_point(0, 0) for r in range(4)
        ]
        assert corners == [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]

    def test_box_anchor_stays_top_left(self):
        t = Transform(10, 20, 10, 2)
        assert t.transform_icon_point(1, 2, 3, 3) == Point(16, 25)
