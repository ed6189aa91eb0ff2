"""
Tests for rotated bounding boxes, group unions and point hit testing.
"""
import math
import pytest

from models.transform import BoundingBox, EMPTY_BOX
from utils.bounding import (
    contains_point, get_combined_bounding_box, get_rotated_bounding_box, rotated_half_extents,
)


# ══════════════════════════════════════════════════════════════════════════
# Single table
# ══════════════════════════════════════════════════════════════════════════

class TestRotatedBoundingBox:

    def test_unrotated_rectangle(self, rect):
        box = get_rotated_bounding_box(rect(100, 100, 50, 30))
        assert box == BoundingBox(50, 70, 150, 130)

    def test_rectangle_at_45_degrees(self, rect):
        box = get_rotated_bounding_box(rect(600, 400, 40, 40, 45))
        half = 40 * math.sqrt(2)
        assert box.min_x == pytest.approx(600 - half)
        assert box.max_x == pytest.approx(600 + half)
        assert box.min_y == pytest.approx(400 - half)
        assert box.max_y == pytest.approx(400 + half)
        assert box.width == pytest.approx(113.137, abs=1e-3)

    def test_rectangle_at_90_swaps_axes(self, rect):
        box = get_rotated_bounding_box(rect(300, 300, 60, 20, 90))
        assert box.width == pytest.approx(40)
        assert box.height == pytest.approx(120)

    @pytest.mark.parametrize("rotation", [0, 17, 45, 90, 133, 270, 359])
    def test_circle_is_rotation_invariant(self, ellipse, rotation):
        box = get_rotated_bounding_box(ellipse(300, 300, 40, 40, rotation))
        assert box.min_x == pytest.approx(260)
        assert box.max_x == pytest.approx(340)
        assert box.min_y == pytest.approx(260)
        assert box.max_y == pytest.approx(340)

    def test_unrotated_ellipse(self, ellipse):
        box = get_rotated_bounding_box(ellipse(300, 200, 70, 25))
        assert box == BoundingBox(230, 175, 370, 225)

    @pytest.mark.parametrize("rotation", [20, 45, 70, 120])
    def test_rotated_ellipse_tighter_than_rectangle(self, rect, ellipse, rotation):
        e = get_rotated_bounding_box(ellipse(500, 400, 80, 30, rotation))
        r = get_rotated_bounding_box(rect(500, 400, 80, 30, rotation))
        assert e.width < r.width
        assert e.height < r.height

    @pytest.mark.parametrize("rotation", [0, 90, 180])
    def test_ellipse_matches_rectangle_at_right_angles(self, rect, ellipse, rotation):
        e = get_rotated_bounding_box(ellipse(500, 400, 80, 30, rotation))
        r = get_rotated_bounding_box(rect(500, 400, 80, 30, rotation))
        assert e.width == pytest.approx(r.width)
        assert e.height == pytest.approx(r.height)

    def test_box_centered_on_table(self, rect):
        box = get_rotated_bounding_box(rect(321, 123, 33, 12, 61))
        assert box.center.x == pytest.approx(321)
        assert box.center.y == pytest.approx(123)

    def test_zero_size_is_a_point(self, rect):
        box = get_rotated_bounding_box(rect(10, 20, 0, 0, 30))
        assert box.width == pytest.approx(0)
        assert box.height == pytest.approx(0)

    def test_half_extents_are_floats(self):
        half_w, half_h = rotated_half_extents('RECTANGLE', 10, 20, 0)
        assert isinstance(half_w, float)
        assert (half_w, half_h) == pytest.approx((10, 20))


# ══════════════════════════════════════════════════════════════════════════
# Groups
# ══════════════════════════════════════════════════════════════════════════

class TestCombinedBoundingBox:

    def test_empty_input(self):
        assert get_combined_bounding_box([]) == EMPTY_BOX

    def test_single_matches_rotated_box(self, rect):
        table = rect(400, 300, 25, 45, 33)
        assert get_combined_bounding_box([table]) == get_rotated_bounding_box(table)

    def test_union_of_two(self, rect):
        box = get_combined_bounding_box([rect(100, 100, 20, 20), rect(500, 300, 40, 10)])
        assert box == BoundingBox(80, 80, 540, 310)

    def test_contains_every_member(self, rect, ellipse):
        members = [rect(100, 600, 30, 10, 15), ellipse(900, 150, 50, 20, 80), rect(650, 420, 5, 70, 45)]
        combined = get_combined_bounding_box(members)
        for member in members:
            box = get_rotated_bounding_box(member)
            assert combined.min_x <= box.min_x and combined.max_x >= box.max_x
            assert combined.min_y <= box.min_y and combined.max_y >= box.max_y


# ══════════════════════════════════════════════════════════════════════════
# Hit testing
# ══════════════════════════════════════════════════════════════════════════

class TestContainsPoint:

    def test_rectangle_inside_and_outside(self, rect):
        table = rect(100, 100, 50, 20)
        assert contains_point(table, 140, 110)
        assert contains_point(table, 150, 120)  # edge
        assert not contains_point(table, 140, 125)

    def test_rotated_rectangle(self, rect):
        table = rect(100, 100, 50, 10, 90)
        assert contains_point(table, 100, 145)
        assert not contains_point(table, 145, 100)

    def test_ellipse_excludes_corners(self, ellipse):
        table = ellipse(100, 100, 40, 40)
        assert contains_point(table, 100, 140)
        assert not contains_point(table, 138, 138)

    def test_degenerate_ellipse(self, ellipse):
        assert not contains_point(ellipse(100, 100, 0, 10), 100, 100)
