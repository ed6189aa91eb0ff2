"""
Tests for pixel <-> layout conversion, pan, zoom and grid snapping.
"""
import pytest

from constants import CANVAS_WIDTH, CANVAS_HEIGHT, ZOOM_IN_FACTOR, ZOOM_OUT_FACTOR
from models.transform import Vec2, Viewport
from utils.coordinate_transforms import (
    client_to_layout, layout_units_per_pixel, pan_viewport, pixel_delta_to_layout,
    snap_to_grid, surface_to_layout, wheel_zoom_factor, zoom_viewport,
)


# ══════════════════════════════════════════════════════════════════════════
# Pixel conversion
# ══════════════════════════════════════════════════════════════════════════

class TestPixelConversion:

    def test_full_canvas_on_half_size_surface(self):
        assert layout_units_per_pixel(Viewport(), 600, 400) == (2, 2)

    def test_axes_scale_independently(self):
        scale_x, scale_y = layout_units_per_pixel(Viewport(0, 0, 300, 100), 600, 400)
        assert scale_x == pytest.approx(0.5)
        assert scale_y == pytest.approx(0.25)

    def test_unknown_surface_size_scales_by_one(self):
        assert layout_units_per_pixel(Viewport(), 0, -5) == (1, 1)
        assert pixel_delta_to_layout(7, -3, Viewport(), 0, 0) == (7, -3)

    def test_pixel_delta(self):
        assert pixel_delta_to_layout(10, -20, Viewport(), 600, 400) == (20, -40)

    def test_surface_point_includes_viewport_origin(self):
        point = surface_to_layout(100, 50, Viewport(200, 100, 600, 400), 1200, 800)
        assert point == Vec2(250, 125)

    def test_client_point(self):
        point = client_to_layout(160, 90, (10, 40, 600, 400), Viewport())
        assert point == Vec2(300, 100)


# ══════════════════════════════════════════════════════════════════════════
# Pan
# ══════════════════════════════════════════════════════════════════════════

class TestPan:

    def test_content_follows_pointer(self):
        viewport = pan_viewport(Viewport(300, 200, 600, 400), 30, -10, 1200, 800)
        assert viewport == Viewport(285, 205, 600, 400)

    def test_extent_unchanged(self):
        viewport = pan_viewport(Viewport(), 100, 100, 600, 400)
        assert (viewport.width, viewport.height) == (CANVAS_WIDTH, CANVAS_HEIGHT)


# ══════════════════════════════════════════════════════════════════════════
# Zoom
# ══════════════════════════════════════════════════════════════════════════

class TestZoom:

    def test_zoom_in_keeps_point_under_cursor(self):
        before = Viewport()
        cursor = (300, 150)
        anchor = surface_to_layout(*cursor, before, 600, 400)

        after = zoom_viewport(before, 0.5, *cursor, 600, 400)
        assert after.width == pytest.approx(600)
        assert after.height == pytest.approx(400)

        moved = surface_to_layout(*cursor, after, 600, 400)
        assert moved.x == pytest.approx(anchor.x)
        assert moved.y == pytest.approx(anchor.y)

    def test_zoom_out_past_canvas_shows_full_canvas(self):
        viewport = zoom_viewport(Viewport(100, 50, 1150, 780), ZOOM_OUT_FACTOR, 10, 10, 600, 400)
        assert viewport == Viewport(0, 0, CANVAS_WIDTH, CANVAS_HEIGHT)

    def test_zoom_out_at_full_canvas(self):
        assert zoom_viewport(Viewport(), ZOOM_OUT_FACTOR, 10, 10, 600, 400) == Viewport.full_canvas()

    def test_zoom_in_below_minimum_is_noop(self):
        viewport = Viewport(500, 300, 105, 105)
        assert zoom_viewport(viewport, ZOOM_IN_FACTOR, 50, 50, 600, 400) is viewport

    def test_unknown_surface_is_noop(self):
        viewport = Viewport(100, 100, 600, 400)
        assert zoom_viewport(viewport, ZOOM_IN_FACTOR, 0, 0, 0, 0) is viewport

    def test_wheel_direction(self):
        assert wheel_zoom_factor(120) == ZOOM_OUT_FACTOR
        assert wheel_zoom_factor(-120) == ZOOM_IN_FACTOR
        assert wheel_zoom_factor(0) is None
        assert wheel_zoom_factor(-1, zoom_in_factor=0.5) == 0.5


# ══════════════════════════════════════════════════════════════════════════
# Grid snapping
# ══════════════════════════════════════════════════════════════════════════

class TestSnapToGrid:

    @pytest.mark.parametrize("value,expected", [
        (0, 0), (9, 0), (10, 20), (29.9, 20), (30, 40), (-9, 0), (-10, 0), (-11, -20),
    ])
    def test_nearest_increment(self, value, expected):
        assert snap_to_grid(value, 20) == expected

    def test_non_positive_grid_passthrough(self):
        assert snap_to_grid(13.7, 0) == 13.7
