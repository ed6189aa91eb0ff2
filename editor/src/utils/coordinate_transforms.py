"""Coordinate transformation utilities for the seating canvas.

Provides conversion between the two coordinate systems in play:
- Screen pixels of the drawing surface (Y-down, origin at surface top-left)
- Layout units of the canvas (Y-down, origin at canvas top-left)

The viewport is the sub-rectangle of layout space currently stretched over
the whole surface. X and Y scale independently (the surface does not
preserve aspect ratio).
"""
import math

from constants import (
    CANVAS_WIDTH, CANVAS_HEIGHT, MIN_VIEWPORT_EXTENT,
    ZOOM_IN_FACTOR, ZOOM_OUT_FACTOR,
)
from models.transform import Vec2, Viewport


def layout_units_per_pixel(viewport, surface_width, surface_height):
	"""Layout units covered by one surface pixel, per axis.

	Args:
		viewport: Current Viewport
		surface_width, surface_height: Surface size in pixels

	Returns:
		(scale_x, scale_y); an axis with unknown (<= 0) surface size scales by 1
	"""
	scale_x = viewport.width / surface_width if surface_width > 0 else 1
	scale_y = viewport.height / surface_height if surface_height > 0 else 1
	return scale_x, scale_y


def pixel_delta_to_layout(delta_x, delta_y, viewport, surface_width, surface_height):
	"""Convert a pointer delta in screen pixels to a layout-unit delta.

	Returns:
		(dx, dy) in layout units
	"""
	scale_x, scale_y = layout_units_per_pixel(viewport, surface_width, surface_height)
	return delta_x * scale_x, delta_y * scale_y


def surface_to_layout(pixel_x, pixel_y, viewport, surface_width, surface_height):
	"""Convert a point in surface pixels (relative to the surface top-left) to layout units.

	Returns:
		Vec2 layout position
	"""
	scale_x, scale_y = layout_units_per_pixel(viewport, surface_width, surface_height)
	return Vec2(pixel_x * scale_x + viewport.x, pixel_y * scale_y + viewport.y)


def client_to_layout(client_x, client_y, surface_rect, viewport):
	"""Convert a client/window position to layout units.

	Args:
		client_x, client_y: Pointer position in client pixels
		surface_rect: (left, top, width, height) of the surface in client pixels
		viewport: Current Viewport

	Returns:
		Vec2 layout position
	"""
	left, top, width, height = surface_rect
	return surface_to_layout(client_x - left, client_y - top, viewport, width, height)


def pan_viewport(viewport, delta_x, delta_y, surface_width, surface_height):
	"""Pan so the content follows the pointer.

	Args:
		viewport: Current Viewport
		delta_x, delta_y: Pointer movement in screen pixels

	Returns:
		New Viewport shifted by the negated, scaled delta
	"""
	dx, dy = pixel_delta_to_layout(delta_x, delta_y, viewport, surface_width, surface_height)
	return Viewport(viewport.x - dx, viewport.y - dy, viewport.width, viewport.height)


def zoom_viewport(viewport, factor, cursor_x, cursor_y, surface_width, surface_height,
                  canvas_width=CANVAS_WIDTH, canvas_height=CANVAS_HEIGHT,
                  min_extent=MIN_VIEWPORT_EXTENT):
	"""Scale the viewport extent by factor, keeping the point under the cursor fixed.

	factor > 1 zooms out (larger visible extent), factor < 1 zooms in.

	Args:
		viewport: Current Viewport
		factor: Extent scale factor
		cursor_x, cursor_y: Cursor position in surface pixels
		surface_width, surface_height: Surface size in pixels
		canvas_width, canvas_height: Zoom-out limit
		min_extent: Zoom-in limit (layout units, either axis)

	Returns:
		New Viewport. Zooming out past the canvas lands on the full canvas;
		zooming in past min_extent, or with an unknown surface size, returns
		the viewport unchanged.
	"""
	new_width = viewport.width * factor
	new_height = viewport.height * factor

	if new_width > canvas_width or new_height > canvas_height:
		return Viewport(0.0, 0.0, canvas_width, canvas_height)

	if new_width < min_extent or new_height < min_extent:
		return viewport

	if surface_width <= 0 or surface_height <= 0:
		return viewport

	anchor = surface_to_layout(cursor_x, cursor_y, viewport, surface_width, surface_height)
	new_x = anchor.x - (anchor.x - viewport.x) * factor
	new_y = anchor.y - (anchor.y - viewport.y) * factor
	return Viewport(new_x, new_y, new_width, new_height)


def wheel_zoom_factor(wheel_delta, zoom_in_factor=ZOOM_IN_FACTOR, zoom_out_factor=ZOOM_OUT_FACTOR):
	"""Map a wheel delta to an extent factor (down = out, up = in, zero = None).

	wheel_delta follows the DOM convention (positive = scroll down). Qt
	angleDelta().y() has the opposite sign; negate it before calling.
	"""
	if wheel_delta > 0:
		return zoom_out_factor
	if wheel_delta < 0:
		return zoom_in_factor
	return None


def snap_to_grid(value, grid_size):
	"""Snap a value to the nearest grid increment (halves round up)."""
	if grid_size <= 0:
		return value
	return math.floor(value / grid_size + 0.5) * grid_size
