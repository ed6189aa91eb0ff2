"""
Seating Layout Builder - Boundary Clamping

Keeps every table's rotated bounding box inside the canvas:
- clamp_center_to_canvas: nearest valid center for one table
- clamp_delta_for_group: nearest valid shared translation for a selection
- clamp_resize_dimensions: largest valid half-extents for a resize

Invalid requests degrade to the nearest valid value; nothing here raises.
"""

import math
from typing import Sequence, Tuple

from constants import (
    CANVAS_WIDTH, CANVAS_HEIGHT, MIN_SHAPE_DIM, SHAPE_ELLIPSE,
    ELLIPSE_RESIZE_ITERATIONS,
)
from models.transform import ResourceBounds, Vec2
from utils.bounding import get_rotated_bounding_box, get_combined_bounding_box


def clamp_center_to_canvas(resource: ResourceBounds,
                           canvas_width: float = CANVAS_WIDTH,
                           canvas_height: float = CANVAS_HEIGHT) -> Vec2:
    """Clamp a proposed center so the table's bounding box stays on the canvas.

    Args:
        resource: Table with the proposed center
        canvas_width, canvas_height: Canvas extent

    Returns:
        Vec2 clamped center (unchanged if already inside)
    """
    box = get_rotated_bounding_box(resource)

    extent_left = resource.center_x - box.min_x
    extent_right = box.max_x - resource.center_x
    extent_top = resource.center_y - box.min_y
    extent_bottom = box.max_y - resource.center_y

    x = resource.center_x
    y = resource.center_y

    if x - extent_left < 0:
        x = extent_left
    if x + extent_right > canvas_width:
        x = canvas_width - extent_right
    if y - extent_top < 0:
        y = extent_top
    if y + extent_bottom > canvas_height:
        y = canvas_height - extent_bottom

    return Vec2(x, y)


def clamp_delta_for_group(resources: Sequence[ResourceBounds], dx: float, dy: float,
                          canvas_width: float = CANVAS_WIDTH,
                          canvas_height: float = CANVAS_HEIGHT) -> Tuple[float, float]:
    """Clamp a shared translation so the whole group stays on the canvas.

    The same delta applies to every member, so relative positions are
    preserved. Each violated edge pulls the delta back by exactly the overflow.

    Args:
        resources: Tables at their current positions
        dx, dy: Proposed translation
        canvas_width, canvas_height: Canvas extent

    Returns:
        (dx, dy) clamped translation
    """
    if not resources:
        return dx, dy

    box = get_combined_bounding_box(resources)

    new_min_x = box.min_x + dx
    new_max_x = box.max_x + dx
    new_min_y = box.min_y + dy
    new_max_y = box.max_y + dy

    clamped_dx = dx
    clamped_dy = dy

    if new_min_x < 0:
        clamped_dx = dx - new_min_x
    if new_max_x > canvas_width:
        clamped_dx = dx - (new_max_x - canvas_width)
    if new_min_y < 0:
        clamped_dy = dy - new_min_y
    if new_max_y > canvas_height:
        clamped_dy = dy - (new_max_y - canvas_height)

    return clamped_dx, clamped_dy


def clamp_resize_dimensions(resource: ResourceBounds, proposed_width: float, proposed_height: float,
                            canvas_width: float = CANVAS_WIDTH,
                            canvas_height: float = CANVAS_HEIGHT) -> Tuple[float, float]:
    """Clamp proposed half-extents so the resized table stays on the canvas.

    Both dimensions shrink by one uniform factor, keeping the proposed aspect
    ratio even when only one axis is being dragged. Rectangles solve for the
    factor directly; ellipses binary-search it because the rotated ellipse
    extents have no closed-form inverse.

    Args:
        resource: Table with its current center, rotation and shape
        proposed_width: Proposed half-width (shape_dim_x)
        proposed_height: Proposed half-height (shape_dim_y)
        canvas_width, canvas_height: Canvas extent

    Returns:
        (width, height) clamped half-extents, each at least MIN_SHAPE_DIM
        once clamping kicks in
    """
    proposed = resource.with_dims(proposed_width, proposed_height)
    if get_rotated_bounding_box(proposed).fits_within(canvas_width, canvas_height):
        return proposed_width, proposed_height

    rad = math.radians(resource.rotation)
    abs_cos = abs(math.cos(rad))
    abs_sin = abs(math.sin(rad))

    # Largest half-extent the center allows on each axis
    max_horiz = min(resource.center_x, canvas_width - resource.center_x)
    max_vert = min(resource.center_y, canvas_height - resource.center_y)

    if resource.shape == SHAPE_ELLIPSE:
        scale = _ellipse_fit_scale(proposed_width, proposed_height, abs_cos, abs_sin, max_horiz, max_vert)
    else:
        horiz = proposed_width * abs_cos + proposed_height * abs_sin
        vert = proposed_width * abs_sin + proposed_height * abs_cos
        horiz_scale = max_horiz / horiz if horiz > 0 else 1
        vert_scale = max_vert / vert if vert > 0 else 1
        scale = max(0, min(1, horiz_scale, vert_scale))

    return (max(MIN_SHAPE_DIM, proposed_width * scale),
            max(MIN_SHAPE_DIM, proposed_height * scale))


def _ellipse_fit_scale(width, height, abs_cos, abs_sin, max_horiz, max_vert,
                       iterations=ELLIPSE_RESIZE_ITERATIONS):
    """Binary search the largest uniform scale that keeps the rotated ellipse inside the limits."""
    largest = max(width, height)
    if largest <= 0:
        return 1

    lo = 0.0
    hi = largest
    for _ in range(iterations):
        mid = (lo + hi) / 2
        factor = mid / largest
        test_w = width * factor
        test_h = height * factor

        h_extent = math.sqrt(test_w * test_w * abs_cos * abs_cos + test_h * test_h * abs_sin * abs_sin)
        v_extent = math.sqrt(test_w * test_w * abs_sin * abs_sin + test_h * test_h * abs_cos * abs_cos)

        if h_extent <= max_horiz and v_extent <= max_vert:
            lo = mid
        else:
            hi = mid

    return lo / largest
