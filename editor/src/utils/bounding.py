"""
Seating Layout Builder - Bounding Box Utilities

Axis-aligned bounding boxes for rotated table footprints, and unions of
several footprints for multi-selection operations.

These are pure functions with no UI dependencies. They never fail: every
finite input produces a valid box.
"""

import math
from typing import Iterable, Tuple

import numpy as np

from constants import SHAPE_ELLIPSE
from models.transform import BoundingBox, ResourceBounds, EMPTY_BOX


# Local corner signs, walked clockwise from top-left
_CORNER_SIGNS = np.array([
    [-1.0, -1.0],
    [1.0, -1.0],
    [1.0, 1.0],
    [-1.0, 1.0],
])


def rotation_matrix(rotation_deg: float) -> np.ndarray:
    """Standard 2D rotation matrix for an angle in degrees (Y-down canvas)."""
    rad = math.radians(rotation_deg)
    cos = math.cos(rad)
    sin = math.sin(rad)
    return np.array([[cos, -sin], [sin, cos]])


def rotated_half_extents(shape: str, dim_x: float, dim_y: float, rotation_deg: float) -> Tuple[float, float]:
    """Half-width and half-height of the rotated footprint's bounding box.

    Args:
        shape: SHAPE_RECTANGLE or SHAPE_ELLIPSE
        dim_x, dim_y: Half-extents (rectangle) or semi-axes (ellipse)
        rotation_deg: Rotation in degrees

    Returns:
        (half_width, half_height)
    """
    rad = math.radians(rotation_deg)
    cos = math.cos(rad)
    sin = math.sin(rad)

    if shape == SHAPE_ELLIPSE:
        # Rotated ellipse silhouette:
        #   half_w = sqrt(a^2 cos^2 + b^2 sin^2)
        #   half_h = sqrt(a^2 sin^2 + b^2 cos^2)
        a2 = dim_x * dim_x
        b2 = dim_y * dim_y
        cos2 = cos * cos
        sin2 = sin * sin
        return math.sqrt(a2 * cos2 + b2 * sin2), math.sqrt(a2 * sin2 + b2 * cos2)

    # Rectangle: rotate the 4 local corners, take min/max per axis
    corners = _CORNER_SIGNS * np.array([dim_x, dim_y])
    rotated = corners @ rotation_matrix(rotation_deg).T
    spans = rotated.max(axis=0) - rotated.min(axis=0)
    return float(spans[0]) / 2, float(spans[1]) / 2


def get_rotated_bounding_box(resource: ResourceBounds) -> BoundingBox:
    """Calculate the axis-aligned bounding box of a rotated table.

    Ellipses use the closed-form rotated-ellipse extents, which are never
    larger than the rectangle with the same half-extents.

    Args:
        resource: Table footprint

    Returns:
        BoundingBox around the rotated shape
    """
    half_w, half_h = rotated_half_extents(
        resource.shape, resource.shape_dim_x, resource.shape_dim_y, resource.rotation
    )
    return BoundingBox(
        min_x=resource.center_x - half_w,
        min_y=resource.center_y - half_h,
        max_x=resource.center_x + half_w,
        max_y=resource.center_y + half_h,
    )


def get_combined_bounding_box(resources: Iterable[ResourceBounds]) -> BoundingBox:
    """Union of the rotated bounding boxes of several tables.

    Args:
        resources: Table footprints (may be empty)

    Returns:
        Combined BoundingBox, or the degenerate (0, 0, 0, 0) box for no input
    """
    boxes = [get_rotated_bounding_box(r) for r in resources]
    if not boxes:
        return EMPTY_BOX

    return BoundingBox(
        min_x=min(b.min_x for b in boxes),
        min_y=min(b.min_y for b in boxes),
        max_x=max(b.max_x for b in boxes),
        max_y=max(b.max_y for b in boxes),
    )


def contains_point(resource: ResourceBounds, x: float, y: float) -> bool:
    """Test if a layout point lies on a table's rotated footprint (edges included)."""
    # Undo the rotation to test in the table's local frame
    local = rotation_matrix(resource.rotation).T @ np.array([x - resource.center_x, y - resource.center_y])
    local_x, local_y = float(local[0]), float(local[1])

    if resource.shape == SHAPE_ELLIPSE:
        if resource.shape_dim_x <= 0 or resource.shape_dim_y <= 0:
            return False
        return (local_x / resource.shape_dim_x) ** 2 + (local_y / resource.shape_dim_y) ** 2 <= 1

    return abs(local_x) <= resource.shape_dim_x and abs(local_y) <= resource.shape_dim_y
