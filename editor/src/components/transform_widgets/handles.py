"""Resize handle system - ABC-based handle architecture.

Each handle type is a class that knows:
- Where it sits on a (rotated) table, in layout units
- How to test if a pointer position hits it
- How a pointer delta changes the table's half-extents
- Which cursor to show while hovering it
"""

from abc import ABC, abstractmethod
import math

from constants import MIN_SHAPE_DIM, TRANSFORM_HANDLE_SIZE, TRANSFORM_HIT_TOLERANCE
from models.transform import Vec2


def transform_point(local_x, local_y, center_x, center_y, rotation_deg):
    """Rotate a point relative to a table center, then translate to layout space."""
    rad = math.radians(rotation_deg)
    cos = math.cos(rad)
    sin = math.sin(rad)
    return Vec2(center_x + local_x * cos - local_y * sin,
                center_y + local_x * sin + local_y * cos)


class Handle(ABC):
    """Abstract base class for resize handles.

    Subclasses set norm_x/norm_y: the handle's position normalized to the
    table's half-extents, before rotation. A zero component means the handle
    does not resize that axis.
    """

    handle_id = None
    norm_x = 0
    norm_y = 0

    def __init__(self, handle_size=TRANSFORM_HANDLE_SIZE, hit_tolerance=TRANSFORM_HIT_TOLERANCE):
        self.handle_size = handle_size
        self.hit_tolerance = hit_tolerance

    def position(self, resource):
        """Handle position in layout units for a ResourceBounds."""
        return transform_point(
            self.norm_x * resource.shape_dim_x,
            self.norm_y * resource.shape_dim_y,
            resource.center_x, resource.center_y, resource.rotation,
        )

    def hit_test(self, x, y, resource) -> bool:
        """Test if a layout-space point hits this handle."""
        pos = self.position(resource)
        return math.hypot(x - pos.x, y - pos.y) <= self.handle_size + self.hit_tolerance

    def propose(self, resource, dx, dy):
        """Half-extents proposed by dragging this handle by (dx, dy) layout units.

        The delta is applied in screen space regardless of rotation. Half of
        it goes to the half-extent since the table grows about its center.

        Returns:
            (width, height) each floored at MIN_SHAPE_DIM on the axes it changes
        """
        width = resource.shape_dim_x
        height = resource.shape_dim_y
        if self.norm_x:
            width = max(MIN_SHAPE_DIM, width + self.norm_x * dx / 2)
        if self.norm_y:
            height = max(MIN_SHAPE_DIM, height + self.norm_y * dy / 2)
        return width, height

    @abstractmethod
    def get_cursor(self):
        """Get the Qt cursor shape for this handle.

        Returns:
            Qt.CursorShape: Cursor to display when hovering over this handle
        """
        pass


class CornerHandle(Handle):
    """Corner handle for two-axis resizing."""

    _NORMS = {
        'tl': (-1, -1),
        'tr': (1, -1),
        'bl': (-1, 1),
        'br': (1, 1),
    }

    def __init__(self, corner_type, handle_size=TRANSFORM_HANDLE_SIZE, hit_tolerance=TRANSFORM_HIT_TOLERANCE):
        """
        Args:
            corner_type: 'tl', 'tr', 'bl', 'br'
            handle_size: Visual radius of handle in layout units
            hit_tolerance: Extra units for hit detection
        """
        super().__init__(handle_size, hit_tolerance)
        self.handle_id = corner_type
        self.norm_x, self.norm_y = self._NORMS[corner_type]

    def get_cursor(self):
        from PyQt5.QtCore import Qt
        if self.handle_id in ('tl', 'br'):
            return Qt.SizeFDiagCursor
        return Qt.SizeBDiagCursor


class EdgeHandle(Handle):
    """Edge handle for single-axis resizing."""

    _NORMS = {
        't': (0, -1),
        'r': (1, 0),
        'b': (0, 1),
        'l': (-1, 0),
    }

    def __init__(self, edge_type, handle_size=TRANSFORM_HANDLE_SIZE, hit_tolerance=TRANSFORM_HIT_TOLERANCE):
        """
        Args:
            edge_type: 't', 'r', 'b', 'l'
            handle_size: Visual radius of handle in layout units
            hit_tolerance: Extra units for hit detection
        """
        super().__init__(handle_size, hit_tolerance)
        self.handle_id = edge_type
        self.norm_x, self.norm_y = self._NORMS[edge_type]

    def get_cursor(self):
        from PyQt5.QtCore import Qt
        if self.handle_id in ('l', 'r'):
            return Qt.SizeHorCursor
        return Qt.SizeVerCursor


def create_handle(handle_id):
    """Build the handle object for a handle id.

    Raises:
        ValueError: If handle_id is not one of the 8 resize handles
    """
    if handle_id in CornerHandle._NORMS:
        return CornerHandle(handle_id)
    if handle_id in EdgeHandle._NORMS:
        return EdgeHandle(handle_id)
    raise ValueError(f"Unknown resize handle '{handle_id}'")
