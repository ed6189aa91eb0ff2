"""Geometry data structures shared by the layout engine.

All values are in layout units (canvas space, Y-down) unless noted.
"""
from dataclasses import dataclass, replace

from constants import SHAPE_RECTANGLE, SHAPE_ELLIPSE, CANVAS_WIDTH, CANVAS_HEIGHT


class ShapeKind:
    """Table footprint variants."""
    RECTANGLE = SHAPE_RECTANGLE
    ELLIPSE = SHAPE_ELLIPSE

    ALL = (SHAPE_RECTANGLE, SHAPE_ELLIPSE)

    @classmethod
    def is_valid(cls, shape) -> bool:
        return shape in cls.ALL


@dataclass
class Vec2:
    """2D vector for coordinate pairs.

    Used for any x/y pair: canvas points, deltas, half-extents.
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))


@dataclass(frozen=True)
class ResourceBounds:
    """Geometric footprint of one table.

    shape_dim_x / shape_dim_y are half-extents: half-width/half-height for a
    rectangle, semi-axes for an ellipse. rotation is in degrees and may be
    any real value.
    """
    center_x: float
    center_y: float
    shape_dim_x: float
    shape_dim_y: float
    rotation: float = 0.0
    shape: str = SHAPE_RECTANGLE

    def with_center(self, x: float, y: float) -> 'ResourceBounds':
        return replace(self, center_x=x, center_y=y)

    def with_dims(self, width: float, height: float) -> 'ResourceBounds':
        return replace(self, shape_dim_x=width, shape_dim_y=height)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box, min <= max on both axes."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Vec2:
        return Vec2((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)

    def overlaps(self, other: 'BoundingBox') -> bool:
        """Inclusive overlap test (touching edges count)."""
        return (self.max_x >= other.min_x and other.max_x >= self.min_x and
                self.max_y >= other.min_y and other.max_y >= self.min_y)

    def fits_within(self, width: float = CANVAS_WIDTH, height: float = CANVAS_HEIGHT) -> bool:
        return self.min_x >= 0 and self.min_y >= 0 and self.max_x <= width and self.max_y <= height


EMPTY_BOX = BoundingBox(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Viewport:
    """Visible sub-rectangle of canvas space mapped onto the screen.

    width/height shrink when zoomed in.
    """
    x: float = 0.0
    y: float = 0.0
    width: float = CANVAS_WIDTH
    height: float = CANVAS_HEIGHT

    @classmethod
    def full_canvas(cls) -> 'Viewport':
        return cls(0.0, 0.0, CANVAS_WIDTH, CANVAS_HEIGHT)
