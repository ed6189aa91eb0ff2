"""
Seating Layout Builder - Data Models

This module contains the data model classes for the seating layout.
This is the MODEL in MVC architecture.

Public API: geometry value types from models.transform, the layout store
from models.seating_layout, editor settings from models.editor_settings.
"""

from .transform import Vec2, ShapeKind, ResourceBounds, BoundingBox, Viewport
from .seating_layout import SeatingLayout, SeatingResource, normalize_rotation
from .editor_settings import EditorSettings

__all__ = [
    'Vec2', 'ShapeKind', 'ResourceBounds', 'BoundingBox', 'Viewport',
    'SeatingLayout', 'SeatingResource', 'normalize_rotation',
    'EditorSettings',
]
