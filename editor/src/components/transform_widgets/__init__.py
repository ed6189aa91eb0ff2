"""
Seating Layout Builder - Transform Widget Components

This package contains the table transform architecture:
- handles.py: ABC-based resize handle classes (CornerHandle, EdgeHandle)
- modes.py: Mode classes defining handle sets (SelectMode, PanMode)
- drag_context.py: Unified drag state management
"""

from .handles import Handle, CornerHandle, EdgeHandle, create_handle, transform_point
from .modes import TransformMode, SelectMode, PanMode, create_mode
from .drag_context import DragContext

__all__ = [
    'Handle', 'CornerHandle', 'EdgeHandle', 'create_handle', 'transform_point',
    'TransformMode', 'SelectMode', 'PanMode', 'create_mode',
    'DragContext',
]
