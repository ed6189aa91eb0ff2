"""UI components for the Seating Layout Builder

This package contains the Qt-facing pieces, organized into subpackages:
- canvas_widgets: Canvas input mixins (zoom/pan)
- transform_widgets: Resize handles, interaction modes, drag state

Qt widgets are imported from their modules directly.
"""
