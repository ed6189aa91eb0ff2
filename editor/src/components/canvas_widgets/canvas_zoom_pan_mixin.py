"""Mixin for handling zoom and pan on the seating canvas.

Provides viewport navigation including:
- Zoom in/out/reset with zoom-to-cursor (Ctrl+wheel)
- Pan with middle-button drag
"""

from PyQt5.QtCore import Qt

from models.transform import Viewport
from utils.coordinate_transforms import pan_viewport, wheel_zoom_factor, zoom_viewport
from constants import CANVAS_WIDTH, ZOOM_IN_FACTOR, ZOOM_OUT_FACTOR


class CanvasZoomPanMixin:
    """Mixin providing zoom and pan functionality for canvas."""

    # Expected state variables (initialized in main class):
    # - viewport: Viewport
    # - zoom_in_factor, zoom_out_factor: float
    # - is_panning: bool
    # - last_mouse_pos: QPoint
    # - viewportChanged: pyqtSignal()

    zoom_in_factor = ZOOM_IN_FACTOR
    zoom_out_factor = ZOOM_OUT_FACTOR

    def zoom_at(self, factor, cursor_pos=None):
        """Scale the viewport extent by factor around a surface point (widget center by default)."""
        if cursor_pos is None:
            cursor_x, cursor_y = self.width() / 2, self.height() / 2
        else:
            cursor_x, cursor_y = cursor_pos.x(), cursor_pos.y()

        new_viewport = zoom_viewport(self.viewport, factor, cursor_x, cursor_y,
                                     self.width(), self.height())
        self._set_viewport(new_viewport)

    def zoom_in(self, cursor_pos=None):
        self.zoom_at(self.zoom_in_factor, cursor_pos)

    def zoom_out(self, cursor_pos=None):
        self.zoom_at(self.zoom_out_factor, cursor_pos)

    def zoom_reset(self):
        """Show the whole canvas."""
        self._set_viewport(Viewport.full_canvas())

    def get_zoom_percent(self):
        """Get current zoom percentage (100 = whole canvas visible)."""
        return int(round(CANVAS_WIDTH / self.viewport.width * 100))

    def _set_viewport(self, new_viewport):
        if new_viewport == self.viewport:
            return
        self.viewport = new_viewport
        self.viewportChanged.emit()
        self.update()

    # ========================================
    # Mouse Event Handlers
    # ========================================

    def wheelEvent(self, event):
        """Handle mouse wheel for zoom."""
        if event.modifiers() & Qt.ControlModifier:
            # Qt reports scroll-up as positive; factors follow scroll-down positive
            factor = wheel_zoom_factor(-event.angleDelta().y(),
                                       self.zoom_in_factor, self.zoom_out_factor)
            if factor is not None:
                self.zoom_at(factor, event.pos())
            event.accept()
        else:
            event.ignore()

    def _handle_pan_mouse_press(self, event, button=Qt.MiddleButton):
        """Handle mouse press for panning. Returns True if event was handled."""
        if event.button() == button:
            self.is_panning = True
            self.last_mouse_pos = event.pos()
            self.setCursor(Qt.ClosedHandCursor)
            return True
        return False

    def _handle_pan_mouse_move(self, event):
        """Handle mouse move for panning. Returns True if event was handled."""
        if self.is_panning and self.last_mouse_pos is not None:
            delta = event.pos() - self.last_mouse_pos
            self.last_mouse_pos = event.pos()
            self._set_viewport(pan_viewport(self.viewport, delta.x(), delta.y(),
                                            self.width(), self.height()))
            return True
        return False

    def _handle_pan_mouse_release(self, event):
        """Handle mouse release for panning. Returns True if event was handled."""
        if self.is_panning:
            self.is_panning = False
            self.last_mouse_pos = None
            self.unsetCursor()
            return True
        return False
