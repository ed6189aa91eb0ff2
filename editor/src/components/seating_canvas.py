"""
Seating Layout Builder - Canvas Input Surface

Qt widget that turns mouse input on the seating canvas into drag, lasso,
zoom and pan gestures. It renders nothing itself: previews are emitted as
signals for whatever paints the tables, and commits are written to the
layout store.
"""

import logging

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, pyqtSignal

from components.canvas_widgets.canvas_zoom_pan_mixin import CanvasZoomPanMixin
from components.transform_widgets.modes import create_mode
from models.editor_settings import EditorSettings
from models.seating_layout import SeatingLayout
from models.transform import Viewport
from services.drag_controller import DragController, OPERATION_MOVE
from services.lasso_selection import LassoSelection
from utils.bounding import contains_point
from utils.coordinate_transforms import surface_to_layout
from utils.logger import loggerRaise


class SeatingCanvasWidget(CanvasZoomPanMixin, QWidget):
	"""Input surface for the seating layout"""

	resizePreview = pyqtSignal(str, float, float)  # resource_id, shape_dim_x, shape_dim_y
	movePreview = pyqtSignal(float, float)  # dx, dy shared by the dragged selection
	viewportChanged = pyqtSignal()
	layoutChanged = pyqtSignal()  # Emitted after a commit is written to the store
	selectionChanged = pyqtSignal()

	def __init__(self, parent=None, seating_layout=None, settings=None):
		super().__init__(parent)
		self._logger = logging.getLogger('SeatingCanvasWidget')

		settings = settings or EditorSettings()
		self.settings = settings
		self.zoom_in_factor = settings.zoom_in_factor
		self.zoom_out_factor = settings.zoom_out_factor

		# Named seating_layout: QWidget.layout() is taken
		self.seating_layout = seating_layout or SeatingLayout(grid_size=settings.grid_size)
		self.drag_controller = DragController(settings.grid_size, settings.snap_to_grid)
		self.viewport = Viewport.full_canvas()
		self.mode = create_mode('select')

		# Pan state
		self.is_panning = False
		self.last_mouse_pos = None

		# Drag/lasso state
		self.drag_start_pos = None
		self.lasso = None

		self.setMouseTracking(True)

	def set_mode(self, mode_name):
		"""Switch interaction mode ('select' or 'pan')"""
		self.drag_controller.cancel()
		self.lasso = None
		self.mode = create_mode(mode_name)
		self.unsetCursor()

	def map_to_layout(self, pos):
		"""Widget position (QPoint) to layout units"""
		return surface_to_layout(pos.x(), pos.y(), self.viewport, self.width(), self.height())

	def resource_at(self, x, y):
		"""Topmost enabled table whose footprint contains a layout point, or None"""
		snapshot = self.seating_layout.bounds_snapshot()
		for resource_id in reversed(self.seating_layout.resource_ids):
			if self.seating_layout.get_resource(resource_id).disabled:
				continue
			if contains_point(snapshot[resource_id], x, y):
				return resource_id
		return None

	def handle_at(self, x, y):
		"""(resource_id, handle) for a resize handle of a selected table at a layout point"""
		for resource_id in self.seating_layout.selected_ids:
			bounds = self.seating_layout.get_resource(resource_id).bounds
			handle = self.mode.get_handle_at_pos(x, y, bounds)
			if handle:
				return resource_id, handle
		return None, None

	# ========================================
	# Drag gestures
	# ========================================

	def begin_drag(self, resource_id, handle_id=None):
		"""Start a move (no handle) or resize drag on a table

		Body drags on a table outside the selection make it the selection.
		"""
		context = self.drag_controller.begin(
			resource_id,
			self.seating_layout.bounds_snapshot(),
			self.seating_layout.selected_ids,
			handle_id,
		)
		if context.selection_replaced:
			self.seating_layout.select_resources(context.resource_ids)
			self.selectionChanged.emit()
		return context

	def drag_move(self, delta_x, delta_y):
		"""Pointer moved by (delta_x, delta_y) pixels since drag start; emits a preview"""
		result = self.drag_controller.update(delta_x, delta_y, self.viewport, self.width(), self.height())
		if result is None:
			return None

		if result.operation == OPERATION_MOVE:
			self.movePreview.emit(*result.value)
		else:
			self.resizePreview.emit(result.resource_ids[0], *result.value)
		return result

	def end_drag(self, delta_x, delta_y):
		"""Finish the drag and write the commit (if any) to the store"""
		result = self.drag_controller.end(delta_x, delta_y, self.viewport, self.width(), self.height())
		if result is not None:
			self._apply_commit(result)
		return result

	def cancel_drag(self):
		self.drag_controller.cancel()

	def _apply_commit(self, result):
		try:
			if result.operation == OPERATION_MOVE:
				dx, dy = result.value
				self.seating_layout.move_resources(result.resource_ids, dx, dy)
			else:
				width, height = result.value
				self.seating_layout.update_resource(
					result.resource_ids[0], shape_dim_x=width, shape_dim_y=height)
		except ValueError as e:
			loggerRaise(e, "Failed to update table")
		self.layoutChanged.emit()

	# ========================================
	# Mouse Event Handlers
	# ========================================

	def mousePressEvent(self, event):
		"""Handle mouse press"""
		if self._handle_pan_mouse_press(event):
			event.accept()
			return

		if event.button() != Qt.LeftButton:
			super().mousePressEvent(event)
			return

		# Pan mode: left drags pan too
		if not self.mode.moves_tables:
			self._handle_pan_mouse_press(event, Qt.LeftButton)
			event.accept()
			return

		point = self.map_to_layout(event.pos())
		self.drag_start_pos = event.pos()

		resource_id, handle = self.handle_at(point.x, point.y)
		if handle:
			self.begin_drag(resource_id, handle.handle_id)
			event.accept()
			return

		resource_id = self.resource_at(point.x, point.y)
		if resource_id:
			self.begin_drag(resource_id)
			event.accept()
			return

		additive = bool(event.modifiers() & Qt.ShiftModifier)
		self.lasso = LassoSelection(point, self.seating_layout.selected_ids, additive)
		event.accept()

	def mouseMoveEvent(self, event):
		"""Handle mouse move"""
		if self._handle_pan_mouse_move(event):
			event.accept()
			return

		if self.drag_controller.state == 'dragging':
			delta = event.pos() - self.drag_start_pos
			self.drag_move(delta.x(), delta.y())
			event.accept()
			return

		if self.lasso:
			selection = self.lasso.update(
				self.map_to_layout(event.pos()),
				self.seating_layout.bounds_snapshot(),
				self._selectable_ids(),
			)
			if selection != self.seating_layout.selected_ids:
				self.seating_layout.select_resources(selection)
				self.selectionChanged.emit()
			event.accept()
			return

		self._update_hover_cursor(event.pos())

	def mouseReleaseEvent(self, event):
		"""Handle mouse release"""
		if self._handle_pan_mouse_release(event):
			event.accept()
			return

		if event.button() != Qt.LeftButton:
			super().mouseReleaseEvent(event)
			return

		if self.drag_controller.state == 'dragging':
			delta = event.pos() - self.drag_start_pos
			self.end_drag(delta.x(), delta.y())
		elif self.lasso:
			selection = self.lasso.finish()
			if selection is not None:
				self.seating_layout.select_resources(selection)
				self.selectionChanged.emit()
			self.lasso = None

		self.drag_start_pos = None
		event.accept()

	def _selectable_ids(self):
		return [rid for rid in self.seating_layout.resource_ids
				if not self.seating_layout.get_resource(rid).disabled]

	def _update_hover_cursor(self, pos):
		if not self.mode.moves_tables:
			self.setCursor(Qt.OpenHandCursor)
			return

		point = self.map_to_layout(pos)
		_, handle = self.handle_at(point.x, point.y)
		if handle:
			self.setCursor(handle.get_cursor())
		elif self.resource_at(point.x, point.y):
			self.setCursor(Qt.SizeAllCursor)
		else:
			self.unsetCursor()
