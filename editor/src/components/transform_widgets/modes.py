"""Interaction modes - defines which handles are active for each mode."""

from .handles import CornerHandle, EdgeHandle
from constants import TRANSFORM_HANDLE_SIZE, TRANSFORM_HIT_TOLERANCE


class TransformMode:
	"""Base class for interaction modes."""

	# Body drags move tables in this mode
	moves_tables = False

	def __init__(self):
		self.handles = {}  # handle_id -> handle_object

	def get_handles(self):
		"""Return all handles for this mode."""
		return self.handles

	def get_handle_at_pos(self, x, y, resource):
		"""Find which handle (if any) of a table is at a layout-space point.

		Returns:
			Handle object or None
		"""
		for handle_id, handle in self.handles.items():
			if handle.hit_test(x, y, resource):
				return handle
		return None


class SelectMode(TransformMode):
	"""Select mode - selected tables show all 8 resize handles and can be dragged."""

	moves_tables = True

	def __init__(self):
		super().__init__()

		self.handles = {
			# Corners (two-axis resize)
			'tl': CornerHandle('tl', TRANSFORM_HANDLE_SIZE, TRANSFORM_HIT_TOLERANCE),
			'tr': CornerHandle('tr', TRANSFORM_HANDLE_SIZE, TRANSFORM_HIT_TOLERANCE),
			'bl': CornerHandle('bl', TRANSFORM_HANDLE_SIZE, TRANSFORM_HIT_TOLERANCE),
			'br': CornerHandle('br', TRANSFORM_HANDLE_SIZE, TRANSFORM_HIT_TOLERANCE),

			# Edges (single-axis resize)
			't': EdgeHandle('t', TRANSFORM_HANDLE_SIZE, TRANSFORM_HIT_TOLERANCE),
			'r': EdgeHandle('r', TRANSFORM_HANDLE_SIZE, TRANSFORM_HIT_TOLERANCE),
			'b': EdgeHandle('b', TRANSFORM_HANDLE_SIZE, TRANSFORM_HIT_TOLERANCE),
			'l': EdgeHandle('l', TRANSFORM_HANDLE_SIZE, TRANSFORM_HIT_TOLERANCE),
		}

	def get_handle_at_pos(self, x, y, resource):
		"""Check handles in priority order (corners before edges)."""
		check_order = ['tl', 'tr', 'bl', 'br', 't', 'r', 'b', 'l']

		for handle_id in check_order:
			if self.handles[handle_id].hit_test(x, y, resource):
				return self.handles[handle_id]
		return None


class PanMode(TransformMode):
	"""Pan mode - no handles, every drag pans the viewport."""


# Mode registry
MODES = {
	'select': SelectMode,
	'pan': PanMode,
}


def create_mode(mode_name):
	"""Factory function to create mode instances.

	Args:
		mode_name: 'select' or 'pan'

	Returns:
		TransformMode instance (SelectMode for unknown names)
	"""
	mode_class = MODES.get(mode_name, SelectMode)
	return mode_class()
