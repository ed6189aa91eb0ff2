"""
Seating Layout Builder - Drag Interaction Controller

Turns raw pointer deltas (screen pixels, measured from the drag start) into
clamped layout mutations. One gesture at a time:

    idle -> dragging -> (preview ->)* commit | discard -> idle

The controller never writes to the layout store. begin() reports the
selection the gesture acts on, update() returns previews for rendering
feedback, and end() returns the commit (or None for a no-op drag) for the
caller to apply.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from components.transform_widgets.drag_context import DragContext
from components.transform_widgets.handles import create_handle
from constants import DEFAULT_GRID_SIZE, DEFAULT_SNAP_TO_GRID, MAX_SHAPE_DIM, MIN_SHAPE_DIM
from models.transform import ResourceBounds
from utils.clamping import clamp_delta_for_group, clamp_resize_dimensions
from utils.coordinate_transforms import pixel_delta_to_layout, snap_to_grid

logger = logging.getLogger(__name__)

PREVIEW = 'preview'
COMMIT = 'commit'

OPERATION_MOVE = 'move'
OPERATION_RESIZE = 'resize'


@dataclass(frozen=True)
class DragResult:
    """Outcome of one drag frame.

    kind: PREVIEW (render only) or COMMIT (write to the store)
    operation: OPERATION_MOVE -> value is (dx, dy) shared by resource_ids
               OPERATION_RESIZE -> value is (width, height) for resource_ids[0]
    """
    kind: str
    operation: str
    value: tuple
    resource_ids: tuple

    @property
    def is_commit(self) -> bool:
        return self.kind == COMMIT


class DragController:
    """Interprets drag gestures on the seating canvas."""

    def __init__(self, grid_size=DEFAULT_GRID_SIZE, snap_enabled=DEFAULT_SNAP_TO_GRID):
        self.grid_size = grid_size
        self.snap_enabled = snap_enabled
        self._context: Optional[DragContext] = None

    @property
    def state(self) -> str:
        return 'dragging' if self._context else 'idle'

    @property
    def context(self) -> Optional[DragContext]:
        return self._context

    # ========================================
    # Gesture lifecycle
    # ========================================

    def begin(self, dragged_id: str, resources_by_id: Dict[str, ResourceBounds],
              selected_ids: Sequence[str], handle_id: str = None) -> DragContext:
        """Start a gesture.

        Body drags act on the selection; if the dragged table is not part of
        it, the selection is replaced by the dragged table alone. Handle
        drags resize the dragged table and leave the selection alone.

        Args:
            dragged_id: Table under the pointer (owner of the handle for resizes)
            resources_by_id: Snapshot of the store, id -> ResourceBounds
            selected_ids: Current selection
            handle_id: Resize handle id, or None for a move

        Returns:
            DragContext; selection_replaced tells the caller to write
            resource_ids back as the new selection
        """
        if self._context:
            logger.debug("Drag on %s started while another was in flight; discarding it", dragged_id)

        selection_replaced = False
        if handle_id:
            create_handle(handle_id)  # validate early
            operation = OPERATION_RESIZE
            resource_ids = [dragged_id]
        else:
            operation = OPERATION_MOVE
            if dragged_id in selected_ids:
                resource_ids = list(selected_ids)
            else:
                resource_ids = [dragged_id]
                selection_replaced = True

        snapshots = {rid: resources_by_id[rid] for rid in resource_ids if rid in resources_by_id}
        self._context = DragContext(
            operation=operation,
            dragged_id=dragged_id,
            handle_id=handle_id,
            resource_ids=resource_ids,
            snapshots=snapshots,
            selection_replaced=selection_replaced,
        )
        return self._context

    def update(self, delta_x: float, delta_y: float, viewport, surface_width: float,
               surface_height: float) -> Optional[DragResult]:
        """Compute a live preview for the current pointer delta.

        Args:
            delta_x, delta_y: Pointer offset from drag start in screen pixels
            viewport: Current Viewport
            surface_width, surface_height: Surface size in pixels

        Returns:
            PREVIEW DragResult, or None when idle or the dragged table is gone
        """
        if not self._context:
            return None

        if not self._active_ids():
            return None

        dx, dy = pixel_delta_to_layout(delta_x, delta_y, viewport, surface_width, surface_height)
        if self._context.is_resize:
            value = self._resize_value(dx, dy, snap=False)
        else:
            value = self._move_value(dx, dy)

        return DragResult(PREVIEW, self._context.operation, value, tuple(self._active_ids()))

    def end(self, delta_x: float, delta_y: float, viewport, surface_width: float,
            surface_height: float) -> Optional[DragResult]:
        """Finish the gesture.

        Returns:
            COMMIT DragResult, or None when nothing would change (zero or
            fully clamped move, resize back to the current size)
        """
        context = self._context
        self._context = None
        if not context:
            return None

        ids = tuple(self._active_ids(context))
        if not ids or (delta_x == 0 and delta_y == 0):
            return None

        dx, dy = pixel_delta_to_layout(delta_x, delta_y, viewport, surface_width, surface_height)

        if context.is_resize:
            value = self._resize_value(dx, dy, snap=self.snap_enabled, context=context)
            current = context.snapshots[context.dragged_id]
            if value == (current.shape_dim_x, current.shape_dim_y):
                return None
        else:
            value = self._move_value(dx, dy, context=context)
            if value == (0, 0):
                logger.debug("Move of %d table(s) clamped to nothing", len(ids))
                return None

        logger.debug("Commit %s %s for %s", context.operation, value, list(ids))
        return DragResult(COMMIT, context.operation, value, ids)

    def cancel(self):
        """Abandon the gesture without committing."""
        self._context = None

    # ========================================
    # Frame math
    # ========================================

    def _active_ids(self, context=None) -> List[str]:
        context = context or self._context
        return [rid for rid in context.resource_ids if rid in context.snapshots]

    def _move_value(self, dx, dy, context=None):
        """Grid-snapped, group-clamped translation."""
        context = context or self._context
        if self.snap_enabled:
            dx = snap_to_grid(dx, self.grid_size)
            dy = snap_to_grid(dy, self.grid_size)

        members = [context.snapshots[rid] for rid in self._active_ids(context)]
        clamped = clamp_delta_for_group(members, dx, dy)
        if clamped != (dx, dy):
            logger.debug("Clamped move (%.2f, %.2f) -> (%.2f, %.2f)", dx, dy, *clamped)
        return clamped

    def _resize_value(self, dx, dy, snap, context=None):
        """Half-extents for the dragged handle, capped and canvas-clamped."""
        context = context or self._context
        resource = context.snapshots[context.dragged_id]

        width, height = create_handle(context.handle_id).propose(resource, dx, dy)
        if snap:
            width = max(MIN_SHAPE_DIM, snap_to_grid(width, self.grid_size))
            height = max(MIN_SHAPE_DIM, snap_to_grid(height, self.grid_size))
        width = min(width, MAX_SHAPE_DIM)
        height = min(height, MAX_SHAPE_DIM)

        return clamp_resize_dimensions(resource, width, height)
