"""
Seating Layout Builder - Layout Model

In-memory store of the tables on the canvas plus the current selection.
This is the MODEL the canvas reads snapshots from and writes clamped
results back to. It does not clamp on its own: callers pass values that
came out of utils.clamping.

Unknown ids in bulk mutations are skipped; direct lookups raise ValueError.
"""

import logging
import uuid as uuid_module
from dataclasses import dataclass, asdict, replace
from typing import Dict, List, Sequence, Tuple

from constants import (
    DEFAULT_GRID_SIZE, MAX_SHAPE_DIM, QUICK_ADD_CAPACITY, QUICK_ADD_SIZE,
    QUICK_ADD_SEARCH_GRID, QUICK_ADD_SEARCH_START_X, QUICK_ADD_SEARCH_START_Y,
    QUICK_ADD_SEARCH_MAX_RADIUS, SHAPE_RECTANGLE,
)
from models.transform import ResourceBounds, ShapeKind
from utils.clamping import clamp_center_to_canvas
from utils.coordinate_transforms import snap_to_grid


def normalize_rotation(rotation: float) -> float:
    """Fold any angle into [0, 360)."""
    normalized = ((rotation % 360) + 360) % 360
    if normalized == 360:
        normalized = 0
    return normalized


@dataclass
class SeatingResource:
    """A table on the canvas."""
    id: str
    name: str
    capacity: int
    shape: str
    shape_dim_x: float
    shape_dim_y: float
    center_x: float
    center_y: float
    rotation: float = 0.0
    disabled: bool = False

    @property
    def bounds(self) -> ResourceBounds:
        return ResourceBounds(
            center_x=self.center_x,
            center_y=self.center_y,
            shape_dim_x=self.shape_dim_x,
            shape_dim_y=self.shape_dim_y,
            rotation=self.rotation,
            shape=self.shape,
        )


# Fields update_resource accepts
_UPDATABLE_FIELDS = {
    'name', 'capacity', 'shape', 'shape_dim_x', 'shape_dim_y',
    'center_x', 'center_y', 'rotation', 'disabled',
}


class SeatingLayout:
    """Tables by id, ordered selection, and the mutations the canvas uses."""

    def __init__(self, name: str = 'Default Layout', grid_size: float = DEFAULT_GRID_SIZE,
                 snap_enabled: bool = False):
        """
        Args:
            name: Layout display name
            grid_size: Grid used when move_resources snaps centers
            snap_enabled: Snap moved centers to the grid
        """
        self._logger = logging.getLogger('SeatingLayout')

        if grid_size <= 0:
            raise ValueError(f"Grid size must be positive, got {grid_size}")

        self.name = name
        self.grid_size = grid_size
        self.snap_enabled = snap_enabled
        self._resources: Dict[str, SeatingResource] = {}
        self._selected_ids: List[str] = []
        self.is_dirty = False

        self._logger.debug(f"Created layout '{name}'")

    # ========================================
    # Queries
    # ========================================

    @property
    def resource_ids(self) -> List[str]:
        return list(self._resources.keys())

    @property
    def selected_ids(self) -> List[str]:
        return list(self._selected_ids)

    def __len__(self):
        return len(self._resources)

    def __contains__(self, resource_id):
        return resource_id in self._resources

    def get_resource(self, resource_id: str) -> SeatingResource:
        """Get a table by id.

        Raises:
            ValueError: If id not found
        """
        resource = self._resources.get(resource_id)
        if resource is None:
            raise ValueError(f"Resource with id '{resource_id}' not found")
        return resource

    def bounds_snapshot(self, ids: Sequence[str] = None) -> Dict[str, ResourceBounds]:
        """Read-only geometry snapshot, id -> ResourceBounds.

        Args:
            ids: Restrict to these ids (unknown ids skipped); all tables if None
        """
        if ids is None:
            ids = self._resources.keys()
        return {rid: self._resources[rid].bounds for rid in ids if rid in self._resources}

    # ========================================
    # Selection
    # ========================================

    def select_resources(self, ids: Sequence[str]):
        """Replace the selection (unknown ids dropped, duplicates collapsed)."""
        selection = []
        for rid in ids:
            if rid in self._resources and rid not in selection:
                selection.append(rid)
        self._selected_ids = selection

    def clear_selection(self):
        self._selected_ids = []

    # ========================================
    # Mutations
    # ========================================

    def add_resource(self, name: str, shape: str, shape_dim_x: float, shape_dim_y: float,
                     center_x: float, center_y: float, capacity: int = QUICK_ADD_CAPACITY,
                     rotation: float = 0.0, resource_id: str = None) -> str:
        """Add a table.

        Returns:
            The new table's id

        Raises:
            ValueError: If shape is unknown or the id is taken
        """
        if not ShapeKind.is_valid(shape):
            raise ValueError(f"Unknown shape '{shape}'")

        resource_id = resource_id or str(uuid_module.uuid4())
        if resource_id in self._resources:
            raise ValueError(f"Resource with id '{resource_id}' already exists")

        self._resources[resource_id] = SeatingResource(
            id=resource_id,
            name=name,
            capacity=capacity,
            shape=shape,
            shape_dim_x=shape_dim_x,
            shape_dim_y=shape_dim_y,
            center_x=center_x,
            center_y=center_y,
            rotation=rotation,
        )
        self.is_dirty = True
        self._logger.debug(f"Added {shape} '{name}' at ({center_x:.1f}, {center_y:.1f})")
        return resource_id

    def quick_add(self, shape: str = SHAPE_RECTANGLE) -> str:
        """Add a default-size table at the first free spot, named 'Table N'."""
        position = self.find_available_position()
        return self.add_resource(
            name=f"Table {self.next_table_number()}",
            shape=shape,
            shape_dim_x=QUICK_ADD_SIZE,
            shape_dim_y=QUICK_ADD_SIZE,
            center_x=position[0],
            center_y=position[1],
        )

    def move_resources(self, ids: Sequence[str], dx: float, dy: float):
        """Translate tables by a shared delta."""
        moved = 0
        for rid in ids:
            resource = self._resources.get(rid)
            if resource is None:
                continue

            new_x = resource.center_x + dx
            new_y = resource.center_y + dy
            if self.snap_enabled:
                new_x = snap_to_grid(new_x, self.grid_size)
                new_y = snap_to_grid(new_y, self.grid_size)

            resource.center_x = new_x
            resource.center_y = new_y
            moved += 1

        if moved:
            self.is_dirty = True
        self._logger.debug(f"Moved {moved} table(s) by ({dx:.2f}, {dy:.2f})")

    def update_resource(self, resource_id: str, **updates):
        """Update fields of one table.

        Raises:
            ValueError: If id not found, a field is unknown, or shape is invalid
        """
        resource = self.get_resource(resource_id)

        unknown = set(updates) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update field(s) {sorted(unknown)}")
        if 'shape' in updates and not ShapeKind.is_valid(updates['shape']):
            raise ValueError(f"Unknown shape '{updates['shape']}'")

        self._resources[resource_id] = replace(resource, **updates)
        self.is_dirty = True
        self._logger.debug(f"Updated table {resource_id}: {updates}")

    def rotate_resources(self, ids: Sequence[str], degrees: float):
        """Rotate tables in place by a delta, result folded with % 360.

        Not clamped: callers normalize on commit.
        """
        for rid in ids:
            resource = self._resources.get(rid)
            if resource is None:
                continue
            resource.rotation = (resource.rotation + degrees) % 360
            self.is_dirty = True
        self._logger.debug(f"Rotated {len(ids)} table(s) by {degrees}")

    def delete_resources(self, ids: Sequence[str]):
        for rid in ids:
            self._resources.pop(rid, None)
        self._selected_ids = [rid for rid in self._selected_ids if rid in self._resources]
        self.is_dirty = True
        self._logger.debug(f"Deleted {len(ids)} table(s)")

    def apply_edit(self, resource_id: str, shape: str, width: float, height: float,
                   center_x: float, center_y: float, rotation: float, **fields):
        """Save the table edit form.

        Caps the half-extents, normalizes rotation and clamps the center so
        the edited table lands fully on the canvas.
        """
        shape_dim_x = min(width, MAX_SHAPE_DIM)
        shape_dim_y = min(height, MAX_SHAPE_DIM)
        rotation = normalize_rotation(rotation)

        center = clamp_center_to_canvas(ResourceBounds(
            center_x=center_x,
            center_y=center_y,
            shape_dim_x=shape_dim_x,
            shape_dim_y=shape_dim_y,
            rotation=rotation,
            shape=shape,
        ))
        self.update_resource(
            resource_id,
            shape=shape,
            shape_dim_x=shape_dim_x,
            shape_dim_y=shape_dim_y,
            rotation=rotation,
            center_x=center.x,
            center_y=center.y,
            **fields,
        )

    # ========================================
    # Quick-add helpers
    # ========================================

    def next_table_number(self) -> int:
        """Smallest n >= 1 with no table named 'Table n'."""
        names = {r.name for r in self._resources.values()}
        num = 1
        while f"Table {num}" in names:
            num += 1
        return num

    def find_available_position(self, grid_size: float = QUICK_ADD_SEARCH_GRID) -> Tuple[float, float]:
        """First unoccupied grid cell, searched ring by ring from the start point."""
        occupied = {
            (snap_to_grid(r.center_x, grid_size), snap_to_grid(r.center_y, grid_size))
            for r in self._resources.values()
        }

        start_x = QUICK_ADD_SEARCH_START_X
        start_y = QUICK_ADD_SEARCH_START_Y

        for radius in range(QUICK_ADD_SEARCH_MAX_RADIUS):
            for dx in range(-radius, radius + 1):
                for dy in range(-radius, radius + 1):
                    # Only the border cells of this ring
                    if radius > 0 and abs(dx) < radius and abs(dy) < radius:
                        continue

                    x = start_x + dx * grid_size
                    y = start_y + dy * grid_size
                    if (x, y) not in occupied and x > 0 and y > 0:
                        return x, y

        return start_x + len(self._resources) * grid_size, start_y

    # ========================================
    # Serialization
    # ========================================

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'resources': [asdict(r) for r in self._resources.values()],
        }

    @classmethod
    def from_dict(cls, data: dict, **kwargs) -> 'SeatingLayout':
        """Build a layout from a dict (as produced by to_dict).

        Resources without an id get a fresh one; missing name/capacity default.

        Raises:
            ValueError: On missing geometry fields or invalid values
        """
        layout = cls(name=data.get('name', 'Default Layout'), **kwargs)
        for index, entry in enumerate(data.get('resources', [])):
            if not isinstance(entry, dict):
                raise ValueError(f"Invalid resource at index {index}: expected an object")
            try:
                resource_id = layout.add_resource(
                    name=entry.get('name', f"Table {index + 1}"),
                    shape=entry.get('shape', SHAPE_RECTANGLE),
                    shape_dim_x=float(entry['shape_dim_x']),
                    shape_dim_y=float(entry['shape_dim_y']),
                    center_x=float(entry['center_x']),
                    center_y=float(entry['center_y']),
                    capacity=int(entry.get('capacity', QUICK_ADD_CAPACITY)),
                    rotation=float(entry.get('rotation', 0.0)),
                    resource_id=entry.get('id'),
                )
            except (KeyError, TypeError) as e:
                raise ValueError(f"Invalid resource at index {index}: {e}") from e
            layout._resources[resource_id].disabled = bool(entry.get('disabled', False))
        layout.is_dirty = False
        return layout
