"""Drag context dataclass for canvas drag gestures.

Unified drag state for one gesture: captured at drag start, read on every
move frame, discarded after drag end.
"""

from dataclasses import dataclass, field


@dataclass
class DragContext:
    """State of the drag gesture in flight.

    Snapshots are taken at drag start; frames never re-read the store.
    """
    operation: str  # 'move' or 'resize'
    dragged_id: str
    handle_id: str = None  # Set for 'resize'
    resource_ids: list = field(default_factory=list)  # Tables the gesture acts on
    snapshots: dict = field(default_factory=dict)  # id -> ResourceBounds at drag start
    selection_replaced: bool = False  # Dragged table was outside the selection

    @property
    def is_resize(self) -> bool:
        return self.operation == 'resize'
