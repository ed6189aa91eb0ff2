"""Lasso (rubber-band) selection on the canvas background.

A lasso starts on empty canvas, selects every table whose rotated bounding
box touches the rectangle while dragging, and turns into a plain
deselect-click when the pointer barely moved.
"""

from typing import Dict, Iterable, List, Optional

from constants import LASSO_CLICK_THRESHOLD
from models.transform import BoundingBox, ResourceBounds, Vec2
from utils.bounding import get_rotated_bounding_box


def lasso_rect(start: Vec2, current: Vec2) -> BoundingBox:
    """Normalized rectangle between two layout points."""
    return BoundingBox(
        min_x=min(start.x, current.x),
        min_y=min(start.y, current.y),
        max_x=max(start.x, current.x),
        max_y=max(start.y, current.y),
    )


def resources_in_rect(rect: BoundingBox, resources_by_id: Dict[str, ResourceBounds],
                      candidate_ids: Iterable[str] = None) -> List[str]:
    """Ids of tables whose bounding box overlaps rect, in candidate order.

    Args:
        rect: Lasso rectangle in layout units
        resources_by_id: id -> ResourceBounds
        candidate_ids: Ids eligible for selection (defaults to all)
    """
    ids = resources_by_id.keys() if candidate_ids is None else candidate_ids
    return [
        rid for rid in ids
        if rid in resources_by_id and get_rotated_bounding_box(resources_by_id[rid]).overlaps(rect)
    ]


class LassoSelection:
    """One lasso gesture.

    Additive lassos (Shift held at start) keep the selection that existed
    when the lasso began and add to it; plain lassos replace it.
    """

    def __init__(self, start: Vec2, initial_selection: Iterable[str] = (), additive: bool = False):
        self.start = start
        self.current = start
        self.additive = additive
        self.initial_selection = list(initial_selection) if additive else []

    @property
    def rect(self) -> BoundingBox:
        return lasso_rect(self.start, self.current)

    @property
    def is_click(self) -> bool:
        return (abs(self.current.x - self.start.x) < LASSO_CLICK_THRESHOLD and
                abs(self.current.y - self.start.y) < LASSO_CLICK_THRESHOLD)

    def update(self, current: Vec2, resources_by_id: Dict[str, ResourceBounds],
               candidate_ids: Iterable[str] = None) -> List[str]:
        """Move the free corner and return the selection to show now."""
        self.current = current
        hits = resources_in_rect(self.rect, resources_by_id, candidate_ids)
        if not self.initial_selection:
            return hits

        # Union, keeping the initial order first
        merged = list(self.initial_selection)
        merged.extend(rid for rid in hits if rid not in self.initial_selection)
        return merged

    def finish(self) -> Optional[List[str]]:
        """End the gesture.

        Returns:
            [] when the lasso was a plain click (clear the selection),
            None when the selection should stay as the last update left it
        """
        if self.is_click and not self.additive:
            return []
        return None
