"""Cross-window filtering and vertical row layout of user lanes."""

import logging
from typing import AbstractSet, Any, Iterable, List, Optional

from ..models.layout import RowPosition, VisibleWindow
from ..models.task import UserTaskGroup, effective_interval

logger = logging.getLogger(__name__)

ROW_HEIGHT = 40
VIEWPORT_MARGIN = 16


def filter_to_window(user_groups: List[UserTaskGroup], window: VisibleWindow) -> List[UserTaskGroup]:
    """Keep only tasks whose interval overlaps the window; users are never dropped."""
    range_start = window.range_start
    range_end = window.range_end
    
    filtered = []
    for group in user_groups:
        kept = []
        for task in group.tasks:
            interval = effective_interval(task)
            if interval is None:
                logger.debug("Task %s has no creation date; excluded from layout", task.task_id)
                continue
            if interval.overlaps(range_start, range_end):
                kept.append(task)
        
        if len(kept) != len(group.tasks):
            logger.debug("User %s: %d of %d tasks in window", group.user_id, len(kept), len(group.tasks))
        filtered.append(group.with_tasks(kept))
    
    return filtered


def layout_rows(
    user_groups: List[UserTaskGroup],
    expanded_user_ids: AbstractSet[Any],
    window: Optional[VisibleWindow] = None,
) -> List[RowPosition]:
    """Assign each user a starting row, in input order.

    When window is given the groups are filtered first; otherwise they are
    taken as already filtered. A collapsed or empty user still takes one row.
    """
    if window is not None:
        user_groups = filter_to_window(user_groups, window)
    
    positions = []
    current_row = 0
    for group in user_groups:
        visible = len(group.tasks) if group.user_id in expanded_user_ids else 0
        positions.append(RowPosition(
            user_id=group.user_id,
            start_row=current_row,
            visible_task_count=visible,
        ))
        current_row += max(visible, 1)
    
    return positions


def total_rows(rows: List[RowPosition]) -> int:
    """Rows occupied by all lanes."""
    return sum(row.rows_used for row in rows)


def viewport_height(rows: List[RowPosition], row_height: int = ROW_HEIGHT, margin: int = VIEWPORT_MARGIN) -> int:
    """Pixel height of the scrollable area; zero when there is nothing to render."""
    count = total_rows(rows)
    if count == 0:
        return 0
    return count * row_height + margin


def toggle_expanded(expanded_user_ids: AbstractSet[Any], user_id: Any) -> frozenset:
    """Expanded set with user_id's membership flipped."""
    if user_id in expanded_user_ids:
        return frozenset(expanded_user_ids) - {user_id}
    return frozenset(expanded_user_ids) | {user_id}


def reconcile_expanded(
    expanded_user_ids: AbstractSet[Any],
    user_ids: Iterable[Any],
    previous_user_ids: Optional[Iterable[Any]] = None,
) -> frozenset:
    """Expanded set after the displayed users change.

    On first render (previous_user_ids is None) or when the set of displayed
    users differs, every displayed user is expanded and users no longer shown
    are dropped. An unchanged user set keeps the caller's choices.
    """
    current = frozenset(user_ids)
    if not current:
        return frozenset()
    
    if previous_user_ids is not None and frozenset(previous_user_ids) == current:
        return frozenset(expanded_user_ids)
    
    return current
