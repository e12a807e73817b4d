"""Timeline layout engine."""

from ..policies.ranking import rank_users
from .navigation import ViewState
from .position import compute_position, is_visible
from .rows import filter_to_window, layout_rows, reconcile_expanded, toggle_expanded, total_rows, viewport_height
from .timeline import TimelineEngine, subtask_progress
from .urgency import classify_urgency
from .window import build_day_grid, clamp_zoom, resolve_window, today_marker

__all__ = [
    'resolve_window',
    'build_day_grid',
    'compute_position',
    'classify_urgency',
    'layout_rows',
    'rank_users',
    'filter_to_window',
    'is_visible',
    'total_rows',
    'viewport_height',
    'toggle_expanded',
    'reconcile_expanded',
    'clamp_zoom',
    'today_marker',
    'subtask_progress',
    'ViewState',
    'TimelineEngine',
]
