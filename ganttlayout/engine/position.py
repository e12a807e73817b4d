"""Clipping task intervals against the day grid."""

import logging
from typing import Optional, Union

from ..models.layout import DayGrid, PositionRecord
from ..models.task import EffectiveInterval, TaskRecord, effective_interval
from ..utils.datetime_utils import start_of_day

logger = logging.getLogger(__name__)

MIN_WIDTH_PERCENT = 5
MAX_WIDTH_PERCENT = 100
MIN_WIDTH_PIXELS = 60


def _interval_of(task: Union[TaskRecord, EffectiveInterval]) -> Optional[EffectiveInterval]:
    if isinstance(task, EffectiveInterval):
        return task
    return effective_interval(task)


def is_visible(task: Union[TaskRecord, EffectiveInterval], grid: DayGrid) -> bool:
    """Inclusive overlap of the task interval with the grid's window."""
    interval = _interval_of(task)
    if interval is None:
        return False
    return interval.overlaps(grid.window.range_start, grid.window.range_end)


def compute_position(
    task: Union[TaskRecord, EffectiveInterval],
    grid: DayGrid,
    min_width_percent: float = MIN_WIDTH_PERCENT,
    max_width_percent: float = MAX_WIDTH_PERCENT,
    min_width_pixels: float = MIN_WIDTH_PIXELS,
) -> Optional[PositionRecord]:
    """Place a task on the grid, or return None when it is outside the window.

    Inverted intervals never raise: unmatched column indices fall back to the
    grid edges so the bar stays renderable.
    """
    interval = _interval_of(task)
    if interval is None:
        return None
    
    window_start = grid.window.range_start
    window_end = grid.window.range_end
    
    if interval.end < window_start or interval.start > window_end:
        return None
    
    display_start = max(interval.start, window_start)
    display_end = min(interval.end, window_end)
    
    start_day = start_of_day(display_start)
    end_day = start_of_day(display_end)
    
    start_index = -1
    end_index = -1
    for i, day in enumerate(grid.days):
        if start_index == -1 and day >= start_day:
            start_index = i
        if day <= end_day:
            end_index = i
    
    if start_index == -1:
        start_index = 0
    if end_index == -1:
        end_index = grid.last_index
    
    if interval.is_inverted:
        task_id = getattr(task, 'task_id', None)
        logger.warning("Task %s ends before it starts; clipping to columns %d..%d",
                       task_id, start_index, end_index)
    
    span_days = max(end_index - start_index + 1, 0)
    base_width_percent = span_days * grid.day_percentage
    width_percent = min(max(base_width_percent * grid.zoom, min_width_percent), max_width_percent)
    
    return PositionRecord(
        left_percent=start_index * grid.day_percentage,
        width_percent=width_percent,
        left_pixel=start_index * grid.day_width_pixels,
        width_pixel=max(span_days * grid.day_width_pixels, min_width_pixels),
        clipped_start=display_start,
        clipped_end=display_end,
        start_index=start_index,
        end_index=end_index,
    )
