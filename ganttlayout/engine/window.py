"""Visible-window resolution and day-grid construction."""

import logging
from datetime import datetime, timedelta
from typing import Optional

from ..models.layout import DayGrid, VisibleWindow
from ..utils.datetime_utils import days_between, is_same_day, parse_timestamp, week_start

logger = logging.getLogger(__name__)

BASE_DAY_WIDTH = 100
DAYS_PER_WEEK = 7
MIN_ZOOM = 0.5
MAX_ZOOM = 2.0


def resolve_window(reference_date: Optional[datetime] = None, week_offset: int = 0) -> VisibleWindow:
    """Monday..Sunday of the week containing reference_date shifted by week_offset weeks."""
    if reference_date is None:
        reference_date = datetime.now()
    reference = parse_timestamp(reference_date, "reference_date")
    
    if isinstance(week_offset, bool) or not isinstance(week_offset, int):
        raise TypeError(f"week_offset must be an int, got {type(week_offset).__name__}")
    
    start = week_start(reference + timedelta(weeks=week_offset))
    end = start + timedelta(days=DAYS_PER_WEEK - 1)
    
    logger.debug("Resolved window %s..%s (offset %+d)", start.date(), end.date(), week_offset)
    return VisibleWindow(start=start, end=end)


def build_day_grid(
    window: VisibleWindow,
    zoom: float = 1.0,
    base_day_width: float = BASE_DAY_WIDTH,
    min_zoom: float = MIN_ZOOM,
    max_zoom: float = MAX_ZOOM,
) -> DayGrid:
    """Expand a window into its day columns.

    Zoom scales pixel widths only; the percentage share of a day is fixed.
    """
    if isinstance(zoom, bool) or not isinstance(zoom, (int, float)):
        raise TypeError(f"zoom must be a number, got {type(zoom).__name__}")
    if not (min_zoom <= zoom <= max_zoom):
        raise ValueError(f"zoom {zoom} outside [{min_zoom}, {max_zoom}]")
    
    days = tuple(days_between(window.start, window.end))
    if len(days) != DAYS_PER_WEEK:
        raise ValueError(
            f"Window {window.start.date()}..{window.end.date()} spans {len(days)} days, expected {DAYS_PER_WEEK}"
        )
    
    return DayGrid(
        window=window,
        zoom=float(zoom),
        days=days,
        day_width_pixels=base_day_width * zoom,
        day_percentage=100 / len(days),
    )


def clamp_zoom(zoom: float, min_zoom: float = MIN_ZOOM, max_zoom: float = MAX_ZOOM) -> float:
    """Keep zoom within bounds, rounded to hundredths to absorb float drift."""
    return round(max(min_zoom, min(max_zoom, zoom)), 2)


def today_index(grid: DayGrid, today: Optional[datetime] = None) -> Optional[int]:
    """Column of today in the grid, or None when today is outside the window."""
    today = parse_timestamp(today, "today") if today is not None else datetime.now()
    for i, day in enumerate(grid.days):
        if is_same_day(day, today):
            return i
    return None


def today_marker(grid: DayGrid, today: Optional[datetime] = None) -> Optional[float]:
    """Horizontal percentage of the today marker, centered in its column."""
    index = today_index(grid, today)
    if index is None:
        return None
    return (index + 0.5) * grid.day_percentage
