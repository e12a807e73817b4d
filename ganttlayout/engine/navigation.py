"""Caller-owned view state and its transitions."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, FrozenSet, Optional

from .rows import toggle_expanded
from .window import MAX_ZOOM, MIN_ZOOM, clamp_zoom

ZOOM_STEP = 0.1


@dataclass(frozen=True)
class ViewState:
    """Everything the timeline needs besides task data.

    Transitions return a new state; nothing is mutated in place.
    """
    
    reference_date: Optional[datetime] = None
    week_offset: int = 0
    zoom: float = 1.0
    expanded_user_ids: FrozenSet[Any] = field(default_factory=frozenset)
    zoom_step: float = ZOOM_STEP
    min_zoom: float = MIN_ZOOM
    max_zoom: float = MAX_ZOOM
    
    @classmethod
    def from_config(cls, config: dict, **kwargs) -> "ViewState":
        timeline = config.get('timeline', {})
        return cls(
            zoom_step=timeline.get('zoom_step', ZOOM_STEP),
            min_zoom=timeline.get('min_zoom', MIN_ZOOM),
            max_zoom=timeline.get('max_zoom', MAX_ZOOM),
            **kwargs,
        )
    
    def next_week(self) -> "ViewState":
        return replace(self, week_offset=self.week_offset + 1)
    
    def previous_week(self) -> "ViewState":
        return replace(self, week_offset=self.week_offset - 1)
    
    def reset_week(self) -> "ViewState":
        return replace(self, week_offset=0)
    
    def zoom_in(self) -> "ViewState":
        return replace(self, zoom=clamp_zoom(self.zoom + self.zoom_step, self.min_zoom, self.max_zoom))
    
    def zoom_out(self) -> "ViewState":
        return replace(self, zoom=clamp_zoom(self.zoom - self.zoom_step, self.min_zoom, self.max_zoom))
    
    def toggle_user(self, user_id: Any) -> "ViewState":
        return replace(self, expanded_user_ids=toggle_expanded(self.expanded_user_ids, user_id))
    
    def with_expanded(self, user_ids) -> "ViewState":
        return replace(self, expanded_user_ids=frozenset(user_ids))
