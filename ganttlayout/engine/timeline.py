"""Core timeline layout engine."""

import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..models.layout import SubtaskProgress, TaskBar, TimelineLayout, UserLane
from ..models.task import UserTaskGroup, TaskRecord
from ..policies.base import UserOrderingPolicy
from ..utils.datetime_utils import parse_timestamp
from .navigation import ViewState
from .position import compute_position
from .rows import filter_to_window, layout_rows, total_rows, viewport_height
from .urgency import classify_urgency
from .window import build_day_grid, resolve_window, today_marker

logger = logging.getLogger(__name__)


def subtask_progress(tasks: List[TaskRecord]) -> Dict[Any, SubtaskProgress]:
    """Completion of subtasks grouped by parent id."""
    by_parent: Dict[Any, List[TaskRecord]] = {}
    for task in tasks:
        if task.parent_task_id:
            by_parent.setdefault(task.parent_task_id, []).append(task)
    
    progress = {}
    for parent_id, subtasks in by_parent.items():
        completed = sum(1 for t in subtasks if t.is_done)
        total = len(subtasks)
        # Round half up.
        percent = (completed * 200 + total) // (2 * total)
        progress[parent_id] = SubtaskProgress(completed=completed, total=total, percent=percent)
    
    return progress


class TimelineEngine:
    """Turns user task groups and a view state into a timeline layout.

    Holds configuration only; every call recomputes from its arguments.
    """
    
    def __init__(self, policy: UserOrderingPolicy, config: dict):
        """Initialize engine with ordering policy and configuration."""
        self.policy = policy
        self.config = config
        self.timeline_config = config.get('timeline', {})
        self.rows_config = config.get('rows', {})
        self.base_day_width = self.timeline_config.get('base_day_width', 100)
        self.min_zoom = self.timeline_config.get('min_zoom', 0.5)
        self.max_zoom = self.timeline_config.get('max_zoom', 2.0)
        self.min_width_percent = self.timeline_config.get('min_width_percent', 5)
        self.max_width_percent = self.timeline_config.get('max_width_percent', 100)
        self.min_width_pixels = self.timeline_config.get('min_width_pixels', 60)
        self.row_height = self.rows_config.get('row_height', 40)
        self.viewport_margin = self.rows_config.get('viewport_margin', 16)
        self.bar_offset = self.rows_config.get('bar_offset', 8)
        self.bar_height = self.rows_config.get('bar_height', 32)
        self.due_soon_days = config.get('urgency', {}).get('due_soon_days', 3)
    
    def layout(
        self,
        user_groups: List[UserTaskGroup],
        state: Optional[ViewState] = None,
        today: Optional[datetime] = None,
    ) -> TimelineLayout:
        """Lay out one render of the timeline."""
        state = state or ViewState()
        today = parse_timestamp(today, "today") if today is not None else datetime.now()
        focus_day = parse_timestamp(state.reference_date, "reference_date") or today
        
        window = resolve_window(focus_day, state.week_offset)
        grid = build_day_grid(window, state.zoom, self.base_day_width, self.min_zoom, self.max_zoom)
        
        skipped = [
            task.task_id
            for group in user_groups
            for task in group.tasks
            if task.created_at is None
        ]
        if skipped:
            logger.debug("Skipping %d tasks without creation date", len(skipped))
        
        ordered = self.policy.order_users(user_groups, focus_day)
        filtered = filter_to_window(ordered, window)
        rows = layout_rows(filtered, state.expanded_user_ids)
        
        lanes = []
        for group, row in zip(filtered, rows):
            expanded = group.user_id in state.expanded_user_ids
            progress = subtask_progress(group.tasks)
            features = self.policy.compute_user_features(group, focus_day)
            lane = UserLane(
                user_id=group.user_id,
                user_name=group.user_name,
                expanded=expanded,
                row=row,
                total_tasks=features.total_count,
                relevant_today=features.relevant_count,
                subtask_progress=progress,
            )
            if expanded:
                lane.bars = self._place_bars(group.tasks, row.start_row, grid, today, progress)
            lanes.append(lane)
        
        return TimelineLayout(
            run_id=str(uuid.uuid4())[:8],
            timestamp=datetime.now(),
            policy_name=self.policy.get_policy_name(),
            window=window,
            grid=grid,
            today=focus_day,
            today_marker_percent=today_marker(grid, focus_day),
            lanes=lanes,
            total_rows=total_rows(rows),
            viewport_height=viewport_height(rows, self.row_height, self.viewport_margin),
            skipped_task_ids=skipped,
        )
    
    def _place_bars(
        self,
        tasks: List[TaskRecord],
        start_row: int,
        grid,
        today: datetime,
        progress: Dict[Any, SubtaskProgress],
    ) -> List[TaskBar]:
        """Position and classify each task of an expanded lane."""
        bars = []
        for task_index, task in enumerate(tasks):
            position = compute_position(
                task,
                grid,
                self.min_width_percent,
                self.max_width_percent,
                self.min_width_pixels,
            )
            if position is None:
                continue
            
            sub_percent = task.subtask_percent
            if not task.parent_task_id and task.task_id in progress:
                sub_percent = progress[task.task_id].percent
            
            row = start_row + task_index
            bars.append(TaskBar(
                task_id=task.task_id,
                key=task.key,
                title=task.title,
                status=task.status,
                urgency=classify_urgency(task, today, self.due_soon_days),
                position=position,
                row=row,
                top_pixel=row * self.row_height + self.bar_offset,
                height_pixel=self.bar_height,
                subtask_percent=sub_percent,
            ))
        return bars
