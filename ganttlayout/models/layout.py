"""Layout records produced by the timeline engine."""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from ..utils.datetime_utils import end_of_day, start_of_day
from .task import Urgency


@dataclass(frozen=True)
class VisibleWindow:
    """Monday..Sunday week currently on screen, both at 00:00."""
    
    start: datetime
    end: datetime
    
    @property
    def range_start(self) -> datetime:
        return start_of_day(self.start)
    
    @property
    def range_end(self) -> datetime:
        return end_of_day(self.end)


@dataclass(frozen=True)
class DayGrid:
    """The seven day columns of a window at one zoom level."""
    
    window: VisibleWindow
    zoom: float
    days: Tuple[datetime, ...]
    day_width_pixels: float
    day_percentage: float
    
    @property
    def total_width_pixels(self) -> float:
        return len(self.days) * self.day_width_pixels
    
    @property
    def last_index(self) -> int:
        return len(self.days) - 1


@dataclass(frozen=True)
class PositionRecord:
    """Horizontal placement of one task bar, in percent and pixels."""
    
    left_percent: float
    width_percent: float
    left_pixel: float
    width_pixel: float
    clipped_start: datetime
    clipped_end: datetime
    start_index: int
    end_index: int


@dataclass(frozen=True)
class RowPosition:
    """Vertical slot of one user lane."""
    
    user_id: Any
    start_row: int
    visible_task_count: int
    
    @property
    def rows_used(self) -> int:
        # Collapsed or empty lanes still show their header row.
        return max(self.visible_task_count, 1)


@dataclass(frozen=True)
class UserFeatures:
    """Per-user counts an ordering policy sorts on."""
    
    user_id: Any
    relevant_count: int
    total_count: int


@dataclass(frozen=True)
class SubtaskProgress:
    """Completion of the subtasks sharing one parent."""
    
    completed: int
    total: int
    percent: int


@dataclass
class TaskBar:
    """A placed, classified task."""
    
    task_id: Any
    key: str
    title: str
    status: str
    urgency: Urgency
    position: PositionRecord
    row: int
    top_pixel: int
    height_pixel: int
    subtask_percent: Optional[float] = None


@dataclass
class UserLane:
    """One user's header row plus the bars drawn under it."""
    
    user_id: Any
    user_name: str
    expanded: bool
    row: RowPosition
    total_tasks: int
    relevant_today: int
    bars: List[TaskBar] = field(default_factory=list)
    subtask_progress: Dict[Any, SubtaskProgress] = field(default_factory=dict)


@dataclass
class TimelineLayout:
    """Complete layout for one render of the timeline.

    ``run_id`` and ``timestamp`` identify the run and are left out of equality,
    so two renders of the same inputs compare equal.
    """
    
    run_id: str = field(compare=False)
    timestamp: datetime = field(compare=False)
    policy_name: str
    window: VisibleWindow
    grid: DayGrid
    today: datetime
    today_marker_percent: Optional[float]
    lanes: List[UserLane]
    total_rows: int
    viewport_height: int
    skipped_task_ids: List[Any] = field(default_factory=list)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert layout to dictionary for JSON export."""
        data = asdict(self)
        data['grid']['total_width_pixels'] = self.grid.total_width_pixels
        return data
    
    def to_human_readable(self) -> str:
        """Generate human-readable log format."""
        lines = [
            f"=== Timeline Layout: {self.run_id} ===",
            f"Ordering: {self.policy_name}",
            f"Timestamp: {self.timestamp}",
            f"Window: {self.window.start.date()} .. {self.window.end.date()}",
            f"Zoom: {self.grid.zoom:.2f} ({self.grid.day_width_pixels:.0f}px/day)",
            f"Today: {self.today.date()}",
        ]
        
        if self.today_marker_percent is not None:
            lines.append(f"Today marker: {self.today_marker_percent:.2f}%")
        
        lines.extend([
            "",
            "Lanes:",
        ])
        
        for lane in self.lanes:
            marker = "v" if lane.expanded else ">"
            lines.append(
                f"  {marker} {lane.user_name} (row {lane.row.start_row}, "
                f"{lane.total_tasks} tasks, {lane.relevant_today} today)"
            )
            for bar in lane.bars:
                pos = bar.position
                flag = f" [{bar.urgency.value}]" if bar.urgency is not Urgency.NONE else ""
                lines.append(
                    f"    {bar.key}: {pos.clipped_start.date()} -> {pos.clipped_end.date()} "
                    f"left={pos.left_percent:.1f}% width={pos.width_percent:.1f}% "
                    f"top={bar.top_pixel}px{flag}"
                )
        
        if self.skipped_task_ids:
            lines.extend([
                "",
                f"Skipped (no creation date): {', '.join(str(t) for t in self.skipped_task_ids)}",
            ])
        
        lines.extend([
            "",
            f"Total rows: {self.total_rows}",
            f"Viewport height: {self.viewport_height}px",
            "=" * 50,
        ])
        
        return "\n".join(lines)
