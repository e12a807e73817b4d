"""Task, user-group and interval data models."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Dict, List, Optional

from ..utils.datetime_utils import end_of_day, parse_timestamp, start_of_day


class TaskStatus(Enum):
    """Workflow status of a task."""
    
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    FIX = "fix"
    DONE = "done"
    UNKNOWN = "unknown"
    
    @classmethod
    def parse(cls, raw: Optional[str]) -> "TaskStatus":
        """Map a raw status string to a member; anything unrecognised is UNKNOWN."""
        if isinstance(raw, str):
            for member in cls:
                if member is not cls.UNKNOWN and member.value == raw:
                    return member
        return cls.UNKNOWN


class Urgency(str, Enum):
    """Due-date urgency of a task."""
    
    NONE = "none"
    DUE_SOON = "dueSoon"
    OVERDUE = "overdue"


@dataclass(frozen=True)
class EffectiveInterval:
    """Day-truncated span a task occupies on the timeline.

    end >= start is not guaranteed: a due date before the creation date is
    kept as supplied.
    """
    
    start: datetime
    end: datetime
    
    @property
    def is_inverted(self) -> bool:
        return self.end < self.start
    
    def overlaps(self, range_start: datetime, range_end: datetime) -> bool:
        """Inclusive overlap test against [range_start, range_end]."""
        return self.end >= range_start and self.start <= range_end
    
    def contains_day(self, day: datetime) -> bool:
        return self.overlaps(start_of_day(day), end_of_day(day))


@dataclass
class TaskRecord:
    """A task as delivered by the board/task endpoints."""
    
    task_id: Any
    key: str
    title: str = ""
    status: str = TaskStatus.TODO.value
    status_name: Optional[str] = None
    priority: Optional[str] = None
    created_at: Optional[datetime] = None
    due_date: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    parent_task_id: Optional[Any] = None
    is_overdue: Optional[bool] = None
    is_due_soon: Optional[bool] = None
    subtask_percent: Optional[float] = None
    project_name: Optional[str] = None
    assignee_names: List[str] = field(default_factory=list)
    
    def __post_init__(self):
        """Normalize timestamps; reject values that are not dates."""
        self.created_at = parse_timestamp(self.created_at, "created_at")
        self.due_date = parse_timestamp(self.due_date, "due_date")
        self.updated_at = parse_timestamp(self.updated_at, "updated_at")
    
    @property
    def status_kind(self) -> TaskStatus:
        return TaskStatus.parse(self.status)
    
    @property
    def is_done(self) -> bool:
        return self.status_kind is TaskStatus.DONE
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TaskRecord":
        """Build a record from the camelCase REST payload."""
        return cls(
            task_id=data.get('taskId', data.get('id')),
            key=data.get('taskKey', data.get('key', '')),
            title=data.get('title', ''),
            status=data.get('status', TaskStatus.TODO.value),
            status_name=data.get('statusName'),
            priority=data.get('priority'),
            created_at=data.get('createdAt'),
            due_date=data.get('dueDate'),
            updated_at=data.get('updatedAt'),
            parent_task_id=data.get('parentTaskId'),
            is_overdue=data.get('isOverdue'),
            is_due_soon=data.get('isDueSoon'),
            subtask_percent=data.get('subtaskPercent'),
            project_name=data.get('projectName'),
            assignee_names=list(data.get('assigneeNames') or []),
        )
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the camelCase payload shape."""
        def iso(value: Optional[datetime]) -> Optional[str]:
            return value.isoformat() if value is not None else None
        
        return {
            'taskId': self.task_id,
            'taskKey': self.key,
            'title': self.title,
            'status': self.status,
            'statusName': self.status_name,
            'priority': self.priority,
            'createdAt': iso(self.created_at),
            'dueDate': iso(self.due_date),
            'updatedAt': iso(self.updated_at),
            'parentTaskId': self.parent_task_id,
            'isOverdue': self.is_overdue,
            'isDueSoon': self.is_due_soon,
            'subtaskPercent': self.subtask_percent,
            'projectName': self.project_name,
            'assigneeNames': list(self.assignee_names),
        }


@dataclass
class UserTaskGroup:
    """One user's tasks, in the order supplied by the caller."""
    
    user_id: Any
    user_name: str
    tasks: List[TaskRecord] = field(default_factory=list)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserTaskGroup":
        return cls(
            user_id=data.get('userId'),
            user_name=data.get('userName', ''),
            tasks=[TaskRecord.from_dict(t) for t in data.get('tasks') or []],
        )
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'userId': self.user_id,
            'userName': self.user_name,
            'tasks': [t.to_dict() for t in self.tasks],
        }
    
    def with_tasks(self, tasks: List[TaskRecord]) -> "UserTaskGroup":
        """Copy of this group holding a different task list."""
        return UserTaskGroup(user_id=self.user_id, user_name=self.user_name, tasks=list(tasks))


def effective_interval(task: TaskRecord) -> Optional[EffectiveInterval]:
    """Span of a task: creation day through due date, last update, or the next day.

    Returns None when the task has no creation date, since it cannot be placed.
    """
    if task.created_at is None:
        return None
    
    start = start_of_day(task.created_at)
    if task.due_date is not None:
        raw_end = task.due_date
    elif task.updated_at is not None:
        raw_end = task.updated_at
    else:
        raw_end = task.created_at + timedelta(days=1)
    
    return EffectiveInterval(start=start, end=end_of_day(raw_end))
