"""Due-date urgency classification."""

from datetime import datetime
from typing import Optional

from ..models.task import TaskRecord, Urgency
from ..utils.datetime_utils import parse_timestamp, start_of_day

DUE_SOON_DAYS = 3


def classify_urgency(
    task: TaskRecord,
    today: Optional[datetime] = None,
    due_soon_days: int = DUE_SOON_DAYS,
) -> Urgency:
    """Classify a task as overdue, due soon, or neither.

    Precedence: done tasks are never urgent; explicit backend flags win over
    the calendar-day computation; without a due date there is nothing to flag.
    Unknown statuses take the same path as any open status.
    """
    if task.is_done:
        return Urgency.NONE
    
    if task.is_overdue:
        return Urgency.OVERDUE
    if task.is_due_soon:
        return Urgency.DUE_SOON
    
    if task.due_date is None:
        return Urgency.NONE
    
    today = parse_timestamp(today, "today") if today is not None else datetime.now()
    diff_days = (start_of_day(task.due_date) - start_of_day(today)).days
    
    if diff_days < 0:
        return Urgency.OVERDUE
    if diff_days <= due_soon_days:
        return Urgency.DUE_SOON
    return Urgency.NONE
