"""Relevance ranking of users for the multi-user timeline."""

from datetime import datetime
from typing import List, Optional

from ..models.layout import UserFeatures
from ..models.task import TaskRecord, UserTaskGroup, effective_interval
from ..utils.datetime_utils import is_same_day, parse_timestamp
from .base import UserOrderingPolicy


def is_relevant_on(task: TaskRecord, day: datetime) -> bool:
    """Task is due on day, or its interval covers day."""
    if task.due_date is not None and is_same_day(task.due_date, day):
        return True
    interval = effective_interval(task)
    return interval is not None and interval.contains_day(day)


def count_relevant_tasks(tasks: List[TaskRecord], day: datetime) -> int:
    return sum(1 for task in tasks if is_relevant_on(task, day))


class RelevanceRankingPolicy(UserOrderingPolicy):
    """Users with the most work on the reference day first."""
    
    def compute_user_features(
        self,
        group: UserTaskGroup,
        reference_date: datetime,
    ) -> UserFeatures:
        """Count tasks relevant to the reference day and in total."""
        return UserFeatures(
            user_id=group.user_id,
            relevant_count=count_relevant_tasks(group.tasks, reference_date),
            total_count=len(group.tasks),
        )
    
    def order_users(
        self,
        user_groups: List[UserTaskGroup],
        reference_date: datetime,
    ) -> List[UserTaskGroup]:
        """Order by relevant count, then total count, both descending.

        The sort is stable so equal users keep their input order across renders.
        """
        features = {
            id(group): self.compute_user_features(group, reference_date)
            for group in user_groups
        }
        
        def sort_key(group: UserTaskGroup):
            f = features[id(group)]
            return (-f.relevant_count, -f.total_count)
        
        return sorted(user_groups, key=sort_key)
    
    def get_policy_name(self) -> str:
        """Return policy name."""
        return "RELEVANCE"


def rank_users(user_groups: List[UserTaskGroup], reference_date: Optional[datetime] = None) -> List[UserTaskGroup]:
    """Rank users for the reference day (today when omitted)."""
    if reference_date is None:
        reference_date = datetime.now()
    reference = parse_timestamp(reference_date, "reference_date")
    return RelevanceRankingPolicy({}).order_users(user_groups, reference)
