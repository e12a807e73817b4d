"""Caller-order policy for single-board views."""

from datetime import datetime
from typing import List

from ..models.layout import UserFeatures
from ..models.task import UserTaskGroup
from .base import UserOrderingPolicy
from .ranking import count_relevant_tasks


class InputOrderPolicy(UserOrderingPolicy):
    """Baseline policy: users stay in the order the caller supplied."""
    
    def compute_user_features(
        self,
        group: UserTaskGroup,
        reference_date: datetime,
    ) -> UserFeatures:
        """Count tasks for the lane header."""
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
        """Return a copy of the input order."""
        return list(user_groups)
    
    def get_policy_name(self) -> str:
        """Return policy name."""
        return "INPUT-ORDER"
