"""Base user ordering policy interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from ..models.layout import UserFeatures
from ..models.task import UserTaskGroup


class UserOrderingPolicy(ABC):
    """Abstract base class for user lane ordering policies."""
    
    def __init__(self, config: dict):
        """Initialize policy with configuration."""
        self.config = config
    
    @abstractmethod
    def compute_user_features(
        self,
        group: UserTaskGroup,
        reference_date: datetime,
    ) -> UserFeatures:
        """Compute per-user counts used for ordering and lane headers."""
        pass
    
    @abstractmethod
    def order_users(
        self,
        user_groups: List[UserTaskGroup],
        reference_date: datetime,
    ) -> List[UserTaskGroup]:
        """Order user groups according to policy logic."""
        pass
    
    @abstractmethod
    def get_policy_name(self) -> str:
        """Return the name of this policy."""
        pass
