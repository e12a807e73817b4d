"""User ordering policy implementations."""

from .base import UserOrderingPolicy
from .baseline import InputOrderPolicy
from .ranking import RelevanceRankingPolicy, rank_users

__all__ = ['UserOrderingPolicy', 'InputOrderPolicy', 'RelevanceRankingPolicy', 'rank_users', 'get_policy']


def get_policy(name: str, config: dict) -> UserOrderingPolicy:
    """Policy instance for a config name ('relevance' or 'input')."""
    if name.lower() == "relevance":
        return RelevanceRankingPolicy(config)
    elif name.lower() == "input":
        return InputOrderPolicy(config)
    raise ValueError(f"Unknown ordering policy: {name}")
