"""Shared fixtures for timeline engine tests."""

from datetime import datetime

import pytest

from ganttlayout.engine.window import build_day_grid, resolve_window
from ganttlayout.models.task import TaskRecord, UserTaskGroup


@pytest.fixture
def monday() -> datetime:
    """A Monday used as the reference date."""
    return datetime(2024, 6, 10)


@pytest.fixture
def window(monday):
    return resolve_window(monday, 0)


@pytest.fixture
def grid(window):
    return build_day_grid(window, 1.0)


@pytest.fixture
def make_task():
    """Factory for tasks with sensible defaults."""
    counter = {'next': 1}
    
    def _make(created_at=None, due_date=None, updated_at=None, status="todo", **kwargs):
        task_id = kwargs.pop('task_id', counter['next'])
        counter['next'] += 1
        return TaskRecord(
            task_id=task_id,
            key=kwargs.pop('key', f"T-{task_id}"),
            title=kwargs.pop('title', f"Task {task_id}"),
            status=status,
            created_at=created_at,
            due_date=due_date,
            updated_at=updated_at,
            **kwargs,
        )
    
    return _make


@pytest.fixture
def make_group():
    def _make(user_id, tasks, user_name=None):
        return UserTaskGroup(user_id=user_id, user_name=user_name or f"User {user_id}", tasks=list(tasks))
    
    return _make
