"""Roster generator for demos and tests."""

import random
from datetime import datetime, timedelta
from typing import List

from ..models.task import TaskRecord, TaskStatus, UserTaskGroup

FIRST_NAMES = ['An', 'Binh', 'Chi', 'Dung', 'Giang', 'Hoa', 'Khanh', 'Linh', 'Minh', 'Nam']
PROJECT_CODES = ['WEB', 'API', 'OPS', 'MOB']
PRIORITIES = ['low', 'medium', 'high', 'urgent']


class RosterGenerator:
    """Generates deterministic users and task lists."""
    
    def __init__(self, seed: int = 42, config: dict = None):
        """Initialize generator with seed for reproducibility."""
        self.config = config or {}
        self.sample_config = self.config.get('sample', {})
        self.seed = self.sample_config.get('seed', seed)
        self.random = random.Random(self.seed)
        self._next_task_id = 1
    
    def generate_tasks(
        self,
        count: int,
        around: datetime,
        date_range_days: int = 21,
    ) -> List[TaskRecord]:
        """Generate one user's tasks spread around a date."""
        tasks = []
        statuses = [s.value for s in TaskStatus if s is not TaskStatus.UNKNOWN]
        
        for i in range(count):
            task_id = self._next_task_id
            self._next_task_id += 1
            project = self.random.choice(PROJECT_CODES)
            
            # Creation dates before and after the anchor
            created_at = around + timedelta(
                days=self.random.randint(-date_range_days, date_range_days // 3),
                hours=self.random.randint(8, 17),
            )
            
            # Most tasks have a due date a few days out; some are open-ended
            due_date = None
            if self.random.random() < 0.8:
                due_date = created_at + timedelta(days=self.random.randint(0, 10))
            
            updated_at = None
            if self.random.random() < 0.5:
                updated_at = created_at + timedelta(days=self.random.randint(0, 5))
            
            # Some tasks are subtasks of an earlier task in the same list
            parent_task_id = None
            if tasks and self.random.random() < 0.25:
                parent_task_id = self.random.choice(tasks).task_id
            
            task = TaskRecord(
                task_id=task_id,
                key=f"{project}-{task_id}",
                title=f"Task {task_id}",
                status=self.random.choice(statuses),
                priority=self.random.choice(PRIORITIES),
                created_at=created_at,
                due_date=due_date,
                updated_at=updated_at,
                parent_task_id=parent_task_id,
                project_name=project,
            )
            tasks.append(task)
        
        return tasks
    
    def generate_roster(
        self,
        around: datetime,
        user_count: int = None,
        tasks_per_user: int = None,
        date_range_days: int = None,
    ) -> List[UserTaskGroup]:
        """Generate a complete roster of users with tasks."""
        user_count = user_count or self.sample_config.get('user_count', 5)
        tasks_per_user = tasks_per_user or self.sample_config.get('tasks_per_user', 6)
        date_range_days = date_range_days or self.sample_config.get('date_range_days', 21)
        
        groups = []
        for user_index in range(user_count):
            name = FIRST_NAMES[user_index % len(FIRST_NAMES)]
            count = self.random.randint(0, tasks_per_user * 2)
            tasks = self.generate_tasks(count, around, date_range_days)
            for task in tasks:
                task.assignee_names = [name]
            groups.append(UserTaskGroup(user_id=user_index + 1, user_name=name, tasks=tasks))
        
        return groups
