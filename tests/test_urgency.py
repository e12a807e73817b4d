"""Tests for due-date urgency classification."""

from datetime import datetime, timedelta

import pytest

from ganttlayout.engine.urgency import classify_urgency
from ganttlayout.models.task import Urgency

TODAY = datetime(2024, 6, 10, 15, 0)


class TestClassifyUrgency:
    """Test urgency precedence and the calendar-day heuristic."""
    
    @pytest.mark.parametrize("flags", [
        {},
        {'is_overdue': True},
        {'is_due_soon': True},
        {'is_overdue': True, 'is_due_soon': True},
    ])
    @pytest.mark.parametrize("due_offset", [-5, 0, 2, 30, None])
    def test_done_is_never_urgent(self, make_task, flags, due_offset):
        due = TODAY + timedelta(days=due_offset) if due_offset is not None else None
        task = make_task(datetime(2024, 6, 1), due, status="done", **flags)
        assert classify_urgency(task, TODAY) is Urgency.NONE
    
    def test_explicit_overdue_beats_future_due_date(self, make_task):
        task = make_task(datetime(2024, 6, 1), datetime(2024, 7, 30), is_overdue=True)
        assert classify_urgency(task, TODAY) is Urgency.OVERDUE
    
    def test_explicit_overdue_beats_explicit_due_soon(self, make_task):
        task = make_task(datetime(2024, 6, 1), None, is_overdue=True, is_due_soon=True)
        assert classify_urgency(task, TODAY) is Urgency.OVERDUE
    
    def test_explicit_due_soon_without_due_date(self, make_task):
        task = make_task(datetime(2024, 6, 1), None, is_due_soon=True)
        assert classify_urgency(task, TODAY) is Urgency.DUE_SOON
    
    def test_false_flags_fall_through_to_dates(self, make_task):
        task = make_task(datetime(2024, 6, 1), datetime(2024, 6, 8), is_overdue=False, is_due_soon=False)
        assert classify_urgency(task, TODAY) is Urgency.OVERDUE
    
    def test_no_due_date_is_not_urgent(self, make_task):
        assert classify_urgency(make_task(datetime(2024, 6, 1)), TODAY) is Urgency.NONE
    
    def test_due_two_days_ago_is_overdue(self, make_task):
        task = make_task(datetime(2024, 6, 1), TODAY - timedelta(days=2), status="todo")
        assert classify_urgency(task, TODAY) is Urgency.OVERDUE
    
    def test_due_earlier_today_is_due_soon(self, make_task):
        task = make_task(datetime(2024, 6, 1), datetime(2024, 6, 10, 8, 0))
        assert classify_urgency(task, TODAY) is Urgency.DUE_SOON
    
    @pytest.mark.parametrize("days,expected", [
        (-1, Urgency.OVERDUE),
        (0, Urgency.DUE_SOON),
        (1, Urgency.DUE_SOON),
        (3, Urgency.DUE_SOON),
        (4, Urgency.NONE),
        (10, Urgency.NONE),
    ])
    def test_due_soon_horizon(self, make_task, days, expected):
        task = make_task(datetime(2024, 6, 1), datetime(2024, 6, 10, 23, 30) + timedelta(days=days))
        assert classify_urgency(task, TODAY) is expected
    
    def test_custom_horizon(self, make_task):
        task = make_task(datetime(2024, 6, 1), datetime(2024, 6, 15))
        assert classify_urgency(task, TODAY, due_soon_days=5) is Urgency.DUE_SOON
        assert classify_urgency(task, TODAY, due_soon_days=4) is Urgency.NONE
    
    def test_unknown_status_uses_dates(self, make_task):
        task = make_task(datetime(2024, 6, 1), datetime(2024, 6, 9), status="blocked")
        assert classify_urgency(task, TODAY) is Urgency.OVERDUE
    
    def test_defaults_to_now(self, make_task):
        far = datetime.now() + timedelta(days=60)
        assert classify_urgency(make_task(datetime(2024, 6, 1), far)) is Urgency.NONE
    
    def test_urgency_values(self):
        assert [u.value for u in Urgency] == ["none", "dueSoon", "overdue"]
