"""
Tests for list orderings and filters.
"""
from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from taskboard.constants import PRIORITY_HIGH, PRIORITY_LOW, TASK_STATUS_DONE
from taskboard.domain.common.errors import ValidationError
from taskboard.domain.tasks import dashboard_order, filter_tasks, management_order, upcoming, view
from taskboard.domain.tasks.models import Task

REF = date(2024, 6, 10)

A = Task(id="A", title="overdue", due_date=date(2024, 6, 8), subject="Math")
B = Task(id="B", title="today", due_date=date(2024, 6, 10), subject="Physics", priority=PRIORITY_HIGH)
C = Task(id="C", title="this week", due_date=date(2024, 6, 16), subject="Math")
D = Task(id="D", title="later", due_date=date(2024, 6, 20), subject="Math", priority=PRIORITY_LOW)
E = Task(id="E", title="undated", subject="Physics")


def _done(task_id: str, updated: datetime | None) -> Task:
    return Task(id=task_id, title=task_id, status=TASK_STATUS_DONE, updated_at=updated)


def _ids(tasks) -> list[str]:
    return [t.id for t in tasks]


def test_dashboard_order_dated_before_undated():
    assert _ids(dashboard_order([E, B, A])) == ["A", "B", "E"]


def test_dashboard_order_done_most_recent_first_and_missing_timestamp_last():
    old = _done("old", datetime(2024, 6, 1, tzinfo=timezone.utc))
    new = _done("new", datetime(2024, 6, 9, tzinfo=timezone.utc))
    never = _done("never", None)
    assert _ids(dashboard_order([never, old, E, new])) == ["E", "new", "old", "never"]


def test_sorting_is_stable_and_does_not_mutate_input():
    first = Task(id="first", title="x", due_date=date(2024, 6, 12))
    second = Task(id="second", title="y", due_date=date(2024, 6, 12))
    items = [first, second]

    assert _ids(dashboard_order(items)) == ["first", "second"]
    assert _ids(management_order(items)) == ["first", "second"]
    assert items == [first, second]


def test_view_is_idempotent():
    tasks = [D, E, C, B, A]
    once = view(tasks, "all", "all", REF)
    assert view(once, "all", "all", REF) == once


def test_management_order_pending_then_priority():
    done_high = Task(id="dh", title="dh", status=TASK_STATUS_DONE, priority=PRIORITY_HIGH)
    ordered = management_order([D, done_high, A, B])
    assert _ids(ordered) == ["B", "A", "D", "dh"]


def test_today_filter():
    assert _ids(filter_tasks([A, B, C, D, E], "today", "all", REF)) == ["B"]


def test_week_filter_has_no_lower_bound():
    """Overdue tasks also show up under "this week"."""
    assert _ids(filter_tasks([A, B, C, D, E], "week", "all", REF)) == ["A", "B", "C"]


def test_overdue_and_high_filters_skip_done():
    done_overdue = Task(id="x", title="x", due_date=date(2024, 6, 1), status=TASK_STATUS_DONE, priority=PRIORITY_HIGH)
    tasks = [A, B, done_overdue]
    assert _ids(filter_tasks(tasks, "overdue", "all", REF)) == ["A"]
    assert _ids(filter_tasks(tasks, "high", "all", REF)) == ["B"]


def test_subject_filter_is_exact_and_applies_before_time_filter():
    tasks = [A, B, C, D, E]
    assert _ids(filter_tasks(tasks, "week", "Math", REF)) == ["A", "C"]
    assert _ids(filter_tasks(tasks, "all", "math", REF)) == []


def test_unknown_filter_raises():
    with pytest.raises(ValidationError):
        filter_tasks([A], "someday", "all", REF)


def test_upcoming_panel_is_capped_and_excludes_today():
    extra = [Task(id=f"u{i}", title="u", due_date=date(2024, 6, 11 + i)) for i in range(6)]
    result = upcoming([B, *reversed(extra)], REF)
    assert _ids(result) == ["u0", "u1", "u2", "u3", "u4"]
