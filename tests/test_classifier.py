"""
Tests for date classification: day offsets, exclusive buckets and due labels.

Reference date 2024-06-10 (a Monday) throughout.
"""
from __future__ import annotations

from datetime import date, datetime, timezone

from taskboard.constants import (
    BUCKET_DONE,
    BUCKET_DUE_THIS_WEEK,
    BUCKET_DUE_TODAY,
    BUCKET_DUE_TOMORROW,
    BUCKET_OVERDUE,
    BUCKET_UNSCHEDULED,
    BUCKET_UPCOMING,
    TASK_STATUS_DONE,
)
from taskboard.domain.tasks import UNSCHEDULED_DAYS, classify, days_until_due, due_label, is_urgent
from taskboard.domain.tasks.models import Task

REF = date(2024, 6, 10)


def _task(task_id: str, due: date | None = None, **kwargs) -> Task:
    return Task(id=task_id, title=f"task {task_id}", due_date=due, **kwargs)


def test_reference_scenario_buckets():
    """A..E from the reference week land in the expected buckets with the expected offsets."""
    a = classify(_task("A", date(2024, 6, 8)), REF)
    b = classify(_task("B", date(2024, 6, 10)), REF)
    c = classify(_task("C", date(2024, 6, 16)), REF)
    d = classify(_task("D", date(2024, 6, 20)), REF)
    e = classify(_task("E"), REF)

    assert (a.bucket, a.days_until_due) == (BUCKET_OVERDUE, -2)
    assert (b.bucket, b.days_until_due) == (BUCKET_DUE_TODAY, 0)
    assert (c.bucket, c.days_until_due) == (BUCKET_DUE_THIS_WEEK, 6)
    assert (d.bucket, d.days_until_due) == (BUCKET_UPCOMING, 10)
    assert e.bucket == BUCKET_UNSCHEDULED
    assert e.days_until_due == UNSCHEDULED_DAYS


def test_tomorrow_is_not_this_week():
    """Buckets are exclusive: +1 is tomorrow only, +7 is the last day of the week window."""
    assert classify(_task("t", date(2024, 6, 11)), REF).bucket == BUCKET_DUE_TOMORROW
    assert classify(_task("w", date(2024, 6, 12)), REF).bucket == BUCKET_DUE_THIS_WEEK
    assert classify(_task("w7", date(2024, 6, 17)), REF).bucket == BUCKET_DUE_THIS_WEEK
    assert classify(_task("u", date(2024, 6, 18)), REF).bucket == BUCKET_UPCOMING


def test_done_tasks_are_never_in_a_deadline_bucket():
    """Status wins over the date: an old Done task is not overdue."""
    done = _task("x", date(2024, 6, 1), status=TASK_STATUS_DONE)
    result = classify(done, REF)
    assert result.bucket == BUCKET_DONE
    assert result.days_until_due == -9


def test_offsets_use_calendar_days_not_hours():
    """Late-evening reference time still counts tomorrow as +1."""
    evening = datetime(2024, 6, 10, 23, 59, tzinfo=timezone.utc)
    assert days_until_due(date(2024, 6, 11), evening) == 1
    assert days_until_due(date(2024, 6, 10), evening) == 0


def test_offsets_across_month_and_year_boundaries():
    assert days_until_due(date(2024, 7, 1), date(2024, 6, 30)) == 1
    assert days_until_due(date(2025, 1, 1), date(2024, 12, 31)) == 1
    assert days_until_due(date(2024, 3, 1), date(2024, 2, 28)) == 2  # leap year


def test_due_labels():
    assert due_label(-1) == "overdue by 1 day"
    assert due_label(-3) == "overdue by 3 days"
    assert due_label(0) == "today"
    assert due_label(1) == "tomorrow"
    assert due_label(5) == "in 5 days"
    assert due_label(10, date(2024, 6, 20)) == "20 Jun 2024"
    assert due_label(UNSCHEDULED_DAYS) == "no due date"


def test_is_urgent_window():
    """Urgent = pending and due within 0..3 days; overdue and done are not urgent."""
    assert is_urgent(_task("a", date(2024, 6, 10)), REF)
    assert is_urgent(_task("b", date(2024, 6, 13)), REF)
    assert not is_urgent(_task("c", date(2024, 6, 14)), REF)
    assert not is_urgent(_task("d", date(2024, 6, 9)), REF)
    assert not is_urgent(_task("e"), REF)
    assert not is_urgent(_task("f", date(2024, 6, 11), status=TASK_STATUS_DONE), REF)
