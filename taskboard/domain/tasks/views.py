# -*- coding: utf-8 -*-
"""
Filtering and the two named list orderings.

dashboard_order: Pending first; dated before undated, earliest due first;
Done tasks most recently updated first.

management_order: Pending first, then priority (High, Medium, Low).

Both use sorted(), so ties keep their input order. Inputs are never mutated.
"""
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Callable, Iterable, Union

from taskboard.constants import (
    FILTER_ALL,
    FILTER_HIGH,
    FILTER_OVERDUE,
    FILTER_TODAY,
    FILTER_WEEK,
    PRIORITY_HIGH,
    PRIORITY_RANK,
    SUBJECT_FILTER_ALL,
    UPCOMING_LIMIT,
    WEEK_WINDOW_DAYS,
)
from taskboard.domain.common.errors import ValidationError
from taskboard.domain.common.time import date_only
from taskboard.domain.tasks.models import Task

RefDate = Union[date, datetime]


def _status_rank(task: Task) -> int:
    return 0 if task.is_pending else 1


def _updated_ts(task: Task) -> float:
    return task.updated_at.timestamp() if task.updated_at else 0.0


def dashboard_sort_key(task: Task) -> tuple:
    if task.is_pending:
        if task.due_date is None:
            return (0, 1, 0, 0.0)
        return (0, 0, task.due_date.toordinal(), 0.0)
    return (1, 0, 0, -_updated_ts(task))


def management_sort_key(task: Task) -> tuple:
    return (_status_rank(task), PRIORITY_RANK.get(task.priority, 1))


def dashboard_order(tasks: Iterable[Task]) -> list[Task]:
    return sorted(tasks, key=dashboard_sort_key)


def management_order(tasks: Iterable[Task]) -> list[Task]:
    return sorted(tasks, key=management_sort_key)


def _predicate(name: str, ref: date) -> Callable[[Task], bool]:
    # "week" has no lower bound: overdue tasks are included
    week_end = ref + timedelta(days=WEEK_WINDOW_DAYS)
    predicates: dict[str, Callable[[Task], bool]] = {
        FILTER_ALL: lambda t: True,
        FILTER_TODAY: lambda t: t.is_pending and t.due_date is not None and t.due_date == ref,
        FILTER_WEEK: lambda t: t.is_pending and t.due_date is not None and t.due_date <= week_end,
        FILTER_OVERDUE: lambda t: t.is_pending and t.due_date is not None and t.due_date < ref,
        FILTER_HIGH: lambda t: t.is_pending and t.priority == PRIORITY_HIGH,
    }
    try:
        return predicates[name]
    except KeyError:
        raise ValidationError(f"Unknown filter: {name!r}") from None


def filter_tasks(
    tasks: Iterable[Task],
    filter_name: str,
    subject_filter: str,
    reference_date: RefDate,
) -> list[Task]:
    """Subject filter (exact, case-sensitive) first, then the time/priority filter."""
    predicate = _predicate(filter_name, date_only(reference_date))
    selected = [t for t in tasks if subject_filter == SUBJECT_FILTER_ALL or t.subject == subject_filter]
    return [t for t in selected if predicate(t)]


def view(
    tasks: Iterable[Task],
    filter_name: str,
    subject_filter: str,
    reference_date: RefDate,
) -> list[Task]:
    """Filtered tasks in dashboard order. Pure: same input, same output."""
    return dashboard_order(filter_tasks(tasks, filter_name, subject_filter, reference_date))


def due_today(tasks: Iterable[Task], reference_date: RefDate) -> list[Task]:
    ref = date_only(reference_date)
    return [t for t in tasks if t.is_pending and t.due_date == ref]


def overdue(tasks: Iterable[Task], reference_date: RefDate) -> list[Task]:
    ref = date_only(reference_date)
    return dashboard_order(t for t in tasks if t.is_pending and t.due_date is not None and t.due_date < ref)


def upcoming(tasks: Iterable[Task], reference_date: RefDate, limit: int = UPCOMING_LIMIT) -> list[Task]:
    """Next pending tasks due after today, earliest first."""
    ref = date_only(reference_date)
    later = [t for t in tasks if t.is_pending and t.due_date is not None and t.due_date > ref]
    return sorted(later, key=lambda t: t.due_date)[:limit]
