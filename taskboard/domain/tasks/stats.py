# -*- coding: utf-8 -*-
"""Completion statistics over a task snapshot."""
from __future__ import annotations

from collections import Counter
from datetime import date, datetime
from typing import Iterable, Union

from taskboard.constants import (
    BUCKET_DUE_THIS_WEEK,
    BUCKET_DUE_TODAY,
    BUCKET_DUE_TOMORROW,
    BUCKET_OVERDUE,
    PRIORITY_HIGH,
)
from taskboard.domain.tasks.classifier import classify
from taskboard.domain.tasks.models import Stats, Task


def percent(part: int, whole: int) -> int:
    """
    Integer percentage rounded half up (1/8 -> 13, 1/3 -> 33).

    Returns 0 when whole is 0.
    """
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def aggregate(tasks: Iterable[Task], reference_date: Union[date, datetime]) -> Stats:
    """
    Reduce tasks into counts.

    Bucket counts and high_priority only include Pending tasks. A task is
    counted in at most one of overdue/due_today/due_tomorrow/due_this_week.
    """
    total = 0
    completed = 0
    high_priority = 0
    buckets: Counter[str] = Counter()

    for task in tasks:
        total += 1
        if task.is_done:
            completed += 1
            continue
        if task.priority == PRIORITY_HIGH:
            high_priority += 1
        buckets[classify(task, reference_date).bucket] += 1

    return Stats(
        total=total,
        completed=completed,
        pending=total - completed,
        overdue=buckets[BUCKET_OVERDUE],
        due_today=buckets[BUCKET_DUE_TODAY],
        due_tomorrow=buckets[BUCKET_DUE_TOMORROW],
        due_this_week=buckets[BUCKET_DUE_THIS_WEEK],
        high_priority=high_priority,
        completion_rate=percent(completed, total),
    )
