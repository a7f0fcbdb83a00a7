# -*- coding: utf-8 -*-
"""
Date classification of a single task against a reference date.

Rules:
- Offsets are whole calendar days (date subtraction, never seconds / 86400)
- Undated tasks get UNSCHEDULED_DAYS and no finite bucket
- Buckets apply to Pending tasks only; Done tasks are bucketed as "done"
- First match wins: overdue, due_today, due_tomorrow, due_this_week, upcoming
"""
from __future__ import annotations

import sys
from datetime import date, datetime
from typing import Optional, Union

from taskboard.constants import (
    BUCKET_DONE,
    BUCKET_DUE_THIS_WEEK,
    BUCKET_DUE_TODAY,
    BUCKET_DUE_TOMORROW,
    BUCKET_OVERDUE,
    BUCKET_UNSCHEDULED,
    BUCKET_UPCOMING,
    URGENT_WINDOW_DAYS,
    WEEK_WINDOW_DAYS,
)
from taskboard.domain.common.time import date_only
from taskboard.domain.tasks.models import Classification, Task

# Effectively "infinite future"; sorts after every real offset.
UNSCHEDULED_DAYS = sys.maxsize


def days_until_due(due_date: Optional[date], reference_date: Union[date, datetime]) -> int:
    """Signed day offset from reference_date to due_date."""
    if due_date is None:
        return UNSCHEDULED_DAYS
    return (date_only(due_date) - date_only(reference_date)).days


def bucket_for_days(days: int) -> str:
    if days == UNSCHEDULED_DAYS:
        return BUCKET_UNSCHEDULED
    if days < 0:
        return BUCKET_OVERDUE
    if days == 0:
        return BUCKET_DUE_TODAY
    if days == 1:
        return BUCKET_DUE_TOMORROW
    if days <= WEEK_WINDOW_DAYS:
        return BUCKET_DUE_THIS_WEEK
    return BUCKET_UPCOMING


def classify(task: Task, reference_date: Union[date, datetime]) -> Classification:
    days = days_until_due(task.due_date, reference_date)
    if task.is_done:
        return Classification(days_until_due=days, bucket=BUCKET_DONE)
    return Classification(days_until_due=days, bucket=bucket_for_days(days))


def is_urgent(task: Task, reference_date: Union[date, datetime]) -> bool:
    """Pending and due within the next few days (today included)."""
    if not task.is_pending or task.due_date is None:
        return False
    return 0 <= days_until_due(task.due_date, reference_date) <= URGENT_WINDOW_DAYS


def format_date(d: date) -> str:
    return f"{d.day} {d.strftime('%b')} {d.year}"


def due_label(days: int, due_date: Optional[date] = None) -> str:
    """
    Human label for a day offset.

    negative -> "overdue by N days", 0 -> "today", 1 -> "tomorrow",
    2..7 -> "in N days", otherwise the calendar date.
    """
    if days == UNSCHEDULED_DAYS or (due_date is None and days > WEEK_WINDOW_DAYS):
        return "no due date"
    if days < 0:
        n = abs(days)
        return f"overdue by {n} day" if n == 1 else f"overdue by {n} days"
    if days == 0:
        return "today"
    if days == 1:
        return "tomorrow"
    if days <= WEEK_WINDOW_DAYS:
        return f"in {days} days"
    return format_date(due_date)


def task_due_label(task: Task, reference_date: Union[date, datetime]) -> str:
    return due_label(days_until_due(task.due_date, reference_date), task.due_date)
