# -*- coding: utf-8 -*-
"""Task analytics engine. Pure functions of (tasks, reference_date, filters)."""

from taskboard.domain.tasks.classifier import (
    UNSCHEDULED_DAYS,
    classify,
    days_until_due,
    due_label,
    is_urgent,
    task_due_label,
)
from taskboard.domain.tasks.grouping import group_by_day, group_by_subject, unique_subjects
from taskboard.domain.tasks.normalize import normalize_tags, normalize_task
from taskboard.domain.tasks.stats import aggregate
from taskboard.domain.tasks.views import (
    dashboard_order,
    filter_tasks,
    management_order,
    upcoming,
    view,
)

__all__ = [
    "UNSCHEDULED_DAYS",
    "aggregate",
    "classify",
    "dashboard_order",
    "days_until_due",
    "due_label",
    "filter_tasks",
    "group_by_day",
    "group_by_subject",
    "is_urgent",
    "management_order",
    "normalize_tags",
    "normalize_task",
    "task_due_label",
    "unique_subjects",
    "upcoming",
    "view",
]
