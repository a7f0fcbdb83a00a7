# -*- coding: utf-8 -*-
"""Partition tasks by subject and class schedules by weekday."""
from __future__ import annotations

import logging
from typing import Iterable

from taskboard.constants import UNCATEGORIZED, WEEKDAYS
from taskboard.domain.tasks.models import SubjectGroup, Task
from taskboard.domain.timetable.models import ClassSchedule, DayBucket

logger = logging.getLogger(__name__)


def subject_key(task: Task) -> str:
    return (task.subject or "").strip() or UNCATEGORIZED


def group_by_subject(tasks: Iterable[Task]) -> dict[str, SubjectGroup]:
    """
    Group tasks by subject, in order of first encounter.

    Every task lands in exactly one group; blank subjects go to "uncategorized".
    """
    members: dict[str, list[Task]] = {}
    for task in tasks:
        members.setdefault(subject_key(task), []).append(task)

    groups: dict[str, SubjectGroup] = {}
    for subject, items in members.items():
        completed = sum(1 for t in items if t.is_done)
        size = len(items)
        groups[subject] = SubjectGroup(
            subject=subject,
            tasks=tuple(items),
            completed=completed,
            pending=size - completed,
            progress_percent=(100.0 * completed / size) if size else 0.0,
        )
    return groups


def unique_subjects(tasks: Iterable[Task]) -> list[str]:
    """Sorted distinct subjects for the subject filter menu."""
    return sorted({t.subject for t in tasks if t.subject and t.subject != UNCATEGORIZED})


def group_by_day(schedules: Iterable[ClassSchedule]) -> list[DayBucket]:
    """
    Seven buckets Monday..Sunday, each sorted by start time.

    Empty days are kept. Times are zero-padded HH:MM so string order is time order.
    """
    per_day: dict[str, list[ClassSchedule]] = {day: [] for day in WEEKDAYS}
    for schedule in schedules:
        if schedule.day not in per_day:
            logger.debug("Schedule %s has unknown day %r, skipped", schedule.id, schedule.day)
            continue
        per_day[schedule.day].append(schedule)

    return [
        DayBucket(day=day, schedules=tuple(sorted(per_day[day], key=lambda s: s.start_time)))
        for day in WEEKDAYS
    ]
