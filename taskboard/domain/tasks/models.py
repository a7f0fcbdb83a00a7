# -*- coding: utf-8 -*-
"""Canonical task model and the value objects derived from it."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Literal, Optional

from taskboard.constants import (
    DEFAULT_PRIORITY,
    DEFAULT_TASK_TYPE,
    TASK_STATUS_DONE,
    TASK_STATUS_PENDING,
    UNCATEGORIZED,
)

TaskStatus = Literal["Pending", "Done"]
Priority = Literal["Low", "Medium", "High"]
TaskType = Literal["Homework", "Plan", "Group Work"]


@dataclass(frozen=True)
class Task:
    id: str
    title: str
    due_date: Optional[date] = None
    status: TaskStatus = TASK_STATUS_PENDING
    task_type: TaskType = DEFAULT_TASK_TYPE
    subject: str = UNCATEGORIZED
    priority: Priority = DEFAULT_PRIORITY
    description: str = ""
    estimated_time: str = ""
    tags: tuple[str, ...] = ()
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_done(self) -> bool:
        return self.status == TASK_STATUS_DONE

    @property
    def is_pending(self) -> bool:
        return self.status == TASK_STATUS_PENDING


@dataclass(frozen=True)
class NewTask:
    title: str
    due_date: Optional[date] = None
    task_type: TaskType = DEFAULT_TASK_TYPE
    subject: str = UNCATEGORIZED
    priority: Priority = DEFAULT_PRIORITY
    description: str = ""
    estimated_time: str = ""
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class TaskChanges:
    """Edit request. None = keep current value. Status is never edited here."""
    title: Optional[str] = None
    due_date: Optional[date] = None
    clear_due_date: bool = False
    task_type: Optional[TaskType] = None
    subject: Optional[str] = None
    priority: Optional[Priority] = None
    description: Optional[str] = None
    estimated_time: Optional[str] = None
    tags: Optional[tuple[str, ...]] = None


@dataclass(frozen=True)
class Classification:
    days_until_due: int
    bucket: str


@dataclass(frozen=True)
class Stats:
    total: int = 0
    completed: int = 0
    pending: int = 0
    overdue: int = 0
    due_today: int = 0
    due_tomorrow: int = 0
    due_this_week: int = 0
    high_priority: int = 0
    completion_rate: int = 0


@dataclass(frozen=True)
class SubjectGroup:
    subject: str
    tasks: tuple[Task, ...]
    completed: int
    pending: int
    progress_percent: float


@dataclass(frozen=True)
class Dashboard:
    reference_date: date
    stats: Stats
    tasks: list[Task]
    by_subject: dict[str, SubjectGroup]
    due_today: list[Task]
    overdue: list[Task]
    upcoming: list[Task]
    subjects: list[str]
    filter_name: str
    subject_filter: str


@dataclass(frozen=True)
class ToggleResult:
    tasks: list[Task]
    ok: bool
    task: Optional[Task] = None


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    kind: str
    fields: tuple[tuple[str, str], ...] = field(default_factory=tuple)
