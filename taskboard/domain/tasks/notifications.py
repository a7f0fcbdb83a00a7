# -*- coding: utf-8 -*-
"""Messages sent to the notifier after successful writes."""
from __future__ import annotations

from datetime import date
from typing import Optional

from taskboard.constants import NOTIFY_DANGER, NOTIFY_PRIMARY, NOTIFY_SUCCESS, NOTIFY_WARNING
from taskboard.domain.tasks.models import Notification, Task

NOT_SET = "not set"


def _date_text(d: Optional[date]) -> str:
    return d.isoformat() if d else NOT_SET


def _diff(old: str, new: str) -> str:
    if old != new:
        return f"- {old or NOT_SET}\n+ {new or NOT_SET}"
    return new or NOT_SET


def task_added(task: Task) -> Notification:
    fields = [
        ("Title", task.title),
        ("Subject", task.subject),
        ("Priority", task.priority),
        ("Due", _date_text(task.due_date)),
    ]
    if task.description:
        fields.append(("Description", task.description))
    return Notification(
        title="New task",
        description="A new task was added.",
        kind=NOTIFY_PRIMARY,
        fields=tuple(fields),
    )


def task_edited(before: Task, after: Task) -> Notification:
    fields = [
        ("Title", _diff(before.title, after.title)),
        ("Subject", _diff(before.subject, after.subject)),
        ("Priority", _diff(before.priority, after.priority)),
        ("Due", _diff(_date_text(before.due_date), _date_text(after.due_date))),
    ]
    if before.description or after.description:
        fields.append(("Description", _diff(before.description, after.description)))
    return Notification(
        title="Task edited",
        description="Task details were changed.",
        kind=NOTIFY_WARNING,
        fields=tuple(fields),
    )


def task_completed(task: Task) -> Notification:
    return Notification(
        title="Task done",
        description="Well done!",
        kind=NOTIFY_SUCCESS,
        fields=(("Title", task.title), ("Subject", task.subject)),
    )


def task_deleted(task: Task) -> Notification:
    return Notification(
        title="Task deleted",
        description="The task was removed.",
        kind=NOTIFY_DANGER,
        fields=(("Title", task.title), ("Subject", task.subject)),
    )
