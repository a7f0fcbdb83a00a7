from __future__ import annotations

from taskboard.constants import PRIORITY_RANK, TASK_TYPES
from taskboard.domain.common.errors import ValidationError


def validate_title(title: str) -> None:
    if not title or not title.strip():
        raise ValidationError("Title is required.")
    if len(title.strip()) > 500:
        raise ValidationError("Title is too long (max 500 chars).")


def validate_priority(priority: str) -> None:
    if priority not in PRIORITY_RANK:
        raise ValidationError(f"Unknown priority: {priority}")


def validate_task_type(task_type: str) -> None:
    if task_type not in TASK_TYPES:
        raise ValidationError(f"Unknown task type: {task_type}")
