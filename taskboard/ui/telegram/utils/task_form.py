"""
User input -> TaskChanges for the edit flow.

Raises ValidationError with a user-facing message when the text does not fit
the field, so the handler can keep the user on the same step.
"""
from __future__ import annotations

from datetime import date

from taskboard.constants import PRIORITY_RANK, TASK_TYPES, UNCATEGORIZED
from taskboard.domain.common.errors import ValidationError
from taskboard.domain.tasks.models import TaskChanges
from taskboard.domain.tasks.normalize import normalize_tags
from taskboard.ui.telegram.texts import tasks as texts
from taskboard.utils import parse_date_input

FIELD_TITLE = "title"
FIELD_DUE = "due"
FIELD_SUBJECT = "subject"
FIELD_PRIORITY = "priority"
FIELD_TYPE = "type"
FIELD_DESCRIPTION = "description"
FIELD_ESTIMATE = "estimate"
FIELD_TAGS = "tags"

EDIT_FIELDS = (
    FIELD_TITLE,
    FIELD_DUE,
    FIELD_SUBJECT,
    FIELD_PRIORITY,
    FIELD_TYPE,
    FIELD_DESCRIPTION,
    FIELD_ESTIMATE,
    FIELD_TAGS,
)

# fields that can be emptied with the "Clear" button
CLEARABLE_FIELDS = (FIELD_DUE, FIELD_DESCRIPTION, FIELD_ESTIMATE, FIELD_TAGS)


def changes_from_text(field: str, text: str, today: date) -> TaskChanges:
    value = (text or "").strip()

    if field == FIELD_TITLE:
        if not value:
            raise ValidationError(texts.EMPTY_TITLE)
        return TaskChanges(title=value)
    if field == FIELD_DUE:
        due = parse_date_input(value, today)
        if due is None:
            raise ValidationError(texts.INVALID_DUE)
        return TaskChanges(due_date=due)
    if field == FIELD_SUBJECT:
        return TaskChanges(subject=value or UNCATEGORIZED)
    if field == FIELD_PRIORITY:
        priority = value.capitalize()
        if priority not in PRIORITY_RANK:
            raise ValidationError(texts.INVALID_PRIORITY)
        return TaskChanges(priority=priority)
    if field == FIELD_TYPE:
        for task_type in TASK_TYPES:
            if value.lower() == task_type.lower():
                return TaskChanges(task_type=task_type)
        raise ValidationError(texts.INVALID_TYPE)
    if field == FIELD_DESCRIPTION:
        return TaskChanges(description=value)
    if field == FIELD_ESTIMATE:
        return TaskChanges(estimated_time=value)
    if field == FIELD_TAGS:
        return TaskChanges(tags=normalize_tags(value))
    raise ValidationError(f"Unknown field: {field!r}")


def cleared_changes(field: str) -> TaskChanges:
    if field == FIELD_DUE:
        return TaskChanges(clear_due_date=True)
    if field == FIELD_DESCRIPTION:
        return TaskChanges(description="")
    if field == FIELD_ESTIMATE:
        return TaskChanges(estimated_time="")
    if field == FIELD_TAGS:
        return TaskChanges(tags=())
    raise ValidationError(f"{field!r} cannot be cleared")
