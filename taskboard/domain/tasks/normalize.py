# -*- coding: utf-8 -*-
"""
Ingestion: raw store records -> canonical models.

Every default (subject, priority, status, type) and the string-or-list tag
format are resolved here, so the engine never sees a partial record. Bad
values degrade to their defaults instead of raising.
"""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Iterable, Mapping, Optional

from taskboard.constants import (
    DEFAULT_PRIORITY,
    DEFAULT_TASK_TYPE,
    PRIORITY_RANK,
    TASK_STATUS_DONE,
    TASK_STATUS_PENDING,
    TASK_TYPE_GROUP_WORK,
    TASK_TYPES,
    UNCATEGORIZED,
    WEEKDAYS,
)
from taskboard.domain.common.errors import ValidationError
from taskboard.domain.common.time import from_epoch_ms, from_iso
from taskboard.domain.subjects.models import Subject
from taskboard.domain.tasks.models import Task
from taskboard.domain.timetable.models import ClassSchedule

logger = logging.getLogger(__name__)


def _pick(record: Mapping[str, Any], *keys: str) -> Any:
    """First non-None value among camelCase/snake_case spellings."""
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def _text(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def normalize_tags(raw: Any) -> tuple[str, ...]:
    """Comma-delimited string or sequence -> ordered, trimmed, unique tags."""
    if raw is None:
        return ()
    if isinstance(raw, str):
        items: Iterable[Any] = raw.split(",")
    elif isinstance(raw, (list, tuple, set, frozenset)):
        items = raw
    else:
        items = [raw]

    seen: list[str] = []
    for item in items:
        tag = _text(item)
        if tag and tag not in seen:
            seen.append(tag)
    return tuple(seen)


def parse_due_date(raw: Any) -> Optional[date]:
    """Calendar date from date/datetime/ISO string. Unparseable -> None."""
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str) or not raw.strip():
        return None

    value = raw.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        logger.debug("Unparseable due date %r treated as unscheduled", raw)
        return None


def parse_timestamp(raw: Any) -> Optional[datetime]:
    """Epoch milliseconds or ISO string -> aware datetime. Unparseable -> None."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, datetime):
        return raw if raw.tzinfo else from_iso(raw.isoformat())
    try:
        if isinstance(raw, (int, float)):
            return from_epoch_ms(raw)
        if isinstance(raw, str) and raw.strip():
            value = raw.strip()
            if value.isdigit():
                return from_epoch_ms(int(value))
            return from_iso(value)
    except (ValueError, OverflowError, OSError):
        logger.debug("Unparseable timestamp %r ignored", raw)
    return None


def normalize_subject_label(raw: Any) -> str:
    label = _text(raw)
    return label or UNCATEGORIZED


def normalize_priority(raw: Any) -> str:
    value = _text(raw).capitalize()
    return value if value in PRIORITY_RANK else DEFAULT_PRIORITY


def normalize_status(raw: Any) -> str:
    return TASK_STATUS_DONE if _text(raw).lower() == "done" else TASK_STATUS_PENDING


def normalize_task_type(raw: Any) -> str:
    value = _text(raw)
    if value.replace(" ", "").lower() == "groupwork":
        return TASK_TYPE_GROUP_WORK
    for known in TASK_TYPES:
        if value.lower() == known.lower():
            return known
    return DEFAULT_TASK_TYPE


def normalize_task(record: Mapping[str, Any]) -> Task:
    """Convert one raw repository record into the canonical Task."""
    return Task(
        id=_text(record.get("id")),
        title=_text(record.get("title")),
        due_date=parse_due_date(_pick(record, "due_date", "dueDate")),
        status=normalize_status(record.get("status")),
        task_type=normalize_task_type(_pick(record, "task_type", "type")),
        subject=normalize_subject_label(record.get("subject")),
        priority=normalize_priority(record.get("priority")),
        description=_text(record.get("description")),
        estimated_time=_text(_pick(record, "estimated_time", "estimatedTime")),
        tags=normalize_tags(record.get("tags")),
        created_at=parse_timestamp(_pick(record, "created_at", "createdAt")),
        updated_at=parse_timestamp(_pick(record, "updated_at", "updatedAt")),
    )


def normalize_subject(record: Mapping[str, Any]) -> Subject:
    return Subject(id=_text(record.get("id")), name=_text(record.get("name")))


def normalize_weekday(raw: Any) -> str:
    value = _text(raw).lower()
    for day in WEEKDAYS:
        if value in (day.lower(), day[:3].lower()):
            return day
    raise ValidationError(f"Unknown weekday: {raw!r}")


def normalize_schedule(record: Mapping[str, Any]) -> ClassSchedule:
    return ClassSchedule(
        id=_text(record.get("id")),
        day=normalize_weekday(record.get("day")),
        start_time=_text(_pick(record, "start_time", "startTime")),
        end_time=_text(_pick(record, "end_time", "endTime")),
        subject=_text(record.get("subject")),
        room=_text(record.get("room")),
        note=_text(record.get("note")),
    )
