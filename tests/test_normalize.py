"""
Tests for ingestion of raw store records.
"""
from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from taskboard.constants import DEFAULT_PRIORITY, TASK_STATUS_DONE, TASK_STATUS_PENDING, UNCATEGORIZED
from taskboard.domain.common.errors import ValidationError
from taskboard.domain.tasks import normalize_tags, normalize_task
from taskboard.domain.tasks.normalize import normalize_weekday, parse_due_date, parse_timestamp


def test_tags_string_and_list_give_same_result():
    assert normalize_tags("exam, reading,,exam ") == ("exam", "reading")
    assert normalize_tags(["exam", " reading", "", "exam"]) == ("exam", "reading")
    assert normalize_tags(None) == ()


def test_defaults_for_partial_record():
    task = normalize_task({"id": "1", "title": "Essay", "subject": "  ", "priority": "urgent"})
    assert task.subject == UNCATEGORIZED
    assert task.priority == DEFAULT_PRIORITY
    assert task.status == TASK_STATUS_PENDING
    assert task.due_date is None
    assert task.tags == ()


def test_camel_case_record():
    task = normalize_task(
        {
            "id": "x",
            "title": "Lab report",
            "dueDate": "2024-06-14",
            "status": "Done",
            "type": "groupwork",
            "estimatedTime": "2h",
            "tags": "lab, chemistry",
            "createdAt": 1718000000000,
            "updatedAt": "2024-06-10T08:00:00Z",
        }
    )
    assert task.due_date == date(2024, 6, 14)
    assert task.status == TASK_STATUS_DONE
    assert task.task_type == "Group Work"
    assert task.estimated_time == "2h"
    assert task.tags == ("lab", "chemistry")
    assert task.created_at == datetime.fromtimestamp(1718000000, tz=timezone.utc)
    assert task.updated_at == datetime(2024, 6, 10, 8, 0, tzinfo=timezone.utc)


def test_malformed_due_date_becomes_unscheduled():
    assert normalize_task({"id": "1", "title": "t", "due_date": "next friday"}).due_date is None
    assert normalize_task({"id": "1", "title": "t", "due_date": "2024-06-14T00:00:00Z"}).due_date == date(2024, 6, 14)


def test_timestamp_garbage_is_ignored():
    assert parse_timestamp("not a time") is None
    assert parse_timestamp(True) is None


def test_weekday_names():
    assert normalize_weekday("mon") == "Monday"
    assert normalize_weekday("Sunday") == "Sunday"
    with pytest.raises(ValidationError):
        normalize_weekday("Funday")


def test_due_date_with_trailing_garbage_or_bad_time_is_unscheduled():
    """The whole string must parse, not just its first ten characters."""
    assert parse_due_date("2024-06-10garbage") is None
    assert parse_due_date("2024-06-10T99:99") is None
    assert parse_due_date("2024-06-10") == date(2024, 6, 10)
    assert parse_due_date("2024-06-10T23:30:00+03:00") == date(2024, 6, 10)


def test_tags_only_split_known_collections():
    """bytes and dicts are single values, not iterables of tags."""
    assert normalize_tags(("exam", "exam")) == ("exam",)
    assert normalize_tags(b"lab") == ("b'lab'",)
    assert len(normalize_tags({"a": 1, "b": 2})) == 1
    assert normalize_tags(42) == ("42",)
