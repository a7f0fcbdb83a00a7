from __future__ import annotations

import logging
from dataclasses import asdict, replace

from taskboard.domain.common.errors import NotFoundError, ValidationError
from taskboard.domain.common.ports import IdGenerator
from taskboard.domain.tasks.grouping import group_by_day
from taskboard.domain.tasks.normalize import normalize_weekday
from taskboard.domain.timetable.models import ClassSchedule, DayBucket, NewSchedule
from taskboard.domain.timetable.ports import ScheduleRepository
from taskboard.utils import parse_time_input

logger = logging.getLogger(__name__)


def validate_schedule(new: NewSchedule) -> NewSchedule:
    """Normalize day and times; start must be before end."""
    start = parse_time_input(new.start_time)
    end = parse_time_input(new.end_time)
    if start is None or end is None:
        raise ValidationError("Times must be HH:MM.")
    if end <= start:
        raise ValidationError("End time must be after start time.")
    subject = (new.subject or "").strip()
    if not subject:
        raise ValidationError("Subject is required.")
    return replace(
        new,
        day=normalize_weekday(new.day),
        start_time=start,
        end_time=end,
        subject=subject,
        room=(new.room or "").strip(),
        note=(new.note or "").strip(),
    )


class TimetableService:
    def __init__(self, repo: ScheduleRepository, ids: IdGenerator) -> None:
        self._repo = repo
        self._ids = ids

    async def list(self) -> list[ClassSchedule]:
        return list(await self._repo.list())

    async def week(self) -> list[DayBucket]:
        return group_by_day(await self._repo.list())

    async def add(self, new: NewSchedule) -> ClassSchedule:
        cleaned = validate_schedule(new)
        schedule = await self._repo.create(self._ids.new_id(), cleaned)
        logger.info("Class added: %s %s-%s %s", schedule.day, schedule.start_time, schedule.end_time, schedule.subject)
        return schedule

    async def update(self, schedule_id: str, new: NewSchedule) -> ClassSchedule:
        cleaned = validate_schedule(new)
        if not await self._repo.update(schedule_id, cleaned):
            raise NotFoundError("Class not found.")
        return ClassSchedule(id=schedule_id, **asdict(cleaned))

    async def delete(self, schedule_id: str) -> None:
        if not await self._repo.delete(schedule_id):
            raise NotFoundError("Class not found.")
        logger.info("Class deleted id=%s", schedule_id)
