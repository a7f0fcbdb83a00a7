from __future__ import annotations

import logging
from typing import Sequence

from taskboard.domain.common.errors import ValidationError
from taskboard.domain.tasks.normalize import normalize_schedule
from taskboard.domain.timetable.models import ClassSchedule, NewSchedule
from taskboard.domain.timetable.ports import ScheduleRepository
from taskboard.infra.db.connection import Database

logger = logging.getLogger(__name__)


class TimetableSqliteRepo(ScheduleRepository):
    def __init__(self, db: Database) -> None:
        self._db = db

    async def list(self) -> Sequence[ClassSchedule]:
        rows = await self._db.fetchall("SELECT * FROM timetable ORDER BY start_time;")
        schedules: list[ClassSchedule] = []
        for r in rows:
            try:
                schedules.append(normalize_schedule(dict(r)))
            except ValidationError:
                logger.warning("Skipping timetable row %s with bad day %r", r["id"], r["day"])
        return schedules

    async def create(self, schedule_id: str, new: NewSchedule) -> ClassSchedule:
        await self._db.execute(
            """
            INSERT INTO timetable(id, day, start_time, end_time, subject, room, note)
            VALUES (?, ?, ?, ?, ?, ?, ?);
            """,
            (schedule_id, new.day, new.start_time, new.end_time, new.subject, new.room, new.note),
        )
        return ClassSchedule(
            id=schedule_id,
            day=new.day,
            start_time=new.start_time,
            end_time=new.end_time,
            subject=new.subject,
            room=new.room,
            note=new.note,
        )

    async def update(self, schedule_id: str, new: NewSchedule) -> bool:
        count = await self._db.execute(
            """
            UPDATE timetable
            SET day = ?, start_time = ?, end_time = ?, subject = ?, room = ?, note = ?
            WHERE id = ?;
            """,
            (new.day, new.start_time, new.end_time, new.subject, new.room, new.note, schedule_id),
        )
        return count > 0

    async def delete(self, schedule_id: str) -> bool:
        count = await self._db.execute("DELETE FROM timetable WHERE id = ?;", (schedule_id,))
        return count > 0
