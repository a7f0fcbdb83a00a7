"""
Bot conversation flows driven handler by handler.

Messages and callbacks are small fakes that record replies; FSM state is
aiogram's own MemoryStorage, services run on a temporary SQLite DB.
"""
from __future__ import annotations

import asyncio
import os
import tempfile
from datetime import date, datetime, timezone

from aiogram.fsm.context import FSMContext
from aiogram.fsm.storage.base import StorageKey
from aiogram.fsm.storage.memory import MemoryStorage

from taskboard.domain.common.ports import Clock, IdGenerator
from taskboard.domain.subjects.service import SubjectService
from taskboard.domain.tasks.models import NewTask
from taskboard.domain.tasks.ports import Notifier
from taskboard.domain.tasks.service import TaskService
from taskboard.domain.timetable.models import NewSchedule
from taskboard.domain.timetable.service import TimetableService
from taskboard.infra.db.connection import Database
from taskboard.infra.db.repo.subjects_sqlite import SubjectsSqliteRepo
from taskboard.infra.db.repo.tasks_sqlite import TasksSqliteRepo
from taskboard.infra.db.repo.timetable_sqlite import TimetableSqliteRepo
from taskboard.infra.db.schema_version import apply_migrations
from taskboard.ui.telegram.handlers.subjects import subject_rename_name, subject_rename_start
from taskboard.ui.telegram.handlers.tasks import (
    add_description,
    add_description_skip,
    add_estimate,
    add_estimate_skip,
    add_tags,
    edit_choose_field,
    edit_clear,
    edit_priority,
    edit_start,
    edit_value,
)
from taskboard.ui.telegram.handlers.timetable import tt_day, tt_edit_start, tt_end, tt_room_skip, tt_start, tt_subject
from taskboard.ui.telegram.states.tasks import SubjectsFlow, TasksFlow, TimetableFlow
from taskboard.ui.telegram.texts import subjects as subject_texts
from taskboard.ui.telegram.texts import tasks as task_texts
from taskboard.ui.telegram.texts import timetable as timetable_texts

NOW = datetime(2024, 6, 10, 9, 30, tzinfo=timezone.utc)


class FixedClock(Clock):
    def now(self) -> datetime:
        return NOW


class SequentialIds(IdGenerator):
    def __init__(self) -> None:
        self._n = 0

    def new_id(self) -> str:
        self._n += 1
        return f"id{self._n}"


class RecordingNotifier(Notifier):
    def __init__(self) -> None:
        self.sent = []

    async def notify(self, notification) -> None:
        self.sent.append(notification)


class FakeMessage:
    def __init__(self, text: str = "") -> None:
        self.text = text
        self.replies = []

    async def answer(self, text, reply_markup=None, **kwargs):
        self.replies.append(text)

    async def edit_text(self, text, reply_markup=None, **kwargs):
        self.replies.append(text)


class FakeCallback:
    def __init__(self, data: str) -> None:
        self.data = data
        self.message = FakeMessage()
        self.alerts = []

    async def answer(self, text=None, show_alert=False, **kwargs):
        if text:
            self.alerts.append(text)


def _state() -> FSMContext:
    return FSMContext(storage=MemoryStorage(), key=StorageKey(bot_id=1, chat_id=1, user_id=1))


async def _run_with_db(test_fn):
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    try:
        db = Database(path)
        await apply_migrations(db, now_iso=NOW.isoformat())
        await test_fn(db)
    finally:
        for p in (path, path + "-wal", path + "-shm"):
            if os.path.exists(p):
                os.unlink(p)


def _task_service(db: Database, notifier=None) -> TaskService:
    return TaskService(repo=TasksSqliteRepo(db), clock=FixedClock(), ids=SequentialIds(), notifier=notifier)


def test_edit_due_date_from_task_list():
    """Edit button -> field -> value updates the task and sends the diff."""
    async def run(db: Database) -> None:
        notifier = RecordingNotifier()
        service = _task_service(db, notifier)
        task = await service.add_task(NewTask(title="Essay", due_date=date(2024, 6, 14)))
        state = _state()

        await edit_start(FakeCallback(f"tk:edit:{task.id}"), state, service)
        assert await state.get_state() == TasksFlow.edit_field.state

        await edit_choose_field(FakeCallback("ed:f:due"), state)
        assert await state.get_state() == TasksFlow.edit_value.state

        # unreadable date keeps the user on the same step
        bad = FakeMessage("someday")
        await edit_value(bad, state, service)
        assert bad.replies == [task_texts.INVALID_DUE]
        assert await state.get_state() == TasksFlow.edit_value.state

        msg = FakeMessage("20.06.2024")
        await edit_value(msg, state, service)

        assert await state.get_state() is None
        assert msg.replies[0] == task_texts.EDITED
        assert (await service.get(task.id)).due_date == date(2024, 6, 20)
        assert notifier.sent[-1].title == "Task edited"

    asyncio.run(_run_with_db(run))


def test_edit_clear_and_priority_buttons():
    async def run(db: Database) -> None:
        service = _task_service(db)
        task = await service.add_task(NewTask(title="Lab", description="old notes", estimated_time="1h"))
        state = _state()

        await edit_start(FakeCallback(f"tk:edit:{task.id}"), state, service)
        await edit_choose_field(FakeCallback("ed:f:description"), state)
        await edit_clear(FakeCallback("ed:clear"), state, service)

        stored = await service.get(task.id)
        assert stored.description == ""
        assert stored.estimated_time == "1h"

        await edit_start(FakeCallback(f"tk:edit:{task.id}"), state, service)
        await edit_choose_field(FakeCallback("ed:f:priority"), state)
        await edit_priority(FakeCallback("ed:prio:High"), state, service)

        assert (await service.get(task.id)).priority == "High"
        assert await state.get_state() is None

    asyncio.run(_run_with_db(run))


def test_edit_unknown_task_alerts_and_keeps_state_empty():
    async def run(db: Database) -> None:
        service = _task_service(db)
        state = _state()
        cb = FakeCallback("tk:edit:missing")

        await edit_start(cb, state, service)

        assert cb.alerts == ["Task not found."]
        assert await state.get_state() is None

    asyncio.run(_run_with_db(run))


def test_add_flow_collects_description_and_estimate():
    """Tags -> description -> estimate, then the task is created."""
    async def run(db: Database) -> None:
        service = _task_service(db)
        state = _state()
        await state.update_data(title="Lab report", subject="Chem")
        await state.set_state(TasksFlow.add_tags)

        await add_tags(FakeMessage("lab"), state)
        assert await state.get_state() == TasksFlow.add_description.state

        await add_description(FakeMessage("  bring goggles "), state)
        assert await state.get_state() == TasksFlow.add_estimate.state

        msg = FakeMessage("90 min")
        await add_estimate(msg, state, service)

        [task] = await service.snapshot()
        assert task.title == "Lab report"
        assert task.subject == "Chem"
        assert task.tags == ("lab",)
        assert task.description == "bring goggles"
        assert task.estimated_time == "90 min"
        assert msg.replies[0] == task_texts.ADDED
        assert await state.get_state() is None

    asyncio.run(_run_with_db(run))


def test_add_flow_description_and_estimate_can_be_skipped():
    async def run(db: Database) -> None:
        service = _task_service(db)
        state = _state()
        await state.update_data(title="Quiz")
        await state.set_state(TasksFlow.add_description)

        await add_description_skip(FakeCallback("add:desc:skip"), state)
        await add_estimate_skip(FakeCallback("add:est:skip"), state, service)

        [task] = await service.snapshot()
        assert task.title == "Quiz"
        assert task.description == ""
        assert task.estimated_time == ""

    asyncio.run(_run_with_db(run))


def test_subject_rename_flow():
    async def run(db: Database) -> None:
        ids = SequentialIds()
        subjects = SubjectService(SubjectsSqliteRepo(db), ids)
        tasks = _task_service(db)
        math = await subjects.add("Math")
        await subjects.add("Bio")
        state = _state()

        await subject_rename_start(FakeCallback(f"sj:ren:{math.id}"), state, subjects)
        assert await state.get_state() == SubjectsFlow.rename_name.state

        # name taken: stay and retype
        taken = FakeMessage("Bio")
        await subject_rename_name(taken, state, tasks, subjects)
        assert await state.get_state() == SubjectsFlow.rename_name.state

        msg = FakeMessage("Algebra")
        await subject_rename_name(msg, state, tasks, subjects)

        assert msg.replies[0] == subject_texts.RENAMED
        assert sorted(s.name for s in await subjects.list()) == ["Algebra", "Bio"]
        assert await state.get_state() is None

    asyncio.run(_run_with_db(run))


def test_timetable_edit_reuses_add_steps_and_updates():
    async def run(db: Database) -> None:
        service = TimetableService(TimetableSqliteRepo(db), SequentialIds())
        clock = FixedClock()
        first = await service.add(NewSchedule(day="Monday", start_time="08:00", end_time="09:00", subject="Math"))
        state = _state()

        await tt_edit_start(FakeCallback(f"tt:edit:{first.id}"), state)
        await tt_day(FakeCallback("tt:day:Friday"), state)
        await tt_start(FakeMessage("8:15"), state)
        await tt_end(FakeMessage("9:45"), state)
        await tt_subject(FakeMessage("Physics"), state)
        cb = FakeCallback("tt:room:skip")
        await tt_room_skip(cb, state, service, clock)

        [moved] = await service.list()
        assert moved.id == first.id
        assert (moved.day, moved.start_time, moved.end_time, moved.subject) == ("Friday", "08:15", "09:45", "Physics")
        assert cb.message.replies[0] == timetable_texts.UPDATED
        assert await state.get_state() is None

    asyncio.run(_run_with_db(run))
