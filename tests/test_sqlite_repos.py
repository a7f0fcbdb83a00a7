"""
Tests for the SQLite layer: migrations and repository round trips on a temp DB.
"""
from __future__ import annotations

import asyncio
import os
import tempfile
from datetime import date, datetime, timezone

from taskboard.constants import TASK_STATUS_DONE
from taskboard.domain.timetable.models import NewSchedule
from taskboard.domain.tasks.models import NewTask, TaskChanges
from taskboard.infra.db.connection import Database
from taskboard.infra.db.repo.subjects_sqlite import SubjectsSqliteRepo
from taskboard.infra.db.repo.tasks_sqlite import TasksSqliteRepo
from taskboard.infra.db.repo.timetable_sqlite import TimetableSqliteRepo
from taskboard.infra.db.schema_version import apply_migrations

NOW = datetime(2024, 6, 10, 9, 30, tzinfo=timezone.utc)
LATER = datetime(2024, 6, 11, 12, 0, tzinfo=timezone.utc)


def _temp_db_path() -> str:
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    return path


async def _run_with_db(test_fn):
    path = _temp_db_path()
    try:
        db = Database(path)
        await apply_migrations(db, now_iso=NOW.isoformat())
        await test_fn(db)
    finally:
        for p in (path, path + "-wal", path + "-shm"):
            if os.path.exists(p):
                os.unlink(p)


def test_migrations_apply_once():
    async def run(db: Database) -> None:
        assert await apply_migrations(db, now_iso=NOW.isoformat()) == []
        rows = await db.fetchall("SELECT version FROM schema_migrations;")
        assert [r["version"] for r in rows] == [1]

    asyncio.run(_run_with_db(run))


def test_task_list_orders_dated_first():
    async def run(db: Database) -> None:
        repo = TasksSqliteRepo(db)
        await repo.create("u", NewTask(title="undated"), NOW)
        await repo.create("late", NewTask(title="late", due_date=date(2024, 6, 20)), NOW)
        await repo.create("soon", NewTask(title="soon", due_date=date(2024, 6, 12)), NOW)

        assert [t.id for t in await repo.list()] == ["soon", "late", "u"]

    asyncio.run(_run_with_db(run))


def test_task_update_status_and_delete():
    async def run(db: Database) -> None:
        repo = TasksSqliteRepo(db)
        await repo.create("t1", NewTask(title="Essay", tags=("exam", "reading")), NOW)

        updated = await repo.update("t1", TaskChanges(priority="High", tags=("exam",)), LATER)
        assert updated.priority == "High"
        assert updated.tags == ("exam",)
        assert updated.updated_at == LATER
        assert updated.created_at == NOW

        assert await repo.set_status("t1", TASK_STATUS_DONE, LATER)
        assert (await repo.get("t1")).status == TASK_STATUS_DONE

        assert await repo.update("missing", TaskChanges(title="x"), LATER) is None
        assert not await repo.set_status("missing", TASK_STATUS_DONE, LATER)

        assert await repo.delete("t1")
        assert await repo.get("t1") is None
        assert not await repo.delete("t1")

    asyncio.run(_run_with_db(run))


def test_legacy_comma_tags_are_read():
    """Rows written before tags were JSON still load."""
    async def run(db: Database) -> None:
        await db.execute(
            "INSERT INTO tasks(id, title, tags, created_at, updated_at) VALUES (?, ?, ?, ?, ?);",
            ("old", "Old task", "lab, chemistry", NOW.isoformat(), NOW.isoformat()),
        )
        task = await TasksSqliteRepo(db).get("old")
        assert task.tags == ("lab", "chemistry")
        assert task.subject == "uncategorized"

    asyncio.run(_run_with_db(run))


def test_subjects_repo():
    async def run(db: Database) -> None:
        repo = SubjectsSqliteRepo(db)
        await repo.create("s1", "Math")
        assert (await repo.get_by_name("Math")).id == "s1"
        assert await repo.rename("s1", "Maths")
        assert await repo.get_by_name("Math") is None
        assert [s.name for s in await repo.list()] == ["Maths"]
        assert await repo.delete("s1")
        assert await repo.list() == []

    asyncio.run(_run_with_db(run))


def test_timetable_repo_skips_rows_with_bad_day():
    async def run(db: Database) -> None:
        repo = TimetableSqliteRepo(db)
        await repo.create("c1", NewSchedule(day="Monday", start_time="08:15", end_time="09:45", subject="Math"))
        await db.execute(
            "INSERT INTO timetable(id, day, start_time, end_time, subject) VALUES (?, ?, ?, ?, ?);",
            ("bad", "Someday", "10:00", "11:00", "Art"),
        )

        assert [s.id for s in await repo.list()] == ["c1"]
        assert await repo.update("c1", NewSchedule(day="Tuesday", start_time="08:15", end_time="09:45", subject="Math"))
        assert (await repo.list())[0].day == "Tuesday"
        assert await repo.delete("c1")

    asyncio.run(_run_with_db(run))


def test_legacy_tags_that_look_like_json_scalars_are_kept_as_text():
    """Only JSON arrays are decoded; other legacy strings stay comma-separated text."""
    async def run(db: Database) -> None:
        for task_id, raw in (("n", "null"), ("t", "true"), ("f", "1.50"), ("j", '["a", "b"]')):
            await db.execute(
                "INSERT INTO tasks(id, title, tags, created_at, updated_at) VALUES (?, ?, ?, ?, ?);",
                (task_id, task_id, raw, NOW.isoformat(), NOW.isoformat()),
            )
        repo = TasksSqliteRepo(db)

        assert (await repo.get("n")).tags == ("null",)
        assert (await repo.get("t")).tags == ("true",)
        assert (await repo.get("f")).tags == ("1.50",)
        assert (await repo.get("j")).tags == ("a", "b")

    asyncio.run(_run_with_db(run))
