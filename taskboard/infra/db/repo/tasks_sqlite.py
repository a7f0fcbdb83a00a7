from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Optional, Sequence

from taskboard.domain.common.time import to_iso
from taskboard.domain.tasks.models import NewTask, Task, TaskChanges
from taskboard.domain.tasks.normalize import normalize_task
from taskboard.domain.tasks.ports import TaskRepository
from taskboard.infra.db.connection import Database


def _tags_json(tags: Sequence[str]) -> Optional[str]:
    return json.dumps(list(tags), ensure_ascii=False) if tags else None


def _decode_tags(raw: Optional[str]) -> Any:
    # Older rows hold "a, b" strings; newer rows hold JSON arrays. The normalizer accepts both.
    if not raw:
        return None
    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError:
        return raw
    # only arrays are ours; "null", "true" or "1.50" are legacy tag text
    return decoded if isinstance(decoded, list) else raw


class TasksSqliteRepo(TaskRepository):
    def __init__(self, db: Database) -> None:
        self._db = db

    async def list(self) -> Sequence[Task]:
        rows = await self._db.fetchall(
            """
            SELECT *
            FROM tasks
            ORDER BY due_date IS NULL, due_date ASC, created_at ASC;
            """
        )
        return [self._row_to_task(r) for r in rows]

    async def get(self, task_id: str) -> Optional[Task]:
        row = await self._db.fetchone("SELECT * FROM tasks WHERE id = ?;", (task_id,))
        return self._row_to_task(row) if row else None

    async def create(self, task_id: str, new: NewTask, now: datetime) -> Task:
        now_iso = to_iso(now)
        await self._db.execute(
            """
            INSERT INTO tasks(
              id, title, due_date, status, task_type, subject, priority,
              description, estimated_time, tags, created_at, updated_at
            ) VALUES (?, ?, ?, 'Pending', ?, ?, ?, ?, ?, ?, ?, ?);
            """,
            (
                task_id,
                new.title,
                new.due_date.isoformat() if new.due_date else None,
                new.task_type,
                new.subject,
                new.priority,
                new.description,
                new.estimated_time,
                _tags_json(new.tags),
                now_iso,
                now_iso,
            ),
        )
        return Task(
            id=task_id,
            title=new.title,
            due_date=new.due_date,
            task_type=new.task_type,
            subject=new.subject,
            priority=new.priority,
            description=new.description,
            estimated_time=new.estimated_time,
            tags=tuple(new.tags),
            created_at=now,
            updated_at=now,
        )

    async def update(self, task_id: str, changes: TaskChanges, now: datetime) -> Optional[Task]:
        sets: list[str] = []
        params: list[Any] = []

        def put(column: str, value: Any) -> None:
            sets.append(f"{column} = ?")
            params.append(value)

        if changes.title is not None:
            put("title", changes.title)
        if changes.clear_due_date:
            put("due_date", None)
        elif changes.due_date is not None:
            put("due_date", changes.due_date.isoformat())
        if changes.task_type is not None:
            put("task_type", changes.task_type)
        if changes.subject is not None:
            put("subject", changes.subject)
        if changes.priority is not None:
            put("priority", changes.priority)
        if changes.description is not None:
            put("description", changes.description)
        if changes.estimated_time is not None:
            put("estimated_time", changes.estimated_time)
        if changes.tags is not None:
            put("tags", _tags_json(changes.tags))
        put("updated_at", to_iso(now))

        params.append(task_id)
        count = await self._db.execute(
            f"UPDATE tasks SET {', '.join(sets)} WHERE id = ?;",
            params,
        )
        if not count:
            return None
        return await self.get(task_id)

    async def set_status(self, task_id: str, status: str, now: datetime) -> bool:
        count = await self._db.execute(
            "UPDATE tasks SET status = ?, updated_at = ? WHERE id = ?;",
            (status, to_iso(now), task_id),
        )
        return count > 0

    async def delete(self, task_id: str) -> bool:
        count = await self._db.execute("DELETE FROM tasks WHERE id = ?;", (task_id,))
        return count > 0

    def _row_to_task(self, row) -> Task:
        record = dict(row)
        record["tags"] = _decode_tags(record.get("tags"))
        return normalize_task(record)
