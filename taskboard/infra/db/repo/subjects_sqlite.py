from __future__ import annotations

from typing import Optional, Sequence

from taskboard.domain.subjects.models import Subject
from taskboard.domain.subjects.ports import SubjectRepository
from taskboard.domain.tasks.normalize import normalize_subject
from taskboard.infra.db.connection import Database


class SubjectsSqliteRepo(SubjectRepository):
    def __init__(self, db: Database) -> None:
        self._db = db

    async def list(self) -> Sequence[Subject]:
        rows = await self._db.fetchall("SELECT id, name FROM subjects ORDER BY name;")
        return [normalize_subject(dict(r)) for r in rows]

    async def get_by_name(self, name: str) -> Optional[Subject]:
        row = await self._db.fetchone("SELECT id, name FROM subjects WHERE name = ?;", (name,))
        return normalize_subject(dict(row)) if row else None

    async def create(self, subject_id: str, name: str) -> Subject:
        await self._db.execute("INSERT INTO subjects(id, name) VALUES (?, ?);", (subject_id, name))
        return Subject(id=subject_id, name=name)

    async def rename(self, subject_id: str, name: str) -> bool:
        count = await self._db.execute("UPDATE subjects SET name = ? WHERE id = ?;", (name, subject_id))
        return count > 0

    async def delete(self, subject_id: str) -> bool:
        count = await self._db.execute("DELETE FROM subjects WHERE id = ?;", (subject_id,))
        return count > 0
