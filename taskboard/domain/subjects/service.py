from __future__ import annotations

import logging

from taskboard.constants import UNCATEGORIZED
from taskboard.domain.common.errors import ConflictError, NotFoundError, ValidationError
from taskboard.domain.common.ports import IdGenerator
from taskboard.domain.subjects.models import Subject
from taskboard.domain.subjects.ports import SubjectRepository

logger = logging.getLogger(__name__)


def _clean_name(name: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Subject name is required.")
    if cleaned == UNCATEGORIZED:
        raise ValidationError(f"'{UNCATEGORIZED}' is reserved.")
    if len(cleaned) > 100:
        raise ValidationError("Subject name is too long (max 100 chars).")
    return cleaned


class SubjectService:
    """Flat registry of subject labels, ordered by name."""

    def __init__(self, repo: SubjectRepository, ids: IdGenerator) -> None:
        self._repo = repo
        self._ids = ids

    async def list(self) -> list[Subject]:
        return sorted(await self._repo.list(), key=lambda s: s.name)

    async def add(self, name: str) -> Subject:
        cleaned = _clean_name(name)
        if await self._repo.get_by_name(cleaned):
            raise ConflictError(f"Subject '{cleaned}' already exists.")
        subject = await self._repo.create(self._ids.new_id(), cleaned)
        logger.info("Subject added: %s", cleaned)
        return subject

    async def rename(self, subject_id: str, name: str) -> Subject:
        cleaned = _clean_name(name)
        existing = await self._repo.get_by_name(cleaned)
        if existing and existing.id != subject_id:
            raise ConflictError(f"Subject '{cleaned}' already exists.")
        if not await self._repo.rename(subject_id, cleaned):
            raise NotFoundError("Subject not found.")
        return Subject(id=subject_id, name=cleaned)

    async def delete(self, subject_id: str) -> None:
        if not await self._repo.delete(subject_id):
            raise NotFoundError("Subject not found.")
        logger.info("Subject deleted id=%s", subject_id)
