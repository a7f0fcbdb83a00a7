from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from taskboard.domain.subjects.models import Subject


class SubjectRepository(ABC):
    @abstractmethod
    async def list(self) -> Sequence[Subject]: ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Subject]: ...

    @abstractmethod
    async def create(self, subject_id: str, name: str) -> Subject: ...

    @abstractmethod
    async def rename(self, subject_id: str, name: str) -> bool: ...

    @abstractmethod
    async def delete(self, subject_id: str) -> bool: ...
