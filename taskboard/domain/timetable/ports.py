from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from taskboard.domain.timetable.models import ClassSchedule, NewSchedule


class ScheduleRepository(ABC):
    @abstractmethod
    async def list(self) -> Sequence[ClassSchedule]: ...

    @abstractmethod
    async def create(self, schedule_id: str, new: NewSchedule) -> ClassSchedule: ...

    @abstractmethod
    async def update(self, schedule_id: str, new: NewSchedule) -> bool: ...

    @abstractmethod
    async def delete(self, schedule_id: str) -> bool: ...
