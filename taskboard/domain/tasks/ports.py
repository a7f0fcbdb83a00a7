from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Sequence

from taskboard.domain.tasks.models import NewTask, Notification, Task, TaskChanges


class TaskRepository(ABC):
    """Store of tasks. Implementations raise RepositoryError on I/O failure."""

    @abstractmethod
    async def list(self) -> Sequence[Task]: ...

    @abstractmethod
    async def get(self, task_id: str) -> Optional[Task]: ...

    @abstractmethod
    async def create(self, task_id: str, new: NewTask, now: datetime) -> Task: ...

    @abstractmethod
    async def update(self, task_id: str, changes: TaskChanges, now: datetime) -> Optional[Task]: ...

    @abstractmethod
    async def set_status(self, task_id: str, status: str, now: datetime) -> bool: ...

    @abstractmethod
    async def delete(self, task_id: str) -> bool: ...


class Notifier(ABC):
    @abstractmethod
    async def notify(self, notification: Notification) -> None: ...


class NullNotifier(Notifier):
    async def notify(self, notification: Notification) -> None:
        return None
