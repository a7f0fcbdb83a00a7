from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject

from taskboard.domain.common.ports import Clock
from taskboard.domain.subjects.service import SubjectService
from taskboard.domain.tasks.service import TaskService
from taskboard.domain.timetable.service import TimetableService


class DIMiddleware(BaseMiddleware):
    """
    Inject dependencies to handlers via `data` dict.

    Handlers can request args by name, e.g.
      async def handler(message: Message, task_service: TaskService, clock: Clock): ...
    """

    def __init__(
        self,
        task_service: TaskService,
        subject_service: SubjectService,
        timetable_service: TimetableService,
        clock: Clock,
    ) -> None:
        self._tasks = task_service
        self._subjects = subject_service
        self._timetable = timetable_service
        self._clock = clock

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any],
    ) -> Any:
        # keep names stable across the project
        data["task_service"] = self._tasks
        data["subject_service"] = self._subjects
        data["timetable_service"] = self._timetable
        data["clock"] = self._clock

        return await handler(event, data)
