from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from taskboard.constants import (
    FILTER_ALL,
    SUBJECT_FILTER_ALL,
    TASK_STATUS_DONE,
    TASK_STATUS_PENDING,
    UNCATEGORIZED,
)
from taskboard.domain.common.errors import NotFoundError, RepositoryError
from taskboard.domain.common.ports import Clock, IdGenerator
from taskboard.domain.tasks import notifications
from taskboard.domain.tasks.grouping import group_by_subject, unique_subjects
from taskboard.domain.tasks.models import (
    Dashboard,
    NewTask,
    Notification,
    Task,
    TaskChanges,
    ToggleResult,
)
from taskboard.domain.tasks.normalize import normalize_tags
from taskboard.domain.tasks.ports import Notifier, NullNotifier, TaskRepository
from taskboard.domain.tasks.rules import validate_priority, validate_task_type, validate_title
from taskboard.domain.tasks.stats import aggregate
from taskboard.domain.tasks.views import due_today, management_order, overdue, upcoming, view

logger = logging.getLogger(__name__)


def build_dashboard(
    tasks: Sequence[Task],
    reference_date: date,
    filter_name: str = FILTER_ALL,
    subject_filter: str = SUBJECT_FILTER_ALL,
) -> Dashboard:
    """All derived dashboard views for one snapshot."""
    return Dashboard(
        reference_date=reference_date,
        stats=aggregate(tasks, reference_date),
        tasks=view(tasks, filter_name, subject_filter, reference_date),
        by_subject=group_by_subject(tasks),
        due_today=due_today(tasks, reference_date),
        overdue=overdue(tasks, reference_date),
        upcoming=upcoming(tasks, reference_date),
        subjects=unique_subjects(tasks),
        filter_name=filter_name,
        subject_filter=subject_filter,
    )


class TaskService:
    """
    Task use cases. No aiogram. No sqlite.

    The clock is read here and only here; the engine gets the date passed in.
    """

    def __init__(
        self,
        repo: TaskRepository,
        clock: Clock,
        ids: IdGenerator,
        notifier: Optional[Notifier] = None,
    ) -> None:
        self._repo = repo
        self._clock = clock
        self._ids = ids
        self._notifier = notifier or NullNotifier()

    def reference_date(self) -> date:
        return self._clock.today()

    async def snapshot(self) -> list[Task]:
        return list(await self._repo.list())

    async def dashboard(
        self,
        filter_name: str = FILTER_ALL,
        subject_filter: str = SUBJECT_FILTER_ALL,
        tasks: Optional[Sequence[Task]] = None,
    ) -> Dashboard:
        if tasks is None:
            tasks = await self.snapshot()
        return build_dashboard(tasks, self.reference_date(), filter_name, subject_filter)

    async def management_list(self) -> list[Task]:
        return management_order(await self.snapshot())

    async def get(self, task_id: str) -> Task:
        task = await self._repo.get(task_id)
        if task is None:
            raise NotFoundError("Task not found.")
        return task

    async def add_task(self, new: NewTask) -> Task:
        validate_title(new.title)
        validate_priority(new.priority)
        validate_task_type(new.task_type)

        cleaned = replace(
            new,
            title=new.title.strip(),
            subject=(new.subject or "").strip() or UNCATEGORIZED,
            tags=normalize_tags(new.tags),
        )
        task = await self._repo.create(self._ids.new_id(), cleaned, self._clock.now())
        logger.info("Task created id=%s subject=%s", task.id, task.subject)
        await self._notify(notifications.task_added(task))
        return task

    async def edit_task(self, task_id: str, changes: TaskChanges) -> Task:
        before = await self.get(task_id)

        if changes.title is not None:
            validate_title(changes.title)
            changes = replace(changes, title=changes.title.strip())
        if changes.priority is not None:
            validate_priority(changes.priority)
        if changes.task_type is not None:
            validate_task_type(changes.task_type)
        if changes.subject is not None:
            changes = replace(changes, subject=changes.subject.strip() or UNCATEGORIZED)
        if changes.tags is not None:
            changes = replace(changes, tags=normalize_tags(changes.tags))

        after = await self._repo.update(task_id, changes, self._clock.now())
        if after is None:
            raise NotFoundError("Task not found.")
        logger.info("Task edited id=%s", task_id)
        await self._notify(notifications.task_edited(before, after))
        return after

    async def toggle(self, tasks: Sequence[Task], task_id: str) -> ToggleResult:
        """
        Flip Pending <-> Done.

        Returns the optimistic snapshot when the write succeeds. When it fails
        the snapshot is re-fetched so the caller never keeps an unconfirmed view.
        """
        current = next((t for t in tasks if t.id == task_id), None)
        if current is None:
            raise NotFoundError("Task not found.")

        new_status = TASK_STATUS_DONE if current.is_pending else TASK_STATUS_PENDING
        now = self._clock.now()
        flipped = replace(current, status=new_status, updated_at=now)
        optimistic = [flipped if t.id == task_id else t for t in tasks]

        try:
            written = await self._repo.set_status(task_id, new_status, now)
        except RepositoryError:
            logger.warning("Status write failed for task %s, re-fetching", task_id, exc_info=True)
            written = False

        if not written:
            fresh = await self.snapshot()
            return ToggleResult(tasks=fresh, ok=False, task=next((t for t in fresh if t.id == task_id), None))

        logger.info("Task %s -> %s", task_id, new_status)
        if new_status == TASK_STATUS_DONE:
            await self._notify(notifications.task_completed(flipped))
        return ToggleResult(tasks=optimistic, ok=True, task=flipped)

    async def delete_task(self, task_id: str) -> Task:
        task = await self.get(task_id)
        if not await self._repo.delete(task_id):
            raise NotFoundError("Task not found.")
        logger.info("Task deleted id=%s", task_id)
        await self._notify(notifications.task_deleted(task))
        return task

    async def _notify(self, notification: Notification) -> None:
        try:
            await self._notifier.notify(notification)
        except Exception:
            logger.warning("Notification %r failed", notification.title, exc_info=True)
