from __future__ import annotations

import asyncio
import logging
import os

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters import ExceptionTypeFilter
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.types import ErrorEvent

from taskboard.config import load_settings, resolve_db_path
from taskboard.domain.common.time import to_iso
from taskboard.domain.subjects.service import SubjectService
from taskboard.domain.tasks.service import TaskService
from taskboard.domain.timetable.service import TimetableService
from taskboard.infra.clock.system_clock import SystemClock
from taskboard.infra.db.connection import Database
from taskboard.infra.db.repo.subjects_sqlite import SubjectsSqliteRepo
from taskboard.infra.db.repo.tasks_sqlite import TasksSqliteRepo
from taskboard.infra.db.repo.timetable_sqlite import TimetableSqliteRepo
from taskboard.infra.db.schema_version import apply_migrations
from taskboard.infra.ids.uuid_gen import UuidGenerator
from taskboard.ui.telegram.handlers.cancel import router as cancel_router
from taskboard.ui.telegram.handlers.dashboard import router as dashboard_router
from taskboard.ui.telegram.handlers.start import router as start_router
from taskboard.ui.telegram.handlers.subjects import router as subjects_router
from taskboard.ui.telegram.handlers.tasks import router as tasks_router
from taskboard.ui.telegram.handlers.timetable import router as timetable_router
from taskboard.ui.telegram.middlewares.auth import OwnerOnlyMiddleware
from taskboard.ui.telegram.middlewares.di import DIMiddleware
from taskboard.ui.telegram.notifier import TelegramNotifier

logger = logging.getLogger(__name__)

STALE_CALLBACK_MARKERS = ("query is too old", "query id is invalid", "response timeout expired")


async def main() -> None:
    """
    Main entry point for the Telegram bot.

    Only run ONE instance at a time: two pollers on the same token end in
    TelegramConflictError ("terminated by other getUpdates request").
    """
    pid = os.getpid()

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - [PID:%(process)d] - %(message)s'
    )
    logger.info("=" * 60)
    logger.info("Bot starting - PID: %s", pid)
    logger.info("=" * 60)

    settings = load_settings()

    # --- DB path: one place, always absolute, ensure dir exists ---
    db_path = resolve_db_path(settings.db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("DB_PATH: %s", db_path)

    db = Database(str(db_path))
    clock = SystemClock(settings.timezone)
    ids = UuidGenerator()

    # --- migrations ---
    applied = await apply_migrations(db=db, now_iso=to_iso(clock.now()))
    if applied:
        logger.info("Migrations applied: %s", applied)

    # --- bot/dispatcher ---
    bot = Bot(
        token=settings.bot_token,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML),
    )
    dp = Dispatcher(storage=MemoryStorage())

    # --- services ---
    notifier = TelegramNotifier(bot, settings.notify_chat_id or settings.owner_telegram_id)
    task_service = TaskService(repo=TasksSqliteRepo(db), clock=clock, ids=ids, notifier=notifier)
    subject_service = SubjectService(repo=SubjectsSqliteRepo(db), ids=ids)
    timetable_service = TimetableService(repo=TimetableSqliteRepo(db), ids=ids)

    # --- middlewares ---
    di = DIMiddleware(task_service, subject_service, timetable_service, clock)

    dp.message.middleware(OwnerOnlyMiddleware(settings.owner_telegram_id))
    dp.callback_query.middleware(OwnerOnlyMiddleware(settings.owner_telegram_id))

    dp.message.middleware(di)
    dp.callback_query.middleware(di)

    # --- routers ---
    dp.include_router(start_router)
    dp.include_router(cancel_router)
    dp.include_router(dashboard_router)
    dp.include_router(tasks_router)
    dp.include_router(subjects_router)
    dp.include_router(timetable_router)

    @dp.error(ExceptionTypeFilter(TelegramBadRequest))
    async def handle_old_callback_query(event: ErrorEvent) -> None:
        """Ignore TelegramBadRequest for old/invalid callback queries (e.g. after bot restart)."""
        msg = str(event.exception).lower()
        if any(marker in msg for marker in STALE_CALLBACK_MARKERS):
            logger.debug("Ignoring old/invalid callback query: %s", event.exception)
            return
        raise event.exception

    logger.info("Starting polling - PID: %s", pid)

    try:
        await dp.start_polling(bot)
    except Exception:
        logger.error("Bot crashed - PID: %s", pid, exc_info=True)
        raise
    finally:
        await bot.session.close()
        logger.info("Bot shutdown complete - PID: %s", pid)


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")


if __name__ == "__main__":
    run()
