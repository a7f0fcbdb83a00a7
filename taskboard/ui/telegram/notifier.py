from __future__ import annotations

from aiogram import Bot

from taskboard.domain.tasks.models import Notification
from taskboard.domain.tasks.ports import Notifier
from taskboard.ui.telegram.render import render_notification


class TelegramNotifier(Notifier):
    """Posts task events to a chat (the owner's by default)."""

    def __init__(self, bot: Bot, chat_id: int) -> None:
        self._bot = bot
        self._chat_id = chat_id

    async def notify(self, notification: Notification) -> None:
        await self._bot.send_message(chat_id=self._chat_id, text=render_notification(notification))
