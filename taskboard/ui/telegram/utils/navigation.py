from __future__ import annotations

from typing import Optional

from aiogram.exceptions import TelegramBadRequest
from aiogram.fsm.context import FSMContext
from aiogram.types import Message

from taskboard.ui.telegram.keyboards.common import main_menu_kb
from taskboard.ui.telegram.texts import common as texts


async def go_to_main_menu(
    message: Message,
    state: Optional[FSMContext] = None,
    text: str = texts.CHOOSE_ACTION,
) -> None:
    """
    Clears FSM state (if provided) and returns user to the main menu.
    Safe to call from anywhere.
    """
    if state is not None:
        await state.clear()

    await message.answer(text, reply_markup=main_menu_kb())


async def send_or_edit(message: Message, text: str, reply_markup=None, prefer_edit: bool = False) -> None:
    """Edit the message in place for callback UX; fall back to a new message."""
    if prefer_edit:
        try:
            await message.edit_text(text, reply_markup=reply_markup)
            return
        except TelegramBadRequest:
            # old message, identical content, etc.
            pass
    await message.answer(text, reply_markup=reply_markup)
