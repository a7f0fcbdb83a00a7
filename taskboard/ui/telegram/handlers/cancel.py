from __future__ import annotations

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from taskboard.ui.telegram.texts import common as texts
from taskboard.ui.telegram.utils.navigation import go_to_main_menu

router = Router()

CANCEL_WORDS = {"cancel", "stop"}


@router.message(Command("cancel"))
async def cancel_cmd(message: Message, state: FSMContext):
    await go_to_main_menu(message, state, text=texts.CANCELLED)


@router.message(F.text.casefold().in_(CANCEL_WORDS))
async def cancel_text(message: Message, state: FSMContext):
    await go_to_main_menu(message, state, text=texts.CANCELLED)


@router.callback_query(F.data == "cancel")
async def cancel_cb(cb: CallbackQuery, state: FSMContext):
    await cb.answer()
    await go_to_main_menu(cb.message, state, text=texts.CANCELLED)
