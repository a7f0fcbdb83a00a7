from __future__ import annotations

from aiogram.types import InlineKeyboardMarkup, ReplyKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder, ReplyKeyboardBuilder

from taskboard.ui.telegram.texts import common as texts


def main_menu_kb() -> ReplyKeyboardMarkup:
    kb = ReplyKeyboardBuilder()

    kb.button(text=texts.MENU_DASHBOARD)
    kb.button(text=texts.MENU_TASKS)
    kb.button(text=texts.MENU_ADD_TASK)
    kb.button(text=texts.MENU_SUBJECTS)
    kb.button(text=texts.MENU_TIMETABLE)

    # 2 + 1 + 2
    kb.adjust(2, 1, 2)

    return kb.as_markup(resize_keyboard=True, one_time_keyboard=False)


def cancel_kb(callback_data: str = "cancel") -> InlineKeyboardMarkup:
    kb = InlineKeyboardBuilder()
    kb.button(text="Cancel", callback_data=callback_data)
    kb.adjust(1)
    return kb.as_markup()


def skip_cancel_kb(skip_callback: str, skip_text: str = "Skip") -> InlineKeyboardMarkup:
    kb = InlineKeyboardBuilder()
    kb.button(text=skip_text, callback_data=skip_callback)
    kb.button(text="Cancel", callback_data="cancel")
    kb.adjust(2)
    return kb.as_markup()
