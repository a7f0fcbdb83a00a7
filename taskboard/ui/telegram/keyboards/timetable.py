from __future__ import annotations

from typing import Sequence

from aiogram.types import InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from taskboard.constants import WEEKDAYS
from taskboard.domain.subjects.models import Subject
from taskboard.domain.timetable.models import ClassSchedule
from taskboard.ui.telegram.keyboards.builder import short


def timetable_kb(schedules: Sequence[ClassSchedule]) -> InlineKeyboardMarkup:
    kb = InlineKeyboardBuilder()
    kb.button(text="➕ Add class", callback_data="tt:add")
    for s in schedules:
        kb.button(text=f"✏️ {s.day[:3]} {s.start_time} {short(s.subject, 20)}", callback_data=f"tt:edit:{s.id}")
        kb.button(text="🗑️", callback_data=f"tt:del:{s.id}")
    # add button alone, then edit + delete per class
    kb.adjust(1, *([2] * len(schedules)))
    return kb.as_markup()


def weekday_kb() -> InlineKeyboardMarkup:
    kb = InlineKeyboardBuilder()
    for day in WEEKDAYS:
        kb.button(text=day[:3], callback_data=f"tt:day:{day}")
    kb.button(text="Cancel", callback_data="cancel")
    kb.adjust(4, 3, 1)
    return kb.as_markup()


def subjects_kb(subjects: Sequence[Subject]) -> InlineKeyboardMarkup:
    kb = InlineKeyboardBuilder()
    kb.button(text="➕ Add subject", callback_data="sj:add")
    for s in subjects:
        kb.button(text=f"✏️ {short(s.name, 30)}", callback_data=f"sj:ren:{s.id}")
        kb.button(text="🗑️", callback_data=f"sj:del:{s.id}")
    kb.adjust(1, *([2] * len(subjects)))
    return kb.as_markup()
