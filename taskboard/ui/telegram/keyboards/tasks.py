from __future__ import annotations

from typing import Sequence

from aiogram.types import InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from taskboard.constants import PRIORITY_RANK, TASK_TYPES
from taskboard.domain.tasks.models import Task
from taskboard.ui.telegram.keyboards.builder import short
from taskboard.ui.telegram.utils.task_form import EDIT_FIELDS

EDIT_FIELD_LABELS = {
    "title": "Title",
    "due": "Due date",
    "subject": "Subject",
    "priority": "Priority",
    "type": "Type",
    "description": "Description",
    "estimate": "Estimate",
    "tags": "Tags",
}


def tasks_list_kb(tasks: Sequence[Task]) -> InlineKeyboardMarkup:
    """One row per task: toggle (title), edit and delete."""
    kb = InlineKeyboardBuilder()
    for task in tasks:
        mark = "✅" if task.is_done else "⬜"
        kb.button(text=f"{mark} {short(task.title)}", callback_data=f"tk:toggle:{task.id}")
        kb.button(text="✏️", callback_data=f"tk:edit:{task.id}")
        kb.button(text="🗑️", callback_data=f"tk:del:{task.id}")
    kb.adjust(3)
    return kb.as_markup()


def edit_field_kb() -> InlineKeyboardMarkup:
    kb = InlineKeyboardBuilder()
    for field in EDIT_FIELDS:
        kb.button(text=EDIT_FIELD_LABELS[field], callback_data=f"ed:f:{field}")
    kb.button(text="Cancel", callback_data="cancel")
    kb.adjust(2)
    return kb.as_markup()


def priority_kb(prefix: str = "add:prio") -> InlineKeyboardMarkup:
    kb = InlineKeyboardBuilder()
    for priority in PRIORITY_RANK:
        kb.button(text=priority, callback_data=f"{prefix}:{priority}")
    kb.button(text="Cancel", callback_data="cancel")
    kb.adjust(3, 1)
    return kb.as_markup()


def task_type_kb(prefix: str = "add:type") -> InlineKeyboardMarkup:
    kb = InlineKeyboardBuilder()
    for i, task_type in enumerate(TASK_TYPES):
        kb.button(text=task_type, callback_data=f"{prefix}:{i}")
    kb.button(text="Cancel", callback_data="cancel")
    kb.adjust(3, 1)
    return kb.as_markup()


def subject_choice_kb(subjects: Sequence[str]) -> InlineKeyboardMarkup:
    kb = InlineKeyboardBuilder()
    for i, name in enumerate(subjects):
        kb.button(text=short(name, 24), callback_data=f"add:subj:{i}")
    kb.button(text="No subject", callback_data="add:subj:none")
    kb.button(text="Cancel", callback_data="cancel")
    kb.adjust(2)
    return kb.as_markup()
