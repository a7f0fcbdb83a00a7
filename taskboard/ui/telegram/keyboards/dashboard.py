from __future__ import annotations

from typing import Sequence

from aiogram.types import InlineKeyboardMarkup

from taskboard.constants import SUBJECT_FILTER_ALL, VIEW_FILTERS
from taskboard.ui.telegram.keyboards.builder import ButtonSpec, build_kb, short
from taskboard.ui.telegram.render import FILTER_TITLES

# callback: db:<filter>:<subject index or -1>
ALL_SUBJECTS_INDEX = -1


def dashboard_cb(filter_name: str, subject_index: int) -> str:
    return f"db:{filter_name}:{subject_index}"


def dashboard_kb(filter_name: str, subject_filter: str, subjects: Sequence[str]) -> InlineKeyboardMarkup:
    """Filter buttons on top, subject buttons below. The active choice is marked."""
    current_index = subjects.index(subject_filter) if subject_filter in subjects else ALL_SUBJECTS_INDEX

    filter_row = [
        ButtonSpec(
            text=("• " if f == filter_name else "") + FILTER_TITLES[f],
            callback_data=dashboard_cb(f, current_index),
        )
        for f in VIEW_FILTERS
    ]

    subject_row = [
        ButtonSpec(
            text=("• " if subject_filter == SUBJECT_FILTER_ALL else "") + "All subjects",
            callback_data=dashboard_cb(filter_name, ALL_SUBJECTS_INDEX),
        )
    ]
    for i, name in enumerate(subjects):
        subject_row.append(
            ButtonSpec(
                text=("• " if name == subject_filter else "") + short(name, 24),
                callback_data=dashboard_cb(filter_name, i),
            )
        )

    return build_kb([filter_row, subject_row], row_widths=[3, 2])
