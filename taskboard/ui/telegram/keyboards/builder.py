# -*- coding: utf-8 -*-
"""
Shared keyboard builder: ButtonSpec and build_kb for inline keyboards.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

# Telegram limit for button text shown in one row without truncation
MAX_BUTTON_TEXT = 40


@dataclass
class ButtonSpec:
    """Spec for one inline button: text and callback_data."""
    text: str
    callback_data: str


def short(text: str, limit: int = MAX_BUTTON_TEXT) -> str:
    return text if len(text) <= limit else text[: limit - 1] + "…"


def build_kb(
    rows: list[list[ButtonSpec]],
    row_widths: Optional[list[int]] = None,
) -> InlineKeyboardMarkup:
    """
    Build InlineKeyboardMarkup from rows of ButtonSpec.
    row_widths[i] = width for row i; None = whole row on one line.
    """
    kb = InlineKeyboardBuilder()
    for i, row in enumerate(rows):
        buttons = [InlineKeyboardButton(text=b.text, callback_data=b.callback_data) for b in row]
        w = row_widths[i] if row_widths and i < len(row_widths) else None
        if w is not None:
            kb.row(*buttons, width=w)
        else:
            kb.row(*buttons)
    return kb.as_markup()
