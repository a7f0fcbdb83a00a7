"""
Utility functions for time, date and callback data parsing.
"""
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional


def parse_time_input(text: str) -> Optional[str]:
    """Parse time input in formats: HHMM, HH:MM, HH MM, H:MM. Returns HH:MM or None."""
    text = (text or "").strip().replace(" ", "").replace(":", "")
    if len(text) == 3 and text.isdigit():
        text = "0" + text

    if len(text) == 4 and text.isdigit():
        hours, minutes = int(text[:2]), int(text[2:])
        if 0 <= hours <= 23 and 0 <= minutes <= 59:
            return f"{hours:02d}:{minutes:02d}"
    return None


def parse_date_input(text: str, today: date) -> Optional[date]:
    """
    Parse a due date typed by the user.

    Accepts YYYY-MM-DD, DD.MM.YYYY, DD.MM (current year), "today", "tomorrow".
    Returns None when the text is not a date.
    """
    raw = (text or "").strip().lower()
    if raw == "today":
        return today
    if raw == "tomorrow":
        return today + timedelta(days=1)
    for fmt in ("%Y-%m-%d", "%d.%m.%Y"):
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    try:
        return datetime.strptime(f"{raw}.{today.year}", "%d.%m.%Y").date()
    except ValueError:
        return None


def parse_callback_data(data: str, expected_parts: int = 3) -> Optional[tuple[str, ...]]:
    """Parse callback data into parts. Returns None if invalid."""
    parts = data.split(":", expected_parts - 1)
    return tuple(parts) if len(parts) >= expected_parts else None


def parse_int_safe(value: str, default: Optional[int] = None) -> Optional[int]:
    """Safely parse integer, returns default on error."""
    try:
        return int(value)
    except (ValueError, TypeError):
        return default
