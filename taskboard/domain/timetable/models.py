from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Weekday = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


@dataclass(frozen=True)
class ClassSchedule:
    id: str
    day: Weekday
    start_time: str  # HH:MM
    end_time: str  # HH:MM
    subject: str
    room: str = ""
    note: str = ""


@dataclass(frozen=True)
class NewSchedule:
    day: Weekday
    start_time: str
    end_time: str
    subject: str
    room: str = ""
    note: str = ""


@dataclass(frozen=True)
class DayBucket:
    day: Weekday
    schedules: tuple[ClassSchedule, ...]
