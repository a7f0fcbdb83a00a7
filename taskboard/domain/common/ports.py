from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime


class Clock(ABC):
    @abstractmethod
    def now(self) -> datetime: ...

    def today(self) -> date:
        """Reference date for classification: local calendar day."""
        return self.now().date()


class IdGenerator(ABC):
    @abstractmethod
    def new_id(self) -> str: ...
