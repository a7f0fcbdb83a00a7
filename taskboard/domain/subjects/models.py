from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Subject:
    id: str
    name: str
