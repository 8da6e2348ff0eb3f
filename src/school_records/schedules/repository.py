from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import ClassInfo, ScheduledClass

DaySchedule = dict[str, ClassInfo]


class ScheduleRepository(Protocol):
    def get_full(self) -> dict[str, DaySchedule]:
        raise NotImplementedError

    def get_for_day(self, day: str) -> DaySchedule:
        raise NotImplementedError

    def update_class(self, day: str, time_slot: str, info: ClassInfo) -> bool:
        """Create or replace the class at (day, time_slot)."""

        raise NotImplementedError

    def get_for_teacher(self, teacher_name: str) -> Sequence[ScheduledClass]:
        raise NotImplementedError

    def get_current(self, *, now: Optional[datetime] = None) -> Sequence[ScheduledClass]:
        raise NotImplementedError

    def ensure_seeded(self) -> bool:
        raise NotImplementedError
