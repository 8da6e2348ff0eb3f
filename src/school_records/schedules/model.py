from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassInfo:
    subject: str
    teacher: str = ""
    room: str = ""


@dataclass(frozen=True)
class ScheduledClass:
    """A class placed in the weekly grid (day + time slot)."""

    day: str
    time_slot: str
    subject: str
    teacher: str = ""
    room: str = ""
