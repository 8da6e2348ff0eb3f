from __future__ import annotations

from enum import Enum
from typing import Optional


class Level(str, Enum):
    """Nivel educativo; decide el prefijo del código de estudiante."""

    INITIAL = "initial"
    PRIMARY = "primary"


class AttendanceStatus(str, Enum):
    """Estado de asistencia guardado en el registro diario."""

    PRESENT = "present"
    ABSENT = "absent"


class Weekday(str, Enum):
    """School days, stored by their Spanish names."""

    MONDAY = "Lunes"
    TUESDAY = "Martes"
    WEDNESDAY = "Miércoles"
    THURSDAY = "Jueves"
    FRIDAY = "Viernes"

    @classmethod
    def from_index(cls, weekday: int) -> Optional["Weekday"]:
        """Map ``datetime.weekday()`` (0=Monday) to a school day, None on weekends."""
        days = list(cls)
        if 0 <= weekday < len(days):
            return days[weekday]
        return None
