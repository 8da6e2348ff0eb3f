from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus
from ..students.model import Student


@dataclass(frozen=True)
class AttendanceRecord:
    """Entidad de dominio: registro diario de asistencia.

    A lo sumo un registro por (student_id, date).
    """

    id: str
    student_id: str
    date: str
    status: AttendanceStatus
    arrival_time: Optional[str] = None
    absence_date: Optional[str] = None


@dataclass(frozen=True)
class AttendanceStats:
    total: int
    present: int
    absent: int
    present_pct: float
    absent_pct: float


@dataclass(frozen=True)
class RollCallRow:
    """Read-model for the daily attendance screen."""

    student: Student
    record: Optional[AttendanceRecord]

    @property
    def status_label(self) -> str:
        if not self.record:
            return "Sin registro"
        return "Presente" if self.record.status == AttendanceStatus.PRESENT else "Ausente"
