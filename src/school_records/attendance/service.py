from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import DateLike, normalize_iso_date, now_local, parse_iso_date
from ..common.validators import require_hhmm
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import AttendanceRecord, AttendanceStats, RollCallRow
from .repository import AttendanceRepository


def _parse_date(value: DateLike, field_name: str) -> str:
    if isinstance(value, date):
        return normalize_iso_date(value)
    try:
        return parse_iso_date(normalize_iso_date(value)).isoformat()
    except ValueError:
        raise ValidationError(f"{field_name} no es válida (YYYY-MM-DD)")


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def register(
        self,
        student_id: str,
        *,
        status: str = AttendanceStatus.PRESENT.value,
        arrival_time: Optional[str] = None,
        absence_date: Optional[DateLike] = None,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        if not self._students.get_by_id(student_id):
            raise NotFoundError("Estudiante no encontrado")

        try:
            status_ = AttendanceStatus(status)
        except ValueError:
            raise ValidationError(f"Estado de asistencia no válido: {status!r}")

        if arrival_time:
            require_hhmm(arrival_time, "Hora de llegada")
        if absence_date:
            absence_date = _parse_date(absence_date, "Fecha de ausencia")

        return self._attendance.register(student_id, arrival_time, status_, absence_date, now=now)

    def history(self, student_id: str) -> Sequence[AttendanceRecord]:
        records = self._attendance.get_by_student(student_id)
        return sorted(records, key=lambda r: r.date, reverse=True)

    def roll_call(self, day: Optional[DateLike] = None) -> Sequence[RollCallRow]:
        """Every student next to their record for ``day`` (today by default)."""
        wanted = _parse_date(day, "Fecha") if day else now_local().date().isoformat()
        by_student = {r.student_id: r for r in self._attendance.get_by_date(wanted)}
        return [RollCallRow(student=s, record=by_student.get(s.id)) for s in self._students.list()]

    def stats(self, start_date: DateLike, end_date: DateLike) -> AttendanceStats:
        start = _parse_date(start_date, "Fecha inicial")
        end = _parse_date(end_date, "Fecha final")
        return self._attendance.get_stats(start, end)
