from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import DateLike, format_hhmm, normalize_iso_date, now_local
from ..common.identifiers import time_based_id
from ..core.constants import ATTENDANCE_KEY
from ..core.enums import AttendanceStatus
from ..storage.store import CollectionStore, decoding
from .model import AttendanceRecord, AttendanceStats
from .repository import AttendanceRepository


def _from_row(r: Mapping[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        id=str(r["id"]),
        student_id=str(r["studentId"]),
        date=normalize_iso_date(r["date"]),
        status=AttendanceStatus(r["status"]),
        arrival_time=r.get("arrivalTime"),
        absence_date=r.get("absenceDate"),
    )


def _to_row(rec: AttendanceRecord) -> dict:
    return {
        "id": rec.id,
        "studentId": rec.student_id,
        "date": rec.date,
        "arrivalTime": rec.arrival_time,
        "status": rec.status.value,
        "absenceDate": rec.absence_date,
    }


def _pct(part: int, total: int) -> float:
    return (part / total) * 100 if total > 0 else 0


class KVAttendanceRepository(AttendanceRepository):
    def __init__(self, store: CollectionStore):
        self._store = store

    def _records(self) -> list[AttendanceRecord]:
        rows = self._store.load(ATTENDANCE_KEY, [])
        with decoding(ATTENDANCE_KEY):
            return [_from_row(r) for r in rows]

    def list(self) -> Sequence[AttendanceRecord]:
        return self._records()

    def register(
        self,
        student_id: str,
        arrival_time: Optional[str] = None,
        status: AttendanceStatus = AttendanceStatus.PRESENT,
        date: Optional[DateLike] = None,
        *,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        now = now or now_local()
        today = now.date().isoformat()
        status = AttendanceStatus(status or AttendanceStatus.PRESENT)

        if status == AttendanceStatus.PRESENT:
            arrival_time = arrival_time or format_hhmm(now)
            absence_date = None
        else:
            arrival_time = None
            absence_date = normalize_iso_date(date) if date else today

        with self._store.mutate(ATTENDANCE_KEY, []) as rows:
            index = next(
                (
                    i
                    for i, r in enumerate(rows)
                    if str(r.get("studentId")) == str(student_id) and normalize_iso_date(r.get("date", "")) == today
                ),
                None,
            )
            record_id = (
                str(rows[index]["id"]) if index is not None else time_based_id({str(r.get("id")) for r in rows}, now=now)
            )
            record = AttendanceRecord(
                id=record_id,
                student_id=str(student_id),
                date=today,
                status=status,
                arrival_time=arrival_time,
                absence_date=absence_date,
            )

            if index is not None:
                rows[index] = _to_row(record)
            else:
                rows.append(_to_row(record))

        return record

    def get_by_date(self, date: DateLike) -> Sequence[AttendanceRecord]:
        wanted = normalize_iso_date(date)
        return [r for r in self._records() if r.date == wanted]

    def get_by_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in self._records() if r.student_id == str(student_id)]

    def get_stats(self, start_date: DateLike, end_date: DateLike) -> AttendanceStats:
        start = normalize_iso_date(start_date)
        end = normalize_iso_date(end_date)
        # ISO dates sort lexicographically
        rows = [r for r in self._records() if start <= r.date <= end]

        total = len(rows)
        present = sum(1 for r in rows if r.status == AttendanceStatus.PRESENT)
        absent = sum(1 for r in rows if r.status == AttendanceStatus.ABSENT)
        return AttendanceStats(
            total=total,
            present=present,
            absent=absent,
            present_pct=_pct(present, total),
            absent_pct=_pct(absent, total),
        )

    def delete_for_student(self, student_id: str) -> int:
        with self._store.mutate(ATTENDANCE_KEY, []) as rows:
            before = len(rows)
            rows[:] = [r for r in rows if str(r.get("studentId")) != str(student_id)]
            return before - len(rows)
