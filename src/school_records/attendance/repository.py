from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..common.datetime_utils import DateLike
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceStats


class AttendanceRepository(Protocol):
    def list(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def register(
        self,
        student_id: str,
        arrival_time: Optional[str] = None,
        status: AttendanceStatus = AttendanceStatus.PRESENT,
        date: Optional[DateLike] = None,
        *,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        """Create or overwrite today's record for the student."""

        raise NotImplementedError

    def get_by_date(self, date: DateLike) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_stats(self, start_date: DateLike, end_date: DateLike) -> AttendanceStats:
        raise NotImplementedError

    def delete_for_student(self, student_id: str) -> int:
        raise NotImplementedError
