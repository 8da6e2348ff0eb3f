from __future__ import annotations

from dataclasses import dataclass

from ..attendance.model import AttendanceRecord
from ..students.model import Student


@dataclass(frozen=True)
class FaceProfile:
    student_id: str
    face_id: str
    registered_at: str


@dataclass(frozen=True)
class MatchResult:
    student_id: str
    confidence: float


@dataclass(frozen=True)
class CheckInResult:
    student: Student
    record: AttendanceRecord
    confidence: float
