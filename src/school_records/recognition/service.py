from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_hhmm, now_local
from ..common.validators import require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..students.repository import StudentRepository
from .model import CheckInResult, FaceProfile
from .recognizer import FaceRecognizer
from .repository import FaceProfileRepository


class CheckInService:
    """Use case: enrol faces and check students in from a captured image."""

    def __init__(
        self,
        recognizer: FaceRecognizer,
        faces: FaceProfileRepository,
        students: StudentRepository,
        attendance: AttendanceRepository,
    ):
        self._recognizer = recognizer
        self._faces = faces
        self._students = students
        self._attendance = attendance

    def register_face(self, student_id: str, image: str, *, now: Optional[datetime] = None) -> FaceProfile:
        image = require_non_empty(image, "Imagen")
        if not self._students.get_by_id(student_id):
            raise NotFoundError("Estudiante no encontrado")
        return self._faces.register_face(student_id, image, now=now)

    def check_in_by_face(self, image: str, *, now: Optional[datetime] = None) -> CheckInResult:
        image = require_non_empty(image, "Imagen")
        now = now or now_local()

        match = self._recognizer.recognize(image)
        if match is None:
            raise NotFoundError("No se reconoció a ningún estudiante")

        student = self._students.get_by_id(match.student_id)
        if not student:
            raise NotFoundError("El rostro reconocido no corresponde a un estudiante registrado")

        record = self._attendance.register(student.id, format_hhmm(now), AttendanceStatus.PRESENT, now=now)
        return CheckInResult(student=student, record=record, confidence=match.confidence)
