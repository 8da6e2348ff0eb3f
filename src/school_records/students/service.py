from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..app_logger import get_logger
from ..attendance.repository import AttendanceRepository
from ..common.validators import require_non_empty
from ..core.constants import INITIAL_SECTIONS, PRIMARY_SECTIONS
from ..core.enums import Level
from ..core.exceptions import NotFoundError, ValidationError
from ..grades.repository import GradeRepository
from ..recognition.repository import FaceProfileRepository
from .model import Student, grade_label
from .repository import StudentRepository

logger = get_logger(__name__)


def _require_level(level: Level | str) -> Level:
    try:
        return Level(level)
    except ValueError:
        raise ValidationError(f"Nivel no válido: {level!r}")


def _require_section(level: Level, section: str) -> str:
    allowed = INITIAL_SECTIONS if level == Level.INITIAL else PRIMARY_SECTIONS
    section = (section or "").strip()
    if section not in allowed:
        raise ValidationError(f"Sección no válida para {level.value}: {section!r}")
    return section


class StudentService:
    """Use case: manage students (registration screens)."""

    def __init__(
        self,
        students: StudentRepository,
        attendance: AttendanceRepository,
        grades: GradeRepository,
        faces: Optional[FaceProfileRepository] = None,
    ):
        self._students = students
        self._attendance = attendance
        self._grades = grades
        self._faces = faces

    def list_students(self) -> Sequence[Student]:
        return self._students.list()

    def get_student(self, student_id: str) -> Student:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Estudiante no encontrado")
        return student

    def add_student(
        self,
        *,
        first_name: str,
        last_name: str,
        level: str,
        section: str,
        student_code: Optional[str] = None,
        parent_id: Optional[str] = None,
        photo_url: Optional[str] = None,
    ) -> Student:
        first_name = require_non_empty(first_name, "Nombre")
        last_name = require_non_empty(last_name, "Apellido")
        level_ = _require_level(level)
        section = _require_section(level_, section)

        return self._students.add(
            first_name=first_name,
            last_name=last_name,
            level=level_,
            section=section,
            student_code=(student_code or "").strip() or None,
            parent_id=parent_id,
            photo_url=photo_url,
        )

    def update_student(self, student_id: str, changes: Mapping[str, Any]) -> Student:
        changes = dict(changes)
        for field, label in (("first_name", "Nombre"), ("last_name", "Apellido")):
            if field in changes:
                changes[field] = require_non_empty(changes[field], label)

        if "level" in changes or "section" in changes:
            current = self.get_student(student_id)
            level = _require_level(changes.get("level", current.level))
            section = _require_section(level, str(changes.get("section", current.section)))
            changes.update(level=level, section=section)
            # the display label follows level/section unless the caller sets one
            changes.setdefault("grade", grade_label(level, section))

        return self._students.update(student_id, changes)

    def delete_student(self, student_id: str) -> None:
        """Delete a student together with its attendance, grades and face profile."""
        if not self._students.delete(student_id):
            raise NotFoundError("Estudiante no encontrado")

        removed = self._attendance.delete_for_student(student_id)
        self._grades.delete_for_student(student_id)
        if self._faces:
            self._faces.remove(student_id)
        logger.info("Student %s deleted (%d attendance records removed)", student_id, removed)
