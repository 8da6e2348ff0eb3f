from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..app_logger import get_logger
from ..common.identifiers import time_based_id
from ..core.constants import CODE_SEQUENCE_DIGITS, STUDENTS_KEY
from ..core.enums import Level
from ..core.exceptions import NotFoundError, ValidationError
from ..storage.store import CollectionStore, decoding
from .model import Student, grade_label
from .repository import StudentRepository
from .seed import DEMO_STUDENTS

logger = get_logger(__name__)

# Python attribute -> stored field
_FIELDS = {
    "id": "id",
    "first_name": "firstName",
    "last_name": "lastName",
    "student_code": "studentCode",
    "level": "level",
    "section": "section",
    "grade": "grade",
    "parent_id": "parentId",
    "photo_url": "photoUrl",
}


def _as_level(value: Level | str) -> Level:
    try:
        return Level(value)
    except ValueError:
        raise ValidationError(f"Nivel no válido: {value!r}")


def _from_row(r: Mapping[str, Any]) -> Student:
    return Student(
        id=str(r["id"]),
        first_name=r.get("firstName") or "",
        last_name=r.get("lastName") or "",
        student_code=r.get("studentCode") or "",
        level=Level(r["level"]),
        section=str(r.get("section") or ""),
        grade=r.get("grade") or "",
        parent_id=r.get("parentId"),
        photo_url=r.get("photoUrl"),
    )


def _to_row(s: Student) -> dict:
    row = {stored: getattr(s, attr) for attr, stored in _FIELDS.items()}
    row["level"] = s.level.value
    return row


def next_student_code(existing_codes: Iterable[str], level: Level | str, grade: str, section: str) -> str:
    """Build ``<prefix><gradeNumber><section><seq>`` with a collision-free sequence.

    The sequence is one past the highest already used for the same code base,
    so deleting a student never frees a code for reuse.
    """
    level = _as_level(level)
    prefix = "A" if level == Level.INITIAL else "B"
    match = re.search(r"\d+", grade or "")
    grade_number = match.group(0) if match else ""
    code_base = f"{prefix}{grade_number}{section}"

    pattern = re.compile(rf"^{re.escape(code_base)}(\d{{{CODE_SEQUENCE_DIGITS},}})$")
    highest = 0
    for code in existing_codes:
        m = pattern.match(code or "")
        if m:
            highest = max(highest, int(m.group(1)))

    return f"{code_base}{highest + 1:0{CODE_SEQUENCE_DIGITS}d}"


class KVStudentRepository(StudentRepository):
    def __init__(self, store: CollectionStore):
        self._store = store

    def _rows(self) -> list[dict]:
        return self._store.load(STUDENTS_KEY, [])

    def list(self) -> Sequence[Student]:
        with decoding(STUDENTS_KEY):
            return [_from_row(r) for r in self._rows()]

    def get_by_id(self, student_id: str) -> Optional[Student]:
        return next((s for s in self.list() if s.id == str(student_id)), None)

    def get_by_code(self, code: str) -> Optional[Student]:
        return next((s for s in self.list() if s.student_code == code), None)

    def generate_code(self, level: Level | str, grade: str, section: str) -> str:
        return next_student_code((r.get("studentCode") for r in self._rows()), level, grade, section)

    def add(
        self,
        *,
        first_name: str,
        last_name: str,
        level: Level | str,
        section: str,
        grade: Optional[str] = None,
        student_code: Optional[str] = None,
        parent_id: Optional[str] = None,
        photo_url: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Student:
        level = _as_level(level)
        grade = grade or grade_label(level, section)

        with self._store.mutate(STUDENTS_KEY, []) as rows:
            codes = [r.get("studentCode") for r in rows]
            if student_code:
                if student_code in codes:
                    raise ValidationError(f"El código {student_code} ya está asignado")
            else:
                student_code = next_student_code(codes, level, grade, section)

            student = Student(
                id=time_based_id({str(r.get("id")) for r in rows}, now=now),
                first_name=first_name,
                last_name=last_name,
                student_code=student_code,
                level=level,
                section=section,
                grade=grade,
                parent_id=parent_id,
                photo_url=photo_url,
            )
            rows.append(_to_row(student))

        logger.info("Student %s added with code %s", student.id, student.student_code)
        return student

    def update(self, student_id: str, changes: Mapping[str, Any]) -> Student:
        unknown = set(changes) - (set(_FIELDS) - {"id"})
        if unknown:
            raise ValidationError(f"Campos no editables: {', '.join(sorted(unknown))}")

        with self._store.mutate(STUDENTS_KEY, []) as rows:
            index = next((i for i, r in enumerate(rows) if str(r.get("id")) == str(student_id)), None)
            if index is None:
                raise NotFoundError("Estudiante no encontrado")

            merged = dict(rows[index])
            for attr, value in changes.items():
                if attr == "level":
                    value = _as_level(value).value
                merged[_FIELDS[attr]] = value

            new_code = merged.get("studentCode")
            if new_code != rows[index].get("studentCode") and any(
                r.get("studentCode") == new_code for i, r in enumerate(rows) if i != index
            ):
                raise ValidationError(f"El código {new_code} ya está asignado")

            rows[index] = merged
            return _from_row(merged)

    def delete(self, student_id: str) -> bool:
        with self._store.mutate(STUDENTS_KEY, []) as rows:
            before = len(rows)
            rows[:] = [r for r in rows if str(r.get("id")) != str(student_id)]
            return len(rows) < before

    def ensure_seeded(self) -> bool:
        seeded = self._store.save_if_absent(STUDENTS_KEY, DEMO_STUDENTS)
        if seeded:
            logger.info("Demo students seeded (%d)", len(DEMO_STUDENTS))
        return seeded
