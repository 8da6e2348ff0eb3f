from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.enums import Level
from .model import Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    Services depend on this interface, never on a concrete backend.
    """

    def list(self) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def get_by_code(self, code: str) -> Optional[Student]:
        raise NotImplementedError

    def generate_code(self, level: Level | str, grade: str, section: str) -> str:
        raise NotImplementedError

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
    ) -> Student:
        raise NotImplementedError

    def update(self, student_id: str, changes: Mapping[str, Any]) -> Student:
        raise NotImplementedError

    def delete(self, student_id: str) -> bool:
        """Remove one student. Related attendance/grades are left untouched."""

        raise NotImplementedError

    def ensure_seeded(self) -> bool:
        raise NotImplementedError
