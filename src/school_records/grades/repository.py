from __future__ import annotations

from datetime import datetime
from numbers import Real
from typing import Optional, Protocol, Sequence

from .averages import GradeBook
from .model import GradeEntry


class GradeRepository(Protocol):
    def get_for_student(self, student_id: str) -> GradeBook:
        """Subject/period view with computed averages.

        Raises NotFoundError when the student has no grades at all.
        """

        raise NotImplementedError

    def update_score(
        self,
        student_id: str,
        subject: str,
        period: str,
        score: Real,
        *,
        now: Optional[datetime] = None,
    ) -> None:
        raise NotImplementedError

    def add_grade(self, student_id: str, entry: GradeEntry, *, now: Optional[datetime] = None) -> GradeEntry:
        raise NotImplementedError

    def list_entries(self, student_id: str) -> Sequence[GradeEntry]:
        raise NotImplementedError

    def delete_for_student(self, student_id: str) -> None:
        raise NotImplementedError

    def ensure_seeded(self) -> bool:
        raise NotImplementedError
