from __future__ import annotations

from datetime import datetime
from numbers import Real
from typing import Any, Mapping, Optional, Sequence

from ..app_logger import get_logger
from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty, require_score
from ..core.constants import AVERAGE_PERIOD, GRADES_KEY_PREFIX
from ..core.exceptions import NotFoundError, ValidationError
from ..storage.store import CollectionStore, decoding
from .averages import GradeBook, project_grade_book
from .model import GradeEntry
from .repository import GradeRepository
from .seed import DEMO_SCORES, demo_rows

logger = get_logger(__name__)


def _key(student_id: str) -> str:
    return f"{GRADES_KEY_PREFIX}{student_id}"


def _from_row(r: Mapping[str, Any]) -> GradeEntry:
    return GradeEntry(
        subject=r["subject"],
        period=r["period"],
        score=r.get("score"),
        comment=r.get("comment"),
        recorded_at=r.get("recordedAt"),
    )


def _to_row(e: GradeEntry) -> dict:
    return {
        "subject": e.subject,
        "period": e.period,
        "score": e.score,
        "comment": e.comment,
        "recordedAt": e.recorded_at,
    }


def _require_period(period: str) -> str:
    period = require_non_empty(period, "Periodo")
    if period == AVERAGE_PERIOD:
        raise ValidationError(f"{AVERAGE_PERIOD} se calcula automáticamente")
    return period


class KVGradeRepository(GradeRepository):
    def __init__(self, store: CollectionStore):
        self._store = store

    def list_entries(self, student_id: str) -> Sequence[GradeEntry]:
        key = _key(student_id)
        rows = self._store.load(key, [])
        with decoding(key):
            return [_from_row(r) for r in rows]

    def get_for_student(self, student_id: str) -> GradeBook:
        entries = self.list_entries(student_id)
        if not entries:
            raise NotFoundError("No se encontraron calificaciones para este estudiante")
        return project_grade_book(entries)

    def update_score(
        self,
        student_id: str,
        subject: str,
        period: str,
        score: Real,
        *,
        now: Optional[datetime] = None,
    ) -> None:
        score = require_score(score)
        period = _require_period(period)
        recorded_at = (now or now_local()).isoformat(timespec="seconds")

        with self._store.mutate(_key(student_id), []) as rows:
            if not any(r.get("subject") == subject for r in rows):
                raise NotFoundError("No se encontró la asignatura para este estudiante")

            index = None
            for i, r in enumerate(rows):
                if r.get("subject") == subject and r.get("period") == period and r.get("score") is not None:
                    index = i

            if index is None:
                rows.append(_to_row(GradeEntry(subject=subject, period=period, score=score, recorded_at=recorded_at)))
            else:
                rows[index] = dict(rows[index], score=score, recordedAt=recorded_at)

        logger.info("Grade %s/%s set to %s for student %s", subject, period, score, student_id)

    def add_grade(self, student_id: str, entry: GradeEntry, *, now: Optional[datetime] = None) -> GradeEntry:
        subject = require_non_empty(entry.subject, "Asignatura")
        period = _require_period(entry.period)
        if entry.score is None and not (entry.comment or "").strip():
            raise ValidationError("Ingrese una calificación o un comentario")
        score = require_score(entry.score) if entry.score is not None else None

        stored = GradeEntry(
            subject=subject,
            period=period,
            score=score,
            comment=(entry.comment or "").strip() or None,
            recorded_at=entry.recorded_at or (now or now_local()).isoformat(timespec="seconds"),
        )
        with self._store.mutate(_key(student_id), []) as rows:
            rows.append(_to_row(stored))
        return stored

    def delete_for_student(self, student_id: str) -> None:
        self._store.remove(_key(student_id))

    def ensure_seeded(self) -> bool:
        seeded = False
        for student_id in DEMO_SCORES:
            seeded = self._store.save_if_absent(_key(student_id), demo_rows(student_id)) or seeded
        if seeded:
            logger.info("Demo grade books seeded")
        return seeded
