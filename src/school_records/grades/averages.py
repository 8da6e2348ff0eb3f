from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from numbers import Real
from typing import Iterable, Optional, Sequence

from ..core.constants import AVERAGE_PERIOD
from .model import GradeEntry

GradeBook = dict[str, dict[str, Real]]


def round_half_up(value: Real) -> int:
    """Round to the nearest integer, .5 going up (Python's round() is banker's)."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def subject_average(scores: Iterable[Real]) -> Optional[int]:
    values = [Decimal(str(v)) for v in scores]
    if not values:
        return None
    return round_half_up(sum(values) / len(values))


def project_grade_book(entries: Sequence[GradeEntry]) -> GradeBook:
    """Fold entries into ``{subject: {period: score, "Promedio": avg}}``.

    The latest scored entry wins for each (subject, period); comment-only
    entries register the subject but add no score.
    """
    book: GradeBook = {}
    for e in entries:
        periods = book.setdefault(e.subject, {})
        if e.score is not None:
            periods[e.period] = e.score

    for periods in book.values():
        average = subject_average(v for k, v in periods.items() if k != AVERAGE_PERIOD)
        if average is not None:
            periods[AVERAGE_PERIOD] = average
    return book
