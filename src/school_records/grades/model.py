from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Optional


@dataclass(frozen=True)
class GradeEntry:
    """One grade-book line: a numeric score, a teacher comment, or both."""

    subject: str
    period: str
    score: Optional[Real] = None
    comment: Optional[str] = None
    recorded_at: Optional[str] = None
