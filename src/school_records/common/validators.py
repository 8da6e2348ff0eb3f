from __future__ import annotations

from datetime import datetime
from numbers import Real

from ..core.constants import MAX_SCORE, MIN_SCORE
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} no puede estar vacío")
    return value.strip()


def require_score(value: object) -> Real:
    # bool is a Real subclass; True must not be accepted as 1
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError("La calificación debe ser numérica")
    if value < MIN_SCORE or value > MAX_SCORE:
        raise ValidationError(f"La calificación debe estar entre {MIN_SCORE} y {MAX_SCORE}")
    return value


def require_hhmm(value: str, field_name: str) -> str:
    try:
        datetime.strptime(value, "%H:%M")
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} no es válida (HH:MM)")
    return value
