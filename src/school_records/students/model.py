from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Level


def grade_label(level: Level, section: str) -> str:
    """Display label for a level/section pair ("Sección II", "3° Grado")."""
    if level == Level.INITIAL:
        return f"Sección {section}"
    return f"{section}° Grado"


@dataclass(frozen=True)
class Student:
    """Entidad de dominio: Estudiante.

    Nota: objeto de datos puro; el acceso al almacenamiento vive en el repositorio.
    """

    id: str
    first_name: str
    last_name: str
    student_code: str
    level: Level
    section: str
    grade: str
    parent_id: Optional[str] = None
    photo_url: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
