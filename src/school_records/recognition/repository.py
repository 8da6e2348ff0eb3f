from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import FaceProfile


class FaceProfileRepository(Protocol):
    def list(self) -> Sequence[FaceProfile]:
        raise NotImplementedError

    def register_face(self, student_id: str, image: str, *, now: Optional[datetime] = None) -> FaceProfile:
        """Store (or replace) the student's profile for a captured image handle."""

        raise NotImplementedError

    def has_registered_face(self, student_id: str) -> bool:
        raise NotImplementedError

    def remove(self, student_id: str) -> bool:
        raise NotImplementedError

    def ensure_seeded(self) -> bool:
        """Enrol the demo students when no profile collection exists yet."""

        raise NotImplementedError
