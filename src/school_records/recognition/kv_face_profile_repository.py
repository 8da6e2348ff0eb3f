from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..app_logger import get_logger
from ..common.datetime_utils import now_local
from ..core.constants import FACE_PROFILES_KEY
from ..storage.store import CollectionStore, decoding
from .model import FaceProfile
from .repository import FaceProfileRepository
from .seed import DEMO_FACE_PROFILES

logger = get_logger(__name__)


class KVFaceProfileRepository(FaceProfileRepository):
    """Face profiles keyed by student.

    The image handle is not decoded; the profile only records that a capture
    was enrolled for the student.
    """

    def __init__(self, store: CollectionStore):
        self._store = store

    def list(self) -> Sequence[FaceProfile]:
        rows = self._store.load(FACE_PROFILES_KEY, [])
        with decoding(FACE_PROFILES_KEY):
            return [
                FaceProfile(student_id=str(r["studentId"]), face_id=r["faceId"], registered_at=r.get("registeredAt") or "")
                for r in rows
            ]

    def register_face(self, student_id: str, image: str, *, now: Optional[datetime] = None) -> FaceProfile:
        now = now or now_local()
        profile = FaceProfile(
            student_id=str(student_id),
            face_id=f"face_{student_id}_{int(now.timestamp() * 1000)}",
            registered_at=now.isoformat(timespec="seconds"),
        )
        row = {"studentId": profile.student_id, "faceId": profile.face_id, "registeredAt": profile.registered_at}

        with self._store.mutate(FACE_PROFILES_KEY, []) as rows:
            rows[:] = [r for r in rows if str(r.get("studentId")) != profile.student_id]
            rows.append(row)
        return profile

    def has_registered_face(self, student_id: str) -> bool:
        return any(p.student_id == str(student_id) and p.face_id for p in self.list())

    def remove(self, student_id: str) -> bool:
        with self._store.mutate(FACE_PROFILES_KEY, []) as rows:
            before = len(rows)
            rows[:] = [r for r in rows if str(r.get("studentId")) != str(student_id)]
            return len(rows) < before

    def ensure_seeded(self) -> bool:
        seeded = self._store.save_if_absent(FACE_PROFILES_KEY, DEMO_FACE_PROFILES)
        if seeded:
            logger.info("Demo face profiles seeded (%d)", len(DEMO_FACE_PROFILES))
        return seeded
