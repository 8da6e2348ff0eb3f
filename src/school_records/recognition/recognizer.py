from __future__ import annotations

import random
from typing import Optional, Protocol

from ..app_logger import get_logger
from .model import MatchResult
from .repository import FaceProfileRepository

logger = get_logger(__name__)


class FaceRecognizer(Protocol):
    def recognize(self, image: str) -> Optional[MatchResult]:
        """Match a captured image handle to a student; None means no match."""

        raise NotImplementedError


class RandomProfileRecognizer(FaceRecognizer):
    """STUB recognizer: ignores the image and picks a random enrolled profile.

    Stands in until a real matching backend is plugged in through the
    ``FaceRecognizer`` interface. Confidence is always 0.0 so callers can tell
    a stub match from a real one.
    """

    def __init__(self, profiles: FaceProfileRepository, *, rng: Optional[random.Random] = None):
        self._profiles = profiles
        self._rng = rng or random.Random()

    def recognize(self, image: str) -> Optional[MatchResult]:
        profiles = list(self._profiles.list())
        if not profiles:
            logger.info("Recognition stub: no enrolled profiles")
            return None
        chosen = self._rng.choice(profiles)
        logger.info("Recognition stub picked student %s", chosen.student_id)
        return MatchResult(student_id=chosen.student_id, confidence=0.0)
