from __future__ import annotations

from datetime import datetime
from typing import Collection, Optional

from .datetime_utils import now_local


def time_based_id(taken: Collection[str], *, now: Optional[datetime] = None) -> str:
    """Millisecond timestamp id, bumped until it is not in ``taken``."""
    candidate = int((now or now_local()).timestamp() * 1000)
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)
