from __future__ import annotations

from datetime import date, datetime
from typing import Union

DateLike = Union[str, date]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def normalize_iso_date(value: DateLike) -> str:
    """Return the ``YYYY-MM-DD`` part of a date, datetime or ISO string.

    Stored values sometimes carry a full timestamp (``2024-03-01T08:00:00Z``);
    only the calendar date is compared.
    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value).split("T")[0]


def format_hhmm(moment: datetime) -> str:
    return moment.strftime("%H:%M")


def parse_slot_hours(time_slot: str) -> tuple[int, int]:
    """Parse ``"H:MM - H:MM"`` into (start_hour, end_hour)."""
    start, sep, end = time_slot.partition(" - ")
    if not sep:
        raise ValueError(f"Invalid time slot: {time_slot!r}")
    return int(start.split(":")[0]), int(end.split(":")[0])


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
