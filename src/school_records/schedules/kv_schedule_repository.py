from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..app_logger import get_logger
from ..common.datetime_utils import now_local, parse_slot_hours
from ..common.validators import require_non_empty
from ..core.constants import SCHEDULE_KEY
from ..core.enums import Weekday
from ..core.exceptions import ValidationError
from ..storage.store import CollectionStore, decoding
from .model import ClassInfo, ScheduledClass
from .repository import DaySchedule, ScheduleRepository
from .seed import DEFAULT_SCHEDULE

logger = get_logger(__name__)


def _info_from_row(r: Mapping[str, Any]) -> ClassInfo:
    return ClassInfo(subject=r.get("subject") or "", teacher=r.get("teacher") or "", room=r.get("room") or "")


def _info_to_row(info: ClassInfo) -> dict:
    return {"subject": info.subject, "teacher": info.teacher, "room": info.room}


def _slot_start(time_slot: str) -> int:
    try:
        return parse_slot_hours(time_slot)[0]
    except ValueError:
        return 24


class KVScheduleRepository(ScheduleRepository):
    def __init__(self, store: CollectionStore):
        self._store = store

    def _grid(self) -> dict:
        return self._store.load(SCHEDULE_KEY, {})

    def get_full(self) -> dict[str, DaySchedule]:
        grid = self._grid()
        with decoding(SCHEDULE_KEY):
            return {day: {slot: _info_from_row(r) for slot, r in slots.items()} for day, slots in grid.items()}

    def get_for_day(self, day: str) -> DaySchedule:
        return self.get_full().get(day) or {}

    def update_class(self, day: str, time_slot: str, info: ClassInfo) -> bool:
        try:
            day = Weekday(day).value
        except ValueError:
            raise ValidationError(f"Día no válido: {day!r}")
        try:
            parse_slot_hours(time_slot)
        except ValueError:
            raise ValidationError(f"Franja horaria no válida: {time_slot!r}")
        require_non_empty(info.subject, "Asignatura")

        with self._store.mutate(SCHEDULE_KEY, {}) as grid:
            slots = grid.setdefault(day, {})
            slots[time_slot] = _info_to_row(info)
            grid[day] = dict(sorted(slots.items(), key=lambda kv: _slot_start(kv[0])))
        return True

    def get_for_teacher(self, teacher_name: str) -> Sequence[ScheduledClass]:
        out: list[ScheduledClass] = []
        for day, slots in self.get_full().items():
            for slot, info in slots.items():
                if info.teacher == teacher_name:
                    out.append(ScheduledClass(day=day, time_slot=slot, subject=info.subject, teacher=info.teacher, room=info.room))
        return out

    def get_current(self, *, now: Optional[datetime] = None) -> Sequence[ScheduledClass]:
        now = now or now_local()
        day = Weekday.from_index(now.weekday())
        if day is None:
            return []

        out: list[ScheduledClass] = []
        for slot, info in self.get_for_day(day.value).items():
            try:
                start_hour, end_hour = parse_slot_hours(slot)
            except ValueError:
                logger.warning("Skipping malformed time slot %r on %s", slot, day.value)
                continue
            if start_hour <= now.hour < end_hour:
                out.append(ScheduledClass(day=day.value, time_slot=slot, subject=info.subject, teacher=info.teacher, room=info.room))
        return out

    def ensure_seeded(self) -> bool:
        seeded = self._store.save_if_absent(SCHEDULE_KEY, DEFAULT_SCHEDULE)
        if seeded:
            logger.info("Default weekly schedule seeded")
        return seeded
