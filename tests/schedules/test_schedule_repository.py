from __future__ import annotations

from datetime import datetime

import pytest

from school_records.core.exceptions import ValidationError
from school_records.schedules.kv_schedule_repository import KVScheduleRepository
from school_records.schedules.model import ClassInfo, ScheduledClass


@pytest.fixture
def repo(store) -> KVScheduleRepository:
    repo = KVScheduleRepository(store)
    repo.ensure_seeded()
    return repo


def test_seeded_template_covers_the_week(repo):
    full = repo.get_full()

    assert list(full) == ["Lunes", "Martes", "Miércoles", "Jueves", "Viernes"]
    assert len(full["Lunes"]) == 7
    assert full["Lunes"]["10:00 - 11:00"] == ClassInfo(subject="Recreo", teacher="", room="Patio")


def test_get_full_twice_is_equal(repo):
    assert repo.get_full() == repo.get_full()


def test_get_for_unknown_day_is_empty(repo):
    assert repo.get_for_day("Sábado") == {}


def test_update_class_upserts(repo):
    info = ClassInfo(subject="Química", teacher="Prof. Ruiz", room="Lab 2")

    assert repo.update_class("Lunes", "7:00 - 8:00", info) is True

    day = repo.get_for_day("Lunes")
    assert day["7:00 - 8:00"] == info
    assert len(day) == 7


def test_update_class_creates_day_bucket_and_keeps_slots_ordered(store):
    repo = KVScheduleRepository(store)
    repo.update_class("Martes", "9:00 - 10:00", ClassInfo(subject="Inglés"))
    repo.update_class("Martes", "7:00 - 8:00", ClassInfo(subject="Arte"))

    assert list(repo.get_for_day("Martes")) == ["7:00 - 8:00", "9:00 - 10:00"]


def test_update_class_validates_day_and_slot(repo):
    with pytest.raises(ValidationError):
        repo.update_class("Sábado", "7:00 - 8:00", ClassInfo(subject="Arte"))
    with pytest.raises(ValidationError):
        repo.update_class("Lunes", "siete", ClassInfo(subject="Arte"))


def test_get_for_teacher_scans_all_days(repo):
    classes = repo.get_for_teacher("Prof. Gómez")

    assert classes == [
        ScheduledClass(day="Martes", time_slot="12:00 - 13:00", subject="Arte", teacher="Prof. Gómez", room="C301"),
        ScheduledClass(day="Viernes", time_slot="13:00 - 14:00", subject="Arte", teacher="Prof. Gómez", room="C301"),
    ]
    assert repo.get_for_teacher("Prof. Nadie") == []


def test_get_current_during_school_hours(repo, fixed_now):
    current = repo.get_current(now=fixed_now)

    assert [(c.day, c.time_slot, c.subject) for c in current] == [("Miércoles", "9:00 - 10:00", "Matemáticas")]


def test_get_current_outside_school_hours_is_empty(repo, fixed_now):
    assert repo.get_current(now=fixed_now.replace(hour=15)) == []


@pytest.mark.parametrize("day", [7, 8])
def test_get_current_on_weekend_is_empty(repo, day):
    assert repo.get_current(now=datetime(2026, 2, day, 9, 30)) == []
