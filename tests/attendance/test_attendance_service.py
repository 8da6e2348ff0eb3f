from __future__ import annotations

import pytest

from school_records.core.enums import AttendanceStatus
from school_records.core.exceptions import NotFoundError, ValidationError


def test_register_requires_known_student(container, fixed_now):
    with pytest.raises(NotFoundError):
        container.attendance_service.register("ghost", now=fixed_now)


def test_register_validates_status_and_times(seeded_container, fixed_now):
    svc = seeded_container.attendance_service

    with pytest.raises(ValidationError):
        svc.register("1", status="late", now=fixed_now)
    with pytest.raises(ValidationError):
        svc.register("1", arrival_time="7h40", now=fixed_now)
    with pytest.raises(ValidationError):
        svc.register("1", status="absent", absence_date="04/02/2026", now=fixed_now)


def test_roll_call_lists_every_student(seeded_container, fixed_now):
    svc = seeded_container.attendance_service
    svc.register("1", arrival_time="07:40", now=fixed_now)
    svc.register("2", status="absent", now=fixed_now)

    rows = {r.student.id: r for r in svc.roll_call(fixed_now.date())}

    assert len(rows) == 5
    assert rows["1"].status_label == "Presente"
    assert rows["2"].record.status == AttendanceStatus.ABSENT
    assert rows["3"].record is None
    assert rows["3"].status_label == "Sin registro"


def test_history_is_newest_first(seeded_container, fixed_now):
    svc = seeded_container.attendance_service
    svc.register("1", now=fixed_now.replace(day=2))
    svc.register("1", now=fixed_now)

    assert [r.date for r in svc.history("1")] == ["2026-02-04", "2026-02-02"]


def test_stats_rejects_malformed_dates(container):
    with pytest.raises(ValidationError):
        container.attendance_service.stats("yesterday", "2026-02-04")
