from __future__ import annotations

from datetime import datetime

import pytest

from school_records.core.enums import Level
from school_records.core.exceptions import NotFoundError, ValidationError
from school_records.grades.model import GradeEntry


def test_add_student_trims_names_and_validates(container):
    svc = container.student_service

    s = svc.add_student(first_name="  Ana ", last_name="García", level="primary", section="3")

    assert s.first_name == "Ana"
    assert s.grade == "3° Grado"
    assert s.student_code == "B33001"


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(first_name="", last_name="García", level="primary", section="3"),
        dict(first_name="Ana", last_name="   ", level="primary", section="3"),
        dict(first_name="Ana", last_name="García", level="secondary", section="3"),
        dict(first_name="Ana", last_name="García", level="primary", section="7"),
        dict(first_name="Ana", last_name="García", level="initial", section="IV"),
    ],
)
def test_add_student_rejects_invalid_input(container, kwargs):
    with pytest.raises(ValidationError):
        container.student_service.add_student(**kwargs)

    assert container.students_repo.list() == []


def test_update_student_rejects_blank_name(container):
    s = container.student_service.add_student(first_name="Ana", last_name="García", level="primary", section="3")

    with pytest.raises(ValidationError):
        container.student_service.update_student(s.id, {"first_name": " "})


def test_delete_student_cascades_to_related_records(container):
    now = datetime(2026, 2, 4, 8, 0)
    svc = container.student_service
    keep = svc.add_student(first_name="Ana", last_name="García", level="primary", section="3")
    gone = svc.add_student(first_name="Luis", last_name="Martínez", level="primary", section="3")

    container.attendance_repo.register(keep.id, "07:50", now=now)
    container.attendance_repo.register(gone.id, "07:55", now=now)
    container.grades_repo.add_grade(gone.id, GradeEntry(subject="Arte", period="Primer Trimestre", score=15))
    container.faces_repo.register_face(gone.id, "file:///capture.jpg", now=now)

    svc.delete_student(gone.id)

    assert container.students_repo.get_by_id(gone.id) is None
    assert [r.student_id for r in container.attendance_repo.list()] == [keep.id]
    assert container.grades_repo.list_entries(gone.id) == []
    assert container.faces_repo.has_registered_face(gone.id) is False


def test_delete_unknown_student_raises_not_found(container):
    with pytest.raises(NotFoundError):
        container.student_service.delete_student("missing")


def test_update_student_rejects_section_outside_level(container):
    svc = container.student_service
    s = svc.add_student(first_name="María", last_name="Rodríguez", level="initial", section="II")

    with pytest.raises(ValidationError):
        svc.update_student(s.id, {"section": "9"})
    with pytest.raises(ValidationError):
        svc.update_student(s.id, {"level": "primary"})

    assert container.students_repo.get_by_id(s.id).section == "II"


def test_update_student_rederives_grade_label(container):
    svc = container.student_service
    s = svc.add_student(first_name="María", last_name="Rodríguez", level="initial", section="II")

    moved = svc.update_student(s.id, {"level": "primary", "section": "1"})
    assert moved.level == Level.PRIMARY
    assert moved.grade == "1° Grado"

    labelled = svc.update_student(s.id, {"section": "2", "grade": "2do Grado"})
    assert labelled.grade == "2do Grado"
