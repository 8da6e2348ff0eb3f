from __future__ import annotations

from urllib.parse import quote

import pytest

from school_records.container import build_container
from school_records.main import create_app
from school_records.storage.memory_backend import InMemoryBackend

GRADE_URL = "/api/students/1/grades/" + quote("Matemáticas") + "/" + quote("Segundo Trimestre")


@pytest.fixture
def client(monkeypatch, seeded_container):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("AUTO_SEED_DB", "0")
    app = create_app(container=seeded_container)
    return app.test_client()


@pytest.fixture
def failing_client(monkeypatch, failing_container):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("AUTO_SEED_DB", "0")
    app = create_app(container=failing_container)
    return app.test_client()


def test_create_and_fetch_student(client):
    resp = client.post(
        "/api/students",
        json={"first_name": "Sofía", "last_name": "Hernández", "level": "primary", "section": "3"},
    )
    assert resp.status_code == 201
    created = resp.get_json()
    assert created["student_code"] == "B33003"
    assert created["level"] == "primary"
    assert created["full_name"] == "Sofía Hernández"

    detail = client.get(f"/api/students/{created['id']}")
    assert detail.get_json()["first_name"] == "Sofía"
    assert len(client.get("/api/students").get_json()) == 6


def test_validation_and_not_found_map_to_status_codes(client):
    bad = client.post("/api/students", json={"first_name": "", "last_name": "X", "level": "primary", "section": "1"})
    assert bad.status_code == 400
    assert bad.get_json()["success"] is False

    assert client.get("/api/students/nope").status_code == 404
    assert client.delete("/api/students/nope").status_code == 404
    assert client.post("/api/students", data="not json").status_code == 400


def test_generate_code_endpoint(client):
    resp = client.get("/api/students/code", query_string={"level": "primary", "grade": "3° Grado", "section": "A"})

    assert resp.get_json() == {"code": "B3A001"}


def test_attendance_register_and_stats(client):
    assert client.post("/api/attendance", json={"student_id": "1", "arrival_time": "07:40"}).status_code == 201
    assert client.post("/api/attendance", json={"student_id": "2", "status": "absent"}).status_code == 201

    records = client.get("/api/attendance").get_json()
    assert {r["student_id"]: r["status"] for r in records} == {"1": "present", "2": "absent"}

    day = records[0]["date"]
    stats = client.get("/api/attendance/stats", query_string={"start": day, "end": day}).get_json()
    assert stats["total"] == 2
    assert stats["present_pct"] == 50


def test_grade_update_rejects_out_of_range(client):
    resp = client.put(GRADE_URL, json={"score": 21})
    assert resp.status_code == 400

    ok = client.put(GRADE_URL, json={"score": 20})
    assert ok.status_code == 200
    assert ok.get_json()["Promedio"] == 18


def test_schedule_update_and_teacher_lookup(client):
    resp = client.put(
        "/api/schedule/Lunes",
        json={"time_slot": "7:00 - 8:00", "subject": "Química", "teacher": "Prof. Ruiz", "room": "Lab 2"},
    )
    assert resp.status_code == 200

    classes = client.get("/api/schedule/teacher/" + quote("Prof. Ruiz")).get_json()
    assert classes == [
        {"day": "Lunes", "time_slot": "7:00 - 8:00", "subject": "Química", "teacher": "Prof. Ruiz", "room": "Lab 2"}
    ]


def test_read_screens_fall_back_to_empty_on_storage_fault(failing_client):
    assert failing_client.get("/api/students").get_json() == []
    assert failing_client.get("/api/attendance").get_json() == []
    assert failing_client.get("/api/schedule").get_json() == {}
    assert failing_client.get("/api/attendance/stats?start=2026-02-01&end=2026-02-28").get_json()["total"] == 0


def test_grade_reads_surface_storage_faults(failing_client):
    resp = failing_client.get("/api/students/1/grades")

    assert resp.status_code == 503
    assert resp.get_json()["success"] is False


def test_face_enrolment_and_check_in(client):
    created = client.post(
        "/api/students",
        json={"first_name": "Sofía", "last_name": "Hernández", "level": "primary", "section": "3"},
    ).get_json()
    assert client.get(f"/api/faces/{created['id']}").get_json()["registered"] is False

    enrolled = client.post(f"/api/faces/{created['id']}", json={"image": "file:///enrol.jpg"})
    assert enrolled.status_code == 201
    assert client.get(f"/api/faces/{created['id']}").get_json()["registered"] is True

    resp = client.post("/api/check-in/face", json={"image": "file:///capture.jpg"})
    body = resp.get_json()
    assert resp.status_code == 201
    assert body["record"]["status"] == "present"
    assert body["record"]["student_id"] == body["student"]["id"]
    assert body["student"]["full_name"]
    assert body["confidence"] == 0.0


def test_face_check_in_without_profiles_is_not_found(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("AUTO_SEED_DB", "0")
    client = create_app(container=container).test_client()

    resp = client.post("/api/check-in/face", json={"image": "file:///capture.jpg"})

    assert resp.status_code == 404


def test_malformed_stored_rows_fall_back_or_surface_as_storage_faults(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("AUTO_SEED_DB", "0")
    backend = InMemoryBackend(
        {
            "students_data": '[{"id": "1", "level": "primaria"}]',
            "attendance_records": '[{"id": "9", "studentId": "1"}]',
            "grades_1": '[{"period": "Primer Trimestre"}]',
        }
    )
    client = create_app(container=build_container(backend=backend)).test_client()

    assert client.get("/api/students").get_json() == []
    assert client.get("/api/attendance").get_json() == []
    assert client.get("/api/students/1").status_code == 503
    assert client.get("/api/students/1/grades").status_code == 503
