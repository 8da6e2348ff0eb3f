from __future__ import annotations

import threading
from contextlib import contextmanager

import pytest

from school_records.core.exceptions import PersistenceError
from school_records.storage.backend import LockedValue
from school_records.storage.memory_backend import InMemoryBackend
from school_records.storage.store import CollectionStore


def test_collections_survive_a_store_round_trip(store):
    students = [{"id": "1", "firstName": "Ana", "parentId": None, "photoUrl": None}]
    grades = [{"subject": "Matemáticas", "period": "Primer Trimestre", "score": 16, "comment": None}]
    schedule = {"Lunes": {"7:00 - 8:00": {"subject": "Matemáticas", "teacher": "Prof. García", "room": "A101"}}}

    store.save("students_data", students)
    store.save("grades_1", grades)
    store.save("schedule_data", schedule)

    assert store.load("students_data", []) == students
    assert store.load("schedule_data", {}) == schedule
    loaded = store.load("grades_1", [])
    assert loaded == grades
    assert isinstance(loaded[0]["score"], int)


def test_load_missing_key_returns_a_fresh_default(store):
    first = store.load("attendance_records", [])
    first.append("x")

    assert store.load("attendance_records", []) == []


def test_mutate_persists_only_when_block_succeeds(store):
    store.save("students_data", [{"id": "1"}])

    with pytest.raises(RuntimeError):
        with store.mutate("students_data", []) as rows:
            rows.append({"id": "2"})
            raise RuntimeError("boom")

    assert store.load("students_data", []) == [{"id": "1"}]


def test_invalid_json_raises_persistence_error():
    store = CollectionStore(InMemoryBackend({"students_data": "{not json"}))

    with pytest.raises(PersistenceError):
        store.load("students_data", [])


def test_save_if_absent_keeps_existing_value(store):
    store.save("students_data", [])

    assert store.save_if_absent("students_data", [{"id": "1"}]) is False
    assert store.load("students_data", None) == []
    assert store.save_if_absent("schedule_data", {}) is True


def test_concurrent_mutations_do_not_lose_updates(store):
    threads_count, per_thread = 8, 25

    def worker(n: int) -> None:
        for i in range(per_thread):
            with store.mutate("attendance_records", []) as rows:
                rows.append(f"{n}-{i}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store.load("attendance_records", [])) == threads_count * per_thread


class RecordingLockingBackend(InMemoryBackend):
    """In-memory backend that also exposes per-key locking, like the MySQL one."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.locked_keys: list[str] = []

    @contextmanager
    def locked(self, key: str):
        self.locked_keys.append(key)
        current = LockedValue(self.get(key))
        yield current
        if current.dirty:
            self.set(key, current.value)


def test_mutate_goes_through_the_backend_lock_when_available():
    backend = RecordingLockingBackend({"students_data": '[{"id": "1"}]'})
    store = CollectionStore(backend)

    with store.mutate("students_data", []) as rows:
        rows.append({"id": "2"})

    assert backend.locked_keys == ["students_data"]
    assert store.load("students_data", []) == [{"id": "1"}, {"id": "2"}]


def test_failed_block_under_backend_lock_writes_nothing():
    backend = RecordingLockingBackend({"students_data": '[{"id": "1"}]'})
    store = CollectionStore(backend)

    with pytest.raises(RuntimeError):
        with store.mutate("students_data", []) as rows:
            rows.append({"id": "2"})
            raise RuntimeError("boom")

    assert store.load("students_data", []) == [{"id": "1"}]


def test_save_if_absent_checks_under_backend_lock():
    backend = RecordingLockingBackend({"students_data": "[]"})
    store = CollectionStore(backend)

    assert store.save_if_absent("students_data", [{"id": "1"}]) is False
    assert store.save_if_absent("schedule_data", {}) is True
    assert backend.locked_keys == ["students_data", "schedule_data"]
    assert store.load("schedule_data", None) == {}
