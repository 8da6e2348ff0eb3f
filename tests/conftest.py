from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest

from school_records.container import build_container
from school_records.core.exceptions import PersistenceError
from school_records.storage.memory_backend import InMemoryBackend
from school_records.storage.store import CollectionStore


class FailingBackend:
    """Backend whose every call fails the way the MySQL backend reports faults."""

    def get(self, key: str) -> Optional[str]:
        raise PersistenceError(f"read of {key!r} failed")

    def set(self, key: str, value: str) -> None:
        raise PersistenceError(f"write of {key!r} failed")

    def remove(self, key: str) -> None:
        raise PersistenceError(f"delete of {key!r} failed")


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday
    return datetime(2026, 2, 4, 9, 15, 0)


@pytest.fixture
def backend() -> InMemoryBackend:
    return InMemoryBackend()


@pytest.fixture
def store(backend) -> CollectionStore:
    return CollectionStore(backend)


@pytest.fixture
def container(backend):
    return build_container(backend=backend)


@pytest.fixture
def seeded_container(container):
    container.ensure_seeded()
    return container


@pytest.fixture
def failing_container():
    return build_container(backend=FailingBackend())
