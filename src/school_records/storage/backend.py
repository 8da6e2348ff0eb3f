from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Optional, Protocol


class KeyValueBackend(Protocol):
    """Durable string key-value store underneath every repository.

    Values are opaque strings; serialization is the caller's concern.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


@dataclass
class LockedValue:
    """Current value of a key held under the backend's lock; ``write`` stores the new value on exit."""

    value: Optional[str]
    dirty: bool = False

    def write(self, value: str) -> None:
        self.value = value
        self.dirty = True


class LockingBackend(KeyValueBackend, Protocol):
    """Backend shared between processes that can lock one key for read-modify-write."""

    def locked(self, key: str) -> AbstractContextManager[LockedValue]:
        raise NotImplementedError
