from __future__ import annotations

import copy
import json
import threading
from contextlib import contextmanager
from typing import Any, Iterator

from ..app_logger import get_logger
from ..core.exceptions import PersistenceError
from .backend import KeyValueBackend

logger = get_logger(__name__)


@contextmanager
def decoding(key: str) -> Iterator[None]:
    """Turn a malformed stored row into a PersistenceError for ``key``."""
    try:
        yield
    except (KeyError, ValueError, TypeError, AttributeError) as exc:
        logger.error("Collection %r holds a malformed row: %s", key, exc)
        raise PersistenceError(f"Registro inválido en {key!r}") from exc


class CollectionStore:
    """JSON collections on top of a key-value backend.

    Each collection lives under one key and is read and written whole.
    ``mutate`` holds a per-key lock across read, modify and write so two
    interleaved mutations of the same collection cannot overwrite each other.
    Backends shared between processes (MySQL) also lock the key on their
    side through ``locked``.
    """

    def __init__(self, backend: KeyValueBackend):
        self._backend = backend
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, key: str) -> threading.RLock:
        with self._locks_guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.RLock()
            return lock

    def _decode(self, key: str, raw: str | None, default: Any) -> Any:
        if raw is None:
            return copy.deepcopy(default)
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.error("Collection %r holds invalid JSON: %s", key, exc)
            raise PersistenceError(f"Datos corruptos en {key!r}") from exc

    def _encode(self, key: str, value: Any) -> str:
        try:
            return json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise PersistenceError(f"No se pudo serializar {key!r}") from exc

    def exists(self, key: str) -> bool:
        return self._backend.get(key) is not None

    def load(self, key: str, default: Any) -> Any:
        return self._decode(key, self._backend.get(key), default)

    def save(self, key: str, value: Any) -> None:
        self._backend.set(key, self._encode(key, value))

    def remove(self, key: str) -> None:
        with self._lock_for(key):
            self._backend.remove(key)

    @contextmanager
    def mutate(self, key: str, default: Any) -> Iterator[Any]:
        """Yield the loaded collection; persist it if the block exits cleanly.

        The block must mutate the yielded list/dict in place.
        """
        with self._lock_for(key):
            locked = getattr(self._backend, "locked", None)
            if locked is None:
                data = self.load(key, default)
                yield data
                self.save(key, data)
                return

            with locked(key) as current:
                data = self._decode(key, current.value, default)
                yield data
                current.write(self._encode(key, data))

    def save_if_absent(self, key: str, value: Any) -> bool:
        with self._lock_for(key):
            locked = getattr(self._backend, "locked", None)
            if locked is None:
                if self.exists(key):
                    return False
                self.save(key, value)
                return True

            with locked(key) as current:
                if current.value is not None:
                    return False
                current.write(self._encode(key, value))
                return True
