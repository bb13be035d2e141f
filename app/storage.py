# app/storage.py
"""
Whole-collection JSON document store.

Each collection (customers, vehicles, employees) lives in one JSON file.
load() always re-reads the entire file and save() always rewrites it; there
is no caching and no partial write. Callers that mutate a collection hold
the store's lock for the full load-mutate-save cycle so two requests can't
overwrite each other's changes.
"""

import os
import stat
import tempfile
import threading
from contextlib import contextmanager
from typing import Generic, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.services.exceptions import DecodeError, ReadError, WriteError
from app.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_FILE_MODE = 0o644

# One lock per resolved file path, shared by every store instance on that file
_locks: dict[str, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: str) -> threading.RLock:
    with _locks_guard:
        lock = _locks.get(path)
        if lock is None:
            lock = threading.RLock()
            _locks[path] = lock
        return lock


class DocumentStore(Generic[T]):
    """Loads and saves one collection of type T from a single JSON file."""

    def __init__(self, path: str, container: type, indent: int = 4):
        self.path = os.path.abspath(path)
        self.indent = indent
        self._adapter = TypeAdapter(container)
        self._lock = _lock_for(self.path)

    def __repr__(self):
        return f"<DocumentStore {self.path}>"

    @contextmanager
    def locked(self):
        """Hold the collection lock for a load-mutate-save cycle. Re-entrant."""
        with self._lock:
            yield self

    def load(self) -> T:
        try:
            with open(self.path, "rb") as f:
                raw = f.read()
        except OSError as e:
            logger.error(f"[STORE] Cannot read {self.path}: {e}")
            raise ReadError(f"cannot read {self.path}: {e.strerror or e}") from e

        try:
            return self._adapter.validate_json(raw)
        except PydanticValidationError as e:
            logger.error(f"[STORE] Invalid document in {self.path}: {e.error_count()} error(s)")
            raise DecodeError(f"invalid document in {self.path}: {e.errors()[0]['msg']}") from e

    def save(self, data: T) -> None:
        payload = self._adapter.dump_json(data, indent=self.indent, by_alias=True)
        directory = os.path.dirname(self.path)
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile("wb", dir=directory, prefix=".tmp-", delete=False) as tmp:
                tmp_path = tmp.name
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.chmod(tmp_path, self._file_mode())
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"[STORE] Cannot write {self.path}: {e}")
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise WriteError(f"cannot write {self.path}: {e.strerror or e}") from e

    def _file_mode(self) -> int:
        """Mode of the current file, or 0644 for a new one."""
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            return DEFAULT_FILE_MODE

    def exists(self) -> bool:
        return os.path.exists(self.path)


def ensure_storage_file(store: DocumentStore, empty) -> bool:
    """
    Create the collection file holding an empty collection if it is missing.
    Returns True when a file was created. Existing files are never touched.
    """
    with store.locked():
        if store.exists():
            logger.debug(f"[STORE] {store.path} exists, no action needed")
            return False
        os.makedirs(os.path.dirname(store.path), exist_ok=True)
        store.save(empty)
        logger.info(f"[STORE] Created {store.path}")
        return True
