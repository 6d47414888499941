from contextlib import contextmanager, nullcontext
from enum import Enum
from pathlib import Path
import json
import os
import tempfile
import threading
from typing import Any, Dict

from .errors import InternalError


class ResourceKind(str, Enum):
    PLURAL = "plural"
    SINGULAR = "singular"

    @classmethod
    def of(cls, value: Any) -> "ResourceKind":
        return cls.PLURAL if isinstance(value, list) else cls.SINGULAR


def classify(document: Dict[str, Any]) -> Dict[str, ResourceKind]:
    """Map every top-level key to its kind, based on the value it holds now."""
    return {key: ResourceKind.of(value) for key, value in document.items()}


class _PathLocks:
    """One lock per resolved file path, shared by every document on that path."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[str, threading.RLock] = {}

    def lock_for(self, path: Path) -> threading.RLock:
        key = str(path.resolve())
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.RLock()
                self._locks[key] = lock
            return lock


PATH_LOCKS = _PathLocks()


class JsonDocument:
    """The backing JSON file, read and rewritten whole on every operation."""

    def __init__(self, path, *, lock_writes: bool = True):
        self.path = Path(path)
        self.lock_writes = lock_writes

    def load(self) -> Dict[str, Any]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise InternalError(f"cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise InternalError(f"{self.path} must hold a JSON object at the top level")
        return data

    def save(self, document: Dict[str, Any]):
        # Write next to the target then swap, so readers never see a partial file.
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, ensure_ascii=False, allow_nan=False)
            mode = self.path.stat().st_mode & 0o777 if self.path.exists() else 0o644
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, self.path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise InternalError(f"cannot write {self.path}: {e}") from e

    @contextmanager
    def transaction(self):
        """Hold the path lock across a load-modify-save cycle and yield the document."""
        guard = PATH_LOCKS.lock_for(self.path) if self.lock_writes else nullcontext()
        with guard:
            yield self.load()
