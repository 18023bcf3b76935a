"""Per-project preference storage."""

import json
import logging
import threading
from pathlib import Path

from jvmcmd.config import write_json_atomic

log = logging.getLogger(__name__)

PROJECT_STATE_DIR = ".jvmcmd"
PREFERENCES_FILE = "preferences.json"

_store_locks: dict[str, threading.Lock] = {}
_store_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    key = str(path)
    with _store_locks_guard:
        lock = _store_locks.get(key)
        if lock is None:
            lock = _store_locks[key] = threading.Lock()
        return lock


class PreferenceStore:
    """String key/value preferences persisted as a JSON object."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = _lock_for(self.path.resolve())

    def _read(self) -> dict[str, str]:
        try:
            with open(self.path, encoding="utf-8") as f:
                payload = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            log.warning("ignoring unreadable preferences %s: %s", self.path, e)
            return {}
        if not isinstance(payload, dict):
            return {}
        return {str(k): str(v) for k, v in payload.items()}

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._read().get(key)

    def get_or_init(self, key: str, default: str) -> str:
        """Return the stored value, storing ``default`` first if the key is unset."""
        with self._lock:
            values = self._read()
            if key in values:
                return values[key]
            values[key] = default
            write_json_atomic(self.path, values)
            log.debug("initialized %s=%s in %s", key, default, self.path)
            return default

    def set(self, key: str, value: str) -> None:
        with self._lock:
            values = self._read()
            values[key] = value
            write_json_atomic(self.path, values)


class ProjectScope:
    """A project identified by its resolved root directory."""

    def __init__(self, root: str | Path):
        self.root = Path(root).resolve()
        self.preferences = PreferenceStore(self.root / PROJECT_STATE_DIR / PREFERENCES_FILE)

    @property
    def scope_id(self) -> str:
        return str(self.root)

    def __repr__(self) -> str:
        return f"ProjectScope({self.scope_id!r})"
