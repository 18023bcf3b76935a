"""Settings for jvmcmd: config file, env overrides and read snapshots."""

import json
import logging
import os
import threading
import time
from pathlib import Path

from pydantic import BaseModel, ValidationError

log = logging.getLogger(__name__)

CONFIG_DIR = Path(os.environ.get("JVMCMD_CONFIG_DIR", Path.home() / ".jvmcmd"))
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_RUNTIME_LIB_DIR = str(Path(__file__).resolve().parent / "lib")
WRAPPER_MAIN_CLASS = "com.intellij.rt.execution.CommandLineWrapper"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class LauncherSettings(BaseModel):
    """Process-wide launcher configuration."""

    dynamic_classpath: bool = False
    default_charset: str | None = None
    runtime_lib_dir: str = DEFAULT_RUNTIME_LIB_DIR
    runner_jar: str = "idea_rt.jar"
    loader_jar: str = "util.jar"
    wrapper_main_class: str = WRAPPER_MAIN_CLASS

    def runner_classpath(self) -> list[str]:
        """Return the wrapper jar and its class loader jar, in that order."""
        lib_dir = Path(self.runtime_lib_dir)
        return [str(lib_dir / self.runner_jar), str(lib_dir / self.loader_jar)]


def parse_bool(value: str | None, default: bool = False) -> bool:
    """Parse a boolean flag from a string value, falling back to ``default``."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _apply_env_overrides(settings: LauncherSettings) -> LauncherSettings:
    dynamic = os.environ.get("JVMCMD_DYNAMIC_CLASSPATH")
    if dynamic is not None:
        settings.dynamic_classpath = parse_bool(dynamic, settings.dynamic_classpath)
    charset = os.environ.get("JVMCMD_DEFAULT_CHARSET", "").strip()
    if charset:
        settings.default_charset = charset
    lib_dir = os.environ.get("JVMCMD_RUNTIME_LIB_DIR", "").strip()
    if lib_dir:
        settings.runtime_lib_dir = lib_dir
    return settings


def load_settings(path: Path | None = None, apply_env: bool = True) -> LauncherSettings:
    """Load settings from the config file, then apply environment overrides."""
    config_file = CONFIG_FILE if path is None else path
    settings = LauncherSettings()
    try:
        with open(config_file, encoding="utf-8") as f:
            settings = LauncherSettings.model_validate(json.load(f))
    except FileNotFoundError:
        log.debug("no config file at %s, using defaults", config_file)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        log.warning("ignoring unreadable config %s: %s", config_file, e)
    if not apply_env:
        return settings
    return _apply_env_overrides(settings)


def write_json_atomic(path: Path, payload: dict) -> None:
    """Write ``payload`` as JSON through a temp file and an atomic rename."""
    os.makedirs(path.parent, mode=0o700, exist_ok=True)
    temp_file = path.with_name(f".{path.name}.{os.getpid()}.{time.time_ns()}.tmp")
    fd = os.open(temp_file, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_file, path)
    except OSError:
        temp_file.unlink(missing_ok=True)
        raise


def save_settings(settings: LauncherSettings, path: Path | None = None) -> None:
    config_file = CONFIG_FILE if path is None else path
    write_json_atomic(config_file, settings.model_dump(exclude_defaults=True))
    log.debug("saved settings to %s", config_file)


class SettingsHolder:
    """Live settings shared between threads.

    Launches read a deep copy taken under the lock so one launch never sees
    a half-applied update.
    """

    def __init__(self, settings: LauncherSettings | None = None):
        self._lock = threading.Lock()
        self._settings = settings if settings is not None else LauncherSettings()

    def snapshot(self) -> LauncherSettings:
        with self._lock:
            return self._settings.model_copy(deep=True)

    def update(self, **changes) -> LauncherSettings:
        with self._lock:
            self._settings = self._settings.model_copy(update=changes)
            return self._settings.model_copy(deep=True)

