"""Classpath strategy selection and side-file materialization."""

import enum
import logging
import os
import sys
import tempfile
from dataclasses import dataclass

log = logging.getLogger(__name__)

CLASSPATH_FLAG = "-classpath"
CLASSPATH_FLAGS = (CLASSPATH_FLAG, "-cp", "--class-path")
SIDE_FILE_PREFIX = "classpath"


class ClasspathStrategy(enum.Enum):
    ALREADY_EXPLICIT = "already-explicit"
    INLINE = "inline"
    INDIRECTION = "indirection"


def has_classpath_flag(vm_parameters: list[str]) -> bool:
    return any(flag in vm_parameters for flag in CLASSPATH_FLAGS)


def select_strategy(vm_parameters: list[str], dynamic_allowed: bool) -> ClasspathStrategy:
    """Choose how the classpath reaches the VM.

    A classpath flag the caller already passed always wins, even over
    ``dynamic_allowed``.
    """
    if has_classpath_flag(vm_parameters):
        strategy = ClasspathStrategy.ALREADY_EXPLICIT
    elif dynamic_allowed:
        strategy = ClasspathStrategy.INDIRECTION
    else:
        strategy = ClasspathStrategy.INLINE
    log.debug("classpath strategy: %s", strategy.value)
    return strategy


@dataclass(frozen=True)
class Materialized:
    path: str


@dataclass(frozen=True)
class MaterializationFailed:
    error: OSError | UnicodeError


SideFileResult = Materialized | MaterializationFailed


def _discard_partial(path: str) -> None:
    try:
        os.unlink(path)
    except OSError as e:
        log.warning("could not remove partial classpath file %s: %s", path, e)


def materialize_classpath(entries: list[str], directory: str | None = None) -> SideFileResult:
    """Write ``entries`` one per line to a new temp file.

    Entries are encoded the way the OS encodes file names, so names decoded
    with surrogate escapes keep their original bytes. The file is not deleted
    here unless writing it failed. Errors are logged and returned, never
    raised.
    """
    path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            prefix=SIDE_FILE_PREFIX,
            dir=directory,
            delete=False,
            encoding=sys.getfilesystemencoding(),
            errors=sys.getfilesystemencodeerrors(),
        ) as f:
            path = os.path.abspath(f.name)
            for entry in entries:
                f.write(entry + "\n")
    except (OSError, UnicodeError) as e:
        log.error("failed to write classpath file: %s", e)
        if path is not None:
            _discard_partial(path)
        return MaterializationFailed(e)
    log.debug("wrote %d classpath entries to %s", len(entries), path)
    return Materialized(path)
