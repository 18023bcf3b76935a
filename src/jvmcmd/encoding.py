"""Charset resolution for launched processes."""

import codecs
import locale
import logging

from jvmcmd.config import LauncherSettings

log = logging.getLogger(__name__)

ENCODING_PROPERTY = "file.encoding"


def normalize_charset(name: str | None) -> str | None:
    if not name:
        return None
    try:
        return codecs.lookup(name).name
    except LookupError:
        log.debug("unknown charset %r", name)
        return None


def system_charset() -> str:
    return normalize_charset(locale.getpreferredencoding(False)) or "utf-8"


def resolve_charset(explicit: str | None, settings: LauncherSettings) -> str:
    """Pick the explicit charset, then the configured default, then the OS one."""
    return (
        normalize_charset(explicit)
        or normalize_charset(settings.default_charset)
        or system_charset()
    )
