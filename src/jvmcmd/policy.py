"""Decide whether a launch may pass its classpath through a side file."""

import logging

from jvmcmd.config import LauncherSettings, parse_bool
from jvmcmd.preferences import ProjectScope

log = logging.getLogger(__name__)

DYNAMIC_CLASSPATH_KEY = "dynamic.classpath"


def use_dynamic_classpath(
    requested: bool,
    settings: LauncherSettings,
    scope: ProjectScope | None = None,
) -> bool:
    """Combine the caller's request with the global switch and project override.

    The project value is seeded from the global switch the first time it is
    read and stays independent afterwards.
    """
    if not requested:
        return False
    baseline = "true" if settings.dynamic_classpath else "false"
    if scope is None:
        return settings.dynamic_classpath
    value = scope.preferences.get_or_init(DYNAMIC_CLASSPATH_KEY, baseline)
    enabled = parse_bool(value)
    log.debug("dynamic classpath for %s: %s (global %s)", scope.scope_id, enabled, baseline)
    return enabled


def set_project_dynamic_classpath(scope: ProjectScope, enabled: bool) -> None:
    scope.preferences.set(DYNAMIC_CLASSPATH_KEY, "true" if enabled else "false")
