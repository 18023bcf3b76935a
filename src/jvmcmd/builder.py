"""Assemble a VM launch specification from JavaParameters."""

import logging
import os

from jvmcmd.classpath import (
    CLASSPATH_FLAG,
    ClasspathStrategy,
    Materialized,
    SideFileResult,
    materialize_classpath,
    select_strategy,
)
from jvmcmd.config import LauncherSettings, SettingsHolder, load_settings
from jvmcmd.encoding import ENCODING_PROPERTY, resolve_charset
from jvmcmd.errors import MissingEntryPointError
from jvmcmd.models import JavaParameters, LaunchSpec, has_property
from jvmcmd.policy import use_dynamic_classpath
from jvmcmd.preferences import ProjectScope
from jvmcmd.runtime import resolve_vm_executable

log = logging.getLogger(__name__)


def _snapshot(settings: LauncherSettings | SettingsHolder | None) -> LauncherSettings:
    """Take the one settings view a launch reads from."""
    if settings is None:
        return load_settings()
    if isinstance(settings, SettingsHolder):
        return settings.snapshot()
    return settings.model_copy(deep=True)


def assemble(
    params: JavaParameters,
    strategy: ClasspathStrategy,
    settings: LauncherSettings,
    side_file: SideFileResult | None = None,
) -> LaunchSpec:
    """Build the launch specification for an already selected strategy.

    For INDIRECTION the side file is written here unless ``side_file`` is
    given. A failed side file leaves the classpath off the command line.
    """
    exe_path = resolve_vm_executable(params.jdk)
    arguments = list(params.vm_parameters)

    charset = None
    if not has_property(params.vm_parameters, ENCODING_PROPERTY):
        charset = resolve_charset(params.charset, settings)

    cleanup_paths: list[str] = []
    indirect = False
    if strategy is ClasspathStrategy.INLINE:
        arguments += [CLASSPATH_FLAG, os.pathsep.join(params.class_path)]
    elif strategy is ClasspathStrategy.INDIRECTION:
        if side_file is None:
            side_file = materialize_classpath(params.class_path)
        if isinstance(side_file, Materialized):
            arguments += [
                CLASSPATH_FLAG,
                os.pathsep.join(settings.runner_classpath()),
                settings.wrapper_main_class,
                side_file.path,
            ]
            cleanup_paths.append(side_file.path)
            indirect = True
        else:
            log.warning("launching without classpath: side file was not written")

    if not params.main_class:
        raise MissingEntryPointError("Main class is not specified")
    if not indirect:
        arguments.append(params.main_class)
    arguments += params.program_parameters

    return LaunchSpec(
        exe_path=exe_path,
        arguments=tuple(arguments),
        working_directory=params.working_directory,
        env=dict(params.env) if params.env is not None else None,
        pass_parent_envs=params.pass_parent_envs,
        charset=charset,
        cleanup_paths=tuple(cleanup_paths),
    )


def create_command_line(
    params: JavaParameters,
    force_dynamic_classpath: bool = False,
    settings: LauncherSettings | SettingsHolder | None = None,
) -> LaunchSpec:
    """Build a launch specification.

    With ``force_dynamic_classpath`` the classpath goes through a side file
    unless the VM parameters already carry one.
    """
    snapshot = _snapshot(settings)
    strategy = select_strategy(params.vm_parameters, force_dynamic_classpath)
    return assemble(params, strategy, snapshot)


def create_command_line_for_project(
    params: JavaParameters,
    project: ProjectScope | None,
    dynamic_classpath: bool,
    settings: LauncherSettings | SettingsHolder | None = None,
) -> LaunchSpec:
    """Build a launch specification, letting settings and the project decide.

    ``dynamic_classpath`` only permits a side file; the global switch and the
    project preference decide whether one is used.
    """
    snapshot = _snapshot(settings)
    allowed = use_dynamic_classpath(dynamic_classpath, snapshot, project)
    return create_command_line(params, allowed, snapshot)
