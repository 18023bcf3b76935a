"""`jvmcmd build` command implementation."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from jvmcmd import __version__
from jvmcmd.builder import create_command_line, create_command_line_for_project
from jvmcmd.cli.shared import configure_logging, format_command_line, parse_env_pairs
from jvmcmd.config import load_settings
from jvmcmd.errors import CantRunError
from jvmcmd.models import JavaParameters, Sdk
from jvmcmd.preferences import ProjectScope

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build parser for build mode."""
    parser = argparse.ArgumentParser(
        prog="jvmcmd",
        description="Print the command line that launches a Java main class",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--params", type=Path, help="JSON file with launch parameters")
    parser.add_argument("--jdk", help="JDK home directory")
    parser.add_argument("--java", help="Explicit path to the java executable")
    parser.add_argument(
        "-J",
        "--vm-option",
        action="append",
        default=[],
        metavar="OPTION",
        help="VM option, repeatable (example: -J-Xmx512m)",
    )
    parser.add_argument(
        "--cp",
        action="append",
        default=[],
        metavar="ENTRY",
        help="Classpath entry, repeatable, kept in order",
    )
    parser.add_argument("--main", help="Fully qualified main class")
    parser.add_argument("--workdir", help="Working directory for the process")
    parser.add_argument(
        "--env",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Environment variable for the process, repeatable",
    )
    parser.add_argument(
        "--no-parent-env",
        action="store_true",
        help="Do not inherit the parent environment when --env is given",
    )
    parser.add_argument("--charset", help="Charset for the process streams")
    dynamic_group = parser.add_mutually_exclusive_group()
    dynamic_group.add_argument(
        "--dynamic-classpath",
        action="store_true",
        help="Allow a classpath file when settings or the project enable it",
    )
    dynamic_group.add_argument(
        "--force-dynamic-classpath",
        action="store_true",
        help="Always pass the classpath through a file",
    )
    parser.add_argument("--project", help="Project directory holding launch preferences")
    parser.add_argument("--json", action="store_true", help="Print the launch spec as JSON")
    parser.add_argument(
        "program_args",
        nargs="*",
        metavar="ARG",
        help="Program arguments (put them after --)",
    )
    return parser


def _load_base_parameters(path: Path | None) -> JavaParameters:
    if path is None:
        return JavaParameters()
    return JavaParameters.model_validate_json(path.read_text(encoding="utf-8"))


def parameters_from_args(args: argparse.Namespace) -> JavaParameters:
    """Merge a parameters file with command-line options."""
    params = _load_base_parameters(args.params)
    updates: dict = {
        "vm_parameters": [*params.vm_parameters, *args.vm_option],
        "class_path": [*params.class_path, *args.cp],
        "program_parameters": [*params.program_parameters, *args.program_args],
    }
    if params.jdk is None and (args.jdk or args.java):
        home = args.jdk or ""
        updates["jdk"] = Sdk(name=home, home=home, vm_executable=args.java)
    elif params.jdk is not None:
        jdk_updates = {}
        if args.jdk:
            jdk_updates["home"] = args.jdk
        if args.java:
            jdk_updates["vm_executable"] = args.java
        updates["jdk"] = params.jdk.model_copy(update=jdk_updates)
    if args.main:
        updates["main_class"] = args.main
    if args.workdir:
        updates["working_directory"] = args.workdir
    if args.env:
        updates["env"] = {**(params.env or {}), **parse_env_pairs(args.env)}
    if args.no_parent_env:
        updates["pass_parent_envs"] = False
    if args.charset:
        updates["charset"] = args.charset
    return JavaParameters.model_validate({**params.model_dump(), **updates})


def run(argv: list[str]) -> int:
    """Execute build mode."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    try:
        params = parameters_from_args(args)
    except (OSError, ValueError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    settings = load_settings()
    try:
        if args.force_dynamic_classpath:
            spec = create_command_line(params, True, settings)
        else:
            project = ProjectScope(args.project) if args.project else None
            spec = create_command_line_for_project(
                params, project, args.dynamic_classpath, settings
            )
    except (CantRunError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log.debug("launch spec: %s", spec)
    if args.json:
        print(json.dumps(spec.to_dict(), indent=2))
    else:
        print(format_command_line(spec.command_line_string()))
    return 0
