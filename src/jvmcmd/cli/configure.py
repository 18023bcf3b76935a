"""`jvmcmd configure` command implementation."""

import argparse
import sys

from jvmcmd.cli.shared import configure_logging
from jvmcmd.config import CONFIG_FILE, load_settings, save_settings
from jvmcmd.encoding import normalize_charset
from jvmcmd.policy import set_project_dynamic_classpath
from jvmcmd.preferences import ProjectScope


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the configure command."""
    parser = argparse.ArgumentParser(
        prog="jvmcmd configure",
        description="Configure the global dynamic classpath switch and defaults",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    dynamic_group = parser.add_mutually_exclusive_group()
    dynamic_group.add_argument(
        "--dynamic-classpath",
        action="store_true",
        help="Pass long classpaths through a file",
    )
    dynamic_group.add_argument(
        "--no-dynamic-classpath",
        action="store_true",
        help="Always pass the classpath on the command line (default)",
    )
    parser.add_argument("--default-charset", help="Charset used when a launch names none")
    parser.add_argument(
        "--runtime-lib-dir",
        help="Directory holding the classpath wrapper jars",
    )
    parser.add_argument(
        "--project",
        help="Store the dynamic classpath choice for this project instead of globally",
    )
    return parser


def run(argv: list[str]) -> int:
    """Execute the configure command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    dynamic: bool | None = None
    if args.dynamic_classpath:
        dynamic = True
    if args.no_dynamic_classpath:
        dynamic = False

    if args.default_charset is not None and normalize_charset(args.default_charset) is None:
        print(f"Error: unknown charset: {args.default_charset}", file=sys.stderr)
        return 2

    if args.project is not None:
        if dynamic is None:
            print("Error: --project needs --dynamic-classpath or --no-dynamic-classpath",
                  file=sys.stderr)
            return 2
        scope = ProjectScope(args.project)
        try:
            set_project_dynamic_classpath(scope, dynamic)
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"Saved dynamic classpath={str(dynamic).lower()} for {scope.scope_id}")
        if args.default_charset is None and args.runtime_lib_dir is None:
            return 0

    settings = load_settings(apply_env=False)
    if dynamic is not None and args.project is None:
        settings.dynamic_classpath = dynamic
    if args.default_charset is not None:
        settings.default_charset = normalize_charset(args.default_charset)
    if args.runtime_lib_dir is not None:
        settings.runtime_lib_dir = args.runtime_lib_dir

    try:
        save_settings(settings)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Saved configuration to {CONFIG_FILE}")
    return 0
