"""Shared CLI helpers."""

import logging
import os
import sys

BOLD = "\033[1m"
CYAN = "\033[36m"
RESET = "\033[0m"


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )


def supports_color() -> bool:
    """Return whether ANSI color output should be used."""
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("TERM", "").lower() == "dumb":
        return False
    return sys.stdout.isatty()


def format_command_line(command: str) -> str:
    """Return a shell-like prompt line for a command."""
    if supports_color():
        return f"{BOLD}{CYAN}$ {command}{RESET}"
    return f"$ {command}"


def parse_env_pairs(pairs: list[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` strings, raising ValueError on a missing ``=``."""
    env: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"expected KEY=VALUE, got {pair!r}")
        env[key] = value
    return env
