"""Command-line interface for jvmcmd."""

from jvmcmd.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
