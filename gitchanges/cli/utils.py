"""Shared utility functions for CLI commands."""

import sys
from typing import Optional

import typer

from gitchanges.config import Settings

LOG_PREFIX = "[git-changes]"


def log(message: str, verbose: bool) -> None:
    """Print a diagnostic line on stderr when verbose output is on."""
    if verbose:
        typer.echo(f"{LOG_PREFIX} {message}", err=True)


def command_logger(verbose: bool):
    """Return an ``on_command`` callback for RepoContext, or None."""
    if not verbose:
        return None

    def _log_command(argv: list[str]) -> None:
        log("running: " + " ".join(argv), verbose)

    return _log_command


def resolve_color(settings: Settings, flag: Optional[bool]) -> bool:
    """Decide whether to style output.

    The command-line flag wins, then the configured value, then whether
    stdout is a terminal.
    """
    if flag is not None:
        return flag
    if settings.color is not None:
        return settings.color
    return sys.stdout.isatty()
