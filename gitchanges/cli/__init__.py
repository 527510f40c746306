"""CLI entry point for git-changes.

This module provides the main CLI application that combines the default
report command and the config subcommands into a single interface.
"""

import typer

from gitchanges.cli.config import config_app
from gitchanges.cli.main import main_command

# Main application
app = typer.Typer(
    name="git-changes",
    help="git-changes: list staged and unstaged changes in a git working tree",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
]
