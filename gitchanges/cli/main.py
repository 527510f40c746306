"""Main CLI command for reporting changes."""

import time
from pathlib import Path
from typing import List, Optional

import typer

from gitchanges import __version__
from gitchanges.collector import ChangeCollector
from gitchanges.config import ConfigError, load_settings
from gitchanges.git import BackendUnavailable, RepoContext, get_repo_root, get_status_summary
from gitchanges.reporter import ChangeReporter
from gitchanges.cli.utils import command_logger, log, resolve_color


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-changes {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    path: Optional[Path] = typer.Option(
        None,
        "--path",
        "-C",
        help="Repository directory to inspect (defaults to the current directory)",
    ),
    glob: Optional[List[str]] = typer.Option(
        None,
        "--glob",
        "-g",
        help="Only list paths matching this pattern (repeatable)",
    ),
    status: bool = typer.Option(
        False,
        "--status",
        "-s",
        help="Print git's short status summary instead of the report (not with --glob or --color)",
    ),
    color: Optional[bool] = typer.Option(
        None,
        "--color/--no-color",
        help="Force colored output on or off",
        show_default=False,
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds allowed for each git query",
    ),
    sequential: bool = typer.Option(
        False,
        "--sequential",
        help="Run the staged and unstaged queries one after the other",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print the git commands being run on stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """List files changed since the last commit, staged and unstaged."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    if status and (glob or color is not None):
        raise typer.BadParameter(
            "cannot be combined with --glob or --color/--no-color",
            param_hint="'--status'",
        )

    try:
        settings = load_settings({
            "timeout": timeout,
            "concurrent": False if sequential else None,
        })
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)

    context = RepoContext(
        cwd=path if path is not None else Path.cwd(),
        git_executable=settings.git_executable,
        timeout=settings.timeout,
        on_command=command_logger(verbose),
    )

    try:
        if status:
            root = get_repo_root(context)
            log(f"repository: {root}", verbose)
            typer.echo(get_status_summary(context))
            return

        collector = ChangeCollector(context=context, concurrent=settings.concurrent)
        started = time.perf_counter()
        change_set = collector.collect(patterns=glob or None)
        log(
            f"collected {len(change_set.staged)} staged, {len(change_set.unstaged)} unstaged "
            f"in {time.perf_counter() - started:.3f}s",
            verbose,
        )
    except BackendUnavailable as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

    reporter = ChangeReporter(color=resolve_color(settings, color), indent=settings.indent)
    reporter.emit(change_set)
