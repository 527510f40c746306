"""CLI commands for configuration management."""

import typer

from gitchanges import config as settings_config
from gitchanges.config import ConfigError, Settings

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage git-changes configuration in ~/.git-changes/",
    add_completion=False,
)


def _describe(key: str, value) -> str:
    if value is None:
        return "auto" if key == "color" else "none"
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    try:
        settings = settings_config.load_settings()
        stored = settings_config.load_config_file()
        env = settings_config.load_env_overrides()
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"git-changes configuration ({settings_config.get_config_file_path()}):")
    typer.echo()
    for key in Settings.model_fields:
        if key in env:
            source = "env"
        elif key in stored:
            source = "file"
        else:
            source = "default"
        typer.echo(f"  {key}: {_describe(key, getattr(settings, key))} ({source})")


@config_app.command("path")
def config_path() -> None:
    """Print the location of the config file."""
    typer.echo(str(settings_config.get_config_file_path()))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Setting name (color, timeout, git_executable, concurrent, indent)"),
    value: str = typer.Argument(..., help="New value, or 'none' to reset an optional setting"),
) -> None:
    """Store a setting in the config file."""
    try:
        settings = settings_config.set_config_value(key, value)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Set {key} = {_describe(key, getattr(settings, key))}")
