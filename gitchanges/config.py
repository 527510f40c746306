"""Configuration management for git-changes.

Settings are layered, highest precedence first:
- Command-line flags
- Environment variables (GIT_CHANGES_*), with a .env file in the
  current directory loaded first
- ~/.git-changes/config.yaml
- Built-in defaults
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError


class ConfigError(Exception):
    """Raised when there's an error with the configuration."""
    pass


_CONFIG_DIR = Path.home() / ".git-changes"

# Environment variable -> settings key
ENV_VARS = {
    "GIT_CHANGES_COLOR": "color",
    "GIT_CHANGES_TIMEOUT": "timeout",
    "GIT_CHANGES_GIT": "git_executable",
    "GIT_CHANGES_CONCURRENT": "concurrent",
    "GIT_CHANGES_INDENT": "indent",
}


class Settings(BaseModel):
    """Effective settings for one invocation.

    Attributes:
        color: Force colored output on or off; None follows the terminal.
        timeout: Seconds allowed per git query; None for no limit.
        git_executable: Name or path of the git binary.
        concurrent: Run the staged and unstaged queries in parallel.
        indent: Spaces before each path in the report.
    """

    color: Optional[bool] = None
    timeout: Optional[float] = Field(default=None, gt=0)
    git_executable: str = Field(default="git", min_length=1)
    concurrent: bool = True
    indent: int = Field(default=4, ge=0, le=16)


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to ~/.git-changes/
    """
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.git-changes/config.yaml
    """
    return get_config_dir() / "config.yaml"


def load_config_file() -> Dict[str, Any]:
    """Load raw values from ~/.git-changes/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        ConfigError: If the file cannot be read or is not a mapping.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise ConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_config_file(config: Dict[str, Any]) -> None:
    """Save configuration to ~/.git-changes/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    config_file = get_config_file_path()

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ConfigError(f"Failed to save config to {config_file}: {e}")


def load_env_overrides() -> Dict[str, str]:
    """Collect GIT_CHANGES_* environment variables.

    A .env file in the current directory is loaded first; variables
    already present in the environment win over it.
    """
    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path)

    overrides = {}
    for env_var, key in ENV_VARS.items():
        value = os.environ.get(env_var)
        if value is not None and value.strip() != "":
            overrides[key] = value.strip()
    return overrides


def load_settings(overrides: Optional[Dict[str, Any]] = None) -> Settings:
    """Build the effective settings.

    Args:
        overrides: Values from the command line; None entries are ignored.

    Returns:
        Validated settings.

    Raises:
        ConfigError: If the file is unreadable or any value is invalid.
    """
    values: Dict[str, Any] = {}
    values.update(load_config_file())
    values.update(load_env_overrides())
    if overrides:
        values.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(values) - set(Settings.model_fields))
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")


def set_config_value(key: str, value: str) -> Settings:
    """Validate and persist one setting in the config file.

    Args:
        key: Settings field name.
        value: Raw string value; "none" clears optional fields.

    Returns:
        The settings stored in the file after the update.

    Raises:
        ConfigError: If the key is unknown or the value is invalid.
    """
    if key not in Settings.model_fields:
        raise ConfigError(f"Unknown configuration key: {key}")

    config = load_config_file()
    config[key] = None if value.lower() in ("none", "null", "") else value

    try:
        settings = Settings(**config)
    except ValidationError as e:
        raise ConfigError(f"Invalid value for {key}: {value}\n{e}")

    # Store the coerced value so the YAML keeps native types
    config[key] = getattr(settings, key)
    save_config_file(config)
    return settings
