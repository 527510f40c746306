"""Shared test fixtures and configuration."""

import tempfile
import threading
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from gitchanges.config import ENV_VARS


class FakeBackend:
    """In-memory backend answering with fixed paths or raising errors."""

    def __init__(self, staged=(), unstaged=(), staged_error=None, unstaged_error=None,
                 resolve_error=None):
        self.staged = list(staged)
        self.unstaged = list(unstaged)
        self.staged_error = staged_error
        self.unstaged_error = unstaged_error
        self.resolve_error = resolve_error
        self.calls = []
        self.threads = {}

    def resolve(self, context):
        self.calls.append("resolve")
        if self.resolve_error is not None:
            raise self.resolve_error
        return Path(context.cwd)

    def query_staged_paths(self, context):
        self.calls.append("staged")
        self.threads["staged"] = threading.get_ident()
        if self.staged_error is not None:
            raise self.staged_error
        return self.staged

    def query_unstaged_summary(self, context):
        self.calls.append("unstaged")
        self.threads["unstaged"] = threading.get_ident()
        if self.unstaged_error is not None:
            raise self.unstaged_error
        return self.unstaged


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_backend():
    """Factory for fake backends."""
    return FakeBackend


@pytest.fixture
def isolated_config(temp_dir, mocker, monkeypatch):
    """Point the config directory at a temp dir and clear GIT_CHANGES_* vars."""
    config_dir = temp_dir / ".git-changes"
    mocker.patch("gitchanges.config._CONFIG_DIR", config_dir)
    for env_var in ENV_VARS:
        # setenv first so teardown also removes values loaded from a .env file
        monkeypatch.setenv(env_var, "")
        monkeypatch.delenv(env_var)
    monkeypatch.chdir(temp_dir)
    return config_dir


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run


def git_result(stdout: str) -> MagicMock:
    """Build a completed-process stand-in with the given stdout."""
    result = MagicMock()
    result.stdout = stdout
    result.returncode = 0
    return result


@pytest.fixture
def git_output():
    """Factory for completed-process stand-ins."""
    return git_result
