"""Git backend for git-changes.

This package provides the read-only git queries with:
- exceptions: BackendUnavailable, GitCommandError, NotARepositoryError,
              MalformedOutputError
- runner: RepoContext, run_git_command, get_repo_root
- status: query_staged_paths, get_status_summary
- diff: query_unstaged_summary
- backend: GitBackend
"""

# Exceptions
from gitchanges.git.exceptions import (
    BackendUnavailable,
    GitCommandError,
    NotARepositoryError,
    MalformedOutputError,
)

# Runner utilities
from gitchanges.git.runner import (
    RepoContext,
    run_git_command,
    get_repo_root,
)

# Status utilities
from gitchanges.git.status import (
    query_staged_paths,
    get_status_summary,
)

# Diff utilities
from gitchanges.git.diff import query_unstaged_summary

from gitchanges.git.backend import GitBackend


__all__ = [
    # Exceptions
    "BackendUnavailable",
    "GitCommandError",
    "NotARepositoryError",
    "MalformedOutputError",
    # Runner
    "RepoContext",
    "run_git_command",
    "get_repo_root",
    # Status
    "query_staged_paths",
    "get_status_summary",
    # Diff
    "query_unstaged_summary",
    # Backend
    "GitBackend",
]
