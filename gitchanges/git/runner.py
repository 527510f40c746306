"""Git command runner and repository utilities.

Contains:
- RepoContext: Which repository to query and how to invoke git
- run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the repository
"""

import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from gitchanges.git.exceptions import (
    BackendUnavailable,
    GitCommandError,
    NotARepositoryError,
)


@dataclass(frozen=True)
class RepoContext:
    """Repository a backend query runs against.

    Attributes:
        cwd: Directory the git commands run in.
        git_executable: Name or path of the git binary.
        timeout: Seconds allowed per git command, None for no limit.
        on_command: Optional callback receiving each argv before it runs.
    """

    cwd: Path = field(default_factory=Path.cwd)
    git_executable: str = "git"
    timeout: Optional[float] = None
    on_command: Optional[Callable[[list[str]], None]] = field(
        default=None, compare=False, repr=False
    )


def run_git_command(context: RepoContext, args: list[str], strip: bool = True) -> str:
    """Run a git command and return its output.

    Args:
        context: The repository context to run in.
        args: List of arguments to pass to git.
        strip: Strip surrounding whitespace from stdout. Porcelain output
            must keep its leading status columns, so parsers pass False.

    Returns:
        The stdout of the git command.

    Raises:
        GitCommandError: If the command exits non-zero.
        BackendUnavailable: If git is missing or the command times out.
    """
    argv = [context.git_executable] + args
    if context.on_command is not None:
        context.on_command(argv)
    try:
        result = subprocess.run(
            argv,
            cwd=str(context.cwd),
            capture_output=True,
            encoding="utf-8",
            # -z output carries raw path bytes, which need not be UTF-8
            errors="surrogateescape",
            check=True,
            timeout=context.timeout,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitCommandError(
            f"Git command failed: git {' '.join(args)}\n{stderr}",
            returncode=e.returncode,
            stderr=stderr,
        )
    except subprocess.TimeoutExpired:
        raise BackendUnavailable(
            f"Git command timed out after {context.timeout}s: git {' '.join(args)}"
        )
    except FileNotFoundError:
        raise BackendUnavailable(
            f"Git is not installed or not in PATH ({context.git_executable})."
        )
    return result.stdout.strip() if strip else result.stdout


def get_repo_root(context: RepoContext) -> Path:
    """Get the root directory of the repository.

    Returns:
        Path to the repository root.

    Raises:
        NotARepositoryError: If the context is not in a git work tree.
        BackendUnavailable: If git itself cannot be run.
    """
    if not Path(context.cwd).is_dir():
        raise NotARepositoryError(f"Directory does not exist: {context.cwd}")
    try:
        root = run_git_command(context, ["rev-parse", "--show-toplevel"])
    except GitCommandError:
        raise NotARepositoryError(
            "Not in a git repository. Please run this command from within a git repo."
        )
    if not root:
        # e.g. inside the .git directory itself
        raise NotARepositoryError(f"Not inside a work tree: {context.cwd}")
    return Path(root)
