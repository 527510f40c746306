"""Backend query interface used by the change collector."""

from pathlib import Path

from gitchanges.git.diff import query_unstaged_summary
from gitchanges.git.runner import RepoContext, get_repo_root
from gitchanges.git.status import query_staged_paths


class GitBackend:
    """Answers change queries by running the git executable."""

    def resolve(self, context: RepoContext) -> Path:
        return get_repo_root(context)

    def query_staged_paths(self, context: RepoContext) -> list[str]:
        return query_staged_paths(context)

    def query_unstaged_summary(self, context: RepoContext) -> list[str]:
        return query_unstaged_summary(context)
