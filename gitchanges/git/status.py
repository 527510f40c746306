"""Git status utilities.

Contains:
- query_staged_paths: Paths staged in the index, in git's order
- get_status_summary: Short human-readable status with branch line
"""

from gitchanges.git.exceptions import MalformedOutputError
from gitchanges.git.runner import RepoContext, run_git_command

# Index column values that do not mean "staged"
_UNSTAGED_INDEX_CODES = (" ", "?", "!")
_RENAME_CODES = ("R", "C")


def query_staged_paths(context: RepoContext) -> list[str]:
    """Get the paths currently staged for commit.

    Uses the NUL-separated porcelain v1 format. Each entry is ``XY path``
    where X is the index column. Renames and copies are followed by an
    extra entry holding the original path, which is skipped; the new path
    is the one reported.

    Args:
        context: The repository context.

    Returns:
        Staged file paths in the order git reports them, without duplicates.

    Raises:
        MalformedOutputError: If an entry cannot be parsed.
    """
    output = run_git_command(
        context,
        ["status", "--porcelain=v1", "-z", "--untracked-files=no"],
        strip=False,
    )
    entries = output.split("\0")
    # Trailing terminator leaves an empty final token
    if entries and entries[-1] == "":
        entries.pop()

    staged = []
    seen = set()
    i = 0
    while i < len(entries):
        entry = entries[i]
        if len(entry) < 4 or entry[2] != " ":
            raise MalformedOutputError(f"Unexpected git status entry: {entry!r}")
        index_code = entry[0]
        path = entry[3:]
        i += 1
        if index_code in _RENAME_CODES or entry[1] in _RENAME_CODES:
            if i >= len(entries) or not entries[i]:
                raise MalformedOutputError(f"Missing original path for rename: {entry!r}")
            i += 1
        if index_code in _UNSTAGED_INDEX_CODES:
            continue
        if path not in seen:
            seen.add(path)
            staged.append(path)
    return staged


def get_status_summary(context: RepoContext) -> str:
    """Get git status output in short format with the branch line.

    Returns:
        The git status output.
    """
    return run_git_command(context, ["status", "--short", "--branch"])
