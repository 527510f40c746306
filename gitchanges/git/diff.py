"""Git diff utilities.

Contains:
- query_unstaged_summary: Paths with working-tree changes not yet staged
"""

from gitchanges.git.exceptions import MalformedOutputError
from gitchanges.git.runner import RepoContext, run_git_command


def _is_count(value: str) -> bool:
    """Numstat counts are digits, or '-' for binary files."""
    return value == "-" or value.isdigit()


def query_unstaged_summary(context: RepoContext) -> list[str]:
    """Get the paths that differ between the index and the working tree.

    Parses ``git diff --numstat -z``. Regular records are
    ``added<TAB>deleted<TAB>path``; renamed records leave the path empty
    and are followed by the source and destination paths as separate
    tokens. The destination is reported.

    Args:
        context: The repository context.

    Returns:
        Changed file paths in the order git reports them, without duplicates.

    Raises:
        MalformedOutputError: If a record cannot be parsed.
    """
    output = run_git_command(context, ["diff", "--numstat", "-z"], strip=False)
    tokens = output.split("\0")
    if tokens and tokens[-1] == "":
        tokens.pop()

    paths = []
    seen = set()
    i = 0
    while i < len(tokens):
        record = tokens[i]
        parts = record.split("\t", 2)
        if len(parts) != 3 or not _is_count(parts[0]) or not _is_count(parts[1]):
            raise MalformedOutputError(f"Unexpected git diff record: {tokens[i]!r}")
        path = parts[2]
        i += 1
        if not path:
            if i + 1 >= len(tokens) or not tokens[i] or not tokens[i + 1]:
                raise MalformedOutputError(f"Incomplete rename record: {tokens[i - 1]!r}")
            path = tokens[i + 1]
            i += 2
        if path not in seen:
            seen.add(path)
            paths.append(path)
    return paths
