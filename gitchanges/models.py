"""Change set model shared by the collector and the reporter."""

import fnmatch
from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, field_validator


def matches_any(path: str, patterns: list[str]) -> bool:
    """Check if a path matches any glob pattern.

    The pattern is tried against the full path and against its basename,
    so ``*.py`` matches ``src/app.py``.
    """
    name = PurePosixPath(path).name
    for pattern in patterns:
        if fnmatch.fnmatch(path, pattern) or fnmatch.fnmatch(name, pattern):
            return True
    return False


class ChangeSet(BaseModel):
    """Staged and unstaged paths from one collection pass.

    Attributes:
        staged: Paths in the index, in backend order.
        unstaged: Paths changed in the working tree, in backend order.

    A path may be listed in both sequences. Each sequence on its own is
    unique; repeated entries keep their first position.
    """

    model_config = ConfigDict(frozen=True)

    staged: tuple[str, ...] = ()
    unstaged: tuple[str, ...] = ()

    @field_validator("staged", "unstaged")
    @classmethod
    def paths_must_be_unique(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject empty paths and drop repeats, keeping order."""
        seen = set()
        unique = []
        for path in v:
            if not path:
                raise ValueError("paths cannot be empty")
            if path not in seen:
                seen.add(path)
                unique.append(path)
        return tuple(unique)

    @property
    def total(self) -> int:
        return len(self.staged) + len(self.unstaged)

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    def filtered(self, patterns: list[str]) -> "ChangeSet":
        """Return a copy keeping only paths that match one of the patterns."""
        if not patterns:
            return self
        return ChangeSet(
            staged=[p for p in self.staged if matches_any(p, patterns)],
            unstaged=[p for p in self.unstaged if matches_any(p, patterns)],
        )
