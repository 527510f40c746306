"""Report staged and unstaged changes in a git working tree."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("git-changes")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
