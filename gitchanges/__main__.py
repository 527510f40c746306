"""Allow running as ``python -m gitchanges``."""

from gitchanges.cli import app

app(prog_name="git-changes")
