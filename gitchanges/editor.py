"""Adapter for editors that show the report in a scratch buffer.

The adapter runs the CLI as a subprocess and hands back its raw output.
It does no parsing or classification of its own.
"""

import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ADVISORY_MESSAGE = "Unable to run `git-changes` (is it installed?)"


@dataclass(frozen=True)
class EditorResult:
    """Text for the host to display.

    Attributes:
        ok: True when ``text`` is the report, False when it is an advisory.
        text: Combined stdout and stderr of the CLI, or the advisory message.
    """

    ok: bool
    text: str


def default_command() -> list[str]:
    return [sys.executable, "-m", "gitchanges", "--no-color"]


def run_for_editor(
    command: Optional[list[str]] = None,
    cwd: Optional[Path] = None,
    timeout: Optional[float] = None,
) -> EditorResult:
    """Run the report command for an editor host.

    Args:
        command: argv to run. Defaults to this package's CLI without color.
        cwd: Directory to run in, normally the editor's workspace folder.
        timeout: Seconds before the command is abandoned.

    Returns:
        The combined output on success, otherwise the advisory message.
    """
    argv = command if command is not None else default_command()
    try:
        result = subprocess.run(
            argv,
            cwd=str(cwd) if cwd is not None else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired):
        return EditorResult(ok=False, text=ADVISORY_MESSAGE)

    if result.returncode != 0:
        return EditorResult(ok=False, text=ADVISORY_MESSAGE)
    return EditorResult(ok=True, text=result.stdout)
