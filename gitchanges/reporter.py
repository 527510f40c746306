"""Rendering of change sets for the terminal."""

import typer

from gitchanges.models import ChangeSet

STAGED_HEADER = "Changes to be committed:"
UNSTAGED_HEADER = "Changes not staged for commit:"
NO_CHANGES_MESSAGE = "No changes staged or unstaged"

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\v": "\\v",
    "\f": "\\f",
    "\r": "\\r",
    '"': '\\"',
    "\\": "\\\\",
}


def _escape_char(ch: str) -> str:
    if ch in _ESCAPES:
        return _ESCAPES[ch]
    code = ord(ch)
    if 0xDC80 <= code <= 0xDCFF:
        # Undecodable byte carried through surrogateescape
        return f"\\{code - 0xDC00:03o}"
    if code < 0x20 or code == 0x7F:
        return f"\\{code:03o}"
    return ch


def quote_path(path: str) -> str:
    """Quote a path the way git does for unusual names.

    Paths containing control characters, quotes, backslashes or bytes that
    are not valid UTF-8 are wrapped in double quotes with C-style escapes,
    so every path occupies exactly one line. Other paths are returned as is.

    Example:
        quote_path("a\\nb.txt") -> '"a\\\\nb.txt"'
    """
    escaped = "".join(_escape_char(ch) for ch in path)
    if escaped == path:
        return path
    return f'"{escaped}"'


class ChangeReporter:
    """Renders a ChangeSet as a two-section report.

    Args:
        color: Apply ANSI styles to headers and paths.
        indent: Number of spaces before each path line.
    """

    def __init__(self, color: bool = False, indent: int = 4):
        self.color = color
        self.indent = indent

    def _style(self, text: str, **styles) -> str:
        if not self.color:
            return text
        return typer.style(text, **styles)

    def render(self, change_set: ChangeSet) -> str:
        """Render the change set.

        Returns:
            The single no-changes line when the set is empty. Otherwise the
            staged header and its paths followed by the unstaged header and
            its paths. Both headers are always present in that case. There
            is no trailing newline.

        Example output:
            Changes to be committed:
                a.txt
            Changes not staged for commit:
                b.txt
        """
        if change_set.is_empty:
            return self._style(NO_CHANGES_MESSAGE, fg=typer.colors.BLUE, bold=True)

        pad = " " * self.indent
        lines = [self._style(STAGED_HEADER, fg=typer.colors.BRIGHT_WHITE)]
        lines.extend(
            pad + self._style(quote_path(path), fg=typer.colors.GREEN)
            for path in change_set.staged
        )
        lines.append(self._style(UNSTAGED_HEADER, fg=typer.colors.BRIGHT_WHITE))
        lines.extend(
            pad + self._style(quote_path(path), fg=typer.colors.RED)
            for path in change_set.unstaged
        )
        return "\n".join(lines)

    def emit(self, change_set: ChangeSet) -> None:
        """Write the rendered report to stdout."""
        typer.echo(self.render(change_set), color=self.color or None)
