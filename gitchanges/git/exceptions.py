"""Git backend exception classes.

Contains all exception classes for backend queries:
- BackendUnavailable: Base exception, git could not be reached or invoked
- GitCommandError: Raised when a git command exits non-zero
- NotARepositoryError: Raised when the context is not inside a repository
- MalformedOutputError: Raised when git output cannot be parsed
"""


class BackendUnavailable(Exception):
    """Raised when the git backend cannot produce an answer."""

    pass


class GitCommandError(BackendUnavailable):
    """Raised when a git command exits with a non-zero status."""

    def __init__(self, message: str, returncode: int = 1, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class NotARepositoryError(BackendUnavailable):
    """Raised when the working directory is not inside a git repository."""

    pass


class MalformedOutputError(BackendUnavailable):
    """Raised when git output does not match the expected format."""

    pass
