"""Change collection from the git backend.

Contains:
- ChangeCollector: Runs the staged and unstaged queries and joins them
  into a ChangeSet
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from pydantic import ValidationError

from gitchanges.git import BackendUnavailable, GitBackend, MalformedOutputError, RepoContext
from gitchanges.models import ChangeSet


class ChangeCollector:
    """Builds a ChangeSet for one repository.

    Args:
        backend: Object exposing ``query_staged_paths`` and
            ``query_unstaged_summary``, and optionally ``resolve`` to check
            the repository before querying. Defaults to the git executable.
        context: Repository to query. Defaults to the current directory.
        concurrent: Run the two queries on separate threads.
    """

    def __init__(
        self,
        backend=None,
        context: Optional[RepoContext] = None,
        concurrent: bool = True,
    ):
        self.backend = backend if backend is not None else GitBackend()
        self.context = context if context is not None else RepoContext()
        self.concurrent = concurrent

    def _call(self, func):
        try:
            return func(self.context)
        except BackendUnavailable:
            raise
        except Exception as e:
            raise BackendUnavailable(f"Backend query failed: {e}") from e

    def _query(self, query) -> list[str]:
        return self._call(lambda context: list(query(context)))

    def _run_queries(self) -> tuple[list[str], list[str]]:
        staged_query = self.backend.query_staged_paths
        unstaged_query = self.backend.query_unstaged_summary

        if not self.concurrent:
            return self._query(staged_query), self._query(unstaged_query)

        # Leaving the executor block waits for both futures, so a failure
        # in one query never leaves the other running.
        with ThreadPoolExecutor(max_workers=2) as executor:
            staged_future = executor.submit(self._query, staged_query)
            unstaged_future = executor.submit(self._query, unstaged_query)
        return staged_future.result(), unstaged_future.result()

    def collect(self, patterns: Optional[list[str]] = None) -> ChangeSet:
        """Query the backend and build the change set.

        Args:
            patterns: Optional glob patterns; only matching paths are kept.

        Returns:
            The staged and unstaged paths of the repository.

        Raises:
            BackendUnavailable: If the repository cannot be resolved or
                either query fails. No partial result is returned.
        """
        resolve = getattr(self.backend, "resolve", None)
        if resolve is not None:
            self._call(resolve)
        staged, unstaged = self._run_queries()

        try:
            change_set = ChangeSet(staged=staged, unstaged=unstaged)
        except ValidationError as e:
            raise MalformedOutputError(f"Backend returned invalid paths: {e}") from e

        if patterns:
            change_set = change_set.filtered(patterns)
        return change_set
