"""Tests for gitchanges.models module."""

import pytest
from pydantic import ValidationError

from gitchanges.models import ChangeSet, matches_any


class TestChangeSet:
    """Tests for ChangeSet model."""

    def test_defaults_are_empty(self):
        """Test that a bare ChangeSet has no changes."""
        change_set = ChangeSet()
        assert change_set.staged == ()
        assert change_set.unstaged == ()
        assert change_set.is_empty
        assert change_set.total == 0

    def test_lists_become_tuples(self):
        """Test that sequences are stored as tuples in order."""
        change_set = ChangeSet(staged=["b.py", "a.py"], unstaged=["c.py"])
        assert change_set.staged == ("b.py", "a.py")
        assert change_set.unstaged == ("c.py",)
        assert change_set.total == 3
        assert not change_set.is_empty

    def test_duplicates_keep_first_position(self):
        """Test that repeats inside one list are dropped."""
        change_set = ChangeSet(staged=["a.py", "b.py", "a.py"])
        assert change_set.staged == ("a.py", "b.py")

    def test_same_path_in_both_lists(self):
        """Test that a path may be both staged and unstaged."""
        change_set = ChangeSet(staged=["a.py"], unstaged=["a.py"])
        assert change_set.staged == ("a.py",)
        assert change_set.unstaged == ("a.py",)
        assert change_set.total == 2

    def test_empty_path_raises_error(self):
        """Test that empty paths are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            ChangeSet(unstaged=["ok.py", ""])
        assert "paths cannot be empty" in str(exc_info.value)

    def test_whitespace_only_path_is_kept(self):
        """Test that a file named with spaces is a valid path."""
        change_set = ChangeSet(staged=[" "], unstaged=["  ", "ok.py"])
        assert change_set.staged == (" ",)
        assert change_set.unstaged == ("  ", "ok.py")

    def test_is_frozen(self):
        """Test that a ChangeSet cannot be modified."""
        change_set = ChangeSet(staged=["a.py"])
        with pytest.raises(ValidationError):
            change_set.staged = ("b.py",)


class TestFiltered:
    """Tests for ChangeSet.filtered."""

    def test_keeps_matching_paths_in_order(self):
        """Test that only matching paths remain, order preserved."""
        change_set = ChangeSet(
            staged=["src/z.py", "README.md", "src/a.py"],
            unstaged=["docs/guide.md", "tests/test_x.py"],
        )

        result = change_set.filtered(["*.py"])

        assert result.staged == ("src/z.py", "src/a.py")
        assert result.unstaged == ("tests/test_x.py",)

    def test_no_patterns_returns_same_set(self):
        """Test that an empty pattern list keeps everything."""
        change_set = ChangeSet(staged=["a.py"])
        assert change_set.filtered([]) is change_set

    def test_can_filter_to_empty(self):
        """Test that filtering may leave no changes."""
        change_set = ChangeSet(staged=["a.py"], unstaged=["b.py"])
        assert change_set.filtered(["*.md"]).is_empty


class TestMatchesAny:
    """Tests for matches_any function."""

    def test_full_path_pattern(self):
        assert matches_any("src/app.py", ["src/*"])

    def test_basename_pattern(self):
        assert matches_any("deep/nested/file.lock", ["*.lock"])

    def test_exact_name(self):
        assert matches_any("pkg/setup.cfg", ["setup.cfg"])

    def test_no_match(self):
        assert not matches_any("src/app.py", ["*.md", "docs/*"])
