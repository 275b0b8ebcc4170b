"""Tests for release level ordering."""

from __future__ import annotations

from semrel.levels import ReleaseLevel


class TestReleaseLevel:
    """Tests for ReleaseLevel."""

    def test_precedence_order(self):
        """Major outranks minor, which outranks patch."""
        assert ReleaseLevel.MAJOR > ReleaseLevel.MINOR > ReleaseLevel.PATCH
        assert ReleaseLevel.PATCH < ReleaseLevel.MAJOR

    def test_max_picks_highest_level(self):
        """Built-in max() follows precedence, not alphabetical order."""
        levels = [ReleaseLevel.PATCH, ReleaseLevel.MAJOR, ReleaseLevel.MINOR]
        assert max(levels) is ReleaseLevel.MAJOR
        assert min(levels) is ReleaseLevel.PATCH

    def test_by_precedence(self):
        """by_precedence() yields levels from highest to lowest."""
        assert list(ReleaseLevel.by_precedence()) == [
            ReleaseLevel.MAJOR,
            ReleaseLevel.MINOR,
            ReleaseLevel.PATCH,
        ]

    def test_values_are_lowercase_names(self):
        """Level values are the lowercase configuration keys."""
        assert ReleaseLevel("major") is ReleaseLevel.MAJOR
        assert str(ReleaseLevel.MINOR) == "minor"
