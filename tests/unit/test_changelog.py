"""Unit tests for changelog section rendering."""

from __future__ import annotations

from datetime import date

import pytest

from semrel.config.models import RuleSet
from semrel.core.changelog import format_commit_line, render_changelog_section
from semrel.core.commits import Commit, aggregate
from semrel.core.version import VersionTag

REPO_URL = "https://github.com/user/repo"


@pytest.fixture
def annotated_commits(
    default_rules: RuleSet, sample_commits: list[Commit]
) -> tuple[Commit, ...]:
    return aggregate(default_rules, sample_commits).commits


class TestRenderChangelogSection:
    """Tests for render_changelog_section()."""

    def test_full_section(self, annotated_commits: tuple[Commit, ...]):
        """Render a section with links, grouped by release level."""
        section = render_changelog_section(
            annotated_commits,
            VersionTag(3, 2, 1),
            VersionTag(4, 0, 0),
            repo_url=REPO_URL,
            release_date=date(2023, 5, 5),
        )

        assert section.splitlines() == [
            f"## [v4.0.0]({REPO_URL}/compare/v3.2.1..v4.0.0) (2023-05-05)",
            "",
            "* **Major changes**",
            f" * break: drop old API ([1ebdf43e]({REPO_URL}/commit/"
            "1ebdf43e8950d8f9dace2e554be5d387267575ef))",
            "* **Minor changes**",
            f" * feat(github): add release notes ([172cd158]({REPO_URL}/commit/"
            "172cd1589d0a29b56cd8261a888911201305b04d))",
            "* **Patch changes**",
            f" * fix: typo ([cd2fe770]({REPO_URL}/commit/"
            "cd2fe77015b7aa2ac666ec05e14b76c9ba3dfd0a))",
        ]
        assert section.endswith("\n")

    def test_unmatched_commits_skipped(self, annotated_commits: tuple[Commit, ...]):
        """Unclassified commits don't appear in the changelog."""
        section = render_changelog_section(annotated_commits, "v3.2.1", "v4.0.0")

        assert "chore" not in section

    def test_empty_groups_skipped(self, default_rules: RuleSet, fix_commit: Commit):
        """Levels without commits get no heading."""
        commits = aggregate(default_rules, [fix_commit]).commits
        section = render_changelog_section(commits, "v3.2.1", "v3.2.2")

        assert "Patch changes" in section
        assert "Major changes" not in section
        assert "Minor changes" not in section

    def test_without_repo_url(self, annotated_commits: tuple[Commit, ...]):
        """Without a repository URL, no links are rendered."""
        section = render_changelog_section(
            annotated_commits, "v3.2.1", "v4.0.0", release_date=date(2024, 1, 2)
        )

        assert section.startswith("## v4.0.0 (2024-01-02)")
        assert " * fix: typo (cd2fe770)" in section
        assert "](" not in section

    def test_defaults_to_today(self, annotated_commits: tuple[Commit, ...]):
        """The header date defaults to the current date."""
        section = render_changelog_section(annotated_commits, "v3.2.1", "v4.0.0")

        header = section.splitlines()[0]
        assert header.startswith("## v4.0.0 (")
        date.fromisoformat(header.removeprefix("## v4.0.0 (").removesuffix(")"))


class TestFormatCommitLine:
    """Tests for format_commit_line()."""

    def test_first_line_only(self):
        """Only the commit summary line is used."""
        commit = Commit("0123456789abcdef", "fix: typo\n\nLong explanation")

        assert format_commit_line(commit) == "fix: typo (01234567)"

    def test_commit_link(self, fix_commit: Commit):
        """Links point at the commit page of the repository."""
        line = format_commit_line(fix_commit, repo_url=REPO_URL)

        assert line == f"fix: typo ([cd2fe770]({REPO_URL}/commit/{fix_commit.hash}))"
