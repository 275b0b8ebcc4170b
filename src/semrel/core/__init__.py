"""Core business logic for semrel.

This module contains the release decision engine:
- Commit classification against a rule set
- Aggregation of commit classifications into one release level
- Version tag parsing and incrementing
- Release planning and changelog section rendering
"""

from __future__ import annotations

from semrel.core.changelog import format_commit_line, render_changelog_section
from semrel.core.commits import (
    Commit,
    ReleaseDecision,
    aggregate,
    classify,
    group_commits_by_level,
)
from semrel.core.release import ReleasePlan, plan_release
from semrel.core.version import VersionTag, increment_tag, parse_tag, render_tag

__all__ = [
    # Commits
    "Commit",
    "ReleaseDecision",
    # Release
    "ReleasePlan",
    # Version
    "VersionTag",
    "aggregate",
    "classify",
    # Changelog
    "format_commit_line",
    "group_commits_by_level",
    "increment_tag",
    "parse_tag",
    "plan_release",
    "render_changelog_section",
    "render_tag",
]
