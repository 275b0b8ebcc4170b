"""Changelog section rendering.

Renders the markdown section for one release from the commits annotated
by aggregation, grouped by release level::

    ## [v4.0.0](https://github.com/user/repo/compare/v3.2.1..v4.0.0) (2023-05-05)

    * **Major changes**
     * break: drop old api ([1ebdf43e](https://github.com/user/repo/commit/1ebdf43e...))
    * **Minor changes**
     * feat: add x ([172cd158](https://github.com/user/repo/commit/172cd158...))

Writing the section to a file is left to the caller.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from semrel.core.commits import group_commits_by_level
from semrel.levels import ReleaseLevel

if TYPE_CHECKING:
    from semrel.core.commits import Commit
    from semrel.core.version import VersionTag

SECTION_TITLES = {
    ReleaseLevel.MAJOR: "Major changes",
    ReleaseLevel.MINOR: "Minor changes",
    ReleaseLevel.PATCH: "Patch changes",
}


def render_changelog_section(
    commits: Iterable[Commit],
    previous_tag: VersionTag | str,
    new_tag: VersionTag | str,
    *,
    repo_url: str | None = None,
    release_date: date | None = None,
) -> str:
    """Render the changelog section for a release.

    Args:
        commits: Commits annotated by aggregation; unclassified ones are skipped
        previous_tag: Tag of the previous release
        new_tag: Tag of the release being described
        repo_url: Repository URL (e.g., "https://github.com/user/repo") used
            for compare and commit links; links are omitted when None
        release_date: Date shown in the header (defaults to today, UTC)

    Returns:
        Markdown section ending with a blank line
    """
    repo_url = repo_url.rstrip("/") if repo_url else None
    release_date = release_date or datetime.now(UTC).date()

    if repo_url:
        title = f"[{new_tag}]({repo_url}/compare/{previous_tag}..{new_tag})"
    else:
        title = str(new_tag)

    lines = [f"## {title} ({release_date.isoformat()})", ""]

    for level, level_commits in group_commits_by_level(commits).items():
        if not level_commits:
            continue
        lines.append(f"* **{SECTION_TITLES[level]}**")
        lines.extend(f" * {format_commit_line(c, repo_url=repo_url)}" for c in level_commits)

    lines.append("")
    return "\n".join(lines)


def format_commit_line(commit: Commit, *, repo_url: str | None = None) -> str:
    """Format a commit as a changelog entry.

    Only the first line of the message is used.

    Args:
        commit: Commit to format
        repo_url: Repository URL for the commit link

    Returns:
        Formatted entry (without the list marker)
    """
    summary = commit.message.splitlines()[0] if commit.message else ""
    if repo_url:
        return f"{summary} ([{commit.short_hash}]({repo_url}/commit/{commit.hash}))"
    return f"{summary} ({commit.short_hash})"
