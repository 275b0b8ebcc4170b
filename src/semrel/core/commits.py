"""Commit classification and release aggregation.

Each commit message is checked against the rule set from the highest
release level to the lowest; the first matching rule decides the commit's
level. The release as a whole takes the highest level found:

    MAJOR > MINOR > PATCH

Commits matching no rule (merge commits, ``chore:``, free-form messages)
are left unclassified and do not contribute to the decision. If no commit
matches, there is nothing to release.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from semrel.levels import ReleaseLevel
from semrel.logging import get_logger

if TYPE_CHECKING:
    from semrel.config.models import RuleSet

log = get_logger(__name__)

SHORT_HASH_LENGTH = 8


@dataclass(frozen=True)
class Commit:
    """A commit introduced since the last release.

    Attributes:
        hash: Full commit hash
        message: Full commit message
        resolved_level: Release level the message matched, set by aggregation
    """

    hash: str
    message: str
    resolved_level: ReleaseLevel | None = None

    @property
    def short_hash(self) -> str:
        return self.hash[:SHORT_HASH_LENGTH]

    def resolved(self, level: ReleaseLevel) -> Commit:
        """Return a copy of this commit annotated with its release level."""
        return dataclasses.replace(self, resolved_level=level)

    def unresolved(self) -> Commit:
        """Return a copy of this commit without a release level."""
        if self.resolved_level is None:
            return self
        return dataclasses.replace(self, resolved_level=None)


@dataclass(frozen=True)
class ReleaseDecision:
    """Outcome of aggregating a batch of commits.

    Attributes:
        commits: Input commits in their original order, annotated where matched
        level: Release level to apply, or None if nothing should be released
        major_count: Number of commits matching the major rule
        minor_count: Number of commits matching the minor rule
        patch_count: Number of commits matching the patch rule
    """

    commits: tuple[Commit, ...]
    level: ReleaseLevel | None
    major_count: int = 0
    minor_count: int = 0
    patch_count: int = 0

    @property
    def should_release(self) -> bool:
        return self.level is not None

    @property
    def unmatched(self) -> list[Commit]:
        """Commits that matched no release rule."""
        return [c for c in self.commits if c.resolved_level is None]


def classify(rule_set: RuleSet, message: str) -> ReleaseLevel | None:
    """Find the release level a commit message triggers.

    Rules are evaluated from major to patch and the first match wins.

    Args:
        rule_set: Release rules to evaluate
        message: Full commit message

    Returns:
        Matched ReleaseLevel, or None if no rule matches

    Raises:
        ClassificationError: If a rule cannot be evaluated
    """
    for level, rule in rule_set.rules():
        if rule.matches(message):
            return level
    return None


def aggregate(rule_set: RuleSet, commits: Iterable[Commit]) -> ReleaseDecision:
    """Classify a batch of commits and decide the release level.

    The returned decision holds new, annotated commit instances in input
    order; the given commits are not modified. A commit matching no rule
    comes out unresolved, even if an earlier aggregation had annotated it.
    The level is the highest one matched by any commit, regardless of how
    many commits matched each level.

    Args:
        rule_set: Release rules to evaluate
        commits: Commits since the last release

    Returns:
        ReleaseDecision with annotated commits and the overall level

    Raises:
        ClassificationError: If a rule cannot be evaluated; the whole batch
            is aborted since the rule set itself is broken
    """
    counts = {level: 0 for level in ReleaseLevel}
    annotated: list[Commit] = []

    for commit in commits:
        level = classify(rule_set, commit.message)
        if level is None:
            log.debug("commit matched no release rule", commit=commit.short_hash)
            annotated.append(commit.unresolved())
            continue

        log.debug("classified commit", commit=commit.short_hash, release_level=level.value)
        counts[level] += 1
        annotated.append(commit.resolved(level))

    decided = next((level for level in ReleaseLevel.by_precedence() if counts[level] > 0), None)

    log.info(
        "release level decided",
        release_level=decided.value if decided else None,
        commits=len(annotated),
        major=counts[ReleaseLevel.MAJOR],
        minor=counts[ReleaseLevel.MINOR],
        patch=counts[ReleaseLevel.PATCH],
    )

    return ReleaseDecision(
        commits=tuple(annotated),
        level=decided,
        major_count=counts[ReleaseLevel.MAJOR],
        minor_count=counts[ReleaseLevel.MINOR],
        patch_count=counts[ReleaseLevel.PATCH],
    )


def group_commits_by_level(commits: Iterable[Commit]) -> dict[ReleaseLevel, list[Commit]]:
    """Group annotated commits by release level.

    Args:
        commits: Commits annotated by :func:`aggregate`

    Returns:
        Dictionary ordered major, minor, patch; unclassified commits are
        dropped and each group keeps the input order
    """
    groups: dict[ReleaseLevel, list[Commit]] = {level: [] for level in ReleaseLevel.by_precedence()}
    for commit in commits:
        if commit.resolved_level is not None:
            groups[commit.resolved_level].append(commit)
    return groups
