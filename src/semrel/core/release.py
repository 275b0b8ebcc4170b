"""Release planning.

Ties the engine together: the commits since the last tag are aggregated
into a release level, which is then applied to the previous tag.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from semrel.core.commits import Commit, ReleaseDecision, aggregate
from semrel.core.version import VersionTag
from semrel.logging import get_logger

if TYPE_CHECKING:
    from semrel.config.models import RuleSet

log = get_logger(__name__)


@dataclass(frozen=True)
class ReleasePlan:
    """What the next release should be.

    Attributes:
        decision: Aggregated commit classification
        previous_tag: Tag of the last published release
        next_tag: Tag to publish, or None when there is nothing to release
    """

    decision: ReleaseDecision
    previous_tag: VersionTag
    next_tag: VersionTag | None

    @property
    def should_release(self) -> bool:
        return self.next_tag is not None


def plan_release(
    rule_set: RuleSet,
    commits: Iterable[Commit],
    previous_tag: str | VersionTag,
) -> ReleasePlan:
    """Decide the next release from the commits since the previous tag.

    The previous tag is parsed before any commit is classified, so an
    invalid tag halts the run without doing any work.

    Args:
        rule_set: Release rules to classify commits with
        commits: Commits since the previous tag
        previous_tag: Last published tag; use ``VersionTag.initial()``
            for a repository without releases

    Returns:
        ReleasePlan; ``next_tag`` is None when no commit triggers a release

    Raises:
        TagParseError: If the previous tag is not a canonical tag
        ClassificationError: If a rule cannot be evaluated
    """
    if isinstance(previous_tag, str):
        previous_tag = VersionTag.parse(previous_tag)

    decision = aggregate(rule_set, commits)

    if decision.level is None:
        log.info("no releasable commits", previous_tag=str(previous_tag))
        return ReleasePlan(decision=decision, previous_tag=previous_tag, next_tag=None)

    next_tag = previous_tag.increment(decision.level)
    log.info(
        "next release planned",
        previous_tag=str(previous_tag),
        next_tag=str(next_tag),
        release_level=decision.level.value,
    )
    return ReleasePlan(decision=decision, previous_tag=previous_tag, next_tag=next_tag)
