"""semrel: decide the next semantic release from conventional commits."""

from __future__ import annotations

from semrel.config import ReleaseRule, RuleFormat, RuleSet, load_rule_set, resolve_rule_set
from semrel.core import (
    Commit,
    ReleaseDecision,
    ReleasePlan,
    VersionTag,
    aggregate,
    classify,
    plan_release,
)
from semrel.levels import ReleaseLevel

__version__ = "0.1.0"

__all__ = [
    "Commit",
    "ReleaseDecision",
    "ReleaseLevel",
    "ReleasePlan",
    "ReleaseRule",
    "RuleFormat",
    "RuleSet",
    "VersionTag",
    "__version__",
    "aggregate",
    "classify",
    "load_rule_set",
    "plan_release",
    "resolve_rule_set",
]
