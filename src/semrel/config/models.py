"""Release rule models.

A :class:`RuleSet` maps every :class:`~semrel.levels.ReleaseLevel` to the
:class:`ReleaseRule` a commit message must satisfy to trigger that level.
Rule sets are validated once when built and are immutable afterwards, so a
single instance can be shared by every classification in a run.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable, Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from semrel.exceptions import GrammarError, UnsupportedRuleFormatError
from semrel.levels import ReleaseLevel

# Commit types triggering each release level in the default rule set
DEFAULT_MAJOR_TYPES = ("break",)
DEFAULT_MINOR_TYPES = ("build", "ci", "docs", "feat")
DEFAULT_PATCH_TYPES = ("fix", "perf", "refac", "sec", "style", "test")


def build_regex_grammar(commit_types: Iterable[str]) -> str:
    """Build a conventional commit grammar accepting the given types.

    The grammar matches ``<type>[(<scope>)]: <description>`` where the scope
    is optional but non-empty when present, and the description must end
    with a letter or a digit. The grammar ends with ``\\Z`` rather than ``$``
    so that a trailing newline doesn't slip past the anchor.

    Args:
        commit_types: Commit types allowed in the ``type`` group

    Returns:
        Regular expression with named groups ``type`` and ``scope``
    """
    alternation = "|".join(re.escape(commit_type) for commit_type in commit_types)
    return rf"^(?P<type>{alternation})(?P<scope>\(\S(?:.*\S)?\))?: .*[A-Za-z0-9]\Z"


@functools.lru_cache(maxsize=128)
def _compile(grammar: str) -> re.Pattern[str]:
    try:
        pattern = re.compile(grammar)
    except re.error as e:
        raise GrammarError(grammar, str(e)) from e
    if "type" not in pattern.groupindex:
        raise GrammarError(grammar, "missing named group 'type'")
    return pattern


class RuleFormat(str, Enum):
    """Language a rule's grammar is written in."""

    REGEX = "regex"
    # Parsing expression grammar, reserved: no matcher exists yet
    PEG = "peg"


class ReleaseRule(BaseModel):
    """Grammar a commit message must match to trigger a release level."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    format: RuleFormat
    grammar: str = Field(min_length=1)

    @model_validator(mode="after")
    def check_grammar(self) -> ReleaseRule:
        if self.format is RuleFormat.REGEX:
            try:
                _compile(self.grammar)
            except GrammarError as e:
                raise ValueError(str(e)) from e
        return self

    def matches(self, message: str) -> bool:
        """Check whether a commit message satisfies this rule.

        Grammars are searched with Python's :mod:`re` semantics, where ``$``
        also matches before a final newline; anchor with ``\\Z`` to reject it.

        Args:
            message: Full commit message

        Returns:
            True if the grammar matches and its ``type`` group participates

        Raises:
            UnsupportedRuleFormatError: If the rule uses the ``peg`` format
            GrammarError: If the grammar cannot be compiled
        """
        if self.format is RuleFormat.PEG:
            raise UnsupportedRuleFormatError(self.format.value)

        match = _compile(self.grammar).search(message)
        return match is not None and match.group("type") is not None


class RuleSet(BaseModel):
    """Complete mapping of release levels to their rules.

    Every level must be present; there is no per-level fallback.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    major: ReleaseRule
    minor: ReleaseRule
    patch: ReleaseRule

    @classmethod
    def default(cls) -> RuleSet:
        """Built-in rule set used when no configuration document exists."""
        return cls(
            major=ReleaseRule(
                format=RuleFormat.REGEX, grammar=build_regex_grammar(DEFAULT_MAJOR_TYPES)
            ),
            minor=ReleaseRule(
                format=RuleFormat.REGEX, grammar=build_regex_grammar(DEFAULT_MINOR_TYPES)
            ),
            patch=ReleaseRule(
                format=RuleFormat.REGEX, grammar=build_regex_grammar(DEFAULT_PATCH_TYPES)
            ),
        )

    def rule_for(self, level: ReleaseLevel) -> ReleaseRule:
        return getattr(self, level.value)

    def rules(self) -> Iterator[tuple[ReleaseLevel, ReleaseRule]]:
        """Iterate ``(level, rule)`` pairs from the highest level to the lowest."""
        for level in ReleaseLevel.by_precedence():
            yield level, self.rule_for(level)


def default_rule_set() -> RuleSet:
    return RuleSet.default()
