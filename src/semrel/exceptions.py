"""Exception hierarchy for semrel.

All errors raised by semrel derive from :class:`SemrelError`, grouped by
the stage of the release decision that failed:

- Configuration errors: the rule set could not be found, parsed or validated
- Classification faults: a rule could not be evaluated against a commit
- Tag parse errors: the previous tag is not a canonical ``vX.Y.Z`` string

A commit message that matches no rule is *not* an error and never raises.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from semrel.levels import ReleaseLevel


class SemrelError(Exception):
    """Base class for all semrel errors."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(SemrelError):
    """The release rule configuration is unusable."""


class ConfigNotFoundError(ConfigError):
    """No configuration document could be located."""


class ConfigValidationError(ConfigError):
    """The configuration document is malformed or holds invalid values."""


class MissingReleaseLevelError(ConfigError):
    """A release level has no rule in the configuration document."""

    def __init__(self, level: ReleaseLevel) -> None:
        self.level = level
        super().__init__(
            f"Missing release rule for '{level.value}'. "
            "The 'release_rules' table must define 'major', 'minor' and 'patch' (lowercase)."
        )


# =============================================================================
# Classification
# =============================================================================


class ClassificationError(SemrelError):
    """A release rule could not be evaluated against a commit message."""


class UnsupportedRuleFormatError(ClassificationError, NotImplementedError):
    """The rule's grammar format has no matcher implementation."""

    def __init__(self, rule_format: str) -> None:
        self.rule_format = rule_format
        super().__init__(f"Grammar format '{rule_format}' is not supported yet")


class GrammarError(ClassificationError):
    """The rule's grammar is not valid for its declared format."""

    def __init__(self, grammar: str, reason: str) -> None:
        self.grammar = grammar
        super().__init__(f"Invalid grammar {grammar!r}: {reason}")


# =============================================================================
# Tags
# =============================================================================


class TagParseError(SemrelError):
    """A version tag string could not be parsed."""

    def __init__(self, tag: str, message: str) -> None:
        self.tag = tag
        super().__init__(message)


class TagFormatError(TagParseError):
    """The tag does not have the ``v<major>.<minor>.<patch>`` shape."""

    def __init__(self, tag: str) -> None:
        super().__init__(tag, f"Invalid tag {tag!r}: expected 'v<major>.<minor>.<patch>'")


class TagSegmentError(TagParseError):
    """A numeric segment of the tag is not a valid non-negative integer."""

    def __init__(self, tag: str, segment: str, value: str) -> None:
        self.segment = segment
        self.value = value
        super().__init__(
            tag,
            f"Invalid tag {tag!r}: {segment} segment {value!r} is not a valid version number",
        )
