"""Version tag parsing and manipulation.

Tags have the canonical form ``v<major>.<minor>.<patch>``, e.g. ``v3.2.1``.
Pre-release and build metadata are not supported. A tag is either parsed
successfully into a :class:`VersionTag` or rejected with a
:class:`~semrel.exceptions.TagParseError`; there is no partial state.

Incrementing a tag for a release level:

- major: ``v3.2.1`` -> ``v4.0.0``
- minor: ``v3.2.1`` -> ``v3.3.0``
- patch: ``v3.2.1`` -> ``v3.2.2``
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from semrel.exceptions import TagFormatError, TagSegmentError
from semrel.levels import ReleaseLevel

TAG_PREFIX = "v"

TAG_PATTERN = re.compile(
    rf"^{TAG_PREFIX}(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)$"
)


@dataclass(frozen=True, order=True)
class VersionTag:
    """Semantic version tag.

    Instances compare lexicographically on ``(major, minor, patch)``.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
    """

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for segment in ("major", "minor", "patch"):
            if getattr(self, segment) < 0:
                raise ValueError(f"{segment} must be non-negative")

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def parse(cls, tag: str) -> VersionTag:
        """Parse a tag string.

        The whole string must match ``v<major>.<minor>.<patch>``.

        Args:
            tag: Tag string (e.g., "v3.2.1")

        Returns:
            Parsed VersionTag

        Raises:
            TagFormatError: If the string doesn't have the tag shape
            TagSegmentError: If a segment is not a valid version number
        """
        match = TAG_PATTERN.fullmatch(tag)
        if not match:
            raise TagFormatError(tag)

        segments: dict[str, int] = {}
        for name, raw in match.groupdict().items():
            # int() refuses digit strings longer than the interpreter limit
            try:
                segments[name] = int(raw)
            except ValueError as e:
                raise TagSegmentError(tag, name, raw) from e

        return cls(**segments)

    @classmethod
    def initial(cls) -> VersionTag:
        """Seed tag for repositories that have never been released."""
        return cls(0, 0, 0)

    def increment(self, level: ReleaseLevel) -> VersionTag:
        """Return a new tag incremented for the given release level.

        Args:
            level: Release level to apply

        Returns:
            New VersionTag; this one is left unchanged
        """
        if level == ReleaseLevel.MAJOR:
            return VersionTag(self.major + 1, 0, 0)
        if level == ReleaseLevel.MINOR:
            return VersionTag(self.major, self.minor + 1, 0)
        if level == ReleaseLevel.PATCH:
            return VersionTag(self.major, self.minor, self.patch + 1)
        raise ValueError(f"Unknown release level: {level}")

    def render(self) -> str:
        return f"{TAG_PREFIX}{self.major}.{self.minor}.{self.patch}"


def parse_tag(tag: str) -> VersionTag:
    """Parse a tag string into a VersionTag.

    Convenience function equivalent to ``VersionTag.parse(tag)``.
    """
    return VersionTag.parse(tag)


def increment_tag(tag: VersionTag, level: ReleaseLevel) -> VersionTag:
    return tag.increment(level)


def render_tag(tag: VersionTag) -> str:
    return tag.render()
