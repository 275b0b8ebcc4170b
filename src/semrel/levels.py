"""Release levels and their precedence."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum


class ReleaseLevel(str, Enum):
    """Kind of release a set of commits calls for.

    Levels are ordered by precedence: ``MAJOR > MINOR > PATCH``.
    """

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self]

    @classmethod
    def by_precedence(cls) -> Iterator[ReleaseLevel]:
        """Iterate levels from the highest precedence to the lowest."""
        return iter((cls.MAJOR, cls.MINOR, cls.PATCH))

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ReleaseLevel):
            return NotImplemented
        return self.precedence < other.precedence

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ReleaseLevel):
            return NotImplemented
        return self.precedence <= other.precedence

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ReleaseLevel):
            return NotImplemented
        return self.precedence > other.precedence

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ReleaseLevel):
            return NotImplemented
        return self.precedence >= other.precedence


_PRECEDENCE = {
    ReleaseLevel.MAJOR: 3,
    ReleaseLevel.MINOR: 2,
    ReleaseLevel.PATCH: 1,
}
