"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from semrel.config.models import ReleaseRule, RuleFormat, RuleSet
from semrel.core.commits import Commit

RULES_TOML = """\
[release_rules]
major = { format = "regex", grammar = '^(?P<type>break)(?P<scope>\\(\\S+\\))?: .*[a-z0-9]$' }
minor = { format = "regex", grammar = '^(?P<type>feat|refac)(?P<scope>\\(\\S+\\))?: .*[a-z0-9]$' }
patch = { format = "regex", grammar = '^(?P<type>fix)(?P<scope>\\(\\S+\\))?: .*[a-z0-9]$' }
"""


@pytest.fixture
def default_rules() -> RuleSet:
    return RuleSet.default()


@pytest.fixture
def rules_document() -> dict:
    """A valid, already-parsed configuration document."""
    return {
        "release_rules": {
            "major": {"format": "regex", "grammar": r"^(?P<type>break)(?P<scope>\(\S+\))?: .+$"},
            "minor": {"format": "regex", "grammar": r"^(?P<type>feat)(?P<scope>\(\S+\))?: .+$"},
            "patch": {"format": "regex", "grammar": r"^(?P<type>fix)(?P<scope>\(\S+\))?: .+$"},
        }
    }


@pytest.fixture
def peg_rules() -> RuleSet:
    """Rule set whose major rule uses the unimplemented PEG format."""
    default = RuleSet.default()
    return RuleSet(
        major=ReleaseRule(format=RuleFormat.PEG, grammar="type <- 'break'"),
        minor=default.minor,
        patch=default.patch,
    )


@pytest.fixture
def rules_file(tmp_path: Path) -> Path:
    """A semrel.toml with custom release rules."""
    path = tmp_path / "semrel.toml"
    path.write_text(RULES_TOML)
    return path


@pytest.fixture
def break_commit() -> Commit:
    return Commit("1ebdf43e8950d8f9dace2e554be5d387267575ef", "break: drop old API")


@pytest.fixture
def feat_commit() -> Commit:
    return Commit("172cd1589d0a29b56cd8261a888911201305b04d", "feat(github): add release notes")


@pytest.fixture
def fix_commit() -> Commit:
    return Commit("cd2fe77015b7aa2ac666ec05e14b76c9ba3dfd0a", "fix: typo")


@pytest.fixture
def chore_commit() -> Commit:
    return Commit("9a8b7c6d5e4f3a2b1c0d9e8f7a6b5c4d3e2f1a0b", "chore: nothing conventional")


@pytest.fixture
def sample_commits(
    break_commit: Commit,
    feat_commit: Commit,
    fix_commit: Commit,
    chore_commit: Commit,
) -> list[Commit]:
    """A realistic batch covering every level plus an unmatched commit."""
    return [feat_commit, chore_commit, fix_commit, break_commit]
