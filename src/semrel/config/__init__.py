"""Release rule configuration for semrel."""

from __future__ import annotations

from semrel.config.loader import (
    find_config_file,
    load_rule_set,
    load_rule_set_file,
    resolve_rule_set,
)
from semrel.config.models import (
    ReleaseRule,
    RuleFormat,
    RuleSet,
    build_regex_grammar,
    default_rule_set,
)

__all__ = [
    "ReleaseRule",
    "RuleFormat",
    "RuleSet",
    "build_regex_grammar",
    "default_rule_set",
    "find_config_file",
    "load_rule_set",
    "load_rule_set_file",
    "resolve_rule_set",
]
