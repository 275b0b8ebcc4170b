"""Release rule configuration loading.

Rules are read from a ``release_rules`` table, either in a standalone
``semrel.toml``::

    [release_rules]
    major = { format = "regex", grammar = '^(?P<type>break)...$' }
    minor = { format = "regex", grammar = '^(?P<type>feat)...$' }
    patch = { format = "regex", grammar = '^(?P<type>fix)...$' }

or under ``[tool.semrel.release_rules]`` in ``pyproject.toml``.
Level keys are case-sensitive and all three are mandatory.
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from semrel.config.models import RuleSet
from semrel.exceptions import (
    ConfigNotFoundError,
    ConfigValidationError,
    MissingReleaseLevelError,
)
from semrel.levels import ReleaseLevel
from semrel.logging import get_logger

log = get_logger(__name__)

CONFIG_FILE_NAME = "semrel.toml"
PYPROJECT_FILE_NAME = "pyproject.toml"
TOOL_SECTION = "semrel"
RULES_SECTION = "release_rules"


def load_toml(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Parsed TOML as dictionary

    Raises:
        ConfigNotFoundError: If the file doesn't exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Configuration file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_rules_document(data: Mapping[str, Any]) -> Mapping[str, Any] | None:
    """Extract the table holding ``release_rules`` from a parsed TOML file.

    Args:
        data: Parsed ``semrel.toml`` or ``pyproject.toml`` contents

    Returns:
        The table containing the ``release_rules`` key, or None if absent
    """
    if RULES_SECTION in data:
        return data

    tool_config = _tool_section(data)
    if tool_config is not None and RULES_SECTION in tool_config:
        return tool_config

    return None


def find_config_file(start: Path | None = None) -> Path:
    """Find the rule configuration by searching up from a directory.

    In each directory ``semrel.toml`` wins over ``pyproject.toml``; the
    latter only counts when it has a ``[tool.semrel]`` section. A
    ``pyproject.toml`` that isn't valid TOML is skipped with a warning.

    Args:
        start: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the configuration file

    Raises:
        ConfigNotFoundError: If no configuration file is found
    """
    start = (start or Path.cwd()).resolve()

    for directory in [start, *start.parents]:
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate

        pyproject = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file() and _declares_tool_section(pyproject):
            return pyproject

    raise ConfigNotFoundError(
        f"Could not find {CONFIG_FILE_NAME} or a [tool.{TOOL_SECTION}] section "
        f"in {PYPROJECT_FILE_NAME} in {start} or any parent directory"
    )


def load_rule_set(document: Mapping[str, Any]) -> RuleSet:
    """Build a validated rule set from a configuration document.

    Args:
        document: Mapping holding a ``release_rules`` table

    Returns:
        Validated, immutable RuleSet

    Raises:
        MissingReleaseLevelError: If major, minor or patch has no rule
        ConfigValidationError: If the table or a rule is malformed
    """
    rules = document.get(RULES_SECTION)
    if rules is None:
        raise ConfigValidationError(f"Missing [{RULES_SECTION}] section")
    if not isinstance(rules, Mapping):
        raise ConfigValidationError(f"[{RULES_SECTION}] must be a table")

    known_levels = {level.value for level in ReleaseLevel}
    for key in rules:
        if key not in known_levels:
            log.warning("ignoring unknown release rule key", key=key)

    for level in ReleaseLevel.by_precedence():
        if level.value not in rules:
            raise MissingReleaseLevelError(level)

    try:
        rule_set = RuleSet.model_validate({level: rules[level] for level in known_levels})
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid [{RULES_SECTION}]: {_format_validation_error(e)}"
        ) from e

    log.debug(
        "validated release rules",
        formats={level.value: rule.format.value for level, rule in rule_set.rules()},
    )
    return rule_set


def load_rule_set_file(path: Path) -> RuleSet:
    """Load the rule set from a configuration file.

    Args:
        path: Configuration file, or a directory to search up from

    Returns:
        Validated RuleSet

    Raises:
        ConfigNotFoundError: If the file doesn't exist or has no rules section
        ConfigValidationError: If the configuration is invalid
        MissingReleaseLevelError: If a release level has no rule
    """
    config_path = find_config_file(path) if path.is_dir() else path

    document = extract_rules_document(load_toml(config_path))
    if document is None:
        raise ConfigNotFoundError(f"No [{RULES_SECTION}] section in {config_path}")

    rule_set = load_rule_set(document)
    log.info("loaded release rules", path=str(config_path))
    return rule_set


def resolve_rule_set(path: Path | None = None) -> RuleSet:
    """Load the configured rule set, falling back to the built-in default.

    Only a missing configuration falls back; an invalid one is an error.

    Args:
        path: Configuration file or directory (defaults to searching from cwd)

    Returns:
        The configured RuleSet, or ``RuleSet.default()``
    """
    try:
        return load_rule_set_file(path or Path.cwd())
    except ConfigNotFoundError as e:
        log.warning("no release rules configured, using defaults", reason=str(e))
        return RuleSet.default()


def _format_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in error.errors()
    )


def _tool_section(data: Mapping[str, Any]) -> Mapping[str, Any] | None:
    tool = data.get("tool")
    if not isinstance(tool, Mapping):
        return None
    section = tool.get(TOOL_SECTION)
    return section if isinstance(section, Mapping) else None


def _declares_tool_section(pyproject: Path) -> bool:
    try:
        data = load_toml(pyproject)
    except ConfigValidationError as e:
        log.warning("skipping unreadable pyproject.toml", path=str(pyproject), reason=str(e))
        return False
    return _tool_section(data) is not None
