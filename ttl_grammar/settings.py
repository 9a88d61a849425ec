"""Grammar service settings loaded from YAML."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ttl_grammar.constants import (
    DEFAULT_QUIET_PERIOD,
    GRAMMAR_FILE_PREFIX,
    GRAMMAR_SCOPE_NAME,
    NOTIFICATION_SOURCE,
    SETTINGS_SECTION,
)
from ttl_grammar.errors import RuleSourceError

# Same shape as scopeName in grammar/schema.json.
_SCOPE_NAME_RE = re.compile(r"[A-Za-z][A-Za-z0-9_]*(?:\.[A-Za-z][A-Za-z0-9_]*)*")


@dataclass(frozen=True)
class GrammarSettings:
    quiet_period: float = DEFAULT_QUIET_PERIOD
    notification_source: str = NOTIFICATION_SOURCE
    scope_name: str = GRAMMAR_SCOPE_NAME
    file_prefix: str = GRAMMAR_FILE_PREFIX


def read_yaml_mapping(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise RuleSourceError(path, str(exc)) from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise RuleSourceError(path, "expected a mapping at the top level")
    return raw


def load_settings(path: Path) -> GrammarSettings:
    section = read_yaml_mapping(path).get(SETTINGS_SECTION) or {}
    if not isinstance(section, dict):
        raise RuleSourceError(path, f"'{SETTINGS_SECTION}' must be a mapping")

    defaults = GrammarSettings()
    quiet_period = section.get("quietPeriod", defaults.quiet_period)
    if isinstance(quiet_period, bool) or not isinstance(quiet_period, (int, float)):
        raise RuleSourceError(path, "quietPeriod must be a number of seconds")
    if quiet_period < 0:
        raise RuleSourceError(path, "quietPeriod must not be negative")

    scope_name = str(section.get("scopeName", defaults.scope_name))
    if _SCOPE_NAME_RE.fullmatch(scope_name) is None:
        raise RuleSourceError(path, f"scopeName is not a dotted identifier: {scope_name}")

    return GrammarSettings(
        quiet_period=float(quiet_period),
        notification_source=str(
            section.get("notificationSource", defaults.notification_source)
        ),
        scope_name=scope_name,
        file_prefix=str(section.get("filePrefix", defaults.file_prefix)),
    )
