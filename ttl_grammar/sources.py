"""Rule sources feeding the grammar service."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

from ttl_grammar.constants import SETTINGS_KEY
from ttl_grammar.errors import RuleSourceError
from ttl_grammar.interfaces.rule_source import IRuleSource
from ttl_grammar.models import Disposable
from ttl_grammar.settings import read_yaml_mapping

logger = logging.getLogger(__name__)


class ObservableRuleSource(IRuleSource):
    def __init__(self) -> None:
        self._observers: list[Callable[[], None]] = []

    def observe(self, callback: Callable[[], None]) -> Disposable:
        self._observers.append(callback)

        def _remove() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return Disposable(_remove)

    def notify_changed(self) -> None:
        for callback in list(self._observers):
            callback()


class InMemoryRuleSource(ObservableRuleSource):
    """Rules pushed by the host from its own configuration store."""

    def __init__(self, rules: Iterable[str] = ()) -> None:
        super().__init__()
        self._rules = list(rules)

    def rule_specs(self) -> list[str]:
        return list(self._rules)

    def set_rules(self, rules: Iterable[str]) -> None:
        self._rules = list(rules)
        self.notify_changed()


class YamlRuleSource(ObservableRuleSource):
    """Rules listed under ``taggedTemplateGrammar`` in a YAML settings file.

    The file is re-read on every pull; hosts call ``notify_changed`` from
    their file watcher.
    """

    def __init__(self, path: Path, key: str = SETTINGS_KEY) -> None:
        super().__init__()
        self.path = path
        self.key = key

    def rule_specs(self) -> list[str]:
        raw = read_yaml_mapping(self.path).get(self.key)
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise RuleSourceError(self.path, f"'{self.key}' must be a list")
        bad = [item for item in raw if not isinstance(item, str)]
        if bad:
            raise RuleSourceError(
                self.path, f"'{self.key}' entries must be strings, got {bad[0]!r}"
            )
        logger.debug("Read %d rules from %s", len(raw), self.path)
        return list(raw)
