"""Regex validators backing the quoted rule form."""

from __future__ import annotations

import re
from typing import Any, Callable, Optional

from ttl_grammar.interfaces.validator import IRegexValidator


class NullRegexValidator(IRegexValidator):
    """Accept every pattern; used when the host exposes no regex engine."""

    def validate(self, pattern: str) -> bool:
        return False


class PythonRegexValidator(IRegexValidator):
    def validate(self, pattern: str) -> bool:
        try:
            re.compile(pattern)
        except re.error as exc:
            raise ValueError(str(exc)) from exc
        return True


class ScannerRegexValidator(IRegexValidator):
    """Adapt a host scanner constructor that raises on a bad pattern.

    Hosts built on Oniguruma expose a scanner class taking a list of
    patterns; constructing it is the check. ``scanner_factory`` may be
    ``None`` when the host has no such engine.
    """

    def __init__(
        self, scanner_factory: Optional[Callable[[list[str]], Any]] = None
    ) -> None:
        self._scanner_factory = scanner_factory

    @property
    def available(self) -> bool:
        return self._scanner_factory is not None

    def validate(self, pattern: str) -> bool:
        if self._scanner_factory is None:
            return False
        try:
            self._scanner_factory([pattern])
        except Exception as exc:
            raise ValueError(str(exc)) from exc
        return True
