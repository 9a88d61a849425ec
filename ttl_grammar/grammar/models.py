"""Grammar document model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ttl_grammar.constants import GRAMMAR_COMMENT, GRAMMAR_NAME, GRAMMAR_SCOPE_NAME
from ttl_grammar.patterns.models import CompiledPattern


@dataclass(frozen=True)
class GrammarDocument:
    patterns: tuple[CompiledPattern, ...] = ()
    name: str = GRAMMAR_NAME
    comment: str = GRAMMAR_COMMENT
    scope_name: str = GRAMMAR_SCOPE_NAME
    file_types: tuple[str, ...] = field(default=())

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "comment": self.comment,
            "scopeName": self.scope_name,
            "fileTypes": list(self.file_types),
            "patterns": [pattern.to_dict() for pattern in self.patterns],
        }
