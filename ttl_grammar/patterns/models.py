"""Compiled tagged-template pattern models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ttl_grammar.constants import (
    QUASI_BEGIN_CAPTURE_NAME,
    QUASI_END_CAPTURE_NAME,
    TAG_CAPTURE_NAME,
)


@dataclass(frozen=True)
class CompiledPattern:
    content_name: str
    begin_regex: str
    end_regex: str
    include_scope: str
    nested_include: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "contentName": self.content_name,
            "begin": self.begin_regex,
            "beginCaptures": {
                "1": {"name": TAG_CAPTURE_NAME},
                "2": {"name": QUASI_BEGIN_CAPTURE_NAME},
            },
            "end": self.end_regex,
            "endCaptures": {
                "1": {"name": QUASI_END_CAPTURE_NAME},
            },
            "patterns": [
                {"include": self.nested_include},
                {"include": self.include_scope},
            ],
        }
