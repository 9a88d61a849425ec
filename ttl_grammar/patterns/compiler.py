"""Compile ``match:scope`` rule strings into tagged-template patterns."""

from __future__ import annotations

import re
from typing import Optional

from ttl_grammar.constants import EMBEDDED_LITERAL_INCLUDE
from ttl_grammar.errors import (
    InvalidLiteralError,
    InvalidPatternSpecError,
    MalformedRegexError,
)
from ttl_grammar.interfaces.validator import IRegexValidator
from ttl_grammar.patterns.models import CompiledPattern

_IDENT = r"[A-Za-z]\w*(?:\.[A-Za-z]\w*)*"
_SCOPE_RE = re.compile(rf"{_IDENT}(?:#{_IDENT})?", re.ASCII)
_UNESCAPED_QUOTE_RE = re.compile(r'(?<!\\)(?:\\\\)*"')
_LITERAL_META_RE = re.compile(r"[|{}()\[\]^$+*?.]")

# Closing backtick not preceded by an odd run of backslashes.
END_REGEX = r"\s*(?<=[^\\]\\\\|[^\\]|^\\\\|^)((`))"


def begin_regex(match: str) -> str:
    return rf"\s*+({match})\s*(`)"


def escape_literal(literal: str) -> str:
    """Escape a raw literal so it matches itself inside a regex."""
    escaped = literal.replace("\\", "\\\\")
    return _LITERAL_META_RE.sub(lambda m: "\\" + m.group(0), escaped)


def split_rule_spec(rule_spec: str) -> tuple[str, str]:
    match_expr, colon, scope_ref = rule_spec.rpartition(":")
    if not colon:
        raise InvalidPatternSpecError(rule_spec)
    return match_expr, scope_ref


def is_valid_scope(scope_ref: str) -> bool:
    return _SCOPE_RE.fullmatch(scope_ref) is not None


def is_quoted(match_expr: str) -> bool:
    return len(match_expr) >= 2 and match_expr[0] == '"' and match_expr[-1] == '"'


class PatternCompiler:
    def __init__(self, validator: Optional[IRegexValidator] = None) -> None:
        self._validator = validator

    def compile(self, rule_spec: str) -> CompiledPattern:
        match_expr, scope_ref = split_rule_spec(rule_spec)
        if not match_expr or not is_valid_scope(scope_ref):
            raise InvalidPatternSpecError(rule_spec)

        if is_quoted(match_expr):
            match = self._compile_regex(rule_spec, match_expr[1:-1])
        else:
            match = self._compile_literal(rule_spec, match_expr)

        return CompiledPattern(
            content_name=scope_ref.partition("#")[0],
            begin_regex=begin_regex(match),
            end_regex=END_REGEX,
            include_scope=scope_ref,
            nested_include=EMBEDDED_LITERAL_INCLUDE,
        )

    def _compile_regex(self, rule_spec: str, regex: str) -> str:
        if not regex:
            raise InvalidPatternSpecError(rule_spec)
        if self._validator is not None:
            try:
                self._validator.validate(regex)
            except ValueError as exc:
                raise MalformedRegexError(rule_spec, regex, str(exc)) from exc
        # Backslash and quote escaping for the JSON text is left to the
        # document serializer.
        return regex

    @staticmethod
    def _compile_literal(rule_spec: str, literal: str) -> str:
        if _UNESCAPED_QUOTE_RE.search(literal):
            raise InvalidLiteralError(rule_spec, literal)
        return escape_literal(literal)
