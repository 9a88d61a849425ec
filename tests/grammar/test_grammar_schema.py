"""Tests for grammar schema validation."""

import pytest

from ttl_grammar.errors import GrammarSchemaError
from ttl_grammar.grammar.models import GrammarDocument
from ttl_grammar.grammar.schema import GrammarSchemaRepository
from ttl_grammar.patterns.compiler import PatternCompiler


def test_schema_accepts_built_document() -> None:
    pattern = PatternCompiler().compile("html:text.html.basic")
    document = GrammarDocument(patterns=(pattern,))
    GrammarSchemaRepository().validate(document.to_dict())


def test_schema_rejects_file_types() -> None:
    payload = GrammarDocument(file_types=("js",)).to_dict()
    with pytest.raises(GrammarSchemaError) as exc_info:
        GrammarSchemaRepository().validate(payload)
    assert "fileTypes" in str(exc_info.value)


def test_schema_rejects_pattern_without_include() -> None:
    pattern = PatternCompiler().compile("html:text.html.basic").to_dict()
    pattern["patterns"] = []
    payload = GrammarDocument().to_dict()
    payload["patterns"] = [pattern]
    with pytest.raises(GrammarSchemaError) as exc_info:
        GrammarSchemaRepository().validate(payload)
    assert "patterns.0.patterns" in str(exc_info.value)


def test_schema_rejects_missing_scope_name() -> None:
    payload = GrammarDocument().to_dict()
    del payload["scopeName"]
    with pytest.raises(GrammarSchemaError):
        GrammarSchemaRepository().validate(payload)


def test_schema_is_cached_per_path() -> None:
    first = GrammarSchemaRepository().load_schema()
    second = GrammarSchemaRepository().load_schema()
    assert first is second
