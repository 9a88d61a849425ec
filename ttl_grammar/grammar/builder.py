"""Assemble and serialize the tagged-template grammar document."""

from __future__ import annotations

import json
from typing import Iterable, Optional

from ttl_grammar.constants import GRAMMAR_SCOPE_NAME
from ttl_grammar.grammar.models import GrammarDocument
from ttl_grammar.grammar.schema import GrammarSchemaRepository
from ttl_grammar.patterns.compiler import PatternCompiler


def serialize_grammar(document: GrammarDocument) -> str:
    """Render ``document`` as JSON text.

    Output depends only on the document; the digest of this text names the
    published grammar file.
    """
    return json.dumps(document.to_dict(), indent=2, ensure_ascii=False) + "\n"


class GrammarDocumentBuilder:
    def __init__(
        self,
        compiler: Optional[PatternCompiler] = None,
        schema_repository: Optional[GrammarSchemaRepository] = None,
        scope_name: str = GRAMMAR_SCOPE_NAME,
    ) -> None:
        self.compiler = compiler or PatternCompiler()
        self.schema_repository = schema_repository or GrammarSchemaRepository()
        self.scope_name = scope_name

    def build_document(self, rule_specs: Iterable[str]) -> GrammarDocument:
        patterns = tuple(self.compiler.compile(spec) for spec in rule_specs)
        return GrammarDocument(patterns=patterns, scope_name=self.scope_name)

    def build(self, rule_specs: Iterable[str]) -> str:
        document = self.build_document(rule_specs)
        self.schema_repository.validate(document.to_dict())
        return serialize_grammar(document)
