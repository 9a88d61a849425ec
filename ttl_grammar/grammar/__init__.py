from ttl_grammar.grammar.builder import GrammarDocumentBuilder, serialize_grammar
from ttl_grammar.grammar.models import GrammarDocument
from ttl_grammar.grammar.schema import GrammarSchemaRepository

__all__ = [
    "GrammarDocument",
    "GrammarDocumentBuilder",
    "GrammarSchemaRepository",
    "serialize_grammar",
]
