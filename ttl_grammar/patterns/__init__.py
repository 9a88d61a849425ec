from ttl_grammar.patterns.compiler import PatternCompiler, escape_literal
from ttl_grammar.patterns.models import CompiledPattern
from ttl_grammar.patterns.validators import (
    NullRegexValidator,
    PythonRegexValidator,
    ScannerRegexValidator,
)

__all__ = [
    "CompiledPattern",
    "NullRegexValidator",
    "PatternCompiler",
    "PythonRegexValidator",
    "ScannerRegexValidator",
    "escape_literal",
]
