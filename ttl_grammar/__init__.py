from ttl_grammar.errors import (
    FileSystemError,
    GrammarError,
    GrammarSchemaError,
    InvalidLiteralError,
    InvalidPatternSpecError,
    MalformedRegexError,
    PublishError,
    RegistrationError,
    RuleSourceError,
    RuleSpecError,
)
from ttl_grammar.filesystem import LocalFileSystem
from ttl_grammar.grammar import GrammarDocument, GrammarDocumentBuilder, serialize_grammar
from ttl_grammar.models import CacheEntry, Disposable
from ttl_grammar.notifier import ConsoleNotifier
from ttl_grammar.patterns import (
    CompiledPattern,
    NullRegexValidator,
    PatternCompiler,
    PythonRegexValidator,
    ScannerRegexValidator,
)
from ttl_grammar.scheduler import DebounceScheduler
from ttl_grammar.service import TaggedTemplateGrammarService
from ttl_grammar.settings import GrammarSettings, load_settings
from ttl_grammar.sources import InMemoryRuleSource, YamlRuleSource
from ttl_grammar.store import ContentAddressStore, content_digest

__all__ = [
    "CacheEntry",
    "CompiledPattern",
    "ConsoleNotifier",
    "ContentAddressStore",
    "DebounceScheduler",
    "Disposable",
    "FileSystemError",
    "GrammarDocument",
    "GrammarDocumentBuilder",
    "GrammarError",
    "GrammarSchemaError",
    "GrammarSettings",
    "InMemoryRuleSource",
    "InvalidLiteralError",
    "InvalidPatternSpecError",
    "LocalFileSystem",
    "MalformedRegexError",
    "NullRegexValidator",
    "PatternCompiler",
    "PublishError",
    "PythonRegexValidator",
    "RegistrationError",
    "RuleSourceError",
    "RuleSpecError",
    "ScannerRegexValidator",
    "TaggedTemplateGrammarService",
    "YamlRuleSource",
    "content_digest",
    "load_settings",
    "serialize_grammar",
]
