from ttl_grammar.interfaces.filesystem import IFileSystem
from ttl_grammar.interfaces.notifier import INotifier
from ttl_grammar.interfaces.registry import IGrammarRegistry
from ttl_grammar.interfaces.rule_source import IRuleSource
from ttl_grammar.interfaces.validator import IRegexValidator

__all__ = [
    "IFileSystem",
    "IGrammarRegistry",
    "INotifier",
    "IRegexValidator",
    "IRuleSource",
]
