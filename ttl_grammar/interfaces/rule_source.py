from abc import ABC, abstractmethod
from typing import Callable

from ttl_grammar.models import Disposable


class IRuleSource(ABC):
    @abstractmethod
    def rule_specs(self) -> list[str]:
        """Return the current rule strings, read fresh on every call."""

    @abstractmethod
    def observe(self, callback: Callable[[], None]) -> Disposable:
        raise NotImplementedError
