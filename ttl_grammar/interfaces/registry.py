from abc import ABC, abstractmethod
from pathlib import Path


class IGrammarRegistry(ABC):
    @abstractmethod
    async def load(self, path: Path) -> None:
        """Load and activate the grammar at ``path``; raise on failure."""

    @abstractmethod
    async def remove_for_scope(self, scope_name: str) -> None:
        raise NotImplementedError
