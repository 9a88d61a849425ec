from abc import ABC, abstractmethod
from pathlib import Path


class IFileSystem(ABC):
    """Async file primitives rooted at one grammar directory."""

    @property
    @abstractmethod
    def root(self) -> Path:
        raise NotImplementedError

    def resolve(self, name: str) -> Path:
        return (self.root / name).resolve()

    @abstractmethod
    async def exists(self, name: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def list_names(self) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    async def write_text(self, name: str, text: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, name: str) -> None:
        raise NotImplementedError
