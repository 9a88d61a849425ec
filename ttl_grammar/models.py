from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional


@dataclass(frozen=True)
class CacheEntry:
    digest: str
    filename: str
    path: Path


@dataclass
class Disposable:
    """Handle that releases a subscription exactly once."""

    callback: Optional[Callable[[], None]] = None
    disposed: bool = field(default=False, init=False)

    def dispose(self) -> None:
        if self.disposed:
            return
        self.disposed = True
        if self.callback is not None:
            self.callback()
