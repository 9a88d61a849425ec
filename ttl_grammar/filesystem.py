import asyncio
import logging
from pathlib import Path

from ttl_grammar.errors import FileSystemError
from ttl_grammar.interfaces.filesystem import IFileSystem

logger = logging.getLogger(__name__)


class LocalFileSystem(IFileSystem):
    """Grammar directory on the local disk.

    Blocking calls run in a worker thread so the event loop keeps serving
    other callbacks while a publish is in flight.
    """

    def __init__(self, root: Path) -> None:
        self._root = root.resolve()

    @property
    def root(self) -> Path:
        return self._root

    async def exists(self, name: str) -> bool:
        return await asyncio.to_thread(self.resolve(name).is_file)

    async def list_names(self) -> list[str]:
        return await asyncio.to_thread(self._list_names)

    async def write_text(self, name: str, text: str) -> None:
        await asyncio.to_thread(self._write_text, self.resolve(name), text)

    async def delete(self, name: str) -> None:
        await asyncio.to_thread(self._delete, self.resolve(name))

    def _list_names(self) -> list[str]:
        if not self._root.exists():
            return []
        try:
            return sorted(child.name for child in self._root.iterdir())
        except OSError as exc:
            raise FileSystemError(self._root, f"Unable to list grammars ({exc})") from exc

    @staticmethod
    def _write_text(path: Path, text: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise FileSystemError(path, f"Unable to write grammar ({exc})") from exc

    @staticmethod
    def _delete(path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise FileSystemError(path, f"Unable to delete grammar ({exc})") from exc
        logger.debug("Deleted %s", path)
