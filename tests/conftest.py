import sys
from pathlib import Path

import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

from ttl_grammar.errors import FileSystemError  # noqa: E402
from ttl_grammar.filesystem import LocalFileSystem  # noqa: E402
from ttl_grammar.interfaces.notifier import INotifier  # noqa: E402
from ttl_grammar.interfaces.registry import IGrammarRegistry  # noqa: E402


class RecordingNotifier(INotifier):
    def __init__(self) -> None:
        self.infos: list[tuple[str, str]] = []
        self.warnings: list[tuple[str, str]] = []

    def info(self, source: str, detail: str, dismissable: bool = True) -> None:
        self.infos.append((source, detail))

    def warning(self, source: str, detail: str, dismissable: bool = True) -> None:
        self.warnings.append((source, detail))


class FakeGrammarRegistry(IGrammarRegistry):
    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []
        self.active: dict[str, Path] = {}
        self.fail_load = False
        self.fail_remove = False

    @property
    def loaded(self) -> list[str]:
        return [value for kind, value in self.events if kind == "load"]

    async def load(self, path: Path) -> None:
        if self.fail_load:
            raise RuntimeError("grammar rejected")
        assert path.is_file()
        self.events.append(("load", str(path)))
        self.active["languagebabel.ttlextension"] = path

    async def remove_for_scope(self, scope_name: str) -> None:
        if self.fail_remove:
            raise RuntimeError("registry busy")
        self.events.append(("remove", scope_name))
        self.active.pop(scope_name, None)


class CountingFileSystem(LocalFileSystem):
    def __init__(self, root: Path) -> None:
        super().__init__(root)
        self.writes: list[str] = []
        self.fail_write = False

    async def write_text(self, name: str, text: str) -> None:
        if self.fail_write:
            raise FileSystemError(self.resolve(name), "Unable to write grammar (disk full)")
        self.writes.append(name)
        await super().write_text(name, text)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def registry() -> FakeGrammarRegistry:
    return FakeGrammarRegistry()


@pytest.fixture
def grammars_dir(tmp_path: Path) -> Path:
    path = tmp_path / "grammars"
    path.mkdir()
    return path


@pytest.fixture
def filesystem(grammars_dir: Path) -> CountingFileSystem:
    return CountingFileSystem(grammars_dir)


@pytest.fixture
def generated_files(grammars_dir: Path):
    def _list() -> list[str]:
        return sorted(
            child.name
            for child in grammars_dir.iterdir()
            if child.name.startswith("ttl-") and child.suffix == ".json"
        )

    return _list
