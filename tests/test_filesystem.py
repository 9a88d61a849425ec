"""Tests for the local grammar directory."""

from pathlib import Path

import pytest

from ttl_grammar.errors import FileSystemError
from ttl_grammar.filesystem import LocalFileSystem


@pytest.mark.asyncio
async def test_write_exists_list_delete(tmp_path: Path) -> None:
    fs = LocalFileSystem(tmp_path / "grammars")
    assert await fs.list_names() == []
    assert await fs.exists("ttl-a.json") is False

    await fs.write_text("ttl-b.json", "b")
    await fs.write_text("ttl-a.json", "a")
    assert await fs.exists("ttl-a.json") is True
    assert await fs.list_names() == ["ttl-a.json", "ttl-b.json"]
    assert (tmp_path / "grammars" / "ttl-a.json").read_text(encoding="utf-8") == "a"

    await fs.delete("ttl-a.json")
    assert await fs.list_names() == ["ttl-b.json"]


@pytest.mark.asyncio
async def test_delete_missing_file_is_silent(tmp_path: Path) -> None:
    fs = LocalFileSystem(tmp_path)
    await fs.delete("missing.json")


@pytest.mark.asyncio
async def test_directory_is_not_a_grammar_file(tmp_path: Path) -> None:
    (tmp_path / "ttl-dir.json").mkdir()
    assert await LocalFileSystem(tmp_path).exists("ttl-dir.json") is False


@pytest.mark.asyncio
async def test_write_failure_raises_file_system_error(tmp_path: Path) -> None:
    blocker = tmp_path / "grammars"
    blocker.write_text("not a directory", encoding="utf-8")
    fs = LocalFileSystem(blocker)
    with pytest.raises(FileSystemError) as exc_info:
        await fs.write_text("ttl-a.json", "a")
    assert exc_info.value.path == blocker.resolve() / "ttl-a.json"


def test_resolve_is_absolute(tmp_path: Path) -> None:
    fs = LocalFileSystem(tmp_path)
    assert fs.resolve("ttl-a.json") == tmp_path.resolve() / "ttl-a.json"
