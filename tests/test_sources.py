"""Tests for rule sources."""

from pathlib import Path

import pytest

from ttl_grammar.errors import RuleSourceError
from ttl_grammar.sources import InMemoryRuleSource, YamlRuleSource


def test_in_memory_source_notifies_observers() -> None:
    source = InMemoryRuleSource(["a:source.a"])
    seen: list[list[str]] = []
    subscription = source.observe(lambda: seen.append(source.rule_specs()))

    source.set_rules(["b:source.b"])
    subscription.dispose()
    source.set_rules(["c:source.c"])

    assert seen == [["b:source.b"]]
    assert source.rule_specs() == ["c:source.c"]


def test_in_memory_source_returns_copies() -> None:
    source = InMemoryRuleSource(["a:source.a"])
    source.rule_specs().append("b:source.b")
    assert source.rule_specs() == ["a:source.a"]


def test_dispose_is_idempotent() -> None:
    source = InMemoryRuleSource()
    subscription = source.observe(lambda: None)
    subscription.dispose()
    subscription.dispose()
    assert subscription.disposed is True


def test_yaml_source_reads_fresh_values(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text(
        "taggedTemplateGrammar:\n  - 'html:text.html.basic'\n", encoding="utf-8"
    )
    source = YamlRuleSource(path)
    assert source.rule_specs() == ["html:text.html.basic"]

    path.write_text(
        "taggedTemplateGrammar:\n"
        "  - 'html:text.html.basic'\n"
        "  - '\"(?:css|style)\":source.css'\n",
        encoding="utf-8",
    )
    assert source.rule_specs() == ["html:text.html.basic", '"(?:css|style)":source.css']


def test_yaml_source_missing_file_or_key(tmp_path: Path) -> None:
    assert YamlRuleSource(tmp_path / "missing.yaml").rule_specs() == []
    path = tmp_path / "settings.yaml"
    path.write_text("other: 1\n", encoding="utf-8")
    assert YamlRuleSource(path).rule_specs() == []


def test_yaml_source_rejects_non_string_entries(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("taggedTemplateGrammar:\n  - 42\n", encoding="utf-8")
    with pytest.raises(RuleSourceError) as exc_info:
        YamlRuleSource(path).rule_specs()
    assert "42" in str(exc_info.value)


def test_yaml_source_rejects_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("taggedTemplateGrammar: [unclosed\n", encoding="utf-8")
    with pytest.raises(RuleSourceError):
        YamlRuleSource(path).rule_specs()


def test_yaml_source_custom_key_and_notify(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("rules:\n  - 'sql:source.sql'\n", encoding="utf-8")
    source = YamlRuleSource(path, key="rules")
    calls: list[int] = []
    source.observe(lambda: calls.append(1))
    source.notify_changed()
    assert calls == [1]
    assert source.rule_specs() == ["sql:source.sql"]
