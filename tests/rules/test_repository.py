"""Tests for CodeownersRepository."""

from pathlib import Path

import pytest

from code_owners.errors import MissingCodeownersFileError, RuleSetParseError
from code_owners.rules.repository import CodeownersRepository


def test_missing_file(tmp_path: Path) -> None:
    repository = CodeownersRepository(tmp_path / "CODEOWNERS")

    with pytest.raises(MissingCodeownersFileError) as exc_info:
        repository.load()
    assert exc_info.value.path == tmp_path / "CODEOWNERS"


def test_directory_is_not_a_rules_file(tmp_path: Path) -> None:
    (tmp_path / "CODEOWNERS").mkdir()

    with pytest.raises(MissingCodeownersFileError):
        CodeownersRepository(tmp_path / "CODEOWNERS").read_text()


def test_load_parses_rules(codeowners_file: Path) -> None:
    rule_set = CodeownersRepository(codeowners_file).load()

    assert [rule.pattern for rule in rule_set.rules] == [
        "*.js",
        "/docs/",
        "/docs/internal/",
    ]


def test_resolver_is_anchored_at_file_directory(write_codeowners, tmp_path: Path) -> None:
    path = write_codeowners("/src/ @core\n", relative=".github/CODEOWNERS")
    repository = CodeownersRepository(path)
    resolver = repository.load_resolver()

    assert repository.directory == tmp_path / ".github"
    assert resolver.root == tmp_path / ".github"
    assert resolver.resolve(str(tmp_path / ".github" / "src" / "a.py")) == ["@core"]
    assert resolver.resolve("src/a.py") == ["@core"]


def test_reload_replaces_rule_set(write_codeowners) -> None:
    path = write_codeowners("* @before\n")
    repository = CodeownersRepository(path)
    before = repository.load()

    path.write_text("* @after\n", encoding="utf-8")
    after = repository.load()

    assert before.rules[0].owners == ("@before",)
    assert after.rules[0].owners == ("@after",)
    assert before is not after


def test_strict_repository_raises(write_codeowners) -> None:
    path = write_codeowners("/ @root\n*.py @py\n")

    with pytest.raises(RuleSetParseError):
        CodeownersRepository(path, strict=True).load()
    assert len(CodeownersRepository(path).load()) == 1
