"""Tests for the audit command."""

import json
import warnings
from pathlib import Path

import yaml

from code_owners.__main__ import cli


def test_audit_table(codeowners_file: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli, ["-c", str(codeowners_file), "audit", "app/index.js", "lib/utils.rb"]
    )

    assert result.exit_code == 0
    assert "@js-team" in result.output
    assert "nobody" in result.output
    assert "audit overview" in result.output


def test_audit_unowned_only(codeowners_file: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli,
        [
            "-c",
            str(codeowners_file),
            "audit",
            "--unowned",
            "app/index.js",
            "lib/utils.rb",
            "docs/readme.md",
            "Makefile",
        ],
    )

    assert result.exit_code == 0
    assert result.output.splitlines() == ["lib/utils.rb", "Makefile"]


def test_audit_json(codeowners_file: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli,
        [
            "-c",
            str(codeowners_file),
            "audit",
            "--format",
            "json",
            "docs/internal/plan.md",
            "lib/utils.rb",
        ],
    )

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["errors"] == []
    assert payload["results"] == [
        {
            "path": "docs/internal/plan.md",
            "owners": ["@secops"],
            "pattern": "/docs/internal/",
            "line": 4,
        },
        {"path": "lib/utils.rb", "owners": [], "pattern": None, "line": None},
    ]


def test_audit_yaml_unowned(codeowners_file: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli,
        [
            "-c",
            str(codeowners_file),
            "audit",
            "--format",
            "yaml",
            "--unowned",
            "app/index.js",
            "lib/utils.rb",
        ],
    )

    assert result.exit_code == 0
    payload = yaml.safe_load(result.output)
    assert [item["path"] for item in payload["results"]] == ["lib/utils.rb"]


def test_audit_reads_paths_from_stdin(codeowners_file: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli,
        ["-c", str(codeowners_file), "audit", "--format", "json"],
        input="app/index.js\n\n  docs/readme.md  \n",
    )

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert [item["owners"] for item in payload["results"]] == [
        ["@js-team"],
        ["@docs-team"],
    ]


def test_audit_absolute_paths(codeowners_file: Path, tmp_path: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli,
        [
            "-c",
            str(codeowners_file),
            "audit",
            "--format",
            "json",
            str(tmp_path / "docs" / "readme.md"),
        ],
    )

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["results"][0]["path"] == "docs/readme.md"
    assert payload["results"][0]["owners"] == ["@docs-team"]


def test_audit_path_outside_scope(codeowners_file: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli,
        [
            "-c",
            str(codeowners_file),
            "audit",
            "--format",
            "json",
            "../outside.js",
            "app/index.js",
        ],
    )

    assert result.exit_code == 1
    payload = json.loads(result.output)
    assert [item["path"] for item in payload["results"]] == ["app/index.js"]
    assert payload["errors"][0]["path"] == "../outside.js"


def test_audit_missing_codeowners(tmp_path: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli, ["-c", str(tmp_path / "CODEOWNERS"), "audit", "app/index.js"]
    )

    assert result.exit_code != 0
    assert "Missing CODEOWNERS file" in result.output


def test_audit_strict_rejects_malformed_rules(write_codeowners, cli_runner) -> None:
    path = write_codeowners("/ @root\n*.js @js-team\n")

    result = cli_runner.invoke(cli, ["-c", str(path), "--strict", "audit", "a.js"])

    assert result.exit_code != 0
    assert "malformed rule" in result.output


def test_audit_lenient_skips_malformed_rules(write_codeowners, cli_runner) -> None:
    path = write_codeowners("/ @root\n*.js @js-team\n")

    result = cli_runner.invoke(
        cli, ["-c", str(path), "audit", "--unowned", "a.js", "b.rb"]
    )

    assert result.exit_code == 0
    assert "b.rb" in result.output.splitlines()
    assert "a.js" not in result.output.splitlines()


def test_audit_stdin_emits_no_deprecation_warning(codeowners_file: Path, cli_runner) -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = cli_runner.invoke(
            cli,
            ["-c", str(codeowners_file), "audit", "--unowned"],
            input="lib/utils.rb\n",
        )

    assert result.exit_code == 0
    assert result.output.splitlines() == ["lib/utils.rb"]
    assert not [
        item
        for item in caught
        if issubclass(item.category, DeprecationWarning) and "Click 9" in str(item.message)
    ]
