import logging
import sys
from pathlib import Path
from typing import Any, Dict

import click
from rich.console import Console

from code_owners.constants import CODEOWNERS_FILENAME, OUTPUT_FORMATS
from code_owners.errors import CodeOwnersError, PathOutsideScopeError
from code_owners.models import AuditReport
from code_owners.resolver import OwnershipResolver
from code_owners.rules.repository import CodeownersRepository
from code_owners.tui.renderers import OwnersConsoleUI


def _format_option() -> Any:
    return click.option(
        "--format",
        "output_format",
        type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
        default="table",
        show_default=True,
        help="Output format.",
    )


def _repository_from_obj(obj: Dict[str, Any]) -> CodeownersRepository:
    return CodeownersRepository(obj["codeowners_file"], strict=obj["strict"])


def _load_resolver(repository: CodeownersRepository) -> OwnershipResolver:
    try:
        return repository.load_resolver()
    except CodeOwnersError as exc:
        raise click.ClickException(str(exc))


def _read_paths(paths: tuple[str, ...]) -> list[str]:
    if paths:
        return list(paths)
    stream = sys.stdin
    if stream.isatty():
        raise click.UsageError("No paths given (pass them as arguments or on stdin).")
    return [line.strip() for line in stream if line.strip()]


def _report_payload(report: AuditReport, unowned: bool) -> dict[str, Any]:
    items = report.unowned() if unowned else report.results
    return {
        "results": [item.as_dict() for item in items],
        "errors": [item.as_dict() for item in report.errors],
    }


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-c",
    "--codeowners-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=CODEOWNERS_FILENAME,
    show_default=True,
    help="CODEOWNERS file; paths resolve relative to its directory.",
)
@click.option("--strict", is_flag=True, help="Fail on malformed rules instead of skipping them.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, codeowners_file: Path, strict: bool, verbose: bool) -> None:
    """Resolve file ownership from a CODEOWNERS file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"codeowners_file": codeowners_file, "strict": strict}


@cli.command(help="List the owners for the given paths (read from stdin when omitted).")
@click.argument("paths", nargs=-1)
@click.option("-u", "--unowned", is_flag=True, help="Unowned paths only.")
@_format_option()
@click.pass_obj
def audit(obj: Dict[str, Any], paths: tuple[str, ...], unowned: bool, output_format: str) -> None:
    ui = OwnersConsoleUI(Console())
    repository = _repository_from_obj(obj)
    resolver = _load_resolver(repository)

    report = resolver.resolve_all(_read_paths(paths))

    if output_format != "table":
        ui.render_payload(_report_payload(report, unowned), output_format)
    elif unowned:
        ui.render_unowned(report)
    else:
        ui.render_audit(report, source=str(repository.path))

    if report.errors:
        raise click.exceptions.Exit(1)


@cli.command("verify", help="Verify ownership of a specific path.")
@click.argument("path")
@click.option(
    "-u",
    "--users",
    multiple=True,
    required=True,
    help="Verify ownership by these users or teams (repeatable).",
)
@click.pass_obj
def verify_path(obj: Dict[str, Any], path: str, users: tuple[str, ...]) -> None:
    ui = OwnersConsoleUI(Console())
    resolver = _load_resolver(_repository_from_obj(obj))

    try:
        result = resolver.verify(path, users)
    except PathOutsideScopeError as exc:
        raise click.ClickException(str(exc))

    ui.render_verification(result)
    if not result.authorized:
        raise click.exceptions.Exit(1)


@cli.command(help="List the parsed ownership rules.")
@_format_option()
@click.pass_obj
def rules(obj: Dict[str, Any], output_format: str) -> None:
    ui = OwnersConsoleUI(Console())
    repository = _repository_from_obj(obj)
    resolver = _load_resolver(repository)
    rule_set = resolver.rule_set

    if output_format == "table":
        ui.render_rules(rule_set, source=str(repository.path))
        return

    payload = {
        "rules": [
            {
                "order": rule.source_order,
                "line": rule.line_number,
                "pattern": rule.pattern,
                "owners": list(rule.owners),
            }
            for rule in rule_set.rules
        ],
        "owners": rule_set.owners(),
        "valid": rule_set.is_valid(),
        "skipped": [str(error) for error in rule_set.errors],
    }
    ui.render_payload(payload, output_format)


def main() -> int:
    try:
        code = cli(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return 2
    except click.exceptions.Abort:
        return 1
    # click returns the code of a raised Exit instead of propagating it
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
