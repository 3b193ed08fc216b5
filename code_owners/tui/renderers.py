import json
from typing import Any

import yaml
from rich.console import Console

from code_owners.models import AuditReport, VerificationResult
from code_owners.rules.models import RuleSet
from code_owners.tui.panels import UIStyle, bullet_note, section
from code_owners.tui.tables import AuditTable, RulesTable


class OwnersConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_payload(self, payload: Any, output_format: str) -> None:
        if output_format == "yaml":
            text = yaml.safe_dump(payload, default_flow_style=False, sort_keys=False).rstrip()
        else:
            text = json.dumps(payload, indent=2)
        self.console.out(text)

    def render_audit(self, report: AuditReport, source: str) -> None:
        self.console.print(section("audit overview", AuditTable.summary_block(report, source=source)))
        if report.results:
            self.console.print(
                section("owners", AuditTable.ownership_table(report.results), style=UIStyle.CYAN)
            )
        else:
            self.console.print(section("owners", "No paths given.", style=UIStyle.DIM))
        self.render_errors([str(item.error) for item in report.errors])

    def render_unowned(self, report: AuditReport) -> None:
        for item in report.unowned():
            self.console.out(item.path)
        self.render_errors([str(item.error) for item in report.errors])

    def render_verification(self, result: VerificationResult) -> None:
        if not result.authorized:
            self.console.out(f"None of the users/teams specified own the path {result.path}")
            return
        for owner in result.matched_owners:
            self.console.out(f"{result.path}    {owner}")

    def render_rules(self, rule_set: RuleSet, source: str) -> None:
        if rule_set.rules:
            self.console.print(
                section(
                    "rules",
                    RulesTable.rules_table(rule_set),
                    style=UIStyle.CYAN,
                    subtitle=source,
                )
            )
            owners = rule_set.owners()
            self.console.print(
                section(
                    f"owners ({len(owners)})",
                    " ".join(owners) or "No owners declared.",
                    style=UIStyle.BLUE,
                )
            )
        else:
            self.console.print(section("rules", "No rules defined.", style=UIStyle.DIM))
        if not rule_set.is_valid():
            self.console.print(
                bullet_note("skipped", [str(error) for error in rule_set.errors], style=UIStyle.YELLOW)
            )

    def render_errors(self, errors: list[str]) -> None:
        if errors:
            self.console.print(bullet_note("errors", errors, style=UIStyle.RED))
