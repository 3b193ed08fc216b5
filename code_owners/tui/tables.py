from rich.table import Column, Table
from rich.text import Text

from code_owners.constants import UNOWNED_LABEL
from code_owners.models import AuditReport, ResolvedOwnership
from code_owners.rules.models import RuleSet
from code_owners.tui.panels import UIStyle


class AuditTable:
    @staticmethod
    def summary_block(report: AuditReport, source: str) -> Table:
        summary = report.summary()
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Rules file", source)
        for key in ("paths", "owned", "unowned", "errors"):
            table.add_row(key.capitalize(), str(summary[key]))
        return table

    @staticmethod
    def ownership_table(items: list[ResolvedOwnership]) -> Table:
        table = Table(
            Column(header="Path", overflow="fold"),
            Column(header="Owners", overflow="fold"),
            Column(header="Pattern", overflow="ellipsis", max_width=40),
            Column(header="Line", width=6, justify="right"),
            expand=True,
            header_style="bold",
        )
        for item in items:
            if item.is_owned:
                owners = Text(" ".join(item.owners))
            else:
                owners = Text(UNOWNED_LABEL, style=UIStyle.YELLOW.value)
            line = str(item.rule.line_number) if item.rule is not None else ""
            table.add_row(Text(item.path), owners, Text(item.pattern or ""), line)
        return table


class RulesTable:
    @staticmethod
    def rules_table(rule_set: RuleSet) -> Table:
        table = Table(
            Column(header="#", width=5, justify="right"),
            Column(header="Line", width=6, justify="right"),
            Column(header="Pattern", overflow="fold"),
            Column(header="Owners", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for rule in rule_set.rules:
            owners = (
                Text(" ".join(rule.owners))
                if rule.owners
                else Text("(explicitly unowned)", style=UIStyle.DIM.value)
            )
            table.add_row(str(rule.source_order), str(rule.line_number), Text(rule.pattern), owners)
        return table
