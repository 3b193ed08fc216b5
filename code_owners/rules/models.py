"""Ownership rule data models."""

from __future__ import annotations

from dataclasses import dataclass, field

from code_owners.errors import MalformedRuleError
from code_owners.rules.pattern import CompiledPattern


@dataclass(frozen=True)
class Rule:
    pattern: str
    owners: tuple[str, ...]
    source_order: int
    line_number: int
    compiled: CompiledPattern = field(compare=False, repr=False)

    def matches(self, path: str) -> bool:
        return self.compiled.matches(path)


@dataclass(frozen=True)
class RuleSet:
    rules: tuple[Rule, ...] = ()
    errors: tuple[MalformedRuleError, ...] = ()

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self):
        return iter(self.rules)

    def is_valid(self) -> bool:
        return not self.errors

    def owners(self) -> list[str]:
        """Every distinct owner token, in order of first appearance."""
        seen: dict[str, None] = {}
        for rule in self.rules:
            for owner in rule.owners:
                seen.setdefault(owner, None)
        return list(seen)
