from dataclasses import dataclass
from typing import Any, Optional

from code_owners.rules.models import Rule


@dataclass(frozen=True)
class ResolvedOwnership:
    path: str
    owners: tuple[str, ...] = ()
    rule: Optional[Rule] = None

    @property
    def is_owned(self) -> bool:
        return bool(self.owners)

    @property
    def pattern(self) -> Optional[str]:
        return self.rule.pattern if self.rule is not None else None

    def as_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "owners": list(self.owners),
            "pattern": self.pattern,
            "line": self.rule.line_number if self.rule is not None else None,
        }


@dataclass(frozen=True)
class VerificationResult:
    path: str
    authorized: bool
    matched_owners: tuple[str, ...] = ()
    owners: tuple[str, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "authorized": self.authorized,
            "matched_owners": list(self.matched_owners),
            "owners": list(self.owners),
        }


@dataclass(frozen=True)
class AuditError:
    path: str
    error: Exception

    def as_dict(self) -> dict[str, str]:
        return {"path": self.path, "error": str(self.error)}


@dataclass
class AuditReport:
    results: list[ResolvedOwnership]
    errors: list[AuditError]

    def unowned(self) -> list[ResolvedOwnership]:
        return [item for item in self.results if not item.is_owned]

    def summary(self) -> dict[str, int]:
        unowned = len(self.unowned())
        return {
            "paths": len(self.results),
            "owned": len(self.results) - unowned,
            "unowned": unowned,
            "errors": len(self.errors),
        }
