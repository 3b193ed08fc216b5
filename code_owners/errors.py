from pathlib import Path
from typing import Optional, Sequence


class CodeOwnersError(Exception):
    """Base user-facing application error."""


class MalformedRuleError(CodeOwnersError):
    def __init__(self, line_number: int, line: str, detail: str) -> None:
        self.line_number = line_number
        self.line = line
        self.detail = detail
        super().__init__(f"Malformed rule on line {line_number} ({detail}): {line!r}")


class RuleSetParseError(CodeOwnersError):
    def __init__(self, errors: Sequence[MalformedRuleError]) -> None:
        self.errors = tuple(errors)
        lines = "\n".join(f"  {error}" for error in self.errors)
        super().__init__(f"{len(self.errors)} malformed rule(s):\n{lines}")


class PathOutsideScopeError(CodeOwnersError):
    def __init__(self, path: str, root: Optional[Path] = None, detail: str = "") -> None:
        self.path = path
        self.root = root
        self.detail = detail or "path escapes the rules-file directory"
        where = f" (root: {root})" if root is not None else ""
        super().__init__(f"{self.detail}: {path}{where}")


class CodeownersFileError(CodeOwnersError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingCodeownersFileError(CodeownersFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing CODEOWNERS file")
