"""Repository for reading a CODEOWNERS file."""

from __future__ import annotations

import logging
from pathlib import Path

from code_owners.errors import CodeownersFileError, MissingCodeownersFileError
from code_owners.resolver import OwnershipResolver
from code_owners.rules.models import RuleSet
from code_owners.rules.parser import parse

logger = logging.getLogger(__name__)


class CodeownersRepository:
    def __init__(self, path: Path, strict: bool = False) -> None:
        self._path = path.expanduser().absolute()
        self._strict = strict

    @property
    def path(self) -> Path:
        return self._path

    @property
    def directory(self) -> Path:
        return self._path.parent

    def read_text(self) -> str:
        if not self._path.is_file():
            raise MissingCodeownersFileError(self._path)
        try:
            return self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CodeownersFileError(self._path, f"Cannot read CODEOWNERS file ({exc})") from exc

    def load(self) -> RuleSet:
        rule_set = parse(self.read_text(), strict=self._strict)
        logger.debug("Loaded %d rule(s) from %s", len(rule_set), self._path)
        return rule_set

    def load_resolver(self) -> OwnershipResolver:
        return OwnershipResolver(self.load(), root=self.directory)
