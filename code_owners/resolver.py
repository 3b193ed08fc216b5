"""Resolve path ownership against a parsed rule set."""

from __future__ import annotations

from pathlib import Path, PurePath, PureWindowsPath
from typing import Iterable, Optional, Union

from code_owners.errors import PathOutsideScopeError
from code_owners.models import AuditError, AuditReport, ResolvedOwnership, VerificationResult
from code_owners.rules.models import Rule, RuleSet

PathLike = Union[str, PurePath]


def _lexical_parts(text: str) -> Optional[list[str]]:
    parts: list[str] = []
    for part in text.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if not parts:
                return None
            parts.pop()
        else:
            parts.append(part)
    return parts


def _split_anchor(raw: str) -> tuple[Optional[str], str]:
    """Split off the drive or root of an absolute path.

    Returns ``(None, path)`` for relative paths. Both POSIX (``/x``) and
    drive-anchored Windows paths (``C:\\x``, ``\\\\server\\share\\x``) count
    as absolute; drive-relative paths such as ``C:x`` cannot be placed and raise.
    """
    text = raw.replace("\\", "/")
    drive = PureWindowsPath(raw).drive.replace("\\", "/")
    # a POSIX path may start with "//", only backslashes spell a UNC share
    if drive and (":" in drive or raw.startswith("\\\\")):
        rest = text[len(drive) :]
        if not rest.startswith("/"):
            raise PathOutsideScopeError(raw, None, "drive-relative path")
        return f"{drive}/", rest
    if text.startswith("/"):
        return "/", text
    return None, text


def normalize_path(path: PathLike, root: Optional[Path] = None) -> str:
    """Return ``path`` as a clean ``/``-separated path relative to ``root``.

    Absolute paths are only accepted below an absolute ``root`` on the same
    drive. Raises :class:`PathOutsideScopeError` for anything that cannot be
    expressed relative to the rules-file directory.
    """
    raw = str(path)
    anchor, text = _split_anchor(raw)

    if anchor is not None:
        if root is None:
            raise PathOutsideScopeError(raw, None, "absolute path without a rules-file directory")
        root_anchor, root_text = _split_anchor(str(root))
        if root_anchor is None:
            raise PathOutsideScopeError(raw, root, "rules-file directory is not absolute")
        if root_anchor != anchor:
            raise PathOutsideScopeError(raw, root)
        root_parts = _lexical_parts(root_text) or []
        parts = _lexical_parts(text)
        if parts is None or parts[: len(root_parts)] != root_parts:
            raise PathOutsideScopeError(raw, root)
        parts = parts[len(root_parts) :]
    else:
        parts = _lexical_parts(text)
        if parts is None:
            raise PathOutsideScopeError(raw, root)

    if not parts:
        raise PathOutsideScopeError(raw, root, "path names the rules-file directory itself")
    return "/".join(parts)


class OwnershipResolver:
    """Last-match-wins ownership lookups over an immutable :class:`RuleSet`."""

    def __init__(self, rule_set: RuleSet, root: Optional[Path] = None) -> None:
        self._rule_set = rule_set
        self._root = root

    @property
    def rule_set(self) -> RuleSet:
        return self._rule_set

    @property
    def root(self) -> Optional[Path]:
        return self._root

    def normalize(self, path: PathLike) -> str:
        return normalize_path(path, self._root)

    def matching_rules(self, path: PathLike) -> list[Rule]:
        normalized = self.normalize(path)
        return [rule for rule in self._rule_set.rules if rule.matches(normalized)]

    def explain(self, path: PathLike) -> ResolvedOwnership:
        normalized = self.normalize(path)
        for rule in reversed(self._rule_set.rules):
            if rule.matches(normalized):
                return ResolvedOwnership(path=normalized, owners=rule.owners, rule=rule)
        return ResolvedOwnership(path=normalized)

    def resolve(self, path: PathLike) -> list[str]:
        return list(self.explain(path).owners)

    def resolve_all(self, paths: Iterable[PathLike]) -> AuditReport:
        results: list[ResolvedOwnership] = []
        errors: list[AuditError] = []
        for path in paths:
            try:
                results.append(self.explain(path))
            except PathOutsideScopeError as exc:
                errors.append(AuditError(path=str(path), error=exc))
        return AuditReport(results=results, errors=errors)

    def verify(self, path: PathLike, candidate_owners: Iterable[str]) -> VerificationResult:
        resolved = self.explain(path)
        owned = set(resolved.owners)
        matched = tuple(dict.fromkeys(owner for owner in candidate_owners if owner in owned))
        return VerificationResult(
            path=resolved.path,
            authorized=bool(matched),
            matched_owners=matched,
            owners=resolved.owners,
        )


def resolve(path: PathLike, rule_set: RuleSet, root: Optional[Path] = None) -> list[str]:
    return OwnershipResolver(rule_set, root).resolve(path)


def verify(
    path: PathLike,
    candidate_owners: Iterable[str],
    rule_set: RuleSet,
    root: Optional[Path] = None,
) -> VerificationResult:
    return OwnershipResolver(rule_set, root).verify(path, candidate_owners)
