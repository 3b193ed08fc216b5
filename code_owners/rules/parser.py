"""Parse CODEOWNERS text into an ordered rule set."""

from __future__ import annotations

import logging
import re

from code_owners.errors import MalformedRuleError, RuleSetParseError
from code_owners.rules.models import Rule, RuleSet
from code_owners.rules.pattern import PatternSyntaxError, compile_pattern

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def split_line(line: str) -> tuple[str, list[str]]:
    """Split a rule line into its pattern and owner tokens.

    The pattern ends at the first unescaped whitespace; ``\\ `` keeps a literal
    space in the pattern. Other escapes are left for the pattern compiler.
    """
    line = line.lstrip()
    chars: list[str] = []
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\" and index + 1 < len(line):
            following = line[index + 1]
            chars.append(following if following.isspace() else line[index : index + 2])
            index += 2
            continue
        if char.isspace():
            break
        chars.append(char)
        index += 1
    return "".join(chars), line[index:].split()


def _parse_line(line_number: int, line: str, source_order: int) -> Rule:
    pattern, owners = split_line(line)
    if not pattern:
        raise MalformedRuleError(line_number, line, "empty pattern")
    try:
        compiled = compile_pattern(pattern)
    except PatternSyntaxError as exc:
        raise MalformedRuleError(line_number, line, str(exc)) from exc
    return Rule(
        pattern=pattern,
        owners=tuple(owners),
        source_order=source_order,
        line_number=line_number,
        compiled=compiled,
    )


def parse(text: str, strict: bool = False) -> RuleSet:
    """Parse CODEOWNERS text.

    Blank lines and ``#`` comments are skipped. Malformed lines are skipped
    with a warning, or collected and raised together as
    :class:`RuleSetParseError` when ``strict`` is set.
    """
    rules: list[Rule] = []
    errors: list[MalformedRuleError] = []

    for line_number, line in enumerate(_LINE_BREAK_RE.split(text), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        try:
            rules.append(_parse_line(line_number, line, len(rules) + 1))
        except MalformedRuleError as exc:
            errors.append(exc)
            if not strict:
                logger.warning("Skipping %s", exc)

    if strict and errors:
        raise RuleSetParseError(errors)

    logger.debug("Parsed %d rule(s), skipped %d line(s)", len(rules), len(errors))
    return RuleSet(rules=tuple(rules), errors=tuple(errors))
