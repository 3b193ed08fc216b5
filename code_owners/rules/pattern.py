"""Gitignore-style pattern grammar used by CODEOWNERS rules.

A pattern is tokenized into a closed set of segment and token kinds and
matched segment by segment against normalized, slash-separated relative paths:

- ``*`` matches any run of characters except ``/``;
- ``?`` matches exactly one character except ``/``;
- ``[...]`` is a character class (``!`` or ``^`` negates) that never matches ``/``;
- ``**`` as a whole segment matches zero or more path segments;
- a leading ``/`` or a ``/`` in the middle anchors the pattern to the root,
  otherwise it may match at any depth;
- a trailing ``/`` restricts the match to directories.

A pattern that matches a directory also matches everything below it. A leading
``!`` has no special meaning and is matched literally.

Matching never backtracks more than one star per segment (the same approach
as git's wildmatch), so run time stays proportional to pattern size times
path size.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PatternSyntaxError(ValueError):
    """Raised when a pattern cannot be compiled."""


class TokenKind(str, Enum):
    LITERAL = "literal"
    STAR = "star"
    QUESTION = "question"
    CHAR_CLASS = "char_class"


class SegmentKind(str, Enum):
    GLOB = "glob"
    DOUBLE_STAR = "double_star"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str = ""
    ranges: tuple[tuple[str, str], ...] = ()
    negated: bool = False

    def accepts(self, char: str) -> bool:
        """Whether a single-character token matches ``char``."""
        if char == "/":
            return False
        if self.kind == TokenKind.QUESTION:
            return True
        inside = any(low <= char <= high for low, high in self.ranges)
        return inside != self.negated


@dataclass(frozen=True)
class Segment:
    kind: SegmentKind
    tokens: tuple[Token, ...] = ()

    def matches(self, name: str) -> bool:
        units = _units(self.tokens)
        unit = 0
        position = 0
        star_unit = -1
        star_position = 0
        while position < len(name):
            if unit < len(units) and units[unit] is None:
                star_unit = unit
                star_position = position
                unit += 1
            elif unit < len(units) and _unit_accepts(units[unit], name[position]):
                unit += 1
                position += 1
            elif star_unit >= 0:
                unit = star_unit + 1
                star_position += 1
                position = star_position
            else:
                return False
        while unit < len(units) and units[unit] is None:
            unit += 1
        return unit == len(units)


@dataclass(frozen=True)
class CompiledPattern:
    source: str
    segments: tuple[Segment, ...]
    anchored: bool
    directory_only: bool

    def matches(self, path: str) -> bool:
        """Match a normalized relative path (no leading, trailing or doubled ``/``)."""
        names = path.split("/")
        count = len(names)
        positions = {0} if self.anchored else set(range(count))

        last_index = len(self.segments) - 1
        for index, segment in enumerate(self.segments):
            if not positions:
                return False
            if segment.kind == SegmentKind.DOUBLE_STAR:
                # trailing ** needs at least one segment, inner ** may match none
                start = min(positions) + (1 if index == last_index else 0)
                positions = set(range(start, count + 1))
            else:
                positions = {
                    position + 1
                    for position in positions
                    if position < count and segment.matches(names[position])
                }

        # ending before the last name means a directory above the path matched
        limit = count - 1 if self.directory_only else count
        return any(0 < position <= limit for position in positions)


def _units(tokens: tuple[Token, ...]) -> list:
    units: list = []
    for token in tokens:
        if token.kind == TokenKind.LITERAL:
            units.extend(token.value)
        elif token.kind == TokenKind.STAR:
            if not units or units[-1] is not None:
                units.append(None)
        else:
            units.append(token)
    return units


def _unit_accepts(unit, char: str) -> bool:
    if isinstance(unit, str):
        return unit == char
    return unit.accepts(char)


def _split_segments(body: str) -> list[str]:
    segments: list[str] = []
    current: list[str] = []
    index = 0
    while index < len(body):
        char = body[index]
        if char == "\\" and index + 1 < len(body):
            current.append(body[index : index + 2])
            index += 2
            continue
        if char == "/":
            segments.append("".join(current))
            current = []
        else:
            current.append(char)
        index += 1
    segments.append("".join(current))
    return [segment for segment in segments if segment]


def _read_char_class(text: str, start: int) -> tuple[Token, int] | None:
    index = start + 1
    negated = False
    if index < len(text) and text[index] in "!^":
        negated = True
        index += 1

    items: list[tuple[str, bool]] = []
    while index < len(text):
        char = text[index]
        if char == "]" and items:
            return Token(TokenKind.CHAR_CLASS, ranges=_class_ranges(items), negated=negated), index + 1
        if char == "\\" and index + 1 < len(text):
            items.append((text[index + 1], True))
            index += 2
        else:
            items.append((char, False))
            index += 1
    return None


def _class_ranges(items: list[tuple[str, bool]]) -> tuple[tuple[str, str], ...]:
    ranges: list[tuple[str, str]] = []
    index = 0
    while index < len(items):
        dash, dash_escaped = items[index + 1] if index + 1 < len(items) else ("", True)
        if index + 2 < len(items) and dash == "-" and not dash_escaped:
            low, high = items[index][0], items[index + 2][0]
            if low > high:
                raise PatternSyntaxError(f"invalid character range {low}-{high}")
            ranges.append((low, high))
            index += 3
        else:
            char = items[index][0]
            ranges.append((char, char))
            index += 1
    return tuple(ranges)


def _tokenize(segment: str) -> tuple[Token, ...]:
    tokens: list[Token] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            tokens.append(Token(TokenKind.LITERAL, "".join(literal)))
            literal.clear()

    index = 0
    while index < len(segment):
        char = segment[index]
        if char == "\\" and index + 1 < len(segment):
            literal.append(segment[index + 1])
            index += 2
        elif char == "*":
            flush()
            if not tokens or tokens[-1].kind != TokenKind.STAR:
                tokens.append(Token(TokenKind.STAR))
            index += 1
        elif char == "?":
            flush()
            tokens.append(Token(TokenKind.QUESTION))
            index += 1
        elif char == "[":
            parsed = _read_char_class(segment, index)
            if parsed is None:
                literal.append(char)
                index += 1
                continue
            flush()
            token, index = parsed
            tokens.append(token)
        else:
            literal.append(char)
            index += 1
    flush()
    return tuple(tokens)


def compile_pattern(pattern: str) -> CompiledPattern:
    if pattern.endswith("\\") and (len(pattern) - len(pattern.rstrip("\\"))) % 2 == 1:
        raise PatternSyntaxError("dangling escape at end of pattern")

    body = pattern
    directory_only = body.endswith("/")
    body = body.rstrip("/")
    leading_anchor = body.startswith("/")
    body = body.lstrip("/")

    raw_segments = _split_segments(body)
    if not raw_segments:
        raise PatternSyntaxError("pattern has no path component")

    segments = tuple(
        Segment(SegmentKind.DOUBLE_STAR)
        if raw == "**"
        else Segment(SegmentKind.GLOB, _tokenize(raw))
        for raw in raw_segments
    )
    return CompiledPattern(
        source=pattern,
        segments=segments,
        anchored=leading_anchor or len(segments) > 1,
        directory_only=directory_only,
    )
