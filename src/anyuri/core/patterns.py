r"""
Rewrite Rules
=============
Compiles (pattern, replacement) pairs for the pattern resolver.

Patterns are written in delimited form with optional trailing modifiers:

    /test/          matches "test" anywhere
    #^urn:foo:#i    case-insensitive, "#" as delimiter
    {^(\w+):}       bracket pairs (), [], {}, <> may delimit as well

The expression ends at the first unescaped closing delimiter. Bracket
delimiters may nest inside the expression.

Modifiers: i (IGNORECASE), m (MULTILINE), s (DOTALL), x (VERBOSE), u (no-op).

Replacements may reference groups as $1, ${1} or \1 (0-99). A reference to
a group that did not take part in the match, or does not exist, expands to
the empty string. A doubled backslash yields a literal backslash. A None
replacement is the empty string.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Mapping, Tuple, Union

from anyuri.errors import InvalidPatternError

RuleTable = Union[Mapping[str, str], Iterable[Tuple[str, str]]]

_BRACKET_DELIMITERS = {"(": ")", "[": "]", "{": "}", "<": ">"}

_MODIFIERS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "u": 0,
}

_REFERENCE = re.compile(r'\\\\|\$\{(\d{1,2})\}|\$(\d{1,2})|\\(\d{1,2})')


def _find_closing(text: str, opening: str, closing: str) -> int:
    """Index of the first unescaped closing delimiter, or -1."""
    depth = 0
    index = 1
    while index < len(text):
        char = text[index]
        if char == "\\":
            index += 2
            continue
        if char == closing:
            if depth == 0:
                return index
            depth -= 1
        elif char == opening:
            # only reachable for bracket pairs
            depth += 1
        index += 1
    return -1


def _as_text(value) -> str:
    return "" if value is None else str(value)


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """
    Compile a delimited pattern such as "/foo:(baz)/i".

    Raises:
        InvalidPatternError: If delimiters, modifiers or the expression are invalid
    """
    stripped = pattern.strip()
    if not stripped:
        raise InvalidPatternError("Empty pattern")

    opening = stripped[0]
    if opening.isalnum() or opening == "\\":
        raise InvalidPatternError(
            f"Delimiter must not be alphanumeric or backslash: {pattern!r}"
        )

    closing = _BRACKET_DELIMITERS.get(opening, opening)
    end = _find_closing(stripped, opening, closing)
    if end < 0:
        raise InvalidPatternError(f"No ending delimiter {closing!r} found: {pattern!r}")

    body, modifiers = stripped[1:end], stripped[end + 1:]

    flags = 0
    for modifier in modifiers:
        if modifier not in _MODIFIERS:
            raise InvalidPatternError(f"Unknown modifier {modifier!r}: {pattern!r}")
        flags |= _MODIFIERS[modifier]

    try:
        return re.compile(body, flags)
    except re.error as e:
        raise InvalidPatternError(f"Invalid pattern {pattern!r}: {e}") from e


def compile_replacement(replacement: str) -> Callable[[re.Match[str]], str]:
    """Turn a replacement template into a callable usable with Pattern.sub()."""
    chunks: List[Union[str, int]] = []
    position = 0

    for reference in _REFERENCE.finditer(replacement):
        chunks.append(replacement[position:reference.start()])
        index = next((g for g in reference.groups() if g is not None), None)
        chunks.append("\\" if index is None else int(index))
        position = reference.end()

    chunks.append(replacement[position:])

    def expand(match: re.Match[str]) -> str:
        pieces = []
        for chunk in chunks:
            if isinstance(chunk, int):
                value = match.group(chunk) if chunk <= match.re.groups else None
                pieces.append(value or "")
            else:
                pieces.append(chunk)
        return "".join(pieces)

    return expand


@dataclass(frozen=True)
class PatternRule:
    """
    A compiled rewrite rule.

    Attributes:
        pattern: The delimited pattern as configured
        replacement: The replacement template as configured
    """

    pattern: str
    replacement: str
    regex: re.Pattern[str] = field(compare=False, repr=False)
    expand: Callable[[re.Match[str]], str] = field(compare=False, repr=False)

    @classmethod
    def compile(cls, pattern: str, replacement: str) -> "PatternRule":
        pattern = _as_text(pattern)
        replacement = _as_text(replacement)
        return cls(
            pattern=pattern,
            replacement=replacement,
            regex=compile_pattern(pattern),
            expand=compile_replacement(replacement),
        )

    def matches(self, lexical: str) -> bool:
        return self.regex.search(lexical) is not None

    def apply(self, lexical: str) -> str:
        """Replace every match in lexical."""
        return self.regex.sub(self.expand, lexical)


def compile_rules(rules: RuleTable) -> Tuple[PatternRule, ...]:
    """
    Compile a rule table, keeping its order.

    Args:
        rules: Mapping of pattern -> replacement, or iterable of pairs
    """
    items = rules.items() if isinstance(rules, Mapping) else rules
    return tuple(PatternRule.compile(pattern, replacement) for pattern, replacement in items)
