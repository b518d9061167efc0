"""Compiled tool-name patterns.

A pattern compiles to exactly one of three forms:

- ``MatchAll`` -- the pattern is ``*``. Matches every name.
- ``ExactPattern`` -- no ``*`` anywhere. A plain string comparison with no
  regex engine involved.
- ``RegexPattern`` -- contains ``*``. Built by escaping the whole normalized
  pattern first, then turning each escaped ``\\*`` into ``.*``, then
  anchoring with ``^...$``. Escaping before un-escaping keeps every other
  character literal: ``a.b*`` matches ``a.bcd`` but never ``axbcd``.

Patterns and names are compared after trimming and lower-casing.
Compilation is pure and runs on every call; nothing is kept between calls.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Union

WILDCARD = "*"


@dataclass(frozen=True)
class MatchAll:
    """Matches every tool name."""

    def matches(self, name: str) -> bool:
        return True


@dataclass(frozen=True)
class ExactPattern:
    """Matches one normalized tool name."""

    value: str

    def matches(self, name: str) -> bool:
        return name == self.value


@dataclass(frozen=True)
class RegexPattern:
    """Matches names against an anchored wildcard regex."""

    regex: re.Pattern[str]

    def matches(self, name: str) -> bool:
        return self.regex.fullmatch(name) is not None


CompiledPattern = Union[MatchAll, ExactPattern, RegexPattern]


def normalize_tool_name(name: str) -> str:
    """Trim and lower-case a tool name or pattern for comparison."""
    return name.strip().lower()


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile one allow/deny pattern.

    Examples:
        >>> compile_pattern("*")
        MatchAll()
        >>> compile_pattern(" Exec ")
        ExactPattern(value='exec')
        >>> compile_pattern("exec*").matches("exec_python")
        True
    """
    normalized = normalize_tool_name(pattern)
    if normalized == WILDCARD:
        return MatchAll()
    if WILDCARD not in normalized:
        return ExactPattern(value=normalized)
    escaped = re.escape(normalized)
    body = escaped.replace(re.escape(WILDCARD), ".*")
    return RegexPattern(regex=re.compile(f"^{body}$", re.DOTALL))


def compile_patterns(patterns: Iterable[str]) -> list[CompiledPattern]:
    """Compile each pattern, preserving order."""
    return [compile_pattern(p) for p in patterns]


def matches_any(name: str, patterns: Iterable[CompiledPattern]) -> bool:
    """True if the normalized ``name`` matches at least one compiled pattern."""
    return any(pattern.matches(name) for pattern in patterns)
