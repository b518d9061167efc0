"""Tests for wildcard pattern compilation."""

from __future__ import annotations

import re

import pytest

from skillgate.core.policy import (
    ExactPattern,
    MatchAll,
    RegexPattern,
    compile_pattern,
    compile_patterns,
    matches_any,
    normalize_tool_name,
)


class TestCompilePattern:
    """Each input compiles to exactly one variant."""

    @pytest.mark.parametrize("raw", ["*", " * "])
    def test_wildcard_is_match_all(self, raw: str) -> None:
        assert compile_pattern(raw) == MatchAll()

    def test_plain_name_is_exact(self) -> None:
        assert compile_pattern("  Read ") == ExactPattern("read")

    def test_empty_is_exact_empty(self) -> None:
        assert compile_pattern("   ") == ExactPattern("")

    def test_wildcard_pattern_is_regex(self) -> None:
        compiled = compile_pattern("exec*")
        assert isinstance(compiled, RegexPattern)
        assert compiled.regex.pattern == "^exec.*$"

    def test_double_wildcard(self) -> None:
        assert isinstance(compile_pattern("**"), RegexPattern)
        assert compile_pattern("**").matches("anything")

    def test_deterministic_and_case_insensitive(self) -> None:
        upper = compile_pattern("EXEC*")
        lower = compile_pattern("exec*")
        assert isinstance(upper, RegexPattern) and isinstance(lower, RegexPattern)
        assert upper.regex.pattern == lower.regex.pattern


class TestMatching:

    def test_match_all(self) -> None:
        assert MatchAll().matches("")
        assert MatchAll().matches("whatever")

    def test_exact(self) -> None:
        pattern = compile_pattern("read")
        assert pattern.matches("read")
        assert not pattern.matches("reader")

    def test_literal_dot_not_wildcard(self) -> None:
        pattern = compile_pattern("a.b*")
        assert pattern.matches("a.bcd")
        assert not pattern.matches("axbcd")

    @pytest.mark.parametrize("special", ["+", "?", "(", ")", "[", "]", "{", "}", "|", "^", "$", "\\"])
    def test_other_metacharacters_literal(self, special: str) -> None:
        pattern = compile_pattern(f"x{special}*")
        assert pattern.matches(f"x{special}tail")
        assert not pattern.matches("xztail")

    def test_anchored_both_ends(self) -> None:
        pattern = compile_pattern("mem*get")
        assert pattern.matches("memory_get")
        assert not pattern.matches("memory_get_all")
        assert not pattern.matches("my_memory_get")

    def test_infix_wildcard(self) -> None:
        assert compile_pattern("*_search").matches("memory_search")


def test_compile_patterns_preserves_order() -> None:
    assert compile_patterns(["read", "*"]) == [ExactPattern("read"), MatchAll()]


def test_matches_any() -> None:
    compiled = compile_patterns(["read", "mem*"])
    assert matches_any("memory_save", compiled)
    assert not matches_any("exec", compiled)
    assert not matches_any("exec", [])


def test_normalize_tool_name() -> None:
    assert normalize_tool_name("  ExEc ") == "exec"


def test_regex_flags_are_plain() -> None:
    compiled = compile_pattern("a*")
    assert isinstance(compiled, RegexPattern)
    assert not compiled.regex.flags & re.IGNORECASE


def test_compilation_keeps_no_cache() -> None:
    assert not hasattr(compile_pattern, "cache_info")
    first = compile_pattern("exec*")
    second = compile_pattern("exec*")
    assert first is not second
    assert first.regex.pattern == second.regex.pattern
