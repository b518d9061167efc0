"""Tests for slash-command synthesis."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillgate.core.commands import (
    COMMAND_FALLBACK,
    CommandSpec,
    build_command_specs,
    resolve_unique_command_name,
    sanitize_command_name,
)
from skillgate.core.invocation import InvocationPolicy, SkillEntry
from skillgate.parsers.base import Skill


def _entry(name: str, description: str = "desc", user_invocable: bool = True) -> SkillEntry:
    skill = Skill(
        name=name,
        description=description,
        file_path=Path(f"/skills/{name}.md"),
        base_dir=Path("/skills"),
        source="workspace",
    )
    return SkillEntry(skill=skill, invocation=InvocationPolicy(user_invocable=user_invocable))


class TestSanitizeCommandName:

    @pytest.mark.parametrize(("raw", "expected"), [
        ("Deploy Service", "deploy_service"),
        ("deploy_service", "deploy_service"),
        ("  --Release--Notes!! ", "release_notes"),
        ("a__b___c", "a_b_c"),
        ("Ünïcode Skill", "n_code_skill"),
        ("123", "123"),
    ])
    def test_examples(self, raw: str, expected: str) -> None:
        assert sanitize_command_name(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "!!!", "___", "日本語"])
    def test_degenerate_input_uses_fallback(self, raw: str) -> None:
        assert sanitize_command_name(raw) == COMMAND_FALLBACK == "skill"

    def test_truncated_to_32(self) -> None:
        assert sanitize_command_name("x" * 50) == "x" * 32


class TestResolveUniqueCommandName:

    def test_free_name_returned_as_is(self) -> None:
        assert resolve_unique_command_name("deploy", set()) == "deploy"

    def test_case_insensitive_collision(self) -> None:
        assert resolve_unique_command_name("Deploy", {"deploy"}) == "Deploy_2"

    def test_counts_up(self) -> None:
        used = {"deploy", "deploy_2", "deploy_3"}
        assert resolve_unique_command_name("deploy", used) == "deploy_4"

    def test_suffix_fits_in_32_chars(self) -> None:
        base = "a" * 32
        result = resolve_unique_command_name(base, {base})
        assert result == "a" * 30 + "_2"
        assert len(result) == 32

    def test_wider_suffix_truncates_more(self) -> None:
        base = "b" * 32
        used = {base} | {f"{'b' * 30}_{i}" for i in range(2, 10)}
        result = resolve_unique_command_name(base, used)
        assert result == "b" * 29 + "_10"

    def test_overflow_falls_back_to_x(self) -> None:
        used = {"deploy"} | {f"deploy_{i}" for i in range(2, 1000)}
        assert resolve_unique_command_name("deploy", used) == "deploy_x"

    def test_overflow_beyond_x_stays_unique(self) -> None:
        used = {"deploy", "deploy_x"} | {f"deploy_{i}" for i in range(2, 1000)}
        assert resolve_unique_command_name("deploy", used) == "deploy_x2"

    def test_used_set_not_modified(self) -> None:
        used = {"deploy"}
        resolve_unique_command_name("deploy", used)
        assert used == {"deploy"}


class TestBuildCommandSpecs:

    def test_collisions_in_discovery_order(self) -> None:
        specs = build_command_specs([_entry("Deploy Service"), _entry("deploy_service")])
        assert specs == [
            CommandSpec("deploy_service", "Deploy Service", "desc"),
            CommandSpec("deploy_service_2", "deploy_service", "desc"),
        ]

    def test_non_invocable_entries_excluded(self) -> None:
        specs = build_command_specs([
            _entry("hidden", user_invocable=False), _entry("shown"),
        ])
        assert [s.skill_name for s in specs] == ["shown"]

    def test_excluded_entry_does_not_reserve_name(self) -> None:
        specs = build_command_specs([_entry("dup", user_invocable=False), _entry("dup")])
        assert [s.name for s in specs] == ["dup"]

    def test_description_trimmed(self) -> None:
        (spec,) = build_command_specs([_entry("a", description="  padded  ")])
        assert spec.description == "padded"

    def test_blank_description_falls_back_to_name(self) -> None:
        (spec,) = build_command_specs([_entry("My Skill", description="   ")])
        assert spec.description == "My Skill"

    def test_long_description_truncated_with_ellipsis(self) -> None:
        (spec,) = build_command_specs([_entry("a", description="x" * 150)])
        assert len(spec.description) == 100
        assert spec.description == "x" * 99 + "…"

    def test_exactly_100_chars_untouched(self) -> None:
        (spec,) = build_command_specs([_entry("a", description="y" * 100)])
        assert spec.description == "y" * 100

    def test_thousand_same_base_inputs_stay_unique(self) -> None:
        entries = [_entry(f"Same Name{'!' * (i % 3)}") for i in range(1005)]
        specs = build_command_specs(entries)
        names = [s.name for s in specs]
        assert len(names) == len(set(names)) == 1005
        assert names[0] == "same_name"
        assert names[998] == "same_name_999"
        assert names[999] == "same_name_x"
        assert names[1000] == "same_name_x2"
        assert all(1 <= len(n) <= 32 for n in names)

    def test_deterministic(self) -> None:
        entries = [_entry(n) for n in ["A", "a", "b c", "B_C", "?", "!"]]
        assert build_command_specs(entries) == build_command_specs(entries)
        assert [s.name for s in build_command_specs(entries)] == [
            "a", "a_2", "b_c", "b_c_2", "skill", "skill_2",
        ]
