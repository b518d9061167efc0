"""Tests for policy enrichment of merged skills."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from skillgate.core.invocation import (
    InvocationPolicy,
    SkillEntry,
    enrich_skill,
    enrich_skills,
    read_frontmatter,
    resolve_invocation_policy,
)
from skillgate.parsers.scanner import SkillScanner


@pytest.fixture
def scanned(tmp_path: Path, write_skill):
    """Scan helper returning the single skill written at ``<tmp>/s/SKILL.md``."""

    def _scan(**kwargs):
        write_skill(tmp_path / "s" / "SKILL.md", name="s", **kwargs)
        (skill,) = SkillScanner().scan(tmp_path, "workspace")
        return skill

    return _scan


class TestResolveInvocationPolicy:

    def test_defaults(self) -> None:
        assert resolve_invocation_policy({}) == InvocationPolicy(
            user_invocable=True, disable_model_invocation=False,
        )

    def test_channels_are_independent(self) -> None:
        policy = resolve_invocation_policy({
            "user-invocable": "no", "disable-model-invocation": "yes",
        })
        assert policy == InvocationPolicy(user_invocable=False, disable_model_invocation=True)

    def test_unrecognised_values_use_defaults(self) -> None:
        policy = resolve_invocation_policy({
            "user-invocable": "sometimes", "disable-model-invocation": "perhaps",
        })
        assert policy == InvocationPolicy()


class TestEnrichSkill:

    def test_full_frontmatter_captured(self, scanned) -> None:
        skill = scanned(description="Ship it", owner="platform-team", tags="'ops, ci'")
        entry = enrich_skill(skill)
        assert entry.skill is skill
        assert entry.frontmatter == {
            "name": "s",
            "description": "Ship it",
            "owner": "platform-team",
            "tags": "ops, ci",
        }

    def test_policy_from_frontmatter(self, scanned) -> None:
        entry = enrich_skill(scanned(user_invocable="false", disable_model_invocation="1"))
        assert entry.invocation.user_invocable is False
        assert entry.invocation.disable_model_invocation is True

    def test_vanished_file_degrades_to_empty(self, scanned) -> None:
        skill = scanned()
        skill.file_path.unlink()
        entry = enrich_skill(skill)
        assert entry.frontmatter == {}
        assert entry.invocation == InvocationPolicy()

    def test_reads_file_again(self, scanned) -> None:
        """Enrichment reflects the file's current header, not the scan."""
        skill = scanned()
        skill.file_path.write_text(
            "---\nname: s\ndescription: d\nuser-invocable: no\n---\n", encoding="utf-8",
        )
        assert enrich_skill(skill).invocation.user_invocable is False

    def test_enrich_skills_preserves_order(self, scanned) -> None:
        skill = scanned()
        other = replace(skill, name="other")
        entries = enrich_skills([other, skill])
        assert [e.name for e in entries] == ["other", "s"]
        assert all(isinstance(e, SkillEntry) for e in entries)


def test_read_frontmatter_missing_file(tmp_path: Path) -> None:
    assert read_frontmatter(tmp_path / "nope.md") == {}
