"""Policy enrichment for merged skills.

The scanner reads just enough of a skill file to decide that it exists. The
enricher re-reads each surviving file with its own reader to capture the
whole header block and derive an ``InvocationPolicy``. The two reads stay
separate: orchestration depends on discovery, never the reverse.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from skillgate.core.invocation.models import Frontmatter, InvocationPolicy, SkillEntry
from skillgate.parsers.base import Skill
from skillgate.parsers.frontmatter import extract_frontmatter, parse_bool

logger = logging.getLogger(__name__)


def read_frontmatter(file_path: Path) -> Frontmatter:
    """Read a skill file's full header block.

    Returns an empty mapping when the file cannot be read.
    """
    try:
        raw = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.debug("Could not re-read skill file: %s", file_path)
        return {}
    return extract_frontmatter(raw)


def resolve_invocation_policy(frontmatter: Frontmatter) -> InvocationPolicy:
    """Derive the invocation policy from ``user-invocable`` and ``disable-model-invocation``."""
    return InvocationPolicy(
        user_invocable=parse_bool(frontmatter.get("user-invocable"), True),
        disable_model_invocation=parse_bool(
            frontmatter.get("disable-model-invocation"), False,
        ),
    )


def enrich_skill(skill: Skill) -> SkillEntry:
    """Re-read ``skill``'s header and attach its invocation policy."""
    frontmatter = read_frontmatter(skill.file_path)
    return SkillEntry(
        skill=skill,
        frontmatter=frontmatter,
        invocation=resolve_invocation_policy(frontmatter),
    )


def enrich_skills(skills: Iterable[Skill]) -> list[SkillEntry]:
    """Enrich every skill, preserving order."""
    return [enrich_skill(skill) for skill in skills]
