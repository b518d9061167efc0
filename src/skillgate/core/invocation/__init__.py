"""Invocation policy: full frontmatter and the two trigger channels."""

from skillgate.core.invocation.enricher import (
    enrich_skill,
    enrich_skills,
    read_frontmatter,
    resolve_invocation_policy,
)
from skillgate.core.invocation.models import Frontmatter, InvocationPolicy, SkillEntry

__all__ = [
    "Frontmatter",
    "InvocationPolicy",
    "SkillEntry",
    "enrich_skill",
    "enrich_skills",
    "read_frontmatter",
    "resolve_invocation_policy",
]
