"""Ranked multi-source skill discovery.

Public API::

    from skillgate.discovery import default_sources, merge_skill_sources

    sources = default_sources(Path.cwd(), Path.home() / ".skillgate" / "skills")
    for skill in merge_skill_sources(sources):
        print(f"{skill.name} ({skill.source})")
"""

from __future__ import annotations

from skillgate.discovery.merger import (
    MANAGED_SOURCE,
    WORKSPACE_SOURCE,
    default_sources,
    merge_skill_sources,
    merge_skills,
    scan_sources,
)
from skillgate.discovery.models import SkillSource

__all__ = [
    "MANAGED_SOURCE",
    "SkillSource",
    "WORKSPACE_SOURCE",
    "default_sources",
    "merge_skill_sources",
    "merge_skills",
    "scan_sources",
]
