"""Multi-source skill merging with last-priority-wins semantics.

Skills are loaded from an ordered list of ranked directories, lowest priority
first. The standard runtime ranks them as::

    managed (~/.skillgate/skills)  <  workspace (<workspace>/skills)

Merge Algorithm
---------------
1. Scan every source to completion. Sources are independent, so the scans
   may run on a thread pool.
2. Only after all per-source lists are collected, walk them in priority order
   and insert each skill into a name-keyed dict. A later source's record for
   a name replaces the earlier record outright; fields are never combined.
3. Return the dict's values. A name keeps the position where it first
   appeared; its value is the highest-priority record.

Collecting first and reducing second is what makes the result independent of
scan completion order. Names are compared case-sensitively.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Sequence

from skillgate.discovery.models import SkillSource
from skillgate.parsers.base import Skill
from skillgate.parsers.scanner import SkillScanner

logger = logging.getLogger(__name__)

MANAGED_SOURCE = "managed"
WORKSPACE_SOURCE = "workspace"
WORKSPACE_SKILLS_DIRNAME = "skills"


def default_sources(workspace_dir: Path, managed_dir: Path) -> list[SkillSource]:
    """Return the standard ranked sources, lowest priority first."""
    return [
        SkillSource(directory=Path(managed_dir), source=MANAGED_SOURCE),
        SkillSource(
            directory=Path(workspace_dir) / WORKSPACE_SKILLS_DIRNAME,
            source=WORKSPACE_SOURCE,
        ),
    ]


def scan_sources(
    sources: Sequence[SkillSource],
    scanner: SkillScanner | None = None,
    max_workers: int | None = None,
) -> list[list[Skill]]:
    """Scan every source and return the per-source results in source order.

    Args:
        sources: Ranked sources, lowest priority first.
        scanner: Scanner to use. Defaults to a fresh ``SkillScanner``.
        max_workers: Thread pool size. ``1`` scans sequentially on the
            calling thread.

    Returns:
        One complete list of skills per source, aligned with ``sources``.
    """
    active = scanner or SkillScanner()
    if max_workers == 1 or len(sources) <= 1:
        return [active.scan(s.directory, s.source) for s in sources]

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(active.scan, s.directory, s.source) for s in sources]
        return [future.result() for future in futures]


def merge_skills(per_source: Sequence[Sequence[Skill]]) -> list[Skill]:
    """Reduce per-source skill lists to one skill per name.

    Args:
        per_source: Skill lists ordered lowest priority first.

    Returns:
        Merged skills; later sources replace earlier ones by name.
    """
    merged: dict[str, Skill] = {}
    for skills in per_source:
        for skill in skills:
            previous = merged.get(skill.name)
            if previous is not None:
                logger.debug(
                    "Skill %r from %s overrides %s",
                    skill.name, skill.source, previous.source,
                )
            merged[skill.name] = skill
    return list(merged.values())


def merge_skill_sources(
    sources: Sequence[SkillSource],
    scanner: SkillScanner | None = None,
    max_workers: int | None = None,
) -> list[Skill]:
    """Scan ranked sources and merge them, last priority wins.

    Never raises for absent directories; they contribute nothing.
    """
    return merge_skills(scan_sources(sources, scanner=scanner, max_workers=max_workers))
