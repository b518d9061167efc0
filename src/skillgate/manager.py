"""Skill manager: the public entry point for skill resolution.

A ``SkillManager`` runs the pipeline once, on first use::

    scan (per source) -> merge -> enrich -> synthesize commands

and serves every later call from the cached result. The load state is an
explicit ``_Unloaded`` / ``_Loaded`` value guarded by a lock, so concurrent
first callers perform exactly one scan. Skill files are assumed static for
the life of the process; there is no reload.

Usage::

    manager = SkillManager(workspace_dir=Path.cwd())
    hit = manager.match("/skill deploy-service --env prod")
    if hit is not None:
        print(hit.command.skill_name, hit.args)
    system_prompt += manager.build_skills_prompt()
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from skillgate.config import default_managed_dir
from skillgate.core.commands import (
    CommandMatch,
    CommandSpec,
    build_command_specs,
    resolve_command_invocation,
)
from skillgate.core.invocation import SkillEntry, enrich_skills
from skillgate.core.prompt import format_skills_for_prompt
from skillgate.discovery import default_sources, merge_skill_sources
from skillgate.parsers.base import Skill
from skillgate.parsers.scanner import SkillScanner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Unloaded:
    pass


@dataclass(frozen=True)
class _Loaded:
    entries: tuple[SkillEntry, ...]
    commands: tuple[CommandSpec, ...]


_LoadState = Union[_Unloaded, _Loaded]


class SkillManager:
    """Discovers, merges and serves skills for one workspace.

    Args:
        workspace_dir: Workspace root. Skills in ``<workspace>/skills``
            override managed skills of the same name.
        managed_dir: User-wide managed skill directory. Defaults to
            ``default_managed_dir()``.
        scanner: Scanner used for every source. Defaults to a fresh
            ``SkillScanner``.
        max_workers: Thread pool size for scanning sources.
    """

    def __init__(
        self,
        workspace_dir: Path,
        managed_dir: Path | None = None,
        scanner: SkillScanner | None = None,
        max_workers: int | None = None,
    ) -> None:
        self.workspace_dir = Path(workspace_dir)
        self.managed_dir = Path(managed_dir) if managed_dir is not None else default_managed_dir()
        self._scanner = scanner or SkillScanner()
        self._max_workers = max_workers
        self._lock = threading.Lock()
        self._state: _LoadState = _Unloaded()

    @property
    def is_loaded(self) -> bool:
        return isinstance(self._state, _Loaded)

    def load_all(self) -> None:
        """Run the load pipeline if it has not run yet."""
        self._ensure_loaded()

    def _ensure_loaded(self) -> _Loaded:
        state = self._state
        if isinstance(state, _Loaded):
            return state
        with self._lock:
            state = self._state
            if isinstance(state, _Loaded):
                return state
            loaded = self._load()
            self._state = loaded
            return loaded

    def _load(self) -> _Loaded:
        sources = default_sources(self.workspace_dir, self.managed_dir)
        skills = merge_skill_sources(
            sources, scanner=self._scanner, max_workers=self._max_workers,
        )
        entries = enrich_skills(skills)
        commands = build_command_specs(entries)
        logger.info(
            "Loaded %d skills (%d slash commands) from %d sources",
            len(entries), len(commands), len(sources),
        )
        return _Loaded(entries=tuple(entries), commands=tuple(commands))

    def match(self, raw: str) -> CommandMatch | None:
        """Resolve slash-command input against the synthesized commands."""
        return resolve_command_invocation(raw, self._ensure_loaded().commands)

    def get(self, name: str) -> Skill | None:
        """Return the merged skill called ``name`` (case-sensitive)."""
        for entry in self._ensure_loaded().entries:
            if entry.skill.name == name:
                return entry.skill
        return None

    def list_skills(self) -> list[Skill]:
        return [entry.skill for entry in self._ensure_loaded().entries]

    def list_entries(self) -> list[SkillEntry]:
        return list(self._ensure_loaded().entries)

    def list_commands(self) -> list[CommandSpec]:
        return list(self._ensure_loaded().commands)

    def build_skills_prompt(self) -> str:
        """Render the ``<available_skills>`` block for model-visible skills.

        Visibility follows each entry's enriched invocation policy.
        """
        return format_skills_for_prompt(self._ensure_loaded().entries)
