"""Directory scanner for Markdown skill definitions.

A skill directory is laid out like this::

    skills/
    ├── quick-note.md            # root-level Markdown: read as-is
    ├── deploy-service/
    │   ├── SKILL.md             # one reserved file per subdirectory
    │   └── scripts/deploy.sh
    └── team/
        └── release/
            └── SKILL.md         # any depth

Discovery Rules
---------------
1. Files directly inside the root ending in ``.md`` are candidates whose
   base directory is the root itself.
2. Every descendant directory contributes at most one candidate: its own
   ``SKILL.md``. Its base directory is that subdirectory.
3. Entries starting with ``.`` and ``node_modules`` directories are skipped
   at every depth. Symlinked directories are not descended into.
4. Entries are visited in sorted order, a directory's own ``SKILL.md``
   before its descendants, so repeated scans return identical lists.

Per candidate, the header block yields ``name``, ``description`` and
``disable-model-invocation``. A candidate without a non-empty description is
not a skill and is dropped silently. Nothing in this module raises for
filesystem problems: an unreadable root or file simply contributes nothing.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from skillgate.parsers.base import Skill
from skillgate.parsers.frontmatter import extract_frontmatter, parse_bool

logger = logging.getLogger(__name__)

SKILL_FILENAME = "SKILL.md"
SKILL_EXTENSION = ".md"
IGNORED_DIRNAMES = frozenset({"node_modules"})


def _is_ignored(entry: Path) -> bool:
    """Hidden entries and dependency directories are skipped at every depth."""
    return entry.name.startswith(".") or entry.name in IGNORED_DIRNAMES


def _list_entries(directory: Path) -> list[Path]:
    """List a directory in sorted order, or nothing if it cannot be read."""
    try:
        return sorted(directory.iterdir())
    except (PermissionError, OSError):
        return []


def _is_real_dir(entry: Path) -> bool:
    try:
        return entry.is_dir() and not entry.is_symlink()
    except (PermissionError, OSError):
        return False


class SkillScanner:
    """Discovers skills under one directory.

    Usage::

        scanner = SkillScanner()
        for skill in scanner.scan(Path("~/.skillgate/skills").expanduser(), "managed"):
            print(skill.name, skill.file_path)
    """

    def scan(self, directory: Path, source: str) -> list[Skill]:
        """Scan a root directory for skills.

        Args:
            directory: Root directory to scan. May not exist.
            source: Provenance label stamped on every discovered skill.

        Returns:
            Discovered skills in deterministic traversal order. Empty when
            the directory is absent, unreadable or holds no valid skills.
        """
        root = Path(directory)
        skills: list[Skill] = []
        for entry in _list_entries(root):
            if _is_ignored(entry):
                continue
            if _is_real_dir(entry):
                skills.extend(self._scan_tree(entry, source))
            elif entry.name.endswith(SKILL_EXTENSION):
                self._append(skills, entry, root, source)
        return skills

    def _scan_tree(self, top: Path, source: str) -> list[Skill]:
        """Collect ``SKILL.md`` files in ``top`` and every directory below it.

        Walks with an explicit stack, so depth is bounded only by the
        filesystem. Children are pushed in reverse sorted order to keep the
        parent-first, sorted visiting order.
        """
        skills: list[Skill] = []
        stack = [top]
        while stack:
            directory = stack.pop()
            self._append(skills, directory / SKILL_FILENAME, directory, source)
            children = [
                entry for entry in _list_entries(directory)
                if not _is_ignored(entry) and _is_real_dir(entry)
            ]
            stack.extend(reversed(children))
        return skills

    def _append(
        self, skills: list[Skill], file_path: Path, base_dir: Path, source: str,
    ) -> None:
        skill = self.load_skill_file(file_path, base_dir, source)
        if skill is not None:
            skills.append(skill)

    def load_skill_file(
        self, file_path: Path, base_dir: Path, source: str,
    ) -> Skill | None:
        """Load a single candidate file.

        Args:
            file_path: Candidate skill file.
            base_dir: Directory the skill's relative paths resolve against.
            source: Provenance label.

        Returns:
            A ``Skill``, or None if the file is missing, unreadable or has
            no description.
        """
        try:
            content = file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError):
            logger.debug("Skipping unreadable skill file: %s", file_path)
            return None

        fm = extract_frontmatter(content)
        name = (
            fm.get("name", "").strip()
            or base_dir.name.lower()
            or file_path.stem.lower()
        )
        description = fm.get("description", "").strip()
        if not description:
            logger.debug("Skipping %s: no description", file_path)
            return None

        return Skill(
            name=name,
            description=description,
            file_path=Path(os.path.abspath(file_path)),
            base_dir=Path(os.path.abspath(base_dir)),
            source=source,
            disable_model_invocation=parse_bool(
                fm.get("disable-model-invocation"), False,
            ),
        )


def load_skills_from_dir(directory: Path, source: str) -> list[Skill]:
    """Scan ``directory`` with a default ``SkillScanner``."""
    return SkillScanner().scan(directory, source)
