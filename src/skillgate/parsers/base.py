"""Discovery-level data structures for agent skills.

The ``Skill`` dataclass is the narrow record produced by the directory
scanner. It carries only what discovery needs: identity, a description for
the model, where the definition lives, which ranked source it came from, and
the single invocation flag the scanner reads up front so the prompt layer
can filter early.

Richer orchestration metadata (the full frontmatter map and the invocation
policy) lives in ``skillgate.core.invocation`` and is derived from a second
read of the file. Discovery never depends on orchestration.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Skill:
    """A named, describable capability backed by a definition file.

    Attributes:
        name: Merge key. Taken from the frontmatter ``name`` field, falling
            back to the lower-cased base directory name, then the lower-cased
            file stem. Case-sensitive: ``"Deploy"`` and ``"deploy"`` are
            distinct skills.
        description: Non-empty, trimmed description from the frontmatter.
        file_path: Absolute path of the skill definition file.
        base_dir: Absolute directory that relative paths inside the skill
            resolve against.
        source: Provenance label of the ranked directory the skill came from
            (e.g. ``"managed"``, ``"workspace"``).
        disable_model_invocation: True when the skill must be hidden from
            the model-visible prompt block.
    """

    name: str
    description: str
    file_path: Path
    base_dir: Path
    source: str
    disable_model_invocation: bool = False
