"""Data models for the discovery module."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SkillSource:
    """One ranked directory that skills are loaded from.

    Attributes:
        directory: Root directory to scan. Need not exist.
        source: Provenance label stamped on every skill found there.
    """

    directory: Path
    source: str
