"""SkillGate: Skill discovery, slash-command resolution and tool access policy for agent runtimes."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
