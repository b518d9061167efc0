"""Command-line interface for SkillGate."""

from __future__ import annotations

from pathlib import Path

import click

from skillgate.config import SkillGateConfig, default_managed_dir
from skillgate.manager import SkillManager


def manager_from_context(ctx: click.Context) -> SkillManager:
    """Build a ``SkillManager`` from the group's resolved configuration."""
    config = ctx.find_object(SkillGateConfig)
    if config is None:
        config = SkillGateConfig(workspace_dir=Path.cwd(), managed_dir=default_managed_dir())
    return SkillManager(workspace_dir=config.workspace_dir, managed_dir=config.managed_dir)
