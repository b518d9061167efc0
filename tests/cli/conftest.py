"""Shared fixtures for CLI tests.

Builds a workspace with its own ``skills/`` directory and a separate managed
directory, mirroring how the runtime lays skills out on disk.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def skill_dirs(workspace: Path, managed_dir: Path, write_skill) -> tuple[Path, Path]:
    """Populate managed and workspace skills.

    ``Deploy Service`` (managed) and ``deploy_service`` (workspace) sanitize
    to the same command name; ``internal`` is hidden from users and
    ``manual`` is hidden from the model.
    """
    write_skill(managed_dir / "deploy" / "SKILL.md", name="Deploy Service",
                description="Roll out a service")
    write_skill(workspace / "skills" / "deploy" / "SKILL.md", name="deploy_service",
                description="Workspace deploy")
    write_skill(workspace / "skills" / "internal" / "SKILL.md", name="internal",
                description="Model-only helper", user_invocable="false")
    write_skill(workspace / "skills" / "manual" / "SKILL.md", name="manual",
                description="Run by hand", disable_model_invocation="yes")
    return workspace, managed_dir


@pytest.fixture
def base_args(skill_dirs: tuple[Path, Path]) -> list[str]:
    """Group options pointing the CLI at the fixture directories."""
    workspace, managed = skill_dirs
    return ["--workspace", str(workspace), "--managed-dir", str(managed)]
