"""Shared fixtures for skillgate tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

SkillWriter = Callable[..., Path]


def render_skill(
    name: str | None = None,
    description: str | None = "A test skill",
    body: str = "# Instructions\n\nDo the thing.\n",
    **extra: str,
) -> str:
    """Render a skill file with a frontmatter header.

    Extra keyword arguments become header keys; underscores are turned into
    dashes so ``user_invocable="no"`` writes ``user-invocable: no``.
    """
    lines = ["---"]
    if name is not None:
        lines.append(f"name: {name}")
    if description is not None:
        lines.append(f"description: {description}")
    for key, value in extra.items():
        lines.append(f"{key.replace('_', '-')}: {value}")
    lines.append("---")
    return "\n".join(lines) + "\n\n" + body


@pytest.fixture
def write_skill() -> SkillWriter:
    """Factory writing a skill file at ``path`` (parents created)."""

    def _write(path: Path, **kwargs: str | None) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_skill(**kwargs), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """An empty workspace root."""
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def managed_dir(tmp_path: Path) -> Path:
    """An empty managed skills directory."""
    root = tmp_path / "managed"
    root.mkdir()
    return root
