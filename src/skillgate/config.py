"""Configuration loading.

SkillGate reads an optional YAML file (``skillgate.yaml`` in the workspace
by default)::

    workspace_dir: .
    managed_dir: ~/.skillgate/skills
    tool_policy:
      allow: ["read", "grep", "memory_*"]
      deny: ["exec*"]

Every key is optional. Relative directories resolve against the directory
containing the config file. Without a ``managed_dir`` entry the managed
skills live in ``$SKILLGATE_HOME/skills``, falling back to
``~/.skillgate/skills``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from skillgate.core.policy.models import ToolPolicy
from skillgate.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "skillgate.yaml"
HOME_ENV_VAR = "SKILLGATE_HOME"
DEFAULT_HOME_DIRNAME = ".skillgate"


def default_managed_dir() -> Path:
    """Directory holding user-wide managed skills."""
    home = os.environ.get(HOME_ENV_VAR)
    if home:
        return Path(home).expanduser() / "skills"
    return Path.home() / DEFAULT_HOME_DIRNAME / "skills"


@dataclass
class SkillGateConfig:
    """Resolved runtime configuration.

    Attributes:
        workspace_dir: Workspace root. Its ``skills/`` subdirectory is the
            highest-priority skill source.
        managed_dir: User-wide managed skill directory (lowest priority).
        tool_policy: Default tool policy, or None for unrestricted.
    """

    workspace_dir: Path
    managed_dir: Path
    tool_policy: ToolPolicy | None = None


def _read_yaml_mapping(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def _resolve_dir(value: Any, key: str, base: Path) -> Path:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"Config key '{key}' must be a non-empty path string")
    path = Path(value).expanduser()
    return path if path.is_absolute() else base / path


def load_tool_policy(path: Path) -> ToolPolicy:
    """Load a standalone tool policy file.

    Raises:
        ConfigError: If the file cannot be read or parsed.
        PolicyError: If the document is not a valid policy.
    """
    return ToolPolicy.from_dict(_read_yaml_mapping(Path(path)))


def load_config(
    path: Path | None = None, workspace_dir: Path | None = None,
) -> SkillGateConfig:
    """Load configuration.

    Args:
        path: Explicit config file. Must exist when given.
        workspace_dir: Workspace root. Defaults to the current directory.
            Also the place ``skillgate.yaml`` is looked for when ``path`` is
            not given.

    Returns:
        The resolved configuration. Defaults apply when no file is found.

    Raises:
        ConfigError: If the file is missing, unreadable or malformed.
    """
    workspace = Path(workspace_dir) if workspace_dir is not None else Path.cwd()
    if path is None:
        candidate = workspace / CONFIG_FILENAME
        if not candidate.is_file():
            logger.debug("No %s in %s; using defaults", CONFIG_FILENAME, workspace)
            return SkillGateConfig(workspace_dir=workspace, managed_dir=default_managed_dir())
        path = candidate

    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    data = _read_yaml_mapping(config_path)
    base = config_path.parent

    if "workspace_dir" in data and workspace_dir is None:
        workspace = _resolve_dir(data["workspace_dir"], "workspace_dir", base)
    managed = (
        _resolve_dir(data["managed_dir"], "managed_dir", base)
        if "managed_dir" in data
        else default_managed_dir()
    )
    raw_policy = data.get("tool_policy")
    policy = ToolPolicy.from_dict(raw_policy) if raw_policy is not None else None

    logger.debug("Loaded config from %s", config_path)
    return SkillGateConfig(workspace_dir=workspace, managed_dir=managed, tool_policy=policy)
