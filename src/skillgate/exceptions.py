"""SkillGate exception hierarchy.

All public exceptions inherit from SkillGateError, giving callers a single
base class to catch when they want to handle any SkillGate-specific failure
without swallowing unrelated errors.

Skill discovery itself never raises: missing directories, unreadable files
and malformed headers all degrade to "no skill" or "field absent". Only the
configuration layer and the CLI surface raise these exceptions.
"""


class SkillGateError(Exception):
    """Base exception for all SkillGate errors."""


class ConfigError(SkillGateError):
    """Raised when a configuration file cannot be loaded.

    Covers missing files at an explicitly requested path, YAML syntax
    errors, and top-level documents that are not mappings.
    """


class PolicyError(ConfigError):
    """Raised when a tool policy has the wrong shape.

    Covers ``allow``/``deny`` fields that are not lists of strings and
    policy documents that are not mappings.
    """
