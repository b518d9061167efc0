"""Orchestration-level skill records.

A ``SkillEntry`` wraps the discovery-level ``Skill`` with the complete
frontmatter map and the invocation policy derived from it. The two flags in
``InvocationPolicy`` are independent channels:

- ``user_invocable`` controls reachability through ``/command`` input.
- ``disable_model_invocation`` controls visibility in the model prompt.

A skill may be user-only, model-only, both or neither.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from skillgate.parsers.base import Skill

Frontmatter = dict[str, str]


@dataclass(frozen=True)
class InvocationPolicy:
    """Which channels may trigger a skill.

    Attributes:
        user_invocable: Reachable as a slash command. Defaults to True.
        disable_model_invocation: Hidden from the model prompt. Defaults
            to False.
    """

    user_invocable: bool = True
    disable_model_invocation: bool = False


@dataclass(frozen=True)
class SkillEntry:
    """A merged skill plus its orchestration metadata.

    Attributes:
        skill: The discovery record.
        frontmatter: Every header key of the skill file, including keys this
            package does not interpret.
        invocation: Policy derived from ``frontmatter``.
    """

    skill: Skill
    frontmatter: Frontmatter = field(default_factory=dict)
    invocation: InvocationPolicy = field(default_factory=InvocationPolicy)

    @property
    def name(self) -> str:
        return self.skill.name
