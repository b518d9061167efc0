"""``skillgate policy [TOOL ...]`` -- Evaluate tool names against a policy.

The effective policy merges, in order, the config file's ``tool_policy``,
an optional ``--policy-file`` and any ``--allow``/``--deny`` flags. Deny
patterns always win over allow patterns. Without TOOL arguments the
built-in tool catalog is evaluated.

Exit Codes:
    0 -- Evaluation completed.
    1 -- The policy file is missing or malformed.
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from skillgate.cli.output import print_policy_table
from skillgate.config import SkillGateConfig, load_tool_policy
from skillgate.core.policy import (
    BUILTIN_TOOLS,
    ToolPolicy,
    is_tool_allowed,
    merge_tool_policies,
)
from skillgate.exceptions import SkillGateError


def _flag_policy(allow: tuple[str, ...], deny: tuple[str, ...]) -> ToolPolicy | None:
    if not allow and not deny:
        return None
    return ToolPolicy(allow=allow or None, deny=deny or None)


@click.command("policy")
@click.argument("tools", nargs=-1)
@click.option("--allow", multiple=True, help="Allow pattern (repeatable, '*' wildcard).")
@click.option("--deny", multiple=True, help="Deny pattern (repeatable, '*' wildcard).")
@click.option(
    "--policy-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML file with 'allow' and 'deny' lists.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.pass_context
def policy_command(
    ctx: click.Context,
    tools: tuple[str, ...],
    allow: tuple[str, ...],
    deny: tuple[str, ...],
    policy_file: Path | None,
    output_format: str,
) -> None:
    """Show which TOOLS the effective policy allows."""
    config = ctx.find_object(SkillGateConfig)
    policy = config.tool_policy if config is not None else None

    if policy_file is not None:
        try:
            policy = merge_tool_policies(policy, load_tool_policy(policy_file))
        except SkillGateError as exc:
            raise click.ClickException(str(exc)) from exc
    policy = merge_tool_policies(policy, _flag_policy(allow, deny))

    names = list(tools) or [tool.name for tool in BUILTIN_TOOLS]
    decisions = [(name, is_tool_allowed(name, policy)) for name in names]

    if output_format == "json":
        click.echo(json.dumps({
            "policy": policy.to_dict() if policy is not None else None,
            "tools": [{"name": n, "allowed": a} for n, a in decisions],
        }, indent=2))
    else:
        print_policy_table(decisions)
