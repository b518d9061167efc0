"""SkillGate CLI -- inspect skill discovery, slash commands and tool policy.

Entry point for the ``skillgate`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    skills    -- List merged skills with their source and invocation policy.
    commands  -- List synthesized slash commands.
    match     -- Resolve a slash-command input.
    prompt    -- Print the model-visible skills block.
    policy    -- Evaluate tool names against allow/deny patterns.

Usage::

    skillgate skills
    skillgate --workspace ./my-agent commands --format json
    skillgate match "/skill deploy-service --env prod"
    skillgate prompt
    skillgate policy --deny "exec*" --allow "*"
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from skillgate import __version__
from skillgate.cli.commands_cmd import commands_command
from skillgate.cli.match_cmd import match_command
from skillgate.cli.policy_cmd import policy_command
from skillgate.cli.prompt_cmd import prompt_command
from skillgate.cli.skills_cmd import skills_command
from skillgate.config import load_config
from skillgate.exceptions import SkillGateError


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: <workspace>/skillgate.yaml if present).",
)
@click.option(
    "--workspace",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Workspace root whose skills/ directory has top priority.",
)
@click.option(
    "--managed-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="User-wide managed skills directory.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    workspace: Path | None,
    managed_dir: Path | None,
    verbose: bool,
) -> None:
    """SkillGate: skill discovery, slash commands and tool access policy.

    Discovers skills from the managed directory and the workspace, merges
    them (workspace wins), and shows what the agent runtime would expose.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = load_config(config_path, workspace_dir=workspace)
    except SkillGateError as exc:
        raise click.ClickException(str(exc)) from exc
    if managed_dir is not None:
        config.managed_dir = managed_dir
    ctx.obj = config


# Register all subcommands
cli.add_command(skills_command)
cli.add_command(commands_command)
cli.add_command(match_command)
cli.add_command(prompt_command)
cli.add_command(policy_command)
