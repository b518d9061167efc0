"""``skillgate commands`` -- List synthesized slash commands."""

from __future__ import annotations

import json

import click

from skillgate.cli import manager_from_context
from skillgate.cli.output import commands_to_json, print_commands_table


@click.command("commands")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.pass_context
def commands_command(ctx: click.Context, output_format: str) -> None:
    """List the slash commands derived from user-invocable skills."""
    commands = manager_from_context(ctx).list_commands()
    if output_format == "json":
        click.echo(json.dumps(commands_to_json(commands), indent=2))
    else:
        print_commands_table(commands)
