"""``skillgate skills`` -- List merged skills.

Shows every skill that survived the managed < workspace merge, with the
source it came from and both invocation channels.
"""

from __future__ import annotations

import json

import click

from skillgate.cli import manager_from_context
from skillgate.cli.output import entries_to_json, print_skills_table


@click.command("skills")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.pass_context
def skills_command(ctx: click.Context, output_format: str) -> None:
    """List skills discovered in the managed and workspace directories."""
    entries = manager_from_context(ctx).list_entries()
    if output_format == "json":
        click.echo(json.dumps(entries_to_json(entries), indent=2))
    else:
        print_skills_table(entries)
