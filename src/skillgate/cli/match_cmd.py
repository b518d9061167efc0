"""``skillgate match <input>`` -- Resolve a slash-command input.

Exit Codes:
    0 -- The input resolved to a command.
    2 -- No command matched.
"""

from __future__ import annotations

import json
import sys

import click

from skillgate.cli import manager_from_context
from skillgate.cli.output import match_to_json, print_match


@click.command("match")
@click.argument("raw_input", metavar="INPUT")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.pass_context
def match_command(ctx: click.Context, raw_input: str, output_format: str) -> None:
    """Resolve INPUT such as "/skill deploy --env prod" or "/deploy --env prod"."""
    match = manager_from_context(ctx).match(raw_input)
    if output_format == "json":
        click.echo(json.dumps(match_to_json(match), indent=2))
    else:
        print_match(raw_input, match)
    sys.exit(0 if match is not None else 2)
