"""``skillgate prompt`` -- Print the model-visible skills block."""

from __future__ import annotations

import click

from skillgate.cli import manager_from_context


@click.command("prompt")
@click.pass_context
def prompt_command(ctx: click.Context) -> None:
    """Print the <available_skills> block appended to the system prompt.

    Prints nothing when no skill is visible to the model.
    """
    block = manager_from_context(ctx).build_skills_prompt()
    if block:
        click.echo(block)
