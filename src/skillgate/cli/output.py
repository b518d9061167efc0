"""Rich output formatting helpers for the SkillGate CLI.

Provides consistent terminal tables for merged skills, synthesized slash
commands, match results and tool policy decisions, plus JSON serializers
shared by the ``--format json`` paths.
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from skillgate.core.commands import CommandMatch, CommandSpec
from skillgate.core.invocation import SkillEntry

_SOURCE_STYLES: dict[str, str] = {
    "workspace": "bold cyan",
    "managed": "magenta",
}

console = Console()


def source_style(source: str) -> str:
    """Return the Rich style string for a skill source label."""
    return _SOURCE_STYLES.get(source, "white")


def _flag(value: bool) -> Text:
    return Text("yes", style="green") if value else Text("no", style="dim")


def entries_to_json(entries: Sequence[SkillEntry]) -> list[dict[str, Any]]:
    return [
        {
            "name": e.skill.name,
            "description": e.skill.description,
            "source": e.skill.source,
            "file_path": str(e.skill.file_path),
            "base_dir": str(e.skill.base_dir),
            "user_invocable": e.invocation.user_invocable,
            "disable_model_invocation": e.invocation.disable_model_invocation,
            "frontmatter": dict(e.frontmatter),
        }
        for e in entries
    ]


def commands_to_json(commands: Sequence[CommandSpec]) -> list[dict[str, str]]:
    return [
        {"name": c.name, "skill_name": c.skill_name, "description": c.description}
        for c in commands
    ]


def match_to_json(match: CommandMatch | None) -> dict[str, Any]:
    if match is None:
        return {"matched": False}
    return {
        "matched": True,
        "command": commands_to_json([match.command])[0],
        "args": match.args,
    }


def print_skills_table(entries: Sequence[SkillEntry]) -> None:
    """Print merged skills with their source and invocation channels."""
    if not entries:
        console.print("[dim]No skills found.[/dim]")
        return

    table = Table(title="Skills", show_header=True, header_style="bold")
    table.add_column("Skill", style="bold")
    table.add_column("Source")
    table.add_column("User /command", justify="center")
    table.add_column("Model prompt", justify="center")
    table.add_column("Path", style="dim")

    for entry in entries:
        table.add_row(
            entry.skill.name,
            Text(entry.skill.source, style=source_style(entry.skill.source)),
            _flag(entry.invocation.user_invocable),
            _flag(not entry.invocation.disable_model_invocation),
            str(entry.skill.file_path),
        )
    console.print(table)
    console.print(f"[bold]{len(entries)}[/bold] skills")


def print_commands_table(commands: Sequence[CommandSpec]) -> None:
    if not commands:
        console.print("[dim]No slash commands.[/dim]")
        return

    table = Table(title="Slash Commands", show_header=True, header_style="bold")
    table.add_column("Command", style="bold")
    table.add_column("Skill")
    table.add_column("Description")
    for command in commands:
        table.add_row(f"/{command.name}", command.skill_name, command.description)
    console.print(table)


def print_match(raw: str, match: CommandMatch | None) -> None:
    """Print the outcome of resolving one input."""
    if match is None:
        console.print(Panel(Text(raw), title="No match", border_style="red"))
        return
    body = Text.assemble(
        ("Command: ", "bold"), (f"/{match.command.name}", "cyan"),
        ("\nSkill:   ", "bold"), (match.command.skill_name, ""),
        ("\nArgs:    ", "bold"), (match.args or "-", "dim" if match.args is None else ""),
    )
    console.print(Panel(body, title="Match", border_style="green"))


def print_policy_table(decisions: Sequence[tuple[str, bool]]) -> None:
    """Print allow/deny decisions for a list of tool names."""
    table = Table(title="Tool Policy", show_header=True, header_style="bold")
    table.add_column("Tool", style="bold")
    table.add_column("Decision", justify="center")
    for name, allowed in decisions:
        decision = Text("ALLOW", style="bold green") if allowed else Text("DENY", style="bold red")
        table.add_row(name, decision)
    console.print(table)
    allowed_count = sum(1 for _, allowed in decisions if allowed)
    console.print(
        f"[green]{allowed_count} allowed[/green] | "
        f"[red]{len(decisions) - allowed_count} denied[/red]"
    )
