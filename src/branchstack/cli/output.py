"""Output utilities for CLI commands with clear intent.

- user_output: diagnostics, progress, and errors (stderr)
- machine_output: results meant for piping, like the stack tree (stdout)
- format_land_summary: final panel shown after `stack land`
"""

from typing import TYPE_CHECKING, Any

import click
from rich.panel import Panel
from rich.text import Text

if TYPE_CHECKING:
    from branchstack.core.stack.land import LandResult


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write user-facing text to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write result text to stdout."""
    click.echo(message, nl=nl)


def format_land_summary(result: "LandResult", trunk: str) -> Panel:
    """Format the final landing summary box.

    Args:
        result: LandResult from land execution
        trunk: Trunk branch the stack was landed into

    Returns:
        Rich Panel listing landed branches, re-linked children, and warnings
    """
    lines: list[Text] = []

    lines.append(Text(f"✅ Landed {len(result.landed)} branch(es) into {trunk}", style="green"))
    for branch in result.landed:
        lines.append(Text(f"  • {branch}"))

    if result.relinked:
        lines.append(Text(""))
        lines.append(Text(f"↪ Re-linked onto {trunk}:", style="blue"))
        for branch in result.relinked:
            lines.append(Text(f"  • {branch}"))

    if result.warnings:
        lines.append(Text(""))
        lines.append(Text("⚠ Warnings:", style="yellow bold"))
        for warning in result.warnings:
            lines.append(Text(f"  {warning}", style="yellow"))

    content = Text("\n").join(lines)
    border = "yellow" if result.warnings else "green"
    return Panel(content, title="Land Complete", border_style=border, padding=(1, 2))
