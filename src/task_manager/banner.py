"""Startup banner for the workshop scaffold."""

from collections.abc import Callable

import click

BANNER_LINES: tuple[str, ...] = (
    "🚀 Task Management System Starting...",
    "📚 Use this codebase to practice GitHub Copilot features!",
    "",
    "💡 Tips:",
    "- Open multiple related files for better context",
    "- Use descriptive comments to guide Copilot",
    "- Try different Copilot features in each phase",
    "- Practice with /commands in Copilot Chat",
    "",
    "📖 Follow the phases in the workshop README!",
)


def print_banner(echo: Callable[[str], None] = click.echo) -> None:
    """Write the banner to stdout, one line per call to echo."""
    for line in BANNER_LINES:
        echo(line)
