"""CLI entry point for task-manager.

Usage:
    task-manager                              # Print the startup banner
    task-manager enums [NAME]                 # List enumeration values as JSON
    task-manager check NAME VALUE             # Validate a value against an enumeration
    task-manager --version                    # Show version
"""

import json
import sys

import click

from task_manager import __version__
from task_manager.banner import print_banner
from task_manager.models import ENUM_REGISTRY
from task_manager.utils.logging import get_logger, setup_logging
from task_manager.utils.validators import (
    InvalidEnumValueError,
    UnknownEnumError,
    enum_values,
    parse_enum,
    resolve_enum,
)

logger = get_logger(__name__)


class ErrorCategory:
    """Error categories for CLI error messages."""

    CONFIGURATION = "configuration"
    VALIDATION = "validation"


def format_error(category: str, message: str, remediation: str) -> str:
    """Format error with category and remediation.

    Args:
        category: Error category
        message: Error message
        remediation: Suggested fix

    Returns:
        Formatted error string
    """
    return f"""
Error [{category.upper()}]: {message}

Remediation: {remediation}
"""


def _resolve_or_exit(name: str) -> type:
    try:
        return resolve_enum(name)
    except UnknownEnumError as e:
        click.echo(
            format_error(
                ErrorCategory.CONFIGURATION,
                str(e),
                "Run 'task-manager enums' to list known enumerations",
            ),
            err=True,
        )
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Override log level",
)
@click.version_option(version=__version__, prog_name="task-manager")
@click.pass_context
def main(ctx: click.Context, log_level: str | None) -> None:
    """Task Management System workshop scaffold.

    Run without a command to print the startup banner.
    """
    setup_logging(log_level=log_level)

    if ctx.invoked_subcommand is None:
        logger.debug("startup_banner", version=__version__)
        print_banner()


@main.command()
@click.argument("name", required=False)
def enums(name: str | None) -> None:
    """List enumeration values as JSON."""
    if name is None:
        result = {key: enum_values(enum_cls) for key, enum_cls in ENUM_REGISTRY.items()}
    else:
        result = {name: enum_values(_resolve_or_exit(name))}
    click.echo(json.dumps(result, indent=2))


@main.command()
@click.argument("name")
@click.argument("value")
def check(name: str, value: str) -> None:
    """Validate VALUE against enumeration NAME."""
    enum_cls = _resolve_or_exit(name)
    try:
        parse_enum(enum_cls, value)
    except InvalidEnumValueError as e:
        click.echo(
            format_error(
                ErrorCategory.VALIDATION,
                str(e),
                f"Use one of the values listed by 'task-manager enums {name}'",
            ),
            err=True,
        )
        sys.exit(1)

    click.echo(f"{value} is a valid {name}")


if __name__ == "__main__":
    main()
