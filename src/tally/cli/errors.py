"""
Standardized error handling and exit codes for the tally CLI.

Errors go to stderr so that stdout only ever carries counter values.
"""

from enum import IntEnum

from rich.console import Console
from rich.markup import escape

from tally.core.digits import CounterParseError

err_console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for tally CLI operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    USER_ERROR = 2
    """User configuration or input error (actionable by user)."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Invalid counter 'D1'",
        ...     reason="D is not a permitted letter",
        ...     solution="tally --lenient D1",
        ... )
    """
    err_console.print(f"[red]Error:[/red] {escape(problem)}", highlight=False)

    if reason:
        err_console.print(f"[dim]{escape(reason)}[/dim]", highlight=False)

    if solution:
        err_console.print(f"[cyan]→ Try:[/cyan] {escape(solution)}", highlight=False)


def print_parse_error(error: CounterParseError) -> None:
    """Print error for counter text rejected by strict parsing."""
    print_error(
        f"Invalid counter {error.text!r}",
        reason=error.reason,
        solution="Use groups like H5-T3-Z9, or pass --lenient",
    )


def print_config_error(details: str) -> None:
    """Print error when the merged configuration fails validation."""
    print_error(
        "Invalid tally configuration",
        reason=details,
        solution="Check .tally.json, ~/.config/tally/config.json and TALLY_* variables",
    )
