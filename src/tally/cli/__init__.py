"""
Tally CLI - Main application entry point.

Prints a counter value, increments it, and prints the result:

    $ tally C9
    C9
    E1
"""

import logging

import typer
from pydantic import ValidationError
from rich.console import Console

from tally import __version__
from tally.cli.errors import ExitCode, print_config_error, print_parse_error
from tally.core.config import load_config, load_layered_env
from tally.core.digits import Counter, CounterParseError

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="tally",
    help="Hyphen-grouped letter/number counter",
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"tally version {__version__}", highlight=False)
        raise typer.Exit(ExitCode.SUCCESS)


def _setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def main(
    value: str = typer.Argument(
        "",
        help="Start value such as A1 or H5-T3-Z9 (defaults to A1)",
        show_default=False,
    ),
    steps: int | None = typer.Option(
        None,
        "--steps",
        "-n",
        min=1,
        max=1000,
        help="Increment this many times, printing each value [config: cli.steps]",
    ),
    strict: bool | None = typer.Option(
        None,
        "--strict/--lenient",
        help="Reject malformed VALUE instead of falling back to A1 [config: cli.strict]",
        show_default=False,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show tally version and exit",
    ),
) -> None:
    """
    Print VALUE, increment it, and print the new value.

    Bad input falls back to A1 unless --strict is given. After the most
    significant group passes Z9 the counter grows by one group; past ten
    groups of Z9 it wraps around to A1.

    Examples:
        tally                      # A1, then A2
        tally C9                   # C9, then E1
        tally Z9-Z9                # Z9-Z9, then A1-A1-A1
        tally H5 --steps 3         # H5, H6, H7, H8
    """
    # .env files may carry TALLY_* overrides, load them before the config
    load_layered_env()
    try:
        config = load_config()
    except ValidationError as e:
        print_config_error(str(e))
        raise typer.Exit(ExitCode.USER_ERROR)

    _setup_logging(debug or config.debug)

    if steps is None:
        steps = config.cli.steps
    if strict is None:
        strict = config.cli.strict

    try:
        counter = Counter.parse(value, strict=strict)
    except CounterParseError as e:
        print_parse_error(e)
        raise typer.Exit(ExitCode.USER_ERROR)

    logger.debug("Starting from %s, %d step(s)", counter, steps)
    console.print(counter.render(), highlight=False)
    for _ in range(steps):
        if counter.increment():
            err_console.print("[dim](wrapped around)[/dim]")
        console.print(counter.render(), highlight=False)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
