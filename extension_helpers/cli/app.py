"""Typer-based CLI application for `extension_helpers`.

Each command wraps one helper so it can be tried from a shell. Sequence
commands take their elements as positional arguments.
"""
from __future__ import annotations

import random
from typing import List, NoReturn, Optional

import typer
from rich.console import Console

from ..__about__ import __version__
from ..config import get_settings
from ..errors import HelperError
from ..log import configure_logging
from ..utils import (
    batch as batch_items,
    is_between,
    is_within,
    multi_char_replace,
    remove_first,
    remove_last,
    reverse as reverse_items,
    shuffle as shuffle_items,
)

app = typer.Typer(help="extension_helpers command-line interface")
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print the package version and exit if requested.

    Args:
        value: Whether the ``--version`` flag was provided.
    """
    if value:
        console.print(f"extension_helpers {__version__}")
        raise typer.Exit()


def _fail(exc: HelperError) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {exc}")
    raise typer.Exit(2)


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(  # noqa: UP007 - Optional for clarity in help
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
    log_level: Optional[str] = typer.Option(  # noqa: UP007
        None, "--log-level", help="Logging level, defaults to the configured one."
    ),
) -> None:
    """Root command callback.

    Configures logging before any subcommand runs.

    Args:
        ctx: Typer context object.
        version: If provided, prints version and exits.
        log_level: Overrides ``EXTENSION_HELPERS_LOG_LEVEL``.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level or get_settings().log_level)


@app.command()
def replace(
    text: str = typer.Argument(..., help="Text to rewrite"),
    chars: str = typer.Option(..., "--chars", "-c", help="Characters to replace"),
    new_val: Optional[str] = typer.Option(  # noqa: UP007
        None, "--with", "-w", help="Replacement value"
    ),
) -> None:
    """Replace each run of the given characters with a single value."""
    separator = get_settings().separator if new_val is None else new_val
    try:
        console.print(multi_char_replace(text, separator, *chars), markup=False)
    except HelperError as exc:
        _fail(exc)


@app.command()
def trim(
    text: str = typer.Argument(..., help="Text to trim"),
    first: int = typer.Option(0, "--first", help="Characters to drop from the start"),
    last: int = typer.Option(0, "--last", help="Characters to drop from the end"),
) -> None:
    """Drop characters from the start and/or the end of a string."""
    try:
        console.print(remove_last(remove_first(text, first), last), markup=False)
    except HelperError as exc:
        _fail(exc)


@app.command()
def reverse(items: List[str] = typer.Argument(..., help="Items to reverse")) -> None:
    """Print the items in reverse order."""
    reverse_items(items)
    console.print(" ".join(items), markup=False)


@app.command()
def shuffle(
    items: List[str] = typer.Argument(..., help="Items to shuffle"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible order"),  # noqa: UP007
) -> None:
    """Print the items in a random order."""
    rng = random.Random(get_settings().shuffle_seed if seed is None else seed)
    shuffle_items(items, rng)
    console.print(" ".join(items), markup=False)


@app.command()
def batch(
    items: List[str] = typer.Argument(..., help="Items to group"),
    size: Optional[int] = typer.Option(None, "--size", "-n", help="Items per batch"),  # noqa: UP007
) -> None:
    """Print the items in groups, one group per line."""
    try:
        chunks = batch_items(items, get_settings().batch_size if size is None else size)
    except HelperError as exc:
        _fail(exc)
    for chunk in chunks:
        console.print(" ".join(chunk), markup=False)


@app.command()
def between(
    value: float = typer.Argument(..., help="Value to test"),
    start: float = typer.Argument(..., help="Lower bound"),
    end: float = typer.Argument(..., help="Upper bound"),
    inclusive: bool = typer.Option(False, "--inclusive", help="Include the bounds"),
) -> None:
    """Exit with status 0 if the value lies in the range, 1 otherwise."""
    check = is_within if inclusive else is_between
    inside = check(value, start, end)
    console.print("yes" if inside else "no")
    if not inside:
        raise typer.Exit(1)


if __name__ == "__main__":  # pragma: no cover
    app()
