"""Shared CLI utilities."""

import asyncio
import logging
import random
from functools import wraps

import click

from ..db import AmbiguousIdError, RoutineRepository, get_db_path
from ..models.routine import GeneratedRoutine


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'home-strength init' first."
        )
        ctx.exit(1)


def configure_logging(verbose: bool) -> None:
    """Send library logs to stderr when --verbose is passed."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def make_rng(seed: int | None) -> random.Random:
    """Seeded random source for repeatable routines."""
    return random.Random(seed)


async def load_routine(ctx: click.Context, routine_id: str) -> GeneratedRoutine:
    """Load a saved routine by id or prefix, exiting with an error if it can't."""
    try:
        routine = await RoutineRepository(get_db_path()).get(routine_id)
    except AmbiguousIdError as e:
        echo_error(
            f"Routine ID '{routine_id}' is ambiguous ({e.matches} matches), "
            "use more characters"
        )
        ctx.exit(1)

    if not routine:
        echo_error(f"Routine {routine_id} not found")
        ctx.exit(1)
    return routine


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def echo_routine(routine: GeneratedRoutine) -> None:
    """Print a routine between separator lines."""
    click.echo("=" * 60)
    click.echo(routine.get_summary().rstrip())
    click.echo("=" * 60)
    if routine.is_short:
        echo_warning(
            f"Routine is shorter than requested ({routine.shortfall} exercise(s) missing). "
            "Try adding equipment or clearing the focus."
        )


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = []
    lines.append("".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)))
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row))
        )

    return "\n".join(line.rstrip() for line in lines)
