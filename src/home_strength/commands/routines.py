"""Saved routine management commands."""

import click

from ..db import RoutineRepository, get_db_path
from ..models.user_profile import ProfileType
from .base import (
    async_command,
    echo_info,
    echo_routine,
    echo_success,
    ensure_initialized,
    format_table,
    load_routine,
)


@click.group()
@click.pass_context
def routines(ctx):
    """Manage saved routines."""
    ensure_initialized(ctx)


@routines.command(name="list")
@click.option(
    "--profile",
    "-p",
    type=click.Choice([p.value for p in ProfileType]),
    default=None,
    help="Only routines for this profile",
)
@async_command
async def list_routines(profile: str | None):
    """List saved routines."""
    repo = RoutineRepository(get_db_path())

    if profile:
        saved = await repo.list_for_profile(ProfileType(profile))
    else:
        saved = await repo.list_all()

    if not saved:
        echo_info("No routines saved. Generate one with 'home-strength generate --save'")
        return

    headers = ["ID", "Name", "Profile", "Exercises", "Minutes", "Created"]
    rows = []
    for routine in saved:
        created = routine.created_at.strftime("%Y-%m-%d") if routine.created_at else "N/A"
        rows.append([
            str(routine.id)[:8],
            routine.name[:30] + "..." if len(routine.name) > 30 else routine.name,
            routine.profile_type.display_name,
            str(len(routine.exercises)),
            str(routine.estimated_minutes),
            created,
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(saved)} routine(s)")


@routines.command()
@click.argument("routine_id")
@click.pass_context
@async_command
async def show(ctx, routine_id: str):
    """Show a saved routine (full ID or its first characters)."""
    echo_routine(await load_routine(ctx, routine_id))


@routines.command()
@click.argument("routine_id")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, routine_id: str, yes: bool):
    """Delete a saved routine."""
    routine = await load_routine(ctx, routine_id)

    if not yes and not click.confirm(f"Delete '{routine.name}'?"):
        echo_info("Cancelled")
        return

    await RoutineRepository(get_db_path()).delete(routine.id)
    echo_success(f"Deleted routine {str(routine.id)[:8]}")
