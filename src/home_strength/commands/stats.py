"""Progress statistics command."""

import click

from ..db import CompletedWorkoutRepository, GroupClassLogRepository, get_db_path
from ..models.user_profile import ProfileType, UserProfile
from ..services import ProgressStats
from .base import async_command, echo_info, ensure_initialized, format_table


@click.command()
@click.option(
    "--profile",
    "-p",
    type=click.Choice([p.value for p in ProfileType]),
    default=ProfileType.ADULT.value,
    show_default=True,
)
@click.option("--name", default=None, help="Name to show for the profile, e.g. Maya")
@click.option("--exercise", "-x", default=None, help="Show weight history for an exercise")
@click.option("--weeks", type=click.IntRange(1, 52), default=4, show_default=True)
@click.pass_context
@async_command
async def stats(ctx, profile: str, name: str | None, exercise: str | None, weeks: int):
    """Show streaks and workout counts for a profile."""
    ensure_initialized(ctx)

    user = UserProfile(ProfileType(profile), custom_name=name)
    db_path = get_db_path()
    workouts = await CompletedWorkoutRepository(db_path).list_for_user(user.id)

    classes = []
    if user.profile_type.is_group_fitness:
        classes = await GroupClassLogRepository(db_path).list_for_user(user.id)

    if not workouts and not classes:
        echo_info(f"No workouts logged for {user.display_name} yet")
        return

    click.echo(f"Profile: {user.display_name}")
    if classes:
        click.echo(f"Classes led: {len(classes)}")
        headcounts = [c.participant_count for c in classes if c.participant_count]
        if headcounts:
            click.echo(f"Participants: {sum(headcounts)}")
    if not workouts:
        return

    progress = ProgressStats(workouts, user.id)
    click.echo(progress.get_summary().rstrip())
    click.echo()

    rows = [
        [monday.strftime("%Y-%m-%d"), str(count)]
        for monday, count in progress.weekly_counts(weeks)
    ]
    click.echo(format_table(["Week of", "Workouts"], rows))

    if exercise:
        history = progress.weight_history(exercise)
        click.echo()
        if not history:
            echo_info(f"No weights logged for {exercise}")
            return
        click.echo(
            format_table(
                ["Date", "Weight (lb)"],
                [[when.strftime("%Y-%m-%d"), f"{lbs:g}"] for when, lbs in history],
            )
        )
