"""Log completed routines and group classes."""

import click

from ..db import CompletedWorkoutRepository, GroupClassLogRepository, get_db_path
from ..generators import DEFAULT_CATALOG
from ..models.progress import CompletedWorkout, GroupClassLog, LoggedExercise, LoggedSet
from ..models.routine import GeneratedRoutine
from ..utils.exercise_utils import find_matching_exercise
from .base import (
    async_command,
    echo_error,
    echo_success,
    echo_warning,
    ensure_initialized,
    load_routine,
)


def parse_weights(
    routine: GeneratedRoutine, weights: tuple[str, ...]
) -> dict[str, float]:
    """Map "Exercise Name=25" options onto template ids in the routine."""
    by_template: dict[str, float] = {}
    templates = [
        DEFAULT_CATALOG.get(ex.template_id)
        for ex in routine.exercises
        if DEFAULT_CATALOG.get(ex.template_id)
    ]

    for item in weights:
        if "=" not in item:
            raise click.BadParameter(f"Expected NAME=LBS, got '{item}'", param_hint="--weight")
        name, value = item.rsplit("=", 1)
        try:
            lbs = float(value)
        except ValueError:
            raise click.BadParameter(f"'{value}' is not a weight", param_hint="--weight")

        match = find_matching_exercise(name, templates)
        if match is None:
            echo_warning(f"'{name.strip()}' is not in this routine, ignoring")
            continue
        by_template[match.id] = lbs

    return by_template


def build_log(
    routine: GeneratedRoutine,
    weights: dict[str, float],
    minutes: int | None,
    jump: float | None,
    notes: str | None,
) -> CompletedWorkout:
    """Record every exercise in the routine as done as prescribed."""
    logged = []
    for ex in routine.exercises:
        reps = ex.reps if ex.reps else f"{ex.work_seconds} sec"
        logged.append(
            LoggedExercise(
                exercise_id=ex.id,
                exercise_name=ex.name,
                sets=[
                    LoggedSet(reps=reps, weight_lbs=weights.get(ex.template_id))
                    for _ in range(ex.sets or 1)
                ],
            )
        )

    return CompletedWorkout(
        user_id=routine.profile_type.stable_id,
        workout_id=routine.id,
        workout_name=routine.name,
        duration_minutes=minutes or routine.estimated_minutes,
        logged_exercises=logged,
        vertical_jump_inches=jump,
        notes=notes,
    )


@click.command()
@click.argument("routine_id")
@click.option("--minutes", "-m", type=click.IntRange(1, 300), default=None, help="Actual duration")
@click.option(
    "--weight",
    "-w",
    multiple=True,
    help='Weight used, e.g. --weight "Goblet Squat=25" (repeatable)',
)
@click.option("--jump", type=float, default=None, help="Vertical jump in inches")
@click.option("--notes", "-n", default=None)
@click.pass_context
@async_command
async def log(
    ctx,
    routine_id: str,
    minutes: int | None,
    weight: tuple[str, ...],
    jump: float | None,
    notes: str | None,
):
    """Log a saved routine as completed."""
    ensure_initialized(ctx)

    routine = await load_routine(ctx, routine_id)
    completed = build_log(routine, parse_weights(routine, weight), minutes, jump, notes)
    await CompletedWorkoutRepository(get_db_path()).create(completed)

    echo_success(f"Logged '{routine.name}' for {routine.profile_type.display_name}")


def build_class_log(
    routine: GeneratedRoutine,
    participants: int | None,
    minutes: int | None,
    notes: str | None,
) -> GroupClassLog:
    """Record a class led from a saved group fitness routine."""
    return GroupClassLog(
        user_id=routine.profile_type.stable_id,
        routine_id=routine.id,
        routine_name=routine.name,
        focus=routine.focus,
        participant_count=participants,
        duration_minutes=minutes or routine.estimated_minutes,
        notes=notes,
    )


@click.command(name="log-class")
@click.argument("routine_id")
@click.option(
    "--participants", "-p", type=click.IntRange(1, 500), default=None, help="Head count"
)
@click.option("--minutes", "-m", type=click.IntRange(1, 300), default=None, help="Actual duration")
@click.option("--notes", "-n", default=None, help="How the class went")
@click.pass_context
@async_command
async def log_class(
    ctx,
    routine_id: str,
    participants: int | None,
    minutes: int | None,
    notes: str | None,
):
    """Log a group class you led from a saved group fitness routine."""
    ensure_initialized(ctx)

    routine = await load_routine(ctx, routine_id)
    if not routine.profile_type.is_group_fitness:
        echo_error(
            f"'{routine.name}' is a {routine.profile_type.display_name} routine. "
            "Generate one with '-p group_fitness' to log classes."
        )
        ctx.exit(1)

    class_log = build_class_log(routine, participants, minutes, notes)
    await GroupClassLogRepository(get_db_path()).create(class_log)

    headcount = f" with {participants} participant(s)" if participants else ""
    echo_success(f"Logged class '{routine.name}'{headcount}")
