"""Generate routine commands."""

import click

from ..db import RoutineRepository, get_db_path
from ..errors import GenerationError
from ..generators import WorkoutGenerator
from ..models.exercises import EnergyLevel, Equipment, MuscleFocus
from ..models.routine import (
    AdultRequest,
    DurationBucket,
    GeneratedRoutine,
    Intensity,
    KidDuration,
    KidRequest,
)
from ..models.user_profile import ProfileType
from .base import (
    async_command,
    configure_logging,
    echo_error,
    echo_info,
    echo_routine,
    echo_success,
    ensure_initialized,
    make_rng,
)
from .interactive import CancelledError, ask_request

ADULT_PROFILES = [p.value for p in ProfileType if p.is_adult_or_teen]
KID_PROFILES = [p.value for p in ProfileType if p.is_young_kid]


async def _save(ctx: click.Context, routine: GeneratedRoutine) -> None:
    ensure_initialized(ctx)
    repo = RoutineRepository(get_db_path())
    routine_id = await repo.create(routine)
    echo_success(f"Routine saved (ID: {routine_id[:8]})")
    click.echo(f"  - Log it when done: home-strength log {routine_id[:8]}")


def _run(
    ctx: click.Context,
    request: AdultRequest | KidRequest,
    seed: int | None,
    strict: bool,
) -> GeneratedRoutine:
    generator = WorkoutGenerator(rng=make_rng(seed), strict=strict)
    try:
        return generator.generate(request)
    except GenerationError as e:
        echo_error(str(e))
        ctx.exit(1)


@click.command()
@click.option(
    "--equipment",
    "-e",
    multiple=True,
    type=click.Choice([eq.value for eq in Equipment]),
    help="Available equipment (repeatable). Omit for any equipment.",
)
@click.option(
    "--duration",
    "-d",
    type=click.Choice([d.value for d in DurationBucket]),
    default=DurationBucket.MEDIUM.value,
    show_default=True,
    help="short (15-20 min), medium (25-35 min) or long (40-50 min)",
)
@click.option(
    "--intensity",
    "-i",
    type=click.Choice([i.value for i in Intensity]),
    default=Intensity.MEDIUM.value,
    show_default=True,
)
@click.option(
    "--focus",
    "-f",
    type=click.Choice([f.value for f in MuscleFocus]),
    default=None,
    help="Muscle focus (default: full body)",
)
@click.option(
    "--profile",
    "-p",
    type=click.Choice(ADULT_PROFILES),
    default=ProfileType.ADULT.value,
    show_default=True,
)
@click.option("--seed", type=int, default=None, help="Seed for a repeatable routine")
@click.option("--strict", is_flag=True, help="Fail instead of returning a shorter routine")
@click.option("--save", "-s", is_flag=True, help="Save the routine")
@click.option("--interactive", is_flag=True, help="Answer questions instead of using options")
@click.option("--verbose", "-v", is_flag=True, help="Show generator logs")
@click.pass_context
@async_command
async def generate(
    ctx,
    equipment: tuple[str, ...],
    duration: str,
    intensity: str,
    focus: str | None,
    profile: str,
    seed: int | None,
    strict: bool,
    save: bool,
    interactive: bool,
    verbose: bool,
):
    """Generate a random routine for an adult or teen.

    Examples:

        # Dumbbells only, 25-35 minutes
        home-strength generate -e dumbbells --duration medium

        # Short, hard, lower-body routine with bands and a bench
        home-strength generate -e resistance_bands -e bench -d short -i hard -f lower_body

        # Same routine every time
        home-strength generate --seed 42
    """
    configure_logging(verbose)

    if interactive:
        try:
            request = await ask_request()
        except CancelledError:
            echo_info("Cancelled")
            return
    else:
        request = AdultRequest(
            equipment=frozenset(Equipment(eq) for eq in equipment),
            duration=DurationBucket(duration),
            intensity=Intensity(intensity),
            focus=MuscleFocus(focus) if focus else None,
            profile=ProfileType(profile),
        )

    routine = _run(ctx, request, seed, strict)
    echo_routine(routine)

    if save:
        await _save(ctx, routine)


@click.command()
@click.option(
    "--duration",
    "-d",
    type=click.Choice([d.value for d in KidDuration]),
    default=KidDuration.SHORT.value,
    show_default=True,
    help="short (5-8 min), medium (10-12 min) or long (15 min)",
)
@click.option(
    "--energy",
    "-e",
    type=click.Choice([e.value for e in EnergyLevel]),
    default=EnergyLevel.MEDIUM.value,
    show_default=True,
)
@click.option(
    "--profile",
    "-p",
    type=click.Choice(KID_PROFILES),
    default=ProfileType.CHILD_7.value,
    show_default=True,
)
@click.option("--seed", type=int, default=None, help="Seed for a repeatable routine")
@click.option("--save", "-s", is_flag=True, help="Save the routine")
@click.option("--verbose", "-v", is_flag=True, help="Show generator logs")
@click.pass_context
@async_command
async def kid(
    ctx,
    duration: str,
    energy: str,
    profile: str,
    seed: int | None,
    save: bool,
    verbose: bool,
):
    """Generate a fun activity routine for a young kid.

    Example:

        home-strength kid --duration short --energy high
    """
    configure_logging(verbose)

    request = KidRequest(
        duration=KidDuration(duration),
        energy=EnergyLevel(energy),
        profile=ProfileType(profile),
    )
    routine = _run(ctx, request, seed, strict=False)
    echo_routine(routine)

    if save:
        await _save(ctx, routine)
