"""Activity routines for young kids.

Kid routines skip equipment, focus and intensity entirely. A duration
bucket and an energy level pick playful bodyweight activities, each done
for a number of seconds with no sets, reps or rest.
"""

import logging
import math
import random

from ..errors import EmptyCatalogError
from ..models.exercises import EnergyLevel, ExerciseTemplate
from ..models.routine import ExerciseInstance, KidDuration
from .catalog import ExerciseCatalog
from .sampler import SampleResult, sample

logger = logging.getLogger(__name__)

KID_DURATION_MINUTES: dict[KidDuration, int] = {
    KidDuration.SHORT: 6,
    KidDuration.MEDIUM: 11,
    KidDuration.LONG: 15,
}

KID_DURATION_LABELS: dict[KidDuration, str] = {
    KidDuration.SHORT: "Short (5-8 min)",
    KidDuration.MEDIUM: "Medium (10-12 min)",
    KidDuration.LONG: "Long (15 min)",
}

# Seconds per activity and the cue that sets the pace
ENERGY_SETTINGS: dict[EnergyLevel, dict] = {
    EnergyLevel.LOW: {"seconds": 45, "cue": "Nice and slow"},
    EnergyLevel.MEDIUM: {"seconds": 50, "cue": "Steady pace"},
    EnergyLevel.HIGH: {"seconds": 60, "cue": "Super fast"},
}

MIN_ACTIVITIES = 3


def activity_count(duration: KidDuration, energy: EnergyLevel) -> int:
    """Number of activities that fill the duration bucket.

    Unlike adult routines there is no upper cap, a long bucket simply
    wants more activities.
    """
    seconds = KID_DURATION_MINUTES[duration] * 60
    return max(MIN_ACTIVITIES, round(seconds / ENERGY_SETTINGS[energy]["seconds"]))


def work_seconds_for(duration: KidDuration, energy: EnergyLevel, picked: int) -> int:
    """Seconds per activity so ``picked`` activities fill the bucket.

    Never less than the energy level's base time. When the pool held
    fewer activities than the bucket wants, each one runs longer.
    """
    base = ENERGY_SETTINGS[energy]["seconds"]
    if picked >= activity_count(duration, energy):
        return base
    return max(base, math.ceil(KID_DURATION_MINUTES[duration] * 60 / picked))


def to_activity(
    template: ExerciseTemplate,
    energy: EnergyLevel,
    work_seconds: int | None = None,
) -> ExerciseInstance:
    """Copy a kid template into a timed activity."""
    settings = ENERGY_SETTINGS[energy]
    instructions = settings["cue"] + "!"
    if template.instructions:
        instructions = f"{settings['cue']}: {template.instructions}"

    return ExerciseInstance(
        template_id=template.id,
        name=template.name,
        equipment=template.equipment,
        focus=template.focus,
        sets=None,
        reps=None,
        rest_seconds=0,
        instructions=instructions,
        work_seconds=work_seconds or settings["seconds"],
    )


def pick_activities(
    catalog: ExerciseCatalog,
    duration: KidDuration,
    energy: EnergyLevel,
    rng: random.Random,
) -> tuple[list[ExerciseInstance], SampleResult]:
    """Choose and time the activities for a kid routine.

    A pool too small for the bucket never shortens the routine: every
    activity is stretched so the total still reaches the bucket's minutes.

    Raises:
        EmptyCatalogError: If the kid catalog is empty
    """
    pool = catalog.kid_templates_for_energy(energy)
    if not pool:
        logger.warning("No kid activities tagged for %s energy, using all", energy.value)
        pool = catalog.templates_matching(kid_friendly=True)
    if not pool:
        raise EmptyCatalogError("No kid activities in the catalog")

    wanted = activity_count(duration, energy)
    result = sample(pool, min(wanted, len(pool)), focus=None, rng=rng)
    work_seconds = work_seconds_for(duration, energy, len(result.templates))
    if work_seconds != ENERGY_SETTINGS[energy]["seconds"]:
        logger.info(
            "Only %d of %d kid activities available, stretching each to %ds",
            len(result.templates),
            wanted,
            work_seconds,
        )

    activities = [to_activity(t, energy, work_seconds) for t in result.templates]
    return activities, result
