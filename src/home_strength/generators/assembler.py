"""Package selected exercises into a finished routine."""

import random
from collections.abc import Sequence

from ..models.exercises import EnergyLevel
from ..models.routine import (
    AdultRequest,
    ExerciseInstance,
    GeneratedRoutine,
    KidRequest,
)
from .kid_mode import KID_DURATION_LABELS

KID_ROUTINE_NAMES: dict[EnergyLevel, tuple[str, ...]] = {
    EnergyLevel.LOW: ("Sleepy Sloth Stretch", "Calm Critters", "Slow-Motion Zoo"),
    EnergyLevel.MEDIUM: ("Animal Adventure", "Jungle Explorer", "Fun Moves"),
    EnergyLevel.HIGH: ("Rocket Power", "Super Hero Training", "Dance Party Blast"),
}


def routine_name(request: AdultRequest | KidRequest, rng: random.Random | None = None) -> str:
    """Name for a routine, e.g. "Full Body · Medium Intensity"."""
    if isinstance(request, KidRequest):
        names = KID_ROUTINE_NAMES[request.energy]
        return (rng or random.Random()).choice(names)

    focus = "Full Body" if request.is_full_body else request.focus.display_name
    return f"{focus} · {request.intensity.value.title()} Intensity"


def routine_summary(
    request: AdultRequest | KidRequest, exercises: Sequence[ExerciseInstance]
) -> str:
    """One-line summary of what the routine contains."""
    count = len(exercises)

    if isinstance(request, KidRequest):
        noun = "activity" if count == 1 else "activities"
        return (
            f"{count} fun {noun} · {KID_DURATION_LABELS[request.duration]}"
            f" · {request.energy.value.title()} energy"
        )

    seen = []
    for ex in exercises:
        if ex.equipment not in seen:
            seen.append(ex.equipment)
    equipment = ", ".join(eq.display_name for eq in seen) or "No equipment"
    noun = "exercise" if count == 1 else "exercises"
    return f"{count} {noun} · {equipment}"


def assemble(
    exercises: Sequence[ExerciseInstance],
    request: AdultRequest | KidRequest,
    computed_minutes: int,
    requested_count: int | None = None,
    rng: random.Random | None = None,
) -> GeneratedRoutine:
    """Build the routine object handed back to the caller.

    Every call produces a fresh routine id; each instance keeps the fresh id
    it was created with, independent of its template id.
    """
    requested = requested_count if requested_count is not None else len(exercises)
    focus = request.effective_focus if isinstance(request, AdultRequest) else None

    return GeneratedRoutine(
        name=routine_name(request, rng),
        summary=routine_summary(request, exercises),
        exercises=list(exercises),
        estimated_minutes=computed_minutes,
        profile_type=request.profile,
        focus=focus,
        requested_exercise_count=requested,
        shortfall=max(0, requested - len(exercises)),
    )
