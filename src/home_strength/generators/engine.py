"""Workout generation entry points.

Example:
```
generator = WorkoutGenerator(rng=random.Random(42))
routine = generator.generate_adult_routine(
    equipment={Equipment.DUMBBELLS},
    duration=DurationBucket.MEDIUM,
    intensity=Intensity.MEDIUM,
)
kid_routine = generator.generate_kid_routine(KidDuration.SHORT, EnergyLevel.HIGH)
```
"""

import logging
import random
from collections.abc import Iterable

from ..errors import EmptyCatalogError, InvalidRequestError
from ..models.exercises import EnergyLevel, Equipment, ExerciseTemplate, MuscleFocus
from ..models.routine import (
    AdultRequest,
    DurationBucket,
    ExerciseInstance,
    GeneratedRoutine,
    Intensity,
    KidDuration,
    KidRequest,
)
from ..models.user_profile import ProfileType
from ..utils.exercise_utils import reduce_reps
from .assembler import assemble
from .catalog import DEFAULT_CATALOG, ExerciseCatalog
from .kid_mode import pick_activities
from .resolver import ResolvedConstraints, resolve
from .sampler import estimate_minutes, instance_seconds, sample

logger = logging.getLogger(__name__)


class WorkoutGenerator:
    """Generates randomized routines from the exercise catalog.

    Holds no per-request state. The catalog is shared read-only data and
    the random source is injected so tests can fix the seed.
    """

    def __init__(
        self,
        catalog: ExerciseCatalog | None = None,
        rng: random.Random | None = None,
        strict: bool = False,
    ):
        self.catalog = catalog or DEFAULT_CATALOG
        self.rng = rng or random.Random()
        self.strict = strict

    def generate(self, request: AdultRequest | KidRequest) -> GeneratedRoutine:
        """Generate a routine for either request variant."""
        if isinstance(request, AdultRequest):
            return self._generate_adult(request)
        if isinstance(request, KidRequest):
            return self._generate_kid(request)
        raise InvalidRequestError(
            f"Expected AdultRequest or KidRequest, got {type(request).__name__}"
        )

    def generate_adult_routine(
        self,
        equipment: Iterable[Equipment],
        duration: DurationBucket,
        intensity: Intensity,
        focus: MuscleFocus | None = None,
        profile: ProfileType = ProfileType.ADULT,
    ) -> GeneratedRoutine:
        """Generate an adult or teen routine.

        Raises:
            EmptyCatalogError: No exercise fits the equipment and focus
            InsufficientCatalogError: Strict mode only, too few exercises fit
            InvalidRequestError: Malformed arguments or a young-kid profile
        """
        try:
            equipment_snapshot = frozenset(equipment)
        except TypeError as e:
            raise InvalidRequestError(f"Equipment must be a collection: {e}") from e

        request = AdultRequest(
            equipment=equipment_snapshot,
            duration=duration,
            intensity=intensity,
            focus=focus,
            profile=profile,
        )
        return self._generate_adult(request)

    def generate_kid_routine(
        self,
        duration: KidDuration,
        energy: EnergyLevel,
        profile: ProfileType = ProfileType.CHILD_7,
    ) -> GeneratedRoutine:
        """Generate a young-kid activity routine."""
        return self._generate_kid(
            KidRequest(duration=duration, energy=energy, profile=profile)
        )

    def _generate_adult(self, request: AdultRequest) -> GeneratedRoutine:
        constraints = resolve(request.duration, request.intensity)
        candidates = self.catalog.templates_matching(
            equipment=request.equipment,
            focus=request.effective_focus,
            kid_friendly=False,
        )
        if not candidates:
            equipment = ", ".join(sorted(eq.value for eq in request.equipment)) or "any"
            focus = request.effective_focus.value if request.effective_focus else "full body"
            raise EmptyCatalogError(
                f"No exercises for equipment [{equipment}] with {focus} focus"
            )

        result = sample(
            candidates,
            constraints.target_exercise_count,
            focus=request.effective_focus,
            rng=self.rng,
            strict=self.strict,
        )
        exercises = [
            self._prescribe(template, request.intensity, constraints)
            for template in result.templates
        ]
        exercises = self._fit_time_box(exercises, candidates, request.intensity, constraints)
        minutes = estimate_minutes(exercises)

        logger.info(
            "Generated %d-exercise %s routine (%d min, target %d-%d)",
            len(exercises),
            request.intensity.value,
            minutes,
            *constraints.target_minutes,
        )
        return assemble(
            exercises,
            request,
            minutes,
            requested_count=result.requested,
            rng=self.rng,
        )

    def _generate_kid(self, request: KidRequest) -> GeneratedRoutine:
        activities, result = pick_activities(
            self.catalog,
            request.duration,
            request.energy,
            rng=self.rng,
        )
        minutes = estimate_minutes(activities)

        logger.info(
            "Generated %d-activity kid routine (%s energy, %d min)",
            len(activities),
            request.energy.value,
            minutes,
        )
        return assemble(
            activities,
            request,
            minutes,
            requested_count=result.requested,
            rng=self.rng,
        )

    def _fit_time_box(
        self,
        exercises: list[ExerciseInstance],
        candidates: list[ExerciseTemplate],
        intensity: Intensity,
        constraints: ResolvedConstraints,
    ) -> list[ExerciseInstance]:
        """Swap the longest picks for shorter unused ones until the routine
        fits under its bucket's upper bound.

        The exercise count never changes, so a routine that cannot be
        swapped down (a small pool) is returned over time.
        """
        limit = constraints.target_minutes[1] * 60
        total = sum(instance_seconds(ex) for ex in exercises)
        if total <= limit:
            return exercises

        used = {ex.template_id for ex in exercises}
        unused = {t.id: t for t in candidates if t.id not in used}
        spare = [self._prescribe(t, intensity, constraints) for t in unused.values()]
        self.rng.shuffle(spare)

        exercises = list(exercises)
        while total > limit and spare:
            index = max(range(len(exercises)), key=lambda i: instance_seconds(exercises[i]))
            longest = instance_seconds(exercises[index])
            room = limit - (total - longest)

            fitting = [ex for ex in spare if instance_seconds(ex) <= room]
            if fitting:
                swap = max(fitting, key=instance_seconds)
            else:
                swap = min(spare, key=instance_seconds)
                if instance_seconds(swap) >= longest:
                    break

            spare.remove(swap)
            logger.debug(
                "Swapped %s for %s to stay under %d min",
                exercises[index].template_id,
                swap.template_id,
                constraints.target_minutes[1],
            )
            exercises[index] = swap
            total += instance_seconds(swap) - longest

        return exercises

    @staticmethod
    def _prescribe(
        template: ExerciseTemplate,
        intensity: Intensity,
        constraints: ResolvedConstraints,
    ) -> ExerciseInstance:
        """Copy a template with the resolved sets and rest."""
        reps = template.reps
        if intensity == Intensity.EASY:
            reps = reduce_reps(reps)
        return ExerciseInstance.from_template(
            template,
            sets=constraints.sets_per_exercise,
            rest_seconds=constraints.rest_seconds,
            reps=reps,
        )


def generate_adult_routine(
    equipment: Iterable[Equipment],
    duration: DurationBucket,
    intensity: Intensity,
    focus: MuscleFocus | None = None,
    profile: ProfileType = ProfileType.ADULT,
    rng: random.Random | None = None,
) -> GeneratedRoutine:
    """Convenience function for one-off adult/teen generation."""
    return WorkoutGenerator(rng=rng).generate_adult_routine(
        equipment, duration, intensity, focus=focus, profile=profile
    )


def generate_kid_routine(
    duration: KidDuration,
    energy: EnergyLevel,
    profile: ProfileType = ProfileType.CHILD_7,
    rng: random.Random | None = None,
) -> GeneratedRoutine:
    """Convenience function for one-off kid generation."""
    return WorkoutGenerator(rng=rng).generate_kid_routine(
        duration, energy, profile=profile
    )
