"""Non-repeating exercise selection and duration estimation."""

import logging
import math
import random
from collections.abc import Sequence
from dataclasses import dataclass

from ..errors import EmptyCatalogError, InsufficientCatalogError
from ..models.exercises import ExerciseTemplate, MuscleFocus
from ..models.routine import ExerciseInstance
from ..utils.exercise_utils import estimate_work_seconds

logger = logging.getLogger(__name__)


@dataclass
class SampleResult:
    """Templates picked for a routine plus any shortfall."""

    templates: list[ExerciseTemplate]
    requested: int
    shortfall: int = 0

    @property
    def is_short(self) -> bool:
        return self.shortfall > 0


def _round_robin(
    catalog: Sequence[ExerciseTemplate], count: int, rng: random.Random
) -> list[ExerciseTemplate]:
    """Pick one template per muscle-focus partition per round.

    Partitions are keyed by primary focus and built in catalog order so the
    same rng state always yields the same routine. Exhausted partitions
    drop out, leaving a uniform draw over whatever remains.
    """
    partitions: dict[MuscleFocus, list[ExerciseTemplate]] = {}
    for template in catalog:
        partitions.setdefault(template.primary_focus, []).append(template)

    for members in partitions.values():
        rng.shuffle(members)

    order = list(partitions)
    rng.shuffle(order)

    picked: list[ExerciseTemplate] = []
    while len(picked) < count and order:
        for tag in list(order):
            if len(picked) >= count:
                break
            members = partitions[tag]
            picked.append(members.pop())
            if not members:
                order.remove(tag)

    return picked


def sample(
    catalog: Sequence[ExerciseTemplate],
    count: int,
    focus: MuscleFocus | None = None,
    rng: random.Random | None = None,
    strict: bool = False,
) -> SampleResult:
    """Select up to ``count`` distinct templates from a filtered catalog.

    Args:
        catalog: Templates already filtered by equipment/focus/kid mode
        count: Number of exercises wanted
        focus: Requested focus. None or FULL_BODY spreads picks across
            muscle-focus partitions.
        rng: Random source; pass a seeded ``random.Random`` for repeatable
            routines
        strict: Raise InsufficientCatalogError instead of returning fewer
            exercises than requested

    Returns:
        SampleResult with the picks in routine order

    Raises:
        EmptyCatalogError: If the catalog is empty
        InsufficientCatalogError: In strict mode, when the catalog is too small
    """
    if count < 1:
        raise ValueError(f"Exercise count must be positive, got {count}")
    if not catalog:
        raise EmptyCatalogError()

    rng = rng or random.Random()

    # Deduplicate by id, keeping catalog order
    unique: dict[str, ExerciseTemplate] = {}
    for template in catalog:
        unique.setdefault(template.id, template)
    pool = list(unique.values())

    if len(pool) < count:
        if strict:
            raise InsufficientCatalogError(requested=count, available=len(pool))
        logger.warning(
            "Only %d of %d requested exercises available", len(pool), count
        )

    take = min(count, len(pool))
    if focus is None or focus == MuscleFocus.FULL_BODY:
        picked = _round_robin(pool, take, rng)
    else:
        picked = rng.sample(pool, take)

    logger.debug("Sampled %s", [t.id for t in picked])

    return SampleResult(
        templates=picked,
        requested=count,
        shortfall=count - len(picked),
    )


def instance_seconds(instance: ExerciseInstance) -> int:
    """Time one exercise takes: sets * (work + rest), or its work time."""
    if instance.is_timed_activity:
        return instance.work_seconds + instance.rest_seconds
    sets = instance.sets or 1
    return sets * (estimate_work_seconds(instance.reps or "") + instance.rest_seconds)


def estimate_minutes(instances: Sequence[ExerciseInstance]) -> int:
    """Total routine time in whole minutes, rounded up.

    Computed from the exercises that were actually selected, never from
    the requested duration bucket.
    """
    total_seconds = sum(instance_seconds(ex) for ex in instances)
    return math.ceil(total_seconds / 60)
