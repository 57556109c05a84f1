"""Turn a duration bucket and intensity into routine parameters."""

from dataclasses import dataclass

from ..errors import InvalidRequestError
from ..models.routine import DurationBucket, Intensity

# Target minutes per duration bucket (low, high)
DURATION_MINUTES: dict[DurationBucket, tuple[int, int]] = {
    DurationBucket.SHORT: (15, 20),
    DurationBucket.MEDIUM: (25, 35),
    DurationBucket.LONG: (40, 50),
}

# Sets per exercise and rest between sets, per intensity
INTENSITY_SETTINGS: dict[Intensity, dict[str, int]] = {
    Intensity.EASY: {"sets": 2, "rest_seconds": 75},
    Intensity.MEDIUM: {"sets": 3, "rest_seconds": 50},
    Intensity.HARD: {"sets": 4, "rest_seconds": 40},
}

AVERAGE_WORK_SECONDS = 40  # Typical working time of one set
MIN_EXERCISES = 3
MAX_EXERCISES = 12


@dataclass(frozen=True)
class ResolvedConstraints:
    """Per-routine targets derived from a request."""

    target_exercise_count: int
    sets_per_exercise: int
    rest_seconds: int
    target_minutes: tuple[int, int]

    @property
    def target_midpoint(self) -> float:
        low, high = self.target_minutes
        return (low + high) / 2


def clamp_exercise_count(count: float) -> int:
    """Round to the nearest whole exercise and clamp to [3, 12]."""
    return max(MIN_EXERCISES, min(MAX_EXERCISES, round(count)))


def resolve(duration: DurationBucket, intensity: Intensity) -> ResolvedConstraints:
    """Resolve target exercise count, sets and rest for a request.

    The exercise count is the target midpoint divided by the time one
    exercise costs at this intensity: sets * (work + rest).
    """
    try:
        low, high = DURATION_MINUTES[DurationBucket(duration)]
        settings = INTENSITY_SETTINGS[Intensity(intensity)]
    except (KeyError, ValueError) as e:
        raise InvalidRequestError(f"Unknown duration or intensity: {e}") from e

    if low <= 0 or high < low:
        raise InvalidRequestError(f"Invalid minute range for {duration}: {low}-{high}")

    sets = settings["sets"]
    rest = settings["rest_seconds"]
    if sets <= 0 or rest < 0:
        raise InvalidRequestError(f"Invalid intensity settings for {intensity}")

    per_exercise_minutes = sets * (AVERAGE_WORK_SECONDS + rest) / 60
    count = clamp_exercise_count(((low + high) / 2) / per_exercise_minutes)

    return ResolvedConstraints(
        target_exercise_count=count,
        sets_per_exercise=sets,
        rest_seconds=rest,
        target_minutes=(low, high),
    )
