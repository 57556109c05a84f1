"""Shared helpers for home-strength."""

from .exercise_utils import (
    estimate_work_seconds,
    find_matching_exercise,
    normalize_exercise_name,
    reduce_reps,
)

__all__ = [
    "estimate_work_seconds",
    "find_matching_exercise",
    "normalize_exercise_name",
    "reduce_reps",
]
