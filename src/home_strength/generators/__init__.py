"""Workout routine generation."""

from .catalog import DEFAULT_CATALOG, ExerciseCatalog
from .engine import WorkoutGenerator, generate_adult_routine, generate_kid_routine
from .resolver import ResolvedConstraints, resolve
from .sampler import SampleResult, estimate_minutes, sample

__all__ = [
    "DEFAULT_CATALOG",
    "ExerciseCatalog",
    "ResolvedConstraints",
    "SampleResult",
    "WorkoutGenerator",
    "estimate_minutes",
    "generate_adult_routine",
    "generate_kid_routine",
    "resolve",
    "sample",
]
