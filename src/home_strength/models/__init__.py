"""Data models for home-strength."""

from .exercises import EnergyLevel, Equipment, ExerciseTemplate, MuscleFocus
from .progress import CompletedWorkout, GroupClassLog, LoggedExercise, LoggedSet
from .routine import (
    AdultRequest,
    DurationBucket,
    ExerciseInstance,
    GeneratedRoutine,
    Intensity,
    KidDuration,
    KidRequest,
)
from .user_profile import ProfileType, UserProfile

__all__ = [
    "AdultRequest",
    "CompletedWorkout",
    "DurationBucket",
    "EnergyLevel",
    "Equipment",
    "ExerciseInstance",
    "ExerciseTemplate",
    "GeneratedRoutine",
    "GroupClassLog",
    "Intensity",
    "KidDuration",
    "KidRequest",
    "LoggedExercise",
    "LoggedSet",
    "MuscleFocus",
    "ProfileType",
    "UserProfile",
]
