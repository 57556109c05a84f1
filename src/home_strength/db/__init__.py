"""Database layer for home-strength."""

from .engine import get_data_dir, get_db_path, init_db
from .repositories import (
    AmbiguousIdError,
    CompletedWorkoutRepository,
    GroupClassLogRepository,
    RoutineRepository,
)

__all__ = [
    "AmbiguousIdError",
    "CompletedWorkoutRepository",
    "get_data_dir",
    "get_db_path",
    "GroupClassLogRepository",
    "init_db",
    "RoutineRepository",
]
