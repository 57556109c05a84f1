"""Completed workout and group class logging models."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from .exercises import MuscleFocus


@dataclass
class LoggedSet:
    """One completed set: reps done and optional weight used."""

    reps: str  # e.g. "10" or "30 sec"
    weight_lbs: float | None = None


@dataclass
class LoggedExercise:
    """Result for one exercise in a completed workout."""

    exercise_name: str
    sets: list[LoggedSet] = field(default_factory=list)
    exercise_id: UUID | None = None


@dataclass
class CompletedWorkout:
    """A completed workout session for one profile."""

    user_id: UUID
    workout_id: UUID
    workout_name: str
    completed_at: datetime = field(default_factory=datetime.now)
    duration_minutes: int | None = None
    logged_exercises: list[LoggedExercise] = field(default_factory=list)
    vertical_jump_inches: float | None = None  # Teen athlete profile
    notes: str | None = None
    id: UUID = field(default_factory=uuid4)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": str(self.id),
            "user_id": str(self.user_id),
            "workout_id": str(self.workout_id),
            "workout_name": self.workout_name,
            "completed_at": self.completed_at.isoformat(),
            "duration_minutes": self.duration_minutes,
            "logged_exercises": [
                {
                    "exercise_id": str(le.exercise_id) if le.exercise_id else None,
                    "exercise_name": le.exercise_name,
                    "sets": [
                        {"reps": s.reps, "weight_lbs": s.weight_lbs} for s in le.sets
                    ],
                }
                for le in self.logged_exercises
            ],
            "vertical_jump_inches": self.vertical_jump_inches,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CompletedWorkout":
        """Create from dictionary."""
        return cls(
            id=UUID(data["id"]),
            user_id=UUID(data["user_id"]),
            workout_id=UUID(data["workout_id"]),
            workout_name=data["workout_name"],
            completed_at=datetime.fromisoformat(data["completed_at"]),
            duration_minutes=data.get("duration_minutes"),
            logged_exercises=[
                LoggedExercise(
                    exercise_id=UUID(le["exercise_id"]) if le.get("exercise_id") else None,
                    exercise_name=le["exercise_name"],
                    sets=[
                        LoggedSet(reps=s["reps"], weight_lbs=s.get("weight_lbs"))
                        for s in le.get("sets", [])
                    ],
                )
                for le in data.get("logged_exercises", [])
            ],
            vertical_jump_inches=data.get("vertical_jump_inches"),
            notes=data.get("notes"),
        )


@dataclass
class GroupClassLog:
    """A group class an instructor led from a saved routine."""

    user_id: UUID
    routine_id: UUID
    routine_name: str
    focus: MuscleFocus | None = None
    completed_at: datetime = field(default_factory=datetime.now)
    participant_count: int | None = None
    duration_minutes: int | None = None  # Time actually used, if different
    notes: str | None = None
    id: UUID = field(default_factory=uuid4)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": str(self.id),
            "user_id": str(self.user_id),
            "routine_id": str(self.routine_id),
            "routine_name": self.routine_name,
            "focus": self.focus.value if self.focus else None,
            "completed_at": self.completed_at.isoformat(),
            "participant_count": self.participant_count,
            "duration_minutes": self.duration_minutes,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GroupClassLog":
        """Create from dictionary."""
        focus = data.get("focus")
        return cls(
            id=UUID(data["id"]),
            user_id=UUID(data["user_id"]),
            routine_id=UUID(data["routine_id"]),
            routine_name=data["routine_name"],
            focus=MuscleFocus(focus) if focus else None,
            completed_at=datetime.fromisoformat(data["completed_at"]),
            participant_count=data.get("participant_count"),
            duration_minutes=data.get("duration_minutes"),
            notes=data.get("notes"),
        )
