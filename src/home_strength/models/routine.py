"""Generation requests and generated routine models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from ..errors import InvalidRequestError
from .exercises import EnergyLevel, Equipment, ExerciseTemplate, MuscleFocus
from .user_profile import ProfileType


class DurationBucket(str, Enum):
    """Target length of an adult/teen routine."""

    SHORT = "short"  # ~15-20 min
    MEDIUM = "medium"  # ~25-35 min
    LONG = "long"  # ~40-50 min


class Intensity(str, Enum):
    """Coarse difficulty dial."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class KidDuration(str, Enum):
    """Target length of a young-kid routine."""

    SHORT = "short"  # 5-8 min
    MEDIUM = "medium"  # 10-12 min
    LONG = "long"  # 15 min


@dataclass(frozen=True)
class AdultRequest:
    """Constraints for an adult or teen routine.

    An empty equipment set means any equipment. A focus of None or
    FULL_BODY asks for a full-body routine.
    """

    equipment: frozenset[Equipment] = frozenset()
    duration: DurationBucket = DurationBucket.MEDIUM
    intensity: Intensity = Intensity.MEDIUM
    focus: MuscleFocus | None = None
    profile: ProfileType = ProfileType.ADULT

    def __post_init__(self):
        try:
            object.__setattr__(
                self, "equipment", frozenset(Equipment(eq) for eq in self.equipment)
            )
            object.__setattr__(self, "duration", DurationBucket(self.duration))
            object.__setattr__(self, "intensity", Intensity(self.intensity))
            object.__setattr__(self, "profile", ProfileType(self.profile))
            if self.focus is not None:
                object.__setattr__(self, "focus", MuscleFocus(self.focus))
        except (TypeError, ValueError) as e:
            raise InvalidRequestError(f"Malformed routine request: {e}") from e

        if self.profile.is_young_kid:
            raise InvalidRequestError(
                f"{self.profile.display_name} profiles use kid routines"
            )

    @property
    def is_full_body(self) -> bool:
        return self.focus is None or self.focus == MuscleFocus.FULL_BODY

    @property
    def effective_focus(self) -> MuscleFocus | None:
        """Focus used for catalog filtering (None for full body)."""
        return None if self.is_full_body else self.focus


@dataclass(frozen=True)
class KidRequest:
    """Constraints for a young-kid activity routine."""

    duration: KidDuration = KidDuration.SHORT
    energy: EnergyLevel = EnergyLevel.MEDIUM
    profile: ProfileType = ProfileType.CHILD_7

    def __post_init__(self):
        try:
            object.__setattr__(self, "duration", KidDuration(self.duration))
            object.__setattr__(self, "energy", EnergyLevel(self.energy))
            object.__setattr__(self, "profile", ProfileType(self.profile))
        except (TypeError, ValueError) as e:
            raise InvalidRequestError(f"Malformed kid routine request: {e}") from e

        if not self.profile.is_young_kid:
            raise InvalidRequestError(
                f"{self.profile.display_name} profiles use adult routines"
            )


GenerationRequest = AdultRequest | KidRequest


@dataclass
class ExerciseInstance:
    """An exercise inside a routine.

    Values are copied from the template at generation time. Kid activities
    carry ``work_seconds`` and leave ``sets`` and ``reps`` empty.
    """

    template_id: str
    name: str
    equipment: Equipment
    focus: tuple[MuscleFocus, ...]
    sets: int | None
    reps: str | None
    rest_seconds: int = 0
    instructions: str | None = None
    work_seconds: int | None = None
    id: UUID = field(default_factory=uuid4)

    @classmethod
    def from_template(
        cls,
        template: ExerciseTemplate,
        sets: int,
        rest_seconds: int,
        reps: str | None = None,
    ) -> "ExerciseInstance":
        """Copy a template into a set/rep based instance."""
        return cls(
            template_id=template.id,
            name=template.name,
            equipment=template.equipment,
            focus=template.focus,
            sets=sets,
            reps=reps or template.reps,
            rest_seconds=rest_seconds,
            instructions=template.instructions,
        )

    @property
    def is_timed_activity(self) -> bool:
        return self.work_seconds is not None and self.sets is None

    def describe(self) -> str:
        """Short prescription, e.g. '3 x 10, rest 50s' or '60 sec'."""
        if self.is_timed_activity:
            return f"{self.work_seconds} sec"
        return f"{self.sets} x {self.reps}, rest {self.rest_seconds}s"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": str(self.id),
            "template_id": self.template_id,
            "name": self.name,
            "equipment": self.equipment.value,
            "focus": [f.value for f in self.focus],
            "sets": self.sets,
            "reps": self.reps,
            "rest_seconds": self.rest_seconds,
            "instructions": self.instructions,
            "work_seconds": self.work_seconds,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseInstance":
        """Create from dictionary."""
        return cls(
            id=UUID(data["id"]) if data.get("id") else uuid4(),
            template_id=data["template_id"],
            name=data["name"],
            equipment=Equipment(data["equipment"]),
            focus=tuple(MuscleFocus(f) for f in data.get("focus", ["full_body"])),
            sets=data.get("sets"),
            reps=data.get("reps"),
            rest_seconds=data.get("rest_seconds", 0),
            instructions=data.get("instructions"),
            work_seconds=data.get("work_seconds"),
        )


@dataclass
class GeneratedRoutine:
    """A finished routine, generated or hand-built.

    Once saved there is no format difference between the two.
    """

    name: str
    summary: str
    exercises: list[ExerciseInstance]
    estimated_minutes: int
    profile_type: ProfileType
    focus: MuscleFocus | None = None
    requested_exercise_count: int | None = None
    shortfall: int = 0  # Exercises requested but not available
    id: UUID = field(default_factory=uuid4)
    created_at: datetime | None = None

    @property
    def is_short(self) -> bool:
        """True when the routine has fewer exercises than were requested."""
        return self.shortfall > 0

    @property
    def equipment_used(self) -> list[Equipment]:
        """Distinct equipment in catalog order."""
        used = {ex.equipment for ex in self.exercises}
        return [eq for eq in Equipment if eq in used]

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": str(self.id),
            "name": self.name,
            "summary": self.summary,
            "exercises": [ex.to_dict() for ex in self.exercises],
            "estimated_minutes": self.estimated_minutes,
            "profile_type": self.profile_type.value,
            "focus": self.focus.value if self.focus else None,
            "requested_exercise_count": self.requested_exercise_count,
            "shortfall": self.shortfall,
        }

    @classmethod
    def from_dict(
        cls, data: dict, created_at: datetime | None = None
    ) -> "GeneratedRoutine":
        """Create from dictionary."""
        return cls(
            id=UUID(data["id"]) if data.get("id") else uuid4(),
            name=data["name"],
            summary=data.get("summary", ""),
            exercises=[ExerciseInstance.from_dict(ex) for ex in data["exercises"]],
            estimated_minutes=data["estimated_minutes"],
            profile_type=ProfileType(data["profile_type"]),
            focus=MuscleFocus(data["focus"]) if data.get("focus") else None,
            requested_exercise_count=data.get("requested_exercise_count"),
            shortfall=data.get("shortfall", 0),
            created_at=created_at,
        )

    def get_summary(self) -> str:
        """Generate a text summary for display."""
        summary = f"Routine: {self.name}\n"
        summary += f"{self.summary}\n"
        summary += f"Estimated time: {self.estimated_minutes} min\n\n"

        for i, ex in enumerate(self.exercises, 1):
            summary += f"  {i}. {ex.name} ({ex.equipment.display_name}): {ex.describe()}\n"

        if self.is_short:
            summary += (
                f"\nOnly {len(self.exercises)} of {self.requested_exercise_count} "
                "exercises were available for these settings.\n"
            )

        return summary
