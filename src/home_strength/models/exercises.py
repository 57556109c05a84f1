"""Exercise templates and the built-in exercise library."""

from dataclasses import dataclass
from enum import Enum


class Equipment(str, Enum):
    """Equipment an exercise requires."""

    BODYWEIGHT = "bodyweight"  # No equipment needed
    DUMBBELLS = "dumbbells"
    RESISTANCE_BANDS = "resistance_bands"
    TREADMILL = "treadmill"
    EXERCISE_BIKE = "exercise_bike"
    HOME_GYM = "home_gym"  # Multi-station gym machine
    BENCH = "bench"
    LEG_PRESS = "leg_press"

    @property
    def display_name(self) -> str:
        return _EQUIPMENT_NAMES[self]


_EQUIPMENT_NAMES = {
    Equipment.BODYWEIGHT: "Bodyweight",
    Equipment.DUMBBELLS: "Dumbbells",
    Equipment.RESISTANCE_BANDS: "Resistance Bands",
    Equipment.TREADMILL: "Treadmill",
    Equipment.EXERCISE_BIKE: "Exercise Bike",
    Equipment.HOME_GYM: "Home Gym",
    Equipment.BENCH: "Bench",
    Equipment.LEG_PRESS: "Leg Press Machine",
}


class MuscleFocus(str, Enum):
    """Muscle-focus tags used for filtering and diversity."""

    LOWER_BODY = "lower_body"
    UPPER_BODY = "upper_body"
    CORE = "core"
    FULL_BODY = "full_body"
    CARDIO = "cardio"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


class EnergyLevel(str, Enum):
    """Energy level for young-kid routines."""

    LOW = "low"  # Chill
    MEDIUM = "medium"
    HIGH = "high"  # Super!


@dataclass(frozen=True)
class ExerciseTemplate:
    """An unparameterized exercise definition.

    Catalog templates are read-only. Generated routines copy the values
    they need out of a template, so a routine never holds a reference
    back into the catalog.
    """

    id: str
    name: str
    equipment: Equipment
    focus: tuple[MuscleFocus, ...]
    sets: int = 3
    reps: str = "10"  # "10", "8-12", "10 each", "30 sec", "3 min"
    rest_seconds: int = 60
    instructions: str | None = None
    kid_friendly: bool = False
    energy_levels: tuple[EnergyLevel, ...] = ()  # Kid activities only
    aliases: tuple[str, ...] = ()
    is_custom: bool = False

    def __post_init__(self):
        if not self.reps or not self.reps.strip():
            raise ValueError(f"Exercise '{self.name}' needs a rep descriptor")
        if not self.focus:
            raise ValueError(f"Exercise '{self.name}' needs at least one focus tag")
        # Coerce to the closed enumerations; raises ValueError on unknown values
        object.__setattr__(self, "equipment", Equipment(self.equipment))
        object.__setattr__(self, "focus", tuple(MuscleFocus(f) for f in self.focus))
        object.__setattr__(
            self, "energy_levels", tuple(EnergyLevel(e) for e in self.energy_levels)
        )

    @property
    def primary_focus(self) -> MuscleFocus:
        """The first focus tag, used for diversity partitioning."""
        return self.focus[0]

    @classmethod
    def custom(
        cls,
        name: str,
        equipment: Equipment,
        focus: list[MuscleFocus] | None = None,
        sets: int = 3,
        reps: str = "10",
        rest_seconds: int = 60,
        instructions: str | None = None,
    ) -> "ExerciseTemplate":
        """Create a user-defined exercise (never part of the sampling pool)."""
        slug = "-".join(name.lower().split())
        return cls(
            id=f"custom-{slug}",
            name=name,
            equipment=equipment,
            focus=tuple(focus or [MuscleFocus.FULL_BODY]),
            sets=sets,
            reps=reps,
            rest_seconds=rest_seconds,
            instructions=instructions,
            is_custom=True,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "equipment": self.equipment.value,
            "focus": [f.value for f in self.focus],
            "sets": self.sets,
            "reps": self.reps,
            "rest_seconds": self.rest_seconds,
            "instructions": self.instructions,
            "kid_friendly": self.kid_friendly,
            "energy_levels": [e.value for e in self.energy_levels],
            "aliases": list(self.aliases),
            "is_custom": self.is_custom,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseTemplate":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            equipment=Equipment(data["equipment"]),
            focus=tuple(MuscleFocus(f) for f in data["focus"]),
            sets=data.get("sets", 3),
            reps=data.get("reps", "10"),
            rest_seconds=data.get("rest_seconds", 60),
            instructions=data.get("instructions"),
            kid_friendly=data.get("kid_friendly", False),
            energy_levels=tuple(EnergyLevel(e) for e in data.get("energy_levels", [])),
            aliases=tuple(data.get("aliases", [])),
            is_custom=data.get("is_custom", False),
        )


def _kid(
    id: str,
    name: str,
    instructions: str,
    work_seconds: int,
    energy: list[EnergyLevel],
    focus: list[MuscleFocus] | None = None,
) -> ExerciseTemplate:
    return ExerciseTemplate(
        id=id,
        name=name,
        equipment=Equipment.BODYWEIGHT,
        focus=tuple(focus or [MuscleFocus.FULL_BODY]),
        sets=1,
        reps=f"{work_seconds} sec",
        rest_seconds=0,
        instructions=instructions,
        kid_friendly=True,
        energy_levels=tuple(energy),
    )


# Adult / teen library
ADULT_EXERCISES: tuple[ExerciseTemplate, ...] = (
    # Dumbbells
    ExerciseTemplate(
        id="goblet-squat",
        name="Goblet Squat",
        equipment=Equipment.DUMBBELLS,
        focus=(MuscleFocus.LOWER_BODY,),
        reps="10",
        instructions="Hold one dumbbell at chest. Squat down, keep chest up.",
    ),
    ExerciseTemplate(
        id="dumbbell-row",
        name="Dumbbell Row",
        equipment=Equipment.DUMBBELLS,
        focus=(MuscleFocus.UPPER_BODY,),
        reps="10 each",
        instructions="Support on bench or chair. Row to hip.",
        aliases=("DB Row", "One Arm Row"),
    ),
    ExerciseTemplate(
        id="dumbbell-floor-press",
        name="Dumbbell Floor Press",
        equipment=Equipment.DUMBBELLS,
        focus=(MuscleFocus.UPPER_BODY,),
        reps="10",
        instructions="On back, press dumbbells up from floor.",
        aliases=("Floor Press",),
    ),
    ExerciseTemplate(
        id="dumbbell-shoulder-press",
        name="Dumbbell Shoulder Press",
        equipment=Equipment.DUMBBELLS,
        focus=(MuscleFocus.UPPER_BODY,),
        reps="10",
        aliases=("DB Shoulder Press", "Shoulder Press"),
    ),
    ExerciseTemplate(
        id="dumbbell-romanian-deadlift",
        name="Dumbbell Romanian Deadlift",
        equipment=Equipment.DUMBBELLS,
        focus=(MuscleFocus.LOWER_BODY,),
        reps="10",
        instructions="Slight bend in knees, hinge at hips.",
        aliases=("DB RDL", "Romanian Deadlift", "RDL"),
    ),
    ExerciseTemplate(
        id="dumbbell-bicep-curl",
        name="Dumbbell Bicep Curl",
        equipment=Equipment.DUMBBELLS,
        focus=(MuscleFocus.UPPER_BODY,),
        reps="10",
        aliases=("Bicep Curl", "DB Curl"),
    ),
    ExerciseTemplate(
        id="tricep-extension",
        name="Tricep Extension",
        equipment=Equipment.DUMBBELLS,
        focus=(MuscleFocus.UPPER_BODY,),
        reps="10",
        instructions="One dumbbell overhead or use band.",
    ),
    ExerciseTemplate(
        id="dumbbell-lunge",
        name="Dumbbell Lunge",
        equipment=Equipment.DUMBBELLS,
        focus=(MuscleFocus.LOWER_BODY,),
        reps="8 each",
        instructions="Alternate legs.",
    ),
    ExerciseTemplate(
        id="dumbbell-thruster",
        name="Dumbbell Thruster",
        equipment=Equipment.DUMBBELLS,
        focus=(MuscleFocus.FULL_BODY,),
        reps="8-10",
        instructions="Squat with dumbbells at shoulders, then press overhead as you stand.",
    ),
    # Resistance bands
    ExerciseTemplate(
        id="band-pull-apart",
        name="Band Pull-Apart",
        equipment=Equipment.RESISTANCE_BANDS,
        focus=(MuscleFocus.UPPER_BODY,),
        reps="15",
        instructions="Hold band in front, pull apart squeezing shoulder blades.",
    ),
    ExerciseTemplate(
        id="band-chest-push",
        name="Band Chest Push",
        equipment=Equipment.RESISTANCE_BANDS,
        focus=(MuscleFocus.UPPER_BODY,),
        sets=2,
        reps="12",
    ),
    ExerciseTemplate(
        id="band-glute-bridge",
        name="Band Glute Bridge",
        equipment=Equipment.RESISTANCE_BANDS,
        focus=(MuscleFocus.LOWER_BODY,),
        reps="12",
        instructions="Band above knees. Push knees out as you lift hips.",
    ),
    # Home gym
    ExerciseTemplate(
        id="chest-press",
        name="Chest Press",
        equipment=Equipment.HOME_GYM,
        focus=(MuscleFocus.UPPER_BODY,),
        reps="10",
    ),
    ExerciseTemplate(
        id="lat-pulldown",
        name="Lat Pulldown",
        equipment=Equipment.HOME_GYM,
        focus=(MuscleFocus.UPPER_BODY,),
        reps="10-12",
        instructions="Pull the bar to upper chest, elbows down and back.",
    ),
    ExerciseTemplate(
        id="seated-row",
        name="Seated Row",
        equipment=Equipment.HOME_GYM,
        focus=(MuscleFocus.UPPER_BODY,),
        reps="10-12",
    ),
    ExerciseTemplate(
        id="cable-ab-crunch",
        name="Ab Crunch",
        equipment=Equipment.HOME_GYM,
        focus=(MuscleFocus.CORE,),
        reps="12",
        aliases=("Cable Crunch",),
    ),
    # Leg press machine
    ExerciseTemplate(
        id="leg-press",
        name="Leg Press",
        equipment=Equipment.LEG_PRESS,
        focus=(MuscleFocus.LOWER_BODY,),
        reps="10-12",
        instructions="Feet shoulder-width. Push through heels.",
    ),
    ExerciseTemplate(
        id="leg-press-calf-raise",
        name="Calf Raises (Leg Press)",
        equipment=Equipment.LEG_PRESS,
        focus=(MuscleFocus.LOWER_BODY,),
        reps="15",
    ),
    # Bench
    ExerciseTemplate(
        id="bench-step-up",
        name="Bench Step-Up",
        equipment=Equipment.BENCH,
        focus=(MuscleFocus.LOWER_BODY,),
        reps="10 each",
        instructions="Step up onto the bench, drive through the front heel.",
    ),
    ExerciseTemplate(
        id="bench-dip",
        name="Bench Dip",
        equipment=Equipment.BENCH,
        focus=(MuscleFocus.UPPER_BODY,),
        reps="10",
        aliases=("Tricep Dip",),
    ),
    # Cardio machines
    ExerciseTemplate(
        id="treadmill-intervals",
        name="Treadmill Walk/Jog",
        equipment=Equipment.TREADMILL,
        focus=(MuscleFocus.CARDIO,),
        sets=2,
        reps="3 min",
        rest_seconds=30,
        instructions="Brisk walk or easy jog. Walk to recover between rounds.",
    ),
    ExerciseTemplate(
        id="bike-intervals",
        name="Exercise Bike",
        equipment=Equipment.EXERCISE_BIKE,
        focus=(MuscleFocus.CARDIO,),
        sets=2,
        reps="3 min",
        rest_seconds=30,
        instructions="Steady pace, or 30 seconds hard / 30 seconds easy.",
    ),
    # Bodyweight
    ExerciseTemplate(
        id="glute-bridge",
        name="Glute Bridge",
        equipment=Equipment.BODYWEIGHT,
        focus=(MuscleFocus.LOWER_BODY,),
        reps="12",
        instructions="Feet flat, lift hips. Optional: band above knees.",
    ),
    ExerciseTemplate(
        id="plank",
        name="Plank",
        equipment=Equipment.BODYWEIGHT,
        focus=(MuscleFocus.CORE,),
        reps="30 sec",
        aliases=("Front Plank",),
    ),
    ExerciseTemplate(
        id="calf-raises",
        name="Calf Raises",
        equipment=Equipment.BODYWEIGHT,
        focus=(MuscleFocus.LOWER_BODY,),
        reps="15",
    ),
    ExerciseTemplate(
        id="superman",
        name="Superman",
        equipment=Equipment.BODYWEIGHT,
        focus=(MuscleFocus.CORE,),
        reps="10",
        instructions="Lie face down, lift arms and legs off the floor. Hold 2 sec.",
    ),
    ExerciseTemplate(
        id="dead-bug",
        name="Dead Bug",
        equipment=Equipment.BODYWEIGHT,
        focus=(MuscleFocus.CORE,),
        reps="8 each side",
        instructions="On back, extend opposite arm and leg. Keep low back pressed down.",
    ),
    ExerciseTemplate(
        id="bird-dog",
        name="Bird Dog",
        equipment=Equipment.BODYWEIGHT,
        focus=(MuscleFocus.CORE,),
        reps="8 each side",
        instructions="On all fours, extend one arm and opposite leg. Hold 2 sec.",
    ),
    ExerciseTemplate(
        id="push-ups",
        name="Push-ups",
        equipment=Equipment.BODYWEIGHT,
        focus=(MuscleFocus.UPPER_BODY,),
        reps="8-10",
        instructions="Hands under shoulders, lower and push back up. Knees down is fine.",
        aliases=("Push-up", "Pushup", "Knee Push-ups"),
    ),
    ExerciseTemplate(
        id="squats",
        name="Squats",
        equipment=Equipment.BODYWEIGHT,
        focus=(MuscleFocus.LOWER_BODY,),
        reps="12",
        instructions="Bodyweight squats, chest up.",
        aliases=("Air Squat", "Bodyweight Squat"),
    ),
    ExerciseTemplate(
        id="jump-squats",
        name="Jump Squats",
        equipment=Equipment.BODYWEIGHT,
        focus=(MuscleFocus.LOWER_BODY, MuscleFocus.CARDIO),
        reps="8",
        instructions="Squat, then explode up. Land softly.",
    ),
    ExerciseTemplate(
        id="jumping-jacks",
        name="Jumping Jacks",
        equipment=Equipment.BODYWEIGHT,
        focus=(MuscleFocus.CARDIO,),
        reps="45 sec",
        rest_seconds=30,
    ),
    ExerciseTemplate(
        id="mountain-climbers",
        name="Mountain Climbers",
        equipment=Equipment.BODYWEIGHT,
        focus=(MuscleFocus.CARDIO, MuscleFocus.CORE),
        reps="30 sec",
        rest_seconds=30,
    ),
    ExerciseTemplate(
        id="burpees",
        name="Burpees",
        equipment=Equipment.BODYWEIGHT,
        focus=(MuscleFocus.FULL_BODY, MuscleFocus.CARDIO),
        reps="8",
    ),
    # Mat / stretch
    ExerciseTemplate(
        id="cat-cow",
        name="Cat-Cow",
        equipment=Equipment.BODYWEIGHT,
        focus=(MuscleFocus.CORE,),
        sets=2,
        reps="8",
        rest_seconds=15,
        instructions="On all fours, round spine then arch. Breathe with the movement.",
    ),
    ExerciseTemplate(
        id="downward-dog",
        name="Downward Dog",
        equipment=Equipment.BODYWEIGHT,
        focus=(MuscleFocus.FULL_BODY,),
        sets=2,
        reps="30 sec",
        rest_seconds=20,
        instructions="Hips up, heels toward floor. Stretch hamstrings and shoulders.",
    ),
    ExerciseTemplate(
        id="hip-stretch",
        name="Hip Stretch",
        equipment=Equipment.BODYWEIGHT,
        focus=(MuscleFocus.LOWER_BODY,),
        sets=2,
        reps="30 sec",
        rest_seconds=15,
        instructions="Seated or supine hip opener. Hold 20-30 sec each side.",
    ),
)


# Young-kid activity library: playful, bodyweight, duration-based
KID_ACTIVITIES: tuple[ExerciseTemplate, ...] = (
    _kid("frog-jumps", "Frog Jumps", "Squat and jump like a frog! Land softly.",
         30, [EnergyLevel.MEDIUM], [MuscleFocus.LOWER_BODY]),
    _kid("bear-crawl", "Bear Crawl", "Walk on hands and feet like a bear.",
         25, [EnergyLevel.MEDIUM], [MuscleFocus.FULL_BODY]),
    _kid("bunny-hops", "Bunny Hops", "Hop in place or forward like a bunny.",
         20, [EnergyLevel.LOW], [MuscleFocus.LOWER_BODY]),
    _kid("star-jumps", "Star Jumps", "Jump and spread arms and legs like a star!",
         25, [EnergyLevel.HIGH], [MuscleFocus.CARDIO]),
    _kid("dance-party", "Dance Party", "Put on music and dance any way you want!",
         60, [EnergyLevel.HIGH], [MuscleFocus.CARDIO]),
    _kid("reach-for-the-sky", "Reach for the Sky", "Reach your arms up high and stretch.",
         20, [EnergyLevel.LOW], [MuscleFocus.UPPER_BODY]),
    _kid("march-in-place", "March in Place", "March like a soldier. Lift those knees!",
         30, [EnergyLevel.MEDIUM], [MuscleFocus.CARDIO]),
    _kid("flap-like-a-bird", "Flap Like a Bird", "Flap your arms like wings. Fly around!",
         25, [EnergyLevel.MEDIUM], [MuscleFocus.UPPER_BODY]),
    _kid("crab-walk", "Crab Walk", "Walk on hands and feet like a crab.",
         25, [EnergyLevel.MEDIUM], [MuscleFocus.FULL_BODY]),
    _kid("one-foot-balance", "One-Foot Balance", "Stand on one foot. Can you count to 10?",
         20, [EnergyLevel.LOW], [MuscleFocus.CORE]),
    _kid("butterfly-stretch", "Butterfly Stretch",
         "Sit, feet together, flap knees like butterfly wings.",
         30, [EnergyLevel.LOW], [MuscleFocus.LOWER_BODY]),
    _kid("spin-slowly", "Spin Slowly", "Spin in a circle. Stop if you feel dizzy!",
         15, [EnergyLevel.MEDIUM], [MuscleFocus.FULL_BODY]),
    _kid("clap-and-jump", "Clap and Jump", "Clap once, jump once. Repeat!",
         25, [EnergyLevel.HIGH], [MuscleFocus.CARDIO]),
    _kid("freeze-tag-run", "Freeze Run", "Run in place. When someone says FREEZE, stop like a statue!",
         30, [EnergyLevel.HIGH], [MuscleFocus.CARDIO]),
    _kid("rocket-launch", "Rocket Launch", "Crouch low, count down from 3, then blast off with a big jump!",
         25, [EnergyLevel.HIGH], [MuscleFocus.LOWER_BODY]),
    _kid("turtle-tuck", "Turtle Tuck", "Lie on your back and hug your knees like a turtle in its shell.",
         20, [EnergyLevel.LOW], [MuscleFocus.CORE]),
    _kid("tree-pose", "Tree Pose", "Stand tall like a tree. Sway in the wind without falling over.",
         20, [EnergyLevel.LOW], [MuscleFocus.CORE]),
    _kid("bubble-pop", "Bubble Pop", "Jump up and pop the pretend bubbles all around you!",
         30, [EnergyLevel.HIGH], [MuscleFocus.CARDIO]),
)
