"""Read-only exercise catalog with filtered lookup."""

from collections.abc import Iterable

from ..models.exercises import (
    ADULT_EXERCISES,
    KID_ACTIVITIES,
    EnergyLevel,
    Equipment,
    ExerciseTemplate,
    MuscleFocus,
)

# Kid energy level -> activity energy tags it draws from
ENERGY_POOLS: dict[EnergyLevel, tuple[EnergyLevel, ...]] = {
    EnergyLevel.LOW: (EnergyLevel.LOW, EnergyLevel.MEDIUM),
    EnergyLevel.MEDIUM: (EnergyLevel.LOW, EnergyLevel.MEDIUM, EnergyLevel.HIGH),
    EnergyLevel.HIGH: (EnergyLevel.HIGH, EnergyLevel.MEDIUM),
}


class ExerciseCatalog:
    """Static catalog split into an adult/teen and a kid partition.

    Built once at startup and never mutated, so it can be shared between
    generators without locking.
    """

    def __init__(
        self,
        adult_templates: Iterable[ExerciseTemplate] = ADULT_EXERCISES,
        kid_templates: Iterable[ExerciseTemplate] = KID_ACTIVITIES,
    ):
        self._adult = tuple(adult_templates)
        self._kid = tuple(kid_templates)

        for template in self._adult + self._kid:
            if template.is_custom:
                raise ValueError(
                    f"Custom exercise '{template.name}' cannot be added to the catalog"
                )
        if any(t.kid_friendly for t in self._adult):
            raise ValueError("Kid activities belong in the kid partition")

        ids = [t.id for t in self._adult + self._kid]
        if len(ids) != len(set(ids)):
            raise ValueError("Catalog template ids must be unique")

        self._by_id = {t.id: t for t in self._adult + self._kid}

    @property
    def adult_templates(self) -> tuple[ExerciseTemplate, ...]:
        return self._adult

    @property
    def kid_templates(self) -> tuple[ExerciseTemplate, ...]:
        return self._kid

    def __len__(self) -> int:
        return len(self._by_id)

    def get(self, template_id: str) -> ExerciseTemplate | None:
        """Look up a template by id."""
        return self._by_id.get(template_id)

    def templates_matching(
        self,
        equipment: Iterable[Equipment] = (),
        focus: MuscleFocus | None = None,
        kid_friendly: bool = False,
    ) -> list[ExerciseTemplate]:
        """Filter one partition by equipment and muscle focus.

        Args:
            equipment: Available equipment. Empty means any equipment.
                Bodyweight exercises need nothing and always qualify.
            focus: Required focus tag. None or FULL_BODY means any focus.
            kid_friendly: Query the kid partition instead of the adult one.

        Returns:
            Matching templates in catalog order (possibly empty)
        """
        available = frozenset(equipment)
        pool = self._kid if kid_friendly else self._adult

        matches = []
        for template in pool:
            if available and not (
                template.equipment in available
                or template.equipment == Equipment.BODYWEIGHT
            ):
                continue
            if focus is not None and focus != MuscleFocus.FULL_BODY:
                if focus not in template.focus:
                    continue
            matches.append(template)

        return matches

    def kid_templates_for_energy(self, energy: EnergyLevel) -> list[ExerciseTemplate]:
        """Kid activities suited to an energy level."""
        wanted = ENERGY_POOLS[energy]
        return [
            t for t in self._kid if any(level in wanted for level in t.energy_levels)
        ]


DEFAULT_CATALOG = ExerciseCatalog()
