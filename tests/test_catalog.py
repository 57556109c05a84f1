"""Tests for the exercise catalog."""

import pytest

from home_strength.generators.catalog import DEFAULT_CATALOG, ExerciseCatalog
from home_strength.models.exercises import (
    ADULT_EXERCISES,
    KID_ACTIVITIES,
    EnergyLevel,
    Equipment,
    ExerciseTemplate,
    MuscleFocus,
)


class TestExerciseCatalog:
    """Tests for catalog construction and lookup."""

    def test_default_catalog_size(self):
        """Test the default catalog holds both libraries."""
        assert len(DEFAULT_CATALOG) == len(ADULT_EXERCISES) + len(KID_ACTIVITIES)
        assert DEFAULT_CATALOG.adult_templates == ADULT_EXERCISES
        assert DEFAULT_CATALOG.kid_templates == KID_ACTIVITIES

    def test_get(self):
        """Test lookup by id."""
        assert DEFAULT_CATALOG.get("plank").name == "Plank"
        assert DEFAULT_CATALOG.get("frog-jumps").kid_friendly
        assert DEFAULT_CATALOG.get("does-not-exist") is None

    def test_rejects_custom_templates(self):
        """Test that user exercises never enter the sampling pool."""
        custom = ExerciseTemplate.custom("Wall Sit", Equipment.BODYWEIGHT)
        with pytest.raises(ValueError):
            ExerciseCatalog(adult_templates=[custom], kid_templates=())

    def test_rejects_kid_activities_in_adult_partition(self):
        """Test that partitions cannot be mixed."""
        with pytest.raises(ValueError):
            ExerciseCatalog(adult_templates=KID_ACTIVITIES[:1], kid_templates=())

    def test_rejects_duplicate_ids(self, make_template):
        """Test that template ids must be unique."""
        template = make_template("squat")
        with pytest.raises(ValueError):
            ExerciseCatalog(adult_templates=[template, template], kid_templates=())


class TestTemplatesMatching:
    """Tests for templates_matching filtering."""

    def test_empty_equipment_means_any(self):
        """Test that no equipment filter returns the whole adult partition."""
        assert DEFAULT_CATALOG.templates_matching() == list(ADULT_EXERCISES)

    def test_equipment_gating(self):
        """Test that only owned equipment and bodyweight qualify."""
        matches = DEFAULT_CATALOG.templates_matching(equipment={Equipment.DUMBBELLS})
        assert matches
        assert {t.equipment for t in matches} == {
            Equipment.DUMBBELLS,
            Equipment.BODYWEIGHT,
        }

    def test_bodyweight_always_eligible(self):
        """Test that bodyweight moves need no equipment."""
        matches = DEFAULT_CATALOG.templates_matching(equipment={Equipment.TREADMILL})
        equipment = {t.equipment for t in matches}
        assert Equipment.BODYWEIGHT in equipment
        assert Equipment.TREADMILL in equipment
        assert Equipment.DUMBBELLS not in equipment

    def test_focus_filter(self):
        """Test that every match carries the requested focus tag."""
        matches = DEFAULT_CATALOG.templates_matching(focus=MuscleFocus.CORE)
        assert matches
        assert all(MuscleFocus.CORE in t.focus for t in matches)
        # Secondary tags count too
        assert "mountain-climbers" in {t.id for t in matches}

    def test_full_body_focus_is_unfiltered(self):
        """Test that FULL_BODY does not narrow the pool."""
        assert DEFAULT_CATALOG.templates_matching(
            focus=MuscleFocus.FULL_BODY
        ) == DEFAULT_CATALOG.templates_matching()

    def test_kid_partition_is_exclusive(self):
        """Test that the kid flag selects exactly one partition."""
        kid = DEFAULT_CATALOG.templates_matching(kid_friendly=True)
        adult = DEFAULT_CATALOG.templates_matching(kid_friendly=False)

        assert all(t.kid_friendly for t in kid)
        assert not any(t.kid_friendly for t in adult)
        assert not {t.id for t in kid} & {t.id for t in adult}

    def test_no_match_returns_empty_list(self, make_template):
        """Test that an impossible filter returns an empty list."""
        catalog = ExerciseCatalog(
            adult_templates=[make_template("row", equipment=Equipment.DUMBBELLS)],
            kid_templates=(),
        )
        assert catalog.templates_matching(equipment={Equipment.BENCH}) == []


class TestKidTemplatesForEnergy:
    """Tests for kid energy pools."""

    def test_low_energy_pool(self):
        """Test that low energy draws from low and medium activities."""
        pool = DEFAULT_CATALOG.kid_templates_for_energy(EnergyLevel.LOW)
        assert pool
        for template in pool:
            assert set(template.energy_levels) & {EnergyLevel.LOW, EnergyLevel.MEDIUM}

    def test_medium_energy_uses_everything(self):
        """Test that medium energy can pick any activity."""
        pool = DEFAULT_CATALOG.kid_templates_for_energy(EnergyLevel.MEDIUM)
        assert pool == list(KID_ACTIVITIES)

    def test_high_energy_pool(self):
        """Test that high energy skips the calm activities."""
        ids = {t.id for t in DEFAULT_CATALOG.kid_templates_for_energy(EnergyLevel.HIGH)}
        assert "dance-party" in ids
        assert "frog-jumps" in ids
        assert "butterfly-stretch" not in ids

    def test_pools_fill_a_long_routine(self):
        """Test each energy pool has enough activities for 12 picks."""
        for energy in EnergyLevel:
            assert len(DEFAULT_CATALOG.kid_templates_for_energy(energy)) >= 12
