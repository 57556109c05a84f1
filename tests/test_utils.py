"""Tests for utility functions."""

import pytest

from home_strength.models.exercises import ADULT_EXERCISES
from home_strength.utils.exercise_utils import (
    DEFAULT_WORK_SECONDS,
    MIN_WORK_SECONDS,
    estimate_work_seconds,
    find_matching_exercise,
    normalize_exercise_name,
    reduce_reps,
)


class TestNormalizeExerciseName:
    """Tests for normalize_exercise_name function."""

    def test_lowercase_and_strip(self):
        """Test basic normalization."""
        assert normalize_exercise_name("  Goblet Squat  ") == "goblet squat"

    def test_abbreviation_expansion(self):
        """Test abbreviation expansion."""
        assert normalize_exercise_name("DB") == "dumbbell"
        assert normalize_exercise_name("RDL") == "romanian deadlift"

    def test_inline_abbreviation(self):
        """Test abbreviation expansion within name."""
        assert normalize_exercise_name("DB Row") == "dumbbell row"
        assert normalize_exercise_name("BW Squat") == "bodyweight squat"

    def test_extra_whitespace(self):
        """Test extra whitespace removal."""
        assert normalize_exercise_name("Dead   Bug") == "dead bug"


class TestFindMatchingExercise:
    """Tests for find_matching_exercise function."""

    def test_exact_match(self):
        """Test exact name match."""
        result = find_matching_exercise("Goblet Squat")
        assert result is not None
        assert result.id == "goblet-squat"

    def test_alias_match(self):
        """Test matching through an alias."""
        result = find_matching_exercise("One Arm Row")
        assert result is not None
        assert result.id == "dumbbell-row"

    def test_abbreviation_match(self):
        """Test matching with abbreviation."""
        result = find_matching_exercise("DB Row")
        assert result is not None
        assert result.id == "dumbbell-row"

    def test_fuzzy_match(self):
        """Test fuzzy matching."""
        result = find_matching_exercise("Goblet Squats")
        assert result is not None
        assert result.id == "goblet-squat"

    def test_no_match(self):
        """Test no match returns None."""
        assert find_matching_exercise("Underwater Basket Weaving") is None

    def test_restricted_search(self):
        """Test searching a subset of templates."""
        core_only = [t for t in ADULT_EXERCISES if t.primary_focus.value == "core"]
        assert find_matching_exercise("Goblet Squat", core_only) is None
        assert find_matching_exercise("Plank", core_only).id == "plank"


class TestEstimateWorkSeconds:
    """Tests for rep descriptor timing."""

    @pytest.mark.parametrize(
        "reps,expected",
        [
            ("10", 30),
            ("8-12", 30),
            ("10 each", 60),
            ("8 each side", 48),
            ("30 sec", 30),
            ("45 seconds", 45),
            ("3 min", 180),
            ("20 sec each side", 40),
        ],
    )
    def test_descriptors(self, reps, expected):
        """Test common rep descriptors."""
        assert estimate_work_seconds(reps) == expected

    def test_unparseable_uses_default(self):
        """Test descriptors without a number."""
        assert estimate_work_seconds("AMRAP") == DEFAULT_WORK_SECONDS
        assert estimate_work_seconds("") == DEFAULT_WORK_SECONDS

    def test_minimum_work_time(self):
        """Test tiny descriptors are floored."""
        assert estimate_work_seconds("2") == MIN_WORK_SECONDS
        assert estimate_work_seconds("5 sec") == MIN_WORK_SECONDS


class TestRepHelpers:
    """Tests for reduce_reps function."""

    def test_reduce_reps(self):
        """Test easy-intensity rep reduction."""
        assert reduce_reps("12") == "10"
        assert reduce_reps("15") == "13"
        assert reduce_reps("9") == "7"

    def test_reduce_reps_keeps_low_counts(self):
        """Test counts at or below the cutoff are untouched."""
        assert reduce_reps("8") == "8"
        assert reduce_reps("5") == "5"

    def test_reduce_reps_minimum(self):
        """Test the reduced count never drops below the minimum."""
        assert reduce_reps("10", by=5) == "6"

    def test_reduce_reps_ignores_other_descriptors(self):
        """Test ranges, per-side and timed descriptors pass through."""
        assert reduce_reps("8-12") == "8-12"
        assert reduce_reps("10 each") == "10 each"
        assert reduce_reps("30 sec") == "30 sec"
