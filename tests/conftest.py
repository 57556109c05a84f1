"""Pytest configuration and fixtures."""

import random
import tempfile
from pathlib import Path

import pytest

from home_strength.generators import WorkoutGenerator
from home_strength.models.exercises import Equipment, ExerciseTemplate, MuscleFocus


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def generator(rng):
    """Generator over the built-in catalog with a fixed seed."""
    return WorkoutGenerator(rng=rng)


def _make_template(
    id: str,
    focus: MuscleFocus = MuscleFocus.FULL_BODY,
    equipment: Equipment = Equipment.BODYWEIGHT,
    reps: str = "10",
) -> ExerciseTemplate:
    """Small template factory for catalog-shape tests."""
    return ExerciseTemplate(
        id=id,
        name=id.replace("-", " ").title(),
        equipment=equipment,
        focus=(focus,),
        reps=reps,
    )


@pytest.fixture
def make_template():
    """Factory for throwaway templates."""
    return _make_template


@pytest.fixture
def mixed_templates():
    """Three lower-body, three upper-body and two core templates."""
    return (
        [_make_template(f"lower-{i}", MuscleFocus.LOWER_BODY) for i in range(3)]
        + [_make_template(f"upper-{i}", MuscleFocus.UPPER_BODY) for i in range(3)]
        + [_make_template(f"core-{i}", MuscleFocus.CORE) for i in range(2)]
    )
