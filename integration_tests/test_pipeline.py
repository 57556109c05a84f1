"""Integration tests for the full pipeline.

Generate a routine for every household profile, save it, load it back,
log it as completed and read the stats, all against a real SQLite file.
"""

import asyncio
import random
from datetime import datetime, timedelta

import pytest

from home_strength.commands.log import build_class_log, build_log
from home_strength.db import (
    CompletedWorkoutRepository,
    GroupClassLogRepository,
    RoutineRepository,
    init_db,
)
from home_strength.generators import WorkoutGenerator
from home_strength.models.exercises import EnergyLevel, Equipment
from home_strength.models.routine import (
    AdultRequest,
    DurationBucket,
    Intensity,
    KidDuration,
    KidRequest,
)
from home_strength.models.user_profile import ProfileType
from home_strength.services import ProgressStats


def _request_for(profile: ProfileType):
    if profile.is_young_kid:
        return KidRequest(
            duration=KidDuration.MEDIUM, energy=EnergyLevel.HIGH, profile=profile
        )
    equipment = frozenset({Equipment.DUMBBELLS, Equipment.BENCH})
    if profile.is_group_fitness:
        equipment = frozenset({Equipment.BODYWEIGHT})
    return AdultRequest(
        equipment=equipment,
        duration=DurationBucket.MEDIUM,
        intensity=Intensity.MEDIUM,
        profile=profile,
    )


@pytest.fixture
def db_path(tmp_path):
    """Initialized database file."""
    path = tmp_path / "home_strength.db"
    asyncio.run(init_db(path))
    return path


class TestPipelineIntegration:
    """Integration tests for generate, save, log and stats."""

    @pytest.mark.parametrize("profile", list(ProfileType))
    def test_profile_round_trip(self, db_path, profile):
        """Test every profile's routine survives storage and logging."""
        generator = WorkoutGenerator(rng=random.Random(2026))
        routine = generator.generate(_request_for(profile))
        assert routine.exercises
        assert not routine.is_short

        async def run():
            routines = RoutineRepository(db_path)
            workouts = CompletedWorkoutRepository(db_path)

            await routines.create(routine)
            loaded = await routines.get(routine.id)
            await workouts.create(build_log(loaded, {}, None, None, None))
            return loaded, await workouts.list_for_user(profile.stable_id)

        loaded, logged = asyncio.run(run())

        assert loaded.to_dict() == routine.to_dict()
        assert len(logged) == 1
        assert logged[0].workout_id == routine.id
        assert len(logged[0].logged_exercises) == len(routine.exercises)

    def test_week_of_workouts(self, db_path):
        """Test a week of daily logged routines builds a streak."""
        generator = WorkoutGenerator(rng=random.Random(11))
        profile = ProfileType.ADULT
        today = datetime.now().replace(hour=7, minute=0, second=0, microsecond=0)

        async def run():
            routines = RoutineRepository(db_path)
            workouts = CompletedWorkoutRepository(db_path)

            for days_ago in range(7):
                routine = generator.generate(_request_for(profile))
                await routines.create(routine)
                completed = build_log(routine, {}, None, None, None)
                completed.completed_at = today - timedelta(days=days_ago)
                await workouts.create(completed)

            return await routines.list_all(), await workouts.list_for_user(profile.stable_id)

        saved, logged = asyncio.run(run())
        stats = ProgressStats(logged, profile.stable_id)

        assert len(saved) == 7
        assert len({r.id for r in saved}) == 7
        assert stats.total_workouts == 7
        assert stats.current_streak_days(today.date()) == 7

    def test_instructor_classes(self, db_path):
        """Test classes led from a saved group routine are kept apart from workouts."""
        generator = WorkoutGenerator(rng=random.Random(5))
        profile = ProfileType.GROUP_FITNESS
        routine = generator.generate(_request_for(profile))

        async def run():
            routines = RoutineRepository(db_path)
            classes = GroupClassLogRepository(db_path)
            workouts = CompletedWorkoutRepository(db_path)

            await routines.create(routine)
            loaded = await routines.get(str(routine.id)[:8])
            for participants in (8, 15):
                await classes.create(build_class_log(loaded, participants, None, None))
            return (
                await classes.list_for_user(profile.stable_id),
                await workouts.list_for_user(profile.stable_id),
            )

        led, worked_out = asyncio.run(run())

        assert len(led) == 2
        assert sorted(c.participant_count for c in led) == [8, 15]
        assert all(c.routine_id == routine.id for c in led)
        assert worked_out == []
