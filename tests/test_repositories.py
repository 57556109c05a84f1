"""Tests for the SQLite repositories."""

import asyncio
from datetime import datetime
from uuid import UUID

import pytest

from home_strength.db import (
    AmbiguousIdError,
    CompletedWorkoutRepository,
    GroupClassLogRepository,
    RoutineRepository,
    init_db,
)
from home_strength.models.exercises import EnergyLevel, Equipment, MuscleFocus
from home_strength.models.progress import CompletedWorkout, GroupClassLog
from home_strength.models.routine import DurationBucket, Intensity, KidDuration
from home_strength.models.user_profile import ProfileType


@pytest.fixture
def db_path(temp_db_path):
    """Initialized temporary database."""
    asyncio.run(init_db(temp_db_path))
    return temp_db_path


@pytest.fixture
def adult_routine(generator):
    return generator.generate_adult_routine(
        equipment={Equipment.DUMBBELLS},
        duration=DurationBucket.SHORT,
        intensity=Intensity.MEDIUM,
    )


class TestRoutineRepository:
    """Tests for RoutineRepository."""

    def test_create_and_get(self, db_path, adult_routine):
        """Test a saved routine loads back unchanged."""
        repo = RoutineRepository(db_path)

        async def run():
            routine_id = await repo.create(adult_routine)
            return routine_id, await repo.get(routine_id)

        routine_id, loaded = asyncio.run(run())

        assert routine_id == str(adult_routine.id)
        assert loaded.id == adult_routine.id
        assert loaded.name == adult_routine.name
        assert loaded.created_at is not None
        assert [ex.template_id for ex in loaded.exercises] == [
            ex.template_id for ex in adult_routine.exercises
        ]
        assert [ex.id for ex in loaded.exercises] == [
            ex.id for ex in adult_routine.exercises
        ]

    def test_get_by_prefix(self, db_path, adult_routine):
        """Test lookup by a short id prefix."""
        repo = RoutineRepository(db_path)

        async def run():
            await repo.create(adult_routine)
            return await repo.get(str(adult_routine.id)[:8])

        assert asyncio.run(run()).id == adult_routine.id

    def test_get_missing(self, db_path):
        """Test a missing routine returns None."""
        repo = RoutineRepository(db_path)
        assert asyncio.run(repo.get("nope")) is None

    def test_get_ambiguous_prefix(self, db_path, generator, adult_routine):
        """Test a prefix shared by two routines is reported, not treated as missing."""
        other = generator.generate_adult_routine(
            equipment=(), duration=DurationBucket.SHORT, intensity=Intensity.EASY
        )
        adult_routine.id = UUID("abcd1234-0000-4000-8000-000000000001")
        other.id = UUID("abcd1234-0000-4000-8000-000000000002")
        repo = RoutineRepository(db_path)

        async def run():
            await repo.create(adult_routine)
            await repo.create(other)
            with pytest.raises(AmbiguousIdError) as exc_info:
                await repo.get("abcd1234")
            return exc_info.value, await repo.get("abcd1234-0000-4000-8000-000000000002")

        error, exact = asyncio.run(run())

        assert error.matches == 2
        assert "abcd1234" in str(error)
        assert exact.id == other.id

    def test_list_for_profile(self, db_path, generator, adult_routine):
        """Test filtering saved routines by profile."""
        kid_routine = generator.generate_kid_routine(KidDuration.SHORT, EnergyLevel.LOW)
        repo = RoutineRepository(db_path)

        async def run():
            await repo.create(adult_routine)
            await repo.create(kid_routine)
            return (
                await repo.list_all(),
                await repo.list_for_profile(ProfileType.CHILD_7),
            )

        everything, kids = asyncio.run(run())

        assert len(everything) == 2
        assert [r.id for r in kids] == [kid_routine.id]
        assert kids[0].exercises[0].is_timed_activity

    def test_update(self, db_path, adult_routine):
        """Test renaming a saved routine."""
        repo = RoutineRepository(db_path)

        async def run():
            await repo.create(adult_routine)
            saved = await repo.get(adult_routine.id)
            saved.name = "Tuesday Dumbbells"
            await repo.update(saved)
            return await repo.get(adult_routine.id)

        assert asyncio.run(run()).name == "Tuesday Dumbbells"

    def test_update_unsaved(self, db_path, adult_routine):
        """Test updating a routine that was never saved."""
        repo = RoutineRepository(db_path)
        with pytest.raises(ValueError):
            asyncio.run(repo.update(adult_routine))

    def test_delete(self, db_path, adult_routine):
        """Test deleting a routine."""
        repo = RoutineRepository(db_path)

        async def run():
            await repo.create(adult_routine)
            await repo.delete(adult_routine.id)
            return await repo.get(adult_routine.id)

        assert asyncio.run(run()) is None


class TestCompletedWorkoutRepository:
    """Tests for CompletedWorkoutRepository."""

    def test_log_and_list(self, db_path, adult_routine):
        """Test logged workouts come back per user, newest first."""
        repo = CompletedWorkoutRepository(db_path)
        adult = ProfileType.ADULT.stable_id
        older = CompletedWorkout(
            user_id=adult,
            workout_id=adult_routine.id,
            workout_name=adult_routine.name,
            completed_at=datetime(2026, 3, 1, 9, 0),
        )
        newer = CompletedWorkout(
            user_id=adult,
            workout_id=adult_routine.id,
            workout_name=adult_routine.name,
            completed_at=datetime(2026, 3, 2, 9, 0),
            duration_minutes=18,
        )
        other = CompletedWorkout(
            user_id=ProfileType.TEEN.stable_id,
            workout_id=adult_routine.id,
            workout_name=adult_routine.name,
        )

        async def run():
            for workout in (older, newer, other):
                await repo.create(workout)
            return await repo.list_for_user(adult)

        logged = asyncio.run(run())

        assert [w.id for w in logged] == [newer.id, older.id]
        assert logged[0].duration_minutes == 18


class TestGroupClassLogRepository:
    """Tests for GroupClassLogRepository."""

    def test_log_and_list(self, db_path, generator):
        """Test classes come back per instructor, newest first."""
        routine = generator.generate_adult_routine(
            equipment=(),
            duration=DurationBucket.MEDIUM,
            intensity=Intensity.MEDIUM,
            focus=MuscleFocus.CORE,
            profile=ProfileType.GROUP_FITNESS,
        )
        instructor = ProfileType.GROUP_FITNESS.stable_id
        repo = GroupClassLogRepository(db_path)
        monday = GroupClassLog(
            user_id=instructor,
            routine_id=routine.id,
            routine_name=routine.name,
            focus=routine.focus,
            completed_at=datetime(2026, 3, 2, 18, 0),
            participant_count=14,
        )
        wednesday = GroupClassLog(
            user_id=instructor,
            routine_id=routine.id,
            routine_name=routine.name,
            completed_at=datetime(2026, 3, 4, 18, 0),
            duration_minutes=40,
            notes="Ran long, great energy",
        )
        not_mine = GroupClassLog(
            user_id=ProfileType.ADULT.stable_id,
            routine_id=routine.id,
            routine_name=routine.name,
        )

        async def run():
            for class_log in (monday, wednesday, not_mine):
                await repo.create(class_log)
            return await repo.list_for_user(instructor)

        logged = asyncio.run(run())

        assert [c.id for c in logged] == [wednesday.id, monday.id]
        assert logged[0].notes == "Ran long, great energy"
        assert logged[1].participant_count == 14
        assert logged[1].focus == MuscleFocus.CORE

    def test_empty(self, db_path):
        """Test an instructor with no classes gets an empty list."""
        repo = GroupClassLogRepository(db_path)
        assert asyncio.run(repo.list_for_user(ProfileType.GROUP_FITNESS.stable_id)) == []
