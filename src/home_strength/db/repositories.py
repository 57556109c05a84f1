"""Data access layer for home-strength."""

import json
import logging
from datetime import datetime
from pathlib import Path
from uuid import UUID

import aiosqlite

from ..models.progress import CompletedWorkout, GroupClassLog
from ..models.routine import GeneratedRoutine
from ..models.user_profile import ProfileType
from .engine import get_db_path

logger = logging.getLogger(__name__)


class AmbiguousIdError(ValueError):
    """An id prefix matches more than one saved routine."""

    def __init__(self, prefix: str, matches: int):
        self.prefix = prefix
        self.matches = matches
        super().__init__(f"Routine ID '{prefix}' matches {matches} routines")


class RoutineRepository:
    """Repository for saved routines.

    Generated routines are stored exactly like hand-built ones.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, routine: GeneratedRoutine) -> str:
        """Save a routine and return its id."""
        data = routine.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO routines
                (id, profile_type, name, summary, estimated_minutes, structure)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    data["id"],
                    data["profile_type"],
                    data["name"],
                    data["summary"],
                    data["estimated_minutes"],
                    json.dumps(data),
                ),
            )
            await db.commit()
        logger.debug("Saved routine %s", data["id"])
        return data["id"]

    async def get(self, routine_id: str | UUID) -> GeneratedRoutine | None:
        """Get a routine by full id or unique id prefix.

        Raises:
            AmbiguousIdError: If the prefix matches more than one routine
        """
        key = str(routine_id)
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM routines WHERE id LIKE ? ORDER BY created_at DESC",
                (f"{key}%",),
            )
            rows = await cursor.fetchall()
            if not rows:
                return None
            if len(rows) > 1:
                raise AmbiguousIdError(key, len(rows))
            return self._row_to_routine(rows[0])

    async def list_all(self) -> list[GeneratedRoutine]:
        """List all routines, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM routines ORDER BY created_at DESC"
            )
            rows = await cursor.fetchall()
            return [self._row_to_routine(row) for row in rows]

    async def list_for_profile(self, profile_type: ProfileType) -> list[GeneratedRoutine]:
        """List routines belonging to one profile."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM routines WHERE profile_type = ? ORDER BY created_at DESC",
                (profile_type.value,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_routine(row) for row in rows]

    async def update(self, routine: GeneratedRoutine) -> None:
        """Update an existing routine."""
        if routine.created_at is None:
            raise ValueError("Routine must be saved before it can be updated")

        data = routine.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE routines SET
                    profile_type = ?, name = ?, summary = ?,
                    estimated_minutes = ?, structure = ?
                WHERE id = ?
                """,
                (
                    data["profile_type"],
                    data["name"],
                    data["summary"],
                    data["estimated_minutes"],
                    json.dumps(data),
                    data["id"],
                ),
            )
            await db.commit()

    async def delete(self, routine_id: str | UUID) -> None:
        """Delete a routine."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM routines WHERE id = ?", (str(routine_id),))
            await db.commit()

    def _row_to_routine(self, row: aiosqlite.Row) -> GeneratedRoutine:
        """Convert a database row to a GeneratedRoutine."""
        created_at = None
        if row["created_at"]:
            created_at = datetime.fromisoformat(row["created_at"])
        return GeneratedRoutine.from_dict(json.loads(row["structure"]), created_at=created_at)


class CompletedWorkoutRepository:
    """Repository for the completed workout log."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, workout: CompletedWorkout) -> str:
        """Log a completed workout and return its id."""
        data = workout.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO completed_workouts
                (id, user_id, workout_id, workout_name, completed_at, data)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    data["id"],
                    data["user_id"],
                    data["workout_id"],
                    data["workout_name"],
                    data["completed_at"],
                    json.dumps(data),
                ),
            )
            await db.commit()
        return data["id"]

    async def list_for_user(self, user_id: UUID) -> list[CompletedWorkout]:
        """Completed workouts for one profile, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT data FROM completed_workouts
                WHERE user_id = ? ORDER BY completed_at DESC
                """,
                (str(user_id),),
            )
            rows = await cursor.fetchall()
            return [CompletedWorkout.from_dict(json.loads(row["data"])) for row in rows]


class GroupClassLogRepository:
    """Repository for the log of group classes led."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, class_log: GroupClassLog) -> str:
        """Log a class and return its id."""
        data = class_log.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO class_logs
                (id, user_id, routine_id, routine_name, completed_at, data)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    data["id"],
                    data["user_id"],
                    data["routine_id"],
                    data["routine_name"],
                    data["completed_at"],
                    json.dumps(data),
                ),
            )
            await db.commit()
        logger.debug("Logged class %s from routine %s", data["id"], data["routine_id"])
        return data["id"]

    async def list_for_user(self, user_id: UUID) -> list[GroupClassLog]:
        """Classes led by one profile, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT data FROM class_logs
                WHERE user_id = ? ORDER BY completed_at DESC
                """,
                (str(user_id),),
            )
            rows = await cursor.fetchall()
            return [GroupClassLog.from_dict(json.loads(row["data"])) for row in rows]
