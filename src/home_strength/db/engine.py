"""Database engine setup and initialization."""

import logging
import os
from pathlib import Path

import aiosqlite

logger = logging.getLogger(__name__)

# Default data directory, overridable with HOME_STRENGTH_DATA_DIR
DATA_DIR = Path.cwd() / "data"
DATA_DIR_ENV = "HOME_STRENGTH_DATA_DIR"


def get_data_dir() -> Path:
    """Get the data directory path."""
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else DATA_DIR


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "home_strength.db"


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Saved routines (generated and hand-built share one table)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS routines (
                id TEXT PRIMARY KEY,
                profile_type TEXT NOT NULL,
                name TEXT NOT NULL,
                summary TEXT DEFAULT '',
                estimated_minutes INTEGER NOT NULL,
                structure TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Completed workout log
        await db.execute("""
            CREATE TABLE IF NOT EXISTS completed_workouts (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                workout_id TEXT NOT NULL,
                workout_name TEXT NOT NULL,
                completed_at TIMESTAMP NOT NULL,
                data TEXT NOT NULL
            )
        """)

        # Group classes led from saved routines
        await db.execute("""
            CREATE TABLE IF NOT EXISTS class_logs (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                routine_id TEXT NOT NULL,
                routine_name TEXT NOT NULL,
                completed_at TIMESTAMP NOT NULL,
                data TEXT NOT NULL
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_routines_profile
            ON routines(profile_type)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_completed_workouts_user
            ON completed_workouts(user_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_class_logs_user
            ON class_logs(user_id)
        """)

        await db.commit()

    logger.debug("Database ready at %s", db_path)
