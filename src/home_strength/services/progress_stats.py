"""Aggregate statistics over completed workouts."""

from datetime import date, datetime, time, timedelta
from uuid import UUID

from ..models.progress import CompletedWorkout


class ProgressStats:
    """Streaks, counts and history for one profile.

    Works over an in-memory list of completed workouts, typically loaded
    from ``CompletedWorkoutRepository.list_for_user``.
    """

    def __init__(self, workouts: list[CompletedWorkout], user_id: UUID):
        self.user_id = user_id
        self.workouts = sorted(
            (w for w in workouts if w.user_id == user_id),
            key=lambda w: w.completed_at,
            reverse=True,
        )

    @property
    def total_workouts(self) -> int:
        return len(self.workouts)

    def workouts_this_week(self, now: datetime | None = None) -> int:
        """Workouts since Monday 00:00 of the current week."""
        now = now or datetime.now()
        monday = now.date() - timedelta(days=now.weekday())
        start = datetime.combine(monday, time.min)
        return sum(1 for w in self.workouts if w.completed_at >= start)

    def workouts_this_month(self, now: datetime | None = None) -> int:
        """Workouts since the first of the current month."""
        now = now or datetime.now()
        start = datetime.combine(now.date().replace(day=1), time.min)
        return sum(1 for w in self.workouts if w.completed_at >= start)

    def current_streak_days(self, today: date | None = None) -> int:
        """Consecutive days with at least one workout, counting back from today."""
        day = today or date.today()
        days = {w.completed_at.date() for w in self.workouts}

        streak = 0
        while day in days:
            streak += 1
            day -= timedelta(days=1)
        return streak

    def weekly_counts(self, weeks: int = 8, now: datetime | None = None) -> list[tuple[date, int]]:
        """Workout counts per week (Monday start), oldest first."""
        now = now or datetime.now()
        this_monday = now.date() - timedelta(days=now.weekday())

        buckets = {this_monday - timedelta(weeks=i): 0 for i in range(weeks)}
        for w in self.workouts:
            d = w.completed_at.date()
            monday = d - timedelta(days=d.weekday())
            if monday in buckets:
                buckets[monday] += 1

        return sorted(buckets.items())

    def weight_history(self, exercise_name: str) -> list[tuple[datetime, float]]:
        """Weights used for an exercise, newest first."""
        history = []
        for w in self.workouts:
            for logged in w.logged_exercises:
                if logged.exercise_name != exercise_name:
                    continue
                for s in logged.sets:
                    if s.weight_lbs is not None:
                        history.append((w.completed_at, s.weight_lbs))
        return sorted(history, key=lambda entry: entry[0], reverse=True)

    def vertical_jump_history(self) -> list[tuple[datetime, float]]:
        """Vertical jump measurements, newest first."""
        return [
            (w.completed_at, w.vertical_jump_inches)
            for w in self.workouts
            if w.vertical_jump_inches is not None
        ]

    def get_summary(self, now: datetime | None = None) -> str:
        """Generate a text summary for display."""
        now = now or datetime.now()
        summary = f"Total workouts: {self.total_workouts}\n"
        summary += f"This week: {self.workouts_this_week(now)}\n"
        summary += f"This month: {self.workouts_this_month(now)}\n"
        summary += f"Current streak: {self.current_streak_days(now.date())} day(s)\n"

        jumps = self.vertical_jump_history()
        if jumps:
            best = max(j for _, j in jumps)
            summary += f"Vertical jump: latest {jumps[0][1]}in, best {best}in\n"

        return summary
