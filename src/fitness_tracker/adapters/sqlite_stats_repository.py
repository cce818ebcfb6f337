"""SQLite repository for workout statistics."""

from dataclasses import dataclass

from sqlalchemy import select

from fitness_tracker.adapters.sqlite_database import SqliteDatabase, workouts_table
from fitness_tracker.domain.stats import WorkoutCalories
from fitness_tracker.services.stats import StatsRepository


@dataclass
class SqliteStatsRepository(StatsRepository):
    """SQLite implementation for stats queries."""

    database: SqliteDatabase

    def list_workout_calories(self, start: str, end: str) -> list[WorkoutCalories]:
        """Return date and calories of workouts dated within the range."""
        query = (
            select(workouts_table.c.date, workouts_table.c.calories)
            .where(workouts_table.c.date >= start, workouts_table.c.date <= end)
            .order_by(workouts_table.c.date.asc())
        )
        with self.database.connect() as connection:
            rows = connection.execute(query).all()
        return [
            WorkoutCalories(date=row.date, calories=row.calories or 0) for row in rows
        ]
