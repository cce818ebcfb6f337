"""Statistics service for logged workouts."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Protocol
from zoneinfo import ZoneInfo

from fitness_tracker.domain.stats import DailyStat, WorkoutCalories

WINDOW_DAYS = 7


class StatsRepository(Protocol):
    """Persistence interface for workout statistics."""

    def list_workout_calories(self, start: str, end: str) -> list[WorkoutCalories]:
        """Return date and calories of workouts dated within [start, end]."""


@dataclass
class StatsService:
    """Service for computing calorie series."""

    repository: StatsRepository
    timezone_name: str = "UTC"

    def today(self) -> date:
        """Return the current date in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date()

    def get_last_7_days(self, today: date | None = None) -> list[DailyStat]:
        """Return one calorie total per day for the trailing week, oldest first."""
        end = today or self.today()
        start = end - timedelta(days=WINDOW_DAYS - 1)
        rows = self.repository.list_workout_calories(
            start.isoformat(), end.isoformat()
        )
        return _aggregate_days(start, WINDOW_DAYS, rows)


def _aggregate_days(
    start: date, days: int, rows: list[WorkoutCalories]
) -> list[DailyStat]:
    totals: dict[str, int] = {}
    for row in rows:
        totals[row.date] = totals.get(row.date, 0) + (row.calories or 0)

    daily = []
    for offset in range(days):
        day = (start + timedelta(days=offset)).isoformat()
        daily.append(DailyStat(date=day, calories=totals.get(day, 0)))
    return daily
