"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from fitness_tracker.adapters.openai_coach_client import OpenAICoachClient
from fitness_tracker.adapters.sqlite_database import SqliteDatabase
from fitness_tracker.adapters.sqlite_profile_repository import (
    SqliteProfileRepository,
)
from fitness_tracker.adapters.sqlite_stats_repository import SqliteStatsRepository
from fitness_tracker.adapters.sqlite_workout_repository import (
    SqliteWorkoutRepository,
)
from fitness_tracker.config import Settings
from fitness_tracker.services.coach import CoachService
from fitness_tracker.services.profile import ProfileService
from fitness_tracker.services.stats import StatsService
from fitness_tracker.services.workouts import WorkoutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    database: SqliteDatabase
    profile_service: ProfileService
    workout_service: WorkoutService
    stats_service: StatsService
    coach_service: CoachService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    database = SqliteDatabase.create(resolved_settings.database_url)
    database.initialize()
    coach_client = (
        OpenAICoachClient.create(resolved_settings.openai_api_key)
        if resolved_settings.openai_api_key
        else None
    )

    async def close_resources() -> None:
        if coach_client is not None:
            await coach_client.close()
        database.close()

    return AppContainer(
        settings=resolved_settings,
        database=database,
        profile_service=ProfileService(
            SqliteProfileRepository(database),
            range_check=resolved_settings.profile_range_check,
        ),
        workout_service=WorkoutService(SqliteWorkoutRepository(database)),
        stats_service=StatsService(
            SqliteStatsRepository(database),
            timezone_name=resolved_settings.stats_timezone,
        ),
        coach_service=CoachService(
            client=coach_client, model=resolved_settings.openai_model
        ),
        close_resources=close_resources,
    )
