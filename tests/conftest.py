"""Shared test fixtures."""

import sqlite3
from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest
from sqlalchemy import event
from sqlalchemy.exc import OperationalError

from fitness_tracker.adapters.sqlite_database import SqliteDatabase
from fitness_tracker.adapters.sqlite_profile_repository import (
    SqliteProfileRepository,
)
from fitness_tracker.adapters.sqlite_stats_repository import SqliteStatsRepository
from fitness_tracker.adapters.sqlite_workout_repository import (
    SqliteWorkoutRepository,
)
from fitness_tracker.config import Settings
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.profile import Profile
from fitness_tracker.domain.stats import WorkoutCalories
from fitness_tracker.services.coach import CoachClient, CoachService
from fitness_tracker.services.profile import ProfileRepository, ProfileService
from fitness_tracker.services.stats import StatsRepository, StatsService
from fitness_tracker.services.workouts import WorkoutService


@dataclass
class FakeCoachClient(CoachClient):
    """Fake coach client returning fixed payloads."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "name": "Full Body A",
            "description": "Compound lifts for strength",
            "exercises": [
                {
                    "name": "Squat",
                    "sets": 4,
                    "reps": 8,
                    "instructions": "Keep your chest up",
                }
            ],
        }
    )
    answer: str = "Train consistently and sleep well."
    error: Exception | None = None
    prompts: list[str] = field(default_factory=list)

    async def generate_json(
        self, *, model: str, prompt: str, schema: dict[str, object]
    ) -> dict[str, object]:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.payload

    async def generate_text(self, *, model: str, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.answer


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profile: Profile | None = None
    updates: list[Profile] = field(default_factory=list)

    def get_profile(self) -> Profile | None:
        return self.profile

    def update_profile(self, profile: Profile) -> bool:
        if self.profile is None:
            return False
        self.profile = profile
        self.updates.append(profile)
        return True


@dataclass
class InMemoryStatsRepository(StatsRepository):
    """In-memory stats repository for tests."""

    rows: list[WorkoutCalories] = field(default_factory=list)

    def list_workout_calories(self, start: str, end: str) -> list[WorkoutCalories]:
        return [row for row in self.rows if start <= row.date <= end]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(database_url=f"sqlite:///{tmp_path / 'fitness.db'}")


@pytest.fixture
def database(settings: Settings) -> Iterator[SqliteDatabase]:
    database = SqliteDatabase.create(settings.database_url)
    database.initialize()
    yield database
    database.close()


@pytest.fixture
def workout_repository(database: SqliteDatabase) -> SqliteWorkoutRepository:
    return SqliteWorkoutRepository(database)


@pytest.fixture
def coach_client() -> FakeCoachClient:
    return FakeCoachClient()


@pytest.fixture
def fail_exercise_inserts(database: SqliteDatabase) -> Iterator[None]:
    """Make every INSERT into the exercises table fail like a disk error."""

    def _fail(conn, cursor, statement, parameters, context, executemany):  # type: ignore[no-untyped-def]
        if statement.startswith("INSERT INTO exercises"):
            raise OperationalError(
                statement, parameters, sqlite3.OperationalError("disk I/O error")
            )

    event.listen(database.engine, "before_cursor_execute", _fail)
    yield
    event.remove(database.engine, "before_cursor_execute", _fail)


@pytest.fixture
def container(
    settings: Settings,
    database: SqliteDatabase,
    workout_repository: SqliteWorkoutRepository,
    coach_client: FakeCoachClient,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        database=database,
        profile_service=ProfileService(SqliteProfileRepository(database)),
        workout_service=WorkoutService(workout_repository),
        stats_service=StatsService(SqliteStatsRepository(database)),
        coach_service=CoachService(client=coach_client, model=settings.openai_model),
        close_resources=close_resources,
    )
