"""Tests for the SQLite database handle."""

import pytest
from sqlalchemy import func, insert, select

from fitness_tracker.adapters.sqlite_database import (
    SqliteDatabase,
    exercises_table,
    user_profile_table,
)
from fitness_tracker.adapters.sqlite_profile_repository import (
    SqliteProfileRepository,
)
from fitness_tracker.domain.errors import StorageError
from fitness_tracker.domain.profile import DEFAULT_PROFILE, Profile


def _profile_count(database: SqliteDatabase) -> int:
    with database.connect() as connection:
        return connection.execute(
            select(func.count()).select_from(user_profile_table)
        ).scalar_one()


def test_initialize_seeds_default_profile(database: SqliteDatabase) -> None:
    repository = SqliteProfileRepository(database)

    assert _profile_count(database) == 1
    assert repository.get_profile() == DEFAULT_PROFILE


def test_initialize_twice_keeps_existing_profile(database: SqliteDatabase) -> None:
    repository = SqliteProfileRepository(database)
    custom = Profile(name="Ana", weight=60, height=165, goal="Perder peso")
    repository.update_profile(custom)

    database.initialize()
    database.initialize()

    assert _profile_count(database) == 1
    assert repository.get_profile() == custom


def test_profile_table_rejects_second_row(database: SqliteDatabase) -> None:
    with pytest.raises(StorageError):
        with database.transaction() as connection:
            connection.execute(
                insert(user_profile_table).values(
                    id=2, name="Other", weight=1, height=1, goal="x"
                )
            )

    assert _profile_count(database) == 1


def test_exercise_requires_existing_workout(database: SqliteDatabase) -> None:
    with pytest.raises(StorageError):
        with database.transaction() as connection:
            connection.execute(
                insert(exercises_table).values(
                    workout_id=999, name="Squat", sets=3, reps=5, weight=100
                )
            )


def test_in_memory_database_shares_one_connection() -> None:
    database = SqliteDatabase.create("sqlite://")
    database.initialize()

    assert SqliteProfileRepository(database).get_profile() == DEFAULT_PROFILE
    database.close()
