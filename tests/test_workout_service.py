"""Tests for workout service."""

import pytest

from fitness_tracker.adapters.sqlite_workout_repository import (
    SqliteWorkoutRepository,
)
from fitness_tracker.domain.errors import WorkoutNotFoundError
from fitness_tracker.domain.workouts import NewExercise, NewWorkout
from fitness_tracker.services.workouts import WorkoutService


def test_create_then_list_contains_new_workout(
    workout_repository: SqliteWorkoutRepository,
) -> None:
    service = WorkoutService(workout_repository)
    existing = service.create_workout(
        NewWorkout(name="Run", date="2024-05-01", duration=30, calories=250)
    )

    workout_id = service.create_workout(
        NewWorkout(name="Swim", date="2024-05-02", duration=40, calories=350)
    )

    workouts = service.list_workouts()
    assert len(workouts) == 2
    assert workout_id > existing
    matching = [workout for workout in workouts if workout.id == workout_id]
    assert matching[0].name == "Swim"
    assert matching[0].calories == 350


def test_get_workout_detail_includes_exercises(
    workout_repository: SqliteWorkoutRepository,
) -> None:
    service = WorkoutService(workout_repository)
    workout_id = service.create_workout(
        NewWorkout(
            name="Push",
            date="2024-05-03",
            duration=50,
            calories=280,
            exercises=[NewExercise(name="Bench", sets=5, reps=5, weight=90.5)],
        )
    )

    detail = service.get_workout_detail(workout_id)

    assert detail.name == "Push"
    assert detail.exercises[0].name == "Bench"
    assert detail.exercises[0].weight == 90.5


def test_get_workout_detail_missing_raises(
    workout_repository: SqliteWorkoutRepository,
) -> None:
    service = WorkoutService(workout_repository)

    with pytest.raises(WorkoutNotFoundError):
        service.get_workout_detail(404)
