"""Workout logging service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from fitness_tracker.domain.errors import WorkoutNotFoundError
from fitness_tracker.domain.workouts import (
    ExerciseRecord,
    NewWorkout,
    WorkoutDetail,
    WorkoutRecord,
)

logger = logging.getLogger(__name__)


class WorkoutRepository(Protocol):
    """Persistence interface for workouts and their exercises."""

    def list_workouts(self) -> list[WorkoutRecord]:
        """Return all workouts, most recent date first."""

    def get_workout(self, workout_id: int) -> WorkoutRecord | None:
        """Return a workout by id."""

    def create_workout(self, workout: NewWorkout) -> int:
        """Insert a workout with its exercises atomically and return its id."""

    def list_exercises(self, workout_id: int) -> list[ExerciseRecord]:
        """Return exercises for a workout in insertion order."""


@dataclass
class WorkoutService:
    """Service for logging and listing workouts."""

    repository: WorkoutRepository

    def list_workouts(self) -> list[WorkoutRecord]:
        """Return all workouts ordered by date descending."""
        return self.repository.list_workouts()

    def create_workout(self, workout: NewWorkout) -> int:
        """Persist a workout and its exercises."""
        workout_id = self.repository.create_workout(workout)
        logger.info(
            "Workout created",
            extra={
                "workout_id": workout_id,
                "exercise_count": len(workout.exercises),
            },
        )
        return workout_id

    def get_workout_detail(self, workout_id: int) -> WorkoutDetail:
        """Return a workout with its exercises."""
        workout = self.repository.get_workout(workout_id)
        if workout is None:
            raise WorkoutNotFoundError(f"Workout {workout_id} not found")
        return WorkoutDetail(
            id=workout.id,
            name=workout.name,
            date=workout.date,
            duration=workout.duration,
            calories=workout.calories,
            exercises=self.repository.list_exercises(workout_id),
        )
