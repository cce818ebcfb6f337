"""SQLite repository for workouts and exercises."""

from dataclasses import dataclass

from sqlalchemy import Row, insert, select
from sqlalchemy.engine import Connection

from fitness_tracker.adapters.sqlite_database import (
    SqliteDatabase,
    exercises_table,
    workouts_table,
)
from fitness_tracker.domain.workouts import (
    ExerciseRecord,
    NewExercise,
    NewWorkout,
    WorkoutRecord,
)
from fitness_tracker.services.workouts import WorkoutRepository


@dataclass
class SqliteWorkoutRepository(WorkoutRepository):
    """SQLite implementation for workout persistence."""

    database: SqliteDatabase

    def list_workouts(self) -> list[WorkoutRecord]:
        """Return workouts ordered by date, newest first."""
        query = select(workouts_table).order_by(
            workouts_table.c.date.desc(), workouts_table.c.id.desc()
        )
        with self.database.connect() as connection:
            rows = connection.execute(query).all()
        return [_parse_workout(row) for row in rows]

    def get_workout(self, workout_id: int) -> WorkoutRecord | None:
        """Return a workout by id."""
        query = select(workouts_table).where(workouts_table.c.id == workout_id)
        with self.database.connect() as connection:
            row = connection.execute(query).first()
        return _parse_workout(row) if row is not None else None

    def create_workout(self, workout: NewWorkout) -> int:
        """Insert the workout and its exercises in one transaction."""
        with self.database.transaction() as connection:
            result = connection.execute(
                insert(workouts_table).values(
                    name=workout.name,
                    date=workout.date,
                    duration=workout.duration,
                    calories=workout.calories,
                )
            )
            workout_id = int(result.inserted_primary_key[0])
            _insert_exercises(connection, workout_id, workout.exercises)
        return workout_id

    def list_exercises(self, workout_id: int) -> list[ExerciseRecord]:
        """Return exercises for a workout in insertion order."""
        query = (
            select(exercises_table)
            .where(exercises_table.c.workout_id == workout_id)
            .order_by(exercises_table.c.id)
        )
        with self.database.connect() as connection:
            rows = connection.execute(query).all()
        return [
            ExerciseRecord(
                id=row.id,
                workout_id=row.workout_id,
                name=row.name,
                sets=row.sets,
                reps=row.reps,
                weight=row.weight,
            )
            for row in rows
        ]


def _insert_exercises(
    connection: Connection, workout_id: int, exercises: list[NewExercise]
) -> None:
    statement = insert(exercises_table)
    for exercise in exercises:
        connection.execute(
            statement.values(
                workout_id=workout_id,
                name=exercise.name,
                sets=exercise.sets,
                reps=exercise.reps,
                weight=exercise.weight,
            )
        )


def _parse_workout(row: Row) -> WorkoutRecord:
    return WorkoutRecord(
        id=row.id,
        name=row.name,
        date=row.date,
        duration=row.duration,
        calories=row.calories,
    )
