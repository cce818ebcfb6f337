"""Domain models for workouts and exercises."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NewExercise:
    """Exercise data submitted with a new workout."""

    name: str
    sets: int
    reps: int
    weight: float


@dataclass(frozen=True)
class NewWorkout:
    """Workout data submitted for creation."""

    name: str
    date: str
    duration: int
    calories: int
    exercises: list[NewExercise] = field(default_factory=list)


@dataclass(frozen=True)
class ExerciseRecord:
    """Exercise stored in the database."""

    id: int
    workout_id: int
    name: str
    sets: int
    reps: int
    weight: float


@dataclass(frozen=True)
class WorkoutRecord:
    """Workout stored in the database."""

    id: int
    name: str
    date: str
    duration: int
    calories: int


@dataclass(frozen=True)
class WorkoutDetail:
    """Workout with its exercises."""

    id: int
    name: str
    date: str
    duration: int
    calories: int
    exercises: list[ExerciseRecord]
