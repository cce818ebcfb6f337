"""Pydantic models for REST request and response bodies."""

import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fitness_tracker.domain.workouts import NewExercise, NewWorkout

SQLITE_INTEGER_MAX = 2**63 - 1


class ProfilePayload(BaseModel):
    """Full replacement of the user profile."""

    model_config = ConfigDict(allow_inf_nan=False)

    name: str
    weight: float
    height: float
    goal: str


class ExercisePayload(BaseModel):
    """Exercise submitted with a workout."""

    model_config = ConfigDict(allow_inf_nan=False)

    name: str
    sets: int = Field(ge=0, le=SQLITE_INTEGER_MAX)
    reps: int = Field(ge=0, le=SQLITE_INTEGER_MAX)
    weight: float


class WorkoutPayload(BaseModel):
    """Workout submitted for creation."""

    name: str
    date: datetime.date
    duration: int = Field(ge=0, le=SQLITE_INTEGER_MAX)
    calories: int = Field(ge=0, le=SQLITE_INTEGER_MAX)
    exercises: list[ExercisePayload] | None = None

    @field_validator("exercises", mode="before")
    @classmethod
    def ignore_non_list_exercises(cls, value: object) -> object:
        """Treat anything other than a list as no exercises."""
        if not isinstance(value, list):
            return None
        return value

    def to_domain(self) -> NewWorkout:
        """Convert the payload into a domain object."""
        return NewWorkout(
            name=self.name,
            date=self.date.isoformat(),
            duration=self.duration,
            calories=self.calories,
            exercises=[
                NewExercise(
                    name=exercise.name,
                    sets=exercise.sets,
                    reps=exercise.reps,
                    weight=exercise.weight,
                )
                for exercise in self.exercises or []
            ],
        )


class WorkoutPlanRequest(BaseModel):
    """Request for a suggested workout plan."""

    goal: str | None = None


class AdviceRequest(BaseModel):
    """Free-text question for the coach."""

    query: str = Field(min_length=1)
