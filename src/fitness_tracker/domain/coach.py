"""Models for coach suggestions."""

from pydantic import BaseModel, Field


class PlannedExercise(BaseModel):
    """Single exercise in a suggested plan."""

    name: str
    sets: int = Field(ge=0)
    reps: int = Field(ge=0)
    instructions: str


class WorkoutPlan(BaseModel):
    """Structured workout plan returned by the coach."""

    name: str
    description: str
    exercises: list[PlannedExercise]
