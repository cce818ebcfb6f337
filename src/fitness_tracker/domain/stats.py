"""Domain models for statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WorkoutCalories:
    """Date and calories of a single workout."""

    date: str
    calories: int


@dataclass(frozen=True)
class DailyStat:
    """Total calories logged on one calendar day."""

    date: str
    calories: int
