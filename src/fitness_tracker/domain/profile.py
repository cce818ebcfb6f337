"""Domain models for the user profile."""

from dataclasses import dataclass

PROFILE_ID = 1


@dataclass(frozen=True)
class Profile:
    """The single user's identity and goal."""

    name: str
    weight: float
    height: float
    goal: str


DEFAULT_PROFILE = Profile(
    name="Atleta",
    weight=75,
    height=175,
    goal="Ganhar massa muscular",
)
