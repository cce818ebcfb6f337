"""Workout suggestions and advice from a hosted language model."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError as PydanticValidationError

from fitness_tracker.domain.coach import WorkoutPlan
from fitness_tracker.domain.errors import UpstreamError
from fitness_tracker.domain.profile import Profile

logger = logging.getLogger(__name__)

WORKOUT_PLAN_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "description": {"type": "string"},
        "exercises": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "sets": {"type": "integer", "minimum": 0},
                    "reps": {"type": "integer", "minimum": 0},
                    "instructions": {"type": "string"},
                },
                "required": ["name", "sets", "reps", "instructions"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["name", "description", "exercises"],
    "additionalProperties": False,
}


class CoachClient(Protocol):
    """Interface for hosted language model calls."""

    async def generate_json(
        self, *, model: str, prompt: str, schema: dict[str, object]
    ) -> dict[str, object]:
        """Return a structured response matching the schema."""

    async def generate_text(self, *, model: str, prompt: str) -> str:
        """Return a free-text response."""


@dataclass
class CoachService:
    """Service that builds coach prompts and reports failures as None."""

    client: CoachClient | None
    model: str

    async def suggest_workout(
        self, profile: Profile, goal: str | None = None
    ) -> WorkoutPlan | None:
        """Suggest a workout plan for the profile."""
        if self.client is None:
            logger.warning("Coach is not configured; skipping workout suggestion")
            return None
        prompt = _workout_prompt(profile, goal or profile.goal)
        try:
            raw = await self.client.generate_json(
                model=self.model, prompt=prompt, schema=WORKOUT_PLAN_SCHEMA
            )
            return WorkoutPlan.model_validate(raw)
        except (UpstreamError, PydanticValidationError):
            logger.exception("Workout suggestion failed")
            return None

    async def get_advice(self, query: str) -> str | None:
        """Answer a fitness question."""
        if self.client is None:
            logger.warning("Coach is not configured; skipping advice request")
            return None
        prompt = (
            "You are an experienced personal trainer. "
            "Answer the following question in a motivating and technical way: "
            f"{query}"
        )
        try:
            return await self.client.generate_text(model=self.model, prompt=prompt)
        except UpstreamError:
            logger.exception("Advice request failed")
            return None


def _workout_prompt(profile: Profile, goal: str) -> str:
    return (
        "Create a personalized workout plan for a user with this profile:\n"
        f"Goal: {goal}\n"
        f"Weight: {profile.weight}kg\n"
        f"Height: {profile.height}cm\n"
        "Return the plan as JSON with a name, a short description and a list "
        "of exercises, each with name, sets, reps and a quick instruction."
    )
