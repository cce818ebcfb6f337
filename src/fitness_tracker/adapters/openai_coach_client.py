"""OpenAI Responses API client for coach requests."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI, OpenAIError

from fitness_tracker.domain.errors import UpstreamError
from fitness_tracker.services.coach import CoachClient


@dataclass
class OpenAICoachClient(CoachClient):
    """Coach client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAICoachClient":
        """Create an OpenAI coach client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def generate_json(
        self, *, model: str, prompt: str, schema: dict[str, object]
    ) -> dict[str, object]:
        """Call OpenAI Responses API with structured outputs."""
        output_text = await self._create(
            model=model,
            input=prompt,
            text={
                "format": {
                    "type": "json_schema",
                    "name": "workout_plan",
                    "strict": True,
                    "schema": schema,
                }
            },
        )
        try:
            return json.loads(output_text)
        except json.JSONDecodeError as exc:
            raise UpstreamError("OpenAI returned invalid JSON") from exc

    async def generate_text(self, *, model: str, prompt: str) -> str:
        """Call OpenAI Responses API for a plain text answer."""
        return await self._create(model=model, input=prompt)

    async def _create(self, **request_payload: object) -> str:
        try:
            response = await self.client.responses.create(**request_payload)
        except OpenAIError as exc:
            raise UpstreamError(f"OpenAI request failed: {exc}") from exc
        output_text = response.output_text
        if not output_text:
            raise UpstreamError("OpenAI returned an empty response")
        return output_text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
