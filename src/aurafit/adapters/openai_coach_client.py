"""OpenAI Responses API client for the AI coach."""

import json
from dataclasses import dataclass

import httpx
from openai import AsyncOpenAI

from aurafit.services.coach import CoachClient


@dataclass
class OpenAICoachClient(CoachClient):
    """Coach client backed by OpenAI Responses API."""

    client: AsyncOpenAI
    reasoning_effort: str | None = None
    store: bool = False

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        api_key: str,
        *,
        timeout_seconds: float = 30.0,
        max_retries: int = 1,
        reasoning_effort: str | None = None,
        store: bool = False,
    ) -> "OpenAICoachClient":
        """Create an OpenAI coach client with a managed httpx session."""
        return cls(
            client=AsyncOpenAI(
                api_key=api_key,
                max_retries=max_retries,
                http_client=httpx.AsyncClient(timeout=timeout_seconds),
            ),
            reasoning_effort=reasoning_effort,
            store=store,
        )

    async def extract(
        self,
        *,
        model: str,
        prompt: str,
        schema: dict[str, object],
        schema_name: str,
    ) -> dict[str, object]:
        """Call OpenAI Responses API with structured outputs."""
        request_payload = self._base_payload(model)
        request_payload["input"] = prompt
        request_payload["text"] = {
            "format": {
                "type": "json_schema",
                "name": schema_name,
                "strict": True,
                "schema": schema,
            }
        }
        response = await self.client.responses.create(**request_payload)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(strip_code_fence(output_text))

    async def compose(self, *, model: str, instructions: str, prompt: str) -> str:
        """Call OpenAI Responses API for free-form text."""
        request_payload = self._base_payload(model)
        request_payload["instructions"] = instructions
        request_payload["input"] = prompt
        response = await self.client.responses.create(**request_payload)
        return response.output_text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()

    def _base_payload(self, model: str) -> dict[str, object]:
        payload: dict[str, object] = {"model": model, "store": self.store}
        if self.reasoning_effort:
            payload["reasoning"] = {"effort": self.reasoning_effort}
        return payload


def strip_code_fence(text: str) -> str:
    """Remove a markdown code fence wrapped around a JSON payload."""
    cleaned = text.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[len("```json") :]
    elif cleaned.startswith("```"):
        cleaned = cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()
