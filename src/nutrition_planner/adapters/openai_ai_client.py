"""OpenAI Responses API client for structured generation."""

import json
from dataclasses import dataclass

import httpx
from openai import AsyncOpenAI

from nutrition_planner.services.gateway import AIClient


@dataclass
class OpenAIStructuredClient(AIClient):
    """AI client backed by OpenAI Responses API structured outputs."""

    client: AsyncOpenAI
    http_client: httpx.AsyncClient | None = None

    @classmethod
    def create(cls, api_key: str, timeout_seconds: float) -> "OpenAIStructuredClient":
        """Create an OpenAI client with a managed httpx session."""
        http_client = httpx.AsyncClient(timeout=timeout_seconds)
        return cls(
            client=AsyncOpenAI(api_key=api_key, http_client=http_client),
            http_client=http_client,
        )

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema: dict[str, object],
        schema_name: str,
        prompt: str,
    ) -> dict[str, object]:
        """Call OpenAI Responses API with a strict JSON schema."""
        request_payload: dict[str, object] = {
            "model": model,
            "input": [
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": schema_name,
                    "strict": True,
                    "schema": schema,
                }
            },
            "store": store,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(output_text)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        if self.http_client is not None:
            await self.http_client.aclose()
