"""Gemini HTTP client for generating narrative analysis text"""

import httpx
from typing import Any, Dict
from finance_assistant.domain.exceptions import LLMAPIError
from finance_assistant.config import settings
from finance_assistant.infrastructure.observability.metrics import llm_latency_histogram, llm_failure_counter


class GeminiClient:
    """Client for the Gemini ``generateContent`` REST endpoint"""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key or settings.api_key
        self.base_url = (base_url or settings.llm_api_base).rstrip("/")
        self.model = model or settings.llm_model
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/v1beta/models/{self.model}:generateContent"

    async def generate_text(self, prompt: str) -> str:
        """
        Send a single-turn prompt and return the model's text answer.

        Raises:
            LLMAPIError: On missing credentials, timeout, HTTP errors, or an
                unusable response body
        """
        if not self.api_key:
            llm_failure_counter.labels(reason="missing_key").inc()
            raise LLMAPIError("API key is not configured")

        payload = {"contents": [{"parts": [{"text": prompt}]}]}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                with llm_latency_histogram.time():
                    response = await client.post(
                        self.endpoint,
                        json=payload,
                        headers={"x-goog-api-key": self.api_key},
                    )
                response.raise_for_status()
                return self._extract_text(response.json())

            except httpx.TimeoutException as e:
                llm_failure_counter.labels(reason="timeout").inc()
                raise LLMAPIError(f"LLM API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                llm_failure_counter.labels(reason="http_status").inc()
                raise LLMAPIError(f"LLM API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                llm_failure_counter.labels(reason="network").inc()
                raise LLMAPIError(f"LLM API unreachable: {e}") from e
            except (KeyError, IndexError, ValueError, TypeError, AttributeError) as e:
                llm_failure_counter.labels(reason="invalid_response").inc()
                raise LLMAPIError(f"Invalid response from LLM API: {e}") from e

    @staticmethod
    def _extract_text(data: Dict[str, Any]) -> str:
        parts = data["candidates"][0]["content"]["parts"]
        text = "".join(part.get("text", "") for part in parts)
        if not text.strip():
            raise ValueError("empty text in model response")
        return text
