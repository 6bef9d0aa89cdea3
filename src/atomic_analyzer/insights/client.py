"""Text-generation collaborators."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from atomic_analyzer.errors.exceptions import (
    InvalidResponseError,
    NoApiKeyError,
    UpstreamError,
)

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    model: str

    async def generate(self, prompt: str, max_tokens: int) -> str: ...


class AnthropicTextGenerator:
    """Calls the Anthropic Messages API over httpx.

    A missing API key raises ``NoApiKeyError`` before any request is made.
    Pass ``client`` to reuse a connection pool or to inject a mock transport.
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        api_url: str = "https://api.anthropic.com/v1/messages",
        api_version: str = "2023-06-01",
        timeout: float = 60.0,
        temperature: float = 0.7,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.api_url = api_url
        self.api_version = api_version
        self.timeout = timeout
        self.temperature = temperature
        self._client = client

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def generate(self, prompt: str, max_tokens: int) -> str:
        if not self.api_key:
            raise NoApiKeyError()

        headers = {
            "Content-Type": "application/json",
            "x-api-key": self.api_key,
            "anthropic-version": self.api_version,
        }
        body = {
            "model": self.model,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.temperature,
        }

        try:
            if self._client is not None:
                resp = await self._client.post(self.api_url, headers=headers, json=body, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.post(self.api_url, headers=headers, json=body)
        except httpx.HTTPError as exc:
            logger.warning("Text generation request failed: %s", exc)
            raise UpstreamError(f"Claude API request failed: {exc}") from exc

        if not resp.is_success:
            raise UpstreamError(_error_message(resp), upstream_status=resp.status_code)

        try:
            data = resp.json()
            text = data["content"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise InvalidResponseError() from exc
        if not isinstance(text, str):
            raise InvalidResponseError()
        return text


def _error_message(resp: httpx.Response) -> str:
    try:
        message = resp.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        message = None
    if isinstance(message, str) and message:
        return message
    return f"Claude API error: {resp.status_code}"
