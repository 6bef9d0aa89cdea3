"""Outbound HTTP transport for webhook deliveries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from atomic_analyzer.errors.exceptions import TransportError

logger = logging.getLogger(__name__)


@dataclass
class TransportResponse:
    status_code: int
    body: str


class WebhookTransport(Protocol):
    async def send(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: bytes,
        timeout: float,
    ) -> TransportResponse:
        """Send once. Raises ``TransportError`` on DNS, connect or timeout failure."""
        ...


class HttpxWebhookTransport:
    """Single-attempt sender with TLS verification on and no retries."""

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client

    async def send(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: bytes,
        timeout: float,
    ) -> TransportResponse:
        try:
            if self._client is not None:
                resp = await self._client.request(method, url, content=body, headers=headers, timeout=timeout)
            else:
                async with httpx.AsyncClient(timeout=timeout, verify=True) as client:
                    resp = await client.request(method, url, content=body, headers=headers)
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or exc.__class__.__name__, url=url) from exc
        return TransportResponse(status_code=resp.status_code, body=resp.text)
