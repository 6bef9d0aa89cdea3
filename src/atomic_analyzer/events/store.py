"""Webhook lookup used by the dispatcher."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from atomic_analyzer.models.webhook import Webhook


class WebhookStore(Protocol):
    async def list_active(self, event: str) -> list[Webhook]: ...

    async def mark_triggered(self, webhook_id: str, at: datetime) -> None: ...


class InMemoryWebhookStore:
    """Process-local store for callers without a database."""

    def __init__(self, webhooks: list[Webhook] | None = None) -> None:
        self._webhooks: dict[str, Webhook] = {w.id: w for w in webhooks or []}

    def add(self, webhook: Webhook) -> None:
        self._webhooks[webhook.id] = webhook

    def remove(self, webhook_id: str) -> None:
        self._webhooks.pop(webhook_id, None)

    def get(self, webhook_id: str) -> Webhook | None:
        return self._webhooks.get(webhook_id)

    def list_all(self) -> list[Webhook]:
        return list(self._webhooks.values())

    async def list_active(self, event: str) -> list[Webhook]:
        return [w for w in self._webhooks.values() if w.is_active and w.trigger_event == event]

    async def mark_triggered(self, webhook_id: str, at: datetime) -> None:
        webhook = self._webhooks.get(webhook_id)
        if webhook is not None:
            self._webhooks[webhook_id] = webhook.model_copy(update={"last_triggered_at": at})
