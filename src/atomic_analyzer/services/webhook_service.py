"""Webhook management: save, delete, toggle, list and test."""

from __future__ import annotations

import logging
from typing import Any

from atomic_analyzer.errors.exceptions import NotFoundError, ValidationError
from atomic_analyzer.events.dispatcher import WebhookDispatcher
from atomic_analyzer.models.enums import HttpMethod, TriggerEvent
from atomic_analyzer.models.webhook import Webhook, is_absolute_url
from atomic_analyzer.repositories.webhook_repo import WebhookRepository
from atomic_analyzer.services.id_generator import generate_id

logger = logging.getLogger(__name__)


class WebhookService:
    def __init__(self, repo: WebhookRepository, dispatcher: WebhookDispatcher) -> None:
        self._repo = repo
        self._dispatcher = dispatcher

    async def save(self, data: dict[str, Any]) -> Webhook:
        """Create or update a webhook from a loosely typed payload.

        ``trigger`` is accepted as an alias for ``trigger_event``. An ``id``
        that does not exist yet is created under that id.
        """
        name = (data.get("name") or "").strip()
        url = (data.get("url") or "").strip()
        trigger = data.get("trigger_event") or data.get("trigger")
        if not name or not url or not trigger:
            raise ValidationError("Name, URL, and trigger event are required")
        if not is_absolute_url(url):
            raise ValidationError("Invalid webhook URL", {"url": url})
        if trigger not in set(TriggerEvent):
            raise ValidationError("Unknown trigger event", {"trigger_event": trigger})

        method = str(data.get("method") or HttpMethod.POST).upper()
        if method not in set(HttpMethod):
            raise ValidationError("Unsupported HTTP method", {"method": method})

        headers = data.get("custom_headers") or data.get("headers") or {}
        if not isinstance(headers, dict):
            raise ValidationError("custom_headers must be an object")

        webhook = Webhook(
            id=data.get("id") or generate_id("whk_"),
            name=name,
            url=url,
            trigger_event=TriggerEvent(trigger),
            method=HttpMethod(method),
            custom_headers={str(k): str(v) for k, v in headers.items()},
            is_active=bool(data.get("is_active", True)),
        )
        saved = await self._repo.upsert(webhook)
        logger.info("Webhook saved: id=%s event=%s", saved.id, saved.trigger_event)
        return saved

    async def get(self, webhook_id: str) -> Webhook:
        webhook = await self._repo.get(webhook_id)
        if webhook is None:
            raise NotFoundError("Webhook", webhook_id)
        return webhook

    async def list(self) -> list[Webhook]:
        return await self._repo.list_all()

    async def delete(self, webhook_id: str) -> None:
        if not await self._repo.delete(webhook_id):
            raise NotFoundError("Webhook", webhook_id)
        logger.info("Webhook deleted: id=%s", webhook_id)

    async def toggle(self, webhook_id: str, is_active: bool | None = None) -> Webhook:
        """Flip ``is_active``, or set it explicitly when a value is given."""
        webhook = await self.get(webhook_id)
        active = (not webhook.is_active) if is_active is None else is_active
        return await self._repo.upsert(webhook.model_copy(update={"is_active": active}))

    async def test(self, webhook_id: str) -> dict[str, Any]:
        webhook = await self.get(webhook_id)
        result = await self._dispatcher.send_test(webhook)
        if not result.success:
            if result.status_code is not None:
                message = f"Webhook request failed (HTTP {result.status_code})"
            else:
                message = result.error or "Webhook request failed"
            return {
                "success": False,
                "message": message,
                "status_code": result.status_code,
                "response": result.response_body_prefix,
            }
        return {
            "success": True,
            "message": "Test webhook sent successfully",
            "status_code": result.status_code,
            "response": result.response_body_prefix,
        }
