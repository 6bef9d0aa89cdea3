"""Webhook configuration repository.

Also satisfies the dispatcher's ``WebhookStore`` protocol.
"""

from datetime import datetime

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from atomic_analyzer.db.models.webhook import WebhookRow
from atomic_analyzer.models.webhook import Webhook
from atomic_analyzer.repositories.base import BaseRepository


def row_to_webhook(row: WebhookRow) -> Webhook:
    return Webhook(
        id=row.webhook_id,
        name=row.name,
        url=row.url,
        trigger_event=row.trigger_event,
        method=row.method,
        custom_headers=row.custom_headers or {},
        is_active=row.is_active,
        created_at=row.created_at,
        last_triggered_at=row.last_triggered_at,
    )


class WebhookRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, WebhookRow)

    async def get(self, webhook_id: str) -> Webhook | None:
        row = await self.get_by_id("webhook_id", webhook_id)
        return row_to_webhook(row) if row else None

    async def list_all(self) -> list[Webhook]:
        stmt = select(WebhookRow).order_by(WebhookRow.created_at.desc())
        result = await self.session.execute(stmt)
        return [row_to_webhook(r) for r in result.scalars().all()]

    async def list_active(self, event: str) -> list[Webhook]:
        stmt = (
            select(WebhookRow)
            .where(WebhookRow.trigger_event == str(event), WebhookRow.is_active == True)  # noqa: E712
            .order_by(WebhookRow.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_webhook(r) for r in result.scalars().all()]

    async def upsert(self, webhook: Webhook) -> Webhook:
        values = {
            "name": webhook.name,
            "url": webhook.url,
            "trigger_event": webhook.trigger_event.value,
            "method": webhook.method.value,
            "custom_headers": dict(webhook.custom_headers),
            "is_active": webhook.is_active,
        }
        row = await self.get_by_id("webhook_id", webhook.id)
        if row is None:
            row = await self.create(webhook_id=webhook.id, **values)
        else:
            row = await self.update(row, **values)
        return row_to_webhook(row)

    async def delete(self, webhook_id: str) -> bool:
        stmt = delete(WebhookRow).where(WebhookRow.webhook_id == webhook_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def mark_triggered(self, webhook_id: str, at: datetime) -> None:
        stmt = (
            update(WebhookRow)
            .where(WebhookRow.webhook_id == webhook_id)
            .values(last_triggered_at=at)
        )
        await self.session.execute(stmt)
