"""Webhook management API routes."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from atomic_analyzer.dependencies import AppSettings, DBSession, Webhooks
from atomic_analyzer.events.docs import WEBHOOK_TEMPLATES, generate_documentation
from atomic_analyzer.events.triggers import TRIGGER_CATALOGUE
from atomic_analyzer.models.requests import WebhookRequest, WebhookToggleRequest

router = APIRouter(tags=["Webhooks"])


@router.get("/webhooks")
async def list_webhooks(service: Webhooks) -> list[dict]:
    return [w.model_dump(mode="json") for w in await service.list()]


@router.post("/webhooks", status_code=201)
async def create_webhook(body: WebhookRequest, service: Webhooks, db: DBSession) -> dict:
    webhook = await service.save(body.model_dump(mode="json"))
    await db.commit()
    return {"webhook": webhook.model_dump(mode="json"), "message": "Webhook saved successfully"}


@router.get("/webhooks/triggers")
async def list_triggers() -> dict:
    return {event.value: info.to_dict() for event, info in TRIGGER_CATALOGUE.items()}


@router.get("/webhooks/templates")
async def list_templates() -> dict:
    return WEBHOOK_TEMPLATES


@router.get("/webhooks/docs", response_class=PlainTextResponse)
async def webhook_docs(cfg: AppSettings) -> str:
    return generate_documentation(cfg.version, cfg.site_url, bool(cfg.webhook_secret))


@router.get("/webhooks/{webhook_id}")
async def get_webhook(webhook_id: str, service: Webhooks) -> dict:
    return (await service.get(webhook_id)).model_dump(mode="json")


@router.put("/webhooks/{webhook_id}")
async def update_webhook(webhook_id: str, body: WebhookRequest, service: Webhooks, db: DBSession) -> dict:
    await service.get(webhook_id)
    webhook = await service.save({**body.model_dump(mode="json"), "id": webhook_id})
    await db.commit()
    return {"webhook": webhook.model_dump(mode="json"), "message": "Webhook saved successfully"}


@router.delete("/webhooks/{webhook_id}", status_code=204)
async def delete_webhook(webhook_id: str, service: Webhooks, db: DBSession) -> None:
    await service.delete(webhook_id)
    await db.commit()


@router.post("/webhooks/{webhook_id}/toggle")
async def toggle_webhook(
    webhook_id: str,
    service: Webhooks,
    db: DBSession,
    body: WebhookToggleRequest | None = None,
) -> dict:
    webhook = await service.toggle(webhook_id, body.is_active if body else None)
    await db.commit()
    return webhook.model_dump(mode="json")


@router.post("/webhooks/{webhook_id}/test")
async def test_webhook(webhook_id: str, service: Webhooks) -> dict:
    return await service.test(webhook_id)
