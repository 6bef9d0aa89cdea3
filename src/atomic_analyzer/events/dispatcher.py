"""Webhook fan-out: build, sign, adapt per destination, send, record.

Each matching webhook gets exactly one attempt per ``trigger`` call. A
failure at one destination is logged and reported in its result; it never
stops delivery to the others and never raises to the caller.

Signing: by default the signature covers the canonical payload bytes, even
for Slack and Discord destinations that receive a reshaped body. Receivers
behind those families therefore cannot verify against the body they got.
Set ``sign_transmitted_body=True`` to sign the bytes actually sent instead.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from atomic_analyzer.errors.exceptions import DeliveryError, TransportError
from atomic_analyzer.events.formatters import PayloadFormatter, build_formatters, resolve_family
from atomic_analyzer.events.payloads import PayloadBuilder, PayloadFilter
from atomic_analyzer.events.signing import canonical_json, sign_payload
from atomic_analyzer.events.store import WebhookStore
from atomic_analyzer.events.transport import WebhookTransport
from atomic_analyzer.events.triggers import sample_data
from atomic_analyzer.models.enums import DestinationFamily
from atomic_analyzer.models.webhook import Webhook, WebhookDeliveryResult

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Signature"
EVENT_HEADER = "X-Event"
WEBHOOK_ID_HEADER = "X-Webhook-Id"
RESPONSE_PREFIX_CHARS = 500


class WebhookDispatcher:
    def __init__(
        self,
        store: WebhookStore,
        transport: WebhookTransport,
        builder: PayloadBuilder,
        secret: str = "",
        timeout: float = 30.0,
        max_concurrency: int = 4,
        sign_transmitted_body: bool = False,
        version: str = "2.1.0",
        clock: Callable[[], datetime] | None = None,
        formatters: dict[DestinationFamily, PayloadFormatter] | None = None,
    ) -> None:
        self._store = store
        self._transport = transport
        self._builder = builder
        self._secret = secret
        self._timeout = timeout
        self._max_concurrency = max(1, max_concurrency)
        self._sign_transmitted_body = sign_transmitted_body
        self._user_agent = f"Atomic-Analyzer/{version}"
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._formatters = formatters or build_formatters(self._clock)

    def add_payload_filter(self, fn: PayloadFilter) -> None:
        """Register a hook that may rewrite the canonical payload before signing."""
        self._builder.add_filter(fn)

    async def trigger(self, event: str, data: dict[str, Any]) -> list[WebhookDeliveryResult]:
        """Deliver ``event`` to every active webhook registered for it.

        Results come back in the order the store listed the webhooks.
        """
        webhooks = [
            w for w in await self._store.list_active(str(event))
            if w.is_active and w.trigger_event == event
        ]
        if not webhooks:
            return []

        payload = self._builder.build(event, data)
        canonical = canonical_json(payload)
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def run(webhook: Webhook) -> WebhookDeliveryResult:
            async with semaphore:
                return await self._deliver(webhook, str(event), payload, canonical)

        results = await asyncio.gather(*(run(w) for w in webhooks))
        # Stores may hold a single DB session, so bookkeeping runs sequentially.
        for webhook, result in zip(webhooks, results):
            await self._record(webhook, result)
        logger.info(
            "Webhook event %s delivered: %d/%d succeeded",
            event,
            sum(1 for r in results if r.success),
            len(results),
        )
        return list(results)

    async def send_test(self, webhook: Webhook) -> WebhookDeliveryResult:
        """Send sample data for the webhook's own event, once."""
        event = str(webhook.trigger_event)
        data = sample_data(event, self._builder.site_url, self._clock())
        payload = self._builder.build(event, data)
        return await self._deliver(webhook, event, payload, canonical_json(payload))

    async def _record(self, webhook: Webhook, result: WebhookDeliveryResult) -> None:
        try:
            await self._store.mark_triggered(webhook.id, self._clock())
        except Exception:
            logger.exception("Failed to record last trigger time for webhook %s", webhook.id)

        if not result.success:
            logger.warning(
                "Webhook delivery failed: id=%s name=%s status=%s error=%s",
                webhook.id,
                webhook.name,
                result.status_code,
                result.error,
            )

    def _headers(self, webhook: Webhook, event: str, signed_body: bytes) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self._user_agent,
        }
        headers.update(webhook.custom_headers)

        protected = {EVENT_HEADER: event, WEBHOOK_ID_HEADER: webhook.id}
        if self._secret:
            protected[SIGNATURE_HEADER] = sign_payload(signed_body, self._secret)

        reserved = {name.lower() for name in (EVENT_HEADER, WEBHOOK_ID_HEADER, SIGNATURE_HEADER)}
        headers = {k: v for k, v in headers.items() if k.lower() not in reserved}
        headers.update(protected)
        return headers

    async def _deliver(
        self,
        webhook: Webhook,
        event: str,
        payload: dict[str, Any],
        canonical: bytes,
    ) -> WebhookDeliveryResult:
        formatter = self._formatters[resolve_family(webhook.url)]
        shaped = formatter.format(payload)
        body = canonical if shaped is payload else canonical_json(shaped)
        headers = self._headers(webhook, event, body if self._sign_transmitted_body else canonical)

        def failure(error: str, code: str, status: int | None = None, prefix: str = "") -> WebhookDeliveryResult:
            return WebhookDeliveryResult(
                webhook_id=webhook.id,
                webhook_name=webhook.name,
                success=False,
                status_code=status,
                response_body_prefix=prefix,
                error=error,
                error_code=code,
            )

        try:
            response = await self._transport.send(
                webhook.url, str(webhook.method), headers, body, self._timeout
            )
        except TransportError as exc:
            return failure(exc.message, exc.code)
        except Exception as exc:
            logger.exception("Unexpected error delivering webhook %s", webhook.id)
            return failure(str(exc) or exc.__class__.__name__, "TRANSPORT_ERROR")

        prefix = (response.body or "")[:RESPONSE_PREFIX_CHARS]
        if 200 <= response.status_code < 300:
            return WebhookDeliveryResult(
                webhook_id=webhook.id,
                webhook_name=webhook.name,
                success=True,
                status_code=response.status_code,
                response_body_prefix=prefix,
            )

        err = DeliveryError(response.status_code, prefix)
        return failure(err.message, err.code, response.status_code, prefix)
