"""Destination templates and the generated integration guide."""

import json
from typing import Any

from atomic_analyzer.events.dispatcher import EVENT_HEADER, SIGNATURE_HEADER, WEBHOOK_ID_HEADER
from atomic_analyzer.events.triggers import TRIGGER_CATALOGUE

WEBHOOK_TEMPLATES: dict[str, dict[str, Any]] = {
    "zapier": {
        "name": "Zapier",
        "description": "Connect to 5,000+ apps through Zapier",
        "url_format": "https://hooks.zapier.com/hooks/catch/{YOUR_ZAPIER_ID}/",
        "method": "POST",
        "headers": {},
        "instructions": [
            "Create a Zap in Zapier",
            'Choose "Webhooks by Zapier" as trigger',
            'Select "Catch Hook" as trigger event',
            "Copy the webhook URL provided",
            "Paste it here and save",
        ],
    },
    "make": {
        "name": "Make (Integromat)",
        "description": "Create powerful automations with Make",
        "url_format": "https://hook.{region}.make.com/{YOUR_HOOK_ID}",
        "method": "POST",
        "headers": {},
        "instructions": [
            "Create scenario in Make",
            'Add "Webhooks" module as trigger',
            'Select "Custom webhook"',
            "Copy the webhook URL",
            "Paste it here and save",
        ],
    },
    "slack": {
        "name": "Slack",
        "description": "Send notifications to Slack channels",
        "url_format": "https://hooks.slack.com/services/YOUR/SLACK/WEBHOOK",
        "method": "POST",
        "headers": {"Content-Type": "application/json"},
        "instructions": [
            "Go to Slack App Directory",
            'Search for "Incoming Webhooks"',
            "Add to Slack and choose channel",
            "Copy webhook URL",
            "Paste it here and save",
        ],
    },
    "discord": {
        "name": "Discord",
        "description": "Post updates to Discord channels",
        "url_format": "https://discord.com/api/webhooks/{id}/{token}",
        "method": "POST",
        "headers": {"Content-Type": "application/json"},
        "instructions": [
            "Edit Discord channel settings",
            "Go to Integrations → Webhooks",
            "Create New Webhook",
            "Copy webhook URL",
            "Paste it here and save",
        ],
    },
    "ifttt": {
        "name": "IFTTT",
        "description": "If This Then That automation",
        "url_format": "https://maker.ifttt.com/trigger/{event}/with/key/{YOUR_KEY}",
        "method": "POST",
        "headers": {"Content-Type": "application/json"},
        "instructions": [
            "Create IFTTT account",
            "Create new Applet",
            'Choose "Webhooks" for IF',
            "Get your Maker key",
            "Build URL and paste here",
        ],
    },
    "custom": {
        "name": "Custom Webhook",
        "description": "Connect to any custom endpoint",
        "url_format": "https://your-domain.com/webhook/endpoint",
        "method": "POST",
        "headers": {},
        "instructions": [
            "Enter your webhook URL",
            "Choose HTTP method",
            "Add any custom headers needed",
            "Test the webhook",
            "Save when working",
        ],
    },
}


def _example_payload(site_url: str) -> dict[str, Any]:
    return {
        "event": "analysis_complete",
        "timestamp": "2024-01-15 10:30:00",
        "timestamp_unix": 1705314600,
        "site_url": site_url,
        "site_name": "Your Business Name",
        "business_type": "ecommerce",
        "data": {
            "overall_score": 85,
            "pmba_alignment": 78,
            "departments": {
                "development": {"score": 80},
                "marketing": {"score": 85},
                "sales": {"score": 90},
                "delivery": {"score": 82},
                "accounting": {"score": 88},
            },
        },
        "score": 85,
        "pmba_alignment": 78,
        "critical_issues": 0,
    }


def generate_documentation(version: str, site_url: str, secret_configured: bool) -> str:
    """Markdown guide for integrators receiving our webhooks."""
    lines = [
        "# Atomic Analyzer Webhook Documentation",
        "",
        "## Overview",
        "",
        "Atomic Analyzer can send webhooks to external services when key events occur "
        "in your business analysis.",
        "",
        "## Authentication",
        "",
        f"When a webhook secret is configured every request carries an `{SIGNATURE_HEADER}` header:",
        "",
        "```",
        "signature = hex(HMAC-SHA256(secret_key, canonical_payload_json))",
        "```",
        "",
        "The signature covers the canonical JSON payload shown below. Slack and Discord "
        "destinations receive a reshaped message body, so verify against the canonical "
        "payload rather than the body those services display.",
        "",
        "Webhook secret: " + ("configured" if secret_configured else "**not configured** (requests are unsigned)"),
        "",
        "## Webhook Headers",
        "",
        "All webhooks include these headers:",
        "- `Content-Type: application/json`",
        f"- `User-Agent: Atomic-Analyzer/{version}`",
        f"- `{EVENT_HEADER}: {{event_name}}`",
        f"- `{WEBHOOK_ID_HEADER}: {{webhook_id}}`",
        f"- `{SIGNATURE_HEADER}: {{hmac_signature}}`",
        "",
        "Custom headers configured on a webhook are added too, but never replace the "
        "event, id or signature headers.",
        "",
        "## Webhook Payload Structure",
        "",
        "```json",
        json.dumps(_example_payload(site_url), indent=4),
        "```",
        "",
        "`timestamp` is UTC in `YYYY-MM-DD HH:MM:SS` form; `timestamp_unix` is the same "
        "instant as epoch seconds.",
        "",
        "## Available Events",
        "",
    ]

    for event, info in TRIGGER_CATALOGUE.items():
        lines += [
            f"### {info.name}",
            f"**Event:** `{event.value}`",
            "",
            info.description,
            "",
            f"**Data included:** {info.data}",
            "",
        ]

    lines += [
        "## Webhook Verification Example",
        "",
        "### Python",
        "```python",
        "import hashlib",
        "import hmac",
        "",
        "def verify(raw_body: bytes, signature: str, secret: str) -> bool:",
        "    expected = hmac.new(secret.encode(), raw_body, hashlib.sha256).hexdigest()",
        "    return hmac.compare_digest(expected, signature)",
        "```",
        "",
        "### Node.js",
        "```javascript",
        "const crypto = require('crypto');",
        "",
        "function verify(rawBody, signature, secret) {",
        "  const expected = crypto.createHmac('sha256', secret).update(rawBody).digest('hex');",
        "  return crypto.timingSafeEqual(Buffer.from(expected), Buffer.from(signature));",
        "}",
        "```",
        "",
        "## Troubleshooting",
        "",
        "1. **Webhook not firing**",
        "   - Check if webhook is active",
        "   - Verify trigger event is occurring",
        "   - Check the service logs for delivery failures",
        "",
        "2. **401 Unauthorized**",
        "   - Verify signature calculation",
        "   - Check secret key matches",
        "   - Ensure raw payload is used",
        "",
        "3. **Timeout errors**",
        "   - Webhook endpoint must respond within 30 seconds",
        "   - Return 200 immediately, process later",
        "",
        "---",
        "",
        f"*Generated by Atomic Analyzer v{version}*",
    ]
    return "\n".join(lines)
