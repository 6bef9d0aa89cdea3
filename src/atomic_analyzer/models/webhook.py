"""Pydantic models for webhook configuration and delivery outcomes."""

from datetime import datetime
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

from atomic_analyzer.models.enums import HttpMethod, TriggerEvent


def is_absolute_url(value: str) -> bool:
    """True when ``value`` is an absolute http(s) URL with a host."""
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.hostname)


class Webhook(BaseModel):
    """A user-managed webhook destination."""

    model_config = ConfigDict(extra="forbid")

    id: str
    name: str = Field(..., min_length=1, max_length=100)
    url: str = Field(..., max_length=500)
    trigger_event: TriggerEvent
    method: HttpMethod = HttpMethod.POST
    custom_headers: dict[str, str] = Field(default_factory=dict)
    is_active: bool = True
    created_at: datetime | None = None
    last_triggered_at: datetime | None = None

    @field_validator("url")
    @classmethod
    def _url_is_absolute(cls, value: str) -> str:
        value = value.strip()
        if not is_absolute_url(value):
            raise ValueError("Invalid webhook URL")
        return value


class WebhookDeliveryResult(BaseModel):
    """Outcome of one send attempt. Never persisted."""

    model_config = ConfigDict(extra="forbid")

    webhook_id: str
    webhook_name: str
    success: bool
    status_code: int | None = None
    response_body_prefix: str = ""
    error: str | None = None
    error_code: str | None = None
