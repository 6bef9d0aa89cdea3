"""Formatter protocol and shared helpers."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, Protocol

from atomic_analyzer.models.enums import DestinationFamily

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def score_color(score: Any) -> str:
    """Hex colour (no ``#``) for a 0-100 score."""
    try:
        value = float(score)
    except (TypeError, ValueError):
        value = 0.0
    if value >= 80:
        return "2ecc71"
    if value >= 60:
        return "f39c12"
    return "e74c3c"


class PayloadFormatter(Protocol):
    family: DestinationFamily

    def format(self, payload: dict[str, Any]) -> dict[str, Any]: ...


class PassthroughFormatter:
    """Sends the canonical payload unchanged."""

    family = DestinationFamily.GENERIC

    def format(self, payload: dict[str, Any]) -> dict[str, Any]:
        return payload
