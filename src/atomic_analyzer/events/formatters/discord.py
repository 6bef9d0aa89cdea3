"""Discord webhook body: ``{content, embeds}``."""

from __future__ import annotations

from typing import Any

from atomic_analyzer.events.formatters.base import Clock, score_color, utcnow
from atomic_analyzer.events.triggers import event_title
from atomic_analyzer.models.enums import DestinationFamily, TriggerEvent

_CONTENT: dict[str, str] = {
    TriggerEvent.ANALYSIS_COMPLETE: "⚛️ **Atomic Analysis Complete!**",
    TriggerEvent.CRITICAL_ISSUE_FOUND: "🚨 **Critical Issue Found!**",
    TriggerEvent.SCORE_IMPROVED: "📈 **Business Score Improved!**",
    TriggerEvent.SCORE_DECLINED: "📉 **Business Score Declined!**",
    TriggerEvent.PDF_GENERATED: "📄 **PDF Report Generated!**",
    TriggerEvent.PROCESS_DOCS_CREATED: "📋 **Process Documentation Created!**",
}


class DiscordFormatter:
    family = DestinationFamily.DISCORD

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or utcnow

    def format(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {"content": self.content(payload), "embeds": self.embeds(payload)}

    def content(self, payload: dict[str, Any]) -> str:
        return _CONTENT.get(payload.get("event", ""), "**Atomic Analyzer Event**")

    def embeds(self, payload: dict[str, Any]) -> list[dict[str, Any]]:
        event = payload.get("event", "")
        embed: dict[str, Any] = {
            "title": event_title(event),
            "color": int(score_color(payload.get("score", 0)), 16),
            "timestamp": self._clock().isoformat(timespec="seconds"),
            "footer": {"text": "Atomic Analyzer by Commerce Copilot"},
            "fields": [],
        }

        if event == TriggerEvent.ANALYSIS_COMPLETE:
            embed["description"] = (
                f"Overall Score: **{payload.get('score')}/100**\n"
                f"PMBA Alignment: **{payload.get('pmba_alignment')}/100**"
            )
            departments = (payload.get("data") or {}).get("departments")
            if isinstance(departments, dict):
                embed["fields"] = [
                    {"name": key.capitalize(), "value": f"{dept.get('score', 0)}/100", "inline": True}
                    for key, dept in departments.items()
                ]

        if embed["fields"] or embed.get("description"):
            return [embed]
        return []
