"""Slack incoming-webhook body: ``{text, attachments}``."""

from __future__ import annotations

from typing import Any

from atomic_analyzer.events.formatters.base import Clock, score_color, utcnow
from atomic_analyzer.models.enums import DestinationFamily, TriggerEvent


class SlackFormatter:
    family = DestinationFamily.SLACK

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or utcnow

    def format(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {"text": self.message(payload), "attachments": self.attachments(payload)}

    def message(self, payload: dict[str, Any]) -> str:
        event = payload.get("event", "")
        data = payload.get("data") or {}

        if event == TriggerEvent.ANALYSIS_COMPLETE:
            score = payload.get("score", "N/A")
            return f"🎉 Atomic Analysis Complete! Overall Score: *{score}/100*"
        if event == TriggerEvent.CRITICAL_ISSUE_FOUND:
            return f"🚨 Critical Issue Found in {data.get('department', 'unknown')} department!"
        if event == TriggerEvent.SCORE_IMPROVED:
            change = abs(payload.get("change", 0))
            return f"📈 Score Improved! New score: *{payload.get('new_score')}/100* (+{change} points)"
        if event == TriggerEvent.SCORE_DECLINED:
            return (
                f"📉 Score Declined! New score: *{payload.get('new_score')}/100* "
                f"({payload.get('change', 0)} points)"
            )
        if event == TriggerEvent.PDF_GENERATED:
            return "📄 New PDF Report Generated!"
        if event == TriggerEvent.PROCESS_DOCS_CREATED:
            return "📋 Process Documentation Created!"
        return f"Atomic Analyzer Event: {event}"

    def attachments(self, payload: dict[str, Any]) -> list[dict[str, Any]]:
        departments = (payload.get("data") or {}).get("departments")
        if payload.get("event") != TriggerEvent.ANALYSIS_COMPLETE or not isinstance(departments, dict):
            return []

        fields = [
            {"title": key.capitalize(), "value": f"{dept.get('score', 0)}/100", "short": True}
            for key, dept in departments.items()
        ]
        return [
            {
                "color": score_color(payload.get("score")),
                "fields": fields,
                "footer": "Atomic Analyzer",
                "ts": int(self._clock().timestamp()),
            }
        ]
