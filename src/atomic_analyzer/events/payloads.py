"""Canonical webhook payload construction."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from atomic_analyzer.models.enums import TriggerEvent

logger = logging.getLogger(__name__)

# (payload, event, data) -> payload
PayloadFilter = Callable[[dict[str, Any], str, dict[str, Any]], dict[str, Any]]

PROCESS_DOC_TYPES = ["sop", "process_map", "checklists", "kpis"]


def _critical_count(issues: list[dict[str, Any]] | None) -> int:
    return sum(1 for i in issues or [] if i.get("severity") == "critical")


def count_critical_issues(data: dict[str, Any]) -> int:
    departments = data.get("departments") or {}
    return sum(_critical_count(d.get("issues")) for d in departments.values())


def departments_summary(data: dict[str, Any]) -> dict[str, dict[str, int]]:
    """Score-only view of each department."""
    summary = {}
    for key, dept in (data.get("departments") or {}).items():
        issues = dept.get("issues") or []
        summary[key] = {
            "score": dept.get("score", 0),
            "issues_count": len(issues),
            "critical_issues": _critical_count(issues),
        }
    return summary


class PayloadBuilder:
    """Builds the canonical envelope for a trigger event.

    Filters registered with ``add_filter`` run in registration order after
    the event-specific fields are added and may return a modified payload.
    The result of the last filter is what gets signed.
    """

    def __init__(
        self,
        site_url: str,
        site_name: str,
        business_type: str,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.site_url = site_url
        self.site_name = site_name
        self.business_type = business_type
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._filters: list[PayloadFilter] = []

    def add_filter(self, fn: PayloadFilter) -> None:
        self._filters.append(fn)

    def build(self, event: str, data: dict[str, Any]) -> dict[str, Any]:
        now = self._clock()
        if now.tzinfo is not None:
            now = now.astimezone(timezone.utc)
        payload: dict[str, Any] = {
            "event": str(event),
            "timestamp": now.strftime("%Y-%m-%d %H:%M:%S"),
            "timestamp_unix": int(now.timestamp()),
            "site_url": self.site_url,
            "site_name": self.site_name,
            "business_type": self.business_type,
            "data": data,
        }

        if event == TriggerEvent.ANALYSIS_COMPLETE:
            payload["score"] = data.get("overall_score", 0)
            payload["pmba_alignment"] = data.get("pmba_alignment", 0)
            payload["critical_issues"] = count_critical_issues(data)
            payload["departments_summary"] = departments_summary(data)
        elif event == TriggerEvent.CRITICAL_ISSUE_FOUND:
            issue = data.get("issue") or {}
            payload["severity"] = "critical"
            payload["department"] = data.get("department", "unknown")
            payload["issue_title"] = issue.get("title", "")
            payload["issue_description"] = issue.get("description", "")
        elif event in (TriggerEvent.SCORE_IMPROVED, TriggerEvent.SCORE_DECLINED):
            old, new = data.get("old_score"), data.get("new_score")
            payload["old_score"] = old if old is not None else 0
            payload["new_score"] = new if new is not None else 0
            payload["change"] = new - old if old is not None and new is not None else 0
        elif event == TriggerEvent.PDF_GENERATED:
            payload["pdf_url"] = data.get("pdf_url", "")
            payload["report_type"] = "Full Analysis Report"
        elif event == TriggerEvent.PROCESS_DOCS_CREATED:
            payload["departments"] = data.get("departments", [])
            payload["doc_types"] = list(PROCESS_DOC_TYPES)

        for fn in self._filters:
            payload = fn(payload, str(event), data)
        return payload
