"""Trigger event catalogue and sample data for test deliveries."""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any

from atomic_analyzer.models.enums import DEPARTMENT_ORDER, TriggerEvent


@dataclass(frozen=True)
class TriggerInfo:
    name: str
    description: str
    data: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


TRIGGER_CATALOGUE: dict[TriggerEvent, TriggerInfo] = {
    TriggerEvent.ANALYSIS_COMPLETE: TriggerInfo(
        name="Analysis Complete",
        description="Triggered when a full atomic analysis is completed",
        data="Full analysis results including all department scores",
    ),
    TriggerEvent.CRITICAL_ISSUE_FOUND: TriggerInfo(
        name="Critical Issue Found",
        description="Triggered when a critical severity issue is detected",
        data="Issue details including department and recommendation",
    ),
    TriggerEvent.SCORE_IMPROVED: TriggerInfo(
        name="Score Improved",
        description="Triggered when overall score increases by 5+ points",
        data="Old score, new score, and change amount",
    ),
    TriggerEvent.SCORE_DECLINED: TriggerInfo(
        name="Score Declined",
        description="Triggered when overall score decreases by 5+ points",
        data="Old score, new score, and change amount",
    ),
    TriggerEvent.PDF_GENERATED: TriggerInfo(
        name="PDF Report Generated",
        description="Triggered when a PDF report is created",
        data="PDF URL and analysis summary",
    ),
    TriggerEvent.PROCESS_DOCS_CREATED: TriggerInfo(
        name="Process Documentation Created",
        description="Triggered when process documentation is auto-generated",
        data="List of created documents",
    ),
}


def event_title(event: str) -> str:
    try:
        return TRIGGER_CATALOGUE[TriggerEvent(event)].name
    except ValueError:
        return "Webhook Event"


def sample_data(event: str, site_url: str, now: datetime) -> dict[str, Any]:
    """Representative ``data`` for a test delivery of ``event``."""
    data: dict[str, Any] = {
        "test": True,
        "message": "This is a test webhook from Atomic Analyzer",
        "test_timestamp": now.strftime("%Y-%m-%d %H:%M:%S"),
    }

    if event == TriggerEvent.ANALYSIS_COMPLETE:
        scores = (80, 85, 90, 82, 88)
        data.update(
            overall_score=85,
            pmba_alignment=78,
            departments={
                dept.value: {"score": score, "issues": []}
                for dept, score in zip(DEPARTMENT_ORDER, scores)
            },
        )
    elif event == TriggerEvent.CRITICAL_ISSUE_FOUND:
        data.update(
            department="marketing",
            issue={
                "severity": "critical",
                "title": "No Email Capture Forms",
                "description": "Missing email list building capability",
                "principle": "Permission Asset",
                "action": "Add email capture form with lead magnet",
            },
        )
    elif event == TriggerEvent.SCORE_IMPROVED:
        data.update(old_score=75, new_score=82)
    elif event == TriggerEvent.SCORE_DECLINED:
        data.update(old_score=82, new_score=75)
    elif event == TriggerEvent.PDF_GENERATED:
        data.update(
            pdf_url=f"{site_url.rstrip('/')}/reports/test-report.pdf",
            analysis_summary={"overall_score": 85, "pmba_alignment": 78},
        )
    elif event == TriggerEvent.PROCESS_DOCS_CREATED:
        data.update(departments=[d.value for d in DEPARTMENT_ORDER])

    return data
