"""Analysis orchestration: score, persist, notify."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from atomic_analyzer.events.dispatcher import WebhookDispatcher
from atomic_analyzer.logging_config import bind_analysis_context, clear_analysis_context
from atomic_analyzer.models.analysis import AnalysisResult, DepartmentResult
from atomic_analyzer.models.enums import DEPARTMENT_ORDER, Department, TriggerEvent
from atomic_analyzer.models.webhook import WebhookDeliveryResult
from atomic_analyzer.repositories.analysis_repo import AnalysisRepository
from atomic_analyzer.scoring.engine import ScoringEngine
from atomic_analyzer.services.id_generator import generate_id
from atomic_analyzer.signals.source import SignalSource

logger = logging.getLogger(__name__)


@dataclass
class AnalysisRun:
    run_id: str
    result: AnalysisResult
    deliveries: list[WebhookDeliveryResult] = field(default_factory=list)


class AnalysisService:
    """Wires the scoring engine, history repository and webhook dispatcher.

    The dispatcher is optional; without one no events are fired. Webhook
    failures never affect the stored analysis.
    """

    def __init__(
        self,
        engine: ScoringEngine,
        repo: AnalysisRepository,
        dispatcher: WebhookDispatcher | None = None,
        score_change_threshold: int = 5,
    ) -> None:
        self._engine = engine
        self._repo = repo
        self._dispatcher = dispatcher
        self._threshold = score_change_threshold

    async def run_full_analysis(self, business_type: str, source: SignalSource) -> AnalysisRun:
        run_id = generate_id("run_")
        bind_analysis_context(run_id, business_type)
        try:
            previous = await self._repo.get_latest()
            result = self._engine.run(business_type, source)
            await self._repo.insert(result, run_id=run_id)
            deliveries = await self._notify(result, previous)
        finally:
            clear_analysis_context()
        return AnalysisRun(run_id=run_id, result=result, deliveries=deliveries)

    async def run_department_analysis(
        self,
        department: str,
        business_type: str,
        source: SignalSource,
    ) -> DepartmentResult:
        """Score one department. Unknown keys give an empty, unsaved result."""
        result = self._engine.evaluate(department, business_type, source.collect())
        if department in set(Department):
            await self._repo.insert_department_run(
                Department(department), business_type, result, self._engine.now()
            )
        return result

    async def latest(self) -> AnalysisResult | None:
        return await self._repo.get_latest()

    async def notify_process_docs(self, departments: list[Department]) -> list[WebhookDeliveryResult]:
        if self._dispatcher is None:
            return []
        return await self._dispatcher.trigger(
            TriggerEvent.PROCESS_DOCS_CREATED, {"departments": [d.value for d in departments]}
        )

    async def _notify(
        self,
        result: AnalysisResult,
        previous: AnalysisResult | None,
    ) -> list[WebhookDeliveryResult]:
        if self._dispatcher is None:
            return []

        deliveries = await self._dispatcher.trigger(
            TriggerEvent.ANALYSIS_COMPLETE, result.model_dump(mode="json")
        )

        for dept in DEPARTMENT_ORDER:
            dept_result = result.departments.get(dept)
            if dept_result is None:
                continue
            for issue in dept_result.critical_issues:
                deliveries += await self._dispatcher.trigger(
                    TriggerEvent.CRITICAL_ISSUE_FOUND,
                    {"department": dept.value, "issue": issue.model_dump(mode="json")},
                )

        if previous is not None:
            change = result.overall_score - previous.overall_score
            if abs(change) >= self._threshold:
                event = TriggerEvent.SCORE_IMPROVED if change > 0 else TriggerEvent.SCORE_DECLINED
                logger.info("Overall score moved %+d points, firing %s", change, event)
                deliveries += await self._dispatcher.trigger(
                    event,
                    {"old_score": previous.overall_score, "new_score": result.overall_score},
                )

        return deliveries
