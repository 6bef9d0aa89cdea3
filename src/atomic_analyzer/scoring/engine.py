"""Scoring engine: signals in, ``AnalysisResult`` out."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timezone

from atomic_analyzer.models.analysis import AnalysisResult, DepartmentResult
from atomic_analyzer.models.enums import DEPARTMENT_ORDER, Department
from atomic_analyzer.scoring.aggregator import aggregate
from atomic_analyzer.scoring.rules import RULE_SETS, DepartmentRuleSet
from atomic_analyzer.signals.models import SiteSignals
from atomic_analyzer.signals.source import SignalSource

logger = logging.getLogger(__name__)


class ScoringEngine:
    """Evaluates department rule sets against one set of signals.

    Stateless between runs; signals are re-collected on every ``run``.
    """

    def __init__(
        self,
        rule_sets: Mapping[Department, DepartmentRuleSet] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._rule_sets = dict(rule_sets if rule_sets is not None else RULE_SETS)
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def evaluate(
        self,
        department: Department | str,
        business_type: str,
        signals: SiteSignals,
    ) -> DepartmentResult:
        """Score one department. Unknown department keys give an empty result."""
        try:
            dept = Department(department)
        except ValueError:
            logger.warning("Unknown department key %r, returning empty result", department)
            return DepartmentResult(score=0)

        rule_set = self._rule_sets.get(dept)
        if rule_set is None:
            logger.warning("No rule set registered for %s, returning empty result", dept)
            return DepartmentResult(score=0)
        return rule_set.evaluate(business_type, signals)

    def now(self) -> datetime:
        return self._clock()

    def run(self, business_type: str, source: SignalSource) -> AnalysisResult:
        signals = source.collect()
        departments = {
            dept: self.evaluate(dept, business_type, signals) for dept in DEPARTMENT_ORDER
        }
        overall, alignment, recommendations = aggregate(departments)

        logger.info(
            "Analysis complete: business_type=%s overall=%d alignment=%d critical=%d",
            business_type,
            overall,
            alignment,
            sum(len(d.critical_issues) for d in departments.values()),
        )
        return AnalysisResult(
            timestamp=self._clock(),
            business_type=business_type,
            departments=departments,
            overall_score=overall,
            pmba_alignment=alignment,
            top_recommendations=tuple(recommendations),
        )
