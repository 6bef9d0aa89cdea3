"""Combine department results into composite scores and recommendations."""

from __future__ import annotations

import math
from collections.abc import Mapping
from fractions import Fraction

from atomic_analyzer.models.analysis import DepartmentResult, Recommendation
from atomic_analyzer.models.enums import DEPARTMENT_ORDER, Department, Severity

MAX_RECOMMENDATIONS = 5


def round_half_up(value: Fraction) -> int:
    """Round a non-negative rational to the nearest integer, 0.5 going up."""
    return math.floor(value + Fraction(1, 2))


def overall_score(departments: Mapping[Department, DepartmentResult]) -> int:
    if not departments:
        return 0
    total = sum(d.score for d in departments.values())
    return round_half_up(Fraction(total, len(departments)))


def alignment_score(departments: Mapping[Department, DepartmentResult]) -> int:
    """Unweighted mean of every principle score across departments."""
    scores = [s for d in departments.values() for s in d.principle_scores.values()]
    if not scores:
        return 0
    return round_half_up(Fraction(sum(scores), len(scores)))


def _ordered(departments: Mapping[Department, DepartmentResult]) -> list[tuple[Department, DepartmentResult]]:
    return [(dept, departments[dept]) for dept in DEPARTMENT_ORDER if dept in departments]


def top_recommendations(
    departments: Mapping[Department, DepartmentResult],
    limit: int = MAX_RECOMMENDATIONS,
) -> list[Recommendation]:
    """Critical issues first, then high issues while the list is short.

    Departments are walked in the fixed department order and issues in the
    order their checks ran. The final sort is stable on priority alone.
    """
    ordered = _ordered(departments)
    recs: list[Recommendation] = []

    for dept, result in ordered:
        for issue in result.issues:
            if issue.severity == Severity.CRITICAL:
                recs.append(_recommendation(dept, issue.title, issue.action, priority=1))

    if len(recs) < limit:
        for dept, result in ordered:
            for issue in result.issues:
                if issue.severity == Severity.HIGH and len(recs) < limit:
                    recs.append(_recommendation(dept, issue.title, issue.action, priority=2))

    recs.sort(key=lambda r: r.priority)
    return recs[:limit]


def _recommendation(dept: Department, title: str, action: str, priority: int) -> Recommendation:
    return Recommendation(title=title, description=action, department=dept.label, priority=priority)


def aggregate(
    departments: Mapping[Department, DepartmentResult],
) -> tuple[int, int, list[Recommendation]]:
    """Return ``(overall_score, alignment, top_recommendations)``."""
    return overall_score(departments), alignment_score(departments), top_recommendations(departments)
