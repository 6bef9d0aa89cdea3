"""Building blocks for department rule sets.

A department is an ordered tuple of ``Check`` objects plus a tuple of
``OpportunityRule`` objects. Each check turns signals into a principle score
and, when it fails, an issue with a fixed penalty.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from atomic_analyzer.models.analysis import DepartmentResult, Issue, Opportunity
from atomic_analyzer.models.enums import Department, Level, Severity
from atomic_analyzer.signals.models import SiteSignals

Measure = Callable[[SiteSignals], int]
Predicate = Callable[[SiteSignals], bool]


# --- principle score formulas ---

def flag(signal: str, passed: int, failed: int) -> Measure:
    """Boolean signal mapped to a fixed pair of scores."""
    return lambda s: passed if getattr(s, signal) else failed


def scaled(signal: str, per_unit: int) -> Measure:
    """Count signal multiplied by ``per_unit`` and capped at 100."""
    return lambda s: min(getattr(s, signal) * per_unit, 100)


def decay(signal: str, rate: int) -> Measure:
    """Elapsed days subtracted from 100 at ``rate`` points per day."""
    return lambda s: max(0, 100 - getattr(s, signal) * rate)


def raw(signal: str) -> Measure:
    """A 0-100 sub-score used as is."""
    return lambda s: getattr(s, signal)


# --- failure conditions ---

def is_false(signal: str) -> Predicate:
    return lambda s: not getattr(s, signal)


def below(signal: str, threshold: int) -> Predicate:
    return lambda s: getattr(s, signal) < threshold


def above(signal: str, threshold: int) -> Predicate:
    return lambda s: getattr(s, signal) > threshold


@dataclass(frozen=True)
class Check:
    """One scored principle.

    ``description`` may reference signal names as ``str.format`` fields.
    """

    principle: str
    measure: Measure
    fails: Predicate
    severity: Severity
    penalty: int
    title: str
    description: str
    guidance: str
    action: str

    def issue(self, signals: SiteSignals) -> Issue:
        return Issue(
            severity=self.severity,
            principle=self.principle,
            title=self.title,
            description=self.description.format(**signals.model_dump()),
            guidance=self.guidance,
            action=self.action,
        )


@dataclass(frozen=True)
class OpportunityRule:
    """A static opportunity, optionally limited to some business types."""

    title: str
    description: str
    impact: Level
    effort: Level
    business_types: frozenset[str] = frozenset()

    def applies_to(self, business_type: str) -> bool:
        return not self.business_types or business_type in self.business_types

    def to_opportunity(self) -> Opportunity:
        return Opportunity(
            title=self.title,
            description=self.description,
            impact=self.impact,
            effort=self.effort,
        )


@dataclass(frozen=True)
class DepartmentRuleSet:
    department: Department
    checks: tuple[Check, ...]
    opportunities: tuple[OpportunityRule, ...] = ()

    @property
    def principles(self) -> list[str]:
        return [c.principle for c in self.checks]

    def evaluate(self, business_type: str, signals: SiteSignals) -> DepartmentResult:
        """Score the department. Same inputs always give the same result."""
        principle_scores: dict[str, int] = {}
        issues: list[Issue] = []
        penalties = 0

        for check in self.checks:
            principle_scores[check.principle] = check.measure(signals)
            if check.fails(signals):
                issues.append(check.issue(signals))
                penalties += check.penalty

        return DepartmentResult(
            score=max(0, 100 - penalties),
            issues=tuple(issues),
            opportunities=tuple(
                o.to_opportunity() for o in self.opportunities if o.applies_to(business_type)
            ),
            principle_scores=principle_scores,
        )
