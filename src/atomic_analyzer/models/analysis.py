"""Pydantic models for analysis results.

All result models are frozen: a department result or analysis result is
never mutated after it is computed. A new run produces a new record.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from atomic_analyzer.models.enums import Department, Level, Severity


class Issue(BaseModel):
    """A failed check inside one department."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    severity: Severity
    principle: str
    title: str
    description: str
    guidance: str
    action: str


class Opportunity(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str
    description: str
    impact: Level
    effort: Level


class DepartmentResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    score: int = Field(..., ge=0, le=100)
    issues: tuple[Issue, ...] = ()
    opportunities: tuple[Opportunity, ...] = ()
    principle_scores: dict[str, int] = Field(default_factory=dict)

    @property
    def critical_issues(self) -> list[Issue]:
        return [i for i in self.issues if i.severity == Severity.CRITICAL]


class Recommendation(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str
    description: str
    department: str
    priority: int = Field(..., ge=1, le=2)


class AnalysisResult(BaseModel):
    """The single artifact produced by a full analysis run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    timestamp: datetime
    business_type: str
    departments: dict[Department, DepartmentResult]
    overall_score: int = Field(..., ge=0, le=100)
    pmba_alignment: int = Field(..., ge=0, le=100)
    top_recommendations: tuple[Recommendation, ...] = Field(default=(), max_length=5)

    @property
    def critical_issue_count(self) -> int:
        return sum(len(d.critical_issues) for d in self.departments.values())
