"""Pydantic models for text-generation output."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from atomic_analyzer.models.enums import Department


class Insights(BaseModel):
    """Typed sections parsed out of a free-form insight response.

    Any section missing from the response is left empty. ``raw_response``
    keeps the unparsed text for diagnostics.
    """

    model_config = ConfigDict(extra="forbid")

    executive_summary: str = ""
    critical_priorities: list[str] = Field(default_factory=list)
    quick_wins: list[str] = Field(default_factory=list)
    strategic_moves: list[str] = Field(default_factory=list)
    wisdom: str = ""
    roadmap: str = ""
    raw_response: str = ""
    generated_at: datetime | None = None


class ProcessDocumentation(BaseModel):
    """Generated SOP markdown for one department, split on its headings."""

    model_config = ConfigDict(extra="forbid")

    department: Department
    content: str = ""
    sections: dict[str, str] = Field(default_factory=dict)
    generated_at: datetime | None = None


class ExecutiveReport(BaseModel):
    model_config = ConfigDict(extra="forbid")

    content: str = ""
    generated_at: datetime | None = None
