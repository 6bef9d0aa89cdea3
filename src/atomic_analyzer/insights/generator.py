"""Insight generation on top of a text-generation collaborator."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from atomic_analyzer.errors.exceptions import NotFoundError
from atomic_analyzer.insights import prompts
from atomic_analyzer.insights.client import TextGenerator
from atomic_analyzer.insights.parser import extract_list_items, parse_insights, parse_markdown_sections
from atomic_analyzer.models.analysis import AnalysisResult
from atomic_analyzer.models.enums import Department
from atomic_analyzer.models.insights import ExecutiveReport, Insights, ProcessDocumentation

logger = logging.getLogger(__name__)

QUICK_WINS_MAX_TOKENS = 500
TEST_CONNECTION_MAX_TOKENS = 100
PROCESS_DOCS_MAX_TOKENS = 3000
EXECUTIVE_REPORT_MAX_TOKENS = 2500


class InsightGenerator:
    """Builds prompts from an ``AnalysisResult`` and parses the replies.

    Errors from the collaborator (``NoApiKeyError``, ``UpstreamError``,
    ``InvalidResponseError``) propagate unchanged. The analysis result
    itself is never touched.
    """

    def __init__(
        self,
        generator: TextGenerator,
        max_tokens: int = 2000,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._generator = generator
        self._max_tokens = max_tokens
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def request_insights(self, result: AnalysisResult) -> Insights:
        text = await self._generator.generate(prompts.build_analysis_prompt(result), self._max_tokens)
        insights = parse_insights(text).model_copy(update={"generated_at": self._clock()})
        logger.info(
            "Insights generated: priorities=%d quick_wins=%d",
            len(insights.critical_priorities),
            len(insights.quick_wins),
        )
        return insights

    async def department_insights(self, department: Department, result: AnalysisResult) -> Insights:
        if department not in result.departments:
            raise NotFoundError("Department result", department.value)
        prompt = prompts.build_department_prompt(department, result)
        text = await self._generator.generate(prompt, self._max_tokens)
        return parse_insights(text).model_copy(update={"generated_at": self._clock()})

    async def quick_wins(self, result: AnalysisResult) -> list[str]:
        text = await self._generator.generate(
            prompts.build_quick_wins_prompt(result), QUICK_WINS_MAX_TOKENS
        )
        return extract_list_items(text)

    async def process_documentation(self, department: Department, result: AnalysisResult) -> ProcessDocumentation:
        """SOP markdown for one department, keyed by its ``#`` headings."""
        if department not in result.departments:
            raise NotFoundError("Department result", department.value)
        prompt = prompts.build_process_prompt(
            department, result.business_type, result.departments[department].score
        )
        text = await self._generator.generate(prompt, PROCESS_DOCS_MAX_TOKENS)
        return ProcessDocumentation(
            department=department,
            content=text,
            sections=parse_markdown_sections(text),
            generated_at=self._clock(),
        )

    async def executive_report(self, result: AnalysisResult) -> ExecutiveReport:
        text = await self._generator.generate(
            prompts.build_executive_report_prompt(result), EXECUTIVE_REPORT_MAX_TOKENS
        )
        return ExecutiveReport(content=text, generated_at=self._clock())

    async def test_connection(self) -> dict[str, Any]:
        await self._generator.generate(prompts.TEST_CONNECTION_PROMPT, TEST_CONNECTION_MAX_TOKENS)
        return {
            "success": True,
            "message": "Claude AI connected successfully!",
            "model": self._generator.model,
        }
