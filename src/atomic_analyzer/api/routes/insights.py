"""AI insight API routes. All of them work from the latest full analysis."""

from fastapi import APIRouter

from atomic_analyzer.dependencies import Analysis, DBSession, InsightGen
from atomic_analyzer.errors.exceptions import NotFoundError
from atomic_analyzer.models.analysis import AnalysisResult
from atomic_analyzer.models.enums import DEPARTMENT_ORDER, Department
from atomic_analyzer.models.requests import ProcessDocsRequest
from atomic_analyzer.services.analysis_service import AnalysisService

router = APIRouter(tags=["Insights"])


async def _latest(service: AnalysisService) -> AnalysisResult:
    result = await service.latest()
    if result is None:
        raise NotFoundError("Analysis", "latest")
    return result


@router.post("/insights")
async def generate_insights(service: Analysis, generator: InsightGen) -> dict:
    insights = await generator.request_insights(await _latest(service))
    return insights.model_dump(mode="json")


@router.post("/insights/departments/{department}")
async def generate_department_insights(department: Department, service: Analysis, generator: InsightGen) -> dict:
    insights = await generator.department_insights(department, await _latest(service))
    return insights.model_dump(mode="json")


@router.post("/insights/quick-wins")
async def generate_quick_wins(service: Analysis, generator: InsightGen) -> dict:
    return {"quick_wins": await generator.quick_wins(await _latest(service))}


@router.post("/insights/process-docs")
async def generate_process_docs(
    service: Analysis,
    generator: InsightGen,
    db: DBSession,
    body: ProcessDocsRequest | None = None,
) -> dict:
    """Generate SOPs per department, then fire ``process_docs_created``."""
    result = await _latest(service)
    requested = body.departments if body and body.departments else list(DEPARTMENT_ORDER)
    departments = [d for d in DEPARTMENT_ORDER if d in requested and d in result.departments]

    documents = {}
    for dept in departments:
        doc = await generator.process_documentation(dept, result)
        documents[dept.value] = doc.model_dump(mode="json")

    deliveries = await service.notify_process_docs(departments)
    await db.commit()
    return {
        "documents": documents,
        "deliveries": [d.model_dump(mode="json") for d in deliveries],
    }


@router.post("/insights/executive-report")
async def generate_executive_report(service: Analysis, generator: InsightGen) -> dict:
    report = await generator.executive_report(await _latest(service))
    return report.model_dump(mode="json")


@router.post("/insights/test-connection")
async def test_connection(generator: InsightGen) -> dict:
    return await generator.test_connection()
