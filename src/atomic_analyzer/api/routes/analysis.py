"""Analysis API routes."""

from fastapi import APIRouter

from atomic_analyzer.dependencies import Analysis, AppSettings, DBSession
from atomic_analyzer.errors.exceptions import NotFoundError, ValidationError
from atomic_analyzer.models.enums import Department
from atomic_analyzer.models.requests import AnalysisRequest
from atomic_analyzer.repositories.analysis_repo import FULL, AnalysisRepository
from atomic_analyzer.scoring.framework import alignment_message, framework_catalogue
from atomic_analyzer.signals.models import SiteSnapshot
from atomic_analyzer.signals.source import (
    SignalSource,
    SnapshotSignalSource,
    StaticSignalSource,
    detect_business_type,
)

router = APIRouter(tags=["Analysis"])


def _resolve(body: AnalysisRequest, default_business_type: str) -> tuple[str, SignalSource]:
    if body.signals is not None:
        source: SignalSource = StaticSignalSource(body.signals)
    elif body.snapshot is not None:
        source = SnapshotSignalSource(body.snapshot)
    else:
        raise ValidationError("Either signals or snapshot is required")

    if body.business_type is not None:
        business_type = str(body.business_type)
    elif body.snapshot is not None:
        business_type = str(detect_business_type(body.snapshot))
    else:
        business_type = default_business_type
    return business_type, source


@router.post("/analysis/run", status_code=201)
async def run_analysis(body: AnalysisRequest, service: Analysis, db: DBSession, cfg: AppSettings) -> dict:
    business_type, source = _resolve(body, cfg.business_type)
    run = await service.run_full_analysis(business_type, source)
    await db.commit()
    return {
        "run_id": run.run_id,
        "result": run.result.model_dump(mode="json"),
        "alignment_message": alignment_message(run.result.pmba_alignment),
        "deliveries": [d.model_dump(mode="json") for d in run.deliveries],
    }


@router.post("/analysis/departments/{department}")
async def run_department_analysis(
    department: str,
    body: AnalysisRequest,
    service: Analysis,
    db: DBSession,
    cfg: AppSettings,
) -> dict:
    business_type, source = _resolve(body, cfg.business_type)
    result = await service.run_department_analysis(department, business_type, source)
    await db.commit()
    return result.model_dump(mode="json")


@router.get("/analysis/latest")
async def get_latest_analysis(service: Analysis) -> dict:
    result = await service.latest()
    if result is None:
        raise NotFoundError("Analysis", "latest")
    data = result.model_dump(mode="json")
    data["alignment_message"] = alignment_message(result.pmba_alignment)
    return data


@router.get("/analysis/departments/{department}/latest")
async def get_latest_department_analysis(department: Department, db: DBSession) -> dict:
    result = await AnalysisRepository(db).get_latest_department(department)
    if result is None:
        raise NotFoundError("Department analysis", department.value)
    return result.model_dump(mode="json")


@router.get("/analysis/history")
async def list_analysis_history(db: DBSession, kind: str = FULL, limit: int = 20) -> list[dict]:
    rows = await AnalysisRepository(db).list_history(kind, min(max(limit, 1), 100))
    return [
        {
            "run_id": r.run_id,
            "kind": r.kind,
            "business_type": r.business_type,
            "atomic_score": r.atomic_score,
            "pmba_alignment": r.pmba_alignment,
            "analyzed_at": r.analyzed_at.isoformat() if r.analyzed_at else None,
        }
        for r in rows
    ]


@router.post("/analysis/detect-business-type")
async def detect_type(snapshot: SiteSnapshot) -> dict:
    return {"business_type": detect_business_type(snapshot).value}


@router.get("/framework")
async def get_framework() -> dict:
    return framework_catalogue()
