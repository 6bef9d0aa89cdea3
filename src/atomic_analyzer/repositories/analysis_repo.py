"""Analysis history repository. Insert and read only."""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from atomic_analyzer.db.models.analysis import AnalysisRunRow
from atomic_analyzer.models.analysis import AnalysisResult, DepartmentResult
from atomic_analyzer.models.enums import Department
from atomic_analyzer.repositories.base import BaseRepository
from atomic_analyzer.services.id_generator import generate_id

FULL = "full"


class AnalysisRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, AnalysisRunRow)

    async def insert(self, result: AnalysisResult, run_id: str | None = None) -> str:
        run_id = run_id or generate_id("run_")
        await self.create(
            run_id=run_id,
            kind=FULL,
            business_type=result.business_type,
            analysis_data=result.model_dump(mode="json"),
            atomic_score=result.overall_score,
            pmba_alignment=result.pmba_alignment,
            analyzed_at=result.timestamp,
        )
        return run_id

    async def insert_department_run(
        self,
        department: Department,
        business_type: str,
        result: DepartmentResult,
        analyzed_at: datetime,
    ) -> str:
        run_id = generate_id("run_")
        await self.create(
            run_id=run_id,
            kind=department.value,
            business_type=business_type,
            analysis_data=result.model_dump(mode="json"),
            atomic_score=result.score,
            pmba_alignment=0,
            analyzed_at=analyzed_at,
        )
        return run_id

    async def get_latest_row(self, kind: str = FULL) -> AnalysisRunRow | None:
        stmt = (
            select(AnalysisRunRow)
            .where(AnalysisRunRow.kind == kind)
            .order_by(AnalysisRunRow.analyzed_at.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_latest(self) -> AnalysisResult | None:
        """Most recent full analysis, or None if none has been run."""
        row = await self.get_latest_row(FULL)
        if row is None:
            return None
        return AnalysisResult.model_validate(row.analysis_data)

    async def get_latest_department(self, department: Department) -> DepartmentResult | None:
        row = await self.get_latest_row(department.value)
        if row is None:
            return None
        return DepartmentResult.model_validate(row.analysis_data)

    async def list_history(self, kind: str = FULL, limit: int = 20) -> list[AnalysisRunRow]:
        stmt = (
            select(AnalysisRunRow)
            .where(AnalysisRunRow.kind == kind)
            .order_by(AnalysisRunRow.analyzed_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
