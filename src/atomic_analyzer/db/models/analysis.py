"""Analysis history table. Rows are append-only."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from atomic_analyzer.db.base import Base


class AnalysisRunRow(Base):
    __tablename__ = "analysis_runs"

    run_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    # "full" or a department key
    kind: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    business_type: Mapped[str] = mapped_column(String(50), nullable=False)
    analysis_data: Mapped[dict] = mapped_column(JSON, nullable=False)
    atomic_score: Mapped[int] = mapped_column(Integer, nullable=False)
    pmba_alignment: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    analyzed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
