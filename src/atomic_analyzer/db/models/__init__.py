"""SQLAlchemy ORM models - import all to register with Base.metadata."""

from atomic_analyzer.db.models.analysis import AnalysisRunRow
from atomic_analyzer.db.models.webhook import WebhookRow

__all__ = ["AnalysisRunRow", "WebhookRow"]
