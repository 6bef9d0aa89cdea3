"""FastAPI dependency injection providers.

Stateless collaborators (scoring engine, text generator, webhook transport)
live on ``app.state``; anything bound to a database session is built per
request.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from atomic_analyzer.config import Settings
from atomic_analyzer.events.dispatcher import WebhookDispatcher
from atomic_analyzer.events.payloads import PayloadBuilder
from atomic_analyzer.insights.generator import InsightGenerator
from atomic_analyzer.repositories.analysis_repo import AnalysisRepository
from atomic_analyzer.repositories.webhook_repo import WebhookRepository
from atomic_analyzer.scoring.engine import ScoringEngine
from atomic_analyzer.services.analysis_service import AnalysisService
from atomic_analyzer.services.webhook_service import WebhookService


async def get_db(request: Request) -> AsyncGenerator:
    """Yield a database session from the app's session factory."""
    session_factory = request.app.state.db_session_factory
    async with session_factory() as session:
        yield session


def get_trace_id(request: Request) -> str:
    """Extract trace_id from request state (set by middleware)."""
    return getattr(request.state, "trace_id", "unknown")


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_scoring_engine(request: Request) -> ScoringEngine:
    return request.app.state.scoring_engine


def get_insight_generator(request: Request) -> InsightGenerator:
    cfg = get_settings(request)
    return InsightGenerator(request.app.state.text_generator, max_tokens=cfg.insights_max_tokens)


def get_dispatcher(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> WebhookDispatcher:
    cfg = get_settings(request)
    builder = PayloadBuilder(cfg.site_url, cfg.site_name, cfg.business_type)
    return WebhookDispatcher(
        store=WebhookRepository(db),
        transport=request.app.state.webhook_transport,
        builder=builder,
        secret=cfg.webhook_secret,
        timeout=cfg.webhook_timeout,
        max_concurrency=cfg.webhook_max_concurrency,
        sign_transmitted_body=cfg.webhook_sign_transmitted_body,
        version=cfg.version,
    )


def get_analysis_service(
    request: Request,
    db: AsyncSession = Depends(get_db),
    dispatcher: WebhookDispatcher = Depends(get_dispatcher),
) -> AnalysisService:
    return AnalysisService(
        engine=get_scoring_engine(request),
        repo=AnalysisRepository(db),
        dispatcher=dispatcher,
        score_change_threshold=get_settings(request).score_change_threshold,
    )


def get_webhook_service(
    db: AsyncSession = Depends(get_db),
    dispatcher: WebhookDispatcher = Depends(get_dispatcher),
) -> WebhookService:
    return WebhookService(WebhookRepository(db), dispatcher)


# Type aliases for dependency injection
DBSession = Annotated[AsyncSession, Depends(get_db)]
TraceId = Annotated[str, Depends(get_trace_id)]
AppSettings = Annotated[Settings, Depends(get_settings)]
Analysis = Annotated[AnalysisService, Depends(get_analysis_service)]
Webhooks = Annotated[WebhookService, Depends(get_webhook_service)]
InsightGen = Annotated[InsightGenerator, Depends(get_insight_generator)]
