"""FastAPI application factory and lifespan management."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from atomic_analyzer.config import Settings, settings
from atomic_analyzer.db.engine import create_all, create_db_engine, create_session_factory
from atomic_analyzer.events.transport import HttpxWebhookTransport
from atomic_analyzer.insights.client import AnthropicTextGenerator
from atomic_analyzer.logging_config import configure_logging
from atomic_analyzer.scoring.engine import ScoringEngine

# Configure logging at import time
configure_logging(log_level=settings.log_level, json_output=not settings.local_mode)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown resources."""
    cfg: Settings = app.state.settings
    db_url = cfg.effective_database_url
    engine = create_db_engine(db_url)

    # No migrations for SQLite; create tables on startup
    if "sqlite" in db_url:
        await create_all(engine)
        logger.info("SQLite tables created (local mode)")

    app.state.db_engine = engine
    app.state.db_session_factory = create_session_factory(engine)

    logger.info("Atomic Analyzer API started (db=%s)", "sqlite" if "sqlite" in db_url else "postgresql")
    yield

    await engine.dispose()
    logger.info("Atomic Analyzer API shutdown complete")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    cfg = app_settings or settings
    app = FastAPI(
        title="Atomic Analyzer API",
        version=cfg.version,
        description="Scores a business site across five departments and notifies webhooks.",
        lifespan=lifespan,
    )

    app.state.settings = cfg
    app.state.scoring_engine = ScoringEngine()
    app.state.text_generator = AnthropicTextGenerator(
        api_key=cfg.anthropic_api_key,
        model=cfg.anthropic_model,
        api_url=cfg.anthropic_api_url,
        api_version=cfg.anthropic_version,
        timeout=cfg.insights_timeout,
    )
    app.state.webhook_transport = HttpxWebhookTransport()

    if cfg.cors_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cfg.cors_allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    from atomic_analyzer.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(TraceIdMiddleware)

    from atomic_analyzer.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    from atomic_analyzer.api.router import api_router
    app.include_router(api_router)

    return app


app = create_app()
