"""Master API router mounted at /api/v1."""

from fastapi import APIRouter

from atomic_analyzer.api.routes import analysis, health, insights, webhooks

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(analysis.router)
api_router.include_router(insights.router)
api_router.include_router(webhooks.router)
