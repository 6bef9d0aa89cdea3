"""Shared test fixtures."""

from dataclasses import dataclass
from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from atomic_analyzer.config import Settings
from atomic_analyzer.db.base import Base
# Import all models to register with Base.metadata
import atomic_analyzer.db.models  # noqa: F401
from atomic_analyzer.events.transport import TransportResponse
from atomic_analyzer.signals.models import SiteSignals

FIXED_NOW = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
TEST_SECRET = "test-secret"


def fixed_clock() -> datetime:
    return FIXED_NOW


@dataclass
class SentRequest:
    url: str
    method: str
    headers: dict[str, str]
    body: bytes
    timeout: float


class RecordingTransport:
    """Webhook transport fake. Map a URL to a response or an exception to raise."""

    def __init__(self) -> None:
        self.calls: list[SentRequest] = []
        self.responses: dict[str, TransportResponse | Exception] = {}

    async def send(self, url, method, headers, body, timeout) -> TransportResponse:
        self.calls.append(SentRequest(url, method, dict(headers), body, timeout))
        outcome = self.responses.get(url, TransportResponse(status_code=200, body="ok"))
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def urls(self) -> list[str]:
        return [c.url for c in self.calls]


class ScriptedGenerator:
    """Text generator fake returning a fixed reply and recording prompts."""

    model = "test-model"

    def __init__(self, reply: str = "") -> None:
        self.reply = reply
        self.prompts: list[tuple[str, int]] = []

    async def generate(self, prompt: str, max_tokens: int) -> str:
        self.prompts.append((prompt, max_tokens))
        return self.reply


@pytest.fixture
def healthy_signals() -> SiteSignals:
    """Signals that pass every check."""
    return SiteSignals(
        has_clear_value_proposition=True,
        economic_values_count=5,
        days_since_last_update=3,
        has_testing_evidence=True,
        seo_score=90,
        posts_last_30_days=4,
        has_email_capture=True,
        social_proof_score=80,
        trust_score=90,
        has_clear_pricing=True,
        cta_score=80,
        has_risk_reversal=True,
        purchase_barriers_score=90,
        has_systems_documentation=True,
        customer_communication_score=85,
        scalability_score=80,
        value_stream_score=80,
        payment_score=90,
        revenue_streams=3,
        pricing_optimization_score=80,
        financial_leverage_score=70,
    )


@pytest.fixture
def empty_signals() -> SiteSignals:
    """Signals of a bare site: most checks fail."""
    return SiteSignals()


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def text_generator() -> ScriptedGenerator:
    return ScriptedGenerator()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        site_url="https://shop.example.com",
        site_name="Example Shop",
        business_type="ecommerce",
        webhook_secret=TEST_SECRET,
        anthropic_api_key="",
    )


@pytest.fixture
async def db_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    """Create a test database session."""
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(db_engine, test_settings, transport, text_generator):
    """Create a test application instance with in-memory DB and fake collaborators."""
    from atomic_analyzer.main import create_app

    _app = create_app(test_settings)
    _app.state.db_engine = db_engine
    _app.state.db_session_factory = async_sessionmaker(
        db_engine, class_=AsyncSession, expire_on_commit=False
    )
    _app.state.webhook_transport = transport
    _app.state.text_generator = text_generator
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
