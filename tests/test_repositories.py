"""Tests for the analysis history and webhook repositories."""

from datetime import timedelta

from atomic_analyzer.models.enums import Department, HttpMethod, TriggerEvent
from atomic_analyzer.models.webhook import Webhook
from atomic_analyzer.repositories.analysis_repo import AnalysisRepository
from atomic_analyzer.repositories.webhook_repo import WebhookRepository
from atomic_analyzer.scoring.engine import ScoringEngine
from atomic_analyzer.signals.source import StaticSignalSource

from conftest import FIXED_NOW, fixed_clock


async def test_latest_analysis_is_none_before_any_run(db_session):
    assert await AnalysisRepository(db_session).get_latest() is None


async def test_insert_and_read_back_latest(db_session, empty_signals, healthy_signals):
    repo = AnalysisRepository(db_session)
    older = ScoringEngine(clock=lambda: FIXED_NOW - timedelta(days=1)).run("other", StaticSignalSource(empty_signals))
    newer = ScoringEngine(clock=fixed_clock).run("other", StaticSignalSource(healthy_signals))

    await repo.insert(newer, run_id="run_new")
    await repo.insert(older, run_id="run_old")
    await db_session.commit()

    latest = await repo.get_latest()
    assert latest.overall_score == 100
    assert latest.departments[Department.SALES].score == 100
    assert latest.timestamp == newer.timestamp

    history = await repo.list_history()
    assert [r.run_id for r in history] == ["run_new", "run_old"]


async def test_department_runs_kept_apart_from_full_runs(db_session, empty_signals):
    repo = AnalysisRepository(db_session)
    result = ScoringEngine().evaluate(Department.MARKETING, "other", empty_signals)

    run_id = await repo.insert_department_run(Department.MARKETING, "other", result, FIXED_NOW)
    await db_session.commit()

    assert run_id.startswith("run_")
    assert await repo.get_latest() is None
    stored = await repo.get_latest_department(Department.MARKETING)
    assert stored == result
    assert await repo.get_latest_department(Department.SALES) is None


def _webhook(webhook_id: str, event=TriggerEvent.ANALYSIS_COMPLETE, **kwargs) -> Webhook:
    return Webhook(
        id=webhook_id,
        name=f"hook {webhook_id}",
        url=f"https://hooks.example.com/{webhook_id}",
        trigger_event=event,
        **kwargs,
    )


async def test_webhook_upsert_creates_then_updates(db_session):
    repo = WebhookRepository(db_session)

    created = await repo.upsert(_webhook("whk_1", custom_headers={"Authorization": "Bearer t"}))
    assert created.created_at is not None
    assert created.custom_headers == {"Authorization": "Bearer t"}

    updated = await repo.upsert(_webhook("whk_1", method=HttpMethod.PUT, is_active=False))
    await db_session.commit()

    fetched = await repo.get("whk_1")
    assert fetched.method == HttpMethod.PUT
    assert fetched.is_active is False
    assert updated.id == "whk_1"
    assert len(await repo.list_all()) == 1


async def test_list_active_filters_event_and_state(db_session):
    repo = WebhookRepository(db_session)
    await repo.upsert(_webhook("whk_a"))
    await repo.upsert(_webhook("whk_b", is_active=False))
    await repo.upsert(_webhook("whk_c", event=TriggerEvent.SCORE_IMPROVED))
    await db_session.commit()

    active = await repo.list_active(TriggerEvent.ANALYSIS_COMPLETE)
    assert [w.id for w in active] == ["whk_a"]


async def test_delete_reports_whether_row_existed(db_session):
    repo = WebhookRepository(db_session)
    await repo.upsert(_webhook("whk_1"))
    await db_session.commit()

    assert await repo.delete("whk_1") is True
    assert await repo.delete("whk_1") is False
    assert await repo.get("whk_1") is None


async def test_mark_triggered(db_session):
    repo = WebhookRepository(db_session)
    await repo.upsert(_webhook("whk_1"))
    await repo.mark_triggered("whk_1", FIXED_NOW)
    await db_session.commit()

    fetched = await repo.get("whk_1")
    assert fetched.last_triggered_at.replace(tzinfo=None) == FIXED_NOW.replace(tzinfo=None)
