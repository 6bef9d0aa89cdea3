"""Tests for the insight generator and the Anthropic text client."""

import json

import httpx
import pytest

from atomic_analyzer.errors.exceptions import (
    InvalidResponseError,
    NoApiKeyError,
    NotFoundError,
    UpstreamError,
)
from atomic_analyzer.insights.client import AnthropicTextGenerator
from atomic_analyzer.insights.generator import InsightGenerator
from atomic_analyzer.models.enums import Department
from atomic_analyzer.scoring.engine import ScoringEngine
from atomic_analyzer.signals.source import StaticSignalSource

from conftest import FIXED_NOW, ScriptedGenerator, fixed_clock


@pytest.fixture
def analysis(empty_signals):
    return ScoringEngine(clock=fixed_clock).run("saas", StaticSignalSource(empty_signals))


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _reply(text: str) -> dict:
    return {"content": [{"type": "text", "text": text}]}


async def test_request_insights_parses_reply(analysis):
    generator = ScriptedGenerator("EXECUTIVE SUMMARY\nNeeds work.\nQUICK WINS\n- Add a headline")
    insights = await InsightGenerator(generator, clock=fixed_clock).request_insights(analysis)

    assert insights.executive_summary == "Needs work."
    assert insights.quick_wins == ["Add a headline"]
    assert insights.generated_at == FIXED_NOW

    prompt, max_tokens = generator.prompts[0]
    assert max_tokens == 2000
    assert "Type: saas" in prompt
    assert f"Overall Health Score: {analysis.overall_score}/100" in prompt
    assert "[critical] Unclear Value Proposition" in prompt


async def test_department_insights_uses_department_prompt(analysis):
    generator = ScriptedGenerator("EXECUTIVE SUMMARY\nMarketing is thin.")
    insights = await InsightGenerator(generator).department_insights(Department.MARKETING, analysis)

    assert insights.executive_summary == "Marketing is thin."
    prompt, _ = generator.prompts[0]
    assert "Analyze the MARKETING department for this saas." in prompt
    assert "No Email List Building" in prompt


async def test_department_insights_missing_department(analysis):
    partial = analysis.model_copy(update={"departments": {}})
    with pytest.raises(NotFoundError):
        await InsightGenerator(ScriptedGenerator()).department_insights(Department.SALES, partial)


async def test_quick_wins_returns_list(analysis):
    generator = ScriptedGenerator("1. Add a headline\n2. Add a phone number\n3. Add a guarantee")
    wins = await InsightGenerator(generator).quick_wins(analysis)

    assert wins == ["Add a headline", "Add a phone number", "Add a guarantee"]
    assert generator.prompts[0][1] == 500


async def test_process_documentation_splits_markdown(analysis):
    generator = ScriptedGenerator(
        "# Sales SOP\nIntro.\n## Checklists\n- Call back leads\n## KPIs\nConversion rate"
    )
    doc = await InsightGenerator(generator, clock=fixed_clock).process_documentation(Department.SALES, analysis)

    assert doc.department == Department.SALES
    assert doc.content.startswith("# Sales SOP")
    assert doc.sections == {
        "Sales SOP": "Intro.",
        "Checklists": "- Call back leads",
        "KPIs": "Conversion rate",
    }
    assert doc.generated_at == FIXED_NOW

    prompt, max_tokens = generator.prompts[0]
    assert max_tokens == 3000
    assert "SOPs) for the SALES department." in prompt
    assert "Business Context: saas" in prompt
    assert f"Department Score: {analysis.departments[Department.SALES].score}/100" in prompt


async def test_process_documentation_missing_department(analysis):
    partial = analysis.model_copy(update={"departments": {}})
    with pytest.raises(NotFoundError):
        await InsightGenerator(ScriptedGenerator()).process_documentation(Department.SALES, partial)


async def test_executive_report_keeps_raw_text(analysis):
    generator = ScriptedGenerator("Executive Summary\nRevenue is at risk.")
    report = await InsightGenerator(generator, clock=fixed_clock).executive_report(analysis)

    assert report.content == "Executive Summary\nRevenue is at risk."
    assert report.generated_at == FIXED_NOW
    prompt, max_tokens = generator.prompts[0]
    assert max_tokens == 2500
    assert f"Overall Score: {analysis.overall_score}/100" in prompt


async def test_test_connection_reports_model():
    result = await InsightGenerator(ScriptedGenerator("ok")).test_connection()
    assert result == {
        "success": True,
        "message": "Claude AI connected successfully!",
        "model": "test-model",
    }


async def test_anthropic_client_sends_messages_request():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["headers"] = request.headers
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_reply("hello"))

    client = AnthropicTextGenerator(api_key="sk-test", model="claude-test", client=_client(handler))
    text = await client.generate("Say hello", 123)

    assert text == "hello"
    assert seen["headers"]["x-api-key"] == "sk-test"
    assert seen["headers"]["anthropic-version"] == "2023-06-01"
    assert seen["body"]["model"] == "claude-test"
    assert seen["body"]["max_tokens"] == 123
    assert seen["body"]["temperature"] == 0.7
    assert seen["body"]["messages"] == [{"role": "user", "content": "Say hello"}]


async def test_anthropic_client_without_key_never_calls_out():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=_reply("unreachable"))

    client = AnthropicTextGenerator(api_key="", model="claude-test", client=_client(handler))
    with pytest.raises(NoApiKeyError) as exc_info:
        await client.generate("prompt", 10)

    assert calls == []
    assert exc_info.value.code == "NO_API_KEY"
    assert exc_info.value.error_class == "configuration"


async def test_anthropic_client_error_message_from_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"error": {"type": "rate_limit_error", "message": "Slow down"}})

    client = AnthropicTextGenerator(api_key="sk-test", model="m", client=_client(handler))
    with pytest.raises(UpstreamError) as exc_info:
        await client.generate("prompt", 10)

    assert exc_info.value.message == "Slow down"
    assert exc_info.value.upstream_status == 429
    assert exc_info.value.error_class == "transient"


async def test_anthropic_client_error_without_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    client = AnthropicTextGenerator(api_key="sk-test", model="m", client=_client(handler))
    with pytest.raises(UpstreamError, match="Claude API error: 500"):
        await client.generate("prompt", 10)


async def test_anthropic_client_transport_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = AnthropicTextGenerator(api_key="sk-test", model="m", client=_client(handler))
    with pytest.raises(UpstreamError):
        await client.generate("prompt", 10)


async def test_anthropic_client_missing_text():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"content": []})

    client = AnthropicTextGenerator(api_key="sk-test", model="m", client=_client(handler))
    with pytest.raises(InvalidResponseError):
        await client.generate("prompt", 10)
