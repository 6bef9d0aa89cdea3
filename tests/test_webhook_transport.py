"""Tests for the httpx webhook transport."""

import httpx
import pytest

from atomic_analyzer.errors.exceptions import TransportError
from atomic_analyzer.events.transport import HttpxWebhookTransport

URL = "https://hooks.example.com/1"


def _transport(handler) -> HttpxWebhookTransport:
    return HttpxWebhookTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


async def test_success_returns_status_and_body():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["headers"] = request.headers
        seen["body"] = request.content
        seen["timeout"] = request.extensions["timeout"]
        return httpx.Response(202, text="accepted")

    response = await _transport(handler).send(
        URL, "PUT", {"X-Event": "analysis_complete"}, b'{"a":1}', 12.5
    )

    assert (response.status_code, response.body) == (202, "accepted")
    assert seen["method"] == "PUT"
    assert seen["headers"]["X-Event"] == "analysis_complete"
    assert seen["body"] == b'{"a":1}'
    assert seen["timeout"]["read"] == 12.5
    assert seen["timeout"]["connect"] == 12.5


async def test_non_2xx_is_returned_not_raised():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="maintenance")

    response = await _transport(handler).send(URL, "POST", {}, b"{}", 30)

    assert (response.status_code, response.body) == (503, "maintenance")


@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectTimeout("timed out"),
        httpx.ConnectError("name resolution failed"),
        httpx.ReadTimeout("read timed out"),
    ],
)
async def test_network_failures_raise_transport_error(error):
    def handler(request: httpx.Request) -> httpx.Response:
        raise error

    with pytest.raises(TransportError) as exc_info:
        await _transport(handler).send(URL, "POST", {}, b"{}", 30)

    assert exc_info.value.code == "TRANSPORT_ERROR"
    assert exc_info.value.error_class == "transient"
    assert exc_info.value.url == URL
    assert str(error) in exc_info.value.message
