"""Tests for Resend email delivery."""

import json

import httpx
import pytest

from meetnotes.core.exceptions import DeliveryError
from meetnotes.features.delivery.resend import ResendMailer


def _mailer(handler, api_key: str = "re_test") -> ResendMailer:
    http = httpx.AsyncClient(
        base_url=ResendMailer.API_BASE,
        headers={"Authorization": f"Bearer {api_key}"},
        transport=httpx.MockTransport(handler),
    )
    return ResendMailer(api_key=api_key, sender="Notes <notes@example.com>", subject="Minutes", client=http)


def test_payload_has_text_and_escaped_html():
    mailer = ResendMailer(api_key="k", sender="s@example.com", subject="Minutes")
    payload = mailer.build_payload("a@b.c", "# Title\n- x < y")
    assert payload["to"] == ["a@b.c"]
    assert payload["from"] == "s@example.com"
    assert payload["subject"] == "Minutes"
    assert payload["text"] == "# Title\n- x < y"
    assert "<h1" in payload["html"]
    assert "x &lt; y" in payload["html"]


@pytest.mark.asyncio
async def test_send_success():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "email_123"})

    receipt = await _mailer(handler).send("a@b.c", "**Done**")

    assert seen["path"] == "/emails"
    assert seen["auth"] == "Bearer re_test"
    assert seen["body"]["to"] == ["a@b.c"]
    assert receipt.delivered is True
    assert receipt.simulated is False


@pytest.mark.asyncio
async def test_sandbox_rejection_is_simulated():
    message = "You can only send testing emails to your own email address (owner@example.com)."

    def handler(request):
        return httpx.Response(403, json={"statusCode": 403, "name": "validation_error", "message": message})

    receipt = await _mailer(handler).send("someone@else.com", "body")
    assert receipt.simulated is True
    assert receipt.message == message


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(401, json={"name": "missing_api_key", "message": "Missing API key"}),
        httpx.Response(403, json={"name": "invalid_api_key", "message": "API key is invalid"}),
        httpx.Response(500, text="internal error"),
    ],
)
async def test_other_errors_raise(response):
    with pytest.raises(DeliveryError):
        await _mailer(lambda request: response).send("a@b.c", "body")


@pytest.mark.asyncio
async def test_transport_error_raises_delivery_error():
    def handler(request):
        raise httpx.ReadError("reset", request=request)

    with pytest.raises(DeliveryError):
        await _mailer(handler).send("a@b.c", "body")


@pytest.mark.asyncio
async def test_unconfigured_mailer_raises_without_request():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={"id": "x"})

    with pytest.raises(DeliveryError):
        await _mailer(handler, api_key="").send("a@b.c", "body")
    assert calls == []
