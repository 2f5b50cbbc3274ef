from __future__ import annotations

import asyncio
import logging
from typing import Any, cast

import aiohttp
import pytest

from foos_relay.webhook import WebhookClient


class FakeResponse:
    def __init__(self, status: int, body: str = "") -> None:
        self.status = status
        self._body = body

    async def read(self) -> bytes:
        return self._body.encode()

    async def text(self) -> str:
        return self._body

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None


class RecordingSession:
    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.calls: list[dict[str, Any]] = []
        self._response = response
        self._error = error

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self._error is not None:
            raise self._error
        assert self._response is not None
        return self._response


def _client(session: RecordingSession) -> WebhookClient:
    return WebhookClient("https://hooks.example.com/abc", cast(aiohttp.ClientSession, session))


def test_post_sends_json_content() -> None:
    session = RecordingSession(FakeResponse(204))

    delivered = asyncio.run(_client(session).post("hello"))

    assert delivered is True
    assert len(session.calls) == 1
    call = session.calls[0]
    assert call["url"] == "https://hooks.example.com/abc"
    assert call["json"] == {"content": "hello"}
    assert call["headers"] == {"Content-Type": "application/json"}


def test_non_success_status_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    session = RecordingSession(FakeResponse(400, '{"message": "bad"}'))

    with caplog.at_level(logging.ERROR, logger="foos_relay.webhook"):
        delivered = asyncio.run(_client(session).post("hello"))

    assert delivered is False
    assert "400" in caplog.text
    assert "bad" in caplog.text


def test_network_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    session = RecordingSession(error=aiohttp.ClientConnectionError("refused"))

    with caplog.at_level(logging.ERROR, logger="foos_relay.webhook"):
        delivered = asyncio.run(_client(session).post("hello"))

    assert delivered is False
    assert "refused" in caplog.text
