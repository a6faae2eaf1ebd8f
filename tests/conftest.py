from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

import pytest

from webdriver.client.config import Settings
from webdriver.client.transport import TransportResponse
from webdriver.shared.exceptions import TransportError
from webdriver.shared.logging import WEBDRIVER_LOGGER_NAME

MOCK_CAPABILITIES = {"browserName": "mockBrowser"}


@pytest.fixture
def anyio_backend():
    return "asyncio"


@dataclass
class RecordedRequest:
    method: str
    url: str
    body: Any


Handler = Callable[[str, str, Any], TransportResponse]


class RecordingTransport:
    """In-memory transport that records every request.

    Create-session requests are answered with a W3C (or JSONWire) envelope
    carrying ``capabilities``; the session ids are taken from ``session_ids``
    in order. Other requests are answered from ``values`` (keyed by the part of
    the URL after the session id) or with ``{"value": None}``.
    """

    def __init__(
        self,
        *,
        capabilities: Mapping[str, Any] | None = None,
        w3c: bool = True,
        session_ids: tuple[str, ...] = ("foobar", "barfoo", "bazqux"),
        values: Mapping[str, Any] | None = None,
        handler: Handler | None = None,
        fail_with: Exception | None = None,
    ) -> None:
        self.requests: list[RecordedRequest] = []
        self.capabilities = dict(MOCK_CAPABILITIES if capabilities is None else capabilities)
        self.w3c = w3c
        self._session_ids = iter(session_ids)
        self.values = dict(values or {})
        self.handler = handler
        self.fail_with = fail_with
        self.closed = False

    def session_response(self) -> TransportResponse:
        session_id = next(self._session_ids)
        if self.w3c:
            return TransportResponse(200, {"value": {"sessionId": session_id, "capabilities": self.capabilities}})
        return TransportResponse(200, {"sessionId": session_id, "status": 0, "value": self.capabilities})

    async def send(self, method: str, url: str, body: Mapping[str, Any] | None = None) -> TransportResponse:
        self.requests.append(RecordedRequest(method, url, body))
        if self.fail_with is not None:
            raise self.fail_with
        if self.handler is not None:
            return self.handler(method, url, body)
        if method == "POST" and url.endswith("/session"):
            return self.session_response()
        for suffix, value in self.values.items():
            if url.endswith(suffix):
                return TransportResponse(200, {"value": value})
        return TransportResponse(200, {"value": None})

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def make_transport() -> type[RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def failing_transport() -> RecordingTransport:
    return RecordingTransport(fail_with=TransportError("connection refused"))


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings that ignore the developer's environment."""
    for name in ("LOG_PATH", "LOG_LEVEL", "HOSTNAME", "PORT", "PATH", "PROTOCOL"):
        monkeypatch.delenv(f"WEBDRIVER_{name}", raising=False)
    return Settings(_env_file=None)


@pytest.fixture(autouse=True)
def reset_webdriver_logging() -> Iterator[None]:
    """Remove handlers and levels the client installed during a test."""
    yield
    for name in list(logging.root.manager.loggerDict):
        if name == WEBDRIVER_LOGGER_NAME or name.startswith(f"{WEBDRIVER_LOGGER_NAME}."):
            logging.getLogger(name).setLevel(logging.NOTSET)
    webdriver_logger = logging.getLogger(WEBDRIVER_LOGGER_NAME)
    for handler in list(webdriver_logger.handlers):
        webdriver_logger.removeHandler(handler)
        handler.close()
