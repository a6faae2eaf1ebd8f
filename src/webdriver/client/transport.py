"""Transports carry WebDriver requests to the remote end.

The session layer only needs ``send(method, url, body) -> response``; anything
implementing the :class:`Transport` protocol can be used, which keeps retries,
proxies and authentication out of the session logic.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import anyio
import httpx

from webdriver.shared._httpx_utils import create_webdriver_http_client
from webdriver.shared.exceptions import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """Status code and decoded JSON body of a response."""

    status: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


@runtime_checkable
class Transport(Protocol):
    """Protocol for WebDriver transports.

    Implementations raise :class:`~webdriver.shared.exceptions.TransportError`
    when a request could not be completed at all. A response with an error
    status is *not* a transport failure and must be returned normally.
    """

    async def send(self, method: str, url: str, body: Mapping[str, Any] | None = None) -> TransportResponse: ...

    async def aclose(self) -> None: ...


class HttpTransport:
    """HTTP transport backed by ``httpx.AsyncClient``.

    Connection failures and timeouts are retried ``retry_count`` times with
    exponential backoff before a :class:`TransportError` is raised.

    Example:
        ```python
        transport = HttpTransport(user="sauce-user", key="access-key")
        session = await new_session(options, transport=transport)
        ```
    """

    def __init__(
        self,
        *,
        headers: dict[str, str] | None = None,
        user: str | None = None,
        key: str | None = None,
        timeout: float = 120.0,
        retry_count: int = 3,
        initial_retry_delay: float = 0.5,
        max_retry_delay: float = 10.0,
        httpx_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the HTTP transport.

        Args:
            headers: Extra headers sent with every request. Ignored if
                httpx_client is provided.
            user: Username for basic auth (cloud vendors).
            key: Access key for basic auth.
            timeout: Per-request timeout in seconds.
            retry_count: How many times a failed request is retried.
            initial_retry_delay: Backoff before the first retry, in seconds.
            max_retry_delay: Upper bound for the backoff.
            httpx_client: Optional pre-configured client. Its lifecycle is
                managed by the caller.
        """
        if retry_count < 0:
            raise ValueError("retry_count cannot be negative")
        self._retry_count = retry_count
        self._initial_retry_delay = initial_retry_delay
        self._max_retry_delay = max_retry_delay
        self._owns_client = httpx_client is None
        if httpx_client is None:
            auth = (user, key) if user and key else None
            httpx_client = create_webdriver_http_client(headers=headers, timeout=timeout, auth=auth)
        self._client = httpx_client

    def _retry_delay(self, attempt: int) -> float:
        return min(self._initial_retry_delay * (2**attempt), self._max_retry_delay)

    async def send(self, method: str, url: str, body: Mapping[str, Any] | None = None) -> TransportResponse:
        attempt = 0
        while True:
            try:
                response = await self._client.request(method, url, json=dict(body) if body is not None else None)
            except httpx.TransportError as exc:
                if attempt >= self._retry_count:
                    raise TransportError(
                        f"Request failed after {attempt + 1} attempt(s): {exc!r}", method=method, url=url
                    ) from exc
                delay = self._retry_delay(attempt)
                attempt += 1
                logger.warning(
                    "Request %s %s failed (%r), retrying in %.1fs (%d/%d)",
                    method,
                    url,
                    exc,
                    delay,
                    attempt,
                    self._retry_count,
                )
                await anyio.sleep(delay)
                continue
            return TransportResponse(status=response.status_code, body=_decode_body(response))

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        # Some drivers answer with plain text on errors
        return {"value": response.text}
