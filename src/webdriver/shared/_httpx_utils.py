"""Utilities for creating standardized httpx AsyncClient instances."""

from __future__ import annotations

from typing import Any, Protocol

import httpx

__all__ = ["WebDriverHttpClientFactory", "create_webdriver_http_client", "DEFAULT_HEADERS"]

DEFAULT_HEADERS = {
    "content-type": "application/json; charset=utf-8",
    "accept": "application/json",
    "user-agent": "webdriver-client/0.1.0",
}


class WebDriverHttpClientFactory(Protocol):
    def __call__(self, **kwargs: Any) -> httpx.AsyncClient: ...


def create_webdriver_http_client(
    *,
    headers: dict[str, str] | None = None,
    timeout: httpx.Timeout | float | None = None,
    auth: httpx.Auth | tuple[str, str] | None = None,
    **kwargs: Any,
) -> httpx.AsyncClient:
    """Create an httpx AsyncClient with the defaults used for WebDriver traffic.

    - JSON content-type/accept headers and a client user agent, merged with
      any caller supplied headers (caller wins)
    - follow_redirects=True
    - a 120 second timeout unless one is given

    The returned AsyncClient must be closed by its owner.

    Examples:
        async with create_webdriver_http_client() as client:
            response = await client.post("http://localhost:4444/session", json=body)

        # Cloud vendors usually want basic auth
        client = create_webdriver_http_client(auth=("user", "access-key"))
    """
    defaults: dict[str, Any] = {
        "follow_redirects": True,
        "timeout": httpx.Timeout(120.0) if timeout is None else timeout,
        "headers": {**DEFAULT_HEADERS, **{name.lower(): value for name, value in (headers or {}).items()}},
    }
    if auth is not None:
        defaults["auth"] = auth

    return httpx.AsyncClient(**{**kwargs, **defaults})
