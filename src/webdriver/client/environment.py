"""Detection of the dialect and runtime environment of a session.

The create-session response comes in one of two envelopes:

- W3C: ``{"value": {"sessionId": ..., "capabilities": {...}}}``
- JSONWire (legacy): ``{"sessionId": ..., "status": 0, "value": {...}}``

The envelope decides the dialect; every other predicate is read from the
capabilities the server *returned*, never from the ones that were requested.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from webdriver.shared.exceptions import HandshakeProtocolError
from webdriver.types import CapabilityMap, EnvironmentPredicates, ErrorData, is_error_body

_IOS = re.compile(r"ios", re.IGNORECASE)
_ANDROID = re.compile(r"android", re.IGNORECASE)
_IOS_DEVICE = re.compile(r"(iphone|ipad)", re.IGNORECASE)
_MOBILE_BROWSERS = frozenset({"iphone", "ipad", "android"})


@dataclass(frozen=True)
class HandshakeResult:
    """The parts of a create-session response the client keeps."""

    session_id: str
    capabilities: CapabilityMap
    is_w3c: bool


def parse_handshake_response(body: Any, status: int = 200) -> HandshakeResult:
    """Resolve a create-session response into session id, capabilities and dialect.

    Raises:
        HandshakeProtocolError: If the response signals a failure, has an
            unknown shape or carries no usable session id.
    """
    if not isinstance(body, Mapping):
        raise HandshakeProtocolError("Malformed new session response", payload=body, status=status)
    if status >= 400 or is_error_body(body):
        reason = ErrorData.from_response(body).message
        message = f"Failed to create session: {reason}" if reason else "Failed to create session"
        raise HandshakeProtocolError(message, payload=body, status=status)

    value = body.get("value")
    if isinstance(value, Mapping) and isinstance(value.get("capabilities"), Mapping):
        session_id = value.get("sessionId") or body.get("sessionId")
        capabilities = dict(value["capabilities"])
        is_w3c = True
    elif "sessionId" in body:
        session_id = body.get("sessionId")
        if isinstance(value, Mapping):
            capabilities = dict(value)
        else:
            capabilities = {k: v for k, v in body.items() if k not in ("sessionId", "status", "value")}
        is_w3c = False
    else:
        raise HandshakeProtocolError("Unrecognized new session response", payload=body, status=status)

    if not isinstance(session_id, str) or not session_id:
        raise HandshakeProtocolError("New session response did not contain a session id", payload=body, status=status)

    return HandshakeResult(session_id=session_id, capabilities=capabilities, is_w3c=is_w3c)


def _text(capabilities: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = capabilities.get(key)
        if isinstance(value, str) and value:
            return value
    return ""


def is_mobile(capabilities: Mapping[str, Any]) -> bool:
    platform_name = _text(capabilities, "platformName", "appium:platformName")
    browser_name = _text(capabilities, "browserName").lower()
    return bool(
        _IOS.search(platform_name)
        or _ANDROID.search(platform_name)
        or capabilities.get("deviceName")
        or capabilities.get("appium:deviceName")
        or browser_name in _MOBILE_BROWSERS
    )


def is_ios(capabilities: Mapping[str, Any]) -> bool:
    platform_name = _text(capabilities, "platformName", "appium:platformName")
    device_name = _text(capabilities, "deviceName", "appium:deviceName")
    return bool(_IOS.search(platform_name) or _IOS_DEVICE.search(device_name))


def is_android(capabilities: Mapping[str, Any]) -> bool:
    platform_name = _text(capabilities, "platformName", "appium:platformName")
    browser_name = _text(capabilities, "browserName")
    return bool(_ANDROID.search(platform_name) or _ANDROID.search(browser_name))


def is_chrome(capabilities: Mapping[str, Any]) -> bool:
    browser_name = _text(capabilities, "browserName").lower()
    return browser_name == "chrome" or "goog:chromeOptions" in capabilities or "chrome" in capabilities


def is_firefox(capabilities: Mapping[str, Any]) -> bool:
    browser_name = _text(capabilities, "browserName").lower()
    return browser_name == "firefox" or "moz:firefoxOptions" in capabilities


def is_sauce(capabilities: Mapping[str, Any]) -> bool:
    sauce_options = capabilities.get("sauce:options")
    return bool(
        capabilities.get("extendedDebugging")
        or (isinstance(sauce_options, Mapping) and sauce_options.get("extendedDebugging"))
    )


def is_selenium_standalone(capabilities: Mapping[str, Any]) -> bool:
    return "webdriver.remote.sessionid" in capabilities


def predicates_for(capabilities: Mapping[str, Any], *, is_w3c: bool) -> EnvironmentPredicates:
    """Derive the environment predicates from returned capabilities."""
    return EnvironmentPredicates(
        is_w3c=is_w3c,
        is_mobile=is_mobile(capabilities),
        is_ios=is_ios(capabilities),
        is_android=is_android(capabilities),
        is_chrome=is_chrome(capabilities),
        is_firefox=is_firefox(capabilities),
        is_sauce=is_sauce(capabilities),
        is_selenium_standalone=is_selenium_standalone(capabilities),
    )


def detect_environment(body: Any) -> EnvironmentPredicates:
    """Derive the environment predicates from a create-session response body."""
    result = parse_handshake_response(body)
    return predicates_for(result.capabilities, is_w3c=result.is_w3c)


def environment_from_overrides(overrides: EnvironmentPredicates | Mapping[str, Any] | None) -> EnvironmentPredicates:
    """Build predicates for an attached session from caller supplied values.

    Unspecified predicates default to False, except ``is_w3c`` which defaults
    to True. For a ready-made EnvironmentPredicates only the fields that were
    explicitly set count as specified.
    """
    if isinstance(overrides, EnvironmentPredicates):
        fields = overrides.model_dump(exclude_unset=True)
    else:
        fields = dict(overrides or {})
    if "is_w3c" not in fields and "isW3C" not in fields:
        fields["is_w3c"] = True
    return EnvironmentPredicates.model_validate(fields)
