"""Resolution of the endpoint that serves a session.

Device farms and cloud vendors often accept the handshake on a gateway and
hand the session to a dedicated node. The node is announced through the
``directConnect*`` capabilities of the create-session response and every
subsequent command must be sent there.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from webdriver.client.config import DirectConnect
from webdriver.shared.exceptions import HandshakeProtocolError
from webdriver.types import ConnectionInfo

logger = logging.getLogger(__name__)

_FIELDS = {
    "protocol": "directConnectProtocol",
    "hostname": "directConnectHost",
    "port": "directConnectPort",
    "path": "directConnectPath",
}
_VENDOR_PREFIX = "appium:"


def _lookup(capabilities: Mapping[str, Any], key: str) -> Any:
    if capabilities.get(key) is not None:
        return capabilities[key]
    return capabilities.get(f"{_VENDOR_PREFIX}{key}")


def _port(value: Any, capabilities: Mapping[str, Any]) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise HandshakeProtocolError(
            f"Invalid direct connect port in new session response: {value!r}", payload=dict(capabilities)
        ) from None


def direct_connect_from_capabilities(capabilities: Mapping[str, Any]) -> dict[str, Any]:
    """Collect the direct-connect fields present in returned capabilities.

    An empty path is a valid value and is kept.

    Raises:
        HandshakeProtocolError: If the advertised port is not a number.
    """
    found: dict[str, Any] = {}
    for field, key in _FIELDS.items():
        value = _lookup(capabilities, key)
        if value is None:
            continue
        if field != "path" and value == "":
            continue
        found[field] = _port(value, capabilities) if field == "port" else value
    return found


def resolve_connection(base: ConnectionInfo, capabilities: Mapping[str, Any]) -> ConnectionInfo:
    """Return the connection every command of the session must target.

    Direct-connect fields in the handshake capabilities replace the
    corresponding fields of ``base``; missing ones fall back to ``base``.
    The result is always a new ConnectionInfo.
    """
    redirect = direct_connect_from_capabilities(capabilities)
    if not redirect:
        return base

    resolved = base.model_copy(update=redirect)
    if len(redirect) < len(_FIELDS):
        logger.warning(
            "Incomplete direct connect information in new session response (%s), "
            "missing fields fall back to %s",
            ", ".join(sorted(redirect)),
            base.base_url,
        )
    logger.info(
        "Found direct connect information in new session response. Will connect to server at %s",
        resolved.base_url,
    )
    return resolved


def initial_connection(base: ConnectionInfo, direct_connect: DirectConnect | None) -> ConnectionInfo:
    """Return the endpoint the handshake itself is sent to.

    A caller supplied direct-connect bundle replaces the nominal endpoint
    before anything is sent.
    """
    if direct_connect is None:
        return base
    update = {
        field: value
        for field, value in (
            ("protocol", direct_connect.protocol),
            ("hostname", direct_connect.host),
            ("port", direct_connect.port),
            ("path", direct_connect.path),
        )
        if value is not None
    }
    return base.model_copy(update=update) if update else base
