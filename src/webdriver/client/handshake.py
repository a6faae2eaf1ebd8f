"""Session handshake: creating, attaching to and reloading WebDriver sessions.

A new session goes through ``negotiate -> send -> detect -> resolve -> build``
strictly in that order. Attaching skips everything but the build step, since
the session already exists on the remote end.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from webdriver.client.capabilities import negotiate
from webdriver.client.config import AttachOptions, SessionOptions, Settings, TransportOptions
from webdriver.client.connection import initial_connection, resolve_connection
from webdriver.client.environment import environment_from_overrides, parse_handshake_response, predicates_for
from webdriver.client.session import Session
from webdriver.client.transport import HttpTransport, Transport
from webdriver.protocols import REGISTRY
from webdriver.shared.exceptions import (
    AttachValidationError,
    HandshakeTransportError,
    TransportError,
)
from webdriver.shared.logging import WEBDRIVER_LOGGER_NAME, configure_logging, resolve_log_path
from webdriver.types import CapabilityMap, CommandDescriptor, ConnectionInfo, EnvironmentPredicates

logger = logging.getLogger(__name__)

NEW_SESSION_ENDPOINT = "/session"


class HandshakeState(str, Enum):
    IDLE = "idle"
    NEGOTIATING = "negotiating"
    AWAITING_RESPONSE = "awaiting_response"
    ATTACHING = "attaching"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class HandshakeOutcome:
    session_id: str
    capabilities: CapabilityMap
    environment: EnvironmentPredicates
    connection: ConnectionInfo


class Handshake:
    """One create-session exchange.

    ``state`` is the current state and ``history`` every state passed through.
    A failed handshake never produces an outcome; the error propagates.
    """

    def __init__(self, transport: Transport | None = None) -> None:
        self.transport = transport
        self.state = HandshakeState.IDLE
        self.history: list[HandshakeState] = [HandshakeState.IDLE]

    def _transition(self, state: HandshakeState) -> None:
        self.state = state
        self.history.append(state)

    async def create(
        self,
        capabilities: Any,
        base: ConnectionInfo,
        target: ConnectionInfo | None = None,
    ) -> HandshakeOutcome:
        """Create a session.

        Args:
            capabilities: The capability specification to negotiate.
            base: The nominal endpoint of the remote end.
            target: Where the handshake is sent, if not ``base``.

        Raises:
            NegotiationError: The capability specification is malformed.
            HandshakeTransportError: The round trip failed.
            HandshakeProtocolError: The response is an error or lacks a session id.
        """
        if self.transport is None:
            raise RuntimeError("A transport is required to create a session")
        target = target or base
        try:
            self._transition(HandshakeState.NEGOTIATING)
            body = negotiate(capabilities).to_wire()

            self._transition(HandshakeState.AWAITING_RESPONSE)
            url = target.url_for(NEW_SESSION_ENDPOINT)
            logger.info("[POST] %s", url)
            logger.info("DATA %s", body)
            try:
                response = await self.transport.send("POST", url, body)
            except TransportError as exc:
                raise HandshakeTransportError(f"Failed to create session: {exc}") from exc

            result = parse_handshake_response(response.body, response.status)
            environment = predicates_for(result.capabilities, is_w3c=result.is_w3c)
            connection = resolve_connection(target, result.capabilities)
        except BaseException:
            self._transition(HandshakeState.FAILED)
            raise

        self._transition(HandshakeState.SUCCEEDED)
        logger.info("Created session %s (%s dialect)", result.session_id, "W3C" if result.is_w3c else "JSONWire")
        return HandshakeOutcome(
            session_id=result.session_id,
            capabilities=result.capabilities,
            environment=environment,
            connection=connection,
        )

    def attach(self, session_id: str | None, overrides: Any) -> EnvironmentPredicates:
        self._transition(HandshakeState.ATTACHING)
        if not session_id:
            self._transition(HandshakeState.FAILED)
            raise AttachValidationError("sessionId is required to attach to a session")
        environment = environment_from_overrides(overrides)
        self._transition(HandshakeState.SUCCEEDED)
        return environment


def _default_transport(options: TransportOptions, settings: Settings) -> HttpTransport:
    return HttpTransport(
        headers=options.headers,
        user=options.user,
        key=options.key,
        timeout=options.connection_retry_timeout or settings.connection_retry_timeout,
        retry_count=(
            options.connection_retry_count
            if options.connection_retry_count is not None
            else settings.connection_retry_count
        ),
    )


def _setup_logging(settings: Settings, log_level: str | None, log_levels: dict[str, str], output_dir: Any) -> None:
    # Must run before the first log line of the handshake.
    log_path = resolve_log_path(settings.log_path, output_dir)
    configure_logging(
        log_level or settings.log_level,
        log_levels,
        log_path=log_path,
        logger_names=(WEBDRIVER_LOGGER_NAME,),
    )


async def new_session(
    options: SessionOptions | None = None,
    *,
    transport: Transport | None = None,
    registry: Sequence[CommandDescriptor] = REGISTRY,
    settings: Settings | None = None,
    **kwargs: Any,
) -> Session:
    """Create a new WebDriver session.

    Args:
        options: Session options. Keyword arguments build a
            :class:`SessionOptions` when this is omitted.
        transport: Transport to use. An :class:`HttpTransport` owned by the
            session is created when omitted.
        registry: The command catalogue the command table is built from.
        settings: Process settings. Read from the environment when omitted.

    Returns:
        A fully populated session.

    Example:
        ```python
        session = await new_session(
            capabilities={"browserName": "firefox"},
            connection=ConnectionInfo(hostname="localhost", port=4444),
        )
        await session.navigate_to("https://example.com")
        ```
    """
    if options is None:
        options = SessionOptions(**kwargs)
    settings = settings or Settings()
    _setup_logging(settings, options.log_level, options.log_levels, options.output_dir)

    logger.info("Initiate new session using the WebDriver protocol")
    base = options.connection or settings.connection()
    options = options.model_copy(update={"connection": base})

    owns_transport = transport is None
    transport = transport or _default_transport(options, settings)
    try:
        outcome = await Handshake(transport).create(
            options.capabilities, base, initial_connection(base, options.direct_connect)
        )
    except BaseException:
        if owns_transport:
            await transport.aclose()
        raise

    return Session(
        session_id=outcome.session_id,
        capabilities=outcome.capabilities,
        requested_capabilities=options.capabilities,
        environment=outcome.environment,
        connection=outcome.connection,
        options=options,
        transport=transport,
        registry=registry,
        owns_transport=owns_transport,
    )


def attach_to_session(
    options: AttachOptions | None = None,
    *,
    transport: Transport | None = None,
    registry: Sequence[CommandDescriptor] = REGISTRY,
    settings: Settings | None = None,
    **kwargs: Any,
) -> Session:
    """Attach to a session that already exists on the remote end.

    No request is made. The environment cannot be detected, so it is taken
    from ``options.environment`` (``is_w3c`` defaults to True, every other
    predicate to False).

    Raises:
        AttachValidationError: If no session id is given.
    """
    if options is None:
        options = AttachOptions(**kwargs)
    environment = Handshake(transport).attach(options.session_id, options.environment)
    session_id = options.session_id or ""

    settings = settings or Settings()
    _setup_logging(settings, options.log_level, {}, None)

    connection = options.connection or settings.connection()
    session_options = SessionOptions(
        capabilities=options.requested_capabilities or options.capabilities,
        connection=connection,
        log_level=options.log_level,
        user=options.user,
        key=options.key,
        headers=options.headers,
        connection_retry_timeout=options.connection_retry_timeout,
        connection_retry_count=options.connection_retry_count,
    )
    owns_transport = transport is None
    logger.info("Attaching to session %s at %s", session_id, connection.base_url)
    return Session(
        session_id=session_id,
        capabilities=dict(options.capabilities),
        requested_capabilities=session_options.capabilities,
        environment=environment,
        connection=connection,
        options=session_options,
        transport=transport or _default_transport(options, settings),
        registry=registry,
        owns_transport=owns_transport,
    )


async def reload_session(session: Session) -> Session:
    """Create a fresh remote session and swap it into ``session`` in place.

    The handshake is re-run with the originally requested capabilities against
    the original endpoint. On failure ``session`` keeps its previous state.
    """
    options = session.options
    base = options.connection or Settings().connection()

    old_session_id = session.session_id
    outcome = await Handshake(session.transport).create(
        options.capabilities, base, initial_connection(base, options.direct_connect)
    )
    session._replace_state(
        session_id=outcome.session_id,
        capabilities=outcome.capabilities,
        environment=outcome.environment,
        connection=outcome.connection,
    )
    logger.info("Reloaded session %s as %s", old_session_id, outcome.session_id)
    return session
