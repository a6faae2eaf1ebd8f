from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from webdriver.client.commands import BoundCommand, CommandTable, build_command_table
from webdriver.client.config import SessionOptions
from webdriver.client.transport import Transport
from webdriver.types import CapabilityMap, CommandDescriptor, ConnectionInfo, EnvironmentPredicates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionState:
    """Everything a handshake decides about a session. Replaced as a whole."""

    session_id: str
    capabilities: CapabilityMap
    environment: EnvironmentPredicates
    connection: ConnectionInfo
    commands: CommandTable


class Session:
    """A WebDriver session.

    Created by :func:`~webdriver.new_session` or
    :func:`~webdriver.attach_to_session`. The remote commands available for
    the session's environment are in :attr:`commands` and can also be called
    directly on the session:

        ```python
        await session.navigate_to("https://example.com")
        title = await session.get_title()
        ```

    :func:`~webdriver.reload_session` replaces the state of a session in place,
    so references held by callers stay valid.
    """

    def __init__(
        self,
        *,
        session_id: str,
        capabilities: CapabilityMap,
        requested_capabilities: Any,
        environment: EnvironmentPredicates,
        connection: ConnectionInfo,
        options: SessionOptions,
        transport: Transport,
        registry: Sequence[CommandDescriptor],
        owns_transport: bool = False,
    ) -> None:
        self.requested_capabilities = requested_capabilities
        self.options = options
        self.transport = transport
        self.registry = registry
        self._owns_transport = owns_transport
        self._state = self._make_state(session_id, capabilities, environment, connection)

    def _make_state(
        self,
        session_id: str,
        capabilities: CapabilityMap,
        environment: EnvironmentPredicates,
        connection: ConnectionInfo,
    ) -> SessionState:
        return SessionState(
            session_id=session_id,
            capabilities=capabilities,
            environment=environment,
            connection=connection,
            commands=build_command_table(self.registry, environment, session=self),
        )

    def _replace_state(
        self,
        *,
        session_id: str,
        capabilities: CapabilityMap,
        environment: EnvironmentPredicates,
        connection: ConnectionInfo,
    ) -> None:
        self._state = self._make_state(session_id, capabilities, environment, connection)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def session_id(self) -> str:
        return self._state.session_id

    @property
    def capabilities(self) -> CapabilityMap:
        """Capabilities returned by the remote end."""
        return self._state.capabilities

    @property
    def environment(self) -> EnvironmentPredicates:
        return self._state.environment

    @property
    def connection(self) -> ConnectionInfo:
        """The endpoint commands are sent to, after direct-connect resolution."""
        return self._state.connection

    @property
    def commands(self) -> CommandTable:
        return self._state.commands

    def __getattr__(self, name: str) -> BoundCommand:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._state.commands[name]

    async def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Invoke a command of this session by name."""
        return await self.commands[name](*args, **kwargs)

    async def aclose(self) -> None:
        """Close the transport if the session created it. The remote session is left alone."""
        if self._owns_transport:
            await self.transport.aclose()

    async def __aenter__(self) -> Session:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"<Session {self.session_id} at {self.connection.base_url}>"
