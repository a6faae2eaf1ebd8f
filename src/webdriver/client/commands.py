"""Command tables: the environment-filtered set of remote commands of a session.

The registry describes every command of every protocol family. A session only
gets the commands whose applicability predicate holds for its environment, so
an unsupported command is simply absent and fails locally instead of after a
round trip.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from webdriver.shared.exceptions import CommandInvocationError, TransportError, UnsupportedCommandError
from webdriver.types import SESSION_ID_PLACEHOLDER, CommandDescriptor, EnvironmentPredicates, is_error_body

if TYPE_CHECKING:
    from webdriver.client.session import Session

logger = logging.getLogger(__name__)

_MAX_LOGGED_RESULT = 1000


def _shorten(value: Any) -> Any:
    if isinstance(value, str) and len(value) > _MAX_LOGGED_RESULT:
        return f"{value[:_MAX_LOGGED_RESULT]}... ({len(value)} characters)"
    return value


class BoundCommand:
    """A command descriptor bound to a session.

    The session's connection and id are read when the command is called, not
    when it was bound.
    """

    __slots__ = ("descriptor", "_session")

    def __init__(self, descriptor: CommandDescriptor, session: Session | None = None) -> None:
        self.descriptor = descriptor
        self._session = session

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def argument_names(self) -> tuple[str, ...]:
        return self.descriptor.url_variables + tuple(p.name for p in self.descriptor.parameters)

    def __repr__(self) -> str:
        return f"<BoundCommand {self.descriptor.method} {self.descriptor.endpoint} ({self.name})>"

    def bind_arguments(self, *args: Any, **kwargs: Any) -> dict[str, Any]:
        """Map call arguments onto URL variables and body parameters.

        Raises:
            TypeError: On missing, unexpected or duplicated arguments.
        """
        names = self.argument_names
        if len(args) > len(names):
            raise TypeError(f"{self.name}() takes at most {len(names)} arguments ({len(args)} given)")

        bound = dict(zip(names, args))
        for key, value in kwargs.items():
            if key not in names:
                raise TypeError(f"{self.name}() got an unexpected keyword argument '{key}'")
            if key in bound:
                raise TypeError(f"{self.name}() got multiple values for argument '{key}'")
            bound[key] = value

        required = self.descriptor.url_variables + tuple(p.name for p in self.descriptor.parameters if p.required)
        missing = [name for name in required if name not in bound]
        if missing:
            raise TypeError(f"{self.name}() missing required argument(s): {', '.join(missing)}")
        return bound

    def endpoint_for(self, session_id: str, arguments: Mapping[str, Any]) -> str:
        endpoint = self.descriptor.endpoint.replace(SESSION_ID_PLACEHOLDER, quote(session_id, safe=""))
        for variable in self.descriptor.url_variables:
            endpoint = endpoint.replace(f":{variable}", quote(str(arguments[variable]), safe=""))
        return endpoint

    def body_for(self, arguments: Mapping[str, Any]) -> dict[str, Any] | None:
        if self.descriptor.method != "POST":
            return None
        return {p.name: arguments[p.name] for p in self.descriptor.parameters if p.name in arguments}

    async def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self._session is None:
            raise RuntimeError(f"Command '{self.name}' is not bound to a session")
        arguments = self.bind_arguments(*args, **kwargs)

        session = self._session
        method = self.descriptor.method
        url = session.connection.url_for(self.endpoint_for(session.session_id, arguments))
        body = self.body_for(arguments)

        logger.info("COMMAND %s(%s)", self.name, ", ".join(f"{k}={v!r}" for k, v in arguments.items()))
        logger.info("[%s] %s", method, url)
        if body:
            logger.debug("DATA %s", body)

        try:
            response = await session.transport.send(method, url, body)
        except TransportError as exc:
            raise CommandInvocationError(self.name, f"request failed: {exc}") from exc

        if not response.ok or is_error_body(response.body):
            error = CommandInvocationError(
                self.name, "remote end returned an error", payload=response.body, status=response.status
            )
            logger.error("Request failed with status %s due to %s", response.status, error.error.message)
            raise error

        value = response.body.get("value") if isinstance(response.body, Mapping) else response.body
        logger.info("RESULT %s", _shorten(value))
        return value


class CommandTable(Mapping[str, BoundCommand]):
    """Read-only mapping from command name to bound command.

    Commands can also be reached as attributes. Looking up a command that is
    not part of the table raises :class:`UnsupportedCommandError`.
    """

    __slots__ = ("_commands", "_environment")

    def __init__(self, commands: Mapping[str, BoundCommand], environment: EnvironmentPredicates) -> None:
        self._commands = MappingProxyType(dict(commands))
        self._environment = environment

    @property
    def environment(self) -> EnvironmentPredicates:
        return self._environment

    def __getitem__(self, name: str) -> BoundCommand:
        try:
            return self._commands[name]
        except KeyError:
            raise UnsupportedCommandError(name, self.environment) from None

    def __getattr__(self, name: str) -> BoundCommand:
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def get(self, name: str, default: Any = None) -> Any:
        return self._commands.get(name, default)

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"CommandTable({len(self)} commands)"

    def names(self) -> frozenset[str]:
        return frozenset(self._commands)


def build_command_table(
    registry: Iterable[CommandDescriptor],
    predicates: EnvironmentPredicates,
    session: Session | None = None,
) -> CommandTable:
    """Build the command table for an environment.

    Each descriptor is kept iff its applicability predicate holds. When several
    applicable descriptors share a name, the later one in registry order wins.
    The result only depends on ``registry`` and ``predicates``.
    """
    commands: dict[str, BoundCommand] = {}
    for descriptor in registry:
        if descriptor.is_applicable(predicates):
            commands[descriptor.name] = BoundCommand(descriptor, session)
    return CommandTable(commands, predicates)
