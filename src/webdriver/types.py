"""Core type definitions for the WebDriver client.

Wire-level payloads (capabilities, request bodies, error envelopes) are pydantic
models so they can be validated and serialized with the exact field names the
remote end expects. The command catalogue is static data and uses frozen
dataclasses instead.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field

HttpMethod = Literal["GET", "POST", "DELETE"]

CapabilityMap = dict[str, Any]

DEFAULTS: Final[Mapping[str, Any]] = {
    "protocol": "http",
    "hostname": "localhost",
    "port": 4444,
    "path": "/",
    "log_level": "info",
    "connection_retry_timeout": 120.0,
    "connection_retry_count": 3,
}
"""Default connection and runtime options applied when the caller omits them."""

SESSION_ID_PLACEHOLDER: Final[str] = ":sessionId"

_URL_VARIABLE = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


class WebDriverModel(BaseModel):
    """Base class for wire types. Extra fields are kept for forward compatibility."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ConnectionInfo(BaseModel):
    """Where requests for a session are sent."""

    model_config = ConfigDict(frozen=True)

    protocol: str = DEFAULTS["protocol"]
    hostname: str = DEFAULTS["hostname"]
    port: int = DEFAULTS["port"]
    path: str = DEFAULTS["path"]

    @property
    def base_url(self) -> str:
        path = self.path.strip("/")
        suffix = f"/{path}" if path else ""
        return f"{self.protocol}://{self.hostname}:{self.port}{suffix}"

    def url_for(self, endpoint: str) -> str:
        """Join an endpoint such as ``/session`` onto the base URL."""
        return f"{self.base_url}/{endpoint.lstrip('/')}"


class EnvironmentPredicates(BaseModel):
    """Flags describing the dialect and runtime environment of a session.

    Fields accept both the snake_case names and the camelCase aliases used by
    other WebDriver clients (``isW3C``, ``isMobile`` ...).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_w3c: bool = Field(default=False, alias="isW3C")
    is_mobile: bool = Field(default=False, alias="isMobile")
    is_ios: bool = Field(default=False, alias="isIOS")
    is_android: bool = Field(default=False, alias="isAndroid")
    is_chrome: bool = Field(default=False, alias="isChrome")
    is_firefox: bool = Field(default=False, alias="isFirefox")
    is_sauce: bool = Field(default=False, alias="isSauce")
    is_selenium_standalone: bool = Field(default=False, alias="isSeleniumStandalone")


class StructuredCapabilities(WebDriverModel):
    """The W3C ``alwaysMatch``/``firstMatch`` capability form."""

    always_match: CapabilityMap = Field(default_factory=dict, alias="alwaysMatch")
    first_match: list[CapabilityMap] = Field(default_factory=lambda: [{}], alias="firstMatch")


CapabilitySpec = Mapping[str, Any] | StructuredCapabilities
"""Caller input: a flat (legacy) capability map or the structured form."""


class NegotiatedRequestBody(WebDriverModel):
    """Body of the create-session request, understood by both dialects."""

    desired_capabilities: CapabilityMap = Field(alias="desiredCapabilities")
    capabilities: StructuredCapabilities

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=False)


class ErrorData(WebDriverModel):
    """Error payload returned by the remote end."""

    error: str = "unknown error"
    message: str = ""
    stacktrace: str | None = None
    data: Any | None = None

    @classmethod
    def from_response(cls, body: Any) -> ErrorData:
        """Extract the error payload from a W3C or JSONWire response body."""
        if isinstance(body, Mapping):
            value = body.get("value")
            status = body.get("status")
            if isinstance(status, int) and status != 0:
                message = value.get("message", "") if isinstance(value, Mapping) else str(value or "")
                return cls(error=f"status {status}", message=message, data=dict(body))
            if isinstance(value, Mapping) and ("error" in value or "message" in value):
                return cls.model_validate(dict(value))
        return cls(message=str(body), data=body)


def is_error_body(body: Any) -> bool:
    """Return True if a response body is a W3C or JSONWire error envelope."""
    if not isinstance(body, Mapping):
        return False
    value = body.get("value")
    if isinstance(value, Mapping) and "error" in value:
        return True
    status = body.get("status")
    return isinstance(status, int) and status != 0


@dataclass(frozen=True)
class CommandParameter:
    """A body parameter accepted by a remote command."""

    name: str
    type: str = "object"
    required: bool = True
    description: str = ""


Applicability = Callable[[EnvironmentPredicates], bool]


@dataclass(frozen=True)
class CommandDescriptor:
    """Static description of one remote command.

    ``endpoint`` is a template such as ``/session/:sessionId/element/:elementId/click``.
    ``applicability`` decides whether the command is offered for a given
    environment.
    """

    name: str
    method: HttpMethod
    endpoint: str
    protocol: str
    applicability: Applicability
    parameters: tuple[CommandParameter, ...] = ()
    description: str = ""
    url_variables: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        variables = tuple(v for v in _URL_VARIABLE.findall(self.endpoint) if v != SESSION_ID_PLACEHOLDER[1:])
        object.__setattr__(self, "url_variables", variables)

    def is_applicable(self, predicates: EnvironmentPredicates) -> bool:
        return bool(self.applicability(predicates))
