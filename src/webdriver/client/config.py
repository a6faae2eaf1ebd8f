"""Configuration for WebDriver sessions.

Process-wide defaults come from environment variables prefixed with
``WEBDRIVER_`` (for example ``WEBDRIVER_HOSTNAME=grid.local``). Per-session
options are plain pydantic models passed to the handshake functions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from webdriver.types import DEFAULTS, ConnectionInfo, EnvironmentPredicates, StructuredCapabilities


class Settings(BaseSettings):
    """Process-wide WebDriver client settings.

    ``log_path`` is the externally established output path. When it is set it
    takes precedence over any ``output_dir`` requested for a handshake.
    """

    model_config = SettingsConfigDict(
        env_prefix="WEBDRIVER_",
        env_file=".env",
        extra="ignore",
    )

    protocol: str = DEFAULTS["protocol"]
    hostname: str = DEFAULTS["hostname"]
    port: int = DEFAULTS["port"]
    path: str = DEFAULTS["path"]
    log_level: str = DEFAULTS["log_level"]
    log_path: str | None = None
    connection_retry_timeout: float = DEFAULTS["connection_retry_timeout"]
    connection_retry_count: int = DEFAULTS["connection_retry_count"]

    def connection(self) -> ConnectionInfo:
        return ConnectionInfo(protocol=self.protocol, hostname=self.hostname, port=self.port, path=self.path)


class DirectConnect(BaseModel):
    """An endpoint known in advance to serve the session instead of the nominal one."""

    model_config = ConfigDict(frozen=True)

    protocol: str | None = None
    host: str | None = None
    port: int | None = None
    path: str | None = None


class TransportOptions(BaseModel):
    """Options forwarded to the default HTTP transport. Unknown option names are rejected."""

    model_config = ConfigDict(extra="forbid")

    user: str | None = None
    key: str | None = None
    headers: dict[str, str] = Field(default_factory=dict)
    connection_retry_timeout: float | None = None
    connection_retry_count: int | None = None


class SessionOptions(TransportOptions):
    """Options for creating a new session.

    Attributes:
        capabilities: Flat (legacy) or structured capability specification.
        connection: The endpoint the handshake is sent to. Defaults to the
            process settings.
        direct_connect: Redirect the handshake itself to a known endpoint.
        output_dir: Directory that receives ``webdriver.log``.
        log_level: Global log level for the ``webdriver`` logger.
        log_levels: Per-logger level overrides.
    """

    capabilities: dict[str, Any] | StructuredCapabilities = Field(default_factory=dict)
    connection: ConnectionInfo | None = None
    direct_connect: DirectConnect | None = None
    output_dir: Path | str | None = None
    log_level: str | None = None
    log_levels: dict[str, str] = Field(default_factory=dict)


class AttachOptions(TransportOptions):
    """Options for attaching to a session that already exists on the remote end.

    ``environment`` holds the predicate overrides (``isW3C``, ``isMobile`` ...)
    since no handshake response is available to detect them from.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    session_id: str | None = Field(default=None, alias="sessionId")
    connection: ConnectionInfo | None = None
    environment: dict[str, bool] = Field(default_factory=dict)
    capabilities: dict[str, Any] = Field(default_factory=dict)
    requested_capabilities: dict[str, Any] = Field(default_factory=dict, alias="requestedCapabilities")
    log_level: str | None = None

    @field_validator("environment", mode="before")
    @classmethod
    def dump_predicates(cls, value: Any) -> Any:
        """Accept a ready-made EnvironmentPredicates as well as a plain mapping."""
        if isinstance(value, EnvironmentPredicates):
            return value.model_dump(exclude_unset=True)
        return value
