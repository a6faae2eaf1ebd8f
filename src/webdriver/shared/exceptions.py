from __future__ import annotations

from typing import Any

from webdriver.types import ErrorData


class WebDriverError(Exception):
    """Base class for every error raised by the WebDriver client."""


class TransportError(WebDriverError):
    """Raised by a transport when a request could not be completed.

    This covers connection failures, timeouts and exhausted retries, as
    opposed to a well-formed error response from the remote end.
    """

    def __init__(self, message: str, *, method: str | None = None, url: str | None = None):
        super().__init__(message)
        self.method = method
        self.url = url


class NegotiationError(WebDriverError, ValueError):
    """Raised when a capability specification is malformed.

    Detected before any network call and never retried.
    """


class HandshakeTransportError(WebDriverError):
    """Raised when the create-session round trip failed at the transport layer."""


class HandshakeProtocolError(WebDriverError):
    """Raised when the create-session response is unusable.

    Either the remote end signalled a session-creation failure or the response
    did not carry a session id. The server's diagnostic payload is attached.

    Attributes:
        error: The parsed error payload.
        payload: The raw response body, unmodified.
    """

    error: ErrorData

    def __init__(self, message: str, *, payload: Any = None, status: int | None = None):
        super().__init__(message)
        self.payload = payload
        self.status = status
        self.error = ErrorData.from_response(payload)


class AttachValidationError(WebDriverError, ValueError):
    """Raised synchronously when attaching without a session id."""


class UnsupportedCommandError(WebDriverError, AttributeError):
    """Raised when a command is not available for the session's environment.

    This is detected locally, with zero network round trips, which is what
    distinguishes it from a remote "unknown command" response.
    """

    def __init__(self, command: str, environment: Any = None):
        super().__init__(f"Command '{command}' is not supported by this session's environment")
        self.command = command
        self.environment = environment


class CommandInvocationError(WebDriverError):
    """Raised when a dispatched command failed.

    Attributes:
        command: Name of the command that failed.
        error: The parsed error payload.
        payload: The remote error body, unmodified. ``None`` when the round trip
            itself failed, in which case the transport error is the ``__cause__``.
        status: HTTP status of the response, if one was received.
    """

    error: ErrorData

    def __init__(self, command: str, message: str, *, payload: Any = None, status: int | None = None):
        super().__init__(f"{command}: {message}")
        self.command = command
        self.payload = payload
        self.status = status
        self.error = ErrorData.from_response(payload) if payload is not None else ErrorData(message=message)
