"""An async client for the WebDriver remote-automation protocol.

The client negotiates a session with a browser driver, Selenium grid or Appium
server, detects which dialect (W3C or legacy JSONWire) and environment the
remote end speaks and exposes exactly the commands that environment supports.

## Example

```python
import anyio

from webdriver import ConnectionInfo, new_session


async def main():
    session = await new_session(
        capabilities={"browserName": "firefox"},
        connection=ConnectionInfo(hostname="localhost", port=4444),
    )
    async with session:
        await session.navigate_to("https://example.com")
        print(await session.get_title())
        await session.delete_session()


anyio.run(main)
```
"""

from .client.capabilities import negotiate
from .client.commands import BoundCommand, CommandTable, build_command_table
from .client.config import AttachOptions, DirectConnect, SessionOptions, Settings
from .client.connection import resolve_connection
from .client.environment import detect_environment
from .client.handshake import attach_to_session, new_session, reload_session
from .client.session import Session
from .client.transport import HttpTransport, Transport, TransportResponse
from .protocols import REGISTRY
from .shared.exceptions import (
    AttachValidationError,
    CommandInvocationError,
    HandshakeProtocolError,
    HandshakeTransportError,
    NegotiationError,
    TransportError,
    UnsupportedCommandError,
    WebDriverError,
)
from .types import (
    DEFAULTS,
    CommandDescriptor,
    CommandParameter,
    ConnectionInfo,
    EnvironmentPredicates,
    ErrorData,
    NegotiatedRequestBody,
    StructuredCapabilities,
)

get_prototype = build_command_table

__all__ = [
    "DEFAULTS",
    "REGISTRY",
    "AttachOptions",
    "AttachValidationError",
    "BoundCommand",
    "CommandDescriptor",
    "CommandInvocationError",
    "CommandParameter",
    "CommandTable",
    "ConnectionInfo",
    "DirectConnect",
    "EnvironmentPredicates",
    "ErrorData",
    "HandshakeProtocolError",
    "HandshakeTransportError",
    "HttpTransport",
    "NegotiatedRequestBody",
    "NegotiationError",
    "Session",
    "SessionOptions",
    "Settings",
    "StructuredCapabilities",
    "Transport",
    "TransportError",
    "TransportResponse",
    "UnsupportedCommandError",
    "WebDriverError",
    "attach_to_session",
    "build_command_table",
    "detect_environment",
    "get_prototype",
    "negotiate",
    "new_session",
    "reload_session",
    "resolve_connection",
]
