"""WebDriver client module."""

from webdriver.client.commands import BoundCommand, CommandTable, build_command_table
from webdriver.client.config import AttachOptions, DirectConnect, SessionOptions, Settings
from webdriver.client.handshake import Handshake, HandshakeState, attach_to_session, new_session, reload_session
from webdriver.client.session import Session
from webdriver.client.transport import HttpTransport, Transport, TransportResponse

__all__ = [
    "AttachOptions",
    "BoundCommand",
    "CommandTable",
    "DirectConnect",
    "Handshake",
    "HandshakeState",
    "HttpTransport",
    "Session",
    "SessionOptions",
    "Settings",
    "Transport",
    "TransportResponse",
    "attach_to_session",
    "build_command_table",
    "new_session",
    "reload_session",
]
