"""The static catalogue of remote commands, grouped by protocol family.

Order matters: when several applicable families define a command with the same
name, the family listed later wins. JSONWire comes before W3C so that a mobile
session, which gets both, uses the W3C variant of shared commands.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from webdriver.protocols import appium, chromium, gecko, jsonwp, mjsonwp, saucelabs, selenium, webdriver
from webdriver.types import CommandDescriptor

PROTOCOLS: Mapping[str, tuple[CommandDescriptor, ...]] = MappingProxyType(
    {
        "jsonwp": jsonwp.COMMANDS,
        "webdriver": webdriver.COMMANDS,
        "mjsonwp": mjsonwp.COMMANDS,
        "appium": appium.COMMANDS,
        "chromium": chromium.COMMANDS,
        "gecko": gecko.COMMANDS,
        "saucelabs": saucelabs.COMMANDS,
        "selenium": selenium.COMMANDS,
    }
)

REGISTRY: tuple[CommandDescriptor, ...] = tuple(command for commands in PROTOCOLS.values() for command in commands)


def protocol_commands(name: str) -> tuple[CommandDescriptor, ...]:
    """Return the commands of one protocol family."""
    try:
        return PROTOCOLS[name]
    except KeyError:
        raise ValueError(f"Unknown protocol family: {name!r}") from None


__all__ = ["PROTOCOLS", "REGISTRY", "protocol_commands"]
