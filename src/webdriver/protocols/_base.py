from __future__ import annotations

from collections.abc import Callable

from webdriver.types import Applicability, CommandDescriptor, CommandParameter, EnvironmentPredicates, HttpMethod

CommandFactory = Callable[..., CommandDescriptor]


def param(name: str, type: str = "string", required: bool = True, description: str = "") -> CommandParameter:
    return CommandParameter(name=name, type=type, required=required, description=description)


def optional(name: str, type: str = "string", description: str = "") -> CommandParameter:
    return CommandParameter(name=name, type=type, required=False, description=description)


def family(protocol: str, applicability: Applicability) -> CommandFactory:
    """Return a factory for the commands of one protocol family."""

    def command(
        method: HttpMethod,
        endpoint: str,
        name: str,
        *parameters: CommandParameter,
        description: str = "",
    ) -> CommandDescriptor:
        return CommandDescriptor(
            name=name,
            method=method,
            endpoint=endpoint,
            protocol=protocol,
            applicability=applicability,
            parameters=parameters,
            description=description,
        )

    return command


def w3c_or_mobile(env: EnvironmentPredicates) -> bool:
    return env.is_w3c or env.is_mobile


def legacy_or_mobile(env: EnvironmentPredicates) -> bool:
    # Appium still serves some JSONWire-only commands (geolocation, orientation ...)
    return not env.is_w3c or env.is_mobile


def mobile(env: EnvironmentPredicates) -> bool:
    return env.is_mobile


def chrome(env: EnvironmentPredicates) -> bool:
    return env.is_chrome


def firefox(env: EnvironmentPredicates) -> bool:
    return env.is_firefox


def sauce(env: EnvironmentPredicates) -> bool:
    return env.is_sauce


def selenium_standalone(env: EnvironmentPredicates) -> bool:
    return env.is_selenium_standalone
