"""Sanity checks for the command catalogue."""

from collections import Counter

import pytest

from webdriver.protocols import PROTOCOLS, REGISTRY, protocol_commands
from webdriver.types import EnvironmentPredicates


def test_registry_order():
    assert list(PROTOCOLS) == ["jsonwp", "webdriver", "mjsonwp", "appium", "chromium", "gecko", "saucelabs", "selenium"]
    assert len(REGISTRY) == sum(len(commands) for commands in PROTOCOLS.values())


@pytest.mark.parametrize("name", list(PROTOCOLS))
def test_names_are_unique_within_a_family(name: str):
    duplicates = [command for command, count in Counter(c.name for c in protocol_commands(name)).items() if count > 1]

    assert duplicates == []


@pytest.mark.parametrize("name", list(PROTOCOLS))
def test_every_command_belongs_to_its_family(name: str):
    assert {command.protocol for command in protocol_commands(name)} == {name}


def test_only_post_commands_have_body_parameters():
    offenders = [command.name for command in REGISTRY if command.method != "POST" and command.parameters]

    assert offenders == []


def test_url_variables_do_not_include_session_id():
    command = next(c for c in protocol_commands("webdriver") if c.name == "get_element_attribute")

    assert command.url_variables == ("elementId", "name")


def test_session_commands_use_the_session_placeholder():
    for command in REGISTRY:
        if command.endpoint.startswith("/session/"):
            assert command.endpoint.startswith("/session/:sessionId"), command.name


@pytest.mark.parametrize(
    ("name", "environment", "applicable"),
    [
        ("webdriver", EnvironmentPredicates(is_w3c=True), True),
        ("webdriver", EnvironmentPredicates(is_mobile=True), True),
        ("webdriver", EnvironmentPredicates(), False),
        ("jsonwp", EnvironmentPredicates(), True),
        ("jsonwp", EnvironmentPredicates(is_w3c=True, is_mobile=True), True),
        ("jsonwp", EnvironmentPredicates(is_w3c=True), False),
        ("appium", EnvironmentPredicates(is_mobile=True), True),
        ("appium", EnvironmentPredicates(is_w3c=True), False),
        ("chromium", EnvironmentPredicates(is_chrome=True), True),
        ("gecko", EnvironmentPredicates(is_firefox=True), True),
        ("saucelabs", EnvironmentPredicates(is_sauce=True), True),
        ("selenium", EnvironmentPredicates(is_selenium_standalone=True), True),
        ("selenium", EnvironmentPredicates(is_w3c=True, is_chrome=True), False),
    ],
)
def test_family_applicability(name: str, environment: EnvironmentPredicates, applicable: bool):
    assert all(command.is_applicable(environment) is applicable for command in protocol_commands(name))


def test_unknown_family():
    with pytest.raises(ValueError, match="Unknown protocol family"):
        protocol_commands("netscape")
