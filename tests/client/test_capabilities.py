"""Tests for capability negotiation."""

import copy
from typing import Any

import pytest

from webdriver.client.capabilities import is_structured, negotiate
from webdriver.shared.exceptions import NegotiationError
from webdriver.types import StructuredCapabilities


@pytest.mark.parametrize(
    "capabilities",
    [
        {},
        {"browserName": "firefox"},
        {"browserName": "chrome", "goog:chromeOptions": {"args": ["--headless"]}},
        {"platformName": "iOS", "appium:deviceName": "iPhone 15", "appium:automationName": "XCUITest"},
    ],
)
def test_flat_capabilities_are_wrapped(capabilities: dict[str, Any]):
    body = negotiate(capabilities)

    assert body.desired_capabilities == capabilities
    assert body.to_wire()["capabilities"] == {"alwaysMatch": capabilities, "firstMatch": [{}]}


def test_jsonwire_example_request_body():
    body = negotiate({"browserName": "firefox"})

    assert body.to_wire() == {
        "desiredCapabilities": {"browserName": "firefox"},
        "capabilities": {"alwaysMatch": {"browserName": "firefox"}, "firstMatch": [{}]},
    }


def test_empty_flat_capabilities():
    assert negotiate({}).to_wire() == {
        "desiredCapabilities": {},
        "capabilities": {"alwaysMatch": {}, "firstMatch": [{}]},
    }


def test_structured_capabilities_are_kept_and_flattened():
    spec = {
        "alwaysMatch": {"browserName": "firefox", "acceptInsecureCerts": True},
        "firstMatch": [{"browserName": "chrome", "platformName": "linux"}, {"platformName": "mac"}],
    }

    wire = negotiate(spec).to_wire()

    assert wire["capabilities"] == spec
    # firstMatch[0] wins on conflicts
    assert wire["desiredCapabilities"] == {
        "browserName": "chrome",
        "acceptInsecureCerts": True,
        "platformName": "linux",
    }


def test_structured_capabilities_without_first_match_default_to_single_empty_entry():
    wire = negotiate({"alwaysMatch": {"browserName": "firefox"}}).to_wire()

    assert wire["capabilities"] == {"alwaysMatch": {"browserName": "firefox"}, "firstMatch": [{}]}
    assert wire["desiredCapabilities"] == {"browserName": "firefox"}


def test_structured_capabilities_model_input():
    spec = StructuredCapabilities(alwaysMatch={"browserName": "safari"}, firstMatch=[{"platformName": "mac"}])

    wire = negotiate(spec).to_wire()

    assert wire["capabilities"] == {"alwaysMatch": {"browserName": "safari"}, "firstMatch": [{"platformName": "mac"}]}
    assert wire["desiredCapabilities"] == {"browserName": "safari", "platformName": "mac"}


@pytest.mark.parametrize(
    "spec",
    [
        {"browserName": "chrome", "goog:chromeOptions": {"args": ["--headless"]}},
        {"alwaysMatch": {"goog:chromeOptions": {"args": []}}, "firstMatch": [{"browserName": "chrome"}]},
    ],
)
def test_negotiation_does_not_mutate_input(spec: dict[str, Any]):
    original = copy.deepcopy(spec)

    wire = negotiate(spec).to_wire()
    wire["desiredCapabilities"]["goog:chromeOptions"]["args"].append("--mutated")

    assert spec == original


def test_empty_first_match_is_rejected():
    with pytest.raises(NegotiationError, match="at least one entry"):
        negotiate({"alwaysMatch": {"browserName": "firefox"}, "firstMatch": []})


@pytest.mark.parametrize(
    "spec",
    [
        {"alwaysMatch": ["browserName"]},
        {"alwaysMatch": {}, "firstMatch": {"browserName": "firefox"}},
        {"alwaysMatch": {}, "firstMatch": ["firefox"]},
    ],
)
def test_malformed_structured_capabilities_are_rejected(spec: dict[str, Any]):
    with pytest.raises(NegotiationError):
        negotiate(spec)


def test_non_mapping_capabilities_are_rejected():
    with pytest.raises(NegotiationError):
        negotiate(["browserName", "firefox"])  # type: ignore[arg-type]


def test_is_structured():
    assert is_structured({"alwaysMatch": {}})
    assert is_structured({"firstMatch": [{}]})
    assert is_structured(StructuredCapabilities())
    assert not is_structured({"browserName": "firefox"})
    assert not is_structured({})


def test_structured_capabilities_model_extras_are_kept():
    spec = StructuredCapabilities.model_validate(
        {"alwaysMatch": {"browserName": "firefox"}, "firstMatch": [{}], "vendor:extension": {"trace": True}}
    )

    wire = negotiate(spec).to_wire()

    assert wire["capabilities"] == {
        "alwaysMatch": {"browserName": "firefox"},
        "firstMatch": [{}],
        "vendor:extension": {"trace": True},
    }
