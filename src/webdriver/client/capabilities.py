"""Capability negotiation between the legacy and the W3C dialect.

The create-session body always carries both ``desiredCapabilities`` (legacy,
flat) and ``capabilities`` (W3C, ``alwaysMatch``/``firstMatch``) so that a
remote end understanding either dialect can process it.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from webdriver.shared.exceptions import NegotiationError
from webdriver.types import CapabilitySpec, NegotiatedRequestBody, StructuredCapabilities

STRUCTURED_KEYS = frozenset({"alwaysMatch", "firstMatch"})


def is_structured(spec: CapabilitySpec) -> bool:
    """Return True if ``spec`` uses the W3C ``alwaysMatch``/``firstMatch`` form."""
    if isinstance(spec, StructuredCapabilities):
        return True
    return any(key in spec for key in STRUCTURED_KEYS)


def _structured_parts(spec: CapabilitySpec) -> tuple[dict[str, Any], list[dict[str, Any]]]:
    if isinstance(spec, StructuredCapabilities):
        always_match: Any = spec.always_match
        first_match: Any = spec.first_match
    else:
        always_match = spec.get("alwaysMatch", {})
        first_match = spec.get("firstMatch", [{}])

    if not isinstance(always_match, Mapping):
        raise NegotiationError("alwaysMatch must be a mapping of capability names to values")
    if isinstance(first_match, (str, bytes)) or not isinstance(first_match, (list, tuple)):
        raise NegotiationError("firstMatch must be a sequence of capability mappings")
    if not first_match:
        raise NegotiationError("firstMatch must contain at least one entry")
    if not all(isinstance(entry, Mapping) for entry in first_match):
        raise NegotiationError("every firstMatch entry must be a mapping of capability names to values")

    return copy.deepcopy(dict(always_match)), [copy.deepcopy(dict(entry)) for entry in first_match]


def negotiate(spec: CapabilitySpec) -> NegotiatedRequestBody:
    """Build the create-session body for a capability specification.

    Structured input is sent unchanged as ``capabilities`` and flattened into
    ``desiredCapabilities`` by overlaying the first ``firstMatch`` entry on
    ``alwaysMatch``. Flat input is sent unchanged as ``desiredCapabilities``
    and wrapped as ``{"alwaysMatch": spec, "firstMatch": [{}]}``.

    The input is never mutated.

    Raises:
        NegotiationError: If the structured form is malformed, e.g. an empty
            ``firstMatch``.
    """
    if not isinstance(spec, (Mapping, StructuredCapabilities)):
        raise NegotiationError(f"capabilities must be a mapping, got {type(spec).__name__}")

    if is_structured(spec):
        always_match, first_match = _structured_parts(spec)
        desired = {**always_match, **first_match[0]}
        source = (spec.model_extra or {}) if isinstance(spec, StructuredCapabilities) else spec
        extra = {key: copy.deepcopy(value) for key, value in source.items() if key not in STRUCTURED_KEYS}
        structured = StructuredCapabilities.model_validate(
            {**extra, "alwaysMatch": always_match, "firstMatch": first_match}
        )
        return NegotiatedRequestBody(desiredCapabilities=desired, capabilities=structured)

    flat = copy.deepcopy(dict(spec))
    return NegotiatedRequestBody(
        desiredCapabilities=flat,
        capabilities=StructuredCapabilities(alwaysMatch=copy.deepcopy(flat), firstMatch=[{}]),
    )
