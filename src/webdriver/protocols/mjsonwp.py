"""Mobile JSON Wire Protocol extensions."""

from webdriver.protocols._base import family, mobile, optional, param

command = family("mjsonwp", mobile)

COMMANDS = (
    command("GET", "/session/:sessionId/contexts", "get_contexts"),
    command("GET", "/session/:sessionId/context", "get_context"),
    command("POST", "/session/:sessionId/context", "switch_context", param("name")),
    command("GET", "/session/:sessionId/network_connection", "get_network_connection"),
    command(
        "POST",
        "/session/:sessionId/network_connection",
        "set_network_connection",
        param("parameters", "object", description="{'type': <bitmask>}"),
    ),
    command("POST", "/session/:sessionId/touch/perform", "touch_perform", param("actions", "array")),
    command(
        "POST",
        "/session/:sessionId/touch/multi/perform",
        "multi_touch_perform",
        param("actions", "array"),
        optional("elementId"),
    ),
    command("GET", "/session/:sessionId/rotation", "get_rotation"),
    command(
        "POST",
        "/session/:sessionId/rotation",
        "set_rotation",
        param("x", "number"),
        param("y", "number"),
        param("z", "number"),
    ),
)
