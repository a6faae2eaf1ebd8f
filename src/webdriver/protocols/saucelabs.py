"""Sauce Labs extensions."""

from webdriver.protocols._base import family, optional, param, sauce

command = family("saucelabs", sauce)

COMMANDS = (
    command("GET", "/session/:sessionId/log/:type", "get_page_logs"),
    command(
        "POST",
        "/session/:sessionId/sauce/ondemand/throttle/network",
        "sauce_throttle_network",
        param("condition", "object"),
    ),
    command("POST", "/session/:sessionId/sauce/ondemand/throttle/cpu", "throttle_cpu", param("rate", "number")),
    command("POST", "/session/:sessionId/sauce/ondemand/intercept", "intercept_request", param("rule", "object")),
    command(
        "POST",
        "/session/:sessionId/sauce/ondemand/performance/scenario",
        "assert_performance",
        param("name"),
        optional("metrics", "array"),
    ),
    command("POST", "/session/:sessionId/sauce/ondemand/performance/scenario/jankiness", "jankiness_check"),
    command("POST", "/session/:sessionId/sauce/ondemand/mock", "mock_request", param("url"), optional("method")),
)
