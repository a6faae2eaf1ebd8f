"""Chromium (chromedriver) specific commands."""

from webdriver.protocols._base import chrome, family, optional, param

command = family("chromium", chrome)

COMMANDS = (
    command("GET", "/session/:sessionId/alert_open", "is_alert_open"),
    command("GET", "/session/:sessionId/autoreport", "is_auto_reporting"),
    command("POST", "/session/:sessionId/autoreport", "set_auto_reporting", param("enabled", "boolean")),
    command("GET", "/session/:sessionId/element/:elementId/value", "get_element_value"),
    command("POST", "/session/:sessionId/element/:elementId/hover", "element_hover"),
    command(
        "POST",
        "/session/:sessionId/touch/pinch",
        "touch_pinch",
        param("x", "number"),
        param("y", "number"),
        param("scale", "number"),
    ),
    command("POST", "/session/:sessionId/goog/page/freeze", "freeze_current_page"),
    command("POST", "/session/:sessionId/goog/page/resume", "resume_current_page"),
    command("GET", "/session/:sessionId/chromium/network_conditions", "get_network_conditions"),
    command(
        "POST",
        "/session/:sessionId/chromium/network_conditions",
        "set_network_conditions",
        param("network_conditions", "object"),
        optional("network_name"),
    ),
    command("DELETE", "/session/:sessionId/chromium/network_conditions", "delete_network_conditions"),
    command(
        "POST",
        "/session/:sessionId/chromium/send_command",
        "send_command",
        param("cmd"),
        param("params", "object"),
    ),
    command(
        "POST",
        "/session/:sessionId/chromium/send_command_and_get_result",
        "send_command_and_get_result",
        param("cmd"),
        param("params", "object"),
    ),
    command("POST", "/session/:sessionId/file", "upload_file", param("file", description="base64 encoded zip archive")),
    command("POST", "/session/:sessionId/chromium/launch_app", "launch_chrome_app", param("id")),
    command("GET", "/session/:sessionId/goog/cast/get_sinks", "get_cast_sinks"),
    command("POST", "/session/:sessionId/goog/cast/set_sink_to_use", "select_cast_sink", param("sinkName")),
    command("POST", "/session/:sessionId/goog/cast/start_tab_mirroring", "start_cast_tab_mirroring", param("sinkName")),
    command("GET", "/session/:sessionId/goog/cast/get_issue_message", "get_cast_issue_message"),
    command("POST", "/session/:sessionId/goog/cast/stop_casting", "stop_casting", param("sinkName")),
    command("POST", "/shutdown", "shutdown"),
)
