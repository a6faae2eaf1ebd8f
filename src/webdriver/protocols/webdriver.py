"""Commands of the W3C WebDriver recommendation."""

from webdriver.protocols._base import family, optional, param, w3c_or_mobile

command = family("webdriver", w3c_or_mobile)

COMMANDS = (
    # sessions
    command("DELETE", "/session/:sessionId", "delete_session"),
    command("GET", "/status", "status"),
    command("GET", "/session/:sessionId/timeouts", "get_timeouts"),
    command(
        "POST",
        "/session/:sessionId/timeouts",
        "set_timeouts",
        optional("implicit", "number"),
        optional("pageLoad", "number"),
        optional("script", "number"),
    ),
    # navigation
    command("POST", "/session/:sessionId/url", "navigate_to", param("url")),
    command("GET", "/session/:sessionId/url", "get_url"),
    command("POST", "/session/:sessionId/back", "back"),
    command("POST", "/session/:sessionId/forward", "forward"),
    command("POST", "/session/:sessionId/refresh", "refresh"),
    command("GET", "/session/:sessionId/title", "get_title"),
    # contexts
    command("GET", "/session/:sessionId/window", "get_window_handle"),
    command("DELETE", "/session/:sessionId/window", "close_window"),
    command("POST", "/session/:sessionId/window", "switch_to_window", param("handle")),
    command("POST", "/session/:sessionId/window/new", "create_window", param("type")),
    command("GET", "/session/:sessionId/window/handles", "get_window_handles"),
    command("POST", "/session/:sessionId/frame", "switch_to_frame", param("id", "object")),
    command("POST", "/session/:sessionId/frame/parent", "switch_to_parent_frame"),
    command("GET", "/session/:sessionId/window/rect", "get_window_rect"),
    command(
        "POST",
        "/session/:sessionId/window/rect",
        "set_window_rect",
        optional("x", "number"),
        optional("y", "number"),
        optional("width", "number"),
        optional("height", "number"),
    ),
    command("POST", "/session/:sessionId/window/maximize", "maximize_window"),
    command("POST", "/session/:sessionId/window/minimize", "minimize_window"),
    command("POST", "/session/:sessionId/window/fullscreen", "fullscreen_window"),
    # elements
    command("POST", "/session/:sessionId/element", "find_element", param("using"), param("value")),
    command("POST", "/session/:sessionId/elements", "find_elements", param("using"), param("value")),
    command(
        "POST",
        "/session/:sessionId/element/:elementId/element",
        "find_element_from_element",
        param("using"),
        param("value"),
    ),
    command(
        "POST",
        "/session/:sessionId/element/:elementId/elements",
        "find_elements_from_element",
        param("using"),
        param("value"),
    ),
    command("GET", "/session/:sessionId/element/active", "get_active_element"),
    command("GET", "/session/:sessionId/element/:elementId/selected", "is_element_selected"),
    command("GET", "/session/:sessionId/element/:elementId/attribute/:name", "get_element_attribute"),
    command("GET", "/session/:sessionId/element/:elementId/property/:name", "get_element_property"),
    command("GET", "/session/:sessionId/element/:elementId/css/:propertyName", "get_element_css_value"),
    command("GET", "/session/:sessionId/element/:elementId/text", "get_element_text"),
    command("GET", "/session/:sessionId/element/:elementId/name", "get_element_tag_name"),
    command("GET", "/session/:sessionId/element/:elementId/rect", "get_element_rect"),
    command("GET", "/session/:sessionId/element/:elementId/enabled", "is_element_enabled"),
    command("GET", "/session/:sessionId/element/:elementId/computedrole", "get_element_computed_role"),
    command("GET", "/session/:sessionId/element/:elementId/computedlabel", "get_element_computed_label"),
    command("POST", "/session/:sessionId/element/:elementId/click", "element_click"),
    command("POST", "/session/:sessionId/element/:elementId/clear", "element_clear"),
    command("POST", "/session/:sessionId/element/:elementId/value", "element_send_keys", param("text")),
    # documents
    command("GET", "/session/:sessionId/source", "get_page_source"),
    command("POST", "/session/:sessionId/execute/sync", "execute_script", param("script"), param("args", "array")),
    command(
        "POST",
        "/session/:sessionId/execute/async",
        "execute_async_script",
        param("script"),
        param("args", "array"),
    ),
    # cookies
    command("GET", "/session/:sessionId/cookie", "get_all_cookies"),
    command("POST", "/session/:sessionId/cookie", "add_cookie", param("cookie", "object")),
    command("DELETE", "/session/:sessionId/cookie", "delete_all_cookies"),
    command("GET", "/session/:sessionId/cookie/:name", "get_named_cookie"),
    command("DELETE", "/session/:sessionId/cookie/:name", "delete_cookie"),
    # actions
    command("POST", "/session/:sessionId/actions", "perform_actions", param("actions", "array")),
    command("DELETE", "/session/:sessionId/actions", "release_actions"),
    # user prompts
    command("POST", "/session/:sessionId/alert/dismiss", "dismiss_alert"),
    command("POST", "/session/:sessionId/alert/accept", "accept_alert"),
    command("GET", "/session/:sessionId/alert/text", "get_alert_text"),
    command("POST", "/session/:sessionId/alert/text", "send_alert_text", param("text")),
    # screen capture
    command("GET", "/session/:sessionId/screenshot", "take_screenshot"),
    command("GET", "/session/:sessionId/element/:elementId/screenshot", "take_element_screenshot"),
    # print
    command(
        "POST",
        "/session/:sessionId/print",
        "print_page",
        optional("orientation"),
        optional("scale", "number"),
        optional("background", "boolean"),
        optional("page", "object"),
        optional("margin", "object"),
        optional("shrinkToFit", "boolean"),
        optional("pageRanges", "array"),
    ),
)
