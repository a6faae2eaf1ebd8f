"""Commands of the legacy JSON Wire Protocol."""

from webdriver.protocols._base import family, legacy_or_mobile, optional, param

command = family("jsonwp", legacy_or_mobile)

COMMANDS = (
    command("GET", "/status", "status"),
    command("DELETE", "/session/:sessionId", "delete_session"),
    command("POST", "/session/:sessionId/timeouts", "set_timeouts", param("type"), param("ms", "number")),
    command("POST", "/session/:sessionId/timeouts/async_script", "set_async_timeout", param("ms", "number")),
    command("POST", "/session/:sessionId/timeouts/implicit_wait", "set_implicit_timeout", param("ms", "number")),
    command("POST", "/session/:sessionId/url", "navigate_to", param("url")),
    command("GET", "/session/:sessionId/url", "get_url"),
    command("POST", "/session/:sessionId/back", "back"),
    command("POST", "/session/:sessionId/forward", "forward"),
    command("POST", "/session/:sessionId/refresh", "refresh"),
    command("GET", "/session/:sessionId/title", "get_title"),
    command("GET", "/session/:sessionId/window_handle", "get_window_handle"),
    command("GET", "/session/:sessionId/window_handles", "get_window_handles"),
    command("DELETE", "/session/:sessionId/window", "close_window"),
    command("POST", "/session/:sessionId/window", "switch_to_window", param("name")),
    command("POST", "/session/:sessionId/frame", "switch_to_frame", param("id", "object")),
    command("GET", "/session/:sessionId/window/:windowHandle/size", "get_window_size"),
    command(
        "POST",
        "/session/:sessionId/window/:windowHandle/size",
        "set_window_size",
        param("width", "number"),
        param("height", "number"),
    ),
    command("POST", "/session/:sessionId/window/:windowHandle/maximize", "maximize_window"),
    command("GET", "/session/:sessionId/source", "get_page_source"),
    command("POST", "/session/:sessionId/execute", "execute_script", param("script"), param("args", "array")),
    command(
        "POST",
        "/session/:sessionId/execute_async",
        "execute_async_script",
        param("script"),
        param("args", "array"),
    ),
    command("GET", "/session/:sessionId/cookie", "get_all_cookies"),
    command("POST", "/session/:sessionId/cookie", "add_cookie", param("cookie", "object")),
    command("DELETE", "/session/:sessionId/cookie", "delete_all_cookies"),
    command("DELETE", "/session/:sessionId/cookie/:name", "delete_cookie"),
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
    command("POST", "/session/:sessionId/element/active", "get_active_element"),
    command("POST", "/session/:sessionId/element/:elementId/click", "element_click"),
    command("POST", "/session/:sessionId/element/:elementId/clear", "element_clear"),
    command("POST", "/session/:sessionId/element/:elementId/value", "element_send_keys", param("value", "array")),
    command("GET", "/session/:sessionId/element/:elementId/text", "get_element_text"),
    command("GET", "/session/:sessionId/element/:elementId/name", "get_element_tag_name"),
    command("GET", "/session/:sessionId/element/:elementId/selected", "is_element_selected"),
    command("GET", "/session/:sessionId/element/:elementId/enabled", "is_element_enabled"),
    command("GET", "/session/:sessionId/element/:elementId/displayed", "is_element_displayed"),
    command("GET", "/session/:sessionId/element/:elementId/attribute/:name", "get_element_attribute"),
    command("GET", "/session/:sessionId/element/:elementId/css/:propertyName", "get_element_css_value"),
    command("GET", "/session/:sessionId/element/:elementId/location", "get_element_location"),
    command("GET", "/session/:sessionId/element/:elementId/size", "get_element_size"),
    command("GET", "/session/:sessionId/screenshot", "take_screenshot"),
    command("POST", "/session/:sessionId/keys", "send_keys", param("value", "array")),
    command("POST", "/session/:sessionId/accept_alert", "accept_alert"),
    command("POST", "/session/:sessionId/dismiss_alert", "dismiss_alert"),
    command("GET", "/session/:sessionId/alert_text", "get_alert_text"),
    command("POST", "/session/:sessionId/alert_text", "send_alert_text", param("text")),
    command("GET", "/session/:sessionId/orientation", "get_orientation"),
    command("POST", "/session/:sessionId/orientation", "set_orientation", param("orientation")),
    command("GET", "/session/:sessionId/location", "get_geo_location"),
    command("POST", "/session/:sessionId/location", "set_geo_location", param("location", "object")),
    command("GET", "/session/:sessionId/application_cache/status", "get_application_cache_status"),
    command("GET", "/session/:sessionId/local_storage", "get_local_storage"),
    command("POST", "/session/:sessionId/local_storage", "set_local_storage", param("key"), param("value")),
    command("DELETE", "/session/:sessionId/local_storage", "clear_local_storage"),
    command("GET", "/session/:sessionId/local_storage/key/:key", "get_local_storage_item"),
    command("DELETE", "/session/:sessionId/local_storage/key/:key", "delete_local_storage_item"),
    command("GET", "/session/:sessionId/log/types", "get_log_types"),
    command("POST", "/session/:sessionId/log", "get_logs", param("type")),
    command(
        "POST",
        "/session/:sessionId/moveto",
        "move_to_element",
        optional("element"),
        optional("xoffset", "number"),
        optional("yoffset", "number"),
    ),
    command("POST", "/session/:sessionId/buttondown", "button_down", optional("button", "number")),
    command("POST", "/session/:sessionId/buttonup", "button_up", optional("button", "number")),
    command("POST", "/session/:sessionId/doubleclick", "double_click"),
)
