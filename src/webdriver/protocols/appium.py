"""Appium specific commands."""

from webdriver.protocols._base import family, mobile, optional, param

command = family("appium", mobile)

COMMANDS = (
    # device
    command("GET", "/session/:sessionId/appium/device/system_time", "get_device_time"),
    command("POST", "/session/:sessionId/appium/device/shake", "shake"),
    command("POST", "/session/:sessionId/appium/device/lock", "lock", optional("seconds", "number")),
    command("POST", "/session/:sessionId/appium/device/unlock", "unlock"),
    command("POST", "/session/:sessionId/appium/device/is_locked", "is_locked"),
    command(
        "POST",
        "/session/:sessionId/appium/device/press_keycode",
        "press_key_code",
        param("keycode", "number"),
        optional("metastate", "number"),
        optional("flags", "number"),
    ),
    command(
        "POST",
        "/session/:sessionId/appium/device/long_press_keycode",
        "long_press_key_code",
        param("keycode", "number"),
        optional("metastate", "number"),
        optional("flags", "number"),
    ),
    command("GET", "/session/:sessionId/appium/device/current_activity", "get_current_activity"),
    command("GET", "/session/:sessionId/appium/device/current_package", "get_current_package"),
    command(
        "POST",
        "/session/:sessionId/appium/device/start_activity",
        "start_activity",
        param("appPackage"),
        param("appActivity"),
        optional("appWaitPackage"),
        optional("appWaitActivity"),
    ),
    command("POST", "/session/:sessionId/appium/device/install_app", "install_app", param("appPath")),
    command(
        "POST",
        "/session/:sessionId/appium/device/activate_app",
        "activate_app",
        optional("appId"),
        optional("bundleId"),
    ),
    command(
        "POST",
        "/session/:sessionId/appium/device/remove_app",
        "remove_app",
        optional("appId"),
        optional("bundleId"),
    ),
    command(
        "POST",
        "/session/:sessionId/appium/device/terminate_app",
        "terminate_app",
        optional("appId"),
        optional("bundleId"),
    ),
    command(
        "POST",
        "/session/:sessionId/appium/device/app_installed",
        "is_app_installed",
        optional("appId"),
        optional("bundleId"),
    ),
    command(
        "POST",
        "/session/:sessionId/appium/device/app_state",
        "query_app_state",
        optional("appId"),
        optional("bundleId"),
    ),
    command(
        "POST",
        "/session/:sessionId/appium/device/hide_keyboard",
        "hide_keyboard",
        optional("strategy"),
        optional("key"),
    ),
    command("GET", "/session/:sessionId/appium/device/is_keyboard_shown", "is_keyboard_shown"),
    command("POST", "/session/:sessionId/appium/device/push_file", "push_file", param("path"), param("data")),
    command("POST", "/session/:sessionId/appium/device/pull_file", "pull_file", param("path")),
    command("POST", "/session/:sessionId/appium/device/pull_folder", "pull_folder", param("path")),
    command("POST", "/session/:sessionId/appium/device/toggle_airplane_mode", "toggle_airplane_mode"),
    command("POST", "/session/:sessionId/appium/device/toggle_data", "toggle_data"),
    command("POST", "/session/:sessionId/appium/device/toggle_wifi", "toggle_wifi"),
    command("POST", "/session/:sessionId/appium/device/toggle_location_services", "toggle_location_services"),
    command("POST", "/session/:sessionId/appium/device/open_notifications", "open_notifications"),
    command("GET", "/session/:sessionId/appium/device/display_density", "get_display_density"),
    command("GET", "/session/:sessionId/appium/device/system_bars", "get_system_bars"),
    # app
    command("POST", "/session/:sessionId/appium/app/launch", "launch_app"),
    command("POST", "/session/:sessionId/appium/app/close", "close_app"),
    command("POST", "/session/:sessionId/appium/app/reset", "reset"),
    command("POST", "/session/:sessionId/appium/app/background", "background", optional("seconds", "number")),
    command(
        "POST",
        "/session/:sessionId/appium/app/strings",
        "get_strings",
        optional("language"),
        optional("stringFile"),
    ),
    # recording and performance
    command(
        "POST",
        "/session/:sessionId/appium/start_recording_screen",
        "start_recording_screen",
        optional("options", "object"),
    ),
    command(
        "POST",
        "/session/:sessionId/appium/stop_recording_screen",
        "stop_recording_screen",
        optional("options", "object"),
    ),
    command("POST", "/session/:sessionId/appium/performanceData/types", "get_performance_data_types"),
    command(
        "POST",
        "/session/:sessionId/appium/getPerformanceData",
        "get_performance_data",
        param("packageName"),
        param("dataType"),
        optional("dataReadTimeout", "number"),
    ),
    # settings
    command("GET", "/session/:sessionId/appium/settings", "get_settings"),
    command("POST", "/session/:sessionId/appium/settings", "update_settings", param("settings", "object")),
)
