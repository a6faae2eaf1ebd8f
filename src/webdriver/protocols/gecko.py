"""Firefox (geckodriver) specific commands."""

from webdriver.protocols._base import family, firefox, optional, param

command = family("gecko", firefox)

COMMANDS = (
    command("GET", "/session/:sessionId/moz/context", "get_moz_context"),
    command("POST", "/session/:sessionId/moz/context", "set_moz_context", param("context")),
    command(
        "POST",
        "/session/:sessionId/moz/addon/install",
        "install_addon",
        param("addon", description="base64 encoded extension"),
        optional("temporary", "boolean"),
    ),
    command("POST", "/session/:sessionId/moz/addon/uninstall", "uninstall_addon", param("id")),
    command("GET", "/session/:sessionId/moz/screenshot/full", "full_page_screenshot"),
)
