"""Selenium standalone server and grid commands."""

from webdriver.protocols._base import family, param, selenium_standalone

command = family("selenium", selenium_standalone)

COMMANDS = (
    command(
        "POST",
        "/session/:sessionId/se/file",
        "upload_file",
        param("file", description="base64 encoded zip archive"),
    ),
    command("GET", "/session/:sessionId/se/files", "get_downloadable_files"),
    command("POST", "/session/:sessionId/se/files", "download", param("name")),
    command("DELETE", "/session/:sessionId/se/files", "delete_downloadable_files"),
    command("GET", "/grid/api/hub", "get_hub_config"),
    command("GET", "/grid/api/proxy?id=:id", "grid_proxy_details"),
    command("GET", "/lifecycle-manager?action=shutdown", "grid_shutdown"),
)
