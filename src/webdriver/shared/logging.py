"""Logging utilities for the WebDriver client.

Only loggers in the ``webdriver`` namespace are configured here. Application
level logging (the root logger) is never touched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler

WEBDRIVER_LOGGER_NAME = "webdriver"
LOG_FILE_NAME = "webdriver.log"

LogLevel = Literal["trace", "debug", "info", "warn", "error", "silent"]

TRACE = 5
SILENT = logging.CRITICAL + 10

_LEVELS: dict[str, int] = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "silent": SILENT,
}

logging.addLevelName(TRACE, "TRACE")
logging.addLevelName(SILENT, "SILENT")


def get_logger(name: str) -> logging.Logger:
    """Get a logger by name.

    Args:
        name: The name of the logger, usually a ``webdriver.*`` module path.

    Returns:
        The logger instance.
    """
    return logging.getLogger(name)


def to_logging_level(level: str | int) -> int:
    """Translate a WebDriver log level name (or a stdlib level) into a stdlib level number."""
    if isinstance(level, int):
        return level
    try:
        return _LEVELS[level.lower()]
    except KeyError:
        raise ValueError(f"Unknown log level: {level!r}") from None


def resolve_log_path(prior: str | None, output_dir: str | Path | None) -> str | None:
    """Decide where diagnostic output of a handshake is written.

    An already established path wins unconditionally. Otherwise the log file
    goes inside ``output_dir`` when one was given, else it stays unset.
    """
    if prior:
        return prior
    if output_dir is not None:
        return str(Path(output_dir) / LOG_FILE_NAME)
    return None


def _is_own_handler(handler: logging.Handler) -> bool:
    return getattr(handler, "_webdriver_handler", False)


def _install_handler(logger: logging.Logger, log_path: str | None) -> None:
    for existing in logger.handlers:
        if not _is_own_handler(existing):
            continue
        if log_path is None and isinstance(existing, RichHandler):
            return
        if log_path is not None and getattr(existing, "baseFilename", None) == str(Path(log_path).absolute()):
            return

    for existing in [h for h in logger.handlers if _is_own_handler(h)]:
        logger.removeHandler(existing)
        existing.close()

    handler: logging.Handler
    if log_path is not None:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    else:
        handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True)
    handler._webdriver_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


def configure_logging(
    level: str | int | None = None,
    log_levels: Mapping[str, str | int] | None = None,
    *,
    log_path: str | None = None,
    logger_names: Iterable[str] = (WEBDRIVER_LOGGER_NAME,),
) -> None:
    """Configure logging for the WebDriver client.

    Installs a file handler writing to ``log_path`` on the ``webdriver``
    namespace logger, or a rich console handler on stderr when no path is set.
    Repeated calls with the same destination do not add duplicate handlers.

    Per-logger overrides in ``log_levels`` are applied first. The global
    ``level`` is then applied to each of ``logger_names`` that does not carry
    an override of its own.

    Args:
        level: Global log level (``trace``, ``debug``, ``info``, ``warn``,
            ``error``, ``silent`` or a stdlib level).
        log_levels: Per-logger level overrides, keyed by logger name.
        log_path: File that receives the diagnostic output.
        logger_names: Loggers the global level applies to.
    """
    _install_handler(logging.getLogger(WEBDRIVER_LOGGER_NAME), log_path)

    overrides = dict(log_levels or {})
    for name, override in overrides.items():
        logging.getLogger(name).setLevel(to_logging_level(override))

    if level is None:
        return
    for name in logger_names:
        if name in overrides:
            continue
        logging.getLogger(name).setLevel(to_logging_level(level))
