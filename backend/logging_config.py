"""Centralized logging configuration for backend services."""

from __future__ import annotations

import logging
import os

from smartyplants.exceptions import ConfigurationError

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    *,
    level: str | None = None,
    format: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    include_uvicorn: bool = True,
) -> logging.Logger:
    """Configure application logging.

    Args:
        level: Optional explicit log level. Falls back to the
            ``SMARTYPLANTS_LOG_LEVEL`` env var or INFO when not provided.
        format: Log format string.
        datefmt: Date format string.
        include_uvicorn: Whether to align uvicorn loggers with the backend level.

    Raises:
        ConfigurationError: If the level is not a standard logging level name.

    Returns:
        The application logger for the backend (``smartyplants.backend``).
    """

    raw_level = level if level is not None else os.getenv("SMARTYPLANTS_LOG_LEVEL")
    resolved_level = (raw_level or "INFO").upper()
    if not isinstance(logging.getLevelName(resolved_level), int):
        raise ConfigurationError(f"Unknown log level: {raw_level!r}")
    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)

    app_logger = logging.getLogger("smartyplants.backend")
    app_logger.setLevel(resolved_level)

    # Game rules and route handlers log under their module names
    for package_logger in ("smartyplants", "backend"):
        logging.getLogger(package_logger).setLevel(resolved_level)

    if include_uvicorn:
        for uvicorn_logger in ("uvicorn", "uvicorn.error", "uvicorn.access"):
            logging.getLogger(uvicorn_logger).setLevel(resolved_level)

    app_logger.debug("Logging configured", extra={"level": resolved_level})
    return app_logger
