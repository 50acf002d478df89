from __future__ import annotations

import logging

from .global_config import PACKAGE_NAME

_LOGGING_CONFIGURED = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure package-wide logging once.

    Library modules only create loggers; applications that want the package's
    records on stderr call this once at startup. Safe to call multiple times;
    only configures on first call.

    Args:
        level: Logging level (defaults to INFO).

    Side Effects:
        - Configures Python logging module globally.
        - Sets module-level flag to prevent reconfiguration.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    logging.basicConfig(level=level, format=LOG_FORMAT)
    _LOGGING_CONFIGURED = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger hooked into the shared configuration.

    Args:
        name: Logger name. Uses the package logger if None.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name or PACKAGE_NAME)
