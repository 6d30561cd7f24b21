"""Logging helpers.

firesql never configures logging when it is imported. Package loggers take
their level from `settings.LOG_LEVEL` and add no handlers; an application
that wants the package's standard output format calls `setup_global_logging`.
"""

import logging
from typing import Optional

from firesql.settings import settings as api_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

_configured = False


def _resolve_level(level: Optional[str]) -> int:
    return _LEVELS.get((level or "").upper(), logging.INFO)


def setup_global_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once in the standard format.

    Args:
        level: Log level name (e.g., "DEBUG", "INFO"); defaults to settings.LOG_LEVEL
    """
    global _configured
    if _configured:
        return
    logging.basicConfig(level=_resolve_level(level or api_settings.LOG_LEVEL), format=LOG_FORMAT)
    _configured = True


def get_logger(name: Optional[str] = None) -> "Logger":
    """Return a package logger, usually for `__name__`."""
    return Logger(name or __name__)


class Logger:
    """Named logger whose level follows settings.LOG_LEVEL."""

    def __init__(self, name: Optional[str] = None) -> None:
        self._logger = logging.getLogger(name or __name__)
        self._logger.setLevel(_resolve_level(api_settings.LOG_LEVEL))

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)
