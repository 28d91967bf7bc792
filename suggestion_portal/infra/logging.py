"""
Infrastructure layer - logging.

Single place that configures the root logger for the portal client.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL
}

_CONSOLE_FORMAT = '%(asctime)s [%(levelname)s] [%(name)s] %(message)s'
_FILE_FORMAT = '%(asctime)s [%(levelname)s] [%(name)s:%(lineno)d] %(message)s'
_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class LoggerManager:
    """Process-wide logger registry."""

    _loggers: Dict[str, logging.Logger] = {}
    _configured: bool = False
    _log_file: Optional[Path] = None

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Return a logger, configuring the root logger on first use.

        Args:
            name: logger name, normally ``__name__``
        """
        if not cls._configured:
            cls._configure_logging()

        if name not in cls._loggers:
            cls._loggers[name] = logging.getLogger(name)

        return cls._loggers[name]

    @classmethod
    def _configure_logging(cls):
        if cls._configured:
            return

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.INFO)

        # streamlit (and pytest) may already own the console handlers
        if not root_logger.handlers:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT))
            root_logger.addHandler(console_handler)

        if cls._log_file:
            cls._add_file_handler_internal(cls._log_file, root_logger)

        cls._configured = True

    @classmethod
    def _add_file_handler_internal(cls, log_file: Path, logger: logging.Logger) -> None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT))
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not attach log file {log_file}: {e}")

    @classmethod
    def set_log_file(cls, log_file: Path) -> None:
        if cls._log_file == log_file:
            return
        cls._log_file = log_file
        if cls._configured:
            cls._add_file_handler_internal(log_file, logging.getLogger())

    @classmethod
    def set_level(cls, level: str) -> None:
        if level.upper() in _LEVELS:
            logging.getLogger().setLevel(_LEVELS[level.upper()])

    @classmethod
    def reset(cls) -> None:
        """Forget configuration (tests only)."""
        cls._loggers.clear()
        cls._configured = False
        cls._log_file = None


def get_logger(name: str) -> logging.Logger:
    return LoggerManager.get_logger(name)


def set_log_level(level: str) -> None:
    LoggerManager.set_level(level)


def configure_from_settings(settings) -> None:
    """Apply the log level and optional log file from ``PortalSettings``."""
    if settings.log_file:
        LoggerManager.set_log_file(Path(settings.log_file))
    LoggerManager.get_logger(__name__)
    set_log_level(settings.log_level)
