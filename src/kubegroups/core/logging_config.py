#!/usr/bin/env python3
"""
Logging setup for group discovery, driven by LoggingSettings (LOG_* variables)
"""

import logging
import sys
from typing import Optional
from pathlib import Path

from kubegroups.config.settings import LoggingSettings

# Libraries that log every request or model deserialization at debug
NOISY_LOGGERS = ("kubernetes", "urllib3")

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s"


class ColoredFormatter(logging.Formatter):
    """Colors the level name of console records"""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        # Work on a copy so the file handler still sees the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(colored.levelname, self.RESET)
        colored.levelname = f"{color}{colored.levelname}{self.RESET}"
        return super().format(colored)


def _console_handler(log_settings: LoggingSettings, level: int, enable_colors: bool) -> logging.Handler:
    formatter_cls = ColoredFormatter if enable_colors else logging.Formatter
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter_cls(log_settings.format))
    return handler


def _file_handler(log_file: str, level: int) -> logging.Handler:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logging(log_settings: Optional[LoggingSettings] = None, enable_colors: bool = True) -> None:
    """
    Replace the root logger handlers with a console handler and, when
    LOG_FILE is set, a file handler

    Args:
        log_settings: Level, console format and log file; read from the
            environment when omitted
        enable_colors: Whether to color level names on the console
    """
    log_settings = log_settings or LoggingSettings()
    level = getattr(logging, log_settings.level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.addHandler(_console_handler(log_settings, level, enable_colors))
    if log_settings.file:
        root_logger.addHandler(_file_handler(log_settings.file, level))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured at {log_settings.level} level")
    if log_settings.file:
        logger.info(f"Log file: {log_settings.file}")


def get_logger(name: str) -> logging.Logger:
    """Module logger; handlers come from setup_logging on the root logger"""
    return logging.getLogger(name)
