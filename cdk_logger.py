"""
Logging helpers for the CDK side of the application.

All loggers share one stream handler and one level, set with
``CDKLogger.set_level``.
"""

import logging
import sys
from typing import Dict

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class CDKLogger:
    _level = logging.INFO
    _handler = None
    _loggers: Dict[str, logging.Logger] = {}

    @classmethod
    def _get_handler(cls) -> logging.Handler:
        if cls._handler is None:
            cls._handler = logging.StreamHandler(sys.stderr)
            cls._handler.setFormatter(logging.Formatter(LOG_FORMAT))
        return cls._handler

    @classmethod
    def set_level(cls, level) -> None:
        """Set the level for every logger created through this class."""
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
        cls._level = level
        for logger in cls._loggers.values():
            logger.setLevel(level)

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        if name not in cls._loggers:
            logger = logging.getLogger(f"cdk.{name}")
            logger.setLevel(cls._level)
            logger.addHandler(cls._get_handler())
            logger.propagate = False
            cls._loggers[name] = logger
        return cls._loggers[name]


def get_logger(name: str) -> logging.Logger:
    return CDKLogger.get_logger(name)
