# -*- coding: utf-8 -*-
"""
Logging configuration.

Every engine module logs through a child of the "stepflow" logger, so
navigation moves, guard vetoes and bounds violations can be filtered by
module. Console output is always on; the rotating file is opt-in
(STEPFLOW_LOG_TO_FILE) because the engine usually runs inside a host UI.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def setup_logger() -> logging.Logger:
    """
    Setup engine logger with console and optional file handlers.
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    # Create logger
    logger = logging.getLogger("stepflow")
    logger.setLevel(logging.DEBUG)

    # Clear existing handlers
    logger.handlers.clear()

    # File handler with rotation
    if Config.LOG_TO_FILE:
        Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            Config.LOG_PATH,
            maxBytes=Config.LOG_MAX_BYTES,
            backupCount=Config.LOG_BACKUP_COUNT,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, Config.LOG_LEVEL, logging.INFO))
    console_formatter = logging.Formatter(
        "%(levelname)-8s | %(message)s"
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
