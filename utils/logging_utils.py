"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of Design Overlay, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Design Overlay Logging Utilities
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

from core import config


def setup_logging() -> None:
    """
    Setup centralized logging for the host application.
    Uses configuration from settings. File handlers are only
    attached when a log directory is configured.
    """
    level = getattr(logging, config.settings.log_level.upper())

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console handler for development
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if config.settings.file_logging:
        Path(config.settings.log_dir).mkdir(parents=True, exist_ok=True)

        # Main log file with everything
        log_file = os.path.join(config.settings.log_dir, "overlay.log")
        time_handler = logging.handlers.TimedRotatingFileHandler(
            filename=log_file,
            when=config.settings.log_rotation_interval,
            interval=1,
            backupCount=config.settings.log_rotation_count,
            encoding="utf-8",
        )
        time_handler.setLevel(level)
        time_handler.setFormatter(formatter)
        root_logger.addHandler(time_handler)

        # Separate error log
        error_log_file = os.path.join(config.settings.log_dir, "overlay_errors.log")
        error_handler = logging.handlers.RotatingFileHandler(
            filename=error_log_file,
            maxBytes=config.settings.log_max_bytes,
            backupCount=config.settings.log_backup_count,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        root_logger.addHandler(error_handler)

    # Projection runs on every resize, keep it quiet unless debugging
    logging.getLogger("overlay").setLevel(
        logging.DEBUG if config.settings.debug else level
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.
    """
    return logging.getLogger(name)
