"""Logging setup for the seeding job and the provider clients."""

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional


PACKAGE_LOGGER = "fantasy_engine"

LOG_LEVEL_ENV_VAR = "FANTASY_ENGINE_LOG_LEVEL"
LOG_DIR_ENV_VAR = "FANTASY_ENGINE_LOG_DIR"
LOG_FILE_NAME = "fantasy_engine.log"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotation: 5MB per file, 3 backups
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3

# Third-party loggers held at WARNING
QUIET_LOGGERS = ("urllib3",)


def default_log_dir() -> Path:
    """Log directory from FANTASY_ENGINE_LOG_DIR, else ./logs."""
    env_dir = os.environ.get(LOG_DIR_ENV_VAR)
    return Path(env_dir) if env_dir else Path.cwd() / "logs"


def setup_logging(
    log_level: Optional[str] = None,
    log_dir: Optional[Path] = None,
    log_to_file: bool = True,
) -> logging.Logger:
    """
    Configure the fantasy_engine logger.

    Handlers go on the package logger, not the root logger, so a host
    application keeps its own configuration. Calling this again once
    handlers are attached does nothing.

    Args:
        log_level: Console level name; defaults to FANTASY_ENGINE_LOG_LEVEL
            or INFO.
        log_dir: Directory for the rotating log file; defaults to
            default_log_dir().
        log_to_file: Whether to attach the rotating file handler.

    Returns:
        The package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.handlers:
        return package_logger

    log_level = log_level or os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    level = getattr(logging, log_level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_to_file:
        log_dir = log_dir or default_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / LOG_FILE_NAME, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
        )
        # The file keeps debug output (cache hits, request URLs)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    package_logger.info("Logging initialized (level=%s)", logging.getLevelName(level))
    return package_logger
