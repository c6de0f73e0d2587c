"""Logging configuration for AD Description Sync."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config.models import LoggingConfig

ROOT_LOGGER = "ad_description_sync"
TRANSCRIPT_PREFIX = "ADDescriptionSync"

# Records carrying this attribute are written to the transcript only,
# e.g. prompts the terminal already echoed.
TRANSCRIPT_ONLY = {"transcript_only": True}


class ConsoleFilter(logging.Filter):
    """Keep transcript-only records off the console."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not getattr(record, "transcript_only", False)


def transcript_path(config: LoggingConfig, started: Optional[datetime] = None) -> Optional[Path]:
    """
    Build the transcript file path for a run.

    Args:
        config: Logging configuration
        started: Run start time (defaults to now)

    Returns:
        Path of the transcript file, or None when transcripts are disabled
    """
    if not config.transcript_dir:
        return None
    started = started or datetime.now()
    return Path(config.transcript_dir) / f"{TRANSCRIPT_PREFIX}_{started:%Y%m%d_%H%M%S}.log"


def setup_logging(config: LoggingConfig, started: Optional[datetime] = None) -> logging.Logger:
    """
    Setup logging configuration.

    Handlers sit on the package logger, so every module logger under
    ``ad_description_sync`` reaches both the console and the transcript.
    Operator prompts and answers are logged with ``TRANSCRIPT_ONLY``.

    Args:
        config: Logging configuration
        started: Run start time used to name the transcript

    Returns:
        Logger instance
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, config.level))

    # Clear existing handlers
    logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, config.level))
    console_handler.setFormatter(logging.Formatter(config.console_format))
    console_handler.addFilter(ConsoleFilter())
    logger.addHandler(console_handler)

    # Transcript handler (if configured)
    log_file = transcript_path(config, started)
    if log_file:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
            file_handler.setLevel(getattr(logging, config.level))
            file_handler.setFormatter(logging.Formatter(config.format))
            logger.addHandler(file_handler)

            logger.info(f"Transcript started, output file is {log_file}")

        except Exception as e:
            logger.warning(f"Could not start transcript: {e}")

    # Suppress some noisy loggers
    for noisy in ("ldap3", "urllib3", "requests_ntlm", "winrm"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logger.debug(f"Logging initialized at level: {config.level}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def log_ldap_operation(operation: str, dn: str, success: bool, details: Optional[str] = None) -> None:
    """
    Log LDAP operation for audit purposes.

    Args:
        operation: Operation type (search, modify, ...)
        dn: Distinguished name involved
        success: Whether operation was successful
        details: Additional details
    """
    logger = get_logger("audit")

    status = "SUCCESS" if success else "FAILED"
    message = f"LDAP {operation.upper()} {status}: {dn}"

    if details:
        message += f" - {details}"

    if success:
        logger.info(message)
    else:
        logger.warning(message)
