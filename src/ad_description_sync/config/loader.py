"""Configuration loader for AD Description Sync."""

import json
import os
import logging
from pathlib import Path
from typing import Optional

from .models import Config

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "AD_DESC_SYNC_CONFIG"


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from JSON file.

    Args:
        config_path: Path to configuration file. If None, uses AD_DESC_SYNC_CONFIG
                    environment variable.

    Returns:
        Config: Loaded and validated configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
        json.JSONDecodeError: If config file is not valid JSON
    """
    # Determine config file path
    if config_path is None:
        config_path = os.getenv(CONFIG_ENV_VAR)
        if not config_path:
            raise ValueError(
                f"No configuration file specified. Either provide config_path or set {CONFIG_ENV_VAR} environment variable."
            )

    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.info(f"Loading configuration from: {config_path}")

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = json.load(f)

        config = Config(**config_data)
        logger.info("Configuration loaded successfully")

        # Log configuration summary (without sensitive data)
        logger.debug(f"AD Server: {config.active_directory.server}")
        logger.debug(f"Domain: {config.active_directory.domain}")
        logger.debug(f"Search base: {config.active_directory.computer_search_base}")
        logger.debug(f"WinRM transport: {config.host_query.transport}")
        logger.debug(f"Dry run: {config.sync.dry_run}")

        return config

    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in configuration file: {e}")
        raise
    except Exception as e:
        logger.error(f"Error loading configuration: {e}")
        raise


def validate_config(config: Config) -> None:
    """
    Perform additional validation on configuration.

    Only logs warnings; nothing here is fatal.

    Args:
        config: Configuration to validate
    """
    ad = config.active_directory
    base_dn = ad.base_dn.lower()

    if not ad.computer_search_base.lower().endswith(base_dn):
        logger.warning(f"Search base {ad.computer_search_base} is not under base DN {ad.base_dn}")

    if ad.bind_dn and not ad.bind_dn.lower().endswith(base_dn):
        logger.warning(f"Bind DN {ad.bind_dn} is not under base DN")

    # Check SSL configuration
    if ad.use_ssl and config.security.enable_tls:
        if not ad.server.startswith('ldaps://'):
            logger.warning("SSL enabled but server URL doesn't use ldaps://")

    if config.host_query.transport in ('plaintext', 'ssl') and not config.host_query.use_https:
        logger.warning(f"WinRM transport '{config.host_query.transport}' sends credentials without message encryption over HTTP")

    if config.sync.dry_run:
        logger.info("Dry run enabled: directory updates will be simulated")

    logger.debug("Configuration validation completed")
