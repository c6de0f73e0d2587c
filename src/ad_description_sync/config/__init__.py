"""Configuration module for AD Description Sync."""

from .loader import load_config, validate_config
from .models import (
    ActiveDirectoryConfig,
    SecurityConfig,
    HostQueryConfig,
    LoggingConfig,
    PerformanceConfig,
    SyncConfig,
    Credential,
    Config,
)

__all__ = [
    "load_config",
    "validate_config",
    "ActiveDirectoryConfig",
    "SecurityConfig",
    "HostQueryConfig",
    "LoggingConfig",
    "PerformanceConfig",
    "SyncConfig",
    "Credential",
    "Config",
]
