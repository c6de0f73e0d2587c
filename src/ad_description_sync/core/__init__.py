"""Core functionality for AD Description Sync."""

from .ldap_manager import LDAPManager
from .logging import setup_logging, get_logger

__all__ = ["LDAPManager", "setup_logging", "get_logger"]
