"""Base class for Active Directory tools."""

from typing import Any

from ldap3.core.exceptions import LDAPException

from ..core.ldap_manager import LDAPManager
from ..core.logging import get_logger, log_ldap_operation


class BaseTool:
    """Base class for tools operating on the directory."""

    def __init__(self, ldap_manager: LDAPManager):
        """
        Initialize base tool.

        Args:
            ldap_manager: LDAP manager instance
        """
        self.ldap = ldap_manager
        self.logger = get_logger(self.__class__.__name__)

    def _handle_ldap_error(self, e: Exception, operation: str, dn: str = "") -> None:
        """
        Log an LDAP error and record it in the audit log.

        Args:
            e: Exception that occurred
            operation: Operation that failed
            dn: Distinguished name or computer name (if applicable)
        """
        error_msg = str(e)

        if isinstance(e, LDAPException):
            self.logger.error(f"LDAP error during {operation}: {error_msg}")
        else:
            self.logger.error(f"Unexpected error during {operation}: {error_msg}")

        if dn:
            log_ldap_operation(operation, dn, False, error_msg)

    def _escape_ldap_filter(self, value: str) -> str:
        """
        Escape special characters in LDAP filter values.

        Args:
            value: Value to escape

        Returns:
            Escaped value
        """
        # Backslash first so the escapes added below are not escaped again
        escape_chars = {
            '\\': r'\5c',
            '*': r'\2a',
            '(': r'\28',
            ')': r'\29',
            '\x00': r'\00'
        }

        for char, escaped in escape_chars.items():
            value = value.replace(char, escaped)

        return value

    def _escape_name_pattern(self, pattern: str) -> str:
        """
        Escape a name pattern for a filter, keeping ``*`` as a wildcard.

        A pattern without any wildcard matches names that contain it.
        """
        pattern = pattern.strip()
        escaped = '*'.join(self._escape_ldap_filter(part) for part in pattern.split('*'))
        if '*' not in pattern:
            escaped = f"*{escaped}*"
        return escaped

    @staticmethod
    def _first_value(value: Any) -> Any:
        """Single value of a possibly multi-valued attribute."""
        if isinstance(value, (list, tuple)):
            return value[0] if value else None
        return value
