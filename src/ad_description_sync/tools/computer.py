"""Computer description operations against Active Directory."""

from typing import List, Optional

from ldap3 import MODIFY_REPLACE

from .base import BaseTool
from ..core.logging import log_ldap_operation
from ..sync.models import ComputerRecord

COMPUTER_ATTRIBUTES = ['cn', 'description']


class ComputerDirectory(BaseTool):
    """Reads and writes the ``description`` attribute of computer objects."""

    @property
    def search_base(self) -> str:
        return self.ldap.ad_config.computer_search_base

    def search(self, name_pattern: str) -> List[ComputerRecord]:
        """
        Find computer objects whose name matches a pattern.

        Args:
            name_pattern: Computer name pattern; ``*`` is a wildcard and a
                pattern without one matches names containing it

        Returns:
            Matching computers in the order the directory returned them

        Raises:
            LDAPException: If the search fails
        """
        search_filter = f"(&(objectClass=computer)(cn={self._escape_name_pattern(name_pattern)}))"

        self.logger.debug(f"Searching computers in {self.search_base} with {search_filter}")

        try:
            results = self.ldap.search(
                search_base=self.search_base,
                search_filter=search_filter,
                attributes=COMPUTER_ATTRIBUTES
            )
        except Exception as e:
            self._handle_ldap_error(e, "search_computers", self.search_base)
            raise

        computers = []
        for entry in results:
            attributes = entry['attributes']
            name = self._first_value(attributes.get('cn')) or self._name_from_dn(entry['dn'])
            computers.append(ComputerRecord(
                name=name,
                directory_description=self._first_value(attributes.get('description')),
                dn=entry['dn']
            ))

        log_ldap_operation("search_computers", self.search_base, True, f"Found {len(computers)} computers matching '{name_pattern}'")
        return computers

    def get_description(self, name: str) -> Optional[str]:
        """
        Read the current directory description of a computer.

        Args:
            name: Computer name (cn)

        Returns:
            The description, or None when it is not set

        Raises:
            LookupError: If the computer does not exist
            LDAPException: If the search fails
        """
        entry = self._find_computer(name)
        if entry is None:
            raise LookupError(f"Computer '{name}' not found")
        return self._first_value(entry['attributes'].get('description'))

    def set_description(self, name: str, description: str, dry_run: bool = False) -> bool:
        """
        Replace the directory description of a computer.

        With ``dry_run`` the change is only reported, never sent.

        Args:
            name: Computer name (cn)
            description: New description
            dry_run: Simulate the update

        Returns:
            True if the update was sent (or simulated) successfully
        """
        try:
            entry = self._find_computer(name)
            if entry is None:
                log_ldap_operation("set_description", name, False, "Computer not found")
                self.logger.error(f"Computer '{name}' not found")
                return False

            computer_dn = entry['dn']

            if dry_run:
                self.logger.info(f'What if: Performing the operation "Set" on target "{computer_dn}" (description = "{description}")')
                return True

            success = self.ldap.modify(computer_dn, {
                'description': [(MODIFY_REPLACE, [description])]
            })

            if success:
                log_ldap_operation("set_description", computer_dn, True, f'description = "{description}"')
                return True

            log_ldap_operation("set_description", computer_dn, False, "Modify returned no success")
            return False

        except Exception as e:
            self._handle_ldap_error(e, "set_description", name)
            return False

    def _find_computer(self, name: str) -> Optional[dict]:
        """Look up a single computer entry by exact name."""
        results = self.ldap.search(
            search_base=self.search_base,
            search_filter=f"(&(objectClass=computer)(cn={self._escape_ldap_filter(name)}))",
            attributes=COMPUTER_ATTRIBUTES
        )
        return results[0] if results else None

    @staticmethod
    def _name_from_dn(dn: str) -> str:
        first_rdn = dn.split(',', 1)[0]
        return first_rdn.split('=', 1)[-1]
