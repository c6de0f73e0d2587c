"""
AD Description Sync - reconcile Active Directory computer descriptions.

Compares the ``description`` attribute of computer objects in Active Directory
with the description stored on each computer, reports the differences and
updates the directory either in one batch or record by record.
"""

__version__ = "0.1.0"

from .app import DescriptionSyncApp

__all__ = ["DescriptionSyncApp"]
