"""Tools for Active Directory and host operations."""

from .base import BaseTool
from .computer import ComputerDirectory
from .host import HostDescriptionQuery

__all__ = [
    "BaseTool",
    "ComputerDirectory",
    "HostDescriptionQuery",
]
