"""Pair directory descriptions with the descriptions stored on each computer."""

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from ..core.logging import get_logger
from .models import (
    Classification,
    ComparisonResult,
    ComparisonRow,
    ComputerRecord,
    HostDescriptionResult,
)

logger = get_logger("comparator")


def normalize(value: Optional[str]) -> str:
    """Trim leading and trailing whitespace; absent values become ''."""
    return (value or "").strip()


def classify(directory_description: str, local_description: str) -> Classification:
    if not directory_description:
        return Classification.NO_AD_DESCRIPTION
    if not local_description:
        return Classification.NO_LOCAL_DESCRIPTION
    if directory_description == local_description:
        return Classification.MATCH
    return Classification.MISMATCH


class Comparator:
    """
    Build the comparison table for a directory search result.

    Hosts that cannot be contacted are left out of the table; missing
    descriptions on either side are warned about but kept.
    """

    def __init__(self, host_query, max_workers: int = 1):
        """
        Args:
            host_query: Object with ``get_local_description(name)``
            max_workers: Hosts queried at once; 1 queries them one by one
        """
        self.host_query = host_query
        self.max_workers = max_workers

    def _query(self, name: str) -> HostDescriptionResult:
        try:
            result = self.host_query.get_local_description(name)
        except Exception as e:
            return HostDescriptionResult.unreachable(str(e) or type(e).__name__)
        if result is None:
            return HostDescriptionResult.unreachable("no result")
        return result

    def _query_all(self, records: List[ComputerRecord]) -> List[HostDescriptionResult]:
        names = [record.name for record in records]
        if self.max_workers <= 1 or len(names) <= 1:
            return [self._query(name) for name in names]
        # map() yields results in submission order
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            return list(pool.map(self._query, names))

    def compare(self, records: Iterable[ComputerRecord]) -> ComparisonResult:
        """
        Compare directory and local descriptions, preserving input order.

        Args:
            records: Computers from the directory search

        Returns:
            Rows for every reachable computer and the names of the others
        """
        records = list(records)
        result = ComparisonResult()

        for record, host in zip(records, self._query_all(records)):
            if not host.reachable:
                logger.warning(f"{record.name}: unable to contact host ({host.error})")
                result.unreachable.append(record.name)
                continue

            directory_description = normalize(record.directory_description)
            if not directory_description:
                logger.warning(f"{record.name}: no directory description")

            local_description = normalize(host.description)
            if not local_description:
                logger.warning(f"{record.name}: no local description")

            if directory_description != local_description:
                logger.warning(f'{record.name}: needs update (directory "{directory_description}", local "{local_description}")')

            result.rows.append(ComparisonRow(
                name=record.name,
                directory_description=directory_description,
                local_description=local_description,
                classification=classify(directory_description, local_description),
            ))

        logger.debug(f"Compared {len(result.rows)} computers, {len(result.unreachable)} unreachable")
        return result
