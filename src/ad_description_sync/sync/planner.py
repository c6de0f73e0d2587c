"""Select the comparison rows whose directory description should change."""

from typing import Iterable, List

from .models import ComparisonRow, UpdatePlanEntry


def is_synchronized(directory_description: str, local_description: str) -> bool:
    """
    Whether the directory already carries the local description.

    Containment, not equality: "Lab PC01-extra" in the directory counts as
    synchronized with "Lab PC01" on the host. Case-insensitive.
    """
    return local_description.strip().casefold() in directory_description.strip().casefold()


def plan_updates(rows: Iterable[ComparisonRow]) -> List[UpdatePlanEntry]:
    """
    Build the list of directory updates, in comparison table order.

    Rows without a local description are never planned.
    """
    plan = []
    for row in rows:
        local_description = row.local_description.strip()
        if not local_description:
            continue
        if is_synchronized(row.directory_description, local_description):
            continue
        plan.append(UpdatePlanEntry(
            name=row.name,
            directory_description=row.directory_description.strip(),
            local_description=local_description,
        ))
    return plan
