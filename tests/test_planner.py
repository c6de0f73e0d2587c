"""Tests for the update planner."""

import pytest

from ad_description_sync.sync.comparator import classify
from ad_description_sync.sync.models import ComparisonRow, UpdatePlanEntry
from ad_description_sync.sync.planner import is_synchronized, plan_updates


def row(name, directory_description, local_description):
    return ComparisonRow(name, directory_description, local_description,
                         classify(directory_description, local_description))


def test_mismatches_are_planned_in_order():
    rows = [
        row("PC02", "Old name", "Lab PC02"),
        row("PC01", "Reception", "Reception"),
        row("PC03", "Spare", "Finance"),
    ]

    plan = plan_updates(rows)

    assert plan == [
        UpdatePlanEntry("PC02", "Old name", "Lab PC02"),
        UpdatePlanEntry("PC03", "Spare", "Finance"),
    ]


def test_empty_local_description_never_planned():
    plan = plan_updates([row("PC01", "Reception", ""), row("PC02", "", "")])

    assert plan == []


def test_contained_description_counts_as_synchronized():
    """'Lab PC01' on the host is already in 'Lab PC01-extra'."""
    plan = plan_updates([row("PC01", "Lab PC01-extra", "Lab PC01")])

    assert plan == []


def test_containment_is_case_insensitive():
    assert is_synchronized("LAB PC01 - second floor", "lab pc01")
    assert not is_synchronized("Lab PC01", "Lab PC01-extra")


def test_missing_directory_description_is_planned():
    plan = plan_updates([row("WKS7", "", "Finance-WKS7")])

    assert plan == [UpdatePlanEntry("WKS7", "", "Finance-WKS7")]


def test_plan_entry_requires_local_description():
    with pytest.raises(ValueError):
        UpdatePlanEntry("PC01", "Reception", "")
