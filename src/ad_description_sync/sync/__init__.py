"""Comparison, planning and update of computer descriptions."""

from .comparator import Comparator
from .executor import UpdateExecutor
from .planner import plan_updates
from .models import (
    ComputerRecord,
    HostDescriptionResult,
    Classification,
    ComparisonRow,
    ComparisonResult,
    UpdatePlanEntry,
    UpdateMode,
    UpdateOutcome,
    ExecutionReport,
)

__all__ = [
    "Comparator",
    "UpdateExecutor",
    "plan_updates",
    "ComputerRecord",
    "HostDescriptionResult",
    "Classification",
    "ComparisonRow",
    "ComparisonResult",
    "UpdatePlanEntry",
    "UpdateMode",
    "UpdateOutcome",
    "ExecutionReport",
]
