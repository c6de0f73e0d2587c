"""Data model for the description comparison and update pipeline."""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


@dataclass
class ComputerRecord:
    """A computer object returned by the directory search."""

    name: str
    directory_description: Optional[str] = None
    dn: Optional[str] = None


class HostStatus(str, Enum):
    OK = "ok"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class HostDescriptionResult:
    """
    Outcome of reading the description stored on one computer.

    An ``OK`` result may carry an empty description; that is a reachable
    host without a local description, not an unreachable one.
    """

    status: HostStatus
    description: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, description: Optional[str]) -> "HostDescriptionResult":
        return cls(HostStatus.OK, description=description)

    @classmethod
    def unreachable(cls, error: str) -> "HostDescriptionResult":
        return cls(HostStatus.UNREACHABLE, error=error)

    @property
    def reachable(self) -> bool:
        return self.status is HostStatus.OK


class Classification(str, Enum):
    """
    Comparison tag of a computer.

    UNREACHABLE completes the tag set but is never attached to a row:
    hosts that cannot be contacted are listed in
    ``ComparisonResult.unreachable`` instead.
    """

    MATCH = "match"
    MISMATCH = "mismatch"
    NO_AD_DESCRIPTION = "no-ad-description"
    NO_LOCAL_DESCRIPTION = "no-local-description"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class ComparisonRow:
    """Trimmed directory and local descriptions of one reachable computer."""

    name: str
    directory_description: str
    local_description: str
    classification: Classification


@dataclass
class ComparisonResult:
    """Rows in directory search order plus the hosts that were skipped."""

    rows: List[ComparisonRow] = field(default_factory=list)
    unreachable: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class UpdatePlanEntry:
    name: str
    directory_description: str
    local_description: str

    def __post_init__(self):
        if not self.local_description:
            raise ValueError(f"Update plan entry for {self.name} has no local description")


class UpdateMode(str, Enum):
    BATCH_ALL = "1"
    INTERACTIVE = "2"

    @classmethod
    def from_choice(cls, choice: Optional[str]) -> Optional["UpdateMode"]:
        """Map the operator's menu answer to a mode; None means quit."""
        try:
            return cls((choice or "").strip())
        except ValueError:
            return None


class UpdateOutcome(str, Enum):
    APPLIED = "Applied"
    SIMULATED = "Simulated"
    FAILED = "Failed"
    SKIPPED = "Skipped"
    CANCELLED = "Cancelled"


@dataclass(frozen=True)
class EntryResult:
    entry: UpdatePlanEntry
    outcome: UpdateOutcome
    detail: Optional[str] = None


@dataclass
class ExecutionReport:
    """Per-entry outcomes of one update run, in plan order."""

    results: List[EntryResult] = field(default_factory=list)

    def add(self, entry: UpdatePlanEntry, outcome: UpdateOutcome, detail: Optional[str] = None) -> EntryResult:
        result = EntryResult(entry, outcome, detail)
        self.results.append(result)
        return result

    @property
    def counts(self) -> Dict[UpdateOutcome, int]:
        counter = Counter(result.outcome for result in self.results)
        return {outcome: counter.get(outcome, 0) for outcome in UpdateOutcome}

    @property
    def cancelled(self) -> bool:
        return any(result.outcome is UpdateOutcome.CANCELLED for result in self.results)

    def summary(self) -> str:
        counts = self.counts
        parts = [f"{outcome.value}: {counts[outcome]}" for outcome in UpdateOutcome if counts[outcome]]
        return f"{len(self.results)} record(s) processed" + (f" ({', '.join(parts)})" if parts else "")
