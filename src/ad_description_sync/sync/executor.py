"""Apply planned description updates to the directory."""

from typing import Callable, Optional, Sequence, Tuple

from ..core.logging import get_logger
from .comparator import normalize
from .models import ExecutionReport, UpdateMode, UpdateOutcome, UpdatePlanEntry

logger = get_logger("executor")

CONFIRM_PROMPT = "Update the directory description of {name}? [Y]es / [N]o / [Q]uit: "


def read_confirmation(answer: Optional[str]) -> Optional[bool]:
    """
    Interpret an answer to the per-record prompt.

    Returns True to apply, False to skip and None to quit.
    """
    answer = (answer or "").strip().lower()
    if answer in ("y", "yes"):
        return True
    if answer.startswith("q"):
        return None
    return False


class UpdateExecutor:
    """
    Write planned descriptions to the directory and verify each write.

    Every entry is applied independently: a failed update is reported and
    the next entry is processed.
    """

    def __init__(self, directory, dry_run: bool = False, prompt: Callable[[str], str] = input):
        """
        Args:
            directory: Object with ``set_description`` and ``get_description``
            dry_run: Simulate updates instead of applying them
            prompt: Reads the operator's answer in interactive mode
        """
        self.directory = directory
        self.dry_run = dry_run
        self.prompt = prompt

    def execute(self, plan: Sequence[UpdatePlanEntry], mode: UpdateMode) -> ExecutionReport:
        """
        Apply a plan in batch or interactive mode.

        Args:
            plan: Entries to apply, in order
            mode: BATCH_ALL applies everything, INTERACTIVE asks per entry

        Returns:
            Outcome of every entry in plan order
        """
        if mode is UpdateMode.INTERACTIVE:
            report = self._run_interactive(plan)
        else:
            report = self._run_batch(plan)

        logger.info(report.summary())
        return report

    def _run_batch(self, plan: Sequence[UpdatePlanEntry]) -> ExecutionReport:
        report = ExecutionReport()
        total = len(plan)
        for index, entry in enumerate(plan, start=1):
            logger.info(f"[{index}/{total}] Updating {entry.name}")
            outcome, detail = self._apply(entry)
            self._report(report, entry, outcome, detail)
        return report

    def _run_interactive(self, plan: Sequence[UpdatePlanEntry]) -> ExecutionReport:
        report = ExecutionReport()
        total = len(plan)
        for index, entry in enumerate(plan, start=1):
            logger.info(f"[{index}/{total}] {entry.name}")
            logger.info(f'    Directory description: "{entry.directory_description}"')
            logger.info(f'    Local description:     "{entry.local_description}"')

            try:
                answer = self.prompt(CONFIRM_PROMPT.format(name=entry.name))
            except EOFError:
                answer = ""

            decision = read_confirmation(answer)
            if decision is None:
                remaining = plan[index - 1:]
                for pending in remaining:
                    report.add(pending, UpdateOutcome.CANCELLED, "cancelled by operator")
                logger.warning(f"Update cancelled by operator; {len(remaining)} record(s) not processed")
                break

            if decision:
                outcome, detail = self._apply(entry)
            else:
                outcome, detail = UpdateOutcome.SKIPPED, "declined by operator"
            self._report(report, entry, outcome, detail)
        return report

    def _apply(self, entry: UpdatePlanEntry) -> Tuple[UpdateOutcome, Optional[str]]:
        """Send one update and read it back."""
        try:
            sent = self.directory.set_description(entry.name, entry.local_description, dry_run=self.dry_run)
        except Exception as e:
            if self.dry_run:
                return UpdateOutcome.SIMULATED, f"simulation reported an error: {e}"
            return UpdateOutcome.FAILED, str(e)

        if self.dry_run:
            return UpdateOutcome.SIMULATED, None
        if not sent:
            return UpdateOutcome.FAILED, "directory rejected the update"

        try:
            current = normalize(self.directory.get_description(entry.name))
        except Exception as e:
            return UpdateOutcome.FAILED, f"could not verify update: {e}"

        if current != entry.local_description:
            return UpdateOutcome.FAILED, f'directory still reads "{current}"'
        return UpdateOutcome.APPLIED, None

    def _report(self, report: ExecutionReport, entry: UpdatePlanEntry,
                outcome: UpdateOutcome, detail: Optional[str]) -> None:
        report.add(entry, outcome, detail)

        if outcome is UpdateOutcome.APPLIED:
            logger.info(f'{entry.name}: description updated to "{entry.local_description}"')
        elif outcome is UpdateOutcome.SIMULATED:
            logger.info(f'{entry.name}: update simulated (dry run), description would be "{entry.local_description}"')
        elif outcome is UpdateOutcome.SKIPPED:
            logger.info(f"{entry.name}: skipped")
        else:
            logger.error(f"{entry.name}: update failed ({detail})")
