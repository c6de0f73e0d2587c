"""
Interactive entry point for AD Description Sync.

This module wires the tool together for one operator run:
- Configuration loading and validation
- Logging and the per-run transcript
- Credential prompts for the directory and for the computers
- Directory search, host queries, comparison table and update plan
- Batch or interactive update of the directory descriptions
"""

import getpass
import os
import sys
from typing import Callable, List, Optional

from .config.loader import CONFIG_ENV_VAR, load_config, validate_config
from .config.models import Credential
from .core.ldap_manager import LDAPManager
from .core.logging import TRANSCRIPT_ONLY, setup_logging
from .sync.comparator import Comparator
from .sync.executor import UpdateExecutor
from .sync.models import ComparisonRow, UpdateMode, UpdateOutcome, UpdatePlanEntry
from .sync.planner import plan_updates
from .tools.computer import ComputerDirectory
from .tools.host import HostDescriptionQuery

MODE_PROMPT = (
    "Select how to apply the updates:\n"
    "  1) Update all records\n"
    "  2) Confirm each record\n"
    "  Anything else) Quit without changes (default)\n"
    "Choice: "
)


class SearchTermError(ValueError):
    """Raised when the operator does not enter a search term."""


def format_table(headers: List[str], rows: List[List[str]]) -> List[str]:
    """Render rows as fixed-width text lines."""
    widths = [len(header) for header in headers]
    for row in rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

    def line(cells):
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    return [line(headers), line(["-" * width for width in widths])] + [line(row) for row in rows]


class DescriptionSyncApp:
    """One run of the description reconciliation."""

    def __init__(self,
                 config_path: Optional[str] = None,
                 prompt: Callable[[str], str] = input,
                 secret_prompt: Callable[[str], str] = getpass.getpass):
        """
        Initialize the application.

        Args:
            config_path: Path to configuration file
            prompt: Reads a line of operator input
            secret_prompt: Reads a password without echo
        """
        self.config = load_config(config_path)

        self.logger = setup_logging(self.config.logging)
        self.logger.info(f"Configuration loaded from {config_path or os.getenv(CONFIG_ENV_VAR)}")
        validate_config(self.config)

        self.prompt = prompt
        self.secret_prompt = secret_prompt

    def _ask(self, question: str) -> str:
        """Read operator input and record the exchange in the transcript."""
        try:
            answer = self.prompt(question)
        except EOFError:
            self.logger.info(f"{question}<end of input>", extra=TRANSCRIPT_ONLY)
            raise
        self.logger.info(f"{question}{answer}", extra=TRANSCRIPT_ONLY)
        return answer

    def _ask_secret(self, question: str) -> str:
        # The password itself never reaches the transcript
        self.logger.info(f"{question}********", extra=TRANSCRIPT_ONLY)
        return self.secret_prompt(question)

    def _read_search_term(self) -> str:
        term = (self._ask("Computer name to search for (wildcards allowed): ") or "").strip()
        if not term:
            raise SearchTermError("A search term is required")
        return term

    def _read_credential(self, label: str) -> Optional[Credential]:
        """Ask for an account; a blank username keeps the ambient identity."""
        username = (self._ask(f"{label} username (blank to use your current identity): ") or "").strip()
        if not username:
            return None
        password = self._ask_secret(f"Password for {username}: ")
        return Credential(username=username, password=password)

    def _show_comparison(self, rows: List[ComparisonRow]) -> None:
        lines = format_table(
            ["Name", "Directory description", "Local description", "Status"],
            [[row.name, row.directory_description, row.local_description, row.classification.value] for row in rows]
        )
        for line in lines:
            self.logger.info(line)

    def _show_plan(self, plan: List[UpdatePlanEntry]) -> None:
        self.logger.info(f"{len(plan)} computer(s) need their directory description updated:")
        lines = format_table(
            ["Name", "Current directory description", "New description"],
            [[entry.name, entry.directory_description, entry.local_description] for entry in plan]
        )
        for line in lines:
            self.logger.info(line)

    def run(self) -> int:
        """
        Run the reconciliation.

        Returns:
            Process exit status
        """
        try:
            search_term = self._read_search_term()
        except SearchTermError as e:
            self.logger.error(str(e))
            return 1

        directory_credential = self._read_credential("Directory")
        host_credential = self._read_credential("Computer")

        if self.config.sync.dry_run:
            self.logger.warning("Dry run: directory updates will be simulated, nothing will be changed")

        with LDAPManager(self.config.active_directory,
                         self.config.security,
                         self.config.performance,
                         credential=directory_credential) as ldap_manager:
            connection_info = ldap_manager.test_connection()
            if not connection_info.get('connected'):
                self.logger.error(f"Could not connect to the directory: {connection_info.get('error')}")
                return 1
            self.logger.info(f"Connected to {connection_info.get('server')} as {connection_info.get('user')}")

            directory = ComputerDirectory(ldap_manager)
            try:
                records = directory.search(search_term)
            except Exception as e:
                self.logger.error(f"Directory search failed: {e}")
                return 1

            if not records:
                self.logger.info(f"No computers found matching '{search_term}'")
                return 0
            self.logger.info(f"Found {len(records)} computer(s) matching '{search_term}', querying local descriptions...")

            comparator = Comparator(
                HostDescriptionQuery(self.config.host_query, host_credential),
                max_workers=self.config.host_query.max_workers
            )
            comparison = comparator.compare(records)
            if comparison.unreachable:
                self.logger.warning(f"{len(comparison.unreachable)} computer(s) could not be contacted: {', '.join(comparison.unreachable)}")
            if not comparison.rows:
                self.logger.warning("None of the matching computers could be contacted, nothing to compare")
                return 0
            self._show_comparison(comparison.rows)

            plan = plan_updates(comparison.rows)
            if not plan:
                self.logger.info("All directory descriptions are already synchronized")
                return 0
            self._show_plan(plan)

            mode = UpdateMode.from_choice(self._ask(MODE_PROMPT))
            if mode is None:
                self.logger.info("No changes made")
                return 0

            executor = UpdateExecutor(directory, dry_run=self.config.sync.dry_run, prompt=self._ask)
            report = executor.execute(plan, mode)

        return 1 if report.counts[UpdateOutcome.FAILED] else 0


def main():
    """Main entry point for the command line tool."""
    config_path = sys.argv[1] if len(sys.argv) > 1 else os.getenv(CONFIG_ENV_VAR)
    if not config_path:
        print(f"Pass a configuration file or set the {CONFIG_ENV_VAR} environment variable")
        sys.exit(1)

    try:
        app = DescriptionSyncApp(config_path)
        sys.exit(app.run())
    except KeyboardInterrupt:
        print("\nCancelled, no further changes made.")
        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
