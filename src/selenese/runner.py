"""TestRunner: runs one script-driven test case against an automation handle.

Typical flow:
    runner = TestRunner("http://localhost/tests/login.html")
    passed = runner.run(results, handle, loader)

The runner navigates to its URL when the handle is elsewhere, resolves
every row of the script to a step, and only then executes the steps in
order. The first domain failure is recorded and ends the test case. Any
other error propagates.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from selenese.command.basic import Step
from selenese.command.catalog import CommandCatalog, get_default_catalog
from selenese.errors import DomainFailure
from selenese.handle import AutomationHandle
from selenese.models import ExecutionOutcome, OutcomeKind, TestResults
from selenese.script import ScriptLoader

logger = logging.getLogger(__name__)


class RunState(str, Enum):
    NOT_STARTED = "not_started"
    NAVIGATED = "navigated"
    RESOLVING = "resolving"
    EXECUTING = "executing"
    COMPLETED = "completed"
    ABORTED = "aborted"


class TestRunner:
    """Runs the script found at one URL."""

    __test__ = False

    def __init__(self, url: str, catalog: Optional[CommandCatalog] = None) -> None:
        if not url:
            raise ValueError("A test case needs a URL")
        self.url = url
        self._catalog = catalog
        self.state = RunState.NOT_STARTED
        self.outcomes: List[ExecutionOutcome] = []

    @property
    def catalog(self) -> CommandCatalog:
        if self._catalog is None:
            self._catalog = get_default_catalog()
        return self._catalog

    @property
    def failed(self) -> bool:
        return any(outcome.is_failure for outcome in self.outcomes)

    def run(
        self,
        results: TestResults,
        handle: AutomationHandle,
        loader: ScriptLoader,
    ) -> bool:
        """Run the test case, record its result and return whether it passed."""
        self.state = RunState.NOT_STARTED
        self.outcomes = []

        self._navigate(handle)
        steps = self.find_steps(loader)

        self.state = RunState.EXECUTING
        for step in steps:
            outcome = self._execute(step, handle)
            self.outcomes.append(outcome)
            if outcome.is_failure:
                logger.warning(
                    "%s failed at %s: %s", self.url, step.command, outcome.reason
                )
                results.record_failure(outcome.reason)
                self.state = RunState.COMPLETED
                return False

        results.record_success()
        self.state = RunState.COMPLETED
        logger.debug("%s passed (%d steps)", self.url, len(steps))
        return True

    def _navigate(self, handle: AutomationHandle) -> None:
        try:
            current = handle.current_location()
            if current != self.url:
                logger.debug("Navigating from %s to %s", current, self.url)
                handle.navigate(self.url)
        except Exception:
            self.state = RunState.ABORTED
            raise
        self.state = RunState.NAVIGATED

    def find_steps(self, loader: ScriptLoader) -> List[Step]:
        """Resolve the script's rows to steps; an unknown command aborts the run."""
        self.state = RunState.RESOLVING
        try:
            rows = loader.load_rows(self.url)
            steps = self.catalog.resolve(rows)
        except Exception:
            self.state = RunState.ABORTED
            raise
        logger.debug("Resolved %d steps for %s", len(steps), self.url)
        return steps

    def _execute(self, step: Step, handle: AutomationHandle) -> ExecutionOutcome:
        logger.debug("Executing %s", step.to_string())
        try:
            result = step.execute(handle)
        except DomainFailure as e:
            return ExecutionOutcome(
                kind=OutcomeKind.ASSERTION_FAILED,
                command=step.command,
                reason=str(e) or step.to_string(),
            )
        except Exception as e:
            self.outcomes.append(
                ExecutionOutcome(
                    kind=OutcomeKind.FATAL, command=step.command, reason=str(e)
                )
            )
            self.state = RunState.ABORTED
            raise
        return ExecutionOutcome(
            kind=OutcomeKind.CONTINUE, command=step.command, result=result
        )
