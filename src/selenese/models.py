"""Script and result models: capability descriptors, rows, outcomes, results."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field


class CapabilityMethod(BaseModel):
    """One primitive operation an automation handle exposes, by name and arity."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Method name")
    arity: Literal[0, 1, 2] = Field(..., description="Number of string arguments")

    def build_args(self, target: str, value: str) -> List[str]:
        """Bind row fields positionally: index 0 is the target, index 1 the value."""
        return [target, value][: self.arity]


def _cell_text(cell: Any) -> str:
    return "" if cell is None else str(cell)


class Row(BaseModel):
    """A single script instruction."""

    model_config = ConfigDict(frozen=True)

    command: str
    target: str = ""
    value: str = ""

    @classmethod
    def from_cells(cls, cells: Union[Sequence[Any], Dict[str, Any]]) -> "Row":
        """Build a row from a ``[command, target, value]`` list or a mapping."""
        if isinstance(cells, dict):
            return cls(
                command=_cell_text(cells["command"]),
                target=_cell_text(cells.get("target")),
                value=_cell_text(cells.get("value")),
            )
        if isinstance(cells, (str, bytes)) or not isinstance(cells, Sequence):
            raise ValueError(f"A row must be a list or a mapping, got {cells!r}")
        if len(cells) < 3:
            raise ValueError(f"A row needs three cells, got {len(cells)}")
        return cls(
            command=_cell_text(cells[0]),
            target=_cell_text(cells[1]),
            value=_cell_text(cells[2]),
        )

    def to_string(self) -> str:
        return f"{self.command} | {self.target} | {self.value}"


class OutcomeKind(str, Enum):
    """What executing one step did to the test case."""

    CONTINUE = "continue"
    ASSERTION_FAILED = "assertion_failed"
    FATAL = "fatal"


class ExecutionOutcome(BaseModel):
    """The outcome of a single step."""

    kind: OutcomeKind
    command: str = ""
    reason: Optional[str] = None
    result: Any = None

    @property
    def is_failure(self) -> bool:
        return self.kind != OutcomeKind.CONTINUE


class TestResults:
    """Counts successes and failures across one or more test-case runs.

    Safe to share between runners executing on different threads.
    """

    __test__ = False

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._successes = 0
        self._failures: List[str] = []

    def record_success(self) -> None:
        with self._lock:
            self._successes += 1

    def record_failure(self, reason: str) -> None:
        with self._lock:
            self._failures.append(reason)

    @property
    def successes(self) -> int:
        return self._successes

    @property
    def failures(self) -> int:
        return len(self._failures)

    @property
    def failure_reasons(self) -> List[str]:
        with self._lock:
            return list(self._failures)

    @property
    def total(self) -> int:
        return self.successes + self.failures

    @property
    def passed(self) -> bool:
        return not self._failures

    def summary(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "total": self._successes + len(self._failures),
                "successes": self._successes,
                "failures": len(self._failures),
                "failure_reasons": list(self._failures),
            }
