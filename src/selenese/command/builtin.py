"""Commands the interpreter provides itself rather than deriving from a capability."""

from __future__ import annotations

from typing import Dict, Iterator

from selenese.command.basic import EchoStep, Step, StepFactory
from selenese.models import Row


def _echo(remaining_rows: Iterator[Row], target: str, value: str) -> Step:
    return EchoStep("echo", target)


BUILTIN_FACTORIES: Dict[str, StepFactory] = {
    "echo": _echo,
}
