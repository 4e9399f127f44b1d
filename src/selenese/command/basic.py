"""Steps: executable units bound to one capability method and its arguments."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, List, Sequence

from selenese.errors import (
    AssertionFailed,
    DomainFailure,
    FatalInvocationError,
    InvalidPatternError,
    find_domain_failure,
)
from selenese.handle import AutomationHandle
from selenese.matching import normalize_actual, selenese_equals
from selenese.models import CapabilityMethod, Row

logger = logging.getLogger(__name__)


def invoke_capability(
    handle: AutomationHandle, method_name: str, args: Sequence[str]
) -> Any:
    """Invoke a capability, separating domain failures from fatal errors.

    A DomainFailure raised directly, or buried in the cause chain of another
    exception, is re-raised as is. Any other exception becomes a
    FatalInvocationError chained to the original.
    """
    try:
        return handle.invoke(method_name, list(args))
    except DomainFailure:
        raise
    except Exception as e:
        failure = find_domain_failure(e)
        if failure is not None:
            raise failure
        logger.exception("Invocation of %s %s failed", method_name, list(args))
        raise FatalInvocationError(method_name, args) from e


def expected_value(method: CapabilityMethod, target: str, value: str) -> str:
    """The row field holding the value an assert/verify command expects."""
    if method.arity == 0:
        return target
    if method.arity == 1:
        return value
    raise ValueError(f"Unable to find expected result: {method.name}")


class Step(ABC):
    """The abstract step interface.

    Steps compare by value (same class, same fields) and are unhashable.
    """

    def __init__(self, command: str, args: Sequence[str] = ()) -> None:
        self.command = command
        self.args: List[str] = list(args)

    @abstractmethod
    def execute(self, handle: AutomationHandle) -> Any:
        pass

    def to_string(self) -> str:
        args_str = ", ".join(repr(arg) for arg in self.args)
        return f"{self.command}({args_str})"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.to_string()}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Step):
            return NotImplemented
        return type(self) is type(other) and self.__dict__ == other.__dict__


class InvokeStep(Step):
    """Calls the capability method with the row's arguments."""

    def __init__(self, command: str, method: CapabilityMethod, args: Sequence[str]):
        super().__init__(command, args)
        self.method = method

    def execute(self, handle: AutomationHandle) -> Any:
        return invoke_capability(handle, self.method.name, self.args)


class AssertStep(InvokeStep):
    """Calls an accessor and compares what it returned with the expected value.

    ``negated`` steps fail when the values match. assert and verify commands
    both build this step; verify has no soft-failure mode.
    """

    def __init__(
        self,
        command: str,
        method: CapabilityMethod,
        args: Sequence[str],
        expected: str,
        negated: bool = False,
        pattern_matching: bool = True,
    ):
        super().__init__(command, method, args)
        self.expected = expected
        self.negated = negated
        self.pattern_matching = pattern_matching

    def execute(self, handle: AutomationHandle) -> None:
        seen = invoke_capability(handle, self.method.name, self.args)
        try:
            matched = selenese_equals(self.expected, seen, self.pattern_matching)
        except re.error as e:
            raise InvalidPatternError(self.command, self.expected, str(e)) from e
        if matched == self.negated:
            relation = "not to match" if self.negated else "to match"
            raise AssertionFailed(
                f"{self.command}: expected {normalize_actual(seen)!r} "
                f"{relation} {self.expected!r}",
                expected=self.expected,
                actual=seen,
            )
        return None


class AndWaitStep(InvokeStep):
    """Calls the capability method, then the wait capability with a fixed timeout.

    The wait is issued after a domain failure too, before the failure
    propagates. A fatal error skips it.
    """

    def __init__(
        self,
        command: str,
        method: CapabilityMethod,
        args: Sequence[str],
        wait_command: str,
        timeout: str,
    ):
        super().__init__(command, method, args)
        self.wait_command = wait_command
        self.timeout = timeout

    def execute(self, handle: AutomationHandle) -> Any:
        try:
            result = invoke_capability(handle, self.method.name, self.args)
        except DomainFailure:
            self._wait(handle)
            raise
        self._wait(handle)
        return result

    def _wait(self, handle: AutomationHandle) -> None:
        invoke_capability(handle, self.wait_command, [self.timeout])


class EchoStep(Step):
    """Logs its message without touching the handle."""

    def __init__(self, command: str, message: str):
        super().__init__(command, [message])
        self.message = message

    def execute(self, handle: AutomationHandle) -> str:
        logger.info("echo: %s", self.message)
        return self.message


StepFactory = Callable[[Iterator[Row], str, str], Step]
