"""Error taxonomy for catalog construction, script resolution and execution.

Only ``DomainFailure`` and its subclasses are recorded as test failures.
Everything else propagates to whoever started the run.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class SeleneseError(Exception):
    """Base class for all errors raised by this package."""


class DomainFailure(SeleneseError):
    """An expected, script-level failure (element not found, not possible).

    Automation handles raise this, or a subclass, for conditions a test
    script is allowed to run into.
    """


class AssertionFailed(DomainFailure):
    """An assert/verify command saw a value it did not expect."""

    def __init__(
        self, reason: str, expected: Optional[str] = None, actual: Any = None
    ) -> None:
        super().__init__(reason)
        self.reason = reason
        self.expected = expected
        self.actual = actual


class UnknownCommandError(SeleneseError):
    """A script row names a command the catalog does not contain."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Unknown command: {command}")
        self.command = command


class FatalInvocationError(SeleneseError):
    """Invoking the automation handle failed for a reason other than a domain failure."""

    def __init__(self, method_name: str, args: Sequence[str]) -> None:
        super().__init__(f"Unable to emulate {method_name} {list(args)}")
        self.method_name = method_name
        self.invocation_args = list(args)


class CatalogConsistencyError(SeleneseError):
    """Two catalog entries derived the same command name."""

    def __init__(self, name: str, detail: str = "") -> None:
        message = f"Duplicate command name in catalog: {name}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.name = name


def find_domain_failure(error: BaseException) -> Optional[DomainFailure]:
    """Walk the explicit ``__cause__`` chain of ``error`` looking for a DomainFailure.

    Implicit context is not followed: an error raised while handling a
    DomainFailure is a new error, not that failure.
    """
    seen = set()
    cause: Optional[BaseException] = error
    while cause is not None and id(cause) not in seen:
        if isinstance(cause, DomainFailure):
            return cause
        seen.add(id(cause))
        cause = cause.__cause__
    return None


class InvalidPatternError(SeleneseError):
    """An assert/verify command carries a regular expression that does not compile."""

    def __init__(self, command: str, pattern: str, detail: str = "") -> None:
        message = f"{command}: invalid pattern {pattern!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.command = command
        self.pattern = pattern
