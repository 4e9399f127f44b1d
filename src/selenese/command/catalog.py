"""CommandCatalog: the immutable mapping from script command name to step factory.

Each capability method contributes its own name and an ``AndWait`` variant.
Accessor methods (``getFoo`` / ``isFoo`` with at most one argument) also
contribute ``assertFoo``, ``assertNotFoo``, ``verifyFoo`` and ``verifyNotFoo``.
Reserved names are never registered, neither directly nor as the basis of
derived commands.
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import (
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Set,
)

from selenese.command import naming
from selenese.command.basic import (
    AndWaitStep,
    AssertStep,
    InvokeStep,
    Step,
    StepFactory,
    expected_value,
)
from selenese.command.builtin import BUILTIN_FACTORIES
from selenese.config import RunnerConfig, get_runner_config
from selenese.errors import CatalogConsistencyError, UnknownCommandError
from selenese.models import CapabilityMethod, Row

logger = logging.getLogger(__name__)


def _invoke_factory(command: str, method: CapabilityMethod) -> StepFactory:
    def factory(remaining_rows: Iterator[Row], target: str, value: str) -> Step:
        return InvokeStep(command, method, method.build_args(target, value))

    return factory


def _assert_factory(
    command: str, method: CapabilityMethod, negated: bool, pattern_matching: bool
) -> StepFactory:
    def factory(remaining_rows: Iterator[Row], target: str, value: str) -> Step:
        return AssertStep(
            command,
            method,
            method.build_args(target, value),
            expected=expected_value(method, target, value),
            negated=negated,
            pattern_matching=pattern_matching,
        )

    return factory


def _and_wait_factory(
    command: str, method: CapabilityMethod, wait_command: str, timeout: str
) -> StepFactory:
    def factory(remaining_rows: Iterator[Row], target: str, value: str) -> Step:
        return AndWaitStep(
            command, method, method.build_args(target, value), wait_command, timeout
        )

    return factory


class CommandCatalog(Mapping[str, StepFactory]):
    """An immutable command-name to step-factory mapping built in a single pass."""

    def __init__(
        self,
        capabilities: Iterable[CapabilityMethod],
        reserved_names: Optional[Iterable[str]] = None,
        config: Optional[RunnerConfig] = None,
        include_builtins: bool = True,
    ) -> None:
        self.config = config or get_runner_config()
        self.reserved_names = frozenset(
            self.config.reserved_names if reserved_names is None else reserved_names
        )
        self._factories: Dict[str, StepFactory] = {}
        self._methods: Dict[str, CapabilityMethod] = {}
        self._build(capabilities, include_builtins)
        self._factories = MappingProxyType(self._factories)
        logger.info("Command catalog built with %d commands", len(self._factories))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _build(
        self, capabilities: Iterable[CapabilityMethod], include_builtins: bool
    ) -> None:
        seen_names: Set[str] = set(self.reserved_names)
        timeout = self.config.and_wait_timeout_arg
        pattern_matching = self.config.pattern_matching

        for method in capabilities:
            if method.name in seen_names:
                logger.debug("Skipping capability %s", method.name)
                continue
            seen_names.add(method.name)

            self._methods[method.name] = method
            self._put(method.name, _invoke_factory(method.name, method))

            # assertFoo, assertNotFoo, verifyFoo, verifyNotFoo
            negations = (False, True, False, True)
            for command, negated in zip(naming.assertion_names(method), negations):
                self._put(
                    command,
                    _assert_factory(command, method, negated, pattern_matching),
                )

            and_wait = naming.and_wait_name(method)
            self._put(
                and_wait,
                _and_wait_factory(and_wait, method, self.config.wait_command, timeout),
            )

        if include_builtins:
            for name, factory in BUILTIN_FACTORIES.items():
                self._put(name, factory)

    def _put(self, name: str, factory: StepFactory) -> None:
        if name in self.reserved_names:
            raise CatalogConsistencyError(name, "derived name is reserved")
        if name in self._factories:
            raise CatalogConsistencyError(name)
        self._factories[name] = factory

    # ------------------------------------------------------------------
    # Mapping interface
    # ------------------------------------------------------------------

    def __getitem__(self, name: str) -> StepFactory:
        return self._factories[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    @property
    def command_names(self) -> List[str]:
        return sorted(self._factories)

    @property
    def methods(self) -> Mapping[str, CapabilityMethod]:
        """The capability methods that contributed commands, by name."""
        return MappingProxyType(self._methods)

    def create_step(
        self, row: Row, remaining_rows: Optional[Iterator[Row]] = None
    ) -> Step:
        """Build the step for ``row``, or raise UnknownCommandError."""
        factory = self._factories.get(row.command)
        if factory is None:
            raise UnknownCommandError(row.command)
        if remaining_rows is None:
            remaining_rows = iter(())
        return factory(remaining_rows, row.target, row.value)

    def resolve(self, rows: Iterable[Row]) -> List[Step]:
        """Resolve every row to a step before any of them runs.

        The first unknown command aborts resolution; no steps are returned.
        """
        steps: List[Step] = []
        row_iterator = iter(rows)
        for row in row_iterator:
            steps.append(self.create_step(row, row_iterator))
        return steps


# Process-wide default catalog, built once on first use
_default_catalog: Optional[CommandCatalog] = None
_default_lock = threading.Lock()


def get_default_catalog() -> CommandCatalog:
    """Return the catalog for the default capability set, building it once."""
    global _default_catalog
    catalog = _default_catalog
    if catalog is not None:
        return catalog
    with _default_lock:
        if _default_catalog is None:
            from selenese.capabilities import SELENIUM_CAPABILITIES

            _default_catalog = CommandCatalog(SELENIUM_CAPABILITIES)
        return _default_catalog


def reset_default_catalog() -> None:
    """Drop the memoized default catalog; the next access rebuilds it."""
    global _default_catalog
    with _default_lock:
        _default_catalog = None
