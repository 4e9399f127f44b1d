"""selenese: a command-table interpreter for Selenese test scripts.

Core exports for library usage.
"""

from selenese._version import __version__
from selenese.config import RunnerConfig, configure, get_runner_config
from selenese.errors import (
    AssertionFailed,
    CatalogConsistencyError,
    DomainFailure,
    FatalInvocationError,
    InvalidPatternError,
    SeleneseError,
    UnknownCommandError,
)
from selenese.models import (
    CapabilityMethod,
    ExecutionOutcome,
    OutcomeKind,
    Row,
    TestResults,
)
from selenese.capabilities import SELENIUM_CAPABILITIES
from selenese.handle import AutomationHandle, CallableHandle
from selenese.command.basic import Step, StepFactory
from selenese.command.catalog import CommandCatalog, get_default_catalog
from selenese.script import JsonScriptLoader, ScriptLoader, StaticScriptLoader
from selenese.runner import RunState, TestRunner

__all__ = [
    "__version__",
    # Config
    "RunnerConfig",
    "configure",
    "get_runner_config",
    # Errors
    "SeleneseError",
    "DomainFailure",
    "AssertionFailed",
    "UnknownCommandError",
    "FatalInvocationError",
    "CatalogConsistencyError",
    "InvalidPatternError",
    # Models
    "CapabilityMethod",
    "Row",
    "OutcomeKind",
    "ExecutionOutcome",
    "TestResults",
    "SELENIUM_CAPABILITIES",
    # Handles
    "AutomationHandle",
    "CallableHandle",
    # Command layer
    "Step",
    "StepFactory",
    "CommandCatalog",
    "get_default_catalog",
    # Scripts and running
    "ScriptLoader",
    "StaticScriptLoader",
    "JsonScriptLoader",
    "RunState",
    "TestRunner",
]
