"""Command layer: naming rules, steps and the command catalog."""

from selenese.command.basic import (
    AndWaitStep,
    AssertStep,
    EchoStep,
    InvokeStep,
    Step,
    StepFactory,
)
from selenese.command.catalog import (
    CommandCatalog,
    get_default_catalog,
    reset_default_catalog,
)

__all__ = [
    "Step",
    "StepFactory",
    "InvokeStep",
    "AssertStep",
    "AndWaitStep",
    "EchoStep",
    "CommandCatalog",
    "get_default_catalog",
    "reset_default_catalog",
]
