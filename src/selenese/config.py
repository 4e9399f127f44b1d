from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

DEFAULT_RESERVED_NAMES: FrozenSet[str] = frozenset(
    {
        "addCustomRequestHeader",
        "allowNativeXpath",
        "pause",
        "rollup",
        "setBrowserLogLevel",
        "setExtensionJs",
        "start",
        "stop",
    }
)


@dataclass
class RunnerConfig:
    """Configuration for command catalog construction and script execution."""

    reserved_names: FrozenSet[str] = field(
        default_factory=lambda: DEFAULT_RESERVED_NAMES
    )
    and_wait_timeout: int = 30000
    wait_command: str = "waitForPageToLoad"
    pattern_matching: bool = True

    def __post_init__(self) -> None:
        self.reserved_names = frozenset(self.reserved_names)
        if self.and_wait_timeout < 0:
            raise ValueError("and_wait_timeout must not be negative")

    @property
    def and_wait_timeout_arg(self) -> str:
        """The timeout as the string argument the wait capability receives."""
        return str(self.and_wait_timeout)


# Module-level late-binding singleton
_config: Optional[RunnerConfig] = None


def configure(**kwargs) -> RunnerConfig:
    """Create and set the global RunnerConfig.

    The memoized default catalog is dropped so that it is rebuilt from the
    new configuration on next use.

    :param kwargs: Fields to override on RunnerConfig.
    :return: The configured RunnerConfig instance.
    """
    global _config
    _config = RunnerConfig(**kwargs)

    from selenese.command.catalog import reset_default_catalog

    reset_default_catalog()
    return _config


def get_runner_config() -> RunnerConfig:
    """Return the current config, creating a default if needed."""
    global _config
    if _config is None:
        _config = RunnerConfig()
    return _config
