"""Automation handles: the stateful object steps are executed against."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Sequence


class AutomationHandle(ABC):
    """The abstract automation interface.

    Steps call :meth:`invoke` with a capability name and its string
    arguments. The default implementation dispatches to a Python method of
    the same name on the handle itself, so a subclass exposes the capability
    ``getTitle`` simply by defining ``def getTitle(self)``.
    """

    @abstractmethod
    def current_location(self) -> str:
        pass

    @abstractmethod
    def navigate(self, url: str) -> None:
        pass

    def invoke(self, method_name: str, args: Sequence[str]) -> Any:
        method = getattr(self, method_name, None)
        if method is None or not callable(method):
            raise AttributeError(
                f"{self.type_name} doesn't have a method named {method_name}"
            )
        return method(*args)

    @property
    def type_name(self) -> str:
        return self.__class__.__name__


class CallableHandle(AutomationHandle):
    """A handle whose capabilities are plain callables bound by name.

    Useful for wiring an existing driver object into the interpreter without
    subclassing, and for driving the interpreter in tests.
    """

    def __init__(
        self,
        capabilities: Optional[Dict[str, Callable[..., Any]]] = None,
        location: str = "",
    ) -> None:
        self._capabilities: Dict[str, Callable[..., Any]] = dict(capabilities or {})
        self._location = location
        self.history: List[str] = []

    def bind(self, name: str, func: Callable[..., Any]) -> None:
        self._capabilities[name] = func

    def list_capabilities(self) -> List[str]:
        return list(self._capabilities.keys())

    def current_location(self) -> str:
        return self._location

    def navigate(self, url: str) -> None:
        self.history.append(url)
        self._location = url

    def invoke(self, method_name: str, args: Sequence[str]) -> Any:
        func = self._capabilities.get(method_name)
        if func is None:
            raise AttributeError(f"Capability {method_name} is not bound.")
        return func(*args)
