"""Shared fixtures: a scripted fake browser and a clean global configuration."""

from __future__ import annotations

from typing import List, Tuple

import pytest

import selenese.config as cfg_module
from selenese.command.catalog import reset_default_catalog
from selenese.handle import AutomationHandle


class FakeBrowser(AutomationHandle):
    """A handle exposing a handful of capabilities and recording every call."""

    def __init__(self, title: str = "Expected", location: str = "") -> None:
        self.title = title
        self.location = location
        self.calls: List[Tuple] = []
        self.present_text = {"Welcome"}

    def current_location(self) -> str:
        return self.location

    def navigate(self, url: str) -> None:
        self.calls.append(("navigate", url))
        self.location = url

    def getTitle(self):
        self.calls.append(("getTitle",))
        return self.title

    def isTextPresent(self, pattern):
        self.calls.append(("isTextPresent", pattern))
        return pattern in self.present_text

    def click(self, locator):
        self.calls.append(("click", locator))

    def type(self, locator, value):
        self.calls.append(("type", locator, value))

    def waitForPageToLoad(self, timeout):
        self.calls.append(("waitForPageToLoad", timeout))

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def browser() -> FakeBrowser:
    return FakeBrowser()


@pytest.fixture(autouse=True)
def reset_config():
    """Every test starts from the default configuration and a fresh catalog."""
    cfg_module._config = None
    reset_default_catalog()
    yield
    cfg_module._config = None
    reset_default_catalog()
