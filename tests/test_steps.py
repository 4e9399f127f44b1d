"""Tests for step execution and invocation error handling."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from selenese.command.basic import (
    AndWaitStep,
    AssertStep,
    EchoStep,
    InvokeStep,
    expected_value,
    invoke_capability,
)
from selenese.errors import (
    AssertionFailed,
    DomainFailure,
    FatalInvocationError,
    InvalidPatternError,
)
from selenese.handle import CallableHandle
from selenese.models import CapabilityMethod

CLICK = CapabilityMethod(name="click", arity=1)
GET_TITLE = CapabilityMethod(name="getTitle", arity=0)
IS_TEXT_PRESENT = CapabilityMethod(name="isTextPresent", arity=1)


class TestInvokeCapability:
    def test_returns_result(self, browser):
        assert invoke_capability(browser, "getTitle", []) == "Expected"

    def test_domain_failure_passes_through(self):
        handle = MagicMock()
        handle.invoke.side_effect = DomainFailure("Element #x not found")
        with pytest.raises(DomainFailure, match="not found"):
            invoke_capability(handle, "click", ["#x"])

    def test_domain_failure_in_cause_chain_is_unwrapped(self):
        def click(locator):
            try:
                raise DomainFailure("Element not found")
            except DomainFailure as e:
                raise RuntimeError("driver error") from e

        handle = CallableHandle({"click": click})
        with pytest.raises(DomainFailure, match="Element not found"):
            invoke_capability(handle, "click", ["#x"])

    def test_error_raised_while_handling_domain_failure_is_fatal(self):
        def click(locator):
            try:
                raise DomainFailure("not found")
            except DomainFailure:
                raise RuntimeError("driver crashed") from None

        handle = CallableHandle({"click": click})
        with pytest.raises(FatalInvocationError) as exc_info:
            invoke_capability(handle, "click", ["#x"])
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_implicit_context_is_not_a_domain_failure(self):
        def click(locator):
            try:
                raise DomainFailure("not found")
            except DomainFailure:
                raise KeyError("bug in handler")

        handle = CallableHandle({"click": click})
        with pytest.raises(FatalInvocationError):
            invoke_capability(handle, "click", ["#x"])

    def test_other_errors_become_fatal(self):
        handle = MagicMock()
        handle.invoke.side_effect = RuntimeError("boom")
        with pytest.raises(FatalInvocationError) as exc_info:
            invoke_capability(handle, "click", ["#x"])
        assert exc_info.value.method_name == "click"
        assert exc_info.value.invocation_args == ["#x"]
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_missing_capability_is_fatal(self, browser):
        with pytest.raises(FatalInvocationError, match="Unable to emulate doubleClick"):
            invoke_capability(browser, "doubleClick", ["#x"])


class TestExpectedValue:
    def test_nullary_uses_target(self):
        assert expected_value(GET_TITLE, "Home", "ignored") == "Home"

    def test_unary_uses_value(self):
        assert expected_value(IS_TEXT_PRESENT, "Welcome", "true") == "true"

    def test_binary_rejected(self):
        with pytest.raises(ValueError):
            expected_value(CapabilityMethod(name="getFoo", arity=2), "a", "b")


class TestSteps:
    def test_invoke_step(self, browser):
        InvokeStep("click", CLICK, ["#a"]).execute(browser)
        assert browser.calls == [("click", "#a")]

    def test_assert_step_passes(self, browser):
        step = AssertStep("assertTitle", GET_TITLE, [], expected="Expected")
        assert step.execute(browser) is None

    def test_assert_step_fails(self, browser):
        step = AssertStep("assertTitle", GET_TITLE, [], expected="Other")
        with pytest.raises(AssertionFailed) as exc_info:
            step.execute(browser)
        assert exc_info.value.expected == "Other"
        assert exc_info.value.actual == "Expected"
        assert "assertTitle" in exc_info.value.reason

    def test_negated_assert_step(self, browser):
        AssertStep("assertNotTitle", GET_TITLE, [], "Other", negated=True).execute(browser)
        with pytest.raises(AssertionFailed):
            AssertStep(
                "assertNotTitle", GET_TITLE, [], "Expected", negated=True
            ).execute(browser)

    def test_boolean_accessor(self, browser):
        AssertStep(
            "assertTextPresent", IS_TEXT_PRESENT, ["Welcome"], "true"
        ).execute(browser)
        AssertStep(
            "assertTextNotPresent", IS_TEXT_PRESENT, ["Goodbye"], "true", negated=True
        ).execute(browser)

    def test_and_wait_invokes_wait_after_action(self, browser):
        step = AndWaitStep("clickAndWait", CLICK, ["#a"], "waitForPageToLoad", "30000")
        step.execute(browser)
        assert browser.calls == [("click", "#a"), ("waitForPageToLoad", "30000")]

    def test_and_wait_returns_action_result(self):
        handle = CallableHandle(
            {"getTitle": lambda: "Home", "waitForPageToLoad": lambda timeout: None}
        )
        step = AndWaitStep("getTitleAndWait", GET_TITLE, [], "waitForPageToLoad", "10")
        assert step.execute(handle) == "Home"

    def test_and_wait_waits_after_domain_failure(self):
        calls = []

        def click(locator):
            calls.append("click")
            raise DomainFailure("Element not found")

        handle = CallableHandle(
            {"click": click, "waitForPageToLoad": lambda t: calls.append("wait")}
        )
        step = AndWaitStep("clickAndWait", CLICK, ["#a"], "waitForPageToLoad", "30000")
        with pytest.raises(DomainFailure):
            step.execute(handle)
        assert calls == ["click", "wait"]

    def test_and_wait_skips_wait_after_fatal_error(self):
        wait = MagicMock()

        def click(locator):
            raise RuntimeError("driver crashed")

        handle = CallableHandle({"click": click, "waitForPageToLoad": wait})
        step = AndWaitStep("clickAndWait", CLICK, ["#a"], "waitForPageToLoad", "30000")
        with pytest.raises(FatalInvocationError):
            step.execute(handle)
        wait.assert_not_called()

    def test_echo_step_does_not_touch_handle(self):
        handle = MagicMock()
        assert EchoStep("echo", "hello").execute(handle) == "hello"
        handle.invoke.assert_not_called()

    def test_invalid_regexp_names_command_and_pattern(self, browser):
        step = AssertStep("assertTitle", GET_TITLE, [], expected="regexp:(unclosed")
        with pytest.raises(InvalidPatternError) as exc_info:
            step.execute(browser)
        assert exc_info.value.command == "assertTitle"
        assert exc_info.value.pattern == "regexp:(unclosed"
        assert "assertTitle" in str(exc_info.value)
        assert not isinstance(exc_info.value, DomainFailure)

    def test_to_string(self):
        step = InvokeStep("type", CapabilityMethod(name="type", arity=2), ["q", "x"])
        assert step.to_string() == "type('q', 'x')"


class TestCallableHandle:
    def test_bind_and_list_capabilities(self):
        handle = CallableHandle({"getTitle": lambda: "Home"})
        handle.bind("click", lambda locator: f"clicked {locator}")
        assert handle.list_capabilities() == ["getTitle", "click"]
        assert handle.invoke("click", ["#a"]) == "clicked #a"

    def test_navigate_records_history(self):
        handle = CallableHandle(location="http://a")
        handle.navigate("http://b")
        handle.navigate("http://c")
        assert handle.history == ["http://b", "http://c"]
        assert handle.current_location() == "http://c"

    def test_unbound_capability(self):
        with pytest.raises(AttributeError):
            CallableHandle().invoke("click", ["#a"])
