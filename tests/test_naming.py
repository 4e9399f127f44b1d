"""Tests for command naming rules."""

from selenese.command import naming
from selenese.models import CapabilityMethod


def test_short_name_get_prefix():
    assert naming.short_name(CapabilityMethod(name="getTitle", arity=0)) == "Title"


def test_short_name_is_prefix():
    assert naming.short_name("isTextPresent") == "TextPresent"


def test_short_name_non_accessor():
    assert naming.short_name("click") is None
    assert naming.short_name("type") is None


def test_negate_present_suffix():
    assert naming.negate("TextPresent") == "TextNotPresent"
    assert naming.negate("ElementPresent") == "ElementNotPresent"


def test_negate_plain():
    assert naming.negate("Title") == "NotTitle"
    assert naming.negate("Checked") == "NotChecked"


def test_and_wait_name():
    assert naming.and_wait_name(CapabilityMethod(name="click", arity=1)) == "clickAndWait"


def test_is_accessor_requires_small_arity():
    assert naming.is_accessor(CapabilityMethod(name="getText", arity=1))
    assert not naming.is_accessor(
        CapabilityMethod(name="getWhetherThisFrameMatchFrameExpression", arity=2)
    )
    assert not naming.is_accessor(CapabilityMethod(name="click", arity=1))


def test_derived_names_accessor():
    method = CapabilityMethod(name="isTextPresent", arity=1)
    assert naming.derived_names(method) == [
        "isTextPresent",
        "assertTextPresent",
        "assertTextNotPresent",
        "verifyTextPresent",
        "verifyTextNotPresent",
        "isTextPresentAndWait",
    ]


def test_derived_names_action():
    method = CapabilityMethod(name="type", arity=2)
    assert naming.derived_names(method) == ["type", "typeAndWait"]
    assert naming.assertion_names(method) == []
