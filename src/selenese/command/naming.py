"""Naming rules deriving the command family of a capability method.

A method of the form ``getFoo`` or ``isFoo`` yields the commands ``getFoo``,
``assertFoo``, ``assertNotFoo``, ``verifyFoo``, ``verifyNotFoo`` and
``getFooAndWait``. Names ending in ``Present`` negate in the middle:
``isTextPresent`` gives ``assertTextNotPresent``.
"""

from __future__ import annotations

import re
from typing import List, Optional, Union

from selenese.models import CapabilityMethod

ACCESSOR_PREFIXES = ("get", "is")
AND_WAIT_SUFFIX = "AndWait"

_PRESENT_PATTERN = re.compile(r"^(.*)Present$", re.DOTALL)

MethodRef = Union[CapabilityMethod, str]


def _name_of(method: MethodRef) -> str:
    return method.name if isinstance(method, CapabilityMethod) else method


def short_name(method: MethodRef) -> Optional[str]:
    """Strip the accessor prefix, or return None for non-accessor methods."""
    name = _name_of(method)
    for prefix in ACCESSOR_PREFIXES:
        if name.startswith(prefix):
            return name[len(prefix):]
    return None


def negate(name: str) -> str:
    match = _PRESENT_PATTERN.match(name)
    if match:
        return match.group(1) + "NotPresent"
    return "Not" + name


def and_wait_name(method: MethodRef) -> str:
    return _name_of(method) + AND_WAIT_SUFFIX


def is_accessor(method: CapabilityMethod) -> bool:
    """Accessor methods with at most one argument get assert/verify commands."""
    return short_name(method) is not None and method.arity <= 1


def assertion_names(method: CapabilityMethod) -> List[str]:
    """The four assert/verify names of an accessor, positive before negated."""
    if not is_accessor(method):
        return []
    short = short_name(method)
    negated = negate(short)
    return [
        "assert" + short,
        "assert" + negated,
        "verify" + short,
        "verify" + negated,
    ]


def derived_names(method: CapabilityMethod) -> List[str]:
    """Every command name the catalog registers for ``method``."""
    return [method.name] + assertion_names(method) + [and_wait_name(method)]
