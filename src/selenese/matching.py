"""Selenese value comparison for assert/verify commands.

Expected values may carry a pattern prefix:

* ``regexp:`` / ``regex:``: regular expression search
* ``regexpi:`` / ``regexi:``: case-insensitive regular expression search
* ``exact:``: literal comparison
* ``glob:`` or no prefix: whole-string glob, ``*`` and ``?`` only
"""

from __future__ import annotations

import functools
import re
from typing import Any


def normalize_actual(actual: Any) -> str:
    """Render a value returned by an accessor as the string a script compares against."""
    if actual is None:
        return ""
    if isinstance(actual, bool):
        return "true" if actual else "false"
    if isinstance(actual, (list, tuple)):
        return ",".join(normalize_actual(item) for item in actual)
    return str(actual)


@functools.lru_cache(maxsize=256)
def _glob_to_regex(pattern: str) -> "re.Pattern[str]":
    parts = []
    for char in pattern:
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.DOTALL)


def pattern_matches(expected: str, actual: str) -> bool:
    """Match ``actual`` against a Selenese pattern."""
    if expected.startswith(("regexp:", "regex:")):
        return re.search(expected.split(":", 1)[1], actual) is not None
    if expected.startswith(("regexpi:", "regexi:")):
        return re.search(expected.split(":", 1)[1], actual, re.IGNORECASE) is not None
    if expected.startswith("exact:"):
        return expected[len("exact:"):] == actual
    if expected.startswith("glob:"):
        expected = expected[len("glob:"):]
    return _glob_to_regex(expected).fullmatch(actual) is not None


def selenese_equals(expected: str, actual: Any, pattern_matching: bool = True) -> bool:
    """Compare an expected script value with an accessor result."""
    rendered = normalize_actual(actual)
    if not pattern_matching:
        return expected == rendered
    return pattern_matches(expected, rendered)
