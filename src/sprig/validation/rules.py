"""Search-field rules.

A rule takes the current value of a query field and returns the value
to keep, raising ``ValueError`` with a user-facing message to reject it.
Rules for one field run in order, each receiving the previous rule's
output, so a converting rule such as ``integer`` hands an ``int`` to
whatever follows::

    {"page": [integer, at_least(1)]}

Query values arrive as strings; fallback records may already hold typed
values (``10`` rather than ``"10"``), so rules accept either.
"""

import re
from collections.abc import Callable
from typing import Any, TypeAlias

Rule: TypeAlias = Callable[[Any], Any]


def required(value: Any) -> Any:
    """Field must be present and non-blank.  Marks the field mandatory."""
    if value is None or not str(value).strip():
        raise ValueError("This field is required")
    return value


def integer(value: Any) -> int:
    """Convert to ``int``."""
    try:
        return int(value)
    except (ValueError, TypeError):
        raise ValueError("Must be a whole number") from None


def number(value: Any) -> float:
    """Convert to ``float``."""
    try:
        return float(value)
    except (ValueError, TypeError):
        raise ValueError("Must be a number") from None


def at_least(minimum: float) -> Rule:
    """Numeric value must be ``>= minimum``.  Place after ``integer``/``number``."""

    def check(value: Any) -> Any:
        if value < minimum:
            raise ValueError(f"Must be at least {minimum}")
        return value

    return check


def max_length(n: int) -> Rule:
    """Text must be at most *n* characters."""

    def check(value: Any) -> Any:
        if len(str(value)) > n:
            raise ValueError(f"Must be at most {n} characters")
        return value

    return check


def one_of(*choices: str) -> Rule:
    """Text must be one of *choices*."""
    allowed = frozenset(choices)

    def check(value: Any) -> Any:
        if str(value) not in allowed:
            raise ValueError(f"Must be one of: {', '.join(sorted(allowed))}")
        return value

    return check


def matches(pattern: str, message: str | None = None) -> Rule:
    """Text must match *pattern* from the start."""
    compiled = re.compile(pattern)

    def check(value: Any) -> Any:
        if not compiled.match(str(value)):
            raise ValueError(message or f"Must match pattern: {pattern}")
        return value

    return check
