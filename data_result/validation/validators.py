"""
Built-in rules for data_result validation.

Each factory returns a Rule. Every factory but Required/Optional takes an
optional ``message`` overriding the default failure text.
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Any

from .rules import Check, Rule, to_rule, type_rule
from .types import CheckFn


def _rule(fn: CheckFn, message: str) -> Rule:
    return Rule(checks=(Check(fn, message),))


def Required(v: Rule | type | None = None, message: str | None = None) -> Rule:
    """
    Mark a value as required (cannot be None).

    Usage:
        Required()                               # Just required
        Required(str)                            # Required string
        Required(message="Email is required")    # Custom missing message
    """
    if v is None:
        return Rule(required=True, required_message=message)

    inner = to_rule(v)
    if not isinstance(inner, Rule):
        raise TypeError("Required() on nested structures: set required=True instead")
    return replace(
        inner, required=True, required_message=message or inner.required_message
    )


def Optional(v: Rule | type) -> Rule:
    """Allow None, validate if present."""
    inner = to_rule(v)
    if not isinstance(inner, Rule):
        raise TypeError("Optional() requires a simple rule, not nested structure")
    return replace(inner, required=False, required_message=None)


def IsType(t: type, message: str | None = None) -> Rule:
    """
    Value must be an instance of ``t``.

    Usage:
        IsType(str)
        IsType(int) & Between(0, 100)
    """
    rule = type_rule(t)
    if message:
        rule = replace(rule, checks=tuple(Check(c.fn, message) for c in rule.checks))
    return rule


def NotEmpty(message: str = "Must not be empty") -> Rule:
    """Value must have a non-zero length (strings, lists, dicts)."""

    def check(x: Any) -> bool:
        try:
            return len(x) > 0
        except TypeError:
            return False

    return _rule(check, message)


def Contains(part: Any, message: str | None = None) -> Rule:
    """
    Value must contain ``part``.

    Usage:
        Contains("@", "Email must contain @")
    """

    def check(x: Any) -> bool:
        return part in x

    return _rule(check, message or f"Must contain {part!r}")


def MinLength(n: int, message: str | None = None) -> Rule:
    """Length must be at least ``n``."""

    def check(x: Any) -> bool:
        return len(x) >= n

    return _rule(check, message or f"Length must be >= {n}")


def MaxLength(n: int, message: str | None = None) -> Rule:
    """Length must be at most ``n``."""

    def check(x: Any) -> bool:
        return len(x) <= n

    return _rule(check, message or f"Length must be <= {n}")


def Matches(pattern: str, message: str | None = None) -> Rule:
    """
    String must match a regex pattern (anchored at the start).

    Usage:
        Matches(r"^[a-z]+$")
    """
    compiled = re.compile(pattern)

    def check(x: Any) -> bool:
        return isinstance(x, str) and compiled.match(x) is not None

    return _rule(check, message or f"Must match pattern: {pattern}")


def InSet(values: set | frozenset | list | tuple, message: str | None = None) -> Rule:
    """Value must be one of ``values``."""
    allowed = frozenset(values)

    def check(x: Any) -> bool:
        return x in allowed

    return _rule(check, message or f"Must be one of: {sorted(map(repr, allowed))}")


def Predicate(fn: CheckFn, message: str | None = None) -> Rule:
    """
    Rule from an arbitrary predicate.

    Usage:
        Predicate(lambda x: x > 0, "Must be positive")
    """
    return Rule(checks=(Check(fn, message),))


def Between(
    lower: Any, upper: Any, inclusive: bool = True, message: str | None = None
) -> Rule:
    """Value must lie between ``lower`` and ``upper``."""

    def check(x: Any) -> bool:
        if inclusive:
            return lower <= x <= upper
        return lower < x < upper

    suffix = "" if inclusive else " (exclusive)"
    return _rule(check, message or f"Must be between {lower} and {upper}{suffix}")
