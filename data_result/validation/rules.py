"""
Rule classes for data_result validation.

A rule is called with a value and returns a Result: Success(value) when the
value passes, Failure([(path, message), ...]) when it does not.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import reduce
from operator import or_
from typing import Any

from ..result import Failure, Result, Success
from .context import is_strict
from .types import CheckFn, FieldErrors, Path

REQUIRED_MESSAGE = "Required field is missing"


@dataclass(frozen=True, slots=True)
class Check:
    """A single predicate and the message reported when it fails."""

    fn: CheckFn
    message: str | None = None

    def describe(self, value: Any) -> str:
        return self.message or f"Validation failed for value: {value!r:.50}"


@dataclass(frozen=True, slots=True)
class Rule:
    """
    Immutable validation rule.

    Checks run in order and stop at the first one that fails, so each rule
    reports at most one message per value. None is only rejected when the
    rule is required. A check function that raises counts as a failed check
    of that value.
    """

    checks: tuple[Check, ...] = ()
    required: bool = False
    required_message: str | None = None

    def __call__(self, value: Any, path: Path = ()) -> Result[Any, FieldErrors]:
        if value is None:
            if self.required:
                return Failure([(path, self.required_message or REQUIRED_MESSAGE)])
            return Success(None)

        for check in self.checks:
            try:
                passed = check.fn(value)
            except Exception as e:
                return Failure([(path, f"Validation error: {e}")])
            if not passed:
                return Failure([(path, check.describe(value))])

        return Success(value)

    def passes(self, value: Any) -> bool:
        return self(value).is_success()

    @property
    def message(self) -> str:
        messages = [c.message for c in self.checks if c.message]
        return "; ".join(messages) or "Validation failed"

    def __and__(self, other: Rule | type | Any) -> Rule:
        """
        Both rules must pass; the first failing check is reported.

        Usage:
            str & Required()
            NotEmpty() & Contains("@")
        """
        other_rule = _simple(other, "&")
        return Rule(
            checks=self.checks + other_rule.checks,
            required=self.required or other_rule.required,
            required_message=self.required_message or other_rule.required_message,
        )

    def __rand__(self, other: type | Any) -> Rule:
        return _simple(other, "&") & self

    def __or__(self, other: Rule | type | Any) -> Rule:
        """
        At least one rule must pass.

        Usage:
            str | int
            IsType(str) | IsType(int)
        """
        other_rule = _simple(other, "|")
        left, right = self, other_rule

        def either(x: Any) -> bool:
            return left.passes(x) or right.passes(x)

        return Rule(
            checks=(Check(either, f"{left.message} or {right.message}"),),
            required=left.required and right.required,
        )

    def __ror__(self, other: type | Any) -> Rule:
        return _simple(other, "|") | self

    def with_message(self, msg: str) -> Rule:
        """Return a rule that reports ``msg`` for every failure."""
        return replace(
            self,
            checks=tuple(Check(c.fn, msg) for c in self.checks),
            required_message=msg,
        )


@dataclass(frozen=True, slots=True)
class Fields:
    """Rule for dicts; every declared key is checked and all errors kept."""

    fields: dict[str, Rule | Fields | Each]
    required: bool = False

    def __call__(self, value: Any, path: Path = ()) -> Result[Any, FieldErrors]:
        if value is None:
            if self.required:
                return Failure([(path, "Required dict is missing")])
            return Success(None)

        if not isinstance(value, dict):
            return Failure([(path, f"Expected dict, got {type(value).__name__}")])

        errors: FieldErrors = []
        for key, rule in self.fields.items():
            rule(value.get(key), (*path, key)).match_or_none(on_failure=errors.extend)

        if is_strict():
            errors.extend(
                ((*path, key), "Unexpected field")
                for key in value
                if key not in self.fields
            )

        return Failure(errors) if errors else Success(value)


@dataclass(frozen=True, slots=True)
class Each:
    """Rule for lists; bounds the length and checks every item."""

    items: Rule | Fields | Each
    min_length: int | None = None
    max_length: int | None = None
    required: bool = False

    def __call__(self, value: Any, path: Path = ()) -> Result[Any, FieldErrors]:
        if value is None:
            if self.required:
                return Failure([(path, "Required list is missing")])
            return Success(None)

        if not isinstance(value, list):
            return Failure([(path, f"Expected list, got {type(value).__name__}")])

        errors: FieldErrors = []
        if self.min_length is not None and len(value) < self.min_length:
            errors.append((path, f"List too short: {len(value)} < {self.min_length}"))
        if self.max_length is not None and len(value) > self.max_length:
            errors.append((path, f"List too long: {len(value)} > {self.max_length}"))

        for i, item in enumerate(value):
            self.items(item, (*path, i)).match_or_none(on_failure=errors.extend)

        return Failure(errors) if errors else Success(value)


def type_rule(t: type) -> Rule:
    """Rule passing values that are instances of ``t``."""

    def check(x: Any) -> bool:
        return isinstance(x, t)

    return Rule(checks=(Check(check, f"Expected {t.__name__}"),))


def to_rule(spec: Any) -> Rule | Fields | Each:
    """
    Coerce a schema entry to a rule.

    Conversion rules:
        Rule | Fields | Each -> pass through
        type -> isinstance rule
        dict -> Fields, converting each value
        [item] -> Each over item
        [a, b, ...] -> Each over a | b | ...
        callable -> predicate rule
    """
    match spec:
        case Rule() | Fields() | Each():
            return spec
        case type():
            return type_rule(spec)
        case dict():
            return Fields({key: to_rule(value) for key, value in spec.items()})
        case list():
            if not spec:
                raise ValueError("Empty list cannot be converted to rule")
            if len(spec) == 1:
                return Each(to_rule(spec[0]))
            alternatives = [to_rule(s) for s in spec]
            if not all(isinstance(r, Rule) for r in alternatives):
                raise TypeError(
                    "Multiple list item types only supported for simple rules"
                )
            return Each(reduce(or_, alternatives))
        case _ if callable(spec):
            return Rule(checks=(Check(spec),))

    raise TypeError(f"Cannot convert {type(spec).__name__} to rule")


def _simple(other: Any, op: str) -> Rule:
    rule = to_rule(other)
    if not isinstance(rule, Rule):
        raise TypeError(f"Cannot combine nested rules using {op}")
    return rule
