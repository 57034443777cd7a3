"""
Result type for data_result.

A closed union of two immutable variants, Success and Failure. The variant
class is the discriminant, so a None payload never changes which side a
result is on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

S = TypeVar("S")
F = TypeVar("F")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Success(Generic[S]):
    """Successful outcome carrying a value."""

    value: S

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def match(
        self,
        on_success: Callable[[S], R],
        on_failure: Callable[[F], R],
    ) -> R:
        return on_success(self.value)

    def match_or_none(
        self,
        on_success: Callable[[S], object] | None = None,
        on_failure: Callable[[F], object] | None = None,
    ) -> None:
        if on_success is not None:
            on_success(self.value)


@dataclass(frozen=True, slots=True)
class Failure(Generic[F]):
    """Failed outcome carrying an error value."""

    error: F

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def match(
        self,
        on_success: Callable[[S], R],
        on_failure: Callable[[F], R],
    ) -> R:
        return on_failure(self.error)

    def match_or_none(
        self,
        on_success: Callable[[S], object] | None = None,
        on_failure: Callable[[F], object] | None = None,
    ) -> None:
        if on_failure is not None:
            on_failure(self.error)


Result = Union[Success[S], Failure[F]]
"""
Either a Success[S] or a Failure[F].

Both handlers of ``match`` are required, and a ``match`` statement over a
Result is exhaustive once both variants are covered:

    match fetch_user(1):
        case Success(user):
            show(user)
        case Failure(error):
            report(error)
        case _ as unreachable:
            assert_never(unreachable)

Domain results are plain aliases, e.g. ``ApiResult = Result[T, str]``.
"""


def success(value: S) -> Result[S, F]:
    """Build the Success variant. No validation is done on ``value``."""
    return Success(value)


def failure(error: F) -> Result[S, F]:
    """Build the Failure variant. No validation is done on ``error``."""
    return Failure(error)
