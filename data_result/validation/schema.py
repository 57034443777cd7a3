"""
Schema operations for data_result validation.

Provides validate(), check(), validate_model() and format_errors().
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..result import Failure, Result, Success
from .rules import Fields, to_rule
from .types import FieldErrors, Path

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


def validate(
    data: dict[str, Any], schema: dict[str, Any]
) -> Result[dict[str, Any], FieldErrors]:
    """
    Validate data against a schema.

    Args:
        data: The dict to validate
        schema: Dict-like schema definition

    Returns:
        Success(data) if validation passes
        Failure([(path, message), ...]) with every failing field otherwise

    Usage:
        schema = {
            "name": Required(str),
            "email": str & Contains("@"),
            "tags": [str],
        }
        result = validate({"name": "Alice", "tags": []}, schema)
    """
    rule = to_rule(schema)
    if not isinstance(rule, Fields):
        raise TypeError("Schema must be a dict")

    return rule(data)


def check(value: T, spec: Any) -> Result[T, list[str]]:
    """
    Validate a single value and report bare messages.

    Usage:
        check("", Required(str) & NotEmpty("Email is required"))
        # Failure(["Email is required"])
    """
    return to_rule(spec)(value).match(
        Success,
        lambda errors: Failure([message for _, message in errors]),
    )


def validate_model(model: type[M], data: Any) -> Result[M, FieldErrors]:
    """
    Run a Pydantic model over ``data``.

    Only pydantic's ValidationError is reported, as a Failure of (loc, msg)
    pairs, so that model checks fit the rest of this package. Any other
    exception propagates: this is not a general way of turning raising code
    into Results.

    Usage:
        validate_model(User, {"id": 1, "name": "Ada", "email": "ada@example.com"})
    """
    try:
        return Success(model.model_validate(data))
    except ValidationError as e:
        return Failure([(tuple(err["loc"]), err["msg"]) for err in e.errors()])


def format_errors(errors: FieldErrors) -> list[str]:
    """
    Render field errors as "path: message" strings.

    Example:
        format_errors([(("user", "tags", 0), "Expected str")])
        # ["user.tags[0]: Expected str"]
    """
    return [
        f"{_format_path(path)}: {message}" if path else message
        for path, message in errors
    ]


def _format_path(path: Path) -> str:
    out = ""
    for part in path:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}" if out else part
    return out
