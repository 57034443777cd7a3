"""
data_result validation - dict-like schemas whose outcomes are Results.

Usage:
    from data_result.validation import Required, NotEmpty, Contains, validate

    schema = {
        "name": Required(str),
        "email": Required(str) & Contains("@"),
        "tags": [str],
    }

    result = validate(data, schema)
    result.match(
        lambda data: save(data),
        lambda errors: report(format_errors(errors)),
    )
"""

from .context import is_strict, validation_context
from .rules import Check, Each, Fields, Rule, to_rule
from .schema import check, format_errors, validate, validate_model
from .validators import (
    Between,
    Contains,
    InSet,
    IsType,
    Matches,
    MaxLength,
    MinLength,
    NotEmpty,
    Optional,
    Predicate,
    Required,
)

__all__ = [
    # Core
    "Rule",
    "Check",
    "Fields",
    "Each",
    "to_rule",
    # Rules
    "Required",
    "Optional",
    "IsType",
    "NotEmpty",
    "Contains",
    "MinLength",
    "MaxLength",
    "Matches",
    "InSet",
    "Predicate",
    "Between",
    # Schema
    "validate",
    "check",
    "validate_model",
    "format_errors",
    # Config
    "validation_context",
    "is_strict",
]
