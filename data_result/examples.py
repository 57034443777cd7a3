"""
Worked examples for data_result.

Run with ``python -m data_result.examples``. The simulation functions are also
used by the test suite.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel

from .result import Failure, Result, Success
from .validation import (
    Contains,
    NotEmpty,
    Required,
    check,
    format_errors,
    validate_model,
)

log = logging.getLogger(__name__)

T = TypeVar("T")


class User(BaseModel):
    id: int
    name: str
    email: str


@dataclass(frozen=True)
class DatabaseError:
    message: str
    code: int


class FileError(Enum):
    not_found = "not_found"
    permission_denied = "permission_denied"
    read_error = "read_error"


# Domain results: one alias per failure type
ApiResult = Result[T, str]
ValidationResult = Result[T, list[str]]
DbResult = Result[T, DatabaseError]
FileResult = Result[T, FileError]

EMAIL_RULE = (
    Required(str, "Email is required")
    & NotEmpty("Email is required")
    & Contains("@", "Email must contain @")
    & Contains(".", "Email must contain a domain")
)


def simulate_api_call(*, should_fail: bool) -> ApiResult[User]:
    """Fake API call; the payload goes through the User model."""
    if should_fail:
        log.debug("Simulated API call failed")
        return Failure("Network timeout: Unable to reach server")

    payload = {"id": 1, "name": "John Doe", "email": "john@example.com"}
    return validate_model(User, payload).match(
        Success,
        lambda errors: Failure("; ".join(format_errors(errors))),
    )


def validate_email(email: str) -> ValidationResult[str]:
    """Validate an email address, reporting the first problem found."""
    return check(email, EMAIL_RULE)


def simulate_database_save(*, user_id: int, data: dict[str, Any]) -> DbResult[int]:
    log.debug("Saving record %s: %r", user_id, data)
    return Success(user_id)


def simulate_database_load(*, user_id: int) -> DbResult[dict[str, Any]]:
    if user_id == 999:
        return Failure(DatabaseError("Record not found", 404))
    return Success({"id": user_id, "name": "John Doe"})


def simulate_file_read(path: str) -> FileResult[str]:
    if path == "missing.txt":
        return Failure(FileError.not_found)
    return Success('{"setting": "value"}')


def basic_success_failure_example() -> None:
    print("1. Basic Success/Failure Example:")

    success_result: ApiResult[str] = Success("Operation completed successfully!")
    failure_result: ApiResult[str] = Failure("Something went wrong")

    print(f"Success result is successful: {success_result.is_success()}")
    success_result.match_or_none(
        on_success=lambda data: print(f"Success result data: {data}")
    )

    print(f"Failure result is successful: {failure_result.is_success()}")
    failure_result.match_or_none(
        on_failure=lambda error: print(f"Failure result error: {error}")
    )


def match_example() -> None:
    print("2. Pattern Matching with match():")

    results: list[ApiResult[int]] = [Success(42), Failure("Network error")]
    for result in results:
        line = result.match(
            lambda value: f"  ✓ Success! Value: {value}",
            lambda error: f"  ✗ Error! Message: {error}",
        )
        print(line)


def match_or_none_example() -> None:
    print("3. Optional Pattern Matching with match_or_none():")

    result: ApiResult[str] = Success("Hello, World!")

    print("  Handling only success:")
    result.match_or_none(on_success=lambda data: print(f"    Got data: {data}"))

    print("  Handling only failure (no output expected):")
    result.match_or_none(on_failure=lambda error: print(f"    Got error: {error}"))


def api_call_example() -> None:
    print("4. API Call Example:")

    for should_fail in (False, True):
        match simulate_api_call(should_fail=should_fail):
            case Success(user):
                print(f"  User fetched: {user.name} ({user.email})")
            case Failure(error):
                print(f"  API Error: {error}")


def validation_example() -> None:
    print("5. Form Validation Example:")

    for email in ("user@example.com", "invalid-email", ""):
        validate_email(email).match(
            lambda valid: print(f"  ✓ Valid email: {valid}"),
            lambda errors: print(f"  ✗ Validation errors: {', '.join(errors)}"),
        )


def database_operation_example() -> None:
    print("6. Database Operation Example:")

    simulate_database_save(user_id=123, data={"name": "John Doe"}).match(
        lambda record_id: print(f"  ✓ Record saved with ID: {record_id}"),
        lambda error: print(f"  ✗ Database error: {error.message}"),
    )
    simulate_database_load(user_id=999).match(
        lambda data: print(f"  ✓ Data loaded: {data}"),
        lambda error: print(f"  ✗ Database error: {error.message}"),
    )


def file_operation_example() -> None:
    print("7. File Operation Example:")

    for path in ("config.json", "missing.txt"):
        simulate_file_read(path).match_or_none(
            on_success=lambda content: print(f"  ✓ File content: {content}"),
            on_failure=lambda error: print(f"  ✗ File error: {error.name}"),
        )


def main() -> None:
    print("=== Data Result Examples ===\n")

    sections = [
        basic_success_failure_example,
        match_example,
        match_or_none_example,
        api_call_example,
        validation_example,
        database_operation_example,
        file_operation_example,
    ]
    for i, section in enumerate(sections):
        if i:
            print("\n---\n")
        section()


if __name__ == "__main__":
    main()
