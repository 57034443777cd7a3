"""
Shared test models for all test files.

Pydantic models and error types used across the test suite, kept in one
place so that test files do not each define their own.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel

# =============================================================================
# Domain Models
# =============================================================================


class Account(BaseModel):
    """Sample account model for model validation tests."""

    id: int
    email: str
    active: bool = True


class Order(BaseModel):
    """Sample order model with a nested list."""

    order_id: str
    items: list[str]
    note: Optional[str] = None


# =============================================================================
# Error Types
# =============================================================================


@dataclass(frozen=True)
class DatabaseError:
    """Structured failure payload."""

    message: str
    code: int
