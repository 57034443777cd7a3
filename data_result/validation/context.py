"""
Context manager for validation configuration (e.g., strict mode).
"""

from contextlib import contextmanager
from contextvars import ContextVar

_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=False)


def is_strict() -> bool:
    """Check if strict mode is currently enabled."""
    return _strict_mode.get()


@contextmanager
def validation_context(*, strict: bool = False):
    """
    Context manager for validation configuration.

    Args:
        strict: If True, Fields validators also reject keys that the schema
               does not declare, reporting each one as "Unexpected field".

    Example:
        from data_result.validation import validate, validation_context

        schema = {"name": str}

        validate({"name": "Ada", "extra": 1}, schema)  # Success

        with validation_context(strict=True):
            validate({"name": "Ada", "extra": 1}, schema)  # Failure
    """
    token = _strict_mode.set(strict)
    try:
        yield
    finally:
        _strict_mode.reset(token)
