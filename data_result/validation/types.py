"""
Type aliases for data_result validation.
"""

from __future__ import annotations

from typing import Any, Callable

CheckFn = Callable[[Any], bool]
Path = tuple[str | int, ...]
FieldError = tuple[Path, str]
FieldErrors = list[FieldError]
