"""Exceptions raised by allocura outside the allocation core.

``allocate`` and ``explain`` never raise for profile content; these are for
the stricter edges (answer parsing, CLI input).
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple


class AllocuraError(Exception):
    """Base exception for all allocura errors."""

    pass


class InvalidProfileField(AllocuraError, ValueError):
    """Raised when a profile answer is outside its known option set.

    Only raised by strict parsing; the default path records a warning and
    lets the allocator fall back to its default branch instead.
    """

    def __init__(self, field: str, value: Any, allowed: Optional[Iterable[str]] = None):
        self.field = field
        self.value = value
        self.allowed: Tuple[str, ...] = tuple(allowed or ())
        if self.allowed:
            message = f"{field}={value!r} is not one of {', '.join(self.allowed)}"
        else:
            message = f"{field}={value!r} is not a valid answer"
        super().__init__(message)
