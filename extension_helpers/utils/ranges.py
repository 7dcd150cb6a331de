"""Range predicates over ordered values.

An empty range, where ``start`` is greater than ``end``, contains nothing: all
three predicates return False for it.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol, TypeVar


class Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...


C = TypeVar("C", bound=Comparable)


def between(moment: datetime, start: datetime, end: datetime) -> bool:
    """Return whether ``moment`` lies in ``[start, end]``."""
    return start <= moment <= end


def is_between(val: C, start: C, end: C) -> bool:
    """Return whether ``val`` lies strictly between ``start`` and ``end``.

    Example:
        >>> is_between(1, 1, 10)
        False
    """
    return start < val < end


def is_within(val: C, start: C, end: C) -> bool:
    """Return whether ``val`` lies in ``[start, end]``, bounds included.

    Example:
        >>> is_within(1, 1, 10)
        True
    """
    return start <= val <= end
