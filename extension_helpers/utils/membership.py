"""Membership helper."""
from __future__ import annotations

from typing import TypeVar

from ..errors import InvalidArgumentError

T = TypeVar("T")


def is_in(source: T, *candidates: T) -> bool:
    """Return whether ``source`` equals any of ``candidates``.

    Args:
        source: Value to look for. Must not be ``None``.
        *candidates: Values to compare against with ``==``.

    Returns:
        True if a candidate equals ``source``, otherwise False.

    Raises:
        InvalidArgumentError: If ``source`` is ``None``.

    Example:
        >>> is_in(3, 1, 2, 3, 4)
        True
    """
    if source is None:
        raise InvalidArgumentError("source must not be None")
    return any(candidate == source for candidate in candidates)
