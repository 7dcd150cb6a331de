"""String trimming and replacement helpers.

All functions return new strings; Python strings are immutable so the input
is never modified.
"""
from __future__ import annotations

import re

from ..errors import InvalidArgumentError, OutOfRangeError


def multi_char_replace(text: str, new_val: str, *remove_chars: str) -> str:
    """Replace every character in ``remove_chars`` with ``new_val``.

    The text is split on any of the removal characters, empty segments are
    dropped and the remaining segments are joined with ``new_val``. Runs of
    removal characters therefore collapse into a single ``new_val``, and
    leading or trailing removal characters leave no ``new_val`` behind.

    Args:
        text: Source string.
        new_val: Value inserted between the surviving segments.
        *remove_chars: Single characters to split on.

    Returns:
        The rejoined string, or ``text`` unchanged when no characters are given.

    Raises:
        InvalidArgumentError: If an entry of ``remove_chars`` is not exactly one
            character long.

    Example:
        >>> multi_char_replace("a,b;;c", "-", ",", ";")
        'a-b-c'
    """
    if not remove_chars:
        return text
    for char in remove_chars:
        if len(char) != 1:
            raise InvalidArgumentError(f"Expected a single character, got {char!r}")

    pattern = "[" + re.escape("".join(remove_chars)) + "]"
    return new_val.join(segment for segment in re.split(pattern, text) if segment)


def _check_length(text: str, length: int) -> None:
    if length < 0:
        raise InvalidArgumentError(f"length must not be negative, got {length}")
    if length > len(text):
        raise OutOfRangeError(
            f"Cannot remove {length} characters from a string of length {len(text)}"
        )


def remove_last(text: str, length: int) -> str:
    """Return ``text`` without its last ``length`` characters.

    Raises:
        InvalidArgumentError: If ``length`` is negative.
        OutOfRangeError: If ``length`` exceeds ``len(text)``.
    """
    _check_length(text, length)
    return text[: len(text) - length]


def remove_first(text: str, length: int) -> str:
    """Return ``text`` without its first ``length`` characters.

    Raises:
        InvalidArgumentError: If ``length`` is negative.
        OutOfRangeError: If ``length`` exceeds ``len(text)``.
    """
    _check_length(text, length)
    return text[length:]


def remove_last_character(text: str) -> str:
    """Return ``text`` without its last character."""
    return remove_last(text, 1)


def remove_first_character(text: str) -> str:
    """Return ``text`` without its first character."""
    return remove_first(text, 1)
