"""Utility helpers for `extension_helpers`.

Grouped by the type of value they operate on. None of them perform IO.
"""

from .membership import is_in
from .ranges import between, is_between, is_within
from .sequences import Batches, batch, reverse, shuffle, swap
from .strings import (
    multi_char_replace,
    remove_first,
    remove_first_character,
    remove_last,
    remove_last_character,
)

__all__ = [
    "Batches",
    "batch",
    "between",
    "is_between",
    "is_in",
    "is_within",
    "multi_char_replace",
    "remove_first",
    "remove_first_character",
    "remove_last",
    "remove_last_character",
    "reverse",
    "shuffle",
    "swap",
]
