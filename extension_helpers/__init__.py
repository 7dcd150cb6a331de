"""Top-level package for `extension_helpers`.

Small, stateless helpers for strings, comparable values and sequences. Every
helper is a free function that takes the value it works on as its first
argument.
"""

from .__about__ import __version__
from .errors import HelperError, InvalidArgumentError, OutOfRangeError
from .utils import (
    Batches,
    batch,
    between,
    is_between,
    is_in,
    is_within,
    multi_char_replace,
    remove_first,
    remove_first_character,
    remove_last,
    remove_last_character,
    reverse,
    shuffle,
    swap,
)

__all__ = [
    "__version__",
    "Batches",
    "HelperError",
    "InvalidArgumentError",
    "OutOfRangeError",
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
