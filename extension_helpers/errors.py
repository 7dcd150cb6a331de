"""Exceptions raised by the helpers."""


class HelperError(Exception):
    """Base class for every helper failure."""


class InvalidArgumentError(HelperError, ValueError):
    """An argument is absent or outside the values a helper accepts."""


class OutOfRangeError(HelperError, IndexError):
    """A length or index falls outside the bounds of its target."""
