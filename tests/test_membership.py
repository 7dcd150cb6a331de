"""Test the membership helper."""

import pytest

from extension_helpers import HelperError, InvalidArgumentError, is_in


def test_is_in_matches_by_value() -> None:
    """is_in should compare candidates with equality."""
    assert is_in(3, 1, 2, 3, 4) is True
    assert is_in(5, 1, 2, 3, 4) is False
    assert is_in("b", *"abc") is True
    assert is_in((1, 2), (1, 2), (3, 4)) is True


def test_is_in_without_candidates_is_false() -> None:
    """An empty candidate set should contain nothing."""
    assert is_in(1) is False


def test_is_in_rejects_none_source() -> None:
    """A None source should raise instead of returning False."""
    with pytest.raises(InvalidArgumentError):
        is_in(None, None, 1)


def test_is_in_accepts_falsy_sources() -> None:
    """Only None is rejected; other falsy values are valid."""
    assert is_in(0, 0, 1) is True
    assert is_in("", "x") is False


def test_invalid_argument_is_a_helper_error() -> None:
    """Every helper failure should share the HelperError base."""
    assert issubclass(InvalidArgumentError, HelperError)
