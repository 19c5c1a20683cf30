#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for result tuple sugar."""

import doctest

from euclid import sugar
from euclid.sugar import Tag, error, noreply, ok, returning


def test_doctests() -> None:
    """Test the examples in the module docstring."""
    results = doctest.testmod(sugar)
    assert results.failed == 0


def test_error_wraps_value() -> None:
    """Test that error wraps the given value in an error tuple."""
    assert error(1) == (Tag.ERROR, 1)
    assert error(1) == ("error", 1)


def test_noreply_wraps_value() -> None:
    """Test that noreply wraps the given value in a noreply tuple."""
    assert noreply(1) == ("noreply", 1)


def test_ok_wraps_value() -> None:
    """Test that ok wraps the given value in an ok tuple."""
    assert ok(1) == (Tag.OK, 1)
    assert ok(1)[0] is Tag.OK


def test_returning_returns_second_value() -> None:
    """Test that returning accepts two values and returns the second."""
    assert returning(1, 2) == 2


# 🔼⚙️🔚
