#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Signed differences between comparable values.

Used by tolerance comparisons: numbers difference as `left - right`, while
date and time values difference as a whole number of microseconds."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from fractions import Fraction
from typing import Any

_NUMBER_TYPES = (int, float, Decimal, Fraction)
_MICROSECONDS_PER_DAY = 24 * 60 * 60 * 1_000_000


def parse_iso8601(text: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing `Z` for UTC.

    Raises:
        ValueError: If the text is not a valid ISO-8601 timestamp.
    """
    candidate = text.strip()
    if candidate.endswith(("Z", "z")):
        candidate = candidate[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(candidate)
    except ValueError as e:
        raise ValueError(f"Invalid ISO-8601 timestamp {text!r}: {e}") from e


def microseconds(delta: timedelta) -> int:
    """Whole number of microseconds in a timedelta."""
    return (delta.days * _MICROSECONDS_PER_DAY) + (delta.seconds * 1_000_000) + delta.microseconds


def _time_of_day(value: time) -> int:
    seconds = (value.hour * 60 + value.minute) * 60 + value.second
    return seconds * 1_000_000 + value.microsecond


def _kind(value: Any) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, _NUMBER_TYPES):
        return "number"
    # datetime subclasses date
    if isinstance(value, datetime):
        return "datetime"
    if isinstance(value, date):
        return "date"
    if isinstance(value, time):
        return "time"
    if isinstance(value, timedelta):
        return "timedelta"
    if isinstance(value, str):
        return "string"
    return None


def diff(left: Any, right: Any) -> Any:
    """Return the signed difference `left - right`.

    Raises:
        TypeError: If the values are of unsupported or mismatched kinds.
        ValueError: If string operands are not ISO-8601 timestamps.
    """
    left_kind, right_kind = _kind(left), _kind(right)
    if left_kind is None or right_kind is None or left_kind != right_kind:
        raise TypeError(
            f"Cannot compute a difference between {type(left).__name__} and {type(right).__name__}"
        )

    if left_kind == "number":
        return left - right
    if left_kind == "string":
        return diff(parse_iso8601(left), parse_iso8601(right))
    if left_kind in ("datetime", "date"):
        return microseconds(left - right)
    if left_kind == "time":
        if (left.tzinfo is None) != (right.tzinfo is None):
            raise TypeError("Cannot compute a difference between naive and aware times")
        return _time_of_day(left) - _time_of_day(right)
    return microseconds(left - right)


# 🔼⚙️🔚
