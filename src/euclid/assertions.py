#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Enhanced assertions for test code.

`assert_eq` picks its comparison from the shape of its arguments and options:

1. Two lists/tuples are compared element-wise, or as multisets with
   `ignore_order=True`.
2. A string and a compiled regex are compared with `Pattern.search`.
3. Anything else is compared with a tolerance (`within=`), as filtered
   mappings (`only=` / `except_=`), or with plain `==`.

Every assertion returns a value on success so it can be chained:

    user = assert_eq(create_user(), {"name": "a"}, only="right_keys")
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import UTC, datetime, timedelta
from enum import Enum
import re
from typing import Any, NoReturn, TypeVar
import warnings

from provide.foundation.logger import get_logger

from euclid import duration
from euclid.config import ALL_KEYS, NO_KEYS, RIGHT_KEYS, EqOptions, RecentWindow
from euclid.difference import diff, microseconds, parse_iso8601
from euclid.errors import AssertionFailure, ConfigurationError

log = get_logger(__name__)

T = TypeVar("T")

_SEQUENCE_TYPES = (list, tuple)


class Strategy(Enum):
    """Comparison strategies used by `assert_eq`, in dispatch priority order."""

    SEQUENCES = "sequences"
    TEXT_AND_PATTERN = "text_and_pattern"
    TOLERANCE = "tolerance"
    FILTERED_MAPS = "filtered_maps"
    STRICT = "strict"


def classify(left: Any, right: Any, options: EqOptions) -> Strategy:
    """Select the comparison strategy for a pair of values."""
    if isinstance(left, _SEQUENCE_TYPES) and isinstance(right, _SEQUENCE_TYPES):
        return Strategy.SEQUENCES
    if isinstance(left, str) and isinstance(right, re.Pattern) and isinstance(right.pattern, str):
        return Strategy.TEXT_AND_PATTERN
    if options.has_tolerance:
        return Strategy.TOLERANCE
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        return Strategy.FILTERED_MAPS
    return Strategy.STRICT


def _fail(strategy: Strategy | str, message: str) -> NoReturn:
    name = strategy.value if isinstance(strategy, Strategy) else strategy
    log.debug("Assertion failed", strategy=name)
    raise AssertionFailure(message, strategy=name)


def _describe(title: str, left: Any, right: Any) -> str:
    return f"{title}\nleft:  {left!r}\nright: {right!r}"


def _same_elements(left: list[Any], right: list[Any]) -> bool:
    # Equality-only multiset match for elements with no natural ordering
    if len(left) != len(right):
        return False
    remaining = list(right)
    for item in left:
        for index, candidate in enumerate(remaining):
            if candidate == item:
                del remaining[index]
                break
        else:
            return False
    return True


def _assert_sequences(left: Any, right: Any, options: EqOptions) -> None:
    if options.ignore_order:
        try:
            equal = sorted(left) == sorted(right)
        except TypeError:
            equal = _same_elements(list(left), list(right))
        title = "Expected sequences to contain the same elements (ignoring order)"
    else:
        equal = list(left) == list(right)
        title = "Expected sequences to be equal"

    if not equal:
        _fail(Strategy.SEQUENCES, _describe(title, left, right))


def _assert_matches(string: str, regex: re.Pattern[str]) -> None:
    if regex.search(string) is None:
        _fail(
            Strategy.TEXT_AND_PATTERN,
            f"Expected string to match regex\nleft (string): {string}\nright (regex): {regex.pattern}",
        )


def _tolerance(within: Any) -> tuple[Any, str]:
    """Return the allowed absolute difference and its human-readable form."""
    if isinstance(within, tuple):
        return duration.convert(within), duration.to_string(within)
    if isinstance(within, timedelta):
        return microseconds(within), str(within)
    return within, str(within)


def _assert_within(left: Any, right: Any, within: Any) -> None:
    allowed, rendered = _tolerance(within)
    if not abs(diff(left, right)) <= allowed:
        _fail(Strategy.TOLERANCE, f'Expected "{left}" to be within {rendered} of "{right}"')


def filter_maps(
    left: Mapping[Any, Any], right: Mapping[Any, Any], only: Any = ALL_KEYS, except_: Any = NO_KEYS
) -> tuple[Mapping[Any, Any], Mapping[Any, Any]]:
    """Restrict two mappings to the keys selected by `only` / `except_`.

    Args:
        left: Left-hand mapping
        right: Right-hand mapping
        only: "all", "right_keys", or an iterable of keys to keep
        except_: "none", or an iterable of keys to drop

    Returns:
        The filtered `(left, right)` pair; the originals when nothing is filtered

    Raises:
        ConfigurationError: If both `only` and `except_` select keys
    """
    if only == ALL_KEYS and except_ == NO_KEYS:
        return left, right
    if only != ALL_KEYS and except_ != NO_KEYS:
        raise ConfigurationError(
            f"`only` and `except_` cannot be combined (only={only!r}, except_={except_!r})"
        )
    if only == RIGHT_KEYS:
        return filter_maps(left, right, tuple(right.keys()))
    if except_ == NO_KEYS:
        return (
            {key: left[key] for key in only if key in left},
            {key: right[key] for key in only if key in right},
        )
    dropped = set(except_)
    return (
        {key: value for key, value in left.items() if key not in dropped},
        {key: value for key, value in right.items() if key not in dropped},
    )


def _scope(options: EqOptions) -> str:
    if options.only == RIGHT_KEYS:
        return " (comparing keys of right)"
    if options.only != ALL_KEYS:
        return f" (comparing only {list(options.only)!r})"
    if options.except_ != NO_KEYS:
        return f" (ignoring {list(options.except_)!r})"
    return ""


def _assert_maps(left: Mapping[Any, Any], right: Mapping[Any, Any], options: EqOptions) -> None:
    filtered_left, filtered_right = filter_maps(left, right, options.only, options.except_)
    if filtered_left != filtered_right:
        _fail(
            Strategy.FILTERED_MAPS,
            _describe(f"Expected maps to be equal{_scope(options)}", dict(filtered_left), dict(filtered_right)),
        )


def assert_eq(left: Any, right: Any, **options: Any) -> Any:
    """Assert that `left` and `right` are equal, returning `left` on success.

    Options:
        ignore_order: If both values are lists/tuples, ignore element order.
        returning: Return this value instead of `left` when the assertion passes.
        within: Allowed absolute difference instead of strict equality. Either
            a number, a `timedelta`, or an `(amount, unit)` pair such as
            `(500, "millisecond")`. Strings are parsed as ISO-8601 timestamps.
        only: For mappings, compare only these keys, or "right_keys" to compare
            the keys present in `right`.
        except_: For mappings, ignore these keys.

    Raises:
        AssertionFailure: If the selected comparison does not hold.
        ConfigurationError: If the options are malformed.
    """
    opts = EqOptions(**options)
    strategy = classify(left, right, opts)
    log.debug("Dispatching equality assertion", strategy=strategy.value)

    if strategy is Strategy.SEQUENCES:
        _assert_sequences(left, right, opts)
    elif strategy is Strategy.TEXT_AND_PATTERN:
        _assert_matches(left, right)
    elif strategy is Strategy.TOLERANCE:
        _assert_within(left, right, opts.within)
    elif strategy is Strategy.FILTERED_MAPS:
        _assert_maps(left, right, opts)
    elif left != right:
        _fail(Strategy.STRICT, _describe("Expected values to be equal", left, right))

    return opts.result_for(left)


def _now(timestamp: datetime) -> datetime:
    return datetime.now(UTC) if timestamp.tzinfo is not None else datetime.now()


def _parse_recent(text: str) -> datetime:
    try:
        parsed = parse_iso8601(text)
    except ValueError as e:
        reason = str(e.__cause__ or e)
    else:
        offset = parsed.utcoffset()
        if offset == timedelta(0):
            return parsed
        reason = "missing UTC offset" if offset is None else f"expected a zero UTC offset, got {offset}"

    _fail(
        "recent",
        f"Expected DateTime “{text}” to be recent, but it wasn't a valid DateTime in ISO8601 format: {reason}",
    )


def assert_recent(timestamp: datetime | str | None, window: RecentWindow | None = None) -> datetime:
    """Assert that a timestamp is no more than 30 seconds ago.

    Naive datetimes are compared with the local clock and aware ones with UTC.
    Strings must be ISO-8601 timestamps with a zero UTC offset. The timestamp
    is truncated to the second before comparing, and that truncated value is
    returned.
    """
    window = window or RecentWindow()

    if timestamp is None:
        _fail("recent", "Expected timestamp to be recent, but was None")
    if isinstance(timestamp, str):
        timestamp = _parse_recent(timestamp)
    if not isinstance(timestamp, datetime):
        raise TypeError(f"assert_recent expects a datetime or an ISO-8601 string, got {type(timestamp).__name__}")

    timestamp = timestamp.replace(microsecond=0)
    now = _now(timestamp)

    if timestamp < now - window.past:
        _fail(
            "recent",
            f"Expected {timestamp.isoformat()} to be recent, but was older than "
            f"{window.past_seconds:g} seconds ago (as of {now.isoformat()})",
        )
    if timestamp > now + window.future:
        _fail(
            "recent",
            f"Expected {timestamp.isoformat()} to be recent, but was more than "
            f"{window.future_seconds:g} second{'' if window.future_seconds == 1 else 's'} "
            f"into the future (as of {now.isoformat()})",
        )
    return timestamp


def assert_that(action: Callable[[], T], *, changes: Callable[[], Any], from_: Any, to: Any) -> T:
    """Assert a pre-condition and a post-condition around an action.

    `changes` is evaluated and compared with `from_` using `assert_eq`, then
    `action` runs, then `changes` is evaluated again and compared with `to`.
    Returns the result of `action`.

    Example:
        counter = {"n": 0}
        assert_that(
            lambda: counter.update(n=1),
            changes=lambda: counter["n"],
            from_=0,
            to=1,
        )
    """
    try:
        assert_eq(changes(), from_)
    except AssertionFailure as e:
        raise AssertionFailure(f"Pre-condition failed\n{e.message}", strategy="pre_condition") from e

    result = action()

    try:
        assert_eq(changes(), to)
    except AssertionFailure as e:
        raise AssertionFailure(f"Post-condition failed\n{e.message}", strategy="post_condition") from e

    return result


def assert_datetime_approximate(left: datetime, right: datetime, delta: float = 1) -> datetime:
    """Assert that `right` is within `delta` seconds of `left`.

    Deprecated: use `assert_eq(left, right, within=(delta, "second"))`.
    """
    warnings.warn(
        'assert_datetime_approximate is deprecated; use assert_eq(left, right, within=(delta, "second"))',
        DeprecationWarning,
        stacklevel=2,
    )
    allowed = timedelta(seconds=delta)
    if right < left - allowed or right > left + allowed:
        _fail("datetime_approximate", f"Expected {right} to be within {delta} seconds of {left}")
    return left


# 🔼⚙️🔚
