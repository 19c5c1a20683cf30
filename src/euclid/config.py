#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Option models for euclid assertions.

Options are validated when the model is built, so a malformed call fails
before any comparison runs."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import timedelta
from decimal import Decimal
from numbers import Real
from typing import Any

from attrs import define, field

from euclid.duration import parse_unit
from euclid.errors import ConfigurationError

ALL_KEYS = "all"
RIGHT_KEYS = "right_keys"
NO_KEYS = "none"


class _Unset:
    """Marker for an option that was not supplied."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def _key_tuple(name: str, value: Any) -> tuple[Any, ...]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ConfigurationError(f"`{name}` must be a keyword or an iterable of keys, got {value!r}")
    return tuple(value)


def _convert_only(value: Any) -> str | tuple[Any, ...]:
    if value in (ALL_KEYS, RIGHT_KEYS):
        return value
    return _key_tuple("only", value)


def _convert_except(value: Any) -> str | tuple[Any, ...]:
    if value == NO_KEYS:
        return value
    return _key_tuple("except_", value)


def _boolean(instance: Any, attribute: Any, value: Any) -> None:
    if not isinstance(value, bool):
        raise ConfigurationError(f"`{attribute.name}` must be a boolean, got {value!r}")


def _is_amount(value: Any) -> bool:
    return not isinstance(value, bool) and isinstance(value, (Real, Decimal))


def _valid_amount(value: Any) -> bool:
    # NaN compares false with everything, so it fails this check
    if isinstance(value, Decimal) and value.is_nan():
        return False
    return value >= 0


def _convert_within(value: Any) -> Any:
    """Normalise `within` to None, a number, a timedelta or `(amount, TimeUnit)`."""
    if value is None:
        return value
    if isinstance(value, timedelta):
        if value < timedelta(0):
            raise ConfigurationError(f"`within` must be a non-negative number, got {value!r}")
        return value
    if _is_amount(value):
        if not _valid_amount(value):
            raise ConfigurationError(f"`within` must be a non-negative number, got {value!r}")
        return value
    if isinstance(value, tuple) and len(value) == 2 and _is_amount(value[0]):
        amount, unit = value
        if not _valid_amount(amount):
            raise ConfigurationError(f"`within` must be a non-negative number, got {value!r}")
        return (amount, parse_unit(unit))
    raise ConfigurationError(
        f"`within` must be a number, a timedelta or an (amount, unit) pair, got {value!r}"
    )


@define(frozen=True)
class EqOptions:
    """Options accepted by `assert_eq`."""

    ignore_order: bool = field(default=False, validator=_boolean)
    returning: Any = field(default=UNSET)
    within: Any = field(default=None, converter=_convert_within)
    only: str | tuple[Any, ...] = field(default=ALL_KEYS, converter=_convert_only)
    except_: str | tuple[Any, ...] = field(default=NO_KEYS, converter=_convert_except)

    def __attrs_post_init__(self) -> None:
        if self.only != ALL_KEYS and self.except_ != NO_KEYS:
            raise ConfigurationError(
                f"`only` and `except_` cannot be combined (only={self.only!r}, except_={self.except_!r})"
            )

    @property
    def has_tolerance(self) -> bool:
        return self.within is not None

    def result_for(self, left: Any) -> Any:
        """The value an assertion returns on success."""
        return left if self.returning is UNSET else self.returning


def _non_negative(instance: Any, attribute: Any, value: float) -> None:
    if value < 0:
        raise ConfigurationError(f"{attribute.name} must be non-negative, got {value!r}")


@define(frozen=True)
class RecentWindow:
    """How far around "now" a timestamp may fall and still count as recent."""

    past_seconds: float = field(default=30, validator=_non_negative)
    future_seconds: float = field(default=1, validator=_non_negative)

    @property
    def past(self) -> timedelta:
        return timedelta(seconds=self.past_seconds)

    @property
    def future(self) -> timedelta:
        return timedelta(seconds=self.future_seconds)


# 🔼⚙️🔚
