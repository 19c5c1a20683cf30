#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Time unit conversion for `(amount, unit)` durations.

Durations are plain pairs such as `(500, "millisecond")` or
`(2, TimeUnit.SECOND)`. Microseconds are the smallest supported unit,
matching the resolution of `datetime.timedelta`."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Any, TypeAlias

from euclid.errors import ConfigurationError


class TimeUnit(Enum):
    """Supported time units, valued by their length in microseconds."""

    MICROSECOND = 1
    MILLISECOND = 1_000
    SECOND = 1_000_000
    MINUTE = 60 * 1_000_000
    HOUR = 60 * 60 * 1_000_000
    DAY = 24 * 60 * 60 * 1_000_000
    WEEK = 7 * 24 * 60 * 60 * 1_000_000

    @property
    def label(self) -> str:
        return self.name.lower()


Duration: TypeAlias = tuple[Real, TimeUnit | str]

_ALIASES = {
    "us": TimeUnit.MICROSECOND,
    "ms": TimeUnit.MILLISECOND,
    "s": TimeUnit.SECOND,
}


def parse_unit(unit: TimeUnit | str) -> TimeUnit:
    """Resolve a unit name (singular, plural or short alias) to a TimeUnit.

    Raises:
        ConfigurationError: If the unit is not recognised.
    """
    if isinstance(unit, TimeUnit):
        return unit
    if not isinstance(unit, str):
        raise ConfigurationError(f"Time unit must be a TimeUnit or a string, got {unit!r}")

    name = unit.strip().lower()
    if name in _ALIASES:
        return _ALIASES[name]
    if name.endswith("s") and name[:-1].upper() in TimeUnit.__members__:
        name = name[:-1]
    try:
        return TimeUnit[name.upper()]
    except KeyError:
        known = ", ".join(u.label for u in TimeUnit)
        raise ConfigurationError(f"Unknown time unit {unit!r} (expected one of: {known})") from None


def _split(duration: Any) -> tuple[Real, TimeUnit]:
    try:
        amount, unit = duration
    except (TypeError, ValueError):
        raise ConfigurationError(f"Duration must be an (amount, unit) pair, got {duration!r}") from None
    if isinstance(amount, bool) or not isinstance(amount, (Real, Decimal)):
        raise ConfigurationError(f"Duration amount must be a number, got {amount!r}")
    return amount, parse_unit(unit)


def convert(duration: Duration, to: TimeUnit | str = TimeUnit.MICROSECOND) -> Real:
    """Convert an `(amount, unit)` pair into `to` units.

    Integral results stay integers, so `convert((2, "second"))` is `2_000_000`.
    """
    amount, unit = _split(duration)
    target = parse_unit(to)
    scaled = amount * unit.value
    if isinstance(scaled, int) and scaled % target.value == 0:
        return scaled // target.value
    return scaled / target.value


def to_string(duration: Duration) -> str:
    """Render a duration for humans, e.g. `(500, "ms")` -> "500 milliseconds"."""
    amount, unit = _split(duration)
    suffix = "" if amount == 1 else "s"
    return f"{amount} {unit.label}{suffix}"


# 🔼⚙️🔚
