#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Terse constructors for tagged result tuples.

>>> ok(1)
(<Tag.OK: 'ok'>, 1)
>>> ok(1) == ("ok", 1)
True
>>> returning(1, 2)
2
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")


class Tag(str, Enum):
    """Result tags. Members compare equal to their plain string values."""

    OK = "ok"
    ERROR = "error"
    NOREPLY = "noreply"


def ok(value: T) -> tuple[Tag, T]:
    return (Tag.OK, value)


def error(value: T) -> tuple[Tag, T]:
    return (Tag.ERROR, value)


def noreply(value: T) -> tuple[Tag, T]:
    return (Tag.NOREPLY, value)


def returning(_ignored: Any, value: T) -> T:
    """Discard the first argument and return the second."""
    return value


# 🔼⚙️🔚
