#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Ergonomic assertions and result-tuple sugar for test suites."""

from provide.foundation.utils.versioning import get_version

from euclid.assertions import (
    Strategy,
    assert_datetime_approximate,
    assert_eq,
    assert_recent,
    assert_that,
)
from euclid.config import EqOptions, RecentWindow
from euclid.duration import TimeUnit
from euclid.errors import AssertionFailure, ConfigurationError
from euclid.sugar import Tag, error, noreply, ok, returning

__version__ = get_version("euclid", caller_file=__file__)

__all__ = [
    "AssertionFailure",
    "ConfigurationError",
    "EqOptions",
    "RecentWindow",
    "Strategy",
    "Tag",
    "TimeUnit",
    "__version__",
    "assert_datetime_approximate",
    "assert_eq",
    "assert_recent",
    "assert_that",
    "error",
    "noreply",
    "ok",
    "returning",
]

# 🔼⚙️🔚
