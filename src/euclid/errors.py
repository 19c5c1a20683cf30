#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Exception types raised by euclid assertions."""

from __future__ import annotations


class AssertionFailure(AssertionError):
    """Raised when an euclid assertion does not hold.

    Subclasses AssertionError so test runners report it like a plain `assert`.
    """

    def __init__(self, message: str, strategy: str | None = None):
        self.strategy = strategy
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""


class ConfigurationError(ValueError):
    """Raised when assertion options are malformed or contradictory."""


# 🔼⚙️🔚
