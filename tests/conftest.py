#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures for euclid tests."""

from __future__ import annotations

from collections.abc import Generator
from datetime import UTC, datetime

from provide.testkit.mocking import Mock, patch
import pytest

FIXED_NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def fixed_now() -> datetime:
    """The instant the frozen clock reports."""
    return FIXED_NOW


@pytest.fixture
def frozen_clock(fixed_now: datetime) -> Generator[Mock, None, None]:
    """Pin the clock used by assert_recent to `fixed_now`.

    Naive timestamps get a naive copy of `fixed_now`, matching how the real
    clock picks local time for them.
    """

    def clock(timestamp: datetime) -> datetime:
        return fixed_now if timestamp.tzinfo is not None else fixed_now.replace(tzinfo=None)

    with patch("euclid.assertions._now", side_effect=clock) as mock_now:
        yield mock_now


# 🔼⚙️🔚
