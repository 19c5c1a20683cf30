#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for signed differences used by tolerance comparisons."""

from datetime import UTC, date, datetime, time, timedelta
from decimal import Decimal

import pytest

from euclid.difference import diff, microseconds, parse_iso8601


class TestDiff:
    """Test suite for diff."""

    def test_numbers(self):
        """Test that numbers difference as left - right."""
        assert diff(10, 12) == -2
        assert diff(Decimal("1.5"), Decimal("0.5")) == Decimal("1.0")

    def test_datetimes_in_microseconds(self):
        """Test that datetimes difference in microseconds."""
        t1 = datetime(2024, 1, 1, 0, 0, 1, tzinfo=UTC)
        assert diff(t1, t1 - timedelta(seconds=1, microseconds=5)) == 1_000_005

    def test_dates(self):
        """Test that dates difference in whole days worth of microseconds."""
        assert diff(date(2024, 1, 2), date(2024, 1, 1)) == 86_400_000_000

    def test_times(self):
        """Test that times of day difference in microseconds."""
        assert diff(time(12, 0, 1), time(12, 0, 0, 500_000)) == 500_000

    def test_timedeltas(self):
        """Test that timedeltas difference in microseconds."""
        assert diff(timedelta(seconds=1), timedelta(seconds=3)) == -2_000_000

    def test_iso_strings(self):
        """Test that strings are parsed as ISO-8601 timestamps."""
        assert diff("2024-01-01T00:00:01Z", "2024-01-01T00:00:00+00:00") == 1_000_000

    def test_invalid_iso_string(self):
        """Test that unparsable strings raise ValueError."""
        with pytest.raises(ValueError, match="Invalid ISO-8601"):
            diff("not a date", "2024-01-01T00:00:00Z")

    @pytest.mark.parametrize(
        ("left", "right"),
        [
            (1, "1"),
            (date(2024, 1, 1), datetime(2024, 1, 1)),
            (True, 1),
            (None, None),
            ([1], [1]),
        ],
    )
    def test_unsupported_combinations(self, left, right):
        """Test that mismatched or unsupported kinds raise TypeError."""
        with pytest.raises(TypeError):
            diff(left, right)

    def test_naive_and_aware_datetimes(self):
        """Test that naive and aware datetimes cannot be compared."""
        with pytest.raises(TypeError):
            diff(datetime(2024, 1, 1), datetime(2024, 1, 1, tzinfo=UTC))


class TestHelpers:
    """Tests for parsing and conversion helpers."""

    def test_parse_zulu_suffix(self):
        """Test that a trailing Z is read as UTC."""
        assert parse_iso8601("2024-01-01T00:00:00Z") == datetime(2024, 1, 1, tzinfo=UTC)

    def test_parse_naive(self):
        """Test that timestamps without an offset stay naive."""
        assert parse_iso8601("2024-01-01T10:30:00").tzinfo is None

    def test_microseconds(self):
        """Test whole-microsecond conversion, including negative deltas."""
        assert microseconds(timedelta(days=1, seconds=1, microseconds=1)) == 86_401_000_001
        assert microseconds(timedelta(microseconds=-1)) == -1


# 🔼⚙️🔚
