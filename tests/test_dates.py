"""
Tests for the dates module.
"""

import datetime

import pytest

from releasex.dates import derive_month, parse_date, same_day


@pytest.mark.parametrize("value,expected", [
    ("2025-10-02", datetime.date(2025, 10, 2)),
    ("10/02/2025", datetime.date(2025, 10, 2)),
    ("Oct 2, 2025", datetime.date(2025, 10, 2)),
    ("2025-10-02 14:30:00", datetime.date(2025, 10, 2)),
    ("2025-10", datetime.date(2025, 10, 1)),
])
def test_parse_date(value, expected):
    """Test free-form date parsing."""
    assert parse_date(value) == expected


@pytest.mark.parametrize("value", ["", "   ", "pending", "not a date", None])
def test_parse_date_invalid(value):
    """Test values that are not dates."""
    assert parse_date(value) is None


def test_derive_month():
    """Test month derivation."""
    assert derive_month("2025-10-02") == "2025-10"
    assert derive_month("01/31/2024") == "2024-01"
    assert derive_month("garbage") is None


def test_same_day():
    """Test day-level date comparison."""
    assert same_day("2025-10-02", "10/02/2025")
    assert same_day("oct 2 2025", "2025-10-02 08:00")
    assert not same_day("2025-10-02", "2025-10-03")
    assert not same_day("2025-10-02", "nonsense")
    assert not same_day("", "2025-10-02")
