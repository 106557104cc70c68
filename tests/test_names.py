"""Tests for English month and day names."""

from datetime import datetime

from britdate.names import day_name, month_name, short_day_name, short_month_name


def test_month_names():
    """Test full and short month names."""
    assert month_name(1) == "January"
    assert month_name(9) == "September"
    assert month_name(12) == "December"
    assert short_month_name(1) == "Jan"
    assert short_month_name(6) == "Jun"
    assert short_month_name(9) == "Sep"


def test_unknown_month_gives_empty_string():
    """Test month numbers outside 1 to 12 give an empty string."""
    for month in (0, 13, -1, 100):
        assert month_name(month) == ""
        assert short_month_name(month) == ""


def test_day_names():
    """Test full and short day names."""
    assert day_name(datetime(2006, 5, 26)) == "Friday"
    assert day_name(datetime(2016, 3, 13)) == "Sunday"
    assert short_day_name(datetime(2005, 8, 15)) == "Mon"
