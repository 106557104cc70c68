"""Tests for regional civil time."""

from datetime import datetime, timezone

from britdate.region import UK_REGION, Region, as_utc, local_now, to_local_time


def test_default_region():
    """Test the default region is British."""
    assert UK_REGION.locale == "en-GB"
    assert UK_REGION.timezone == "Europe/London"
    assert str(UK_REGION.tzinfo) == "Europe/London"


def test_unsupported_locale():
    """Test only British English is accepted."""
    try:
        Region(locale="en-US")
        assert False, "Should have raised ValueError"
    except ValueError as e:
        assert "Unsupported locale" in str(e)


def test_unknown_timezone():
    """Test an unknown time zone is rejected."""
    try:
        Region(timezone="Nowhere/Atlantis")
        assert False, "Should have raised ValueError"
    except ValueError as e:
        assert "Unknown time zone" in str(e)


def test_to_local_time_summer():
    """Test UTC is moved forward an hour in British summer time."""
    local = to_local_time(datetime(2016, 5, 30, 12, 0, tzinfo=timezone.utc))

    assert local is not None
    assert (local.day, local.hour) == (30, 13)


def test_to_local_time_treats_naive_as_utc():
    """Test naive moments are read as UTC."""
    local = to_local_time(datetime(2016, 5, 30, 23, 30))

    assert local is not None
    assert (local.day, local.hour, local.minute) == (31, 0, 30)


def test_to_local_time_winter():
    """Test GMT matches UTC."""
    local = to_local_time(datetime(2016, 1, 5, 9, 0, tzinfo=timezone.utc))

    assert local is not None
    assert local.hour == 9


def test_to_local_time_none():
    """Test a missing value stays missing."""
    assert to_local_time(None) is None


def test_as_utc_treats_naive_as_civil_time():
    """Test naive moments are read as civil time in the region."""
    utc = as_utc(datetime(2016, 5, 30, 0, 0))

    assert utc == datetime(2016, 5, 29, 23, 0, tzinfo=timezone.utc)


def test_local_now_is_aware():
    """Test the current time carries the region's zone."""
    now = local_now()

    assert now.tzinfo is not None
    assert str(now.tzinfo) == "Europe/London"
