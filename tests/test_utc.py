"""Tests for international date and time formats."""

from datetime import datetime, timedelta, timezone

from britdate.region import Region
from britdate.utc import (
    to_iso8601_date,
    to_iso8601_datetime,
    to_rfc822_datetime,
    to_rfc850_datetime,
    to_unix_timestamp,
)

SUMMER_MIDNIGHT = datetime(2016, 5, 30)
UTC_AFTERNOON = datetime(2005, 8, 15, 15, 52, 1, tzinfo=timezone.utc)


def test_iso8601_date_does_not_adjust_date():
    """Test a British summer date keeps its calendar day."""
    assert to_iso8601_date(SUMMER_MIDNIGHT) == "2016-05-30"


def test_iso8601_datetime_adjusts_to_utc():
    """Test British summer time is moved back an hour to UTC."""
    assert to_iso8601_datetime(SUMMER_MIDNIGHT) == "2016-05-29T23:00:00Z"


def test_iso8601_datetime_winter_matches_utc():
    """Test GMT is the same as UTC."""
    assert to_iso8601_datetime(datetime(2016, 1, 5, 9, 30)) == "2016-01-05T09:30:00Z"


def test_iso8601_with_positive_offset():
    """Test an aware moment with a positive offset."""
    moment = datetime(2016, 5, 30, 0, 30, tzinfo=timezone(timedelta(hours=2)))

    assert to_iso8601_date(moment) == "2016-05-30"
    assert to_iso8601_datetime(moment) == "2016-05-29T22:30:00Z"


def test_iso8601_uses_given_region_for_naive_moments():
    """Test naive moments are read in the given region."""
    region = Region(timezone="America/New_York")

    assert to_iso8601_datetime(SUMMER_MIDNIGHT, region) == "2016-05-30T04:00:00Z"


def test_rfc822_datetime():
    """Test RFC 822 with a four-digit year."""
    assert to_rfc822_datetime(UTC_AFTERNOON) == "Mon, 15 Aug 2005 15:52:01 UT"


def test_rfc822_datetime_pads_day():
    """Test RFC 822 pads the day to two digits."""
    moment = datetime(2006, 5, 1, 8, 5, 9, tzinfo=timezone.utc)

    assert to_rfc822_datetime(moment) == "Mon, 01 May 2006 08:05:09 UT"


def test_rfc850_datetime():
    """Test RFC 850 with a two-digit year."""
    assert to_rfc850_datetime(UTC_AFTERNOON) == "Monday, 15-Aug-05 15:52:01 UTC"


def test_rfc850_datetime_from_summer_time():
    """Test RFC 850 converts British summer time to UTC."""
    moment = datetime(2005, 8, 15, 16, 52, 1)

    assert to_rfc850_datetime(moment) == "Monday, 15-Aug-05 15:52:01 UTC"


def test_unix_timestamp():
    """Test seconds since the epoch."""
    assert to_unix_timestamp(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0
    assert to_unix_timestamp(datetime(2000, 1, 1)) == 946684800
    assert to_unix_timestamp(datetime(2000, 7, 1, 1, 0)) == 962409600


def test_missing_value():
    """Test missing moments give empty output."""
    assert to_iso8601_date(None) == ""
    assert to_iso8601_datetime(None) == ""
    assert to_rfc822_datetime(None) == ""
    assert to_rfc850_datetime(None) == ""
    assert to_unix_timestamp(None) is None
