"""Dates and times in common international formats."""

from datetime import datetime
from typing import Optional

from .names import day_name, short_day_name, short_month_name
from .region import UK_REGION, Region, as_utc


def to_iso8601_date(moment: Optional[datetime]) -> str:
    """
    Format as YYYY-MM-DD.

    The calendar date is kept as given. A date with no time of day in summer
    would otherwise move back to the previous day in UTC.
    """
    if moment is None:
        return ""
    return f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"


def to_iso8601_datetime(moment: Optional[datetime], region: Region = UK_REGION) -> str:
    """Format as a UTC ISO 8601 date and time, eg 2006-04-01T15:30:00Z."""
    if moment is None:
        return ""
    utc = as_utc(moment, region)
    return f"{to_iso8601_date(utc)}T{utc:%H:%M:%S}Z"


def to_rfc822_datetime(moment: Optional[datetime], region: Region = UK_REGION) -> str:
    """
    Format as an RFC 822 UTC date and time, as used by RSS feeds.

    Eg Mon, 15 Aug 2005 15:52:01 UT. RFC 822 specifies a two-digit year but
    four digits are in common use.
    """
    if moment is None:
        return ""
    utc = as_utc(moment, region)
    return (
        f"{short_day_name(utc)}, {utc.day:02d} {short_month_name(utc.month)} "
        f"{utc.year:04d} {utc:%H:%M:%S} UT"
    )


def to_rfc850_datetime(moment: Optional[datetime], region: Region = UK_REGION) -> str:
    """Format as an RFC 850 UTC date and time, eg Monday, 15-Aug-05 15:52:01 UTC."""
    if moment is None:
        return ""
    utc = as_utc(moment, region)
    return (
        f"{day_name(utc)}, {utc.day:02d}-{short_month_name(utc.month)}-"
        f"{utc.year % 100:02d} {utc:%H:%M:%S} UTC"
    )


def to_unix_timestamp(
    moment: Optional[datetime], region: Region = UK_REGION
) -> Optional[int]:
    """Seconds since 1970-01-01T00:00:00Z, eg 1115337662."""
    if moment is None:
        return None
    return int(as_utc(moment, region).timestamp())
