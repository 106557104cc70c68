"""britdate: dates and times in British English house style."""

from .date_range import DateRange, RangeStyle, format_date_range
from .formatter import (
    format_date_with_weekday,
    format_date_with_weekday_and_time,
    format_long_date,
    format_long_date_with_time,
    format_month_year,
    format_short_date,
    format_short_date_with_time,
    format_time,
)
from .names import day_name, month_name, short_day_name, short_month_name
from .parser import parse_lenient_date
from .region import UK_REGION, Region, as_utc, local_now, to_local_time
from .utc import (
    to_iso8601_date,
    to_iso8601_datetime,
    to_rfc822_datetime,
    to_rfc850_datetime,
    to_unix_timestamp,
)

__all__ = [
    "DateRange",
    "RangeStyle",
    "Region",
    "UK_REGION",
    "as_utc",
    "day_name",
    "format_date_range",
    "format_date_with_weekday",
    "format_date_with_weekday_and_time",
    "format_long_date",
    "format_long_date_with_time",
    "format_month_year",
    "format_short_date",
    "format_short_date_with_time",
    "format_time",
    "local_now",
    "month_name",
    "parse_lenient_date",
    "short_day_name",
    "short_month_name",
    "to_iso8601_date",
    "to_iso8601_datetime",
    "to_local_time",
    "to_rfc822_datetime",
    "to_rfc850_datetime",
    "to_unix_timestamp",
]
