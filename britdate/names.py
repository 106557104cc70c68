"""English month and day names, independent of the process locale."""

from datetime import datetime

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def month_name(month: int) -> str:
    """January, February, March etc. Empty string for an unknown month."""
    if 1 <= month <= 12:
        return MONTH_NAMES[month - 1]
    return ""


def short_month_name(month: int) -> str:
    """Jan, Feb, Mar etc. Empty string for an unknown month."""
    return month_name(month)[:3]


def day_name(moment: datetime) -> str:
    """Monday, Tuesday etc."""
    return DAY_NAMES[moment.weekday()]


def short_day_name(moment: datetime) -> str:
    """Mon, Tue etc."""
    return day_name(moment)[:3]
