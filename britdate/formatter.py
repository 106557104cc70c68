"""
House-style formatting of single dates and times in British English.

Every function accepts None and returns an empty string for it, so optional
values can be passed straight through from callers.
"""

from datetime import datetime
from typing import Optional

from .names import day_name, month_name, short_month_name


def format_long_date(moment: Optional[datetime]) -> str:
    """
    Format as 1 January 2004.

    Use only when the preferred style including the day name is too long.
    """
    if moment is None:
        return ""
    return f"{moment.day} {month_name(moment.month)} {moment.year}"


def format_short_date(moment: Optional[datetime], include_year: bool = True) -> str:
    """
    Format as 1 Jan 2004, or 1 Jan without the year.

    The form without a year is only for short-term data about the current
    year, never for anything which will be read later on.
    """
    if moment is None:
        return ""
    text = f"{moment.day} {short_month_name(moment.month)}"
    if include_year:
        text = f"{text} {moment.year}"
    return text


def format_date_with_weekday(moment: Optional[datetime]) -> str:
    """Format as Monday 1 January 2004."""
    if moment is None:
        return ""
    return f"{day_name(moment)} {format_long_date(moment)}"


def format_time(moment: Optional[datetime]) -> str:
    """Format as 10am, 10.15am, 12 noon or 12 midnight."""
    if moment is None:
        return ""

    hour, minute = moment.hour, moment.minute

    if hour == 0:
        text = "12"
    elif hour <= 12:
        text = str(hour)
    else:
        text = str(hour - 12)

    if minute > 0:
        text += f".{minute:02d}"

    if hour == 0 and minute == 0:
        return f"{text} midnight"
    if hour == 12 and minute == 0:
        return f"{text} noon"
    return text + ("am" if hour < 12 else "pm")


def format_long_date_with_time(moment: Optional[datetime]) -> str:
    """Format as 1 January 2004, 10am."""
    if moment is None:
        return ""
    return f"{format_long_date(moment)}, {format_time(moment)}"


def format_date_with_weekday_and_time(moment: Optional[datetime]) -> str:
    """Format as Monday 1 January 2004, 10am."""
    if moment is None:
        return ""
    return f"{format_date_with_weekday(moment)}, {format_time(moment)}"


def format_short_date_with_time(
    moment: Optional[datetime], include_year: bool = True
) -> str:
    """Format as 1 Jan 2004, 10am, or 1 Jan, 10am without the year."""
    if moment is None:
        return ""
    return f"{format_short_date(moment, include_year)}, {format_time(moment)}"


def format_month_year(moment: Optional[datetime]) -> str:
    """Format as January 2004."""
    if moment is None:
        return ""
    return f"{month_name(moment.month)} {moment.year}"
