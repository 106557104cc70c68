"""House-style phrasing of a period from one date and time to another."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .formatter import (
    format_date_with_weekday,
    format_long_date,
    format_short_date,
    format_time,
)
from .region import UK_REGION, Region, as_utc

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RangeStyle:
    """Which parts of a date range to show."""

    show_start_time: bool = True
    show_end_time: bool = True
    use_short_form: bool = False


@dataclass(frozen=True)
class DateRange:
    """A period between two moments."""

    start: datetime
    end: datetime

    @property
    def multi_day(self) -> bool:
        """True if start and end fall on different calendar days."""
        return self.start.date() != self.end.date()

    @property
    def same_month(self) -> bool:
        """True if start and end share month and year."""
        return (self.start.year, self.start.month) == (self.end.year, self.end.month)

    def ordered(self, region: Region = UK_REGION) -> "DateRange":
        """
        This range with start and end swapped if end comes first.

        Moments are compared in UTC, reading naive ones as civil time in the
        region, so naive and aware moments can be mixed.
        """
        if as_utc(self.end, region) < as_utc(self.start, region):
            logger.debug(f"End {self.end} precedes start {self.start}, swapping")
            return DateRange(start=self.end, end=self.start)
        return self

    def describe(
        self, style: Optional[RangeStyle] = None, region: Region = UK_REGION
    ) -> str:
        """
        Describe the range in house style.

        Examples (long form, then short form):

        - One day, no time: Friday 26 May 2006 / 26 May 2006
        - One day, start time: 9am, Friday 26 May 2006 / 9am, 26 May 2006
        - One day, both times: 9am to 2pm, Friday 26 May 2006
        - Several days in one month, no time: 26 to 27 May 2006
        - Several days across months, no time:
          Friday 26 May 2006 to Thursday 1 June 2006 / 26 May 2006 to 1 Jun 2006
        - Several days, start time:
          9am, Friday 26 May 2006 to Saturday 27 May 2006
        - Several days, both times:
          9am, Friday 26 May 2006 to 2pm, Saturday 27 May 2006

        An end time without a start time is not shown.
        """
        style = style or RangeStyle()
        span = self.ordered(region)
        start, end = span.start, span.end

        full_date: Callable[[datetime], str]
        bare_date: Callable[[datetime], str]
        if style.use_short_form:
            full_date = format_short_date
            bare_date = format_short_date
        else:
            full_date = format_date_with_weekday
            bare_date = format_long_date

        start_time_only = style.show_start_time and not style.show_end_time
        both_times = style.show_start_time and style.show_end_time
        no_time = not style.show_start_time

        if not span.multi_day:
            if no_time:
                return full_date(start)
            if start_time_only:
                return f"{format_time(start)}, {full_date(start)}"
            if both_times:
                return (
                    f"{format_time(start)} to {format_time(end)}, {full_date(start)}"
                )
        else:
            if no_time and span.same_month:
                return f"{start.day} to {bare_date(end)}"
            if no_time:
                return f"{full_date(start)} to {full_date(end)}"
            if start_time_only:
                return f"{format_time(start)}, {full_date(start)} to {full_date(end)}"
            if both_times:
                return (
                    f"{format_time(start)}, {full_date(start)} to "
                    f"{format_time(end)}, {full_date(end)}"
                )

        # Unreachable while the cases above cover every combination
        return ""


def format_date_range(
    start: Optional[datetime],
    end: Optional[datetime],
    show_start_time: bool = True,
    show_end_time: bool = True,
    use_short_form: bool = False,
    region: Region = UK_REGION,
) -> str:
    """
    Describe the period from start to end in house style.

    Returns an empty string if either moment is missing. If end precedes
    start the two are swapped; naive moments are taken as civil time in the
    region when comparing them.
    """
    if start is None or end is None:
        return ""
    style = RangeStyle(
        show_start_time=show_start_time,
        show_end_time=show_end_time,
        use_short_form=use_short_form,
    )
    return DateRange(start=start, end=end).describe(style, region)
