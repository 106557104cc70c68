"""Lenient parsing of dates written in British English."""

import logging
import re
from datetime import datetime
from typing import Optional

from dateutil import parser as dateutil_parser

from .region import UK_REGION, Region, local_now

logger = logging.getLogger(__name__)

ORDINAL_PATTERN = re.compile(r"\b([0-9]+)(st|nd|rd|th)\b", re.IGNORECASE)


def parse_lenient_date(
    text: Optional[str], region: Region = UK_REGION
) -> Optional[datetime]:
    """
    Parse a date a little more forgivingly than a strict parser.

    Ordinals are removed ("29th May" becomes "29 May"). If the text has
    exactly one space it is taken to be a day and month without a year, and
    the current year in the region is added. Day comes before month. Text
    without both a day and a month is not recognised.

    Args:
        text: Date text entered by a person
        region: Region used to work out the current year

    Returns:
        Parsed naive datetime in civil time, or None if not recognised
    """
    if text is None:
        return None

    date_text = ORDINAL_PATTERN.sub(r"\1", text.strip())

    year = local_now(region).year
    if date_text.count(" ") == 1:
        date_text = f"{date_text} {year}"

    # Parse against two defaults; a day or month taken from a default differs
    try:
        first = dateutil_parser.parse(
            date_text, dayfirst=True, default=datetime(year, 1, 1)
        )
        second = dateutil_parser.parse(
            date_text, dayfirst=True, default=datetime(year, 12, 31)
        )
    except (ValueError, OverflowError) as e:
        logger.debug(f"Date not recognised '{text}': {e}")
        return None

    if (first.day, first.month) != (second.day, second.month):
        logger.debug(f"Date not recognised '{text}': no day or month given")
        return None

    return first
