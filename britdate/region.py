"""Regional civil time for britdate."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

SUPPORTED_LOCALE = "en-GB"


@dataclass(frozen=True)
class Region:
    """
    Locale and time zone used for civil time.

    Constructed once and passed to the functions that need it, rather than
    read from process-wide state.
    """

    locale: str = SUPPORTED_LOCALE
    timezone: str = "Europe/London"

    def __post_init__(self) -> None:
        if self.locale != SUPPORTED_LOCALE:
            raise ValueError(
                f"Unsupported locale: {self.locale}. Only {SUPPORTED_LOCALE} is supported"
            )
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone '{self.timezone}': {e}")

    @property
    def tzinfo(self) -> ZoneInfo:
        """Time zone of this region."""
        return ZoneInfo(self.timezone)


UK_REGION = Region()


def to_local_time(
    moment: Optional[datetime], region: Region = UK_REGION
) -> Optional[datetime]:
    """
    Convert a moment to civil time in the region.

    Naive moments are taken to be UTC, which is what a server clock reports.
    """
    if moment is None:
        return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(region.tzinfo)


def local_now(region: Region = UK_REGION) -> datetime:
    """Current civil time in the region."""
    return datetime.now(region.tzinfo)


def as_utc(moment: datetime, region: Region = UK_REGION) -> datetime:
    """Normalize a moment to UTC. Naive moments are civil time in the region."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=region.tzinfo)
    return moment.astimezone(timezone.utc)
