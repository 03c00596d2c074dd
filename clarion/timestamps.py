"""Conversion of the site's local publication times to UTC.

Zone rules are read from the ``tzdata`` package so results do not depend on
the host's timezone configuration.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timezone
from functools import lru_cache
from importlib.resources import files
from zoneinfo import ZoneInfo

from dateutil import tz

from .config import SITE_TIMEZONE
from .errors import MalformedTimestampError

# e.g. "15 Jan 2026 07:00 AM"
LISTING_TIMESTAMP_FORMAT = "%d %b %Y %I:%M %p"
LISTING_TIMESTAMP_PATTERN = re.compile(r"\d{1,2} [A-Za-z]{3} \d{4} \d{2}:\d{2} [AP]M", re.IGNORECASE)


@lru_cache(maxsize=None)
def load_timezone(tz_name: str) -> ZoneInfo:
    resource = files("tzdata").joinpath("zoneinfo")
    for part in tz_name.split("/"):
        resource = resource.joinpath(part)
    if not resource.is_file():
        raise ValueError(f"unknown timezone '{tz_name}'")
    with resource.open("rb") as handle:
        return ZoneInfo.from_file(handle, key=tz_name)


def to_utc(local_date: date, local_time: time, tz_name: str = SITE_TIMEZONE) -> datetime:
    """Interpret a wall-clock date and time in ``tz_name`` and return the UTC instant.

    The offset is the one in force on ``local_date``. A time repeated when
    daylight saving ends is read as standard time; a time skipped when it
    starts is moved forward by the length of the gap.
    """
    local = datetime.combine(local_date, local_time, tzinfo=load_timezone(tz_name))
    if not tz.datetime_exists(local):
        local = tz.resolve_imaginary(local)
    elif tz.datetime_ambiguous(local):
        local = tz.enfold(local, fold=1)
    return local.astimezone(timezone.utc)


def parse_listing_timestamp(date_text: str, time_text: str) -> datetime:
    """Parse a listing row's date and time cells into a UTC datetime."""
    text = f"{date_text} {time_text}"
    if not LISTING_TIMESTAMP_PATTERN.fullmatch(text):
        raise MalformedTimestampError(text)
    try:
        local = datetime.strptime(text, LISTING_TIMESTAMP_FORMAT)
    except ValueError:
        raise MalformedTimestampError(text) from None
    return to_utc(local.date(), local.time())
