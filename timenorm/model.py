"""Data model for broken-down times, relative offsets and calendar helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

UNSET = -9999999

SECS_PER_HOUR = 3600
SECS_PER_DAY = 86400
DAYS_PER_YEAR = 365
YEARS_PER_ERA = 400
DAYS_PER_ERA = 146097
HINNANT_EPOCH_SHIFT = 719468

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class ZoneType(IntEnum):
    """How the zone of a time is expressed."""

    NONE = 0
    OFFSET = 1
    ABBR = 2
    ID = 3


class SpecialType(IntEnum):
    """Kinds of special relative adjustments."""

    NONE = 0
    WEEKDAY = 1
    DAY_OF_WEEK_IN_MONTH = 2
    LAST_DAY_OF_WEEK_IN_MONTH = 3


class FirstLastDayOf(IntEnum):
    """Whether a time is moved to the first or last day of its month."""

    NONE = 0
    FIRST = 1
    LAST = 2


@dataclass
class Special:
    """A special relative adjustment, such as a number of weekdays."""

    type: SpecialType = SpecialType.NONE
    amount: int = 0


@dataclass
class RelTime:
    """A relative time offset, as produced by phrases like "+2 days"."""

    y: int = 0
    m: int = 0
    d: int = 0
    h: int = 0
    i: int = 0
    s: int = 0
    us: int = 0
    weekday: int = 0
    weekday_behavior: int = 0
    first_last_day_of: FirstLastDayOf = FirstLastDayOf.NONE
    invert: bool = False
    days: int = UNSET
    special: Special = field(default_factory=Special)
    have_weekday_relative: bool = False
    have_special_relative: bool = False


@dataclass
class TimeOffset:
    """Zone information in effect at a given moment."""

    offset: int = 0
    leap_secs: int = 0
    is_dst: bool = False
    abbr: str = "UTC"
    transition_time: int = 0


@dataclass
class Time:
    """A broken-down time with optional zone and relative parts.

    ``tz_info`` is any object with a ``get_time_zone_info(ts)`` method that
    returns a :class:`TimeOffset`.
    """

    y: int = 1970
    m: int = 1
    d: int = 1
    h: int = 0
    i: int = 0
    s: int = 0
    us: int = 0
    z: int = 0
    tz_abbr: Optional[str] = None
    tz_info: Optional[Any] = None
    dst: int = 0
    relative: RelTime = field(default_factory=RelTime)
    sse: int = 0
    have_time: bool = False
    have_date: bool = False
    have_zone: bool = False
    have_relative: bool = False
    sse_uptodate: bool = False
    is_localtime: bool = False
    zone_type: ZoneType = ZoneType.NONE


def is_leap(year: int) -> bool:
    """Return whether ``year`` is a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` (1-12) of ``year``."""
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    if month == 2 and is_leap(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def day_of_week(y: int, m: int, d: int) -> int:
    """Return the day of the week, 0 for Sunday up to 6 for Saturday.

    Months and days outside their usual ranges are carried over.
    """
    y += (m - 1) // 12
    m = (m - 1) % 12 + 1
    y -= m <= 2
    era = y // YEARS_PER_ERA
    year_of_era = y - era * YEARS_PER_ERA
    day_of_year = (153 * (m + (-3 if m > 2 else 9)) + 2) // 5 + d - 1
    day_of_era = (
        year_of_era * DAYS_PER_YEAR
        + year_of_era // 4
        - year_of_era // 100
        + day_of_year
    )
    days = era * DAYS_PER_ERA + day_of_era - HINNANT_EPOCH_SHIFT
    return (days + 4) % 7


def hms_to_seconds(h: int, i: int, s: int) -> int:
    """Return hours, minutes and seconds as a number of seconds."""
    return h * SECS_PER_HOUR + i * 60 + s