"""Normalisation of broken-down times and conversion to epoch seconds."""

from __future__ import annotations

from typing import Any, Optional

from timenorm.model import (
    DAYS_PER_ERA,
    DAYS_PER_YEAR,
    HINNANT_EPOCH_SHIFT,
    SECS_PER_DAY,
    SECS_PER_HOUR,
    UNSET,
    YEARS_PER_ERA,
    FirstLastDayOf,
    RelTime,
    Special,
    SpecialType,
    Time,
    ZoneType,
    day_of_week,
    days_in_month,
    hms_to_seconds,
    is_leap,
)


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _cmod(a: int, b: int) -> int:
    """Remainder matching truncating division."""
    return a - b * _cdiv(a, b)


def _range_limit(start: int, end: int, adj: int, a: int, b: int) -> tuple[int, int]:
    if a < start:
        k = (start - a - 1) // adj + 1
        b -= k
        a += adj * k
    if a >= end:
        q = a // adj
        b += q
        a -= adj * q
    return a, b


def _month_days(year: int, month: int) -> int:
    return days_in_month(year, month)


def _range_limit_days_relative(base: Time, rt: RelTime) -> None:
    base.m, base.y = _range_limit(1, 13, 12, base.m, base.y)
    year, month = base.y, base.m

    if not rt.invert:
        while rt.d < 0:
            month -= 1
            if month < 1:
                month += 12
                year -= 1
            rt.d += _month_days(year, month)
            rt.m -= 1
    else:
        while rt.d < 0:
            rt.d += _month_days(year, month)
            rt.m -= 1
            month += 1
            if month > 12:
                month -= 12
                year += 1


def _range_limit_days(time: Time) -> bool:
    if time.d >= DAYS_PER_ERA or time.d <= -DAYS_PER_ERA:
        eras = _cdiv(time.d, DAYS_PER_ERA)
        time.y += YEARS_PER_ERA * eras
        time.d -= DAYS_PER_ERA * eras

    time.m, time.y = _range_limit(1, 13, 12, time.m, time.y)

    days_this_month = _month_days(time.y, time.m)
    last_month = time.m - 1
    if last_month < 1:
        last_month += 12
        last_year = time.y - 1
    else:
        last_year = time.y
    days_last_month = _month_days(last_year, last_month)

    if time.d <= 0:
        time.d += days_last_month
        time.m -= 1
        return True
    if time.d > days_this_month:
        time.d -= days_this_month
        time.m += 1
        return True
    return False


def _adjust_for_weekday(time: Time) -> None:
    rel = time.relative
    current_dow = day_of_week(time.y, time.m, time.d)

    if rel.weekday_behavior == 2:
        if current_dow == 0 and rel.weekday != 0:
            rel.weekday -= 7
        if rel.weekday == 0 and current_dow != 0:
            rel.weekday = 7
        time.d += rel.weekday - current_dow
        return

    difference = rel.weekday - current_dow
    if (rel.d < 0 and difference < 0) or (
        rel.d >= 0 and difference <= -rel.weekday_behavior
    ):
        difference += 7
    if rel.weekday >= 0:
        time.d += difference
    else:
        time.d -= 7 - (abs(rel.weekday) - current_dow)
    rel.have_weekday_relative = False


def do_rel_normalize(base: Time, rt: RelTime) -> None:
    """Bring every field of ``rt`` into range, borrowing days from ``base``'s month."""
    rt.us, rt.s = _range_limit(0, 1000000, 1000000, rt.us, rt.s)
    rt.s, rt.i = _range_limit(0, 60, 60, rt.s, rt.i)
    rt.i, rt.h = _range_limit(0, 60, 60, rt.i, rt.h)
    rt.h, rt.d = _range_limit(0, 24, 24, rt.h, rt.d)
    rt.m, rt.y = _range_limit(0, 12, 12, rt.m, rt.y)

    _range_limit_days_relative(base, rt)
    rt.m, rt.y = _range_limit(0, 12, 12, rt.m, rt.y)


def _magic_date_calc(time: Time) -> None:
    # The algorithm does not work before the year 1.
    if time.d < -719498:
        return

    g = time.d + HINNANT_EPOCH_SHIFT - 1

    def days_before(year: int) -> int:
        return 365 * year + _cdiv(year, 4) - _cdiv(year, 100) + _cdiv(year, 400)

    y = _cdiv(10000 * g + 14780, 3652425)
    ddd = g - days_before(y)
    if ddd < 0:
        y -= 1
        ddd = g - days_before(y)
    mi = _cdiv(100 * ddd + 52, 3060)
    mm = _cmod(mi + 2, 12) + 1
    y += _cdiv(mi + 2, 12)
    dd = ddd - _cdiv(mi * 306 + 5, 10) + 1
    time.y, time.m, time.d = y, mm, dd


def do_normalize(time: Time) -> None:
    """Carry overflowing or negative fields of ``time`` into the larger units."""
    if time.us != UNSET:
        time.us, time.s = _range_limit(0, 1000000, 1000000, time.us, time.s)
    if time.s != UNSET:
        time.s, time.i = _range_limit(0, 60, 60, time.s, time.i)
    if time.s != UNSET:
        time.i, time.h = _range_limit(0, 60, 60, time.i, time.h)
    if time.s != UNSET:
        time.h, time.d = _range_limit(0, 24, 24, time.h, time.d)
    time.m, time.y = _range_limit(1, 13, 12, time.m, time.y)

    if time.y == 1970 and time.m == 1 and time.d != 1:
        _magic_date_calc(time)

    while _range_limit_days(time):
        pass
    time.m, time.y = _range_limit(1, 13, 12, time.m, time.y)


def _apply_first_last_day_of(time: Time) -> None:
    flag = time.relative.first_last_day_of
    if flag == FirstLastDayOf.FIRST:
        time.d = 1
    elif flag == FirstLastDayOf.LAST:
        time.d = 0
        time.m += 1


def _adjust_relative(time: Time) -> None:
    rel = time.relative
    if rel.have_weekday_relative:
        _adjust_for_weekday(time)
    do_normalize(time)

    if time.have_relative:
        time.us += rel.us
        time.s += rel.s
        time.i += rel.i
        time.h += rel.h
        time.d += rel.d
        time.m += rel.m
        time.y += rel.y

    _apply_first_last_day_of(time)
    do_normalize(time)


def _adjust_special_weekday(time: Time) -> None:
    count = time.relative.special.amount
    dow = day_of_week(time.y, time.m, time.d)

    # Whole groups of five weekdays are whole weeks.
    time.d += _cdiv(count, 5) * 7
    rem = _cmod(count, 5)

    if count > 0:
        if rem == 0:
            if dow == 0:
                time.d -= 2
            elif dow == 6:
                time.d -= 1
        elif dow == 6:
            time.d += 1
        elif dow + rem > 5:
            time.d += 2
    else:
        if rem == 0:
            if dow == 6:
                time.d += 2
            elif dow == 0:
                time.d += 1
        elif dow == 0:
            time.d -= 1
        elif dow + rem < 1:
            time.d -= 2

    time.d += rem


def _adjust_special(time: Time) -> None:
    rel = time.relative
    if rel.have_special_relative and rel.special.type == SpecialType.WEEKDAY:
        _adjust_special_weekday(time)
    do_normalize(time)
    rel.special = Special()


def _adjust_special_early(time: Time) -> None:
    rel = time.relative
    if rel.have_special_relative:
        if rel.special.type == SpecialType.DAY_OF_WEEK_IN_MONTH:
            time.d = 1
            time.m += rel.m
            rel.m = 0
        elif rel.special.type == SpecialType.LAST_DAY_OF_WEEK_IN_MONTH:
            time.d = 1
            time.m += rel.m + 1
            rel.m = 0
    _apply_first_last_day_of(time)
    do_normalize(time)


def _set_timezone(time: Time, tzi: Any) -> None:
    info = tzi.get_time_zone_info(time.sse)
    time.z = info.offset
    time.dst = int(info.is_dst)
    time.tz_info = tzi
    time.tz_abbr = info.abbr
    time.have_zone = True
    time.zone_type = ZoneType.ID


def _adjust_timezone(time: Time, tzi: Optional[Any]) -> None:
    if time.zone_type == ZoneType.OFFSET:
        time.is_localtime = True
        time.sse += -time.z
        return
    if time.zone_type == ZoneType.ABBR:
        time.is_localtime = True
        time.sse += -time.z - time.dst * SECS_PER_HOUR
        return
    if time.zone_type == ZoneType.ID:
        tzi = time.tz_info
    if tzi is None:
        return

    current = tzi.get_time_zone_info(time.sse)
    after = tzi.get_time_zone_info(time.sse - current.offset)
    time.is_localtime = True

    local = time.sse - after.offset
    in_transition = (
        local >= after.transition_time + (current.offset - after.offset)
        and local < after.transition_time
    )
    if current.offset != after.offset and not in_transition:
        adjustment = -after.offset
    else:
        adjustment = -current.offset

    time.sse += adjustment
    _set_timezone(time, tzi)


def epoch_days_from_time(time: Time) -> int:
    """Return the number of days between 1970-01-01 and the date of ``time``."""
    y = time.y - (time.m <= 2)
    era = _cdiv(y if y >= 0 else y - 399, YEARS_PER_ERA)
    year_of_era = y - era * YEARS_PER_ERA
    day_of_year = _cdiv(153 * (time.m + (-3 if time.m > 2 else 9)) + 2, 5) + time.d - 1
    day_of_era = (
        year_of_era * DAYS_PER_YEAR
        + year_of_era // 4
        - year_of_era // 100
        + day_of_year
    )
    return era * DAYS_PER_ERA + day_of_era - HINNANT_EPOCH_SHIFT


def update_ts(time: Time, tzi: Optional[Any] = None) -> None:
    """Apply all relative parts of ``time`` and compute its epoch seconds.

    ``tzi`` is the zone used when ``time`` carries no zone of its own.
    """
    _adjust_special_early(time)
    _adjust_relative(time)
    _adjust_special(time)

    time.sse = epoch_days_from_time(time) * SECS_PER_DAY + hms_to_seconds(
        time.h, time.i, time.s
    )

    _adjust_timezone(time, tzi)

    time.sse_uptodate = True
    time.have_relative = False
    time.relative.have_weekday_relative = False
    time.relative.have_special_relative = False
    time.relative.first_last_day_of = FirstLastDayOf.NONE


__all__ = [
    "do_normalize",
    "do_rel_normalize",
    "epoch_days_from_time",
    "update_ts",
    "is_leap",
]