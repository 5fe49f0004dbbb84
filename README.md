# timenorm

`timenorm` works on a broken-down date and time. The fields may be out of range, and the value may carry relative offsets and weekday rules. The package normalises the value and computes the matching Unix timestamp.

## What it does

- **Carries overflowing fields into larger units.** For example, 90 seconds become 1 minute 30 seconds. Month 13 becomes January of the next year. Day 0 becomes the last day of the previous month.
- **Applies the relative part of a `Time`.** This covers:
  - offsets in years, months, days, hours, minutes, seconds and microseconds;
  - "first/last day of the month";
  - weekday rules;
  - weekday (business-day) steps;
  - "day of week in month" specials.
- **Converts the result to seconds since 1970-01-01 (`Time.sse`).** It takes account of:
  - a fixed UTC offset (`ZoneType.OFFSET`);
  - a zone abbreviation with a DST flag (`ZoneType.ABBR`);
  - a zone object (`ZoneType.ID`, or the fallback `tzi` argument).

  A zone object is any object with a `get_time_zone_info(ts)` method that returns a `TimeOffset`.

## Installation

```
pip install timenorm
```

## Usage

```python
from timenorm.model import Time
from timenorm.normalize import do_normalize, update_ts, epoch_days_from_time

t = Time(y=2006, m=1, d=32)
do_normalize(t)
assert (t.y, t.m, t.d) == (2006, 2, 1)

t = Time(y=1970, m=1, d=2)
update_ts(t, None)
assert t.sse == 86400

assert epoch_days_from_time(Time(y=2000, m=1, d=1)) == 10957
```

### `timenorm.model`

The data classes are:

- `Time`
- `RelTime`
- `Special`
- `TimeOffset`

The enums are:

- `ZoneType`
- `SpecialType`
- `FirstLastDayOf`

The calendar helpers are:

- `is_leap(year)`
- `days_in_month(year, month)`, which raises `ValueError` for a month outside 1–12
- `day_of_week(y, m, d)`, which returns 0 for Sunday and 6 for Saturday
- `hms_to_seconds(h, i, s)`

### `timenorm.normalize`

- `do_normalize(time)` brings the fields of a `Time` into range, in place.
- `do_rel_normalize(base, rt)` brings the fields of a `RelTime` into range. It borrows days from the months of `base`.
- `epoch_days_from_time(time)` returns the days since 1970-01-01.
- `update_ts(time, tzi=None)` applies the relative parts and sets `time.sse`. It then clears the relative flags.

## What it does not do

The package does not parse date strings. It does not read time zone databases and does not ship any. Callers build `Time` values themselves and supply their own zone objects.

## Running the tests

```
pip install -e .[test]
pytest
```