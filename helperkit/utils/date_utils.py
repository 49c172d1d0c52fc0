"""Small shared date helpers (no holiday calendars).

Working days use a simple weekday-based definition:
- Monday..Friday are working days
- Saturday/Sunday are not

No holiday calendar is applied.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import TypeVar

from ..time_utils import UTC, to_utc, utc_today

TDate = TypeVar("TDate", date, datetime)

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_SQL_SERVER_MIN_DATE = date(1753, 1, 1)


# region Working days
def is_working_day(value: date | datetime) -> bool:
    return value.weekday() < 5


def add_working_days(value: TDate, working_days: int) -> TDate:
    """Return `value` moved by N working days, keeping its time and tzinfo.

    - add_working_days(d, 0) == d when `d` is a working day.
    - A weekend origin always moves off the weekend, even for 0: forward for
      zero/positive counts, backward for negative counts.
    """
    remaining = int(working_days)
    step = timedelta(days=-1 if remaining < 0 else 1)
    current = value
    while remaining != 0 or not is_working_day(current):
        current += step
        while not is_working_day(current):
            current += step
        if remaining > 0:
            remaining -= 1
        elif remaining < 0:
            remaining += 1
    return current


def working_days_until(start: date, end: date) -> int:
    """Count the working days after `start` up to and including `end`; 0 when `end` is not later."""
    if end <= start:
        return 0
    days = 0
    cursor = start
    while cursor < end:
        cursor += timedelta(days=1)
        if is_working_day(cursor):
            days += 1
    return days
# endregion


# region Month arithmetic
def this_month(value: TDate) -> TDate:
    if isinstance(value, datetime):
        return value.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    return value.replace(day=1)


def next_month(value: TDate) -> TDate:
    first = this_month(value)
    if first.month == 12:
        return first.replace(year=first.year + 1, month=1)
    return first.replace(month=first.month + 1)


def end_of_month(value: TDate) -> TDate:
    """Last day of the month; for datetimes, its last representable microsecond."""
    if isinstance(value, datetime):
        return next_month(value) - timedelta(microseconds=1)
    return next_month(value) - timedelta(days=1)


def days_in_month(value: date | datetime) -> int:
    return calendar.monthrange(value.year, value.month)[1]


def next_day_of_week(value: date | datetime, weekday: int = calendar.SUNDAY) -> date:
    """Closest date on or after `value` whose weekday matches (Monday=0)."""
    if not 0 <= int(weekday) <= 6:
        raise ValueError(f"weekday must be in 0..6, got: {weekday!r}")
    day = value.date() if isinstance(value, datetime) else value
    diff = (int(weekday) - day.weekday()) % 7
    return day + timedelta(days=diff)


def change_time(
    value: datetime,
    hour: int,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> datetime:
    return value.replace(hour=hour, minute=minute, second=second, microsecond=microsecond)


def remove_time_zone(value: datetime) -> datetime:
    return value.replace(tzinfo=None)
# endregion


# region Date queries
def _as_day(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def is_today(value: date | datetime, *, now_ref: datetime | date | None = None) -> bool:
    return _as_day(value) == utc_today(now_ref)


def is_yesterday(value: date | datetime, *, now_ref: datetime | date | None = None) -> bool:
    return is_today(value + timedelta(days=1), now_ref=now_ref)


def is_tomorrow(value: date | datetime, *, now_ref: datetime | date | None = None) -> bool:
    return is_today(value - timedelta(days=1), now_ref=now_ref)


def is_this_month(value: date | datetime, *, now_ref: datetime | date | None = None) -> bool:
    today = utc_today(now_ref)
    return value.year == today.year and value.month == today.month


def min_date_for_sql_server() -> date:
    return _SQL_SERVER_MIN_DATE
# endregion


# region Formatting
def to_iso_date(value: date | datetime) -> str:
    return value.strftime("%Y-%m-%d")


def to_iso_date_time(value: datetime, output_seconds: bool = False, iso8601: bool = False) -> str:
    sep = "T" if iso8601 else " "
    fmt = f"%Y-%m-%d{sep}%H:%M:%S" if output_seconds else f"%Y-%m-%d{sep}%H:%M"
    return value.strftime(fmt)


def to_javascript(value: date | datetime) -> str:
    if not isinstance(value, datetime):
        value = datetime.combine(value, time(0, 0))
    millis = value.microsecond // 1000
    return (
        f"new Date({value.year},{value.month - 1},{value.day},"
        f"{value.hour},{value.minute},{value.second},{millis})"
    )


def to_unix_time(value: date | datetime) -> timedelta:
    """Elapsed time since 1970-01-01 UTC; naive values are taken to be UTC."""
    if not isinstance(value, datetime):
        value = datetime.combine(value, time(0, 0))
    return to_utc(value) - _UNIX_EPOCH
# endregion
