# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum

from pnch.error import (
    InvalidDateFormatError,
    InvalidPeriodFormatError,
    InvalidTimeFormatError,
)
from pnch.model.period import Period, PeriodUnit

TIME_FORMAT_HINT = "`hh:mm` where `hh` represents the hours and `mm` the minutes"
DATE_FORMAT_HINT = "`yyyy-mm-dd`, `today` or `yesterday`"
PERIOD_FORMAT_HINT = (
    "`n <period>` where `n` is a number and `<period>` is one of "
    "`days`, `weeks`, `months` or `years`"
)

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
_DATE_PATTERN = re.compile(r"^\d{4}-\d{1,2}-\d{1,2}$")

EARLIEST_DATE = pendulum.date(1, 1, 1)

_PERIOD_UNITS: dict[str, PeriodUnit] = {
    "day": PeriodUnit.DAYS,
    "days": PeriodUnit.DAYS,
    "week": PeriodUnit.WEEKS,
    "weeks": PeriodUnit.WEEKS,
    "month": PeriodUnit.MONTHS,
    "months": PeriodUnit.MONTHS,
    "year": PeriodUnit.YEARS,
    "years": PeriodUnit.YEARS,
}


def now_local() -> pendulum.DateTime:
    """Current local time truncated to the minute, the precision entries are kept in."""
    return pendulum.now("local").set(second=0, microsecond=0)


def today_local() -> pendulum.Date:
    return now_local().date()


def time_of_day(datetime: pendulum.DateTime) -> pendulum.Time:
    return pendulum.time(datetime.hour, datetime.minute)


def time_from_str(value: str) -> pendulum.Time:
    """
    Parse a time of day in (H)H:mm format.

    Raises:
        InvalidTimeFormatError: if the format is wrong or a field is out of range
    """
    time_match = _TIME_PATTERN.match(value.strip())
    if not time_match:
        raise InvalidTimeFormatError(value, TIME_FORMAT_HINT)

    hour = int(time_match.group(1))
    minute = int(time_match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeFormatError(value, TIME_FORMAT_HINT)

    return pendulum.time(hour, minute)


def time_to_str(time: pendulum.Time) -> str:
    return f"{time.hour:02d}:{time.minute:02d}"


def time_to_str_optional(time: Optional[pendulum.Time]) -> Optional[str]:
    if time is None:
        return None
    return time_to_str(time)


def time_to_display_str(time: pendulum.Time) -> str:
    return f"{time.hour}:{time.minute:02d}"


def time_to_display_str_optional(time: Optional[pendulum.Time]) -> Optional[str]:
    if time is None:
        return None
    return time_to_display_str(time)


def date_from_str(value: str, today: Optional[pendulum.Date] = None) -> pendulum.Date:
    """
    Parse a calendar date given as YYYY-MM-DD, `today` or `yesterday`.

    Raises:
        InvalidDateFormatError: if the value is not a valid calendar date
    """
    date_str = value.strip()
    reference = today if today is not None else today_local()

    if date_str in ("today", "t"):
        return reference
    if date_str in ("yesterday", "y"):
        return reference.subtract(days=1)

    if not _DATE_PATTERN.match(date_str):
        raise InvalidDateFormatError(value, DATE_FORMAT_HINT)

    year, month, day = map(int, date_str.split("-"))
    try:
        return pendulum.date(year, month, day)
    except ValueError:
        raise InvalidDateFormatError(value, DATE_FORMAT_HINT) from None


def date_to_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD")


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def period_from_str(value: str) -> Period:
    """
    Parse a period such as `2 weeks`, `1 day` or `month`.

    A missing count means one unit.

    Raises:
        InvalidPeriodFormatError: if the count is not a number or the unit is unknown
    """
    parts = value.strip().split()
    if len(parts) == 1:
        count_str, unit_str = "1", parts[0]
    elif len(parts) == 2:
        count_str, unit_str = parts
    else:
        raise InvalidPeriodFormatError(value, PERIOD_FORMAT_HINT)

    if not count_str.isdigit():
        raise InvalidPeriodFormatError(value, PERIOD_FORMAT_HINT)

    unit = _PERIOD_UNITS.get(unit_str.lower())
    if unit is None:
        raise InvalidPeriodFormatError(value, PERIOD_FORMAT_HINT)

    return {"count": int(count_str), "unit": unit}


def period_to_str(period: Period) -> str:
    return f"{period['count']} {period['unit']}"


def period_start(period: Period, today: pendulum.Date) -> pendulum.Date:
    """
    First calendar day of the window that ends today and spans the period.

    A window reaching past the first representable date starts on that date.
    """
    try:
        match period["unit"]:
            case PeriodUnit.DAYS:
                return today.subtract(days=period["count"])
            case PeriodUnit.WEEKS:
                return today.subtract(weeks=period["count"])
            case PeriodUnit.MONTHS:
                return today.subtract(months=period["count"])
            case PeriodUnit.YEARS:
                return today.subtract(years=period["count"])
    except (ValueError, OverflowError):
        return EARLIEST_DATE
    raise ValueError(f"unknown period unit: {period['unit']}")


def minutes_between(start: pendulum.Time, end: pendulum.Time) -> int:
    return (end.hour * 60 + end.minute) - (start.hour * 60 + start.minute)


def duration_to_str(duration: pendulum.Duration) -> str:
    """Format a duration as hours and minutes, e.g. 1h11m."""
    total_minutes = int(duration.total_seconds()) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h{minutes:02d}m"


def duration_to_clock_str(duration: pendulum.Duration) -> str:
    """Format a duration as HH:MM."""
    total_seconds = int(duration.total_seconds())
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    return f"{hours:02d}:{minutes:02d}"
