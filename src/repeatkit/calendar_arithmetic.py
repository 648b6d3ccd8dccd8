#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Calendar arithmetic on zone-less dates: leap years, month lengths, weekdays and
date shifting which reports, rather than hides, targets that do not exist."""

import datetime
import re
from enum import StrEnum, auto
from typing import NamedTuple

from dateutil.relativedelta import relativedelta

from repeatkit.aliases import DateStr
from repeatkit.constants import DATE_FORMAT
from repeatkit.exceptions import ParseError

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class ShiftStatus(StrEnum):
    VALID = auto()
    SKIP = auto()
    OUT_OF_BOUNDS = auto()


class ShiftResult(NamedTuple):
    """The outcome of shifting a date by a calendar offset.

    Parameters
    ----------
    status
        `VALID` if the shifted date exists and is within bounds, `SKIP` if the
        day does not exist in the target period (eg the 31st of September), and
        `OUT_OF_BOUNDS` if the target period lies past the bound.
    date
        The shifted date. Only set when `status` is `VALID`.
    """

    status: ShiftStatus
    date: datetime.date | None = None

    @property
    def valid(self) -> bool:
        return self.status == ShiftStatus.VALID


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def last_day_of_month(year: int, month: int) -> int:
    """Return the number of days in `month` (1 for January, 12 for December)."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be in 1..12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def day_of_week(date: datetime.date) -> int:
    """Return the weekday of `date` in the range [0, 6], Monday being 0."""
    return date.weekday()


def parse_date(value: DateStr | datetime.date) -> datetime.date:
    """Parse a calendar date in `YYYY-MM-DD` form.

    Raises
    ------
    ParseError
        If `value` is not a string of that exact form or names a day which
        does not exist (eg 2025-09-31).
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        raise ParseError(f"Invalid calendar date: {value!r}, expected YYYY-MM-DD")
    try:
        return datetime.datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise ParseError(f"Invalid calendar date: {value!r}")


def format_date(date: datetime.date) -> DateStr:
    return date.strftime(DATE_FORMAT)


def days_between(start: datetime.date, end: datetime.date) -> int:
    return (end - start).days


def months_between(start: datetime.date, end: datetime.date) -> int:
    """Number of calendar months from the month of `start` to that of `end`,
    ignoring the day of the month."""
    return (end.year - start.year) * 12 + end.month - start.month


def years_between(start: datetime.date, end: datetime.date) -> int:
    return end.year - start.year


def shift_by_days(
    date: datetime.date, days: int, until: datetime.date | None = None
) -> ShiftResult:
    """Offset `date` by a number of days. Every day exists, so this never skips."""
    try:
        shifted = date + datetime.timedelta(days=days)
    except OverflowError:
        return ShiftResult(ShiftStatus.OUT_OF_BOUNDS)
    if until is not None and shifted > until:
        return ShiftResult(ShiftStatus.OUT_OF_BOUNDS)
    return ShiftResult(ShiftStatus.VALID, shifted)


def _shift_keeping_day(
    date: datetime.date, delta: relativedelta, until: datetime.date | None
) -> ShiftResult:
    try:
        # nb: relativedelta clamps to the end of the target month
        shifted = date + delta
    except (ValueError, OverflowError):
        return ShiftResult(ShiftStatus.OUT_OF_BOUNDS)
    if until is not None and shifted.replace(day=1) > until:
        return ShiftResult(ShiftStatus.OUT_OF_BOUNDS)
    if shifted.day != date.day:
        return ShiftResult(ShiftStatus.SKIP)
    if until is not None and shifted > until:
        return ShiftResult(ShiftStatus.OUT_OF_BOUNDS)
    return ShiftResult(ShiftStatus.VALID, shifted)


def try_shift_by_months(
    date: datetime.date, months: int, until: datetime.date | None = None
) -> ShiftResult:
    """Advance `date` by `months` calendar months, keeping the day of the month.

    Parameters
    ----------
    until
        If specified, targets falling after this date are reported as `OUT_OF_BOUNDS`.
        A target month starting after `until` is out of bounds even when the day
        does not exist in it.

    Notes
    -----
    1. Days which do not exist in the target month are reported as `SKIP`: the
    31st of a month never becomes the 30th of the next.
    """
    return _shift_keeping_day(date, relativedelta(months=months), until)


def try_shift_by_years(
    date: datetime.date, years: int, until: datetime.date | None = None
) -> ShiftResult:
    """Advance `date` by `years`, keeping month and day. February 29 shifted to a
    non-leap year is reported as `SKIP`, never as February 28."""
    return _shift_keeping_day(date, relativedelta(years=years), until)
