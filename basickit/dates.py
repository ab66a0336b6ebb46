"""Gregorian date arithmetic counted from 1900-01-01."""

from __future__ import annotations

from dataclasses import dataclass

EPOCH_YEAR = 1900
WEEKDAY_NAMES = ("一", "二", "三", "四", "五", "六", "日")
_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True, order=True)
class Date:
    """A calendar date; validity is checked by the functions that need it."""

    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02d}-{self.day:02d}"


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"invalid month: {month}")


def month_days(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``."""
    _check_month(month)
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def _days_in_years(start: int, stop: int) -> int:
    """Return the total number of days in the years ``start`` up to ``stop``."""
    return sum(366 if is_leap_year(y) else 365 for y in range(start, stop))


def validate_date(date: Date) -> bool:
    """Return True if the month and day of ``date`` exist."""
    if not 1 <= date.month <= 12:
        return False
    return 1 <= date.day <= month_days(date.year, date.month)


def _require_valid(date: Date) -> None:
    if not validate_date(date):
        raise ValueError(f"invalid date: {date}")


def date_to_days(date: Date) -> int:
    """Return the number of days elapsed from 1900-01-01 to ``date``."""
    _check_month(date.month)
    years = _days_in_years(EPOCH_YEAR, date.year)
    months = sum(month_days(date.year, m) for m in range(1, date.month))
    return years + months + date.day - 1


def days_to_date(total_days: int) -> Date:
    """Return the date that lies ``total_days`` after 1900-01-01."""
    if total_days < 0:
        raise ValueError(f"day count before {EPOCH_YEAR}-01-01: {total_days}")
    year = EPOCH_YEAR
    while total_days >= (length := 366 if is_leap_year(year) else 365):
        total_days -= length
        year += 1
    month = 1
    while total_days >= month_days(year, month):
        total_days -= month_days(year, month)
        month += 1
    return Date(year, month, total_days + 1)


def weekday_name(date: Date) -> str:
    """Return the weekday of ``date`` as a single character, Monday first."""
    return WEEKDAY_NAMES[date_to_days(date) % 7]


def advance(date: Date, days: int) -> Date:
    """Return the date ``days`` days after ``date``."""
    _require_valid(date)
    return days_to_date(date_to_days(date) + days)


def day_of_year(date: Date) -> int:
    """Return the 1-based position of ``date`` within its year."""
    _require_valid(date)
    return sum(month_days(date.year, m) for m in range(1, date.month)) + date.day


def day_of_week(date: Date) -> str:
    """Return the full weekday name of ``date``, counted from year 1."""
    _require_valid(date)
    if date.year < 1:
        raise ValueError(f"year must be positive: {date.year}")
    previous = date.year - 1
    leap_count = previous // 4 - previous // 100 + previous // 400
    elapsed = previous * 365 + leap_count + day_of_year(date) - 1
    return "星期" + WEEKDAY_NAMES[elapsed % 7]


def days_between(first: Date, second: Date) -> int:
    """Return the absolute number of days separating two dates."""
    _require_valid(first)
    _require_valid(second)
    if first.year == second.year:
        return abs(day_of_year(first) - day_of_year(second))
    earlier, later = sorted((first, second))
    earlier_length = 366 if is_leap_year(earlier.year) else 365
    days = day_of_year(later) + earlier_length - day_of_year(earlier)
    days += _days_in_years(earlier.year + 1, later.year)
    return days


def next_date(date: Date) -> Date:
    """Return the day after ``date``."""
    _require_valid(date)
    year, month, day = date.year, date.month, date.day + 1
    if day > month_days(year, month):
        day = 1
        month += 1
        if month > 12:
            month = 1
            year += 1
    return Date(year, month, day)