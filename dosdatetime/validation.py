"""Range checks shared by the date and time codecs."""

from dosdatetime.const import DOS_EPOCH_YEAR, DOS_MAX_YEAR
from dosdatetime.exceptions import (
    InvalidDayException,
    InvalidHourException,
    InvalidMinuteException,
    InvalidMonthException,
    InvalidSecondException,
    OutOfRangeException,
)

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Return True if year is a leap year in the proleptic Gregorian calendar."""

    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month."""

    if month < 1 or month > 12:
        raise InvalidMonthException(month)

    if month == 2 and is_leap_year(year):
        return 29

    return _DAYS_IN_MONTH[month - 1]


def validate_date(year: int, month: int, day: int) -> None:
    """Check year, month and day, in that order."""

    if year < DOS_EPOCH_YEAR or year > DOS_MAX_YEAR:
        raise OutOfRangeException(year)

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidDayException(day, max_day)


def validate_time(hour: int, minute: int, second: int) -> None:
    """Check hour, minute and second, in that order."""

    if hour < 0 or hour > 23:
        raise InvalidHourException(hour)

    if minute < 0 or minute > 59:
        raise InvalidMinuteException(minute)

    if second < 0 or second > 59:
        raise InvalidSecondException(second)
