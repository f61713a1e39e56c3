"""Exceptions for the dosdatetime library."""

from dosdatetime.const import DOS_EPOCH_YEAR, DOS_MAX_YEAR, ErrorKind


class DosDateTimeException(ValueError):
    """Value cannot be represented as MS-DOS date or time."""

    kind: ErrorKind

    def __init__(self, value: int, message: str):
        super().__init__(message)
        self.value = value


class OutOfRangeException(DosDateTimeException):
    """Year outside [1980, 2107]."""

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, value: int):
        if value < DOS_EPOCH_YEAR:
            message = "MS-DOS date is before `1980-01-01`"
        else:
            message = "MS-DOS date is after `2107-12-31`"

        super().__init__(value, message)

    @property
    def is_negative(self) -> bool:
        """Return True if the year was before the MS-DOS epoch."""

        return self.value < DOS_EPOCH_YEAR

    @property
    def is_overflow(self) -> bool:
        return self.value > DOS_MAX_YEAR


class InvalidMonthException(DosDateTimeException):
    """Month outside [1, 12]."""

    kind = ErrorKind.INVALID_MONTH

    def __init__(self, value: int):
        super().__init__(value, f"Month {value} out of range [1, 12]")


class InvalidDayException(DosDateTimeException):
    """Day outside the days of its month."""

    kind = ErrorKind.INVALID_DAY

    def __init__(self, value: int, max_day: int):
        super().__init__(value, f"Day {value} out of range [1, {max_day}]")
        self.max_day = max_day


class InvalidHourException(DosDateTimeException):
    """Hour outside [0, 23]."""

    kind = ErrorKind.INVALID_HOUR

    def __init__(self, value: int):
        super().__init__(value, f"Hour {value} out of range [0, 23]")


class InvalidMinuteException(DosDateTimeException):
    """Minute outside [0, 59]."""

    kind = ErrorKind.INVALID_MINUTE

    def __init__(self, value: int):
        super().__init__(value, f"Minute {value} out of range [0, 59]")


class InvalidSecondException(DosDateTimeException):
    """Second outside [0, 59]."""

    kind = ErrorKind.INVALID_SECOND

    def __init__(self, value: int):
        super().__init__(value, f"Second {value} out of range [0, 59]")
