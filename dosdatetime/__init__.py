"""MS-DOS date and time, the packed 16-bit timestamps used by FAT and ZIP."""

from dosdatetime.adapter.dos_date import DosDate
from dosdatetime.adapter.dos_date_time import DosDateTime
from dosdatetime.adapter.dos_time import DosTime
from dosdatetime.dos_date import decode_date, encode_date, is_valid_date
from dosdatetime.dos_date_time import (
    decode_date_time,
    encode_date_time,
    pack_date_time,
    unpack_date_time,
)
from dosdatetime.dos_time import decode_time, encode_time, is_valid_time
from dosdatetime.exceptions import (
    DosDateTimeException,
    InvalidDayException,
    InvalidHourException,
    InvalidMinuteException,
    InvalidMonthException,
    InvalidSecondException,
    OutOfRangeException,
)
from dosdatetime.validation import days_in_month, is_leap_year

__all__ = [
    "DosDate",
    "DosDateTime",
    "DosDateTimeException",
    "DosTime",
    "InvalidDayException",
    "InvalidHourException",
    "InvalidMinuteException",
    "InvalidMonthException",
    "InvalidSecondException",
    "OutOfRangeException",
    "days_in_month",
    "decode_date",
    "decode_date_time",
    "decode_time",
    "encode_date",
    "encode_date_time",
    "encode_time",
    "is_leap_year",
    "is_valid_date",
    "is_valid_time",
    "pack_date_time",
    "unpack_date_time",
]
