"""Constants for the dosdatetime library."""

from enum import Enum

DOS_EPOCH_YEAR = 1980
DOS_MAX_YEAR = 2107

# Date field: YYYYYYYM MMMDDDDD
YEAR_SHIFT = 9
YEAR_MASK = 0x7F
MONTH_SHIFT = 5
MONTH_MASK = 0x0F
DAY_SHIFT = 0
DAY_MASK = 0x1F

# Time field: HHHHHMMM MMMSSSSS
HOUR_SHIFT = 11
HOUR_MASK = 0x1F
MINUTE_SHIFT = 5
MINUTE_MASK = 0x3F
SECOND_SHIFT = 0
SECOND_MASK = 0x1F

SECOND_RESOLUTION = 2
MAX_SECOND_COUNT = 29

UINT16_MAX = 0xFFFF
DATE_WORD_SHIFT = 16

DOS_DATE_MIN = 0b0000_0000_0010_0001
DOS_DATE_MAX = 0b1111_1111_1001_1111
DOS_TIME_MIN = 0b0000_0000_0000_0000
DOS_TIME_MAX = 0b1011_1111_0111_1101


class ErrorKind(str, Enum):
    """Kinds of MS-DOS date and time validation failures."""

    OUT_OF_RANGE = "OUT_OF_RANGE"
    INVALID_MONTH = "INVALID_MONTH"
    INVALID_DAY = "INVALID_DAY"
    INVALID_HOUR = "INVALID_HOUR"
    INVALID_MINUTE = "INVALID_MINUTE"
    INVALID_SECOND = "INVALID_SECOND"
