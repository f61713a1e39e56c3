"""Packed 16-bit MS-DOS date field.

Layout, most significant bit first::

    15      9 8   5 4    0
    YYYYYYY   MMMM  DDDDD

The year is stored as an offset from 1980.
"""

import logging

from dosdatetime.const import (
    DAY_MASK,
    DAY_SHIFT,
    DOS_EPOCH_YEAR,
    MONTH_MASK,
    MONTH_SHIFT,
    UINT16_MAX,
    YEAR_MASK,
    YEAR_SHIFT,
)
from dosdatetime.exceptions import DosDateTimeException
from dosdatetime.validation import validate_date

_LOGGER = logging.getLogger(__name__)


def _check_word(value: int) -> None:
    if value < 0 or value > UINT16_MAX:
        raise ValueError(f"Value {value} is not an unsigned 16-bit integer")


def encode_date(year: int, month: int, day: int) -> int:
    """Pack a calendar date into an MS-DOS date."""

    validate_date(year, month, day)

    return (
        ((year - DOS_EPOCH_YEAR) << YEAR_SHIFT)
        | (month << MONTH_SHIFT)
        | (day << DAY_SHIFT)
    )


def decode_date(value: int) -> tuple[int, int, int]:
    """Unpack an MS-DOS date into (year, month, day).

    Month and day are validated since a foreign or corrupt timestamp may hold
    bit patterns such as month 0 or February 30.
    """

    _check_word(value)

    year = ((value >> YEAR_SHIFT) & YEAR_MASK) + DOS_EPOCH_YEAR
    month = (value >> MONTH_SHIFT) & MONTH_MASK
    day = (value >> DAY_SHIFT) & DAY_MASK

    try:
        validate_date(year, month, day)
    except DosDateTimeException as ex:
        _LOGGER.debug("Rejected MS-DOS date 0x%04x: %s", value, ex)
        raise

    return year, month, day


def is_valid_date(value: int) -> bool:
    """Return True if value decodes to a valid calendar date."""

    try:
        decode_date(value)
    except ValueError:
        return False

    return True
