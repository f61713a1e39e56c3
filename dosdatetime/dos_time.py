"""Packed 16-bit MS-DOS time field.

Layout, most significant bit first::

    15   11 10    5 4    0
    HHHHH   MMMMMM  SSSSS

Seconds are stored as a count of two-second intervals.
"""

import logging

from dosdatetime.const import (
    HOUR_MASK,
    HOUR_SHIFT,
    MINUTE_MASK,
    MINUTE_SHIFT,
    SECOND_MASK,
    SECOND_RESOLUTION,
    SECOND_SHIFT,
    UINT16_MAX,
)
from dosdatetime.exceptions import DosDateTimeException
from dosdatetime.validation import validate_time

_LOGGER = logging.getLogger(__name__)


def encode_time(hour: int, minute: int, second: int) -> int:
    """Pack a clock time into an MS-DOS time.

    Odd seconds are truncated to the preceding even second.
    """

    validate_time(hour, minute, second)

    return (
        (hour << HOUR_SHIFT)
        | (minute << MINUTE_SHIFT)
        | ((second // SECOND_RESOLUTION) << SECOND_SHIFT)
    )


def decode_time(value: int) -> tuple[int, int, int]:
    """Unpack an MS-DOS time into (hour, minute, second)."""

    if value < 0 or value > UINT16_MAX:
        raise ValueError(f"Value {value} is not an unsigned 16-bit integer")

    hour = (value >> HOUR_SHIFT) & HOUR_MASK
    minute = (value >> MINUTE_SHIFT) & MINUTE_MASK
    second = ((value >> SECOND_SHIFT) & SECOND_MASK) * SECOND_RESOLUTION

    try:
        validate_time(hour, minute, second)
    except DosDateTimeException as ex:
        _LOGGER.debug("Rejected MS-DOS time 0x%04x: %s", value, ex)
        raise

    return hour, minute, second


def is_valid_time(value: int) -> bool:
    try:
        decode_time(value)
    except ValueError:
        return False

    return True
