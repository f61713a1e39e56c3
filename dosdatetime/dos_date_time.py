"""MS-DOS date and time as a pair, and its 32-bit packed form."""

from dosdatetime.const import DATE_WORD_SHIFT, UINT16_MAX
from dosdatetime.dos_date import decode_date, encode_date
from dosdatetime.dos_time import decode_time, encode_time


def encode_date_time(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> tuple[int, int]:
    """Return the packed (date, time) pair. The date is validated first."""

    date = encode_date(year, month, day)
    time = encode_time(hour, minute, second)

    return date, time


def decode_date_time(date: int, time: int) -> tuple[int, int, int, int, int, int]:
    """Return (year, month, day, hour, minute, second)."""

    return decode_date(date) + decode_time(time)


def pack_date_time(date: int, time: int) -> int:
    """Combine date and time words into a 32-bit value, date in the high word."""

    for word in (date, time):
        if word < 0 or word > UINT16_MAX:
            raise ValueError(f"Value {word} is not an unsigned 16-bit integer")

    return (date << DATE_WORD_SHIFT) | time


def unpack_date_time(value: int) -> tuple[int, int]:
    """Split a 32-bit value into its (date, time) words."""

    if value < 0 or value >> (2 * DATE_WORD_SHIFT):
        raise ValueError(f"Value {value} is not an unsigned 32-bit integer")

    return value >> DATE_WORD_SHIFT, value & UINT16_MAX
