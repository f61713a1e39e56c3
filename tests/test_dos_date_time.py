import pytest

from dosdatetime.dos_date_time import (
    decode_date_time,
    encode_date_time,
    pack_date_time,
    unpack_date_time,
)
from dosdatetime.exceptions import (
    InvalidDayException,
    InvalidHourException,
    InvalidMonthException,
    OutOfRangeException,
)


def test_encode_date_time():
    assert encode_date_time(2002, 11, 26, 19, 25, 0) == (0x2D7A, 0x9B20)


def test_encode_date_validated_before_time():
    with pytest.raises(OutOfRangeException):
        encode_date_time(1979, 12, 31, 24, 0, 0)

    with pytest.raises(InvalidDayException):
        encode_date_time(1981, 2, 29, 24, 0, 0)

    with pytest.raises(InvalidHourException):
        encode_date_time(1981, 2, 28, 24, 0, 0)


def test_decode_date_time():
    assert decode_date_time(0x4D71, 0x54CF) == (2018, 11, 17, 10, 38, 30)


def test_decode_date_validated_before_time():
    with pytest.raises(InvalidMonthException):
        decode_date_time(0x0001, 0xFFFF)

    with pytest.raises(InvalidHourException):
        decode_date_time(0x0021, 0xFFFF)


def test_round_trip_lossy_second():
    date, time = encode_date_time(2107, 12, 31, 23, 59, 59)

    assert decode_date_time(date, time) == (2107, 12, 31, 23, 59, 58)


def test_pack_date_time():
    assert pack_date_time(0x2D7A, 0x9B20) == 0x2D7A9B20


def test_pack_date_time_invalid_word():
    with pytest.raises(ValueError):
        pack_date_time(0x10000, 0)

    with pytest.raises(ValueError):
        pack_date_time(0, -1)


def test_unpack_date_time():
    assert unpack_date_time(0x2D7A9B20) == (0x2D7A, 0x9B20)


def test_unpack_date_time_invalid_value():
    with pytest.raises(ValueError):
        unpack_date_time(0x1_0000_0000)

    with pytest.raises(ValueError):
        unpack_date_time(-1)
