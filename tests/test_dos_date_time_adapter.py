from datetime import date, datetime, time, timedelta, timezone

import pytest

from dosdatetime.adapter.dos_date import DosDate
from dosdatetime.adapter.dos_date_time import DosDateTime
from dosdatetime.adapter.dos_time import DosTime
from dosdatetime.exceptions import InvalidMonthException, OutOfRangeException


def test_encode_valid_datetime():
    dt = datetime(year=2002, month=11, day=26, hour=19, minute=25)
    assert DosDateTime._encode(dt) == 0x2D7A9B20


def test_decode_valid_value():
    assert DosDateTime._decode(0x4D7154CF) == datetime(2018, 11, 17, 10, 38, 30)


def test_round_trip_consistency():
    dt = datetime(year=2018, month=11, day=17, hour=10, minute=38, second=30)
    assert DosDateTime.decode(DosDateTime(dt).encode()).value == dt


def test_min_max():
    assert DosDateTime.MIN.value == datetime(1980, 1, 1)
    assert DosDateTime.MAX.value == datetime(2107, 12, 31, 23, 59, 58)
    assert DosDateTime.MIN.words == (0x0021, 0x0000)
    assert DosDateTime.MAX.words == (0xFF9F, 0xBF7D)


def test_odd_second_is_truncated():
    assert DosDateTime(datetime(1980, 1, 1, 0, 0, 1)) == DosDateTime.MIN
    assert DosDateTime(datetime(2107, 12, 31, 23, 59, 59)) == DosDateTime.MAX


def test_timezone_is_dropped():
    dt = DosDateTime(datetime(2002, 11, 26, 19, 25, tzinfo=timezone.utc))

    assert dt.value.tzinfo is None
    assert dt.words == (0x2D7A, 0x9B20)


def test_from_date_time():
    dt = DosDateTime.from_date_time(DosDate(date(2002, 11, 26)), DosTime(time(19, 25)))

    assert dt.value == datetime(2002, 11, 26, 19, 25)
    assert dt.dos_date == DosDate(date(2002, 11, 26))
    assert dt.dos_time == DosTime(time(19, 25))


def test_from_words():
    assert DosDateTime.from_words(0x2D7A, 0x9B20).value == datetime(2002, 11, 26, 19, 25)


def test_from_words_invalid_date():
    with pytest.raises(InvalidMonthException):
        DosDateTime.from_words(0x0001, 0x0000)


def test_encode_out_of_range():
    with pytest.raises(OutOfRangeException):
        DosDateTime(datetime(1979, 12, 31, 23, 59, 59)).encode()

    with pytest.raises(OutOfRangeException):
        DosDateTime(datetime(2108, 1, 1)).encode()


def test_order():
    assert DosDateTime.MIN < DosDateTime.MAX
    assert max(DosDateTime.MAX, DosDateTime.MIN) == DosDateTime.MAX


def test_str():
    assert str(DosDateTime.MIN) == "1980-01-01 00:00:00"
    assert str(DosDateTime.MAX) == "2107-12-31 23:59:58"


def test_seconds_after_epoch():
    dt = DosDateTime.MIN.value + timedelta(seconds=722_805_900)

    assert DosDateTime(dt).words == (0b0010_1101_0111_1010, 0b1001_1011_0010_0000)
