from datetime import datetime

from dosdatetime.adapter.dos_date_time import DosDateTime
from dosdatetime.models import Timestamp
from dosdatetime.structures import DosTimestampStruct


def test_timestamp_from_bytes():
    timestamp = Timestamp.from_bytes(b"\x20\x9b\x7a\x2d")

    assert timestamp.value == datetime(2002, 11, 26, 19, 25)
    assert timestamp.date_time == DosDateTime.from_words(0x2D7A, 0x9B20)


def test_timestamp_to_struct():
    timestamp = Timestamp(date_time=DosDateTime.MAX)
    struct = timestamp.to_struct()

    assert isinstance(struct, DosTimestampStruct)
    assert struct.date.encode() == 0xFF9F
    assert struct.time.encode() == 0xBF7D


def test_timestamp_to_bytes():
    timestamp = Timestamp(date_time=DosDateTime(datetime(2018, 11, 17, 10, 38, 31)))

    assert timestamp.to_bytes() == b"\xcf\x54\x71\x4d"
