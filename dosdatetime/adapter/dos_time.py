from datetime import time
from typing import ClassVar

from dosdatetime.adapter.base_adapter import BaseAdapter
from dosdatetime.const import DOS_TIME_MAX, DOS_TIME_MIN, SECOND_RESOLUTION
from dosdatetime.dos_time import decode_time, encode_time


class DosTime(BaseAdapter[time, int]):
    """Adapter to encode and decode MS-DOS time data.

    The format has a resolution of two seconds, so odd seconds are truncated
    and fractions of a second dropped.
    """

    MIN: ClassVar["DosTime"]
    MAX: ClassVar["DosTime"]

    @classmethod
    def _normalize(cls, value: time) -> time:
        return time(
            hour=value.hour,
            minute=value.minute,
            second=value.second - value.second % SECOND_RESOLUTION,
        )

    @classmethod
    def _encode(cls, value: time) -> int:
        return encode_time(value.hour, value.minute, value.second)

    @classmethod
    def _decode(cls, value: int) -> time:
        (hour, minute, second) = decode_time(value)

        return time(hour=hour, minute=minute, second=second)


DosTime.MIN = DosTime.decode(DOS_TIME_MIN)
DosTime.MAX = DosTime.decode(DOS_TIME_MAX)
