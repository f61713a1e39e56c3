from datetime import date
from typing import ClassVar

from dosdatetime.adapter.base_adapter import BaseAdapter
from dosdatetime.const import DOS_DATE_MAX, DOS_DATE_MIN
from dosdatetime.dos_date import decode_date, encode_date


class DosDate(BaseAdapter[date, int]):
    """Adapter to encode and decode MS-DOS date data."""

    MIN: ClassVar["DosDate"]
    MAX: ClassVar["DosDate"]

    @classmethod
    def _normalize(cls, value: date) -> date:
        return date(value.year, value.month, value.day)

    @classmethod
    def _encode(cls, value: date) -> int:
        return encode_date(value.year, value.month, value.day)

    @classmethod
    def _decode(cls, value: int) -> date:
        (year, month, day) = decode_date(value)

        return date(year=year, month=month, day=day)


DosDate.MIN = DosDate.decode(DOS_DATE_MIN)
DosDate.MAX = DosDate.decode(DOS_DATE_MAX)
