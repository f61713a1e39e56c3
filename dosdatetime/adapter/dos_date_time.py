from datetime import datetime
from typing import ClassVar, Self

from dosdatetime.adapter.base_adapter import BaseAdapter
from dosdatetime.adapter.dos_date import DosDate
from dosdatetime.adapter.dos_time import DosTime
from dosdatetime.dos_date_time import (
    decode_date_time,
    encode_date_time,
    pack_date_time,
    unpack_date_time,
)


class DosDateTime(BaseAdapter[datetime, int]):
    """Adapter to encode and decode MS-DOS date and time as one 32-bit value.

    The date occupies the high word and the time the low word. Timezone
    information is dropped since the format only stores wall-clock time.
    """

    MIN: ClassVar["DosDateTime"]
    MAX: ClassVar["DosDateTime"]

    @classmethod
    def from_date_time(cls, dos_date: DosDate, dos_time: DosTime) -> Self:
        return cls(datetime.combine(dos_date.value, dos_time.value))

    @classmethod
    def from_words(cls, date: int, time: int) -> Self:
        """Return the parser from separate date and time words."""

        return cls(datetime(*decode_date_time(date, time)))

    @property
    def dos_date(self) -> DosDate:
        return DosDate(self.value.date())

    @property
    def dos_time(self) -> DosTime:
        return DosTime(self.value.time())

    @property
    def words(self) -> tuple[int, int]:
        """Return the (date, time) words."""

        return unpack_date_time(self.encode())

    @classmethod
    def _normalize(cls, value: datetime) -> datetime:
        return datetime.combine(
            DosDate(value.date()).value, DosTime(value.time()).value
        )

    @classmethod
    def _encode(cls, value: datetime) -> int:
        date, time = encode_date_time(
            value.year, value.month, value.day, value.hour, value.minute, value.second
        )

        return pack_date_time(date, time)

    @classmethod
    def _decode(cls, value: int) -> datetime:
        (date, time) = unpack_date_time(value)

        return datetime(*decode_date_time(date, time))


DosDateTime.MIN = DosDateTime.from_date_time(DosDate.MIN, DosTime.MIN)
DosDateTime.MAX = DosDateTime.from_date_time(DosDate.MAX, DosTime.MAX)
