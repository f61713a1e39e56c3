"""Structures for MS-DOS timestamps as stored by FAT and ZIP."""
from dataclasses import dataclass
from typing import Self

from construct import Int8ul, Int16ul
from construct_typed import DataclassMixin, DataclassStruct, csfield

from dosdatetime.adapter.dos_date import DosDate
from dosdatetime.adapter.dos_time import DosTime


class DosStruct(DataclassMixin):
    """Structure for MS-DOS timestamp data."""

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """Convert the data to a structure."""

        return DataclassStruct(cls).parse(data)

    def to_bytes(self) -> bytes:
        """Convert the structure to bytes."""

        return DataclassStruct(self.__class__).build(self)


@dataclass
class DosTimestampStruct(DosStruct):
    """Structure for a time word followed by a date word.

    Used for the last modification time and date of ZIP file headers and the
    write time and date of FAT directory entries.
    """

    time: DosTime = csfield(DosTime.adapter()(Int16ul))
    date: DosDate = csfield(DosDate.adapter()(Int16ul))


@dataclass
class FatTimestampsStruct(DosStruct):
    """Structure for the timestamp fields of a FAT directory entry (offsets 13-25)."""

    create_time_tenth: int = csfield(Int8ul)
    create_time: DosTime = csfield(DosTime.adapter()(Int16ul))
    create_date: DosDate = csfield(DosDate.adapter()(Int16ul))
    last_access_date: DosDate = csfield(DosDate.adapter()(Int16ul))
    first_cluster_high: int = csfield(Int16ul)
    write_time: DosTime = csfield(DosTime.adapter()(Int16ul))
    write_date: DosDate = csfield(DosDate.adapter()(Int16ul))
