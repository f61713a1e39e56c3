from dataclasses import dataclass
from datetime import datetime
from typing import Self

from dosdatetime.adapter.dos_date_time import DosDateTime
from dosdatetime.models.base_model import BaseModel
from dosdatetime.structures import DosTimestampStruct


@dataclass
class Timestamp(BaseModel[DosTimestampStruct]):
    date_time: DosDateTime

    @property
    def value(self) -> datetime:
        return self.date_time.value

    @classmethod
    def from_struct(cls, struct: DosTimestampStruct) -> Self:
        return cls(
            date_time=DosDateTime.from_date_time(struct.date, struct.time),
        )

    @classmethod
    def struct_type(cls) -> type[DosTimestampStruct]:
        return DosTimestampStruct

    def to_struct(self) -> DosTimestampStruct:
        return DosTimestampStruct(
            time=self.date_time.dos_time,
            date=self.date_time.dos_date,
        )
