from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Self

from dosdatetime.adapter.dos_date import DosDate
from dosdatetime.adapter.dos_date_time import DosDateTime
from dosdatetime.const import SECOND_RESOLUTION
from dosdatetime.models.base_model import BaseModel
from dosdatetime.structures import FatTimestampsStruct

# The creation time byte counts 10 ms units on top of the two-second field.
CREATE_TIME_UNIT = timedelta(milliseconds=10)
MAX_CREATE_TIME_UNITS = 199


@dataclass
class FatTimestamps(BaseModel[FatTimestampsStruct]):
    created: datetime
    last_accessed: date
    modified: DosDateTime
    first_cluster_high: int = 0

    @classmethod
    def from_struct(cls, struct: FatTimestampsStruct) -> Self:
        if struct.create_time_tenth > MAX_CREATE_TIME_UNITS:
            raise ValueError(
                f"Creation time fraction {struct.create_time_tenth} out of range "
                f"[0, {MAX_CREATE_TIME_UNITS}]"
            )

        created = DosDateTime.from_date_time(struct.create_date, struct.create_time)

        return cls(
            created=created.value + struct.create_time_tenth * CREATE_TIME_UNIT,
            last_accessed=struct.last_access_date.value,
            modified=DosDateTime.from_date_time(struct.write_date, struct.write_time),
            first_cluster_high=struct.first_cluster_high,
        )

    @classmethod
    def struct_type(cls) -> type[FatTimestampsStruct]:
        return FatTimestampsStruct

    def to_struct(self) -> FatTimestampsStruct:
        created = DosDateTime(self.created)
        remainder = (self.created.second % SECOND_RESOLUTION) * 100
        remainder += self.created.microsecond // 10_000

        return FatTimestampsStruct(
            create_time_tenth=remainder,
            create_time=created.dos_time,
            create_date=created.dos_date,
            last_access_date=DosDate(self.last_accessed),
            first_cluster_high=self.first_cluster_high,
            write_time=self.modified.dos_time,
            write_date=self.modified.dos_date,
        )
