from dosdatetime.models.base_model import BaseModel
from dosdatetime.models.fat_timestamps import FatTimestamps
from dosdatetime.models.timestamp import Timestamp

__all__ = ["BaseModel", "FatTimestamps", "Timestamp"]
