from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Self, Type, TypeVar

from dosdatetime.structures import DosStruct

StructType = TypeVar("StructType", bound=DosStruct)


@dataclass
class BaseModel(ABC, Generic[StructType]):
    @classmethod
    @abstractmethod
    def from_struct(cls, struct: StructType) -> Self:
        """Convert the structure to a model."""

    @classmethod
    @abstractmethod
    def struct_type(cls) -> Type[StructType]:
        """Return the structure type of the model."""

    @abstractmethod
    def to_struct(self) -> StructType:
        """Convert the model to a structure."""

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """Convert the data to a model."""

        return cls.from_struct(cls.struct_type().from_bytes(data))

    def to_bytes(self) -> bytes:
        """Convert the model to bytes."""

        return self.to_struct().to_bytes()
