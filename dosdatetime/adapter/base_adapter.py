from abc import ABC, abstractmethod
from functools import total_ordering
from typing import Any, Generic, Self, Type, TypeVar

from construct import Adapter

EncodedType = TypeVar("EncodedType")
DecodedType = TypeVar("DecodedType")


@total_ordering
class BaseAdapter(ABC, Generic[DecodedType, EncodedType]):
    """Base class for adapters."""

    def __init__(self, value: DecodedType):
        """Initialize the parser."""

        self._value: DecodedType = self._normalize(value)

    @property
    def value(self) -> DecodedType:
        """Return the original value."""

        return self._value

    @classmethod
    def adapter(cls) -> Type[Adapter]:
        """Return the adapter."""

        class DosAdapter(Adapter):
            def _decode(
                self, obj: EncodedType, ctx, path
            ) -> BaseAdapter[DecodedType, EncodedType]:
                return cls(cls._decode(obj))

            def _encode(self, obj: BaseAdapter, ctx, path) -> EncodedType:
                return obj.encode()

        return DosAdapter

    def encode(self) -> EncodedType:
        """Return the encoded value."""

        return self._encode(self.value)

    @classmethod
    def decode(cls, value: EncodedType) -> Self:
        """Return the parser from the encoded value."""

        return cls(cls._decode(value))

    @classmethod
    def _normalize(cls, value: DecodedType) -> DecodedType:
        """Return the value as it can be represented once encoded."""

        return value

    @classmethod
    @abstractmethod
    def _encode(cls, value: DecodedType) -> EncodedType:
        """Return the encoded value."""

    @classmethod
    @abstractmethod
    def _decode(cls, value: EncodedType) -> DecodedType:
        """Return the decoded value."""

    def __eq__(self, __value: object) -> bool:
        return isinstance(__value, self.__class__) and self.value == __value.value

    def __lt__(self, __value: Any) -> bool:
        if not isinstance(__value, self.__class__):
            return NotImplemented

        return self.value < __value.value

    def __hash__(self) -> int:
        return hash((self.__class__, self.value))

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value})"
