import logging
from collections.abc import Mapping
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Any, TypeVar

from ..errors import InvalidEnumValue

logger = logging.getLogger(__name__)

SENTINEL_NAME = "UNKNOWN"

T = TypeVar("T", bound="GcStringEnum")


class GcStringEnum(str, Enum):
    """An enumerated API field that tolerates values added to the API after this release.

    Every subclass declares an ``UNKNOWN = "unknown"`` member. ``from_wire`` never fails on
    an unrecognised string, it returns ``UNKNOWN`` instead, so callers can branch on it.
    ``UNKNOWN`` has no wire form of its own: ``to_wire`` refuses it.
    """

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def sentinel(cls: type[T]) -> T:
        return cls[SENTINEL_NAME]

    @classmethod
    def wire_table(cls: type[T]) -> Mapping[str, T]:
        """Read-only mapping of every known wire string to its member, sentinel excluded"""
        return _wire_table(cls)

    @classmethod
    def from_wire(cls: type[T], data: Any) -> T:
        member = cls.wire_table().get(data) if isinstance(data, str) else None
        if member is None:
            logger.debug(f"Unrecognised {cls.__name__} value {data!r}, decoded as {SENTINEL_NAME}")
            return cls.sentinel()
        return member

    @classmethod
    def to_wire(cls, value: Any) -> str:
        if not isinstance(value, cls) or value is cls.sentinel():
            raise InvalidEnumValue(f"{value!r} has no wire representation for {cls.__name__}")
        return value.value


@lru_cache(maxsize=None)
def _wire_table(enum_cls: type[GcStringEnum]) -> Mapping[str, Any]:
    sentinel = enum_cls.sentinel()
    return MappingProxyType({member.value: member for member in enum_cls if member is not sentinel})
