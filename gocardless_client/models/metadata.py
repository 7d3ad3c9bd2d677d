from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any, Optional, TypeVar

from ..errors import CapacityExceeded, InvalidKey, InvalidValue

MAX_KEYS = 3
MAX_KEY_LENGTH = 50
MAX_VALUE_LENGTH = 500

T = TypeVar("T", bound="Metadata")


class Metadata(MutableMapping[str, str]):
    """Key-value store of custom data.

    Up to 3 keys are permitted, with key names up to 50 characters and values up to
    500 characters. Limits are checked on every insert, so an invalid store can never
    be built and attached to a request. A rejected ``set`` leaves the store unchanged.

    Instances are not safe to mutate from several threads at once.

    Example:
        >>> metadata = Metadata({"invoice": "INV-001"})
        >>> metadata["customer_ref"] = "C-12"
        >>> len(metadata)
        2
    """

    def __init__(self, items: Optional[Mapping[str, str]] = None, **kwargs: str) -> None:
        self._items: dict[str, str] = {}
        if items is not None:
            self.update(items)
        if kwargs:
            self.update(kwargs)

    def set(self, key: str, value: str) -> None:
        if not isinstance(key, str) or not key or len(key) > MAX_KEY_LENGTH:
            raise InvalidKey(f"key is required and must be at most {MAX_KEY_LENGTH} characters, got {key!r}")
        if not isinstance(value, str) or len(value) > MAX_VALUE_LENGTH:
            raise InvalidValue(f"value for {key!r} is required and must be at most {MAX_VALUE_LENGTH} characters")
        if key not in self._items and len(self._items) >= MAX_KEYS:
            raise CapacityExceeded(f"only {MAX_KEYS} keys are permitted, remove one before adding {key!r}")
        self._items[key] = value

    def remove(self, key: str) -> None:
        self._items.pop(key, None)

    def __setitem__(self, key: str, value: str) -> None:
        self.set(key, value)

    def __getitem__(self, key: str) -> str:
        return self._items[key]

    def __delitem__(self, key: str) -> None:
        del self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __repr__(self) -> str:
        return f"Metadata({self._items!r})"

    def to_dict(self) -> dict[str, Any]:
        return dict(self._items)

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        return cls(src_dict)
