"""A singly linked sequence whose newest element sits at the front."""

from __future__ import annotations

from collections import deque
from enum import IntEnum
from typing import Any, Callable, Iterator, Optional

EqualityCheck = Callable[[Any, Any], bool]
Release = Callable[[Any], None]


class DataType(IntEnum):
    """Kind of value a container holds."""

    INT = 1
    FLOAT = 2
    DOUBLE = 3
    CHAR = 4
    SHORT = 5
    LONG = 6
    LONGLONG = 7
    ADT = 8


class LinkedList:
    """Sequence where new items are added at the head (index 0).

    Lists of ``DataType.ADT`` items need an equality check and a release
    callback; the callback runs whenever an item leaves the list.
    Primitive lists compare items by value and release nothing.
    """

    def __init__(
        self,
        data_type: DataType | int,
        is_equal: Optional[EqualityCheck] = None,
        free_data: Optional[Release] = None,
    ) -> None:
        self.data_type = DataType(data_type)
        if self.data_type is DataType.ADT:
            if is_equal is None or free_data is None:
                raise ValueError(
                    "ADT lists need both an equality check and a release callback"
                )
            self._is_equal: Optional[EqualityCheck] = is_equal
            self._free_data: Optional[Release] = free_data
        else:
            self._is_equal = None
            self._free_data = None
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        if not 0 <= index < len(self._items):
            raise IndexError("linked list index out of range")
        return self._items[index]

    def is_empty(self) -> bool:
        return not self._items

    def add(self, data: Any) -> None:
        """Insert ``data`` at the head of the list."""
        self._items.appendleft(data)

    def clear(self) -> None:
        """Release every item and empty the list."""
        for item in self._items:
            self._release(item)
        self._items.clear()

    def to_list(self) -> list[Any]:
        return list(self._items)

    def remove(self, data: Any) -> None:
        """Remove the first item equal to ``data``; raise ValueError if absent."""
        for position, item in enumerate(self._items):
            if self._equal(item, data, self.data_type):
                del self._items[position]
                self._release(item)
                return
        raise ValueError("item not found in linked list")

    def remove_at(self, index: int) -> None:
        """Remove the item at ``index``; raise IndexError if out of range."""
        if not 0 <= index < len(self._items):
            raise IndexError("linked list index out of range")
        item = self._items[index]
        del self._items[index]
        self._release(item)

    def contains(self, data: Any, data_type: DataType | int | None = None) -> bool:
        """Tell whether an item equal to ``data`` is present.

        ``data_type`` selects how items are compared; it defaults to the
        list's own type.
        """
        kind = self.data_type if data_type is None else DataType(data_type)
        return any(self._equal(item, data, kind) for item in self._items)

    def render(self, render_item: Callable[[Any], str]) -> str:
        """Render every item in order, followed by an end-of-list marker."""
        return "".join(render_item(item) for item in self._items) + "FIM LISTA\n"

    def _equal(self, stored: Any, wanted: Any, kind: DataType) -> bool:
        if kind is DataType.ADT:
            if self._is_equal is None:
                raise ValueError("this list has no equality check for ADT items")
            return bool(self._is_equal(stored, wanted))
        return stored == wanted

    def _release(self, item: Any) -> None:
        if self.data_type is DataType.ADT and self._free_data is not None:
            self._free_data(item)