"""Last-in, first-out stack built on the linked list."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .linked_list import DataType, LinkedList


class Stack:
    """A LIFO stack; ADT items are released as they are popped or cleared."""

    def __init__(
        self,
        data_type: DataType | int,
        is_equal: Optional[Callable[[Any, Any], bool]] = None,
        free_data: Optional[Callable[[Any], None]] = None,
    ) -> None:
        self._list = LinkedList(data_type, is_equal, free_data)

    def __len__(self) -> int:
        return len(self._list)

    def is_empty(self) -> bool:
        return self._list.is_empty()

    def push(self, data: Any) -> None:
        self._list.add(data)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("pop from empty stack")
        data = self._list[0]
        self._list.remove_at(0)
        return data

    def peek(self) -> Any:
        """Return the top item without removing it; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("peek at empty stack")
        return self._list[0]

    def clear(self) -> None:
        self._list.clear()