"""LIFO stack over singly linked nodes."""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, TypeVar

from mazelab.exceptions import EmptyCollectionError
from mazelab.structures.node import LinkNode

T = TypeVar("T")


class Stack(Generic[T]):
    """Last-in first-out stack; ``head`` is the most recently pushed element."""

    def __init__(self) -> None:
        self._head: Optional[LinkNode[T]] = None
        self._size = 0

    @property
    def head(self) -> Optional[LinkNode[T]]:
        return self._head

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from top to bottom without popping."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._head = None
        self._size = 0

    def push(self, value: T) -> None:
        self._head = LinkNode(value, self._head)
        self._size += 1

    def top(self) -> T:
        """Return the top value without removing it.

        Raises:
            EmptyCollectionError: If the stack is empty.
        """
        self._ensure_not_empty()
        return self._head.value  # type: ignore[union-attr]

    def pop(self) -> T:
        """Remove and return the top value.

        Raises:
            EmptyCollectionError: If the stack is empty.
        """
        self._ensure_not_empty()
        node = self._head
        self._head = node.next  # type: ignore[union-attr]
        self._size -= 1
        return node.value  # type: ignore[union-attr]

    def copy(self) -> Stack[T]:
        """Return an independent stack with the same elements in the same order."""
        values: List[T] = list(self)
        duplicate: Stack[T] = Stack()
        for value in reversed(values):
            duplicate.push(value)
        return duplicate

    def _ensure_not_empty(self) -> None:
        if self._size == 0:
            raise EmptyCollectionError("Stack is empty")
