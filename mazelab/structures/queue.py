"""FIFO queue over singly linked nodes."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

from mazelab.exceptions import EmptyCollectionError
from mazelab.structures.node import LinkNode

T = TypeVar("T")


class Queue(Generic[T]):
    """First-in first-out queue.

    ``head`` is the earliest enqueued element and ``tail`` the most recent;
    ``tail.next`` is always None.
    """

    def __init__(self) -> None:
        self._head: Optional[LinkNode[T]] = None
        self._tail: Optional[LinkNode[T]] = None
        self._size = 0

    @property
    def head(self) -> Optional[LinkNode[T]]:
        return self._head

    @property
    def tail(self) -> Optional[LinkNode[T]]:
        return self._tail

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to back without dequeuing."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"Queue({list(self)!r})"

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0

    def enqueue(self, value: T) -> None:
        node = LinkNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def front(self) -> T:
        """Return the front value without removing it.

        Raises:
            EmptyCollectionError: If the queue is empty.
        """
        self._ensure_not_empty()
        return self._head.value  # type: ignore[union-attr]

    def dequeue(self) -> T:
        """Remove and return the front value.

        Raises:
            EmptyCollectionError: If the queue is empty.
        """
        self._ensure_not_empty()
        node = self._head
        self._head = node.next  # type: ignore[union-attr]
        self._size -= 1
        if self._size == 0:
            self._tail = None
        return node.value  # type: ignore[union-attr]

    def _ensure_not_empty(self) -> None:
        if self._size == 0:
            raise EmptyCollectionError("Queue is empty")
