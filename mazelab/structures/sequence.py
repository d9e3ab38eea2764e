"""Generic doubly linked sequence with positional and value-based access.

Positions are 1-indexed. Every operation that targets an existing element
resolves it through ``_node_at`` (by position) or ``_node_of`` (by value), so
get/set/remove/add_after/add_before all share the same error semantics:

* ``EmptyCollectionError`` when the sequence is empty;
* ``InvalidArgumentError`` for a position below 1 or a ``None`` value;
* ``OutOfRangeError`` for a position past the last element;
* ``NotFoundError`` when no element equals the given value.

Value lookups use equality and return the first match from the head.
``insert`` and ``sort_ascending`` use ``<`` and are stable for equal values.
"""

from __future__ import annotations

from typing import Any, Generic, Iterator, List, Optional, TypeVar

from mazelab.exceptions import (
    EmptyCollectionError,
    InvalidArgumentError,
    NotFoundError,
    OutOfRangeError,
)
from mazelab.structures.node import Node

T = TypeVar("T")


class Sequence(Generic[T]):
    """Ordered container backed by a chain of doubly linked nodes.

    Attributes:
        head: First node, or None when empty.
        tail: Last node, or None when empty.
        size: Number of nodes reachable from ``head``.
    """

    def __init__(self) -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size = 0

    @property
    def head(self) -> Optional[Node[T]]:
        return self._head

    @property
    def tail(self) -> Optional[Node[T]]:
        return self._tail

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __repr__(self) -> str:
        return f"Sequence({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True if the sequence holds no elements."""
        return self._size == 0

    def clear(self) -> None:
        """Drop every element."""
        self._head = None
        self._tail = None
        self._size = 0

    #
    # Ends
    #
    def add_first(self, value: T) -> None:
        """Prepend ``value``."""
        node = Node(value)
        if self._head is None:
            self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
        self._head = node
        self._size += 1

    def add_last(self, value: T) -> None:
        """Append ``value``."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        self._size += 1

    def get_first(self) -> T:
        """Return the first value.

        Raises:
            EmptyCollectionError: If the sequence is empty.
        """
        self._ensure_not_empty()
        return self._head.value  # type: ignore[union-attr]

    def get_last(self) -> T:
        """Return the last value.

        Raises:
            EmptyCollectionError: If the sequence is empty.
        """
        self._ensure_not_empty()
        return self._tail.value  # type: ignore[union-attr]

    def set_first(self, value: T) -> T:
        """Replace the first value and return the previous one."""
        self._ensure_not_empty()
        return self._swap(self._head, value)  # type: ignore[arg-type]

    def set_last(self, value: T) -> T:
        """Replace the last value and return the previous one."""
        self._ensure_not_empty()
        return self._swap(self._tail, value)  # type: ignore[arg-type]

    def remove_first(self) -> T:
        """Detach the first node and return its value.

        Raises:
            EmptyCollectionError: If the sequence is empty.
        """
        self._ensure_not_empty()
        node = self._head
        assert node is not None
        if self._size == 1:
            self.clear()
            return node.value
        self._head = node.next
        self._head.prev = None  # type: ignore[union-attr]
        node.next = None
        self._size -= 1
        return node.value

    def remove_last(self) -> T:
        """Detach the last node and return its value.

        Raises:
            EmptyCollectionError: If the sequence is empty.
        """
        self._ensure_not_empty()
        node = self._tail
        assert node is not None
        if self._size == 1:
            self.clear()
            return node.value
        self._tail = node.prev
        self._tail.next = None  # type: ignore[union-attr]
        node.prev = None
        self._size -= 1
        return node.value

    #
    # Positional access
    #
    def get(self, position: int) -> T:
        """Return the value at 1-indexed ``position``."""
        return self._node_at(position).value

    def set(self, value: T, position: int) -> T:
        """Replace the value at ``position`` and return the previous one."""
        return self._swap(self._node_at(position), value)

    def remove(self, position: int) -> T:
        """Remove the element at ``position`` and return its value."""
        return self._unlink(self._node_at(position))

    def add_after(self, value: T, position: int) -> None:
        """Insert ``value`` right after the element at ``position``."""
        self._add_after_node(value, self._node_at(position))

    def add_before(self, value: T, position: int) -> None:
        """Insert ``value`` right before the element at ``position``."""
        self._add_before_node(value, self._node_at(position))

    #
    # Value-based access
    #
    def find(self, value: T) -> T:
        """Return the first stored value equal to ``value``."""
        return self._node_of(value).value

    def replace(self, value: T, old_value: T) -> T:
        """Replace the first element equal to ``old_value`` and return it."""
        return self._swap(self._node_of(old_value), value)

    def remove_value(self, value: T) -> T:
        """Remove the first element equal to ``value`` and return it."""
        return self._unlink(self._node_of(value))

    def add_after_value(self, value: T, old_value: T) -> None:
        """Insert ``value`` right after the first element equal to ``old_value``."""
        self._add_after_node(value, self._node_of(old_value))

    def add_before_value(self, value: T, old_value: T) -> None:
        """Insert ``value`` right before the first element equal to ``old_value``."""
        self._add_before_node(value, self._node_of(old_value))

    #
    # Ordering
    #
    def insert(self, value: T) -> None:
        """Insert ``value`` before the first element that is not less than it.

        Appends when the sequence is empty or ``value`` is the new maximum.
        """
        node = self._head
        while node is not None and node.value < value:
            node = node.next
        if node is None:
            self.add_last(value)
        else:
            self._add_before_node(value, node)

    def sort_ascending(self) -> None:
        """Sort in ascending order by re-inserting every value.

        ``insert`` places a value before its first equal, so values are
        re-inserted from the tail backwards; elements that compare equal keep
        their relative order.
        """
        values: List[T] = list(reversed(self))
        self.clear()
        for value in values:
            self.insert(value)

    #
    # Internals
    #
    def _ensure_not_empty(self) -> None:
        if self._size == 0:
            raise EmptyCollectionError("Sequence is empty")

    def _node_at(self, position: int) -> Node[T]:
        self._ensure_not_empty()
        if isinstance(position, bool) or not isinstance(position, int):
            raise InvalidArgumentError(
                f"Position must be an integer, got {type(position).__name__}"
            )
        if position < 1:
            raise InvalidArgumentError("Position cannot be less than 1")
        if position > self._size:
            raise OutOfRangeError(
                f"Position {position} beyond end of sequence (size {self._size})"
            )
        node = self._head
        for _ in range(position - 1):
            node = node.next  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def _node_of(self, value: T) -> Node[T]:
        self._ensure_not_empty()
        if value is None:
            raise InvalidArgumentError("Value cannot be None")
        node = self._head
        while node is not None:
            if node.value == value:
                return node
            node = node.next
        raise NotFoundError(f"Value {value!r} not found in sequence")

    @staticmethod
    def _swap(node: Node[T], value: T) -> T:
        old = node.value
        node.value = value
        return old

    def _unlink(self, node: Node[T]) -> T:
        if node is self._head:
            return self.remove_first()
        if node is self._tail:
            return self.remove_last()
        prev, nxt = node.prev, node.next
        prev.next = nxt  # type: ignore[union-attr]
        nxt.prev = prev  # type: ignore[union-attr]
        node.next = None
        node.prev = None
        self._size -= 1
        return node.value

    def _add_after_node(self, value: T, node: Node[T]) -> None:
        if node is self._tail:
            self.add_last(value)
            return
        new_node = Node(value, prev=node, next=node.next)
        node.next.prev = new_node  # type: ignore[union-attr]
        node.next = new_node
        self._size += 1

    def _add_before_node(self, value: T, node: Node[T]) -> None:
        if node is self._head:
            self.add_first(value)
            return
        prev = node.prev
        new_node = Node(value, prev=prev, next=node)
        prev.next = new_node  # type: ignore[union-attr]
        node.prev = new_node
        self._size += 1
