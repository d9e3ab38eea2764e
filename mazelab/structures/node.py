"""Linked storage cells for the sequence, stack and queue containers.

``Node`` is the doubly linked cell used by ``Sequence``. The forward ``next``
link is the only owning reference; ``prev`` is kept as a weak reference so a
chain never forms a strong reference cycle. ``LinkNode`` is the singly linked
cell behind ``Stack`` and ``Queue``.
"""

from __future__ import annotations

import weakref
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """Doubly linked cell holding a value."""

    __slots__ = ("value", "next", "_prev", "__weakref__")

    def __init__(
        self,
        value: T,
        prev: Optional[Node[T]] = None,
        next: Optional[Node[T]] = None,
    ) -> None:
        self.value = value
        self.next = next
        self._prev: Optional[weakref.ref[Node[T]]] = None
        self.prev = prev

    @property
    def prev(self) -> Optional[Node[T]]:
        """Return the preceding node, or None at the head of a chain."""
        return self._prev() if self._prev is not None else None

    @prev.setter
    def prev(self, node: Optional[Node[T]]) -> None:
        self._prev = weakref.ref(node) if node is not None else None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class LinkNode(Generic[T]):
    """Singly linked cell holding a value."""

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: Optional[LinkNode[T]] = None) -> None:
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f"LinkNode({self.value!r})"
