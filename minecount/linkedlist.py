"""A doubly linked list that grows at its tail."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """One element of the list with links to its neighbours."""

    item: T
    next: Optional["Node[T]"] = field(default=None, repr=False)
    prev: Optional["Node[T]"] = field(default=None, repr=False)


class LinkedList(Generic[T]):
    """Doubly linked list holding a head and a tail node."""

    def __init__(self) -> None:
        self.head: Optional[Node[T]] = None
        self.tail: Optional[Node[T]] = None
        self._size = 0

    def push(self, value: T) -> None:
        """Append a value at the end of the list."""
        node = Node(value, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def __iter__(self) -> Iterator[T]:
        node = self.head
        while node is not None:
            yield node.item
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"