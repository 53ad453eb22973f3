"""Doubly linked list stored in a growable array of slots."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

POISON = 0xDEADBEE
CANARY = 0xC0CCA
FREE_PREV = -1


@dataclass
class Node:
    """One slot of the list: links to neighbouring slots and a value."""

    prev: int
    next: int
    value: int

    @property
    def is_free(self) -> bool:
        return self.prev == FREE_PREV


class ListError(ValueError):
    """Raised when an insertion or deletion names an unusable slot."""


class ArrayList:
    """Doubly linked list whose nodes live in a list of slots.

    Slot 0 is a sentinel: its ``next`` is the head and its ``prev`` the tail.
    Free slots form a chain through ``next`` starting at ``free``; when the
    last free slot is taken the storage doubles.
    """

    def __init__(self, capacity: int = 1) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.nodes: list[Node] = [Node(0, 0, CANARY)]
        self.size = 0
        self.free = 1
        self._extend(capacity + 1)

    def _extend(self, new_capacity: int) -> None:
        start = len(self.nodes)
        self.nodes.extend(Node(FREE_PREV, i + 1, POISON) for i in range(start, new_capacity))
        self.nodes[-1].next = 0

    def _grow(self) -> int:
        old_capacity = self.capacity
        self._extend(old_capacity * 2)
        return old_capacity

    @property
    def capacity(self) -> int:
        return len(self.nodes)

    @property
    def head(self) -> int:
        return self.nodes[0].next

    @property
    def tail(self) -> int:
        return self.nodes[0].prev

    def insert(self, index: int, value: int) -> int:
        """Insert ``value`` after slot ``index``; return the slot it went to."""
        if not 0 <= index < self.capacity or self.nodes[index].is_free:
            raise ListError("You can't insert after this index!")
        after = self.nodes[index]
        slot = self.free
        new = self.nodes[slot]
        next_free = new.next
        successor = after.next

        after.next = slot
        self.nodes[successor].prev = slot
        new.prev, new.value, new.next = index, value, successor
        self.size += 1

        self.free = self._grow() if next_free == 0 else next_free
        return slot

    def delete(self, index: int) -> None:
        """Remove the node in slot ``index`` and return the slot to the free chain."""
        if not 0 < index < self.capacity or self.nodes[index].value == POISON:
            raise ListError("You can't delete this index!")
        node = self.nodes[index]
        node.value = POISON
        self.nodes[node.prev].next = node.next
        self.nodes[node.next].prev = node.prev
        node.prev = FREE_PREV
        node.next = self.free
        self.free = min(self.free, index)
        self.size -= 1

    def values(self) -> list[int]:
        return list(self)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[int]:
        slot = self.head
        while slot != 0:
            node = self.nodes[slot]
            yield node.value
            slot = node.next