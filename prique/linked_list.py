"""Doubly linked list of pairs."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from prique.pair import Pair


@dataclass(eq=False)
class Node:
    """A list node holding one pair."""

    value: Pair
    prev: Node | None = field(default=None, repr=False)
    next: Node | None = field(default=None, repr=False)


class LinkedList:
    """Doubly linked list with access from both ends."""

    def __init__(self) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        self._size = 0

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> Node:
        if not 0 <= index < self._size:
            raise IndexError("index out of list range")
        if index < self._size // 2:
            node = self.head
            for _ in range(index):
                node = node.next
        else:
            node = self.tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def push_back(self, item: Pair) -> None:
        node = Node(item, self.tail, None)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def push_front(self, item: Pair) -> None:
        node = Node(item, None, self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1

    def push_at(self, index: int, item: Pair) -> None:
        """Insert so that the new item ends up at position index."""
        if not 0 <= index <= self._size:
            raise IndexError("index out of list range")
        if index == self._size:
            self.push_back(item)
        else:
            self.insert_before(self._node_at(index), item)

    def insert_before(self, node: Node, item: Pair) -> Node:
        new = Node(item, node.prev, node)
        if node.prev is None:
            self.head = new
        else:
            node.prev.next = new
        node.prev = new
        self._size += 1
        return new

    def unlink(self, node: Node) -> Pair:
        """Remove node from the list and return its pair."""
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def remove_back(self) -> Pair:
        if self.tail is None:
            raise IndexError("nothing to remove")
        return self.unlink(self.tail)

    def remove_front(self) -> Pair:
        if self.head is None:
            raise IndexError("nothing to remove")
        return self.unlink(self.head)

    def remove_at(self, index: int) -> Pair:
        return self.unlink(self._node_at(index))

    def find(self, item: Pair) -> Node | None:
        """First node whose pair has an equal key, or None."""
        return next((node for node in self._nodes() if node.value == item), None)

    def find_index(self, item: Pair) -> int:
        """Position of the first equal-key pair, or the list length if absent."""
        return next((i for i, value in enumerate(self) if value == item), self._size)

    def at_position(self, index: int) -> Node:
        return self._node_at(index)

    def show(self) -> None:
        if self.head is None:
            print("List is empty!")
            return
        ends = f"head: {self.head.value} tail: {self.tail.value}"
        print("".join(f"{value}->" for value in self) + "/0")
        print(ends)
        print("".join(f"{value}->" for value in reversed(self)) + "/0")
        print(ends)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Pair]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[Pair]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev