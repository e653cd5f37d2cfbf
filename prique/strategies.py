"""Priority queues built on interchangeable storage strategies."""

from __future__ import annotations

import bisect
import copy
from abc import ABC, abstractmethod

from prique.dynamic_array import DynamicArray
from prique.heap import Heap
from prique.linked_list import LinkedList
from prique.pair import Pair


class PriorityQueueStrategy(ABC):
    """Storage behind a priority queue of pairs."""

    def insert(self, key: int, value: str) -> None:
        self.insert_pair(Pair(key, value))

    @abstractmethod
    def insert_pair(self, pair: Pair) -> None:
        """Store a copy of pair."""

    @abstractmethod
    def extract_max(self) -> Pair:
        """Remove and return the front pair."""

    @abstractmethod
    def find_max(self) -> Pair:
        """Return the front pair without removing it."""

    @abstractmethod
    def modify_key(self, value: str, key: int) -> None:
        """Give the first pair holding value a new key."""

    @abstractmethod
    def show(self) -> None:
        """Print the stored pairs."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of stored pairs."""


class HeapStrategy(PriorityQueueStrategy):
    """Pairs kept in a binary max-heap; unknown values are ignored by modify_key."""

    def __init__(self) -> None:
        self._data = Heap()

    def insert_pair(self, pair: Pair) -> None:
        self._data.insert(pair)

    def extract_max(self) -> Pair:
        return self._data.extract_max()

    def find_max(self) -> Pair:
        return copy.copy(self._data.find_max())

    def modify_key(self, value: str, key: int) -> None:
        self._data.modify_key(value, key)

    def show(self) -> None:
        self._data.show()

    def __len__(self) -> int:
        return len(self._data)


class ListStrategy(PriorityQueueStrategy):
    """Pairs kept in a linked list sorted by descending key.

    A new pair goes in front of any pairs with the same key.
    Unknown values are ignored by modify_key.
    """

    def __init__(self) -> None:
        self._data = LinkedList()

    def insert_pair(self, pair: Pair) -> None:
        pair = copy.copy(pair)
        node = self._data.head
        while node is not None and node.value > pair:
            node = node.next
        if node is None:
            self._data.push_back(pair)
        else:
            self._data.insert_before(node, pair)

    def extract_max(self) -> Pair:
        if not self._data:
            raise IndexError("queue is empty")
        return self._data.remove_front()

    def find_max(self) -> Pair:
        if self._data.head is None:
            raise IndexError("queue is empty")
        return copy.copy(self._data.head.value)

    def modify_key(self, value: str, key: int) -> None:
        node = self._data.head
        while node is not None and node.value.value != value:
            node = node.next
        if node is None:
            return
        removed = self._data.unlink(node)
        self.insert(key, removed.value)

    def show(self) -> None:
        self._data.show()

    def __len__(self) -> int:
        return len(self._data)


class _SortedArrayStrategy(PriorityQueueStrategy):
    """Pairs kept sorted in a dynamic array; the front element is extracted.

    A new pair goes after any pairs with the same key.
    """

    def __init__(self) -> None:
        self._data = DynamicArray()

    @abstractmethod
    def _position(self, key: int) -> int:
        """Index at which a pair with key belongs."""

    def insert_pair(self, pair: Pair) -> None:
        self._data.push_at(self._position(pair.key), copy.copy(pair))

    def extract_max(self) -> Pair:
        if not self._data:
            raise IndexError("queue is empty")
        return self._data.remove_front()

    def find_max(self) -> Pair:
        if not self._data:
            raise IndexError("queue is empty")
        return copy.copy(self._data.at_position(0))

    def modify_key(self, value: str, key: int) -> None:
        index = next(
            (i for i, pair in enumerate(self._data) if pair.value == value), None
        )
        if index is None:
            raise KeyError(f"value {value!r} not found in queue")
        old = self._data.remove_at(index)
        self.insert(key, old.value)

    def show(self) -> None:
        self._data.show()

    def __len__(self) -> int:
        return len(self._data)


class DescendArrayStrategy(_SortedArrayStrategy):
    """Array sorted from the largest key to the smallest."""

    def _position(self, key: int) -> int:
        return bisect.bisect_right(self._data, -key, key=lambda pair: -pair.key)


class AscendArrayStrategy(_SortedArrayStrategy):
    """Array sorted from the smallest key to the largest.

    Extraction takes the front element, which here holds the smallest key.
    """

    def _position(self, key: int) -> int:
        return bisect.bisect_right(self._data, key, key=lambda pair: pair.key)


class PriorityQueue:
    """Priority queue that delegates all work to a strategy."""

    def __init__(self, strategy: PriorityQueueStrategy) -> None:
        self._strategy = strategy

    def insert(self, key: int, value: str) -> None:
        self._strategy.insert_pair(Pair(key, value))

    def insert_pair(self, pair: Pair) -> None:
        self._strategy.insert_pair(pair)

    def extract_max(self) -> Pair:
        return self._strategy.extract_max()

    def find_max(self) -> Pair:
        return self._strategy.find_max()

    def modify_key(self, value: str, key: int) -> None:
        self._strategy.modify_key(value, key)

    def show(self) -> None:
        self._strategy.show()

    def __len__(self) -> int:
        return len(self._strategy)