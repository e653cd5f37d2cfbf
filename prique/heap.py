"""Binary max-heap of pairs stored in a dynamic array."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator

from prique.dynamic_array import DynamicArray
from prique.pair import Pair


class Heap:
    """Max-heap: the pair with the largest key sits at the root."""

    def __init__(self, items: Iterable[Pair] | None = None) -> None:
        self._data = DynamicArray()
        if items is not None:
            self.build(items)

    def _swap(self, i: int, j: int) -> None:
        data = self._data
        data[i], data[j] = data[j], data[i]

    def _sift_up(self, i: int) -> None:
        data = self._data
        while i > 0:
            parent = (i - 1) // 2
            if data[i] <= data[parent]:
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        data = self._data
        size = len(data)
        while True:
            largest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < size and data[child] > data[largest]:
                    largest = child
            if largest == i:
                return
            self._swap(i, largest)
            i = largest

    def _find_index(self, value: str | None) -> int | None:
        if value is None:
            return None
        return next((i for i, pair in enumerate(self._data) if pair.value == value), None)

    def _set_key(self, index: int, key: int) -> None:
        pair = self._data[index]
        old = pair.key
        pair.key = key
        if key > old:
            self._sift_up(index)
        else:
            self._sift_down(index)

    def insert(self, item: Pair) -> None:
        self._data.push_back(copy.copy(item))
        self._sift_up(len(self._data) - 1)

    def extract_max(self) -> Pair:
        if not self._data:
            raise IndexError("heap is empty")
        last = len(self._data) - 1
        self._swap(0, last)
        top = self._data.remove_back()
        if self._data:
            self._sift_down(0)
        return top

    def find_max(self) -> Pair:
        if not self._data:
            raise IndexError("heap is empty")
        return self._data[0]

    def find(self, value: str | None) -> Pair | None:
        """First stored pair with the given value, or None."""
        index = self._find_index(value)
        return None if index is None else self._data[index]

    def decrease_key(self, value: str, amount: int = 1) -> None:
        index = self._find_index(value)
        if index is not None:
            self._set_key(index, self._data[index].key - amount)

    def increase_key(self, value: str, amount: int = 1) -> None:
        self.decrease_key(value, -amount)

    def modify_key(self, value: str, key: int) -> None:
        index = self._find_index(value)
        if index is not None:
            self._set_key(index, key)

    def build(self, items: Iterable[Pair]) -> None:
        """Replace the contents with copies of items and restore heap order."""
        if isinstance(items, DynamicArray):
            self._data = items.copy()
        else:
            self._data = DynamicArray()
            for item in items:
                self._data.push_back(copy.copy(item))
        for i in range(len(self._data) // 2 - 1, -1, -1):
            self._sift_down(i)

    def show(self) -> None:
        self._data.show()

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._data)