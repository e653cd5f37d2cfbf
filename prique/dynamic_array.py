"""Growable array of pairs with explicit capacity doubling and halving."""

from __future__ import annotations

import copy
from collections.abc import Iterator

from prique.pair import Pair


class DynamicArray:
    """Array of pairs whose capacity doubles when full and halves when under half used."""

    def __init__(self) -> None:
        self._items: list[Pair] = []
        self._capacity = 0

    def _grow(self) -> None:
        if len(self._items) == self._capacity:
            self._capacity = 1 if self._capacity == 0 else self._capacity * 2

    def _shrink(self) -> None:
        if self._capacity > 0 and len(self._items) < self._capacity // 2:
            self._capacity //= 2

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("index out of array range")

    def push_back(self, item: Pair) -> None:
        self._grow()
        self._items.append(item)

    def push_front(self, item: Pair) -> None:
        self._grow()
        self._items.insert(0, item)

    def push_at(self, index: int, item: Pair) -> None:
        if not 0 <= index <= len(self._items):
            raise IndexError("index out of array range")
        self._grow()
        self._items.insert(index, item)

    def remove_back(self) -> Pair:
        if not self._items:
            raise IndexError("array is empty")
        item = self._items.pop()
        self._shrink()
        return item

    def remove_front(self) -> Pair:
        if not self._items:
            raise IndexError("array is empty")
        item = self._items.pop(0)
        self._shrink()
        return item

    def remove_at(self, index: int) -> Pair:
        self._check_index(index)
        item = self._items.pop(index)
        self._shrink()
        return item

    def find(self, item: Pair) -> int:
        """Index of the first pair with an equal key, or -1."""
        return next((i for i, current in enumerate(self._items) if current == item), -1)

    def at_position(self, index: int) -> Pair:
        self._check_index(index)
        return self._items[index]

    def capacity(self) -> int:
        return self._capacity

    def copy(self) -> DynamicArray:
        """Independent copy holding copies of the pairs and the same capacity."""
        duplicate = DynamicArray()
        duplicate._items = [copy.copy(item) for item in self._items]
        duplicate._capacity = self._capacity
        return duplicate

    def __str__(self) -> str:
        return "[" + "; ".join(str(item) for item in self._items) + "]"

    def show(self) -> str:
        """Print the contents as ``[(k|v); ...]`` and return that text."""
        text = str(self)
        print(text)
        return text

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Pair:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, item: Pair) -> None:
        self._check_index(index)
        self._items[index] = item