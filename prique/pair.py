"""Key/value pair ordered and compared by its integer key."""

from __future__ import annotations

VALUE_LENGTH = 5


class Pair:
    """An integer key with a short text value; comparisons look at the key only."""

    def __init__(self, key: int = 0, value: str = "") -> None:
        self.key = key
        self.value = value

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, text: str) -> None:
        self._value = text[:VALUE_LENGTH]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Pair):
            return self.key == other.key
        if isinstance(other, int):
            return self.key == other
        return NotImplemented

    __hash__ = None  # mutable and compared by key only

    def __lt__(self, other: Pair) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.key < other.key

    def __gt__(self, other: Pair) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.key > other.key

    def __le__(self, other: Pair) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.key <= other.key

    def __ge__(self, other: Pair) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.key >= other.key

    def __str__(self) -> str:
        return f"({self.key}|{self.value})"

    def __repr__(self) -> str:
        return f"Pair({self.key!r}, {self.value!r})"