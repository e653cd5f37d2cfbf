"""Reproducible random test data for priority queues."""

from __future__ import annotations

import random

from prique.pair import VALUE_LENGTH, Pair

MAX_KEY = 1_000_000


def generate_data(
    count: int, seed: int, min_ascii: int = ord("A"), max_ascii: int = ord("Z")
) -> list[Pair]:
    """Return count pairs with keys in 0..1000000 and values of random characters.

    Values have five characters whose codes lie between min_ascii and max_ascii.
    """
    if min_ascii > max_ascii:
        raise ValueError("min_ascii must not exceed max_ascii")
    rng = random.Random(seed)
    pairs = []
    for _ in range(count):
        key = rng.randint(0, MAX_KEY)
        value = "".join(
            chr(rng.randint(min_ascii, max_ascii)) for _ in range(VALUE_LENGTH)
        )
        pairs.append(Pair(key, value))
    return pairs