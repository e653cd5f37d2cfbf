"""Timing of insert and extract_max across priority queue strategies."""

from __future__ import annotations

import argparse
import csv
import os
import time
from collections.abc import Callable, Sequence

from prique.generator import generate_data
from prique.strategies import (
    AscendArrayStrategy,
    DescendArrayStrategy,
    HeapStrategy,
    ListStrategy,
    PriorityQueue,
)

HEADER = ["n", "List", "Descending array", "Ascending array", "Heap"]
DEFAULT_SIZE = 50_000
DEFAULT_STEP = 100
DEFAULT_SEEDS = (2137,)

Row = tuple[int, int, int, int, int]


def _timed(action: Callable[[], object]) -> int:
    start = time.perf_counter_ns()
    action()
    return time.perf_counter_ns() - start


def _check(size: int, step: int) -> None:
    if step <= 0:
        raise ValueError("step must be positive")
    if size < 0:
        raise ValueError("size must not be negative")


def _write(path: str | os.PathLike[str], rows: list[Row]) -> None:
    with open(path, "w", encoding="utf-8", newline="") as output:
        writer = csv.writer(output, delimiter=";", lineterminator="\n")
        writer.writerow(HEADER)
        writer.writerows(rows)


def benchmark_insert(
    path: str | os.PathLike[str],
    size: int = DEFAULT_SIZE,
    step: int = DEFAULT_STEP,
    seeds: Sequence[int] = DEFAULT_SEEDS,
) -> list[Row]:
    """Time every step-th insert into each strategy, write CSV rows and return them.

    Times are nanoseconds averaged over the seeds; the list is filled too.
    """
    _check(size, step)
    if not seeds:
        raise ValueError("at least one seed is required")
    samples = size // step
    totals = [[0] * 4 for _ in range(samples)]
    for seed in seeds:
        data = generate_data(size, seed, ord("A"), ord("Z"))
        queues = [
            PriorityQueue(ListStrategy()),
            PriorityQueue(DescendArrayStrategy()),
            PriorityQueue(AscendArrayStrategy()),
            PriorityQueue(HeapStrategy()),
        ]
        for i, pair in enumerate(data):
            sample = i // step
            measured = i % step == 0 and sample < samples
            for column, queue in enumerate(queues):
                if measured:
                    totals[sample][column] += _timed(lambda q=queue: q.insert_pair(pair))
                else:
                    queue.insert_pair(pair)
    rows: list[Row] = [
        (k * step, *(total // len(seeds) for total in totals[k])) for k in range(samples)
    ]
    _write(path, rows)
    return rows


def benchmark_extract_max(
    path: str | os.PathLike[str],
    size: int = DEFAULT_SIZE,
    step: int = DEFAULT_STEP,
    seed: int = DEFAULT_SEEDS[0],
) -> list[Row]:
    """Time extract_max at every step-th queue size, write CSV rows and return them.

    The list strategy is not measured, so its column stays zero.
    """
    _check(size, step)
    data = generate_data(size, seed, ord("A"), ord("Z"))
    queues = [
        PriorityQueue(DescendArrayStrategy()),
        PriorityQueue(AscendArrayStrategy()),
        PriorityQueue(HeapStrategy()),
    ]
    for pair in data:
        for queue in queues:
            queue.insert_pair(pair)
    measurements: dict[int, list[int]] = {}
    for remaining in range(size, 1, -1):
        if remaining % step == 0:
            measurements[remaining] = [_timed(queue.extract_max) for queue in queues]
        else:
            for queue in queues:
                queue.extract_max()
    rows: list[Row] = []
    for k in range(size // step):
        n = size - k * step
        rows.append((n, 0, *measurements.get(n, [0, 0, 0])))
    _write(path, rows)
    return rows


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Time priority queue strategies and write CSV results."
    )
    parser.add_argument("--directory", default=".", help="where the CSV files go")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--step", type=int, default=DEFAULT_STEP)
    parser.add_argument("--seed", type=int, default=DEFAULT_SEEDS[0])
    args = parser.parse_args(argv)
    try:
        benchmark_insert(
            os.path.join(args.directory, "insert.csv"), args.size, args.step, (args.seed,)
        )
        benchmark_extract_max(
            os.path.join(args.directory, "extract.csv"), args.size, args.step, args.seed
        )
    except (OSError, ValueError) as error:
        parser.exit(1, f"error: {error}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())