# prique

Priority queues over `(key, value)` pairs with four interchangeable
storage strategies, and a small benchmark that times them.

## Pairs

`prique.pair.Pair(key, value)` holds an integer key and a text value of
at most five characters; longer values are cut to the first five.
Pairs compare with each other by key only (a pair also equals an `int`
with the same key), and print as `(key|value)`.

## Priority queues

`prique.strategies.PriorityQueue` is given a strategy when it is made
and passes every call on to it:

- `HeapStrategy` – a binary max-heap (`Heap`).
- `ListStrategy` – a `LinkedList` kept in descending key order; a new
  pair goes in front of pairs with the same key.
- `DescendArrayStrategy` – a `DynamicArray` kept in descending key
  order; a new pair goes after pairs with the same key.
- `AscendArrayStrategy` – a `DynamicArray` kept in ascending key order.
  `extract_max` and `find_max` take the front element, which in this
  strategy is the pair with the *smallest* key.

```python
from prique.strategies import PriorityQueue, HeapStrategy

queue = PriorityQueue(HeapStrategy())
queue.insert(5, "apple")
queue.insert(9, "pear")
queue.insert(1, "plum")

print(queue.find_max())      # (9|pear)
queue.modify_key("plum", 20)
print(queue.extract_max())   # (20|plum)
print(len(queue))            # 2
```

Methods: `insert(key, value)`, `insert_pair(pair)`, `extract_max()`,
`find_max()`, `modify_key(value, key)`, `show()` and `len()`.

- Queues store copies of inserted pairs, and `find_max` returns a copy.
- `extract_max` and `find_max` on an empty queue raise `IndexError`.
- `modify_key` gives the first pair holding `value` the new key and
  moves it into place. If no pair holds that value, the heap and list
  strategies do nothing, and the two array strategies raise `KeyError`.
- `show()` prints the contents in the structure's own order.

New strategies can be written by subclassing `PriorityQueueStrategy`.

## Building blocks

These can be used on their own:

- `prique.dynamic_array.DynamicArray` – an array of pairs with
  `push_back`, `push_front`, `push_at`, `remove_back`, `remove_front`,
  `remove_at`, `find` (index of the first equal key, or `-1`),
  `at_position`, indexing, iteration, `copy()` and `show()`. Its
  `capacity()` doubles when it is full and halves when fewer than half
  the places are used. Out-of-range positions raise `IndexError`.
- `prique.linked_list.LinkedList` – a doubly linked list of `Node`
  objects with the same push and remove operations, plus `unlink(node)`,
  `insert_before(node, item)`, `find` (the first node with an equal key,
  or `None`), `find_index` (its position, or the list length if absent),
  `at_position` (returns the node), forward and `reversed()` iteration.
- `prique.heap.Heap` – a max-heap that can be built from any iterable of
  pairs, with `insert`, `extract_max`, `find_max`, `find(value)`,
  `decrease_key(value, amount=1)`, `increase_key(value, amount=1)`,
  `modify_key(value, key)` and `build(items)`. Key changes for a value
  that is not present are ignored.

## Test data

`prique.generator.generate_data(count, seed, min_ascii=ord("A"), max_ascii=ord("Z"))`
returns a list of `count` pairs, reproducible for a given seed, with
keys from 0 to 1,000,000 and five-character values whose character codes
lie between `min_ascii` and `max_ascii`. A `min_ascii` above `max_ascii`
raises `ValueError`.

## Benchmark

```
prique-bench [--directory DIR] [--size N] [--step K] [--seed S]
```

It times `insert` and `extract_max` for each strategy, taking one
measurement every `K` operations (default 50,000 pairs, every 100th
operation, seed 2137), and writes semicolon-separated tables with the
columns `n;List;Descending array;Ascending array;Heap` to `insert.csv`
and `extract.csv` in `DIR` (default: the current directory). Times are
in nanoseconds. The extraction run does not time the list strategy, so
its column is zero there.

The same runs are available from Python as
`prique.benchmark.benchmark_insert(path, size, step, seeds)` and
`prique.benchmark.benchmark_extract_max(path, size, step, seed)`; both
write the file and return the rows.

## Limits

The benchmark covers only `insert` and `extract_max`; it does not time
`find_max` or `modify_key`, and it does not draw charts from the CSV
files.