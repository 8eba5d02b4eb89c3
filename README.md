# xiuxian

A small collection of classic algorithms written in plain Python:

- sorting algorithms (bubble, insertion, selection, shell, heap, merge,
  quick, bucket, counting and radix sort) with helpers to generate random
  input and check the result;
- a deep copy of an undirected graph of nodes;
- a fixed-capacity least-recently-used cache;
- a sliding-window median filter, sequential and split across worker threads.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Sorting

All sorting functions live in `xiuxian.sorts`. Each accepts any iterable of
integers and returns a new sorted list; the input is left untouched.

```python
from xiuxian.sorts import merge_sort, quick_sort_outplace, radix_sort
from xiuxian.sort_utils import check_ascend, max_value

values = [5, 3, 9, 1]
merge_sort(values)                      # [1, 3, 5, 9]
radix_sort(values, max_value(values))   # [1, 3, 5, 9]
```

The available functions are `bubble_sort`, `insertion_sort`, `select_sort`,
`shell_sort`, `heap_sort`, `merge_sort` (with `merge` for two sorted
sequences), `quick_sort` (in-place partitioning of a copy),
`quick_sort_outplace` (three-way split into new lists), `bucket_sort`,
`counting_sort` and `radix_sort`.

- `bucket_sort(values, bucket_size)` raises `ValueError` if `bucket_size`
  is not positive.
- `counting_sort(values, max_value)` and `radix_sort(values, max_value)`
  take the largest value in the input and accept only non-negative
  integers; they raise `ValueError` otherwise.

Helpers in `xiuxian.sort_utils`:

- `max_value(values)` returns the largest value, never less than zero.
- `check_ascend(values)` returns the values as a list, or raises
  `SortCheckError` (a `ValueError`) when they are not in ascending order.
- `format_sequence(values)` renders values as `[a, b, c]`; an empty
  sequence renders as an empty string.
- `generate_random_sequence(size, rng=None)` returns `size` integers drawn
  from `[1, size]`.
- `init(count=0, value_range=..., rng=None)` returns a random sequence of
  `count` values; when `count` is zero a length is first drawn from
  `value_range` (by default 10^7 to 10^8). Pass a `random.Random` as `rng`
  for reproducible output.

Run every sort on freshly generated data and verify the results:

```
xiuxian-sort
```

Name algorithms to run only those (`bubble`, `bucket`, `counting`, `heap`,
`insertion`, `merge`, `quick`, `quick-outplace`, `radix`, `select`,
`shell`), and use `--count` for the sequence length (default 10) and
`--seed` for reproducible data:

```
xiuxian-sort merge radix --count 20 --seed 1
```

## Graph cloning

`xiuxian.graph` provides `Node`, holding a value and a list of neighbours
(nodes compare by identity), and `clone_graph`, which returns a copy of the
graph reachable from a node, preserving neighbour order and shape,
including cycles. `clone_graph(None)` returns `None`.

```python
from xiuxian.graph import Node, clone_graph

a, b = Node(0), Node(1)
a.neighbors.append(b)
b.neighbors.append(a)
copy = clone_graph(a)
```

## LRU cache

```python
from xiuxian.lru_cache import LRUCache

cache = LRUCache(2)
cache.put(1, 10)
cache.put(2, 20)
cache.get(1)      # 10; key 1 becomes most recently used
cache.put(3, 30)  # evicts key 2
cache.get(2)      # None: missing keys return None
cache.keys()      # [3, 1], from most to least recently used
len(cache)        # 2
1 in cache        # True
```

A short demonstration that fills a cache past its capacity and prints the
key order before and after eviction:

```
xiuxian-lru
xiuxian-lru --capacity 3
```

## Median filter

`xiuxian.median_filter` computes the median of each window of
`filter_size` consecutive values.

- `median(values)` returns the median of a sequence (the mean of the two
  middle values for even lengths) and raises `ValueError` when it is empty.
- `filter_median(values, filter_size)` produces
  `len(values) - filter_size + 1` results.
- `parallel_filter_median(values, filter_size, group=1)` splits the output
  into `group` contiguous blocks, each computed by its own thread.
- `pool_filter_median(values, filter_size)` hands windows to a thread pool
  of default size.
- `create_vector(length, seed=5489)` builds reproducible random floats in
  `[0, 2)`.

The filters raise `ValueError` when `filter_size` is not positive or is
larger than the input.

Time the three variants on random data and check they agree:

```
xiuxian-median-filter
```

Optionally pass the input size, filter size and thread count (defaults
1000000, 5 and 4):

```
xiuxian-median-filter 100000 5 4
```