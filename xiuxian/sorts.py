"""Classic comparison and distribution sorts, each returning a new sorted list."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Iterable, Sequence

from xiuxian.sort_utils import check_ascend, format_sequence, init, max_value


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    arr = list(values)
    length = len(arr)
    for done in range(length):
        for j in range(length - 1 - done):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
    return arr


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by inserting each value into the sorted prefix before it."""
    arr = list(values)
    for i, current in enumerate(arr):
        slot = i
        while slot > 0 and arr[slot - 1] >= current:
            arr[slot] = arr[slot - 1]
            slot -= 1
        arr[slot] = current
    return arr


def bucket_sort(values: Iterable[int], bucket_size: int) -> list[int]:
    """Distribute values into buckets of width ``bucket_size`` and sort each."""
    arr = list(values)
    if not arr:
        return []
    if bucket_size <= 0:
        raise ValueError(f"bucket_size must be positive, got {bucket_size}")
    low, high = min(arr), max(arr)
    buckets: list[list[int]] = [[] for _ in range(int((high - low) // bucket_size) + 1)]
    for value in arr:
        buckets[int((value - low) // bucket_size)].append(value)
    return [value for bucket in buckets for value in insertion_sort(bucket)]


def counting_sort(values: Iterable[int], max_value: int) -> list[int]:
    """Sort non-negative integers no larger than ``max_value`` by counting them."""
    counts = [0] * (max_value + 1)
    for value in values:
        if not 0 <= value <= max_value:
            raise ValueError(f"value {value} outside [0, {max_value}]")
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def _sift_down(arr: list[int], length: int, root: int) -> None:
    parent = arr[root]
    child = 2 * root + 1
    while child < length:
        if child + 1 < length and arr[child] < arr[child + 1]:
            child += 1
        if parent < arr[child]:
            arr[root] = arr[child]
            root = child
            child = 2 * root + 1
        else:
            break
    arr[root] = parent


def heap_sort(values: Iterable[int]) -> list[int]:
    """Sort using a max-heap built in place."""
    arr = list(values)
    length = len(arr)
    for root in range(length // 2 - 1, -1, -1):
        _sift_down(arr, length, root)
    for end in range(length - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        _sift_down(arr, end, 0)
    return arr


def merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Merge two sorted sequences, taking from ``left`` on ties."""
    result: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(values: Iterable[int]) -> list[int]:
    """Sort by splitting in halves and merging the sorted halves."""
    arr = list(values)
    if len(arr) < 2:
        return arr
    middle = len(arr) // 2
    return merge(merge_sort(arr[:middle]), merge_sort(arr[middle:]))


def _partition(arr: list[int], low: int, high: int) -> int:
    pivot = arr[low]
    while low < high:
        while low < high and arr[high] >= pivot:
            high -= 1
        arr[low] = arr[high]
        while low < high and arr[low] <= pivot:
            low += 1
        arr[high] = arr[low]
    arr[low] = pivot
    return low


def quick_sort(values: Iterable[int]) -> list[int]:
    """Sort with in-place partitioning around the first element of each range."""
    arr = list(values)
    pending = [(0, len(arr) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(arr, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return arr


def quick_sort_outplace(values: Iterable[int]) -> list[int]:
    """Sort by three-way splitting around the middle element into new lists."""
    arr = list(values)
    if not arr:
        return []
    pivot = arr[len(arr) // 2]
    smaller = [value for value in arr if value < pivot]
    equal = [value for value in arr if value == pivot]
    larger = [value for value in arr if value > pivot]
    out: list[int] = []
    if smaller:
        out.extend(quick_sort_outplace(smaller))
    out.extend(equal)
    if larger:
        out.extend(quick_sort_outplace(larger))
    return out


def radix_sort(values: Iterable[int], max_value: int) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers in base ten."""
    arr = list(values)
    if any(value < 0 for value in arr):
        raise ValueError("radix_sort only accepts non-negative values")
    max_digit = 1
    while 10**max_digit <= max_value:
        max_digit += 1
    for digit in range(max_digit):
        divisor = 10**digit
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in arr:
            buckets[value // divisor % 10].append(value)
        arr = [value for bucket in buckets for value in bucket]
    return arr


def select_sort(values: Iterable[int]) -> list[int]:
    """Sort by moving the smallest remaining value to the front each pass."""
    arr = list(values)
    length = len(arr)
    for i in range(length):
        smallest = min(range(i, length), key=arr.__getitem__)
        arr[i], arr[smallest] = arr[smallest], arr[i]
    return arr


def shell_sort(values: Iterable[int]) -> list[int]:
    """Sort with gap-spaced insertion passes, halving the gap each time."""
    arr = list(values)
    length = len(arr)
    gap = length // 2
    while gap:
        for i in range(0, length, gap):
            current = arr[i]
            slot = i
            while slot - gap >= 0 and arr[slot - gap] >= current:
                arr[slot] = arr[slot - gap]
                slot -= gap
            arr[slot] = current
        gap //= 2
    return arr


_ALGORITHMS: dict[str, Callable[[list[int]], list[int]]] = {
    "bubble": bubble_sort,
    "bucket": lambda values: bucket_sort(values, 5),
    "counting": lambda values: counting_sort(values, max_value(values)),
    "heap": heap_sort,
    "insertion": insertion_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "quick-outplace": quick_sort_outplace,
    "radix": lambda values: radix_sort(values, max_value(values)),
    "select": select_sort,
    "shell": shell_sort,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Sort random sequences with the chosen algorithms and verify the results."""
    parser = argparse.ArgumentParser(
        prog="xiuxian-sort",
        description="Sort a random sequence with each chosen algorithm.",
    )
    parser.add_argument(
        "algorithms",
        nargs="*",
        help=f"algorithms to run (default: all): {', '.join(_ALGORITHMS)}",
    )
    parser.add_argument("--count", type=int, default=10, help="sequence length")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    unknown = [name for name in args.algorithms if name not in _ALGORITHMS]
    if unknown:
        parser.error(f"unknown algorithm(s): {', '.join(unknown)}")
    names = args.algorithms or list(_ALGORITHMS)

    rng = random.Random(args.seed)
    for name in names:
        values = init(args.count, rng=rng)
        print(f"{name}: before sort{format_sequence(values)}")
        result = _ALGORITHMS[name](values)
        print(f"{name}: after sort{format_sequence(result)}")
        check_ascend(result)
        print("sort successfully")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())