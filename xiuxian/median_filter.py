"""Sliding-window median filtering, sequential and multi-threaded."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from itertools import chain

DEFAULT_SEED = 5489


def create_vector(length: int, seed: int = DEFAULT_SEED) -> list[float]:
    """Return ``length`` reproducible floats drawn uniformly from ``[0, 2)``."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    rng = random.Random(seed)
    return [rng.random() * 2.0 for _ in range(length)]


def median(values: Sequence[float]) -> float:
    """Return the median; for an even count, the mean of the two middle values."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("median of an empty sequence")
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid] + ordered[mid - 1]) / 2
    return ordered[mid]


def _output_size(values: Sequence[float], filter_size: int) -> int:
    if filter_size < 1:
        raise ValueError(f"filter_size must be positive, got {filter_size}")
    if filter_size > len(values):
        raise ValueError(
            f"filter_size {filter_size} exceeds input length {len(values)}"
        )
    return len(values) - filter_size + 1


def _filter_range(
    values: Sequence[float], filter_size: int, start: int, stop: int
) -> list[float]:
    return [median(values[i : i + filter_size]) for i in range(start, stop)]


def filter_median(values: Sequence[float], filter_size: int) -> list[float]:
    """Return the median of every window of ``filter_size`` consecutive values."""
    size = _output_size(values, filter_size)
    return _filter_range(values, filter_size, 0, size)


def parallel_filter_median(
    values: Sequence[float], filter_size: int, group: int = 1
) -> list[float]:
    """Compute the median filter with ``group`` threads, each owning a contiguous block."""
    if group < 1:
        raise ValueError(f"group must be positive, got {group}")
    size = _output_size(values, filter_size)
    block, extra = divmod(size, group)
    bounds = []
    start = 0
    for index in range(group):
        stop = start + block + (1 if index < extra else 0)
        bounds.append((start, stop))
        start = stop
    with ThreadPoolExecutor(max_workers=group) as pool:
        parts = pool.map(
            lambda span: _filter_range(values, filter_size, *span), bounds
        )
        return list(chain.from_iterable(parts))


def pool_filter_median(values: Sequence[float], filter_size: int) -> list[float]:
    """Compute the median filter by handing windows to a default-sized thread pool."""
    size = _output_size(values, filter_size)
    windows = (values[i : i + filter_size] for i in range(size))
    with ThreadPoolExecutor() as pool:
        return list(pool.map(median, windows, chunksize=1024))


def _timed(label: str, func, *args) -> list[float]:
    start = time.perf_counter()
    result = func(*args)
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    print(f"{label}: {elapsed_ms} ms")
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Time the three median filters on random data and check they agree."""
    parser = argparse.ArgumentParser(
        prog="xiuxian-median",
        description="Compare sequential and threaded sliding median filters.",
    )
    parser.add_argument("input_size", type=int, nargs="?", default=1_000_000)
    parser.add_argument("filter_size", type=int, nargs="?", default=5)
    parser.add_argument("num_threads", type=int, nargs="?", default=4)
    args = parser.parse_args(argv)

    values = create_vector(args.input_size)
    sequential = _timed("elapsed time", filter_median, values, args.filter_size)
    threaded = _timed(
        "parallel elapsed time",
        parallel_filter_median,
        values,
        args.filter_size,
        args.num_threads,
    )
    pooled = _timed(
        "parallel omp elapsed time", pool_filter_median, values, args.filter_size
    )
    if sequential != threaded or sequential != pooled:
        raise RuntimeError("assert error")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())