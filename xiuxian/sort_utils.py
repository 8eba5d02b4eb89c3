"""Random test data, formatting and order checks shared by the sorting routines."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from itertools import pairwise

MINVAL_RADIX = 7
MAXVAL_RADIX = 8
DEFAULT_RANGE = (10**MINVAL_RADIX, 10**MAXVAL_RADIX)


class SortCheckError(ValueError):
    """Raised when a sequence is not in ascending order."""


def generate_random_sequence(size: int, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` integers drawn uniformly from ``[1, size]``."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if rng is None:
        rng = random.Random()
    return [rng.randint(1, size) for _ in range(size)]


def init(
    count: int = 0,
    value_range: tuple[int, int] = DEFAULT_RANGE,
    rng: random.Random | None = None,
) -> list[int]:
    """Build a random sequence of ``count`` values.

    When ``count`` is zero a length is drawn from ``value_range`` first.
    """
    if rng is None:
        rng = random.Random()
    if count == 0:
        low, high = value_range
        count = rng.randint(low, high)
    return generate_random_sequence(count, rng)


def format_sequence(values: Iterable[object]) -> str:
    """Render values as ``[a, b, c]``; an empty sequence renders as nothing."""
    items = [str(value) for value in values]
    if not items:
        return ""
    return "[" + ", ".join(items) + "]"


def max_value(values: Iterable[int]) -> int:
    """Return the largest value, never less than zero."""
    return max(0, *values)


def check_ascend(values: Sequence[int]) -> list[int]:
    """Return the values as a list, raising SortCheckError if they are out of order."""
    items = list(values)
    if any(earlier > later for earlier, later in pairwise(items)):
        raise SortCheckError("fail to sort")
    return items