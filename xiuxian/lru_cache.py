"""A fixed-capacity cache that evicts the least recently used entry."""

from __future__ import annotations

import argparse
from collections import OrderedDict
from collections.abc import Sequence


class LRUCache:
    """Map integer keys to values, keeping at most ``capacity`` entries."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        # Least recently used first, most recently used last.
        self._entries: OrderedDict[int, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key`` and mark it most recently used."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key)
            return
        self._entries[key] = value
        if len(self._entries) > self.capacity:
            self._entries.popitem(last=False)

    def get(self, key: int) -> int | None:
        """Return the value for ``key`` and refresh it, or None if absent."""
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]

    def keys(self) -> list[int]:
        """Return the keys from most to least recently used."""
        return list(reversed(self._entries))


def main(argv: Sequence[str] | None = None) -> int:
    """Fill a small cache past capacity and print the key order."""
    parser = argparse.ArgumentParser(
        prog="xiuxian-lru",
        description="Demonstrate least-recently-used eviction.",
    )
    parser.add_argument("--capacity", type=int, default=5, help="cache capacity")
    args = parser.parse_args(argv)

    cache = LRUCache(args.capacity)
    for key in range(1, 6):
        cache.put(key, 2)
    print(" ".join(str(key) for key in cache.keys()))
    cache.put(6, 2)
    cache.put(7, 2)
    print(" ".join(str(key) for key in cache.keys()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())