"""Per-offset cache of prime power rows.

For every offset the cache keeps the primes found so far, in ascending
order, each mapped to its ten ``p**(d + offset)`` values.  Rows are pure
functions of ``(prime, offset)``: once stored they are never recomputed,
replaced or evicted.
"""

from __future__ import annotations

import logging
import threading
from itertools import islice

from .primes import next_prime

logger = logging.getLogger(__name__)


class PowerCache:
    """Thread-safe, grow-only table of power rows keyed by offset."""

    def __init__(self) -> None:
        self._tables: dict[int, dict[int, tuple[int, ...]]] = {}
        self._cursors: dict[int, int | None] = {}
        self._lock = threading.Lock()

    def _fill(self, offset: int, count: int) -> int:
        # caller holds self._lock
        table = self._tables.setdefault(offset, {})
        cursor = self._cursors.get(offset)
        added = 0
        while len(table) < count:
            cursor, row = next_prime(cursor, offset)
            table[cursor] = row
            added += 1
        self._cursors[offset] = cursor
        if added:
            logger.debug("offset=%d: cached %d new primes (largest %d)", offset, added, cursor)
        return added

    def ensure(self, offset: int, count: int) -> int:
        """Make sure ``offset`` has at least ``count`` primes cached.

        Returns how many primes were added.
        """
        with self._lock:
            return self._fill(offset, count)

    def rows(self, offset: int, count: int) -> list[tuple[int, ...]]:
        """Power rows of the ``count`` smallest primes, ascending."""
        with self._lock:
            self._fill(offset, count)
            return list(islice(self._tables[offset].values(), count))

    def primes(self, offset: int, count: int | None = None) -> list[int]:
        with self._lock:
            table = self._tables.get(offset, {})
            return list(islice(table, count))

    def cursor(self, offset: int) -> int | None:
        """Largest prime cached for ``offset``, or ``None``."""
        with self._lock:
            return self._cursors.get(offset)

    def size(self, offset: int) -> int:
        with self._lock:
            return len(self._tables.get(offset, ()))

    def offsets(self) -> list[int]:
        with self._lock:
            return sorted(self._tables)

    def clear(self) -> None:
        """Drop every table.  Results do not change, only speed."""
        with self._lock:
            self._tables.clear()
            self._cursors.clear()


DEFAULT_CACHE = PowerCache()
