"""
Copyright (c) 2025. All rights reserved.
"""

"""
Frequency table: a chained hash table mapping words to counts.

The table is a plain key/value store. Callers implement counting on top
of it by looking a word up and installing the old count plus one; the
table never increments anything itself.

Layout:
    - A list of buckets, sized by the caller's hint (at least 1)
    - Each bucket is a chain of entries kept in ascending key order
    - Keys are placed with a 32-bit FNV-1a hash followed by an
      avalanche mix, reduced modulo the bucket count

The size hint only affects speed. A hint of 1 puts every key in the same
chain and the table still behaves exactly like a dict. Optionally the
table doubles its bucket count once a load factor is exceeded.
"""

import logging
from dataclasses import dataclass
from typing import Generator, Iterator, List, Optional, Tuple

from .errors import TableCreationError, TableInsertError

logger = logging.getLogger(__name__)

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
_MASK32 = 0xFFFFFFFF


def fnv1a_hash(key: str) -> int:
    """
    32-bit FNV-1a hash of the UTF-8 bytes of key, with a final avalanche.

    The shift/add/xor tail spreads the low-entropy bits of short keys
    before the value is reduced modulo a small bucket count.
    """
    h = FNV_OFFSET_BASIS
    for byte in key.encode("utf-8"):
        h = ((h ^ byte) * FNV_PRIME) & _MASK32
    h = (h + (h << 13)) & _MASK32
    h ^= h >> 7
    h = (h + (h << 3)) & _MASK32
    h ^= h >> 17
    h = (h + (h << 5)) & _MASK32
    return h


class _Entry:
    __slots__ = ("key", "value")

    def __init__(self, key: str, value: int):
        self.key = key
        self.value = value


@dataclass
class TableStats:
    """Snapshot of the table's shape, for diagnostics"""
    entries: int
    buckets: int
    used_buckets: int
    longest_chain: int

    @property
    def load_factor(self) -> float:
        return self.entries / self.buckets


class FrequencyTable:
    """
    Hash table from words to occurrence counts.

    Enumeration (items(), iteration) is only valid once population is
    finished: adding a new key while an enumeration is in progress is not
    supported and makes the enumeration raise RuntimeError. Overwriting
    the count of an existing key does not affect a running enumeration.

    Example:
        >>> table = FrequencyTable(size_hint=16)
        >>> table.insert_or_update("mangoes", 1)
        >>> table.insert_or_update("mangoes", table.lookup("mangoes") + 1)
        >>> table.lookup("mangoes")
        2
        >>> table.lookup("papayas") is None
        True
    """

    def __init__(self, size_hint: int, max_load_factor: Optional[float] = None):
        """
        Create an empty table.

        Args:
            size_hint: Initial number of buckets, at least 1
            max_load_factor: Double the bucket count when entries per bucket
                exceeds this value. None disables growth.

        Raises:
            TableCreationError: If size_hint is below 1 or the buckets
                cannot be allocated
        """
        if isinstance(size_hint, bool) or not isinstance(size_hint, int) or size_hint < 1:
            raise TableCreationError(f"size hint must be an integer >= 1, got {size_hint!r}")
        try:
            self._buckets: List[List[_Entry]] = [[] for _ in range(size_hint)]
        except MemoryError as e:
            raise TableCreationError(
                f"could not allocate {size_hint} buckets"
            ) from e
        self._size = 0
        self._max_load_factor = max_load_factor
        # bumped whenever the set of keys or the bucket layout changes
        self._generation = 0

    def _bucket_for(self, key: str) -> List[_Entry]:
        return self._buckets[fnv1a_hash(key) % len(self._buckets)]

    @staticmethod
    def _find(chain: List[_Entry], key: str) -> Tuple[int, bool]:
        """Position of key in a sorted chain, and whether it is present there."""
        for position, entry in enumerate(chain):
            if entry.key >= key:
                return position, entry.key == key
        return len(chain), False

    def lookup(self, key: str) -> Optional[int]:
        """Return the count stored for key, or None if the key is absent."""
        chain = self._bucket_for(key)
        position, found = self._find(chain, key)
        if not found:
            return None
        return chain[position].value

    def insert_or_update(self, key: str, count: int) -> None:
        """
        Store count for key, inserting the key if it is not present yet.

        Raises:
            TableInsertError: If memory runs out while adding a new key. The
                table is unchanged in that case.
        """
        chain = self._bucket_for(key)
        position, found = self._find(chain, key)
        if found:
            chain[position].value = count
            return

        try:
            entry = _Entry(str(key), count)
            chain.insert(position, entry)
        except MemoryError as e:
            raise TableInsertError(f"could not install [{key}]", word=key) from e
        self._size += 1
        self._generation += 1

        if self._max_load_factor is not None and self._size > self._max_load_factor * len(self._buckets):
            self._grow()

    # name used by the classic symbol table interface
    install = insert_or_update

    def _grow(self) -> None:
        new_count = len(self._buckets) * 2
        try:
            new_buckets: List[List[_Entry]] = [[] for _ in range(new_count)]
        except MemoryError:
            # growth is an optimisation only; keep the current layout
            logger.warning(f"could not grow table to {new_count} buckets, keeping {len(self._buckets)}")
            return
        for chain in self._buckets:
            for entry in chain:
                target = new_buckets[fnv1a_hash(entry.key) % new_count]
                position, _ = self._find(target, entry.key)
                target.insert(position, entry)
        logger.debug(f"grew table from {len(self._buckets)} to {new_count} buckets ({self._size} entries)")
        self._buckets = new_buckets
        self._generation += 1

    def items(self) -> Generator[Tuple[str, int], None, None]:
        """
        Yield every (word, count) pair exactly once, in bucket order.

        Raises:
            RuntimeError: If a new key is added while enumerating
        """
        generation = self._generation
        for chain in self._buckets:
            for entry in chain:
                if generation != self._generation:
                    raise RuntimeError("frequency table changed size during enumeration")
                yield entry.key, entry.value

    # name used by the classic symbol table interface
    enumerate = items

    def __iter__(self) -> Iterator[str]:
        for key, _ in self.items():
            yield key

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: str) -> bool:
        return self.lookup(key) is not None

    def clear(self) -> None:
        """Drop every entry; the table keeps its current bucket count."""
        for chain in self._buckets:
            chain.clear()
        self._size = 0
        self._generation += 1

    def stats(self) -> TableStats:
        return TableStats(
            entries=self._size,
            buckets=len(self._buckets),
            used_buckets=sum(1 for chain in self._buckets if chain),
            longest_chain=max(len(chain) for chain in self._buckets),
        )
