"""Hash tables with open addressing and with sorted separate chaining."""

from bisect import bisect_left, insort_left
from enum import Enum

_DOUBLE_HASH_PRIME = 7


class Probing(Enum):
    """Collision resolution strategy for open addressing."""

    LINEAR = "linear"
    QUADRATIC = "quadratic"
    DOUBLE = "double"


class OpenAddressTable:
    """Fixed-size hash table of integer keys using open addressing."""

    def __init__(self, size=10, probing=Probing.LINEAR):
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self.probing = Probing(probing)
        self._slots = [None] * size

    def _probe_sequence(self, key):
        home = key % self.size
        step = _DOUBLE_HASH_PRIME - key % _DOUBLE_HASH_PRIME
        for attempt in range(self.size):
            if self.probing is Probing.LINEAR:
                offset = attempt
            elif self.probing is Probing.QUADRATIC:
                offset = attempt * attempt
            else:
                offset = attempt * step
            yield (home + offset) % self.size

    def insert(self, key):
        """Store ``key`` and return the slot it landed in."""
        for index in self._probe_sequence(key):
            if self._slots[index] is None:
                self._slots[index] = key
                return index
        raise ValueError(f"no free slot reachable for key {key}")

    def __contains__(self, key):
        for index in self._probe_sequence(key):
            slot = self._slots[index]
            if slot is None:
                return False
            if slot == key:
                return True
        return False

    def __iter__(self):
        """Iterate over the slots in order, ``None`` for an empty slot."""
        return iter(self._slots)


class ChainedHashTable:
    """Hash table whose buckets are kept as sorted lists."""

    def __init__(self, size=10):
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self._buckets = [[] for _ in range(size)]

    def insert(self, key):
        """Insert ``key`` into its bucket, keeping the bucket sorted."""
        insort_left(self._buckets[key % self.size], key)

    def bucket(self, index):
        """Return a copy of the bucket at ``index``."""
        return list(self._buckets[index])

    def __contains__(self, key):
        chain = self._buckets[key % self.size]
        position = bisect_left(chain, key)
        return position < len(chain) and chain[position] == key